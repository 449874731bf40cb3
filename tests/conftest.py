"""
Shared test fixtures for acontrol-cli tests.
Patches config module to avoid loading a real .env and making network calls.
"""

import pytest


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch):
    """Ensure every test starts with a clean config state."""
    from acontrol_cli import config

    monkeypatch.setattr(config, "env", {})
    monkeypatch.setattr(config, "REGISTRY_HOST", "registry.test")
    monkeypatch.setattr(config, "REGISTRY_PORT", 8088)
    monkeypatch.setattr(config, "REGISTRY_PROTOCOL", "http")
    monkeypatch.setattr(config, "REGISTRY_API_KEY", "")
    monkeypatch.setattr(config, "HTTP_TIMEOUT_SECONDS", 0)
    monkeypatch.setattr(config, "HTTP_MAX_RESPONSE_BYTES", 5_000_000)
    monkeypatch.setattr(config, "HTTP_LOG_ENABLED", False)
    monkeypatch.setattr(config, "RUNTIME_QUIET", False)
    monkeypatch.setattr(config, "RUNTIME_FORMAT", "table")


class FakeRegistry:
    """Stand-in RegistryClient recording calls."""

    def __init__(self, cards=None, reply=None, error=None):
        self.cards = cards or []
        self.reply = reply
        self.error = error
        self.authorized = []
        self.list_calls = 0
        self.restore_calls = 0

    def list_cards(self):
        self.list_calls += 1
        if self.error:
            raise self.error
        return list(self.cards)

    def authorize_card(self, card):
        if self.error:
            raise self.error
        self.authorized.append(card)

    def restore_card(self):
        self.restore_calls += 1
        if self.error:
            raise self.error
        return self.reply


@pytest.fixture
def fake_registry():
    return FakeRegistry()
