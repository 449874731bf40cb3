"""Tests for typed models and the tolerant decode policy."""

import dataclasses

import pytest

from acontrol_cli._utils import tolerant_field, tolerant_object
from acontrol_cli.exceptions import CliError
from acontrol_cli.models import NfcCard, RegistryReply


class TestTolerantField:
    def test_present_and_typed(self):
        assert tolerant_field({"name": "Alice"}, "name", str, "") == ("Alice", True)

    def test_missing_returns_default(self):
        assert tolerant_field({}, "name", str, "") == ("", False)

    def test_wrong_type_returns_default(self):
        assert tolerant_field({"name": 3}, "name", str, "") == ("", False)

    def test_null_returns_default(self):
        assert tolerant_field({"name": None}, "name", str, "-") == ("-", False)

    def test_non_object_returns_default(self):
        assert tolerant_field(["name"], "name", str, "") == ("", False)
        assert tolerant_field(None, "name", str, "") == ("", False)

    def test_tuple_of_kinds(self):
        assert tolerant_field({"id": 1.5}, "id", (int, float), 0) == (1.5, True)

    def test_bool_is_not_int(self):
        assert tolerant_field({"id": False}, "id", (int, float), 0) == (0, False)

    def test_bool_when_asked_for(self):
        assert tolerant_field({"status": False}, "status", bool, True) == (False, True)

    def test_present_with_default_value(self):
        """An explicit value equal to the default still reports present."""
        assert tolerant_field({"uuid": ""}, "uuid", str, "") == ("", True)


class TestTolerantObject:
    def test_dict_passthrough(self):
        assert tolerant_object({"a": 1}) == {"a": 1}

    def test_non_dict_is_empty(self):
        assert tolerant_object([1]) == {}
        assert tolerant_object(None) == {}


class TestNfcCard:
    def test_from_payload_full(self):
        card = NfcCard.from_payload({"id": 1, "uuid": "u1", "name": "Alice"})
        assert card == NfcCard(id=1, uuid="u1", name="Alice")

    def test_from_payload_partial(self):
        assert NfcCard.from_payload({"id": 2}) == NfcCard(id=2, uuid="", name="")

    def test_to_payload(self):
        assert NfcCard(3, "u3", "C").to_payload() == {"id": 3, "uuid": "u3", "name": "C"}

    def test_is_frozen(self):
        card = NfcCard(1, "u", "n")
        with pytest.raises(dataclasses.FrozenInstanceError):
            card.name = "other"

    def test_replace_returns_new_card(self):
        card = NfcCard(1, "u", "n")
        renamed = dataclasses.replace(card, name="m")
        assert card.name == "n"
        assert renamed == NfcCard(1, "u", "m")

    def test_from_parameters(self):
        card = NfcCard.from_parameters("Alice", uuid="u1", card_id="9")
        assert card == NfcCard(9, "u1", "Alice")

    def test_from_parameters_without_id(self):
        assert NfcCard.from_parameters("Alice").id == 0

    def test_from_parameters_rejects_non_integer_id(self):
        with pytest.raises(CliError) as exc_info:
            NfcCard.from_parameters("Alice", card_id="abc")
        assert "integer" in str(exc_info.value)


class TestRegistryReply:
    def test_from_payload(self):
        assert RegistryReply.from_payload({"ret": True, "msg": "Ok"}) == RegistryReply(True, "Ok")

    def test_from_non_object(self):
        assert RegistryReply.from_payload(None) == RegistryReply(False, "")

    def test_to_dict(self):
        assert RegistryReply(True, "Ok").to_dict() == {"ok": True, "message": "Ok"}
