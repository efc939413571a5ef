"""Testes para onbo.normalizers.casing."""

from __future__ import annotations

import copy

from onbo.normalizers import keys_to_local, keys_to_wire, pin_address_line_keys
from onbo.normalizers.casing import to_local_key, to_wire_key


class TestKeyConversion:
    """Conversão chave a chave."""

    def test_to_wire_key(self) -> None:
        assert to_wire_key("firstName") == "first_name"
        assert to_wire_key("dwollaCustomerUrl") == "dwolla_customer_url"
        assert to_wire_key("already_snake") == "already_snake"
        assert to_wire_key("EIN") == "ein"
        assert to_wire_key("HTTPResponse") == "http_response"

    def test_to_wire_key_keeps_digits_attached(self) -> None:
        """Dígito não abre palavra nova."""
        assert to_wire_key("ssnLast4") == "ssn_last4"
        assert to_wire_key("w2Income") == "w2_income"
        assert to_wire_key("address2") == "address2"
        assert to_wire_key("line1") == "line1"

    def test_to_local_key(self) -> None:
        assert to_local_key("first_name") == "firstName"
        assert to_local_key("interest_only_period") == "interestOnlyPeriod"
        assert to_local_key("ssn_last4") == "ssnLast4"
        assert to_local_key("line_1") == "line1"

    def test_to_local_key_without_separator(self) -> None:
        """Sem separador: primeira letra minúscula; siglas inteiras em minúsculas."""
        assert to_local_key("firstName") == "firstName"
        assert to_local_key("IsHistory") == "isHistory"
        assert to_local_key("PaymentDate") == "paymentDate"
        assert to_local_key("EIN") == "ein"
        assert to_local_key("uuid") == "uuid"


class TestKeysToWire:
    """Transform outbound de chaves."""

    def test_deep_conversion(self) -> None:
        data = {
            "firstName": "Chip",
            "keyPeople": [{"lastName": "Smith", "address": {"zip": "50309"}}],
        }
        assert keys_to_wire(data) == {
            "first_name": "Chip",
            "key_people": [{"last_name": "Smith", "address": {"zip": "50309"}}],
        }

    def test_address_lines_pinned(self) -> None:
        """line1/2/3 sempre viram line_1/2/3."""
        wire = keys_to_wire({"address": {"line1": "1 Main", "line2": "Apt 2", "line3": "x"}})
        assert wire == {"address": {"line_1": "1 Main", "line_2": "Apt 2", "line_3": "x"}}

    def test_only_address_lines_get_digit_underscore(self) -> None:
        """O post-pass é a única fonte de `_` antes de dígito."""
        wire = keys_to_wire({"ssnLast4": "1", "w2Income": 2, "address2": "x", "line1": "a"})
        assert wire == {"ssn_last4": "1", "w2_income": 2, "address2": "x", "line_1": "a"}

    def test_pin_post_pass_is_literal(self) -> None:
        """Só line1..line3 exatos são afetados."""
        pinned = pin_address_line_keys({"line1": 1, "line4": 2, "pipeline1": 3})
        assert pinned == {"line_1": 1, "line4": 2, "pipeline1": 3}

    def test_values_are_not_touched(self) -> None:
        """Só chaves mudam; valores string com camelCase ficam intactos."""
        assert keys_to_wire({"note": "firstName line1"}) == {"note": "firstName line1"}

    def test_does_not_mutate_input(self) -> None:
        data = {"firstName": "Chip", "address": {"line1": "1 Main"}}
        snapshot = copy.deepcopy(data)
        keys_to_wire(data)
        assert data == snapshot

    def test_scalars_and_lists(self) -> None:
        assert keys_to_wire(None) is None
        assert keys_to_wire([{"aB": 1}, 2]) == [{"a_b": 1}, 2]


class TestKeysToLocal:
    """Transform inbound de chaves."""

    def test_deep_conversion(self) -> None:
        payload = {"data": [{"first_name": "Jacob", "address": {"line_1": "2 Oak"}}]}
        assert keys_to_local(payload) == {
            "data": [{"firstName": "Jacob", "address": {"line1": "2 Oak"}}]
        }

    def test_idempotent(self) -> None:
        payload = {"first_name": "Jacob", "key_people": [{"last_name": "X"}]}
        once = keys_to_local(payload)
        assert keys_to_local(once) == once
