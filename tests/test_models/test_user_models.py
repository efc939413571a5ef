"""Testes para onbo.models.user (união discriminada Consumer | Business)."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from onbo.models import Business, Consumer, Person, parse_person, parse_user, resolve_user_type


class TestResolveUserType:
    """Resolução da tag userType."""

    @pytest.mark.parametrize(
        ("data", "expected"),
        [
            ({"userType": "business"}, "business"),
            ({"userType": "BUSINESS"}, "business"),
            ({"user_type": "consumer"}, "consumer"),
            ({"userType": "consumer", "EIN": "1"}, "consumer"),
            ({"EIN": "123456789"}, "business"),
            ({"keyPeople": []}, "business"),
            ({"firstName": "Chip"}, "consumer"),
            ({}, "consumer"),
            (None, "consumer"),
        ],
    )
    def test_resolution(self, data, expected) -> None:
        assert resolve_user_type(data) == expected

    def test_models(self) -> None:
        assert resolve_user_type(Business()) == "business"
        assert resolve_user_type(Consumer()) == "consumer"


class TestParseUser:
    """Validação dos payloads locais."""

    def test_parses_consumer(self) -> None:
        user = parse_user({"firstName": "Jacob", "address": {"line1": "1 Main", "country": "US"}})
        assert isinstance(user, Consumer)
        assert user.first_name == "Jacob"
        assert user.address is not None
        assert user.address.line1 == "1 Main"

    def test_parses_business_with_key_people(self) -> None:
        user = parse_user(
            {
                "userType": "Business",
                "EIN": "token",
                "keyPeople": [{"firstName": "Ann", "lastName": "Lee"}],
            }
        )
        assert isinstance(user, Business)
        assert user.ein == "token"
        assert user.key_people is not None
        assert isinstance(user.key_people[0], Person)
        assert user.key_people[0].last_name == "Lee"

    def test_unknown_fields_are_kept(self) -> None:
        """A Onbo adiciona campos sem aviso: extras são preservados."""
        user = parse_user({"firstName": "Jacob", "riskTier": "A"})
        assert user.to_local()["riskTier"] == "A"

    def test_to_local_round_trip(self) -> None:
        payload = {"userType": "business", "EIN": "x", "address": {"line2": "Suite 1"}}
        assert parse_user(payload).to_local() == payload

    def test_numeric_values_coerced_to_str(self) -> None:
        user = parse_user({"phone": 5155551212})
        assert user.phone == "5155551212"

    def test_invalid_nested_shape_raises(self) -> None:
        with pytest.raises(ValidationError):
            parse_user({"address": "not-an-object"})

    def test_parse_person(self) -> None:
        person = parse_person({"firstName": "Ann", "ssn": "token"})
        assert person.first_name == "Ann"
        assert person.ssn == "token"
