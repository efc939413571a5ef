"""Testes para os recursos de usuário e key people."""

from __future__ import annotations

import pytest

from onbo import Business, Consumer, Onbo, Person
from tests.fakes.fake_onbo_api import FakeOnboApi

JACOB_WIRE = {
    "uuid": "u1",
    "user_type": "consumer",
    "first_name": "Jacob",
    "phone": "6802066197",
    "address": {"line_1": "2 Oak", "country": "UNITED STATES"},
}


class TestUserApi:
    """CRUD de usuários."""

    @pytest.mark.asyncio
    async def test_list_returns_models_and_pagination(self, onbo: Onbo, fake_api: FakeOnboApi) -> None:
        fake_api.add(
            "GET",
            "users",
            payload={
                "data": [JACOB_WIRE, {"uuid": "b1", "user_type": "business", "EIN": "tok"}],
                "pagination": {"offset": 0, "limit": 2, "total": 9},
            },
        )
        result = await onbo.user.list(offset=0, limit=2)

        assert result.success is True
        consumer, business = result.get("users")
        assert isinstance(consumer, Consumer)
        assert consumer.phone == "680-206-6197"
        assert consumer.address is not None
        assert consumer.address.country == "US"
        assert consumer.address.line1 == "2 Oak"
        assert isinstance(business, Business)
        assert result.get("pagination") == {"offset": 0, "limit": 2, "total": 9}
        assert fake_api.last.url.params.multi_items() == [("limit", "2"), ("offset", "0")]

    @pytest.mark.asyncio
    async def test_by_id(self, onbo: Onbo, fake_api: FakeOnboApi) -> None:
        fake_api.add("GET", "users/u1", payload=JACOB_WIRE)
        result = await onbo.user.by_id("u1")
        user = result.get("user")
        assert isinstance(user, Consumer)
        assert user.first_name == "Jacob"

    @pytest.mark.asyncio
    async def test_create_normalizes_outbound_body(self, onbo: Onbo, fake_api: FakeOnboApi) -> None:
        fake_api.add("POST", "users", payload=JACOB_WIRE)
        result = await onbo.user.create(
            {
                "firstName": "Chip",
                "ssn": "111-22-3333",
                "phone": "515-555-1212",
                "address": {"line1": "1 Main", "country": "US"},
            }
        )

        assert result.success is True
        sent = fake_api.last_json()
        assert sent["first_name"] == "Chip"
        assert sent["phone"] == "5155551212"
        assert sent["address"] == {"line_1": "1 Main", "country": "United States"}
        assert sent["ssn"] != "111-22-3333"
        assert len(sent["ssn"]) > 20

    @pytest.mark.asyncio
    async def test_create_accepts_business_model(self, onbo: Onbo, fake_api: FakeOnboApi) -> None:
        business = Business(first_name="Acme", ein="12-3456789", key_people=[Person(ssn="222334444")])
        await onbo.user.create(business)
        sent = fake_api.last_json()
        assert sent["user_type"] == "business"
        assert sent["ein"] != "12-3456789"
        assert sent["key_people"][0]["ssn"] != "222334444"

    @pytest.mark.asyncio
    async def test_update_uses_put(self, onbo: Onbo, fake_api: FakeOnboApi) -> None:
        fake_api.add("PUT", "users/u1", payload=JACOB_WIRE)
        result = await onbo.user.update("u1", {"email": "jacob@example.com"})
        assert result.success is True
        assert fake_api.last.method == "PUT"
        assert fake_api.last_json() == {"email": "jacob@example.com"}

    @pytest.mark.asyncio
    async def test_delete(self, onbo: Onbo, fake_api: FakeOnboApi) -> None:
        fake_api.add("DELETE", "users/u1", status=204)
        result = await onbo.user.delete("u1")
        assert result.success is True
        assert result.get("message") == {}

    @pytest.mark.asyncio
    async def test_unexpected_shape_falls_back_to_dict(self, onbo: Onbo, fake_api: FakeOnboApi) -> None:
        """Payload que não valida no modelo volta como dict normalizado."""
        fake_api.add("GET", "users/u1", payload={"first_name": "Jacob", "address": "n/a"})
        result = await onbo.user.by_id("u1")
        assert result.success is True
        assert result.get("user") == {"firstName": "Jacob", "address": "n/a"}


class TestKeyPeopleApi:
    """Key people de um Business."""

    @pytest.mark.asyncio
    async def test_list(self, onbo: Onbo, fake_api: FakeOnboApi) -> None:
        fake_api.add(
            "GET",
            "users/b1/key_people",
            payload={"data": [{"first_name": "Ann", "phone": "5155551212"}], "pagination": {}},
        )
        result = await onbo.user.key_people.list("b1")
        person = result.get("key_people")[0]
        assert isinstance(person, Person)
        assert person.phone == "515-555-1212"

    @pytest.mark.asyncio
    async def test_create_encrypts_ssn(self, onbo: Onbo, fake_api: FakeOnboApi) -> None:
        fake_api.add("POST", "users/b1/key_people", payload={"uuid": "k1", "first_name": "Ann"})
        result = await onbo.user.key_people.create(
            "b1", {"firstName": "Ann", "ssn": "222-33-4444", "address": {"country": "US"}}
        )
        assert result.success is True
        assert result.get("key_person").uuid == "k1"
        sent = fake_api.last_json()
        assert sent["ssn"] != "222-33-4444"
        assert sent["address"]["country"] == "United States"

    @pytest.mark.asyncio
    async def test_update_and_delete_paths(self, onbo: Onbo, fake_api: FakeOnboApi) -> None:
        await onbo.user.key_people.update("b1", "k1", {"lastName": "Lee"})
        assert (fake_api.last.method, fake_api.last.url.path) == ("PUT", "/v1/users/b1/key_people/k1")
        await onbo.user.key_people.delete("b1", "k1")
        assert (fake_api.last.method, fake_api.last.url.path) == ("DELETE", "/v1/users/b1/key_people/k1")
