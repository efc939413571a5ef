"""Testes para webhooks: endpoints, mensagens e validação de assinatura."""

from __future__ import annotations

import json
from decimal import Decimal

import httpx
import pytest

from onbo import Onbo
from onbo.crypto import body_digest, sign_request
from tests.fakes.fake_onbo_api import TEST_SECRET, FakeOnboApi

ENDPOINT_URL = "https://hooks.example.com/onbo"
EPOCH = "1700000000000"
BODY = {"event": "payment.completed", "payload": {"uuid": "p1", "amount": 100}}


def _signed_headers(url: str, body: str, epoch: str = EPOCH) -> dict[str, str]:
    signature = sign_request(url, body_digest(body), epoch, TEST_SECRET)
    return {"EPOCH": epoch, "X_STILT_HMAC": signature}


class TestIsValid:
    """Validação de webhooks recebidos."""

    def test_valid_with_decoded_body(self, onbo: Onbo) -> None:
        raw = json.dumps(BODY)
        assert onbo.webhook.is_valid(ENDPOINT_URL, _signed_headers(ENDPOINT_URL, raw), BODY) is True

    def test_valid_with_raw_bytes_and_lowercase_headers(self, onbo: Onbo) -> None:
        raw = json.dumps(BODY, indent=2)
        headers = {k.lower(): v for k, v in _signed_headers(ENDPOINT_URL, raw).items()}
        assert onbo.webhook.is_valid(ENDPOINT_URL, headers, raw.encode()) is True

    def test_accepts_httpx_headers(self, onbo: Onbo) -> None:
        raw = json.dumps(BODY)
        headers = httpx.Headers(_signed_headers(ENDPOINT_URL, raw))
        assert onbo.webhook.is_valid(ENDPOINT_URL, headers, raw) is True

    def test_mutated_body(self, onbo: Onbo) -> None:
        raw = json.dumps(BODY)
        headers = _signed_headers(ENDPOINT_URL, raw)
        mutated = raw.replace('"amount": 100', '"amount": 101')
        assert onbo.webhook.is_valid(ENDPOINT_URL, headers, mutated) is False

    def test_mutated_url(self, onbo: Onbo) -> None:
        raw = json.dumps(BODY)
        headers = _signed_headers(ENDPOINT_URL, raw)
        assert onbo.webhook.is_valid(ENDPOINT_URL + "x", headers, raw) is False

    def test_mutated_epoch(self, onbo: Onbo) -> None:
        raw = json.dumps(BODY)
        headers = _signed_headers(ENDPOINT_URL, raw)
        headers["EPOCH"] = "1700000000001"
        assert onbo.webhook.is_valid(ENDPOINT_URL, headers, raw) is False

    def test_decoded_body_with_integral_float(self, onbo: Onbo) -> None:
        """Corpo assinado em JS com 100 e decodificado como 100.0 continua válido."""
        raw = '{"event":"repayment","payload":{"amount":100,"rate":0.25}}'
        headers = _signed_headers(ENDPOINT_URL, raw)
        decoded = {"event": "repayment", "payload": {"amount": 100.0, "rate": 0.25}}
        assert onbo.webhook.is_valid(ENDPOINT_URL, headers, raw.encode()) is True
        assert onbo.webhook.is_valid(ENDPOINT_URL, headers, decoded) is True

    def test_decoded_body_with_decimals(self, onbo: Onbo) -> None:
        raw = '{"payload":{"amount":100,"fee":2.5}}'
        headers = _signed_headers(ENDPOINT_URL, raw)
        decoded = json.loads(raw, parse_float=Decimal)
        assert onbo.webhook.is_valid(ENDPOINT_URL, headers, decoded) is True

    def test_missing_headers(self, onbo: Onbo) -> None:
        assert onbo.webhook.is_valid(ENDPOINT_URL, {}, BODY) is False

    def test_other_secret_is_invalid(self, fake_api: FakeOnboApi) -> None:
        other = Onbo("client", "fedcba9876543210", http_client=fake_api.client())
        raw = json.dumps(BODY)
        assert other.webhook.is_valid(ENDPOINT_URL, _signed_headers(ENDPOINT_URL, raw), raw) is False


class TestWebhookEndpointApi:
    """CRUD de endpoints."""

    @pytest.mark.asyncio
    async def test_list_is_bare_array(self, onbo: Onbo, fake_api: FakeOnboApi) -> None:
        fake_api.add("GET", "webhooks/endpoints", payload=[{"uuid": "e1", "url": ENDPOINT_URL}])
        result = await onbo.webhook.endpoints.list()
        assert result.get("endpoints") == [{"uuid": "e1", "url": ENDPOINT_URL}]

    @pytest.mark.asyncio
    async def test_by_url_found(self, onbo: Onbo, fake_api: FakeOnboApi) -> None:
        fake_api.add(
            "GET",
            "webhooks/endpoints",
            payload=[{"uuid": "e0", "url": "https://other"}, {"uuid": "e1", "url": ENDPOINT_URL}],
        )
        result = await onbo.webhook.endpoints.by_url(ENDPOINT_URL)
        assert result.success is True
        assert result.get("endpoint") == {"uuid": "e1", "url": ENDPOINT_URL}

    @pytest.mark.asyncio
    async def test_by_url_not_found(self, onbo: Onbo, fake_api: FakeOnboApi) -> None:
        fake_api.add("GET", "webhooks/endpoints", payload=[])
        result = await onbo.webhook.endpoints.by_url(ENDPOINT_URL)
        assert result.success is False
        assert result.error is None

    @pytest.mark.asyncio
    async def test_create_update_delete(self, onbo: Onbo, fake_api: FakeOnboApi) -> None:
        fake_api.add("POST", "webhooks/endpoints", payload={"uuid": "e1"})
        created = await onbo.webhook.endpoints.create({"url": ENDPOINT_URL, "events": ["payment.completed"]})
        assert created.get("endpoint") == {"uuid": "e1"}
        assert fake_api.last_json() == {"url": ENDPOINT_URL, "events": ["payment.completed"]}

        await onbo.webhook.endpoints.update("e1", {"description": "prod"})
        assert (fake_api.last.method, fake_api.last.url.path) == ("PUT", "/v1/webhooks/endpoints/e1")

        deleted = await onbo.webhook.endpoints.delete("e1")
        assert deleted.to_dict() == {"success": True}

    @pytest.mark.asyncio
    async def test_recover_failed_messages(self, onbo: Onbo, fake_api: FakeOnboApi) -> None:
        result = await onbo.webhook.endpoints.recover_failed_messages("e1", start_date="2024-01-01")
        assert result.success is True
        assert fake_api.last.url.path == "/v1/webhooks/endpoints/e1/resend"
        assert fake_api.last_json() == {"start_date": "2024-01-01"}

    @pytest.mark.asyncio
    async def test_recover_without_start_date_sends_no_body(self, onbo: Onbo, fake_api: FakeOnboApi) -> None:
        await onbo.webhook.endpoints.recover_failed_messages("e1")
        assert fake_api.last.content == b""


class TestWebhookMessageApi:
    """Mensagens emitidas."""

    @pytest.mark.asyncio
    async def test_list_with_filters(self, onbo: Onbo, fake_api: FakeOnboApi) -> None:
        fake_api.add(
            "GET",
            "webhooks/endpoints/messages",
            payload={"data": [{"uuid": "m1", "created_at": "2024-01-02"}], "pagination": {"total": 1}},
        )
        result = await onbo.webhook.messages.list(
            start_date="2024-01-01", end_date="2024-02-01", event="payment.completed", limit=5
        )
        assert result.get("messages") == [{"uuid": "m1", "createdAt": "2024-01-02"}]
        assert fake_api.last.url.params.multi_items() == [
            ("limit", "5"),
            ("event", "payment.completed"),
            ("start_date", "2024-01-01"),
            ("end_date", "2024-02-01"),
        ]

    @pytest.mark.asyncio
    async def test_by_id_and_recover(self, onbo: Onbo, fake_api: FakeOnboApi) -> None:
        fake_api.add("GET", "webhooks/endpoints/messages/m1", payload={"uuid": "m1", "status": "failed"})
        single = await onbo.webhook.messages.by_id("m1")
        assert single.get("message") == {"uuid": "m1", "status": "failed"}

        recovered = await onbo.webhook.messages.recover_failed_message("m1")
        assert recovered.success is True
        assert (fake_api.last.method, fake_api.last.url.path) == (
            "POST",
            "/v1/webhooks/endpoints/messages/m1/resend",
        )
