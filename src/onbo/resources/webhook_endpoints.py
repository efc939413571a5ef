"""Endpoints de webhook cadastrados na Onbo.

A listagem não é paginada: a Onbo devolve um array cru.
"""

from __future__ import annotations

from typing import Any

from onbo.http import JsonBody, OnboResult

from ._base import Resource

_ENDPOINTS_PATH = "webhooks/endpoints"


class WebhookEndpointApi(Resource):
    async def list(self) -> OnboResult:
        """Sucesso: {"endpoints": [...]}"""
        payload, failure = await self._fetch("GET", _ENDPOINTS_PATH)
        if failure:
            return failure
        endpoints = payload if isinstance(payload, list) else []
        return OnboResult(success=True, data={"endpoints": endpoints})

    async def by_id(self, endpoint_id: str) -> OnboResult:
        payload, failure = await self._fetch("GET", f"{_ENDPOINTS_PATH}/{endpoint_id}")
        if failure:
            return failure
        return OnboResult(success=True, data={"endpoint": payload})

    async def by_url(self, endpoint_url: str) -> OnboResult:
        """Procura o endpoint pela URL exata, em cima de list().

        Sem correspondência: success=False, sem error.
        """
        listed = await self.list()
        if not listed.success:
            return listed
        endpoint = next(
            (
                ep
                for ep in listed.get("endpoints", [])
                if isinstance(ep, dict) and ep.get("url") == endpoint_url
            ),
            None,
        )
        if endpoint is None:
            return OnboResult(success=False)
        return OnboResult(success=True, data={"endpoint": endpoint})

    async def create(self, data: dict[str, Any]) -> OnboResult:
        """Cadastra endpoint (url, description, events)."""
        payload, failure = await self._fetch("POST", _ENDPOINTS_PATH, body=JsonBody(data))
        if failure:
            return failure
        return OnboResult(success=True, data={"endpoint": payload})

    async def update(self, endpoint_id: str, data: dict[str, Any]) -> OnboResult:
        payload, failure = await self._fetch(
            "PUT", f"{_ENDPOINTS_PATH}/{endpoint_id}", body=JsonBody(data)
        )
        if failure:
            return failure
        return OnboResult(success=True, data={"endpoint": payload})

    async def delete(self, endpoint_id: str) -> OnboResult:
        _, failure = await self._fetch("DELETE", f"{_ENDPOINTS_PATH}/{endpoint_id}")
        return failure or OnboResult(success=True)

    async def recover_failed_messages(
        self,
        endpoint_id: str,
        start_date: str | None = None,
    ) -> OnboResult:
        """Pede reenvio das mensagens que falharam para o endpoint."""
        body = JsonBody({"startDate": start_date} if start_date else {})
        _, failure = await self._fetch(
            "POST", f"{_ENDPOINTS_PATH}/{endpoint_id}/resend", body=body
        )
        return failure or OnboResult(success=True)
