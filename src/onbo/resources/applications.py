"""Aplicações de linha de crédito, ativação de oferta e nota promissória."""

from __future__ import annotations

from typing import Any

from onbo.http import JsonBody, OnboResult
from onbo.utils import make_query_params

from ._base import Resource, as_fields, loc_path, page_info, page_items


class ApplicationApi(Resource):
    async def list(
        self,
        user_id: str | None = None,
        offset: int | None = None,
        limit: int | None = None,
    ) -> OnboResult:
        """{"applications": [...], "pagination": {...}}"""
        payload, failure = await self._fetch(
            "GET",
            loc_path(user_id, "applications"),
            query=make_query_params({"offset": offset, "limit": limit}),
        )
        if failure:
            return failure
        return OnboResult(
            success=True,
            data={"applications": page_items(payload), "pagination": page_info(payload)},
        )

    async def by_id(self, user_id: str, application_id: str) -> OnboResult:
        payload, failure = await self._fetch(
            "GET", loc_path(user_id, "applications", application_id)
        )
        if failure:
            return failure
        return OnboResult(success=True, data={"application": payload})

    async def create(self, user_id: str, data: dict[str, Any]) -> OnboResult:
        """Cria a aplicação (amount, decision, offers, reasons).

        Sucesso: {"line_of_credit": {...}}
        """
        payload, failure = await self._fetch(
            "POST", loc_path(user_id, "applications"), body=JsonBody(data)
        )
        if failure:
            return failure
        return OnboResult(success=True, data={"line_of_credit": payload})

    async def activate(self, user_id: str, offer_id: str, data: dict[str, Any]) -> OnboResult:
        """Aceita uma oferta (status, documentUuid, dados bancários).

        Sucesso: campos do payload (ex: status) direto no envelope.
        """
        payload, failure = await self._fetch(
            "PATCH", loc_path(user_id, offer_id), body=JsonBody(data)
        )
        if failure:
            return failure
        return OnboResult(success=True, data=as_fields(payload))

    async def promissory_note(self, user_id: str, offer_id: str) -> OnboResult:
        """Sucesso: {"documentUuid": ..., "documentUrl": ...}"""
        payload, failure = await self._fetch(
            "GET", loc_path(user_id, offer_id, "documents", "promissory_note")
        )
        if failure:
            return failure
        return OnboResult(success=True, data=as_fields(payload))
