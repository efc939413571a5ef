"""Mensagens de webhook já emitidas pela Onbo."""

from __future__ import annotations

from onbo.http import OnboResult
from onbo.utils import make_query_params

from ._base import Resource, page_info, page_items

_MESSAGES_PATH = "webhooks/endpoints/messages"


class WebhookMessageApi(Resource):
    async def list(
        self,
        start_date: str | None = None,
        end_date: str | None = None,
        event: str | None = None,
        offset: int | None = None,
        limit: int | None = None,
    ) -> OnboResult:
        """Sucesso: {"messages": [...], "pagination": {...}}"""
        query = make_query_params(
            {
                "startDate": start_date,
                "endDate": end_date,
                "event": event,
                "offset": offset,
                "limit": limit,
            }
        )
        payload, failure = await self._fetch("GET", _MESSAGES_PATH, query=query)
        if failure:
            return failure
        return OnboResult(
            success=True,
            data={"messages": page_items(payload), "pagination": page_info(payload)},
        )

    async def by_id(self, message_id: str) -> OnboResult:
        payload, failure = await self._fetch("GET", f"{_MESSAGES_PATH}/{message_id}")
        if failure:
            return failure
        return OnboResult(success=True, data={"message": payload})

    async def recover_failed_message(self, message_id: str) -> OnboResult:
        _, failure = await self._fetch("POST", f"{_MESSAGES_PATH}/{message_id}/resend")
        return failure or OnboResult(success=True)
