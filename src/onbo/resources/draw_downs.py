"""Saques (draw-downs) de uma linha de crédito."""

from __future__ import annotations

from typing import Any

from onbo.http import JsonBody, OnboResult
from onbo.utils import make_query_params

from ._base import Resource, as_fields, loc_path, page_info, page_items


class DrawDownApi(Resource):
    async def list(
        self,
        user_id: str,
        loc_id: str,
        offset: int | None = None,
        limit: int | None = None,
    ) -> OnboResult:
        """{"draw_downs": [...], "pagination": {...}}"""
        payload, failure = await self._fetch(
            "GET",
            loc_path(user_id, loc_id, "disbursements"),
            query=make_query_params({"offset": offset, "limit": limit}),
        )
        if failure:
            return failure
        return OnboResult(
            success=True,
            data={"draw_downs": page_items(payload), "pagination": page_info(payload)},
        )

    async def create(self, user_id: str, loc_id: str, data: dict[str, Any]) -> OnboResult:
        """Solicita saque (amount, disbursementBankInfo).

        Sucesso: availableCredit/currentCredit direto no envelope.
        """
        payload, failure = await self._fetch(
            "POST", loc_path(user_id, loc_id, "draw"), body=JsonBody(data)
        )
        if failure:
            return failure
        return OnboResult(success=True, data=as_fields(payload))
