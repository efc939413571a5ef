"""Linhas de crédito (LOC) e seus sub-recursos.

Envelopes de sucesso:
- list:  {"lines_of_credit": [...], "pagination": {...}}
- by_id: {"line_of_credit": {...}}
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from onbo.http import OnboResult
from onbo.utils import make_query_params

from ._base import Resource, loc_path, page_info, page_items
from .applications import ApplicationApi
from .draw_downs import DrawDownApi
from .repayments import RepaymentApi
from .statements import StatementApi

if TYPE_CHECKING:
    from onbo.http import OnboHttpClient


class LineOfCreditApi(Resource):
    def __init__(self, http: OnboHttpClient) -> None:
        super().__init__(http)
        self.applications = ApplicationApi(http)
        self.draw_downs = DrawDownApi(http)
        self.repayments = RepaymentApi(http)
        self.statements = StatementApi(http)

    async def list(
        self,
        user_id: str | None = None,
        offset: int | None = None,
        limit: int | None = None,
    ) -> OnboResult:
        """Lista LOCs de um usuário, ou de todos quando user_id é None."""
        payload, failure = await self._fetch(
            "GET",
            loc_path(user_id),
            query=make_query_params({"offset": offset, "limit": limit}),
        )
        if failure:
            return failure
        return OnboResult(
            success=True,
            data={"lines_of_credit": page_items(payload), "pagination": page_info(payload)},
        )

    async def by_id(self, user_id: str, loc_id: str) -> OnboResult:
        payload, failure = await self._fetch("GET", loc_path(user_id, loc_id))
        if failure:
            return failure
        return OnboResult(success=True, data={"line_of_credit": payload})
