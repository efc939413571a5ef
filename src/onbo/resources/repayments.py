"""Pagamentos (repayments) de uma linha de crédito."""

from __future__ import annotations

from typing import Any

from onbo.http import JsonBody, OnboResult
from onbo.utils import make_query_params

from ._base import Resource, as_fields, loc_path, page_info, page_items


class RepaymentApi(Resource):
    async def list(
        self,
        user_id: str,
        loc_id: str,
        offset: int | None = None,
        limit: int | None = None,
    ) -> OnboResult:
        payload, failure = await self._fetch(
            "GET",
            loc_path(user_id, loc_id, "payments"),
            query=make_query_params({"offset": offset, "limit": limit}),
        )
        if failure:
            return failure
        return OnboResult(
            success=True,
            data={"repayments": page_items(payload), "pagination": page_info(payload)},
        )

    async def by_id(self, user_id: str, loc_id: str, payment_id: str) -> OnboResult:
        payload, failure = await self._fetch(
            "GET", loc_path(user_id, loc_id, "payments", payment_id)
        )
        if failure:
            return failure
        return OnboResult(success=True, data={"repayment": payload})

    async def create(self, user_id: str, loc_id: str, data: dict[str, Any]) -> OnboResult:
        """Agenda pagamento (amount, paymentType, paymentDate, ...).

        Vai para .../payments, a mesma coleção de list/by_id. O cliente
        JavaScript da Onbo postava em .../draw (o endpoint de saque); quem
        migra dele deve esperar o POST em .../payments.

        Sucesso traz availableCredit, currentCredit e repaymentUuid direto no
        envelope.
        """
        payload, failure = await self._fetch(
            "POST", loc_path(user_id, loc_id, "payments"), body=JsonBody(data)
        )
        if failure:
            return failure
        return OnboResult(success=True, data=as_fields(payload))
