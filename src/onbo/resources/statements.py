"""Extrato de uma linha de crédito."""

from __future__ import annotations

from onbo.http import OnboResult

from ._base import Resource, loc_path


class StatementApi(Resource):
    async def get(self, user_id: str, loc_id: str) -> OnboResult:
        """Sucesso: {"statement": payload.data}"""
        payload, failure = await self._fetch("GET", loc_path(user_id, loc_id, "statements"))
        if failure:
            return failure
        statement = payload.get("data") if isinstance(payload, dict) else None
        return OnboResult(success=True, data={"statement": statement})
