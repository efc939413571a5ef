"""Recurso de usuários (Consumer | Business).

Envelopes de sucesso:
- list:   {"users": [...], "pagination": {...}}
- by_id, create, update: {"user": Consumer | Business}
- delete: {"message": payload}
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from onbo.errors import OnboClientError
from onbo.http import OnboResult, client_failure
from onbo.utils import make_query_params

from ._base import Resource, page_info, page_items
from ._payloads import to_user, user_body
from .key_people import KeyPeopleApi

if TYPE_CHECKING:
    from onbo.http import OnboHttpClient

logger = logging.getLogger(__name__)


class UserApi(Resource):
    """CRUD de usuários; `key_people` cuida das pessoas-chave de um Business."""

    def __init__(self, http: OnboHttpClient) -> None:
        super().__init__(http)
        self.key_people = KeyPeopleApi(http)

    async def list(self, offset: int | None = None, limit: int | None = None) -> OnboResult:
        payload, failure = await self._fetch(
            "GET",
            "users",
            query=make_query_params({"offset": offset, "limit": limit}),
        )
        if failure:
            return failure
        return OnboResult(
            success=True,
            data={
                "users": [to_user(u) for u in page_items(payload)],
                "pagination": page_info(payload),
            },
        )

    async def by_id(self, user_id: str) -> OnboResult:
        payload, failure = await self._fetch("GET", f"users/{user_id}")
        if failure:
            return failure
        return OnboResult(success=True, data={"user": to_user(payload)})

    async def create(self, data: Any) -> OnboResult:
        """Cria um usuário (dict local ou Consumer/Business)."""
        return await self._save("POST", "users", data)

    async def update(self, user_id: str, data: Any) -> OnboResult:
        return await self._save("PUT", f"users/{user_id}", data)

    async def delete(self, user_id: str) -> OnboResult:
        payload, failure = await self._fetch("DELETE", f"users/{user_id}")
        if failure:
            return failure
        return OnboResult(success=True, data={"message": payload})

    async def _save(self, method: str, path: str, data: Any) -> OnboResult:
        try:
            body = user_body(data, self._secret)
        except OnboClientError as exc:
            logger.warning("onbo_user_body_error", extra={"error_type": type(exc).__name__})
            return client_failure(str(exc))
        payload, failure = await self._fetch(method, path, body=body)
        if failure:
            return failure
        return OnboResult(success=True, data={"user": to_user(payload)})
