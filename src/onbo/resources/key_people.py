"""Pessoas-chave (key people) de um usuário Business.

Envelopes de sucesso:
- list:   {"key_people": [...], "pagination": {...}}
- by_id, create, update: {"key_person": Person}
- delete: {"message": payload}
"""

from __future__ import annotations

import logging
from typing import Any

from onbo.errors import OnboClientError
from onbo.http import OnboResult, client_failure
from onbo.utils import make_query_params

from ._base import Resource, page_info, page_items
from ._payloads import to_person, user_body

logger = logging.getLogger(__name__)


class KeyPeopleApi(Resource):
    async def list(
        self,
        user_id: str,
        offset: int | None = None,
        limit: int | None = None,
    ) -> OnboResult:
        payload, failure = await self._fetch(
            "GET",
            f"users/{user_id}/key_people",
            query=make_query_params({"offset": offset, "limit": limit}),
        )
        if failure:
            return failure
        return OnboResult(
            success=True,
            data={
                "key_people": [to_person(p) for p in page_items(payload)],
                "pagination": page_info(payload),
            },
        )

    async def by_id(self, user_id: str, key_person_id: str) -> OnboResult:
        payload, failure = await self._fetch("GET", f"users/{user_id}/key_people/{key_person_id}")
        if failure:
            return failure
        return OnboResult(success=True, data={"key_person": to_person(payload)})

    async def create(self, user_id: str, data: Any) -> OnboResult:
        return await self._save("POST", f"users/{user_id}/key_people", data)

    async def update(self, user_id: str, key_person_id: str, data: Any) -> OnboResult:
        return await self._save("PUT", f"users/{user_id}/key_people/{key_person_id}", data)

    async def delete(self, user_id: str, key_person_id: str) -> OnboResult:
        payload, failure = await self._fetch(
            "DELETE", f"users/{user_id}/key_people/{key_person_id}"
        )
        if failure:
            return failure
        return OnboResult(success=True, data={"message": payload})

    async def _save(self, method: str, path: str, data: Any) -> OnboResult:
        try:
            body = user_body(data, self._secret, person=True)
        except OnboClientError as exc:
            logger.warning("onbo_key_person_body_error", extra={"error_type": type(exc).__name__})
            return client_failure(str(exc))
        payload, failure = await self._fetch(method, path, body=body)
        if failure:
            return failure
        return OnboResult(success=True, data={"key_person": to_person(payload)})
