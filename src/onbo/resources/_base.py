"""Base dos recursos: acesso ao engine e contrato de erro uniforme."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from onbo.errors import OnboBodyError
from onbo.http import OnboResult, client_failure, failure_result, is_failure

if TYPE_CHECKING:
    from collections.abc import Mapping

    from onbo.http import OnboHttpClient

logger = logging.getLogger(__name__)


class Resource:
    """Recurso da Onbo: monta path/query/body e interpreta o resultado."""

    def __init__(self, http: OnboHttpClient) -> None:
        self._http = http

    @property
    def _secret(self) -> str:
        return self._http.context.secret

    async def _fetch(
        self,
        method: str,
        path: str,
        *,
        query: Mapping[str, Any] | None = None,
        body: Any = None,
    ) -> tuple[Any, OnboResult | None]:
        """Executa a chamada e devolve (payload, None) ou (None, falha).

        Corpo que não serializa vira falha tipo client, sem IO.
        """
        try:
            resp = await self._http.fire(method, path, query=query, body=body)
        except OnboBodyError as exc:
            logger.warning(
                "onbo_body_encode_error",
                extra={"method": method, "path": path, "error_type": type(exc).__name__},
            )
            return None, client_failure(str(exc))
        if is_failure(resp):
            logger.info(
                "onbo_call_failed",
                extra={"method": method, "path": path, "status_code": resp.status_code},
            )
            return None, failure_result(resp)
        return resp.payload, None


def page_items(payload: Any) -> list[Any]:
    """Itens de uma listagem paginada ({data: [...], pagination})."""
    if isinstance(payload, dict) and isinstance(payload.get("data"), list):
        return payload["data"]
    return []


def page_info(payload: Any) -> dict[str, Any] | None:
    if isinstance(payload, dict):
        return payload.get("pagination")
    return None


def as_fields(payload: Any) -> dict[str, Any]:
    """Campos do payload para espalhar no envelope de sucesso."""
    return dict(payload) if isinstance(payload, dict) else {}


def loc_path(user_id: str | None, *parts: str) -> str:
    """users/{id}/loc/... ou users/loc/... quando não há usuário."""
    base = f"users/{user_id}/loc" if user_id else "users/loc"
    return "/".join((base, *parts))
