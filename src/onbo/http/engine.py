"""Engine de requests da Onbo: monta, assina, envia e decodifica.

Fluxo de cada chamada:
1. URL = https:// + host/path + query (None descartado; False, 0 e "" vão)
2. Corpo serializado uma vez (JSON com chaves snake_case, ou formulário)
3. Digest MD5 do corpo sem whitespace e HMAC-SHA256 de url + digest + epoch
4. Headers obrigatórios, envio com redirects e decodificação da resposta
   (chaves voltam para camelCase)

Falhas de transporte nunca levantam exceção: viram OnboResponse sem payload.
Não há retry nem timeout próprios; o timeout, se houver, é do httpx.
"""

from __future__ import annotations

import posixpath
import time
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any
from urllib.parse import urlencode

import httpx

from onbo.crypto import (
    HEADER_CLIENT_ID,
    HEADER_CLIENT_VERSION,
    HEADER_CONTENT_MD5,
    HEADER_EPOCH,
    HEADER_SIGNATURE,
    body_digest,
    current_epoch_ms,
    sign_request,
)
from onbo.http.body import FormBody, as_request_body
from onbo.http.onbo_logging import (
    log_decode_error,
    log_request,
    log_response,
    log_transport_error,
)
from onbo.http.results import OnboResponse
from onbo.normalizers import keys_to_local
from onbo.observability import get_correlation_id, reset_correlation_id, set_correlation_id
from onbo.utils import is_present

if TYPE_CHECKING:
    from onbo.context import ClientContext
    from onbo.http.body import RequestBody

PROTOCOL = "https"
ACCEPT_JSON = "application/json"


def _query_value(value: Any) -> str:
    """Serializa um valor de query como o JS faria com toString()."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(_query_value(item) for item in value)
    return str(value)


def _body_kind(body: RequestBody | None) -> str:
    if body is None or body.is_empty():
        return "empty"
    return "form" if isinstance(body, FormBody) else "json"


class OnboHttpClient:
    """Cliente HTTP assinado da Onbo.

    Aceita um httpx.AsyncClient injetado (testes usam MockTransport). Quando
    nenhum é passado, cria o próprio e o fecha em aclose().
    """

    def __init__(
        self,
        context: ClientContext,
        http_client: httpx.AsyncClient | None = None,
        timeout_seconds: float | None = None,
    ) -> None:
        self._context = context
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            timeout=timeout_seconds,
            follow_redirects=True,
        )

    @property
    def context(self) -> ClientContext:
        return self._context

    def build_url(self, path: str, query: Mapping[str, Any] | None = None) -> str:
        """Monta a URL completa; é exatamente esta string que é assinada."""
        base = f"{PROTOCOL}://" + posixpath.join(self._context.host, path.lstrip("/"))
        pairs = [
            (key, _query_value(value))
            for key, value in (query or {}).items()
            if is_present(value)
        ]
        raw = f"{base}?{urlencode(pairs)}" if pairs else base
        return str(httpx.URL(raw))

    def build_headers(
        self,
        full_url: str,
        digest: str,
        epoch: int,
        *,
        content_type: str | None = None,
        extra: Mapping[str, str] | None = None,
    ) -> dict[str, str]:
        """Headers da chamada; os de autenticação sobrescrevem os extras."""
        headers: dict[str, str] = dict(extra or {})
        headers.update(
            {
                HEADER_CLIENT_ID: self._context.client_id,
                HEADER_EPOCH: str(epoch),
                HEADER_SIGNATURE: sign_request(full_url, digest, epoch, self._context.secret),
                HEADER_CONTENT_MD5: digest,
                "Accept": ACCEPT_JSON,
                HEADER_CLIENT_VERSION: self._context.client_version,
            }
        )
        if content_type:
            headers["Content-Type"] = content_type
        return headers

    async def fire(
        self,
        method: str,
        path: str,
        *,
        headers: Mapping[str, str] | None = None,
        query: Mapping[str, Any] | None = None,
        body: Any = None,
    ) -> OnboResponse:
        """Executa uma chamada assinada.

        Args:
            method: Verbo HTTP
            path: Caminho relativo ao host (ex: "users/123/loc")
            headers: Headers extras do chamador
            query: Query params (ordem preservada)
            body: dict/list (JSON), JsonBody, FormBody ou None

        Returns:
            OnboResponse com response cru e payload em camelCase; sem payload
            quando o transporte ou a decodificação falham.

        Raises:
            TypeError: Para um body de tipo não suportado
            OnboBodyError: Para um JsonBody com valor sem representação JSON
        """
        token = None if get_correlation_id() else set_correlation_id()
        try:
            return await self._fire(method.upper(), path, headers, query, body)
        finally:
            if token is not None:
                reset_correlation_id(token)

    async def _fire(
        self,
        method: str,
        path: str,
        headers: Mapping[str, str] | None,
        query: Mapping[str, Any] | None,
        body: Any,
    ) -> OnboResponse:
        request_body = as_request_body(body)
        encoded = request_body.encode() if request_body is not None else None
        content = encoded.content if encoded is not None else None

        full_url = self.build_url(path, query)
        digest = body_digest(content)
        epoch = current_epoch_ms()
        request_headers = self.build_headers(
            full_url,
            digest,
            epoch,
            content_type=encoded.content_type if encoded is not None else None,
            extra=headers,
        )

        log_request(method, path, _body_kind(request_body))
        started = time.perf_counter()
        try:
            response = await self._client.request(
                method,
                full_url,
                headers=request_headers,
                content=content,
                follow_redirects=True,
            )
        except httpx.HTTPError as exc:
            log_transport_error(method, path, exc)
            return OnboResponse(response=None)

        log_response(method, path, response.status_code, (time.perf_counter() - started) * 1000)
        return self._decode(method, path, response)

    def _decode(self, method: str, path: str, response: httpx.Response) -> OnboResponse:
        """Decodifica JSON e troca as chaves para camelCase.

        Corpo vazio (ex: 204) vira payload {}.
        """
        if not response.content.strip():
            return OnboResponse(response=response, payload={}, has_payload=True)
        try:
            payload = response.json()
        except ValueError:
            log_decode_error(method, path, response.status_code)
            return OnboResponse(response=response)
        return OnboResponse(response=response, payload=keys_to_local(payload), has_payload=True)

    async def aclose(self) -> None:
        """Fecha o AsyncClient apenas se ele foi criado aqui."""
        if self._owns_client:
            await self._client.aclose()
