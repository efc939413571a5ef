"""Webhooks da Onbo: endpoints, mensagens e validação de assinatura."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from decimal import Decimal
from typing import TYPE_CHECKING, Any

import httpx

from onbo.crypto import HEADER_EPOCH, HEADER_SIGNATURE, validate_onbo_signature

from .webhook_endpoints import WebhookEndpointApi
from .webhook_messages import WebhookMessageApi

if TYPE_CHECKING:
    from onbo.http import OnboHttpClient

logger = logging.getLogger(__name__)


def _js_numbers(value: Any) -> Any:
    """Números como JSON.stringify os escreve: 100.0 -> 100.

    A Onbo assina o texto gerado em JavaScript, onde não existe float
    inteiro; Decimal (ex: json.loads com parse_float=Decimal) segue a mesma
    regra.
    """
    if isinstance(value, dict):
        return {key: _js_numbers(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_js_numbers(item) for item in value]
    if isinstance(value, Decimal):
        value = float(value)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _serialize_body(body: Any) -> str | bytes:
    """Corpo recebido -> texto usado no digest.

    bytes/str (corpo cru da request) são usados como chegaram e são a forma
    preferida; objetos já decodificados são re-serializados em JSON compacto
    com números no formato do JavaScript.
    """
    if body is None:
        return ""
    if isinstance(body, (bytes, str)):
        return body
    return json.dumps(_js_numbers(body), ensure_ascii=False, separators=(",", ":"))


class WebhookApi:
    """Agrupa `endpoints` e `messages` e valida chamadas recebidas."""

    def __init__(self, http: OnboHttpClient) -> None:
        self._http = http
        self.endpoints = WebhookEndpointApi(http)
        self.messages = WebhookMessageApi(http)

    def is_valid(self, url: str, headers: Mapping[str, str] | httpx.Headers, body: Any) -> bool:
        """Valida a assinatura de um webhook recebido.

        Refaz HMAC-SHA256(url + md5(corpo) + EPOCH) com o secret do cliente
        e compara com X_STILT_HMAC. Não há checagem de frescor do EPOCH.

        Args:
            url: URL do endpoint cadastrado (exatamente como na Onbo)
            headers: Headers recebidos (busca sem diferenciar caixa)
            body: Corpo recebido (bytes, str ou JSON já decodificado)
        """
        received = httpx.Headers(headers)
        epoch = received.get(HEADER_EPOCH)
        signature = received.get(HEADER_SIGNATURE)
        valid = validate_onbo_signature(
            url,
            _serialize_body(body),
            epoch,
            signature,
            self._http.context.secret,
        )
        if not valid:
            logger.warning(
                "onbo_webhook_invalid_signature",
                extra={"has_epoch": epoch is not None, "has_signature": signature is not None},
            )
        return valid
