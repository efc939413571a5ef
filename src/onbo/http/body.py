"""Variantes de corpo de request: JSON estruturado ou formulário.

O digest da assinatura é calculado sobre exatamente os bytes enviados, por
isso cada variante se serializa uma única vez por chamada.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Any, Union
from uuid import UUID

import httpx

from onbo.errors import OnboBodyError
from onbo.normalizers import keys_to_wire
from onbo.utils import is_empty

JSON_CONTENT_TYPE = "application/json"

# URL descartável: httpx só é usado aqui para codificar o formulário
_FORM_ENCODING_URL = "https://onbo.invalid/form"


def _json_default(value: Any) -> Any:
    """Tipos Python comuns em payloads de crédito -> valor JSON.

    Decimal vira número (inteiro quando não há parte fracionária, como
    100.00 -> 100); date/datetime viram ISO 8601; UUID vira string.
    """
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise TypeError(f"Decimal não finito não é serializável: {value}")
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, UUID):
        return str(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


@dataclass(frozen=True, slots=True)
class EncodedBody:
    """Corpo serializado, pronto para digest e envio."""

    content: bytes
    content_type: str | None


@dataclass(frozen=True, slots=True)
class JsonBody:
    """Payload estruturado na convenção local; vira snake_case no envio."""

    data: dict[str, Any] | list[Any]

    def is_empty(self) -> bool:
        return is_empty(self.data)

    def encode(self) -> EncodedBody | None:
        """Serializa compacto, sem escapar unicode, com chaves da Onbo.

        Raises:
            OnboBodyError: Se algum valor não tiver representação JSON
        """
        if self.is_empty():
            return None
        try:
            text = json.dumps(
                keys_to_wire(self.data),
                ensure_ascii=False,
                separators=(",", ":"),
                default=_json_default,
            )
        except (TypeError, ValueError) as exc:
            raise OnboBodyError(str(exc)) from exc
        return EncodedBody(content=text.encode("utf-8"), content_type=JSON_CONTENT_TYPE)


@dataclass(frozen=True, slots=True)
class FormBody:
    """Formulário pré-montado (multipart quando há arquivos).

    Nenhuma conversão de chave é aplicada: os nomes vão como informados.
    `files` segue o formato de httpx (nome -> arquivo ou tupla).
    """

    fields: dict[str, Any] = field(default_factory=dict)
    files: dict[str, Any] = field(default_factory=dict)

    def is_empty(self) -> bool:
        return not self.fields and not self.files

    def encode(self) -> EncodedBody | None:
        """Codifica via httpx; o boundary muda a cada chamada."""
        if self.is_empty():
            return None
        request = httpx.Request(
            "POST",
            _FORM_ENCODING_URL,
            data=self.fields or None,
            files=self.files or None,
        )
        return EncodedBody(
            content=request.read(),
            content_type=request.headers.get("Content-Type"),
        )


RequestBody = Union[JsonBody, FormBody]


def as_request_body(body: Any) -> RequestBody | None:
    """Normaliza o body aceito pelo engine para a variante fechada.

    dict/list soltos são tratados como JsonBody.

    Raises:
        TypeError: Para qualquer outro tipo de body
    """
    if body is None or isinstance(body, (JsonBody, FormBody)):
        return body
    if isinstance(body, (dict, list)):
        return JsonBody(body)
    raise TypeError(f"Unsupported body type: {type(body).__name__}")
