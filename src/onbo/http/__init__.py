"""Camada HTTP da Onbo: engine assinado, variantes de corpo e envelopes."""

from .body import EncodedBody, FormBody, JsonBody, RequestBody, as_request_body
from .engine import OnboHttpClient
from .results import (
    OnboError,
    OnboResponse,
    OnboResult,
    client_failure,
    failure_result,
    is_failure,
    make_error,
    payload_message,
)

__all__ = [
    "EncodedBody",
    "FormBody",
    "JsonBody",
    "OnboError",
    "OnboHttpClient",
    "OnboResponse",
    "OnboResult",
    "RequestBody",
    "as_request_body",
    "client_failure",
    "failure_result",
    "is_failure",
    "make_error",
    "payload_message",
]
