"""Helpers de logging das chamadas à Onbo (sem PII, sem secret)."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_request(method: str, path: str, body_kind: str) -> None:
    logger.debug(
        "onbo_request",
        extra={"method": method, "path": path, "body_kind": body_kind},
    )


def log_response(method: str, path: str, status_code: int, elapsed_ms: float) -> None:
    """Loga resposta; status >= 400 sobe para WARNING."""
    level = logging.WARNING if status_code >= 400 else logging.DEBUG
    logger.log(
        level,
        "onbo_response",
        extra={
            "method": method,
            "path": path,
            "status_code": status_code,
            "elapsed_ms": round(elapsed_ms, 2),
        },
    )


def log_transport_error(method: str, path: str, exc: Exception) -> None:
    """Loga falha de transporte só com a classe da exceção."""
    logger.warning(
        "onbo_transport_error",
        extra={"method": method, "path": path, "error_type": type(exc).__name__},
    )


def log_decode_error(method: str, path: str, status_code: int) -> None:
    logger.warning(
        "onbo_response_decode_error",
        extra={"method": method, "path": path, "status_code": status_code},
    )
