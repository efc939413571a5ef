"""Filter de contexto dos logs do cliente Onbo.

Cada record sai com:
- correlation_id: ID da chamada à Onbo (o engine define um por chamada)
- service: nome do serviço que embarca o cliente
- client_version: versão enviada em X-Onbo-Client-Ver

Campos sensíveis passados via `extra` por engano são mascarados.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from onbo.observability import get_correlation_id
from onbo.version import __version__

if TYPE_CHECKING:
    from collections.abc import Callable

REDACTED = "[redacted]"

# Nomes de atributo que nunca podem chegar ao handler com valor real
SENSITIVE_LOG_FIELDS = frozenset(
    {
        "secret",
        "ssn",
        "ein",
        "signature",
        "x_stilt_hmac",
        "body",
        "payload",
    }
)


class OnboLogContextFilter(logging.Filter):
    """Injeta correlation_id, service e client_version; mascara PII.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual;
            padrão é o ContextVar do próprio cliente.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or get_correlation_id

    def filter(self, record: logging.LogRecord) -> bool:
        # correlation_id explícito via `extra` vence o do contexto
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing or self._get_correlation_id()
        record.service = self._service_name
        record.client_version = __version__
        for name in SENSITIVE_LOG_FIELDS.intersection(record.__dict__):
            setattr(record, name, REDACTED)
        return True
