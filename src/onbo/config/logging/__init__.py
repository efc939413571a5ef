"""Configuração de logging estruturado.

Uso:
    from onbo.config.logging import configure_logging, get_logger

    configure_logging(level="INFO")

    logger = get_logger(__name__)
    logger.info("onbo_call", extra={"path": "users"})

Campos obrigatórios em todo log:
- correlation_id
- service
- client_version
- level
- logger
- message
- asctime
"""

from onbo.config.logging.config import (
    CLIENT_LOGGER_NAME,
    configure_logging,
    get_logger,
    log_fallback,
)
from onbo.config.logging.filters import REDACTED, SENSITIVE_LOG_FIELDS, OnboLogContextFilter
from onbo.config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "CLIENT_LOGGER_NAME",
    "FIELD_RENAME_MAP",
    "REDACTED",
    "REQUIRED_LOG_FIELDS",
    "SENSITIVE_LOG_FIELDS",
    "OnboLogContextFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "log_fallback",
]
