"""Configuração de logging do cliente Onbo.

O cliente em si só usa `logging.getLogger(__name__)` sob o logger "onbo";
quem embarca o cliente (scripts, serviços) decide se chama
`configure_logging`.

Uso:
    from onbo.config.logging import configure_logging

    configure_logging(level="INFO")                    # root, JSON
    configure_logging(level="DEBUG", logger_name="onbo")  # só o cliente
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from onbo.config.logging.filters import OnboLogContextFilter
from onbo.config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "onbo_client"

# Raiz de todos os loggers do pacote (onbo.http.engine, onbo.resources...)
CLIENT_LOGGER_NAME = "onbo"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    logger_name: str | None = None,
) -> logging.Logger:
    """Instala um handler JSON com o contexto da chamada à Onbo.

    Sem `correlation_id_getter`, o ID vem do ContextVar que o engine
    preenche a cada chamada.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Fonte alternativa do correlation_id (ex: o
            request id do framework web que embarca o cliente).
        logger_name: Logger a configurar; None configura o root. Com um
            nome (ex: "onbo"), o logger deixa de propagar para o root.

    Returns:
        O logger configurado.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(OnboLogContextFilter(service_name, correlation_id_getter))

    target = logging.getLogger(logger_name)
    target.setLevel(level_upper)
    target.handlers = [handler]
    if logger_name is not None:
        target.propagate = False
    return target


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_fallback(logger: logging.Logger, component: str, reason: str | None = None) -> None:
    """Registra que um payload da Onbo foi devolvido como dict cru.

    Ex: usuário que não valida no modelo Consumer/Business. Nunca inclui o
    payload, só o componente e a razão.
    """
    extra: dict[str, object] = {"fallback_used": True, "component": component}
    if reason:
        extra["reason"] = reason
    logger.info("onbo_model_fallback", extra=extra)
