"""Settings do cliente Onbo.

Credenciais e host carregados de variáveis de ambiente, nunca commitados.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Host público da Onbo (sem protocolo; o engine sempre usa https)
ONBO_HOST: str = "api.stilt.com/v1"


@dataclass(frozen=True)
class OnboSettings:
    """Configurações de acesso à API Onbo.

    Attributes:
        host: Host + prefixo de versão (ex: api.stilt.com/v1)
        client_id: Identificador do cliente (header X_CLIENT_UUID)
        secret: Secret compartilhado (HMAC e chave AES de PII)
        request_timeout_seconds: Timeout HTTP; None = sem timeout
    """

    host: str = ONBO_HOST
    client_id: str = ""
    secret: str = ""
    request_timeout_seconds: float | None = None

    def validate(self) -> list[str]:
        """Valida configurações mínimas.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.host:
            errors.append("ONBO_HOST não pode ser vazio")

        if not self.client_id:
            errors.append("ONBO_CLIENT_ID não configurado")

        if not self.secret:
            errors.append("ONBO_SECRET não configurado")
        elif len(self.secret.replace("-", "").encode("utf-8")) not in (16, 24, 32):
            errors.append("ONBO_SECRET sem hífens deve ter 16, 24 ou 32 bytes")

        if self.request_timeout_seconds is not None and self.request_timeout_seconds <= 0:
            errors.append("ONBO_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _parse_timeout(raw: str) -> float | None:
    """Converte timeout de env; vazio significa sem timeout."""
    value = raw.strip()
    return float(value) if value else None


def _load_from_env() -> OnboSettings:
    """Carrega OnboSettings a partir de variáveis de ambiente."""
    return OnboSettings(
        host=os.getenv("ONBO_HOST", "") or ONBO_HOST,
        client_id=os.getenv("ONBO_CLIENT_ID", ""),
        secret=os.getenv("ONBO_SECRET", ""),
        request_timeout_seconds=_parse_timeout(
            os.getenv("ONBO_REQUEST_TIMEOUT_SECONDS", "")
        ),
    )


@lru_cache(maxsize=1)
def get_onbo_settings() -> OnboSettings:
    """Retorna instância cacheada de OnboSettings."""
    return _load_from_env()
