"""Contexto imutável compartilhado pelo client e por todos os recursos."""

from __future__ import annotations

from dataclasses import dataclass

from onbo.config.settings import ONBO_HOST
from onbo.version import __version__


@dataclass(frozen=True, slots=True)
class ClientContext:
    """Host, credenciais e versão do cliente.

    Criado uma vez pelo Onbo e apenas lido depois: seguro para reuso
    concorrente.
    """

    client_id: str
    secret: str
    host: str = ONBO_HOST
    client_version: str = __version__

    def __repr__(self) -> str:
        return (
            f"ClientContext(client_id={self.client_id!r}, host={self.host!r}, "
            f"client_version={self.client_version!r})"
        )
