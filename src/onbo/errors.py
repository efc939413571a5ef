"""Exceções base do cliente Onbo.

Nenhuma exceção atravessa os métodos públicos dos recursos: elas são
convertidas em OnboResult de falha. Ficam visíveis apenas para quem usa as
peças internas (normalizers, crypto) diretamente.
"""

from __future__ import annotations


class OnboClientError(Exception):
    """Base para falhas locais do cliente (antes de qualquer IO)."""


class OnboBodyError(OnboClientError):
    """Corpo de request que não pode ser serializado em JSON."""
