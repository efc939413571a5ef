"""Erros de criptografia do cliente Onbo."""

from onbo.errors import OnboClientError


class OnboCryptoError(OnboClientError):
    """Erro em operação criptográfica local."""


class PiiCipherError(OnboCryptoError):
    """Falha ao cifrar campo de PII (ssn/EIN)."""
