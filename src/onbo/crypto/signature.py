"""Digest de conteúdo e assinatura HMAC-SHA256 das chamadas Onbo.

A string assinada é `url_completa + digest + epoch_ms`, com o digest MD5
calculado sobre o corpo sem nenhum whitespace. A ordem da concatenação e o
algoritmo do digest fazem parte do contrato com a Onbo: o servidor refaz a
mesma conta, e nós refazemos a conta dele ao validar webhooks.
"""

from __future__ import annotations

import hashlib
import hmac
import re
import time

# Mesmo conjunto removido pela Onbo: quebras de linha e qualquer whitespace,
# inclusive dentro de valores string.
_WHITESPACE_RE = re.compile(r"(\r\n|\n|\r|\s+)")


def canonicalize(content: str | bytes) -> str:
    """Remove todo whitespace do conteúdo serializado.

    Bytes (ex: multipart com arquivo binário) são decodificados com
    surrogateescape para que os bytes não-UTF-8 sobrevivam ao round-trip.
    """
    text = content.decode("utf-8", "surrogateescape") if isinstance(content, bytes) else content
    return _WHITESPACE_RE.sub("", text)


def body_digest(content: str | bytes | None) -> str:
    """Retorna o MD5 hex do corpo canônico, ou "" se não sobrar conteúdo.

    Corpo vazio NÃO vira o hash da string vazia: o digest é literalmente "".
    """
    if not content:
        return ""
    stripped = canonicalize(content)
    if not stripped:
        return ""
    return hashlib.md5(stripped.encode("utf-8", "surrogateescape")).hexdigest()


def current_epoch_ms() -> int:
    """Epoch atual em milissegundos (capturado uma vez por request)."""
    return int(time.time() * 1000)


def sign_request(full_url: str, digest: str, epoch: int | str, secret: str) -> str:
    """Calcula HMAC-SHA256 hex de `full_url + digest + epoch`.

    Args:
        full_url: URL final, incluindo query string
        digest: Resultado de body_digest()
        epoch: Epoch em ms (mesmo valor enviado no header EPOCH)
        secret: Secret compartilhado com a Onbo

    Returns:
        Assinatura em hex (header X_STILT_HMAC)
    """
    message = f"{full_url}{digest}{epoch}"
    return hmac.new(
        secret.encode("utf-8"),
        message.encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()


def validate_onbo_signature(
    url: str,
    content: str | bytes | None,
    epoch: int | str | None,
    signature: str | None,
    secret: str,
) -> bool:
    """Refaz a assinatura de um webhook recebido e compara com a enviada.

    Igualdade é o único critério: não há checagem de frescor do epoch.

    Args:
        url: URL do endpoint cadastrado na Onbo
        content: Corpo recebido (serializado)
        epoch: Valor do header EPOCH recebido
        signature: Valor do header X_STILT_HMAC recebido
        secret: Secret compartilhado

    Returns:
        True se assinatura válida
    """
    if not signature or epoch is None or epoch == "":
        return False

    computed = sign_request(url, body_digest(content), epoch, secret)
    return hmac.compare_digest(computed, signature)
