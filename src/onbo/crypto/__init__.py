"""Criptografia do cliente Onbo.

- signature: digest MD5 do corpo e HMAC-SHA256 da chamada (e dos webhooks)
- pii_cipher: AES-CBC dos campos ssn/EIN antes do envio
"""

from .constants import (
    AES_KEY_SIZES_ALLOWED,
    HEADER_CLIENT_ID,
    HEADER_CLIENT_VERSION,
    HEADER_CONTENT_MD5,
    HEADER_EPOCH,
    HEADER_SIGNATURE,
    IV_SIZE,
)
from .errors import OnboCryptoError, PiiCipherError
from .pii_cipher import derive_pii_key, encrypt_pii
from .signature import (
    body_digest,
    canonicalize,
    current_epoch_ms,
    sign_request,
    validate_onbo_signature,
)

__all__ = [
    "AES_KEY_SIZES_ALLOWED",
    "HEADER_CLIENT_ID",
    "HEADER_CLIENT_VERSION",
    "HEADER_CONTENT_MD5",
    "HEADER_EPOCH",
    "HEADER_SIGNATURE",
    "IV_SIZE",
    "OnboCryptoError",
    "PiiCipherError",
    "body_digest",
    "canonicalize",
    "current_epoch_ms",
    "derive_pii_key",
    "encrypt_pii",
    "sign_request",
    "validate_onbo_signature",
]
