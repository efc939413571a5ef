"""Cifra AES-CBC de campos de PII (ssn/EIN) antes do envio à Onbo.

Formato exigido pela Onbo:
- plaintext: dígitos codificados como `encodeURI` do JavaScript
- chave: bytes UTF-8 do secret sem hífens (16/24/32 bytes)
- IV: 16 bytes aleatórios, novo a cada chamada
- saída: base64(IV + ciphertext), padding PKCS7

Não existe caminho de decrypt no cliente; só a Onbo decifra.
"""

from __future__ import annotations

import base64
import os
from urllib.parse import quote

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from .constants import AES_KEY_SIZES_ALLOWED, IV_SIZE
from .errors import PiiCipherError

# Caracteres que `encodeURI` preserva além de letras e dígitos
_ENCODE_URI_SAFE = ";,/?:@&=+$-_.!~*'()#"


def derive_pii_key(secret: str) -> bytes:
    """Monta a chave AES a partir do secret (removendo hífens).

    Raises:
        PiiCipherError: Se a chave resultante não tiver tamanho AES válido
    """
    key = secret.replace("-", "").encode("utf-8")
    if len(key) not in AES_KEY_SIZES_ALLOWED:
        raise PiiCipherError(f"Invalid AES key size: {len(key)}")
    return key


def encrypt_pii(value: str, secret: str) -> str:
    """Cifra um campo sensível e retorna o token base64.

    Args:
        value: Valor em claro (ex: 9 dígitos de ssn)
        secret: Secret compartilhado com a Onbo

    Returns:
        base64(IV + ciphertext)

    Raises:
        PiiCipherError: Se a chave for inválida
    """
    key = derive_pii_key(secret)
    iv = os.urandom(IV_SIZE)

    padder = padding.PKCS7(algorithms.AES.block_size).padder()
    plaintext = quote(value, safe=_ENCODE_URI_SAFE).encode("utf-8")
    padded = padder.update(plaintext) + padder.finalize()

    encryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).encryptor()
    ciphertext = encryptor.update(padded) + encryptor.finalize()

    return base64.b64encode(iv + ciphertext).decode("ascii")
