"""Regras de formatação de campos específicos (país, telefone, ssn/EIN).

Cada regra é pura e devolve o valor original quando não se aplica: valores
fora do formato esperado nunca são truncados, completados ou rejeitados.
"""

from __future__ import annotations

import logging
import re
from typing import Any

from onbo.crypto import encrypt_pii

logger = logging.getLogger(__name__)

_NON_DIGIT_RE = re.compile(r"[^0-9]")

PHONE_DIGITS = 10
TAX_ID_DIGITS = 9

WIRE_COUNTRY_US = "United States"
LOCAL_COUNTRY_US = "US"


def only_digits(value: str) -> str:
    """Mantém apenas os dígitos ASCII."""
    return _NON_DIGIT_RE.sub("", value)


def country_to_wire(value: Any) -> Any:
    """Converte "US" (qualquer caixa) em "United States"; o resto passa intacto."""
    if isinstance(value, str) and value.upper() == LOCAL_COUNTRY_US:
        return WIRE_COUNTRY_US
    return value


def country_to_local(value: Any) -> Any:
    """Converte "UNITED STATES" (qualquer caixa) em "US"; o resto passa intacto.

    Não é bijeção com country_to_wire: só o par US/United States é mapeado.
    """
    if isinstance(value, str) and value.upper() == WIRE_COUNTRY_US.upper():
        return LOCAL_COUNTRY_US
    return value


def phone_to_wire(value: Any) -> Any:
    """Telefone com exatamente 10 dígitos vira só dígitos."""
    if not isinstance(value, str):
        return value
    digits = only_digits(value)
    return digits if len(digits) == PHONE_DIGITS else value


def phone_to_local(value: Any) -> Any:
    """Telefone com exatamente 10 dígitos vira DDD-DDD-DDDD."""
    if not isinstance(value, str):
        return value
    digits = only_digits(value)
    if len(digits) != PHONE_DIGITS:
        return value
    return f"{digits[:3]}-{digits[3:6]}-{digits[6:]}"


def tax_id_to_wire(value: Any, secret: str, *, field_name: str) -> Any:
    """Cifra ssn/EIN com exatamente 9 dígitos; o resto segue sem cifra.

    Raises:
        PiiCipherError: Se o secret não formar uma chave AES válida
    """
    if not isinstance(value, str) or not value:
        return value
    digits = only_digits(value)
    if len(digits) != TAX_ID_DIGITS:
        logger.warning(
            "onbo_pii_not_encrypted",
            extra={"field": field_name, "digit_count": len(digits)},
        )
        return value
    return encrypt_pii(digits, secret)
