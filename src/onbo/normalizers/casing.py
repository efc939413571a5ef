"""Conversão profunda de chaves entre convenção local e convenção da Onbo.

- local: camelCase (firstName)
- wire: snake_case (first_name)

A conversão é uma árvore genérica (dict, list, escalar). As exceções
irregulares do contrato ficam em post-passes nomeados, separados da regra
geral.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

from pydantic.alias_generators import to_camel

if TYPE_CHECKING:
    from collections.abc import Callable

# Fronteiras de palavra do snake_case da Onbo. Dígitos nunca abrem palavra:
# ssnLast4 -> ssn_last4, w2Income -> w2_income, line1 -> line1.
_LOWER_UPPER_RE = re.compile(r"([a-z0-9])([A-Z])")
_ACRONYM_RE = re.compile(r"([A-Z])([A-Z][a-z])")

# A Onbo espera line_1/line_2/line_3 no endereço, sempre com underscore.
_ADDRESS_LINE_RE = re.compile(r"^line_?([123])$")


def to_wire_key(key: str) -> str:
    """camelCase -> snake_case (ex: firstName -> first_name, EIN -> ein).

    Só quebra antes de maiúscula; letra seguida de dígito continua junta.
    """
    key = _ACRONYM_RE.sub(r"\1_\2", key)
    key = _LOWER_UPPER_RE.sub(r"\1_\2", key)
    return key.replace("-", "_").lower()


def to_local_key(key: str) -> str:
    """snake_case -> camelCase (ex: first_name -> firstName).

    Chaves sem separador só têm a primeira letra minúscula (IsHistory ->
    isHistory); siglas inteiras viram minúsculas (EIN -> ein). Reaplicar a
    conversão não muda nada.
    """
    if "_" in key or "-" in key:
        return to_camel(key.replace("-", "_"))
    if key.isupper():
        return key.lower()
    return key[:1].lower() + key[1:]


def _recase(obj: Any, convert: Callable[[str], str]) -> Any:
    """Reconstrói a árvore com chaves convertidas; nunca altera o input."""
    if isinstance(obj, dict):
        return {
            (convert(key) if isinstance(key, str) else key): _recase(value, convert)
            for key, value in obj.items()
        }
    if isinstance(obj, (list, tuple)):
        return [_recase(item, convert) for item in obj]
    return obj


def pin_address_line_keys(obj: Any) -> Any:
    """Post-pass: fixa line1/line2/line3 como line_1/line_2/line_3.

    Peculiaridade do contrato da Onbo: a regra geral deixa `line1` junto.
    """
    if isinstance(obj, dict):
        pinned: dict[Any, Any] = {}
        for key, value in obj.items():
            match = _ADDRESS_LINE_RE.match(key) if isinstance(key, str) else None
            new_key = f"line_{match.group(1)}" if match else key
            pinned[new_key] = pin_address_line_keys(value)
        return pinned
    if isinstance(obj, list):
        return [pin_address_line_keys(item) for item in obj]
    return obj


def keys_to_wire(obj: Any) -> Any:
    """Transform outbound: chaves locais -> chaves da Onbo (profundo)."""
    return pin_address_line_keys(_recase(obj, to_wire_key))


def keys_to_local(obj: Any) -> Any:
    """Transform inbound: chaves da Onbo -> chaves locais (profundo)."""
    return _recase(obj, to_local_key)
