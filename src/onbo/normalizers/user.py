"""Normalização de payloads com forma de usuário (Consumer, Business, Person).

Outbound (local -> Onbo):
- address.country: US -> United States
- phone: só dígitos (10 dígitos)
- ssn (pessoa) / EIN (business): cifrados quando têm 9 dígitos
- keyPeople: cada pessoa passa pelas mesmas regras

Inbound (Onbo -> local):
- address.country: United States -> US
- phone: DDD-DDD-DDDD (10 dígitos)
- keyPeople: cada pessoa passa pelas mesmas regras

As regras de campo despacham pela tag userType (ver resolve_user_type) e
rodam sobre uma cópia: o input do chamador nunca é alterado.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from onbo.models import BUSINESS, resolve_user_type

from .casing import keys_to_local, keys_to_wire
from .fields import (
    country_to_local,
    country_to_wire,
    phone_to_local,
    phone_to_wire,
    tax_id_to_wire,
)

_EIN_KEYS = ("EIN", "ein")
_KEY_PEOPLE_KEY = "keyPeople"


def as_local_dict(data: Any) -> Any:
    """Cópia profunda do input na convenção local.

    Modelos pydantic viram dict camelCase só com os campos informados, mais
    a tag userType quando o modelo tem uma; mapeamentos são copiados;
    qualquer outra coisa é copiada como está.
    """
    if isinstance(data, BaseModel):
        local = data.model_dump(by_alias=True, exclude_unset=True)
        tag = getattr(data, "user_type", None)
        if tag is not None:
            local.setdefault("userType", tag)
        return local
    if isinstance(data, Mapping):
        return copy.deepcopy(dict(data))
    return copy.deepcopy(data)


def _address_to_wire(person: dict[str, Any]) -> None:
    address = person.get("address")
    if isinstance(address, dict) and "country" in address:
        address["country"] = country_to_wire(address["country"])


def _address_to_local(person: dict[str, Any]) -> None:
    address = person.get("address")
    if isinstance(address, dict) and "country" in address:
        address["country"] = country_to_local(address["country"])


def _person_to_wire(person: dict[str, Any], secret: str) -> dict[str, Any]:
    _address_to_wire(person)
    if "phone" in person:
        person["phone"] = phone_to_wire(person["phone"])
    if "ssn" in person:
        person["ssn"] = tax_id_to_wire(person["ssn"], secret, field_name="ssn")
    return person


def _business_to_wire(business: dict[str, Any], secret: str) -> dict[str, Any]:
    _person_to_wire(business, secret)
    for key in _EIN_KEYS:
        if key in business:
            business[key] = tax_id_to_wire(business[key], secret, field_name="ein")
    people = business.get(_KEY_PEOPLE_KEY)
    if isinstance(people, list):
        business[_KEY_PEOPLE_KEY] = [
            _person_to_wire(p, secret) if isinstance(p, dict) else p for p in people
        ]
    return business


def _person_to_local(person: dict[str, Any]) -> dict[str, Any]:
    _address_to_local(person)
    if "phone" in person:
        person["phone"] = phone_to_local(person["phone"])
    return person


def _business_to_local(business: dict[str, Any]) -> dict[str, Any]:
    _person_to_local(business)
    people = business.get(_KEY_PEOPLE_KEY)
    if isinstance(people, list):
        business[_KEY_PEOPLE_KEY] = [
            _person_to_local(p) if isinstance(p, dict) else p for p in people
        ]
    return business


def prepare_user(data: Any, secret: str) -> Any:
    """Aplica as regras de campo outbound sobre uma cópia local do usuário.

    Raises:
        PiiCipherError: Se o secret não formar uma chave AES válida
    """
    local = as_local_dict(data)
    if not isinstance(local, dict) or not local:
        return local
    if resolve_user_type(local) == BUSINESS:
        return _business_to_wire(local, secret)
    return _person_to_wire(local, secret)


def prepare_person(data: Any, secret: str) -> Any:
    """Regras outbound para uma key person (sempre forma de pessoa)."""
    local = as_local_dict(data)
    if not isinstance(local, dict) or not local:
        return local
    return _person_to_wire(local, secret)


def restore_user(payload: Any) -> Any:
    """Aplica as regras de campo inbound sobre uma cópia do payload local."""
    local = as_local_dict(payload)
    if not isinstance(local, dict) or not local:
        return local
    if resolve_user_type(local) == BUSINESS:
        return _business_to_local(local)
    return _person_to_local(local)


def restore_person(payload: Any) -> Any:
    """Regras inbound para uma key person."""
    local = as_local_dict(payload)
    if not isinstance(local, dict) or not local:
        return local
    return _person_to_local(local)


def outbound_transform(data: Any, secret: str) -> Any:
    """Usuário local -> payload pronto para a Onbo (campos + chaves)."""
    return keys_to_wire(prepare_user(data, secret))


def inbound_transform(payload: Any) -> Any:
    """Payload da Onbo -> usuário local (chaves + campos).

    Idempotente: reaplicar sobre um payload já local não muda nada.
    """
    return restore_user(keys_to_local(payload))
