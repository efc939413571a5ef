"""Normalização entre a convenção local e a convenção da Onbo.

- casing: troca profunda de chaves (camelCase <-> snake_case)
- fields: regras de país, telefone e ssn/EIN
- user: composição das regras para payloads com forma de usuário
"""

from .casing import keys_to_local, keys_to_wire, pin_address_line_keys
from .fields import (
    country_to_local,
    country_to_wire,
    phone_to_local,
    phone_to_wire,
    tax_id_to_wire,
)
from .user import (
    inbound_transform,
    outbound_transform,
    prepare_person,
    prepare_user,
    restore_person,
    restore_user,
)

__all__ = [
    "country_to_local",
    "country_to_wire",
    "inbound_transform",
    "keys_to_local",
    "keys_to_wire",
    "outbound_transform",
    "phone_to_local",
    "phone_to_wire",
    "pin_address_line_keys",
    "prepare_person",
    "prepare_user",
    "restore_person",
    "restore_user",
    "tax_id_to_wire",
]
