"""Modelos de usuário da Onbo (Consumer | Business).

Os modelos usam a convenção local (camelCase) como alias e aceitam campos
extras, porque a Onbo evolui o payload sem aviso. Todos os campos são
opcionais: os mesmos modelos servem para create/update parciais.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, Literal, Union

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    TypeAdapter,
)
from pydantic.alias_generators import to_camel

UserType = Literal["consumer", "business"]

CONSUMER: UserType = "consumer"
BUSINESS: UserType = "business"

# Campos que só existem no usuário Business
_BUSINESS_ONLY_KEYS = ("EIN", "ein", "keyPeople", "key_people", "entity")


class OnboModel(BaseModel):
    """Base dos modelos: alias camelCase, extras preservados."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        coerce_numbers_to_str=True,
    )

    def to_local(self) -> dict[str, Any]:
        """Dict na convenção local, só com os campos informados."""
        return self.model_dump(by_alias=True, exclude_unset=True)


class Address(OnboModel):
    """Endereço postal."""

    line1: str | None = Field(None, validation_alias=AliasChoices("line1", "line_1"))
    line2: str | None = Field(None, validation_alias=AliasChoices("line2", "line_2"))
    line3: str | None = Field(None, validation_alias=AliasChoices("line3", "line_3"))
    zip: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None


class Person(OnboModel):
    """Pessoa física (consumer ou key person de um Business)."""

    uuid: str | None = None
    title: str | None = None
    first_name: str | None = None
    middle_name: str | None = None
    last_name: str | None = None
    dob: str | None = None
    email: str | None = None
    phone: str | None = None
    ssn: str | None = None
    address: Address | None = None
    citizenship: str | None = None


class Consumer(Person):
    """Usuário pessoa física."""

    user_type: Literal["consumer"] = CONSUMER
    website: str | None = None
    dwolla_customer_url: str | None = None
    asset_report_json_gzip: str | None = None
    credit_report_xml_gzip: str | None = None


class Business(OnboModel):
    """Usuário pessoa jurídica, com key people opcionais."""

    uuid: str | None = None
    user_type: Literal["business"] = BUSINESS
    first_name: str | None = None
    email: str | None = None
    phone: str | None = None
    ein: str | None = Field(
        None,
        validation_alias=AliasChoices("EIN", "ein"),
        serialization_alias="EIN",
    )
    start_date: str | None = None
    entity: str | None = None
    website: str | None = None
    address: Address | None = None
    key_people: list[Person] | None = None


def resolve_user_type(data: Any) -> UserType:
    """Resolve a tag do usuário.

    A tag explícita (userType / user_type) sempre vence. Sem tag, a
    presença de campos exclusivos de Business decide; o padrão é consumer.
    """
    if isinstance(data, BaseModel):
        tag = getattr(data, "user_type", None)
        if tag is None:
            return CONSUMER
        data = {"userType": tag}

    if not isinstance(data, Mapping):
        return CONSUMER

    tag = data.get("userType", data.get("user_type"))
    if isinstance(tag, str) and tag.lower() in (CONSUMER, BUSINESS):
        return tag.lower()  # type: ignore[return-value]

    if any(key in data for key in _BUSINESS_ONLY_KEYS):
        return BUSINESS
    return CONSUMER


User = Annotated[
    Union[
        Annotated[Consumer, Tag(CONSUMER)],
        Annotated[Business, Tag(BUSINESS)],
    ],
    Discriminator(resolve_user_type),
]

_USER_ADAPTER: TypeAdapter[Consumer | Business] = TypeAdapter(User)
_PERSON_ADAPTER: TypeAdapter[Person] = TypeAdapter(Person)


def parse_user(payload: Any) -> Consumer | Business:
    """Valida payload local (camelCase) como Consumer ou Business.

    Raises:
        pydantic.ValidationError: Se o payload não casar com o modelo
    """
    return _USER_ADAPTER.validate_python(_with_tag(payload))


def parse_person(payload: Any) -> Person:
    """Valida payload local (camelCase) como Person."""
    return _PERSON_ADAPTER.validate_python(payload)


def _with_tag(payload: Any) -> Any:
    """Normaliza a caixa da tag para o Literal do modelo."""
    if isinstance(payload, Mapping):
        tag = payload.get("userType")
        if isinstance(tag, str) and tag.lower() != tag:
            return {**payload, "userType": tag.lower()}
    return payload
