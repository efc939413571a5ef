"""Modelos tipados dos recursos da Onbo."""

from .user import (
    BUSINESS,
    CONSUMER,
    Address,
    Business,
    Consumer,
    OnboModel,
    Person,
    User,
    UserType,
    parse_person,
    parse_user,
    resolve_user_type,
)

__all__ = [
    "BUSINESS",
    "CONSUMER",
    "Address",
    "Business",
    "Consumer",
    "OnboModel",
    "Person",
    "User",
    "UserType",
    "parse_person",
    "parse_user",
    "resolve_user_type",
]
