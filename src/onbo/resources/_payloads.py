"""Conversão de payloads com forma de usuário entre Onbo e modelos tipados."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from onbo.config.logging import log_fallback
from onbo.http import JsonBody
from onbo.models import Business, Consumer, Person, parse_person, parse_user
from onbo.normalizers import prepare_person, prepare_user, restore_person, restore_user

logger = logging.getLogger(__name__)


def to_user(payload: Any) -> Consumer | Business | dict[str, Any]:
    """Payload local -> modelo tipado.

    Se o payload não validar (a Onbo mudou algo), devolve o dict já
    normalizado em vez de perder a resposta.
    """
    local = restore_user(payload)
    try:
        return parse_user(local)
    except ValidationError:
        log_fallback(logger, "user_model", reason="validation_error")
        return local


def to_person(payload: Any) -> Person | dict[str, Any]:
    local = restore_person(payload)
    try:
        return parse_person(local)
    except ValidationError:
        log_fallback(logger, "person_model", reason="validation_error")
        return local


def user_body(data: Any, secret: str, *, person: bool = False) -> JsonBody:
    """Aplica as regras outbound; as chaves viram snake_case no engine.

    Raises:
        OnboClientError: Se a cifra de ssn/EIN falhar
    """
    prepared = prepare_person(data, secret) if person else prepare_user(data, secret)
    return JsonBody(prepared or {})
