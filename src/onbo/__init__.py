"""Cliente Python da API de crédito da Onbo."""

from onbo.client import Onbo
from onbo.context import ClientContext
from onbo.errors import OnboBodyError, OnboClientError
from onbo.http import FormBody, JsonBody, OnboError, OnboResponse, OnboResult
from onbo.models import Address, Business, Consumer, Person
from onbo.version import __version__

__all__ = [
    "Address",
    "Business",
    "ClientContext",
    "Consumer",
    "FormBody",
    "JsonBody",
    "Onbo",
    "OnboBodyError",
    "OnboClientError",
    "OnboError",
    "OnboResponse",
    "OnboResult",
    "Person",
    "__version__",
]
