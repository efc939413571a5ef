"""Recursos da API Onbo expostos pelo client."""

from .applications import ApplicationApi
from .draw_downs import DrawDownApi
from .key_people import KeyPeopleApi
from .loc import LineOfCreditApi
from .repayments import RepaymentApi
from .statements import StatementApi
from .users import UserApi
from .webhook_endpoints import WebhookEndpointApi
from .webhook_messages import WebhookMessageApi
from .webhooks import WebhookApi

__all__ = [
    "ApplicationApi",
    "DrawDownApi",
    "KeyPeopleApi",
    "LineOfCreditApi",
    "RepaymentApi",
    "StatementApi",
    "UserApi",
    "WebhookApi",
    "WebhookEndpointApi",
    "WebhookMessageApi",
]
