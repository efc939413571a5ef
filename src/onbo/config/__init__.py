"""Configuração do cliente: settings de ambiente e logging estruturado."""

from onbo.config.settings import ONBO_HOST, OnboSettings, get_onbo_settings

__all__ = [
    "ONBO_HOST",
    "OnboSettings",
    "get_onbo_settings",
]
