"""Versão do cliente, enviada no header X-Onbo-Client-Ver."""

__version__ = "1.0.0"
