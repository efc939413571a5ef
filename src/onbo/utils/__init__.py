"""Utilitários de valor (sem estado)."""

from .transforms import atof, is_empty, is_present, make_query_params, remove_empty

__all__ = [
    "atof",
    "is_empty",
    "is_present",
    "make_query_params",
    "remove_empty",
]
