"""Helpers de valor usados na montagem de chamadas à Onbo.

Sem estado e sem IO.
"""

from __future__ import annotations

from typing import Any

# Opções aceitas pelos métodos `list` -> nome do query param na Onbo
_QUERY_OPTION_NAMES: dict[str, str] = {
    "limit": "limit",
    "offset": "offset",
    "event": "event",
    "startDate": "start_date",
    "endDate": "end_date",
}


def is_empty(value: Any) -> bool:
    """Retorna True para None e para str/list/tuple/dict vazios.

    Qualquer outro escalar (inclusive 0 e False) não é vazio.
    """
    if value is None:
        return True
    if isinstance(value, (str, list, tuple, dict)):
        return len(value) == 0
    return False


def is_present(value: Any) -> bool:
    """Presença para query params: só None é ausente.

    False, 0 e "" são enviados.
    """
    return value is not None


def atof(value: Any) -> Any:
    """Converte para número, tolerando "$" e separador de milhar.

    Listas são convertidas elemento a elemento; qualquer outra coisa vira 0.
    """
    if isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        cleaned = (value or "0").replace(",", "").replace("$", "").strip()
        try:
            return float(cleaned) if cleaned else 0
        except ValueError:
            return float("nan")
    if isinstance(value, list):
        return [atof(item) for item in value]
    return 0


def remove_empty(obj: Any) -> Any:
    """Remove recursivamente valores vazios (ver is_empty) de dicts.

    Listas são percorridas elemento a elemento; os próprios elementos
    vazios da lista são mantidos.
    """
    if isinstance(obj, list):
        return [remove_empty(item) for item in obj]
    if isinstance(obj, dict):
        return {
            key: remove_empty(value) if isinstance(value, (dict, list)) else value
            for key, value in obj.items()
            if not is_empty(value)
        }
    return obj


def make_query_params(options: dict[str, Any] | None) -> dict[str, Any]:
    """Monta os query params padrão da Onbo a partir das opções de listagem.

    Aceita as chaves locais (limit, offset, event, startDate, endDate) e
    também os nomes Python (start_date, end_date).
    """
    params: dict[str, Any] = {}
    if not options:
        return params
    for local_name, wire_name in _QUERY_OPTION_NAMES.items():
        value = options.get(local_name, options.get(wire_name))
        if not is_empty(value):
            params[wire_name] = value
    return params
