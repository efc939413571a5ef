"""Resultado bruto do engine e envelope tipado dos recursos.

Contrato de erro uniforme dos recursos: falha quando não houve payload,
quando o status é >= 400 ou quando o payload traz `message` não vazio.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from onbo.utils import is_empty

if TYPE_CHECKING:
    import httpx

ERROR_TYPE_ONBO = "onbo"
ERROR_TYPE_CLIENT = "client"


@dataclass(frozen=True, slots=True)
class OnboError:
    """Erro devolvido pela Onbo (type="onbo") ou gerado localmente (type="client")."""

    type: str
    message: str | None = None
    code: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"type": self.type, "message": self.message}
        if self.code is not None:
            data["code"] = self.code
        return data


@dataclass(frozen=True, slots=True)
class OnboResponse:
    """Saída do engine: response cru (pode faltar) e payload já local."""

    response: httpx.Response | None
    payload: Any = None
    has_payload: bool = False

    @property
    def status_code(self) -> int | None:
        return self.response.status_code if self.response is not None else None


@dataclass(frozen=True, slots=True)
class OnboResult:
    """Envelope devolvido por todos os métodos públicos dos recursos.

    Sucesso: success=True e os campos do recurso em `data`.
    Falha: success=False e `error` (None quando nem houve payload).
    """

    success: bool
    data: dict[str, Any] = field(default_factory=dict)
    error: OnboError | None = None

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def to_dict(self) -> dict[str, Any]:
        """Forma plana: {success, ...data} ou {success, error}."""
        if self.success:
            return {"success": True, **self.data}
        return {
            "success": False,
            "error": self.error.to_dict() if self.error else None,
        }


def payload_message(payload: Any) -> str | None:
    """Extrai `message` do payload quando ele é um objeto."""
    if isinstance(payload, dict):
        message = payload.get("message")
        return message if isinstance(message, str) else None
    return None


def is_failure(resp: OnboResponse) -> bool:
    """Aplica o contrato de erro uniforme."""
    if not resp.has_payload:
        return True
    status = resp.status_code
    if status is not None and status >= 400:
        return True
    return not is_empty(payload_message(resp.payload))


def failure_result(resp: OnboResponse) -> OnboResult:
    """Envelope de falha para um OnboResponse que falhou no contrato."""
    if not resp.has_payload:
        return OnboResult(success=False)
    return OnboResult(
        success=False,
        error=OnboError(type=ERROR_TYPE_ONBO, message=payload_message(resp.payload)),
    )


def make_error(message: str) -> OnboError:
    """OnboError para falhas detectadas no próprio cliente."""
    return OnboError(type=ERROR_TYPE_CLIENT, message=message)


def client_failure(message: str) -> OnboResult:
    return OnboResult(success=False, error=make_error(message))
