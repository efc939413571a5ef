"""Client de alto nível da Onbo.

Uso:
    async with Onbo(client_id, secret) as onbo:
        result = await onbo.user.by_id("...")
        if result.success:
            user = result.get("user")
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from onbo.config.settings import ONBO_HOST, OnboSettings, get_onbo_settings
from onbo.context import ClientContext
from onbo.http import OnboHttpClient, OnboResponse
from onbo.resources import LineOfCreditApi, UserApi, WebhookApi

if TYPE_CHECKING:
    import httpx

logger = logging.getLogger(__name__)


class Onbo:
    """Ponto de entrada: contexto imutável + recursos user, loc e webhook.

    Attributes:
        context: Host, credenciais e versão (compartilhado pelos recursos)
        user: Usuários e key people
        loc: Linhas de crédito, aplicações, saques, pagamentos e extratos
        webhook: Endpoints, mensagens e validação de webhooks recebidos
    """

    def __init__(
        self,
        client_id: str,
        secret: str,
        *,
        host: str | None = None,
        http_client: httpx.AsyncClient | None = None,
        timeout_seconds: float | None = None,
    ) -> None:
        """Inicializa o client.

        Args:
            client_id: Identificador do cliente na Onbo
            secret: Secret compartilhado (HMAC e chave AES de PII)
            host: Host + prefixo de versão; padrão api.stilt.com/v1
            http_client: AsyncClient externo (não é fechado em aclose)
            timeout_seconds: Timeout do AsyncClient interno; None = sem timeout

        Raises:
            ValueError: Se client_id ou secret estiverem vazios
        """
        if not client_id or not client_id.strip():
            raise ValueError(
                "client_id é obrigatório. Verifique se ONBO_CLIENT_ID está configurado."
            )
        if not secret or not secret.strip():
            raise ValueError("secret é obrigatório. Verifique se ONBO_SECRET está configurado.")

        self.context = ClientContext(client_id=client_id, secret=secret, host=host or ONBO_HOST)
        self._http = OnboHttpClient(self.context, http_client, timeout_seconds)

        self.user = UserApi(self._http)
        self.loc = LineOfCreditApi(self._http)
        self.webhook = WebhookApi(self._http)

        logger.debug("onbo_client_created", extra={"host": self.context.host})

    @classmethod
    def from_settings(
        cls,
        settings: OnboSettings | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> Onbo:
        """Cria o client a partir de OnboSettings (padrão: variáveis de ambiente).

        Raises:
            ValueError: Se as settings não passarem em validate()
        """
        settings = settings or get_onbo_settings()
        errors = settings.validate()
        if errors:
            raise ValueError("Configuração Onbo inválida: " + "; ".join(errors))
        return cls(
            settings.client_id,
            settings.secret,
            host=settings.host,
            http_client=http_client,
            timeout_seconds=settings.request_timeout_seconds,
        )

    async def fire(
        self,
        method: str,
        path: str,
        *,
        headers: Mapping[str, str] | None = None,
        query: Mapping[str, Any] | None = None,
        body: Any = None,
    ) -> OnboResponse:
        """Chamada assinada crua, para endpoints sem recurso dedicado."""
        return await self._http.fire(method, path, headers=headers, query=query, body=body)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> Onbo:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
