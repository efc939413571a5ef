#!/usr/bin/env python3
"""Smoke test manual contra um sandbox da Onbo.

Lê ONBO_HOST, ONBO_CLIENT_ID e ONBO_SECRET do ambiente e faz chamadas
somente de leitura (lista usuários, LOCs e endpoints de webhook).

Uso:
    python scripts/smoke_onbo.py --limit 5
    python scripts/smoke_onbo.py --user-id <uuid> --log-level DEBUG
"""

from __future__ import annotations

import argparse
import asyncio
import logging

from onbo import Onbo
from onbo.config.logging import configure_logging
from onbo.observability import reset_correlation_id, set_correlation_id

logger = logging.getLogger("onbo.smoke")


async def run_smoke(user_id: str | None, limit: int) -> bool:
    """Executa as chamadas e loga o resultado de cada uma (sem payload)."""
    ok = True
    async with Onbo.from_settings() as onbo:
        checks = {
            "users": onbo.user.list(limit=limit),
            "loc": onbo.loc.list(user_id, limit=limit),
            "webhook_endpoints": onbo.webhook.endpoints.list(),
        }
        if user_id:
            checks["user"] = onbo.user.by_id(user_id)

        for name, call in checks.items():
            result = await call
            error = result.error.to_dict() if result.error else None
            logger.info(
                "smoke_check",
                extra={"check": name, "success": result.success, "error": error},
            )
            ok = ok and result.success
    return ok


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--user-id", default=None, help="Usuário para by_id e LOCs.")
    parser.add_argument("--limit", type=int, default=5, help="Tamanho da página.")
    parser.add_argument("--log-level", default="INFO", help="Nível de log.")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    configure_logging(level=args.log_level, service_name="onbo_smoke")
    token = set_correlation_id()
    try:
        ok = asyncio.run(run_smoke(args.user_id, args.limit))
    finally:
        reset_correlation_id(token)
    mode = "ok" if ok else "falhou"
    print(f"[smoke] {mode}")
    raise SystemExit(0 if ok else 1)


if __name__ == "__main__":
    main()
