from __future__ import annotations

import asyncio
import logging

from ..config import Settings
from ..context import AuthContext

logger = logging.getLogger(__name__)


async def _run_async_server(settings: Settings) -> None:
    """Serve the passkey HTTP surface until interrupted."""
    from ..api.server import create_app

    context = AuthContext.create(settings)
    app = create_app(context)

    import uvicorn

    if settings.dev_mode:
        logger.info(f"🔧 DEV MODE: Starting server on {settings.host}:{settings.port}")
        logger.info(f"🔧 DEV MODE: Relying party {settings.rp_id} ({settings.origin})")
        if settings.store_url == "memory":
            logger.info("🔧 DEV MODE: Credentials are kept in memory and lost on exit")

    config = uvicorn.Config(app, host=settings.host, port=settings.port)
    server = uvicorn.Server(config)
    await server.serve()


def run(settings: Settings | None = None) -> None:
    """Main entry point for the passkey server.

    Settings come from PASSKEY_* and SDK_* environment variables unless given.
    """
    settings = settings or Settings.from_env()
    logging.basicConfig(level=logging.DEBUG if settings.dev_mode else logging.INFO)
    asyncio.run(_run_async_server(settings))
