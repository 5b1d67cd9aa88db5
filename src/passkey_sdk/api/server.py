from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from ..context import AuthContext
from . import routes
from .health import sdk_health


def create_app(context: AuthContext) -> FastAPI:
    """Build the FastAPI app serving ``context``; its lifespan starts and stops it."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        context.start()
        try:
            yield
        finally:
            context.stop()

    app = FastAPI(title="Passkey SDK", lifespan=lifespan)
    app.state.auth_context = context

    app.add_api_route("/health", sdk_health, methods=["GET"])
    app.add_api_route("/auth/passkey/register", routes.register_passkey, methods=["POST"])
    app.add_api_route("/auth/passkey/authenticate", routes.authenticate_passkey, methods=["POST"])
    app.add_api_route("/auth/password", routes.authenticate_with_password, methods=["POST"])
    app.add_api_route("/auth/logout", routes.logout, methods=["POST"])
    app.add_api_route("/auth/session", routes.session_status, methods=["GET"])
    app.add_api_route("/passkeys", routes.list_passkeys, methods=["GET"])
    app.add_api_route("/passkeys/{username:path}", routes.delete_passkey, methods=["DELETE"])
    return app
