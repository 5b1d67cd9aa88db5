from __future__ import annotations

from fastapi import Request
from fastapi.responses import JSONResponse


async def sdk_health(request: Request) -> JSONResponse:
    context = request.app.state.auth_context
    return JSONResponse({"status": "ready" if context.started else "starting"})
