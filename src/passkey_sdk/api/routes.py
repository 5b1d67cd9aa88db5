"""HTTP handlers exposing the passkey entry points to a host UI."""

from __future__ import annotations

from typing import Any

from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse

from ..context import AuthContext


def _context(request: Request) -> AuthContext:
    return request.app.state.auth_context


async def _read_body(request: Request) -> dict[str, Any]:
    try:
        body = await request.json()
    except ValueError as err:
        raise HTTPException(status_code=400, detail="invalid json body") from err
    if not isinstance(body, dict):
        raise HTTPException(status_code=400, detail="body must be a json object")
    return body


def _text(body: dict[str, Any], name: str) -> str:
    value = body.get(name, "")
    if value is None:
        return ""
    if not isinstance(value, str):
        raise HTTPException(status_code=400, detail=f"{name} must be a string")
    return value


def _session_payload(context: AuthContext) -> dict[str, Any]:
    return {
        "authenticated": context.session.is_authenticated,
        "current_user": context.session.current_user,
    }


async def register_passkey(request: Request) -> JSONResponse:
    body = await _read_body(request)
    display_name = _text(body, "display_name") or None
    outcome = await _context(request).orchestrator.register_passkey(
        _text(body, "username"), display_name
    )
    return JSONResponse(outcome.to_dict())


async def authenticate_passkey(request: Request) -> JSONResponse:
    body = await _read_body(request)
    outcome = await _context(request).orchestrator.authenticate_passkey(_text(body, "username"))
    return JSONResponse(outcome.to_dict())


async def authenticate_with_password(request: Request) -> JSONResponse:
    body = await _read_body(request)
    outcome = await _context(request).orchestrator.authenticate_with_password(
        _text(body, "username"), _text(body, "password")
    )
    return JSONResponse(outcome.to_dict())


async def logout(request: Request) -> JSONResponse:
    context = _context(request)
    context.orchestrator.logout()
    return JSONResponse(_session_payload(context))


async def session_status(request: Request) -> JSONResponse:
    return JSONResponse(_session_payload(_context(request)))


async def list_passkeys(request: Request) -> JSONResponse:
    summaries = _context(request).orchestrator.list_passkeys()
    return JSONResponse([summary.to_dict() for summary in summaries])


async def delete_passkey(request: Request, username: str) -> JSONResponse:
    outcome = _context(request).orchestrator.delete_passkey(username)
    return JSONResponse(outcome.to_dict())
