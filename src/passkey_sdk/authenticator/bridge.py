"""Platform credentials reached through an opaque asynchronous invoke channel."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any

from ..errors import PlatformError, platform_error_from_name
from .base import Assertion, CreatedCredential, PlatformCredentials

if TYPE_CHECKING:
    from ..ceremony.options import CreationOptions, RequestOptions

logger = logging.getLogger(__name__)

Invoker = Callable[..., Awaitable[Any]]

IS_SUPPORTED = "passkeyHelper.isSupported"
CREATE = "navigator.credentials.create"
GET = "navigator.credentials.get"


class BridgePlatform(PlatformCredentials):
    """Forward ceremonies to a script host through ``invoke(identifier, *args)``.

    The invoker is whatever channel the host provides between managed code and
    the browser. Options travel as JSON-friendly dicts and results come back as
    dicts. A result of the form ``{"error": {"name": ..., "message": ...}}`` is
    raised as the matching ``PlatformError``.
    """

    def __init__(self, invoke: Invoker) -> None:
        self._invoke = invoke

    async def is_supported(self) -> bool:
        return bool(await self._invoke(IS_SUPPORTED))

    async def create_credential(self, options: CreationOptions) -> CreatedCredential | None:
        result = await self._call(CREATE, {"publicKey": options.to_dict()})
        if result is None:
            return None
        return CreatedCredential(id=result["id"], public_key=result["publicKey"])

    async def get_assertion(self, options: RequestOptions) -> Assertion | None:
        result = await self._call(GET, {"publicKey": options.to_dict()})
        if result is None:
            return None
        return Assertion(
            credential_id=result["id"],
            client_data_json=result.get("clientDataJSON", ""),
            authenticator_data=result.get("authenticatorData", ""),
            signature=result.get("signature", ""),
            user_handle=result.get("userHandle"),
        )

    async def _call(self, identifier: str, payload: dict[str, Any]) -> dict[str, Any] | None:
        result = await self._invoke(identifier, payload)
        if isinstance(result, dict) and "error" in result:
            error = result["error"] or {}
            logger.debug(f"Bridge call {identifier} reported {error}")
            raise platform_error_from_name(error.get("name"), error.get("message") or "")
        if result is not None and not isinstance(result, dict):
            raise PlatformError(f"Unexpected bridge result for {identifier}: {type(result).__name__}")
        return result
