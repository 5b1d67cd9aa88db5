"""Error taxonomy for passkey ceremonies.

``PasskeyError`` subclasses never reach the host layer: the orchestrator turns
them into failed ``AuthOutcome`` values. ``PlatformError`` subclasses are raised
by platform credential implementations and mirror the DOMException names a
browser reports.
"""

from __future__ import annotations


class PasskeyError(Exception):
    """Base class for ceremony errors carrying a user-facing message."""


class InvalidInput(PasskeyError):
    pass


class UnsupportedPlatform(PasskeyError):
    pass


class NoCredentialFound(PasskeyError):
    pass


class PlatformCeremonyFailed(PasskeyError):
    pass


class UnexpectedError(PasskeyError):
    pass


class PlatformError(Exception):
    """Error reported by the platform credential subsystem."""

    name = "Error"


class NotAllowedError(PlatformError):
    name = "NotAllowedError"


class SecurityError(PlatformError):
    name = "SecurityError"


class InvalidStateError(PlatformError):
    name = "InvalidStateError"


class AbortError(PlatformError):
    name = "AbortError"


class NotSupportedError(PlatformError):
    name = "NotSupportedError"


_PLATFORM_ERRORS: dict[str, type[PlatformError]] = {
    cls.name: cls
    for cls in (NotAllowedError, SecurityError, InvalidStateError, AbortError, NotSupportedError)
}


def platform_error_from_name(name: str | None, message: str) -> PlatformError:
    """Map a DOMException name reported across the bridge to a PlatformError."""
    error_cls = _PLATFORM_ERRORS.get(name or "", PlatformError)
    return error_cls(message)
