"""Abstract platform credential capability."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..errors import NotSupportedError

if TYPE_CHECKING:
    from ..ceremony.options import CreationOptions, RequestOptions


@dataclass
class CreatedCredential:
    """Credential returned by a registration ceremony, text-encoded."""

    id: str
    public_key: str


@dataclass
class Assertion:
    """Assertion returned by an authentication ceremony.

    Fields are text-encoded (base64url). Nothing in the SDK verifies them.
    """

    credential_id: str
    client_data_json: str = ""
    authenticator_data: str = ""
    signature: str = ""
    user_handle: str | None = None


class PlatformCredentials(ABC):
    """Asynchronous interface to the platform credential subsystem.

    Implementations raise ``PlatformError`` subclasses for user cancellation,
    timeouts and security failures.
    """

    @abstractmethod
    async def is_supported(self) -> bool: ...

    @abstractmethod
    async def create_credential(self, options: CreationOptions) -> CreatedCredential | None: ...

    @abstractmethod
    async def get_assertion(self, options: RequestOptions) -> Assertion | None: ...


class UnavailablePlatform(PlatformCredentials):
    """Platform without WebAuthn capability."""

    async def is_supported(self) -> bool:
        return False

    async def create_credential(self, options: CreationOptions) -> CreatedCredential | None:
        raise NotSupportedError("WebAuthn is not supported on this platform")

    async def get_assertion(self, options: RequestOptions) -> Assertion | None:
        raise NotSupportedError("WebAuthn is not supported on this platform")
