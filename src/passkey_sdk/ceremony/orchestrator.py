"""Sequencing of the WebAuthn registration and authentication ceremonies."""

from __future__ import annotations

import asyncio
import logging

from ..authenticator.base import PlatformCredentials
from ..config import Settings
from ..errors import (
    InvalidInput,
    NoCredentialFound,
    PasskeyError,
    PlatformCeremonyFailed,
    PlatformError,
    UnexpectedError,
    UnsupportedPlatform,
)
from ..registry import CredentialRecord, LocalCredentialRegistry
from ..session import SessionState
from ..types import AuthOutcome, PasskeySummary
from .options import (
    CreationOptions,
    CredentialDescriptor,
    RelyingParty,
    RequestOptions,
    UserEntity,
    new_challenge,
    new_user_handle,
)

logger = logging.getLogger(__name__)

UNSUPPORTED_MESSAGE = (
    "Passkeys are not supported in your browser. "
    "Please use a modern browser like Chrome, Safari, or Edge."
)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


class PasskeyOrchestrator:
    """Drives one ceremony at a time and reports the result as an AuthOutcome.

    Errors never escape the public coroutines: every failure, expected or not,
    comes back as ``AuthOutcome(succeeded=False, error_message=...)``.

    Challenges are minted here and never checked afterwards, and the stored
    public key is never used to verify the assertion. Success means the
    platform returned an assertion.
    """

    def __init__(
        self,
        platform: PlatformCredentials,
        registry: LocalCredentialRegistry,
        session: SessionState,
        settings: Settings | None = None,
    ) -> None:
        self.platform = platform
        self.registry = registry
        self.session = session
        self.settings = settings or Settings()

    @property
    def is_authenticated(self) -> bool:
        return self.session.is_authenticated

    @property
    def current_user(self) -> str | None:
        return self.session.current_user

    async def register_passkey(self, username: str, display_name: str | None = None) -> AuthOutcome:
        """Create a platform credential for ``username`` and remember it."""
        try:
            message = await self._register(username, display_name)
        except PasskeyError as e:
            logger.warning(f"Passkey registration failed for {username!r}: {e}")
            return AuthOutcome.failure(str(e))
        logger.info(f"Passkey registered for {username!r}")
        return AuthOutcome.success(message)

    async def authenticate_passkey(self, username: str) -> AuthOutcome:
        """Run an assertion ceremony against the stored credential for ``username``."""
        try:
            message = await self._authenticate(username)
        except PasskeyError as e:
            logger.warning(f"Passkey authentication failed for {username!r}: {e}")
            return AuthOutcome.failure(str(e))
        logger.info(f"Passkey authentication succeeded for {username!r}")
        return AuthOutcome.success(message)

    async def authenticate_with_password(self, username: str, password: str) -> AuthOutcome:
        """Demo password sign-in: any non-blank pair is accepted after a delay."""
        await asyncio.sleep(self.settings.password_delay)

        if _is_blank(username) or _is_blank(password):
            logger.warning("Password sign-in rejected: missing username or password")
            return AuthOutcome.failure("Please enter both username and password.")

        self.session.sign_in(username)
        logger.info(f"Password sign-in accepted for {username!r}")
        return AuthOutcome.success(f"Welcome back, {username}!")

    def logout(self) -> None:
        self.session.sign_out()

    def list_passkeys(self) -> list[PasskeySummary]:
        return self.registry.list()

    def delete_passkey(self, username: str) -> AuthOutcome:
        if _is_blank(username):
            return AuthOutcome.failure("Please enter a username to delete a Passkey.")
        self.registry.delete(username)
        logger.info(f"Passkey deleted for {username!r}")
        return AuthOutcome.success(f"Passkey deleted for {username}")

    async def _register(self, username: str, display_name: str | None) -> str:
        if _is_blank(username):
            raise InvalidInput("Please enter a username first to register a Passkey.")

        try:
            await self._ensure_supported()

            options = CreationOptions(
                challenge=new_challenge(),
                rp=RelyingParty(id=self.settings.rp_id, name=self.settings.rp_name),
                user=UserEntity(
                    id=new_user_handle(),
                    name=username,
                    display_name=display_name or username,
                ),
                timeout=self.settings.timeout_ms,
            )

            try:
                credential = await self.platform.create_credential(options)
            except (PlatformError, asyncio.TimeoutError) as e:
                logger.debug("Platform create-credential call failed", exc_info=True)
                raise PlatformCeremonyFailed(str(e) or "Failed to register passkey") from e
            if credential is None:
                raise PlatformCeremonyFailed("Failed to register passkey")

            self.registry.put(
                CredentialRecord(
                    username=username,
                    credential_id=credential.id,
                    public_key=credential.public_key,
                )
            )
        except PasskeyError:
            raise
        except Exception as e:
            logger.error(f"Unexpected error during passkey registration: {e}", exc_info=True)
            raise UnexpectedError(f"Passkey registration error: {e}") from e

        return f"Passkey registered successfully for {username}!"

    async def _authenticate(self, username: str) -> str:
        if _is_blank(username):
            raise InvalidInput("Please enter a username to authenticate with Passkey.")

        try:
            await self._ensure_supported()

            record = self.registry.get(username)
            if record is None:
                raise NoCredentialFound("No passkey found for this username")

            options = RequestOptions(
                challenge=new_challenge(),
                rp_id=self.settings.rp_id,
                allow_credentials=[CredentialDescriptor(id=record.credential_id)],
                timeout=self.settings.timeout_ms,
            )

            try:
                assertion = await self.platform.get_assertion(options)
            except (PlatformError, asyncio.TimeoutError) as e:
                logger.debug("Platform get-assertion call failed", exc_info=True)
                raise PlatformCeremonyFailed(str(e) or "Failed to authenticate with passkey") from e
            if assertion is None:
                raise PlatformCeremonyFailed("Authentication failed")

            self.session.sign_in(username)
        except PasskeyError:
            raise
        except Exception as e:
            logger.error(f"Unexpected error during passkey authentication: {e}", exc_info=True)
            raise UnexpectedError(f"Passkey authentication error: {e}") from e

        return f"Successfully authenticated as {username}!"

    async def _ensure_supported(self) -> None:
        if not await self.platform.is_supported():
            raise UnsupportedPlatform(UNSUPPORTED_MESSAGE)
