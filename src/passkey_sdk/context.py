"""Application context owning storage, session state and the orchestrator."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from .authenticator import PlatformCredentials, SoftwareAuthenticator, UnavailablePlatform
from .ceremony import PasskeyOrchestrator
from .config import Settings
from .registry import LocalCredentialRegistry
from .session import SessionListener, SessionState
from .storage import KeyValueStore, open_store

logger = logging.getLogger(__name__)


def default_platform(settings: Settings) -> PlatformCredentials:
    """Virtual authenticator when enabled, otherwise a platform without WebAuthn."""
    if settings.virtual_authenticator:
        return SoftwareAuthenticator(settings.origin)
    return UnavailablePlatform()


@dataclass
class AuthContext:
    settings: Settings
    store: KeyValueStore
    registry: LocalCredentialRegistry
    session: SessionState
    orchestrator: PasskeyOrchestrator
    started: bool = False

    @classmethod
    def create(
        cls,
        settings: Settings | None = None,
        platform: PlatformCredentials | None = None,
        store: KeyValueStore | None = None,
    ) -> AuthContext:
        settings = settings or Settings.from_env()
        store = store if store is not None else open_store(settings.store_url)
        registry = LocalCredentialRegistry(store)
        session = SessionState()
        orchestrator = PasskeyOrchestrator(
            platform=platform or default_platform(settings),
            registry=registry,
            session=session,
            settings=settings,
        )
        return cls(
            settings=settings,
            store=store,
            registry=registry,
            session=session,
            orchestrator=orchestrator,
        )

    def on_session_changed(self) -> Callable[[SessionListener], SessionListener]:
        """Subscribe the decorated function to session changes.

        Usage:
            @context.on_session_changed()
            def refresh(username: str): ...
        """

        def decorator(fn: SessionListener) -> SessionListener:
            self.session.subscribe(fn)
            return fn

        return decorator

    def start(self) -> None:
        if self.started:
            return
        self.started = True
        logger.info(
            f"Passkey context started (rp_id={self.settings.rp_id}, "
            f"platform={type(self.orchestrator.platform).__name__})"
        )

    def stop(self) -> None:
        """Sign out, drop listeners and release storage."""
        if not self.started:
            return
        if self.session.is_authenticated:
            self.session.sign_out()
        self.session.clear_listeners()
        self.store.close()
        self.started = False
        logger.info("Passkey context stopped")
