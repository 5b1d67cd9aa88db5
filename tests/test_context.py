"""Tests for application context lifecycle."""

import pytest

from passkey_sdk import AuthContext, Settings, SoftwareAuthenticator
from passkey_sdk.authenticator import UnavailablePlatform
from passkey_sdk.ceremony import (
    UNSUPPORTED_MESSAGE,
    CreationOptions,
    RelyingParty,
    RequestOptions,
    UserEntity,
)
from passkey_sdk.errors import NotSupportedError
from passkey_sdk.storage import MemoryStore, SQLAlchemyStore


@pytest.fixture
def settings():
    return Settings(origin="https://localhost", password_delay=0)


class TestAuthContext:
    def test_create_defaults(self, settings):
        context = AuthContext.create(settings)

        assert isinstance(context.store, MemoryStore)
        assert isinstance(context.orchestrator.platform, SoftwareAuthenticator)
        assert context.orchestrator.session is context.session
        assert context.registry.store is context.store

    def test_virtual_authenticator_disabled(self, settings):
        settings.virtual_authenticator = False

        context = AuthContext.create(settings)

        assert isinstance(context.orchestrator.platform, UnavailablePlatform)

    def test_sqlalchemy_store_from_url(self, settings, tmp_path):
        settings.store_url = f"sqlite:///{tmp_path / 'ctx.db'}"

        context = AuthContext.create(settings)
        context.start()
        try:
            assert isinstance(context.store, SQLAlchemyStore)
        finally:
            context.stop()

    @pytest.mark.asyncio
    async def test_full_ceremony_with_virtual_authenticator(self, settings):
        context = AuthContext.create(settings)
        context.start()
        seen = []

        @context.on_session_changed()
        def on_change(username):
            seen.append(username)

        registered = await context.orchestrator.register_passkey("carol")
        authenticated = await context.orchestrator.authenticate_passkey("carol")

        assert registered.succeeded
        assert authenticated.succeeded
        assert context.session.current_user == "carol"
        assert seen == ["carol"]

        context.stop()

        assert seen == ["carol", ""]
        assert not context.session.is_authenticated
        assert not context.started

    @pytest.mark.asyncio
    async def test_unsupported_platform_end_to_end(self, settings):
        settings.virtual_authenticator = False
        context = AuthContext.create(settings)

        outcome = await context.orchestrator.register_passkey("alice")

        assert outcome.error_message == UNSUPPORTED_MESSAGE

    def test_stop_drops_listeners(self, settings):
        context = AuthContext.create(settings)
        context.start()
        seen = []
        context.on_session_changed()(seen.append)

        context.stop()
        context.session.sign_in("late")

        assert seen == []

    def test_start_and_stop_are_idempotent(self, settings):
        context = AuthContext.create(settings)

        context.stop()
        context.start()
        context.start()

        assert context.started
        context.stop()
        context.stop()
        assert not context.started


class TestUnavailablePlatform:
    @pytest.mark.asyncio
    async def test_ceremony_calls_raise_not_supported(self):
        platform = UnavailablePlatform()
        creation = CreationOptions(
            challenge=b"c" * 32,
            rp=RelyingParty(id="localhost", name="Passkey Demo"),
            user=UserEntity(id=b"u" * 16, name="alice", display_name="alice"),
        )

        assert not await platform.is_supported()
        with pytest.raises(NotSupportedError):
            await platform.create_credential(creation)
        with pytest.raises(NotSupportedError):
            await platform.get_assertion(RequestOptions(challenge=b"r" * 32, rp_id="localhost"))
