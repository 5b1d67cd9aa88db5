import pytest
from unittest.mock import AsyncMock

from passkey_sdk.authenticator import Assertion, CreatedCredential, PlatformCredentials
from passkey_sdk.ceremony import PasskeyOrchestrator
from passkey_sdk.config import Settings
from passkey_sdk.registry import LocalCredentialRegistry
from passkey_sdk.session import SessionState
from passkey_sdk.storage import MemoryStore


@pytest.fixture
def settings():
    return Settings(origin="https://localhost", password_delay=0)


@pytest.fixture
def registry():
    return LocalCredentialRegistry(MemoryStore())


@pytest.fixture
def session():
    return SessionState()


@pytest.fixture
def platform():
    """Platform double that supports WebAuthn and completes every ceremony."""
    mock = AsyncMock(spec=PlatformCredentials)
    mock.is_supported.return_value = True
    mock.create_credential.return_value = CreatedCredential(id="cred123", public_key="pk-b64")
    mock.get_assertion.return_value = Assertion(credential_id="cred123")
    return mock


@pytest.fixture
def orchestrator(platform, registry, session, settings):
    return PasskeyOrchestrator(platform, registry, session, settings)
