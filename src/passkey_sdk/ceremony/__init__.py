"""WebAuthn ceremony options and orchestration."""

from .options import (
    ES256,
    RS256,
    AuthenticatorSelection,
    CreationOptions,
    CredentialDescriptor,
    CredentialParameter,
    RelyingParty,
    RequestOptions,
    UserEntity,
)
from .orchestrator import UNSUPPORTED_MESSAGE, PasskeyOrchestrator

__all__ = [
    "ES256",
    "RS256",
    "AuthenticatorSelection",
    "CreationOptions",
    "CredentialDescriptor",
    "CredentialParameter",
    "RelyingParty",
    "RequestOptions",
    "UserEntity",
    "UNSUPPORTED_MESSAGE",
    "PasskeyOrchestrator",
]
