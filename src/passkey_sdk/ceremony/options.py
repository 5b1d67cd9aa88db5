"""WebAuthn ceremony option structures."""

from __future__ import annotations

import base64
import secrets
from dataclasses import dataclass, field
from typing import Any

ES256 = -7
RS256 = -257

CHALLENGE_SIZE = 32
USER_HANDLE_SIZE = 16
DEFAULT_TIMEOUT_MS = 60000

PUBLIC_KEY_TYPE = "public-key"


def websafe_encode(data: bytes) -> str:
    """Base64url encode without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def websafe_decode(data: str) -> bytes:
    """Base64url decode, restoring padding."""
    return base64.urlsafe_b64decode(data + "=" * (-len(data) % 4))


def new_challenge() -> bytes:
    return secrets.token_bytes(CHALLENGE_SIZE)


def new_user_handle() -> bytes:
    return secrets.token_bytes(USER_HANDLE_SIZE)


@dataclass
class RelyingParty:
    id: str
    name: str

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, "name": self.name}


@dataclass
class UserEntity:
    id: bytes
    name: str
    display_name: str

    def to_dict(self) -> dict[str, str]:
        return {
            "id": websafe_encode(self.id),
            "name": self.name,
            "displayName": self.display_name,
        }


@dataclass
class CredentialParameter:
    alg: int
    type: str = PUBLIC_KEY_TYPE

    def to_dict(self) -> dict[str, Any]:
        return {"alg": self.alg, "type": self.type}


@dataclass
class AuthenticatorSelection:
    """Authenticator policy for registration.

    Requires a platform authenticator holding a discoverable credential with
    user verification.
    """

    authenticator_attachment: str = "platform"
    require_resident_key: bool = True
    resident_key: str = "required"
    user_verification: str = "required"

    def to_dict(self) -> dict[str, Any]:
        return {
            "authenticatorAttachment": self.authenticator_attachment,
            "requireResidentKey": self.require_resident_key,
            "residentKey": self.resident_key,
            "userVerification": self.user_verification,
        }


@dataclass
class CredentialDescriptor:
    """Allow-list entry. ``id`` is the text-encoded id as stored in the registry."""

    id: str
    type: str = PUBLIC_KEY_TYPE
    transports: list[str] = field(default_factory=lambda: ["internal", "hybrid"])

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "type": self.type, "transports": list(self.transports)}


def default_credential_parameters() -> list[CredentialParameter]:
    # ES256 must come first, RS256 is the fallback.
    return [CredentialParameter(ES256), CredentialParameter(RS256)]


@dataclass
class CreationOptions:
    """Options for the platform create-credential call."""

    challenge: bytes
    rp: RelyingParty
    user: UserEntity
    pub_key_cred_params: list[CredentialParameter] = field(
        default_factory=default_credential_parameters
    )
    authenticator_selection: AuthenticatorSelection = field(default_factory=AuthenticatorSelection)
    timeout: int = DEFAULT_TIMEOUT_MS
    attestation: str = "none"

    @property
    def algorithms(self) -> list[int]:
        return [param.alg for param in self.pub_key_cred_params]

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON shape of PublicKeyCredentialCreationOptions."""
        return {
            "challenge": websafe_encode(self.challenge),
            "rp": self.rp.to_dict(),
            "user": self.user.to_dict(),
            "pubKeyCredParams": [p.to_dict() for p in self.pub_key_cred_params],
            "authenticatorSelection": self.authenticator_selection.to_dict(),
            "timeout": self.timeout,
            "attestation": self.attestation,
        }


@dataclass
class RequestOptions:
    """Options for the platform get-assertion call."""

    challenge: bytes
    rp_id: str
    allow_credentials: list[CredentialDescriptor] = field(default_factory=list)
    user_verification: str = "required"
    timeout: int = DEFAULT_TIMEOUT_MS

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON shape of PublicKeyCredentialRequestOptions."""
        return {
            "challenge": websafe_encode(self.challenge),
            "rpId": self.rp_id,
            "allowCredentials": [c.to_dict() for c in self.allow_credentials],
            "userVerification": self.user_verification,
            "timeout": self.timeout,
        }
