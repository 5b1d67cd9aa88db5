"""Typed credential records and their stored JSON form."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

SCHEMA_VERSION = 1
LEGACY_SCHEMA_VERSION = 0


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp, including the trailing ``Z`` form."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


@dataclass
class CredentialRecord:
    """A registered passkey for one username.

    ``public_key`` is kept for a later verification step; nothing reads it yet.
    """

    username: str
    credential_id: str
    public_key: str
    created_at: datetime = field(default_factory=utcnow)
    schema_version: int = SCHEMA_VERSION

    @property
    def is_legacy(self) -> bool:
        return self.schema_version < SCHEMA_VERSION

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "username": self.username,
            "credentialId": self.credential_id,
            "publicKeyMaterial": self.public_key,
            "createdAt": self.created_at.isoformat(),
            "schemaVersion": self.schema_version,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CredentialRecord:
        """Create from a stored dictionary.

        Records without ``schemaVersion`` come from the browser helper, which
        wrote ``publicKey`` and ``timestamp`` instead.
        """
        if "schemaVersion" not in data:
            return cls(
                username=data["username"],
                credential_id=data["credentialId"],
                public_key=data.get("publicKey", ""),
                created_at=parse_timestamp(data["timestamp"]),
                schema_version=LEGACY_SCHEMA_VERSION,
            )
        return cls(
            username=data["username"],
            credential_id=data["credentialId"],
            public_key=data.get("publicKeyMaterial", ""),
            created_at=parse_timestamp(data["createdAt"]),
            schema_version=int(data["schemaVersion"]),
        )
