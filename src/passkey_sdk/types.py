"""Type definitions shared across the passkey SDK."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass
class AuthOutcome:
    """Result of every ceremony attempt handed back to the host layer."""

    succeeded: bool
    message: str | None = None
    error_message: str | None = None

    @classmethod
    def success(cls, message: str) -> AuthOutcome:
        return cls(succeeded=True, message=message)

    @classmethod
    def failure(cls, error_message: str) -> AuthOutcome:
        return cls(succeeded=False, error_message=error_message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "success": self.succeeded,
            "message": self.message,
            "error_message": self.error_message,
        }


@dataclass
class PasskeySummary:
    username: str
    created_at: datetime

    def to_dict(self) -> dict[str, str]:
        return {"username": self.username, "created_at": self.created_at.isoformat()}
