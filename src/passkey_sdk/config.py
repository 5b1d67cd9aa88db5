"""Configuration settings for the passkey SDK."""

from __future__ import annotations

import os
from dataclasses import dataclass
from urllib.parse import urlparse


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.lower() == "true"


@dataclass
class Settings:
    """Settings for ceremonies, storage and the runtime server.

    Defaults work for local development; ``from_env`` reads overrides.
    """

    origin: str = "https://localhost"
    rp_name: str = "Passkey Demo"
    timeout_ms: int = 60000
    password_delay: float = 1.0
    store_url: str = "memory"
    virtual_authenticator: bool = True
    dev_mode: bool = False
    host: str = "0.0.0.0"  # noqa: S104
    port: int = 10000

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from PASSKEY_* and SDK_* environment variables."""
        return cls(
            origin=os.getenv("PASSKEY_ORIGIN", cls.origin),
            rp_name=os.getenv("PASSKEY_RP_NAME", cls.rp_name),
            timeout_ms=int(os.getenv("PASSKEY_TIMEOUT_MS", str(cls.timeout_ms))),
            password_delay=float(os.getenv("PASSKEY_PASSWORD_DELAY", str(cls.password_delay))),
            store_url=os.getenv("PASSKEY_STORE_URL", cls.store_url),
            virtual_authenticator=_env_bool("PASSKEY_VIRTUAL_AUTHENTICATOR", True),
            dev_mode=_env_bool("SDK_DEV_MODE", False),
            host=os.getenv("SDK_HOST", cls.host),
            port=int(os.getenv("SDK_PORT", str(cls.port))),
        )

    @property
    def rp_id(self) -> str:
        """Relying party id: the hostname of the configured origin."""
        hostname = urlparse(self.origin).hostname
        if not hostname:
            raise ValueError(f"Origin has no hostname: {self.origin!r}")
        return hostname
