"""Client-side credential bookkeeping."""

from .local import KEY_PREFIX, LocalCredentialRegistry, storage_key
from .records import SCHEMA_VERSION, CredentialRecord

__all__ = [
    "KEY_PREFIX",
    "SCHEMA_VERSION",
    "CredentialRecord",
    "LocalCredentialRegistry",
    "storage_key",
]
