from __future__ import annotations

import json
import logging

from ..errors import InvalidInput
from ..storage import KeyValueStore
from ..types import PasskeySummary
from .records import CredentialRecord

logger = logging.getLogger(__name__)

KEY_PREFIX = "passkey_"


def storage_key(username: str) -> str:
    return f"{KEY_PREFIX}{username}"


class LocalCredentialRegistry:
    """Username to credential record mapping on top of a key-value store.

    Single-writer, single-reader: callers share one event loop, so no locking.
    """

    def __init__(self, store: KeyValueStore) -> None:
        self.store = store

    def put(self, record: CredentialRecord) -> None:
        """Insert or overwrite the record for ``record.username``."""
        if not record.credential_id:
            raise InvalidInput("Credential record is missing a credential id.")
        self.store.set_item(storage_key(record.username), json.dumps(record.to_dict()))

    def get(self, username: str) -> CredentialRecord | None:
        raw = self.store.get_item(storage_key(username))
        if raw is None:
            return None
        return CredentialRecord.from_dict(json.loads(raw))

    def list(self) -> list[PasskeySummary]:
        """Summaries of every stored record. Order is not defined."""
        summaries = []
        for key in self.store.keys():
            if not key.startswith(KEY_PREFIX):
                continue
            raw = self.store.get_item(key)
            if raw is None:
                continue
            try:
                record = CredentialRecord.from_dict(json.loads(raw))
            except (ValueError, KeyError, TypeError) as e:
                logger.warning(f"Skipping unreadable credential entry {key!r}: {e}")
                continue
            summaries.append(PasskeySummary(username=record.username, created_at=record.created_at))
        return summaries

    def delete(self, username: str) -> None:
        """Remove the record if present; absent usernames are ignored."""
        self.store.remove_item(storage_key(username))
