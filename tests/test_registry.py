"""Tests for the local credential registry and its storage backends."""

import json
from datetime import datetime, timezone

import pytest

from passkey_sdk.errors import InvalidInput
from passkey_sdk.registry import SCHEMA_VERSION, CredentialRecord, LocalCredentialRegistry
from passkey_sdk.storage import MemoryStore, SQLAlchemyStore, open_store


class TestCredentialRecord:
    """Tests for record serialization."""

    def test_to_dict(self):
        created = datetime(2025, 3, 1, 12, 30, tzinfo=timezone.utc)
        record = CredentialRecord("alice", "cred123", "pk-b64", created_at=created)

        assert record.to_dict() == {
            "username": "alice",
            "credentialId": "cred123",
            "publicKeyMaterial": "pk-b64",
            "createdAt": "2025-03-01T12:30:00+00:00",
            "schemaVersion": SCHEMA_VERSION,
        }

    def test_legacy_browser_record(self):
        """Records written by the browser helper carry no schema version."""
        record = CredentialRecord.from_dict(
            {
                "username": "alice",
                "credentialId": "AAEC",
                "publicKey": "MFkw",
                "timestamp": "2024-11-05T08:15:30.123Z",
            }
        )

        assert record.schema_version == 0
        assert record.is_legacy
        assert record.public_key == "MFkw"
        assert record.created_at == datetime(2024, 11, 5, 8, 15, 30, 123000, tzinfo=timezone.utc)

    def test_current_record_is_not_legacy(self):
        record = CredentialRecord.from_dict(CredentialRecord("bob", "id", "pk").to_dict())

        assert not record.is_legacy
        assert record.created_at.tzinfo is not None


class TestLocalCredentialRegistry:
    """Tests for registry operations over the in-memory store."""

    @pytest.fixture
    def store(self):
        return MemoryStore()

    @pytest.fixture
    def registry(self, store):
        return LocalCredentialRegistry(store)

    def test_put_uses_namespaced_key(self, registry, store):
        registry.put(CredentialRecord("alice", "cred123", "pk-b64"))

        assert store.keys() == ["passkey_alice"]
        stored = json.loads(store.get_item("passkey_alice"))
        assert stored["credentialId"] == "cred123"
        assert stored["publicKeyMaterial"] == "pk-b64"

    def test_put_requires_credential_id(self, registry):
        with pytest.raises(InvalidInput):
            registry.put(CredentialRecord("alice", "", "pk"))

    def test_get_missing(self, registry):
        assert registry.get("nobody") is None

    def test_put_overwrites(self, registry):
        registry.put(CredentialRecord("alice", "first", "pk"))
        registry.put(CredentialRecord("alice", "second", "pk"))

        assert registry.get("alice").credential_id == "second"
        assert len(registry.list()) == 1

    def test_list_ignores_other_keys(self, registry, store):
        store.set_item("theme", "dark")
        registry.put(CredentialRecord("alice", "a", "pk"))
        registry.put(CredentialRecord("bob", "b", "pk"))

        assert sorted(s.username for s in registry.list()) == ["alice", "bob"]

    def test_list_skips_unreadable_entries(self, registry, store):
        store.set_item("passkey_broken", "{not json")
        store.set_item("passkey_partial", json.dumps({"username": "partial"}))
        registry.put(CredentialRecord("alice", "a", "pk"))

        assert [s.username for s in registry.list()] == ["alice"]

    def test_list_includes_legacy_records(self, registry, store):
        store.set_item(
            "passkey_carol",
            json.dumps(
                {
                    "username": "carol",
                    "credentialId": "c",
                    "publicKey": "pk",
                    "timestamp": "2024-01-01T00:00:00.000Z",
                }
            ),
        )

        summaries = registry.list()
        assert [s.username for s in summaries] == ["carol"]
        assert summaries[0].created_at.year == 2024

    def test_delete_then_get(self, registry):
        registry.put(CredentialRecord("alice", "a", "pk"))

        registry.delete("alice")

        assert registry.get("alice") is None

    def test_delete_absent_is_noop(self, registry):
        registry.delete("ghost")
        registry.delete("ghost")

        assert registry.list() == []


class TestSQLAlchemyStore:
    """Tests for the persistent store."""

    def test_persists_across_instances(self, tmp_path):
        url = f"sqlite:///{tmp_path / 'passkeys.db'}"
        first = SQLAlchemyStore(url)
        LocalCredentialRegistry(first).put(CredentialRecord("alice", "cred123", "pk-b64"))
        first.close()

        second = SQLAlchemyStore(url)
        try:
            record = LocalCredentialRegistry(second).get("alice")
        finally:
            second.close()

        assert record is not None
        assert record.credential_id == "cred123"

    def test_item_operations(self):
        store = SQLAlchemyStore("sqlite://")
        try:
            store.set_item("passkey_alice", "one")
            store.set_item("passkey_alice", "two")
            store.set_item("passkey_bob", "three")

            assert store.get_item("passkey_alice") == "two"
            assert sorted(store.keys()) == ["passkey_alice", "passkey_bob"]

            store.remove_item("passkey_alice")
            store.remove_item("passkey_alice")

            assert store.get_item("passkey_alice") is None
            assert store.keys() == ["passkey_bob"]
        finally:
            store.close()

    def test_closed_store_raises(self):
        store = SQLAlchemyStore("sqlite://")
        store.close()

        with pytest.raises(RuntimeError):
            store.get_item("anything")

    def test_open_store(self, tmp_path):
        assert isinstance(open_store("memory"), MemoryStore)

        store = open_store(f"sqlite:///{tmp_path / 'kv.db'}")
        try:
            assert isinstance(store, SQLAlchemyStore)
        finally:
            store.close()
