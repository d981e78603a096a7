"""Unit tests for the credentials module."""
import json
import stat

import pytest

from brochat.credentials import (
    CredentialStore,
    FileCredentialStore,
    InMemoryCredentialStore,
    create_credential_store,
)


class TestCredentialStoreInterface:

    def test_store_is_abstract(self):
        """Test that CredentialStore cannot be instantiated directly."""
        with pytest.raises(TypeError):
            CredentialStore()  # type: ignore


class TestInMemoryCredentialStore:

    def test_get_set_remove(self):
        store = InMemoryCredentialStore()
        assert store.get("k") is None

        store.set("k", "v")
        assert store.get("k") == "v"

        store.remove("k")
        assert store.get("k") is None

    def test_remove_missing_key_is_noop(self):
        store = InMemoryCredentialStore({"other": "x"})
        store.remove("k")
        assert store.get("other") == "x"

    def test_initial_values_are_copied(self):
        initial = {"k": "v"}
        store = InMemoryCredentialStore(initial)
        store.set("k", "changed")
        assert initial == {"k": "v"}


class TestFileCredentialStore:

    def test_values_persist_across_instances(self, tmp_path):
        path = tmp_path / "nested" / "credentials.json"
        FileCredentialStore(path).set("gemini_api_key", "secret")

        assert FileCredentialStore(path).get("gemini_api_key") == "secret"
        assert json.loads(path.read_text()) == {"gemini_api_key": "secret"}

    def test_file_is_private(self, tmp_path):
        path = tmp_path / "credentials.json"
        FileCredentialStore(path).set("k", "v")

        assert stat.S_IMODE(path.stat().st_mode) == 0o600

    def test_remove_keeps_other_values(self, tmp_path):
        path = tmp_path / "credentials.json"
        store = FileCredentialStore(path)
        store.set("a", "1")
        store.set("b", "2")

        store.remove("a")

        assert store.get("a") is None
        assert store.get("b") == "2"

    def test_missing_file_reads_as_empty(self, tmp_path):
        store = FileCredentialStore(tmp_path / "absent.json")
        assert store.get("k") is None
        store.remove("k")
        assert not (tmp_path / "absent.json").exists()

    @pytest.mark.parametrize("content", ["not json", "[1, 2]"])
    def test_unreadable_file_reads_as_empty(self, tmp_path, content):
        path = tmp_path / "credentials.json"
        path.write_text(content)

        store = FileCredentialStore(path)
        assert store.get("k") is None

        store.set("k", "v")
        assert store.get("k") == "v"


class TestCredentialFactory:

    def test_create_memory_store(self):
        store = create_credential_store("memory")
        assert isinstance(store, InMemoryCredentialStore)
        assert store.backend_type == "memory"

    def test_create_file_store(self, tmp_path):
        store = create_credential_store("file", path=tmp_path / "c.json")
        assert isinstance(store, FileCredentialStore)
        assert store.backend_type == "file"
        assert store.path == tmp_path / "c.json"

    def test_unknown_backend_raises_error(self):
        with pytest.raises(ValueError, match="Unsupported credential backend"):
            create_credential_store("keyring")
