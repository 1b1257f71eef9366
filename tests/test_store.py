# SPDX-License-Identifier: MIT

"""Tests for the key/value stores behind the state repository."""

from pathlib import Path

import pytest

from cakecrumb.repository.store import FileStore, MemoryStore

# =============================================================================
# Test: FileStore
# =============================================================================


class TestFileStore:
    def test_missing_key_loads_none(self, tmp_path: Path) -> None:
        assert FileStore(tmp_path).load("coins") is None

    def test_saved_bytes_load_back(self, tmp_path: Path) -> None:
        store = FileStore(tmp_path)

        store.save("coins", b"150")

        assert store.load("coins") == b"150"
        assert (tmp_path / "coins.json").read_bytes() == b"150"

    def test_save_replaces_previous_value(self, tmp_path: Path) -> None:
        store = FileStore(tmp_path)
        store.save("berries", b"50")

        store.save("berries", b"75")

        assert store.load("berries") == b"75"

    def test_save_creates_missing_directory(self, tmp_path: Path) -> None:
        data_path = tmp_path / "nested" / "data"
        store = FileStore(data_path)

        store.save("tasks", b"[]")

        assert (data_path / "tasks.json").is_file()

    def test_no_temporary_files_left_behind(self, tmp_path: Path) -> None:
        store = FileStore(tmp_path)

        store.save("tasks", b"[]")
        store.save("coins", b"100")

        assert sorted(p.name for p in tmp_path.iterdir()) == [
            "coins.json",
            "tasks.json",
        ]

    def test_failed_write_keeps_old_value(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        store = FileStore(tmp_path)
        store.save("coins", b"100")

        def fail(*args: object) -> None:
            raise OSError("disk full")

        monkeypatch.setattr("cakecrumb.repository.store.os.fsync", fail)
        with pytest.raises(OSError):
            store.save("coins", b"999")

        assert store.load("coins") == b"100"
        assert [p.name for p in tmp_path.iterdir()] == ["coins.json"]

    def test_keys_are_independent(self, tmp_path: Path) -> None:
        store = FileStore(tmp_path)

        store.save("coins", b"1")
        store.save("berries", b"2")

        assert store.load("coins") == b"1"
        assert store.load("berries") == b"2"


# =============================================================================
# Test: MemoryStore
# =============================================================================


class TestMemoryStore:
    def test_starts_from_initial_data(self) -> None:
        store = MemoryStore({"coins": b"10"})

        assert store.load("coins") == b"10"
        assert store.load("berries") is None

    def test_initial_data_is_copied(self) -> None:
        initial = {"coins": b"10"}
        store = MemoryStore(initial)

        store.save("coins", b"20")

        assert initial == {"coins": b"10"}
        assert store.data == {"coins": b"20"}
