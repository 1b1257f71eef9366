# SPDX-License-Identifier: MIT

import os
import tempfile
from pathlib import Path
from typing import Optional, Protocol


class Store(Protocol):
    """Durable key/value byte storage."""

    def load(self, key: str) -> Optional[bytes]: ...

    def save(self, key: str, data: bytes) -> None: ...


class FileStore:
    """
    One ``<key>.json`` file per key inside ``data_path``.

    Writes go to a temporary file in the same directory which then replaces
    the target, so every key is either fully old or fully new on disk.
    """

    def __init__(self, data_path: Path) -> None:
        self.data_path = data_path

    def __path_for(self, key: str) -> Path:
        return self.data_path / f"{key}.json"

    def load(self, key: str) -> Optional[bytes]:
        file_path = self.__path_for(key)
        if not file_path.is_file():
            return None
        return file_path.read_bytes()

    def save(self, key: str, data: bytes) -> None:
        self.data_path.mkdir(parents=True, exist_ok=True)
        file_descriptor, temp_name = tempfile.mkstemp(
            dir=self.data_path, prefix=f".{key}.", suffix=".tmp"
        )
        temp_path = Path(temp_name)
        try:
            with os.fdopen(file_descriptor, "wb") as temp_file:
                temp_file.write(data)
                temp_file.flush()
                os.fsync(temp_file.fileno())
            temp_path.replace(self.__path_for(key))
        except BaseException:
            temp_path.unlink(missing_ok=True)
            raise


class MemoryStore:
    def __init__(self, initial: Optional[dict[str, bytes]] = None) -> None:
        self.data: dict[str, bytes] = dict(initial or {})

    def load(self, key: str) -> Optional[bytes]:
        return self.data.get(key)

    def save(self, key: str, data: bytes) -> None:
        self.data[key] = data
