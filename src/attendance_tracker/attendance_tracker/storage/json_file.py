from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Dict, Optional

from ..core.exceptions import StorageUnavailableError


class JsonFileStorage:
    """All keys kept in a single JSON document on disk.

    Every ``set``/``remove`` rewrites the whole file through a temp file and
    ``os.replace``.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self) -> Dict[str, str]:
        try:
            text = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as e:
            raise StorageUnavailableError(f"Cannot read {self._path}: {e}") from e

        if not text.strip():
            return {}
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise StorageUnavailableError(f"Corrupt storage file {self._path}: {e}") from e
        if not isinstance(data, dict):
            raise StorageUnavailableError(f"Corrupt storage file {self._path}: expected an object")
        return {str(k): str(v) for k, v in data.items()}

    def _write_all(self, data: Dict[str, str]) -> None:
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            raise StorageUnavailableError(f"Cannot write {self._path}: {e}") from e

    def get(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)

    def remove(self, key: str) -> None:
        data = self._read_all()
        if key in data:
            del data[key]
            self._write_all(data)
