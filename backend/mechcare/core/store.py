# backend/mechcare/core/store.py
import json
import logging
import os
import tempfile
from typing import Any, Dict

from .errors import StorageError

logger = logging.getLogger(__name__)

Dataset = Dict[str, Any]


def empty_dataset() -> Dataset:
    return {"machines": [], "logs": []}


class JsonFileStore:
    def __init__(self, path: str):
        self.path = os.path.abspath(path)

    def __repr__(self) -> str:
        return f"JsonFileStore({self.path!r})"

    def exists(self) -> bool:
        return os.path.exists(self.path)

    def load(self) -> Dataset:
        # ilk çalıştırma: henüz dosya yok
        if not self.exists():
            return empty_dataset()
        try:
            with open(self.path, "r", encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, ValueError) as e:
            logger.error("Failed to read dataset %s: %s", self.path, e)
            raise StorageError(f"Failed to read data: {e}") from e

        if not isinstance(data, dict):
            raise StorageError("Failed to read data: document is not an object")
        data.setdefault("machines", [])
        data.setdefault("logs", [])
        return data

    def save(self, dataset: Dataset) -> None:
        directory = os.path.dirname(self.path)
        tmp_path = None
        try:
            os.makedirs(directory, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(prefix=".mechcare-", suffix=".tmp", dir=directory)
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(dataset, fh, indent=2, ensure_ascii=False)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_path, self.path)
            tmp_path = None
        except (OSError, TypeError, ValueError) as e:
            logger.error("Failed to write dataset %s: %s", self.path, e)
            raise StorageError(f"Failed to write data: {e}") from e
        finally:
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
