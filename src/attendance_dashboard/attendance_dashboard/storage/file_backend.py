from __future__ import annotations

import json
from pathlib import Path
from typing import Sequence

from ..attendance.model import Dataset, SemesterData, dataset_from_json, dataset_to_json
from ..core.enums import BackendKind
from ..core.exceptions import StorageError


class FileBackend:
    """Whole dataset as one pretty-printed JSON array on local disk."""

    kind = BackendKind.FILE

    def __init__(self, path: str | Path):
        self._path = Path(path)

    def load(self) -> Dataset:
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
            return dataset_from_json(raw)
        except (OSError, ValueError, KeyError, TypeError) as e:
            raise StorageError(f"Cannot read {self._path}: {e}") from e

    def save(self, dataset: Sequence[SemesterData]) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(
                json.dumps(dataset_to_json(dataset), indent=2, ensure_ascii=False),
                encoding="utf-8",
            )
        except OSError as e:
            raise StorageError(f"Cannot write {self._path}: {e}") from e
