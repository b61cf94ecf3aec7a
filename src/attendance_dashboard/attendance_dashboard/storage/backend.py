from __future__ import annotations

from typing import Protocol, Sequence

from ..attendance.model import Dataset, SemesterData
from ..core.enums import BackendKind


class StorageBackend(Protocol):
    """One physical store able to hold the whole attendance dataset.

    Implementations raise ``StorageError`` on any failure so the store can fall
    through to the next tier.
    """

    kind: BackendKind

    def load(self) -> Dataset:
        raise NotImplementedError

    def save(self, dataset: Sequence[SemesterData]) -> None:
        raise NotImplementedError
