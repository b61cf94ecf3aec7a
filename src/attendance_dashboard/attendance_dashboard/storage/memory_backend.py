from __future__ import annotations

from typing import Callable, Optional, Sequence

from ..attendance.model import Dataset, SemesterData, default_dataset
from ..core.enums import BackendKind


class MemoryBackend:
    """Process-lifetime copy of the last known dataset.

    Created once by the container and shared by reference. The first load while
    nothing has ever been saved returns (and keeps) the seed dataset.
    """

    kind = BackendKind.MEMORY

    def __init__(self, seed: Callable[[], Dataset] = default_dataset, initial: Optional[Sequence[SemesterData]] = None):
        self._seed = seed
        self._data: Optional[Dataset] = list(initial) if initial is not None else None

    @property
    def initialized(self) -> bool:
        return self._data is not None

    def load(self) -> Dataset:
        if self._data is None:
            self._data = list(self._seed())
        return list(self._data)

    def save(self, dataset: Sequence[SemesterData]) -> None:
        self._data = list(dataset)
