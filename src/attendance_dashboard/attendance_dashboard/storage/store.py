from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..attendance.model import Dataset, SemesterData
from ..core.enums import BackendKind
from ..core.exceptions import StorageError
from .backend import StorageBackend
from .memory_backend import MemoryBackend
from .selector import StorageSettings, read_order, write_order

logger = logging.getLogger(__name__)


class AttendanceStore:
    """Reads and writes the whole dataset with database > file > memory fallback.

    Neither ``read`` nor ``write`` raises on backend failure: each failing tier
    is logged and the next one is tried, ending with the in-memory copy.
    """

    def __init__(
        self,
        settings: StorageSettings,
        *,
        memory: MemoryBackend,
        file: StorageBackend,
        database: Optional[StorageBackend] = None,
    ):
        self._settings = settings
        self._memory = memory
        self._backends: dict[BackendKind, StorageBackend] = {BackendKind.FILE: file}
        if database is not None:
            self._backends[BackendKind.DATABASE] = database

    def _chain(self, kinds: Sequence[BackendKind]) -> list[StorageBackend]:
        return [self._backends[k] for k in kinds if k in self._backends]

    def read(self) -> Dataset:
        for backend in self._chain(read_order(self._settings)):
            try:
                dataset = backend.load()
            except StorageError as e:
                logger.warning("Reading from %s failed, falling back: %s", backend.kind.value, e)
                continue

            self._memory.save(dataset)
            if backend.kind == BackendKind.FILE and dataset:
                self._sync_to_database(dataset)
            logger.debug("Read %d semesters from %s", len(dataset), backend.kind.value)
            return dataset

        return self._memory.load()

    def _sync_to_database(self, dataset: Sequence[SemesterData]) -> None:
        database = self._backends.get(BackendKind.DATABASE)
        if database is None or not self._settings.database_configured:
            return
        try:
            database.save(dataset)
            logger.info("Synced %d semesters from file to database", len(dataset))
        except StorageError as e:
            logger.error("Error syncing file data to database: %s", e)

    def write(self, dataset: Sequence[SemesterData]) -> BackendKind:
        """Persist ``dataset`` and return the most durable tier that accepted it."""
        self._memory.save(dataset)

        for backend in self._chain(write_order(self._settings)):
            try:
                backend.save(dataset)
            except StorageError as e:
                logger.error("Writing to %s failed, falling back: %s", backend.kind.value, e)
                continue
            logger.debug("Wrote %d semesters to %s", len(dataset), backend.kind.value)
            return backend.kind

        if self._settings.serverless and not self._settings.database_configured:
            logger.warning(
                "Data is only stored in memory and will be lost on restart. "
                "Configure Supabase for persistent storage."
            )
        return BackendKind.MEMORY
