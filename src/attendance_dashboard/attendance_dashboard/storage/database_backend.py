from __future__ import annotations

import logging
from typing import Sequence

from ..attendance.model import Dataset, SemesterData
from ..core.constants import ATTENDANCE_TABLE, NIL_UUID
from ..core.enums import BackendKind
from ..core.exceptions import StorageError
from ..database.connection import SupabaseConnection

logger = logging.getLogger(__name__)


class DatabaseBackend:
    """Dataset stored one row per semester in a Supabase table.

    Table layout: ``id`` (generated), ``semester`` (unique), ``records`` (jsonb),
    ``created_at``/``updated_at``. Rows are read oldest first.
    """

    kind = BackendKind.DATABASE

    def __init__(self, conn: SupabaseConnection, *, table: str = ATTENDANCE_TABLE):
        self._conn = conn
        self._table = table

    def _client(self):
        try:
            return self._conn.client()
        except StorageError:
            raise
        except Exception as e:
            logger.error("Cannot create Supabase client: %s", e, exc_info=True)
            raise StorageError(f"Supabase client unavailable: {e}") from e

    def load(self) -> Dataset:
        client = self._client()
        try:
            response = client.table(self._table).select("*").order("created_at", desc=False).execute()
            rows = response.data or []
            dataset = [SemesterData.from_dict(row) for row in rows]
        except Exception as e:
            logger.error("Supabase read from %s failed: %s", self._table, e, exc_info=True)
            raise StorageError(f"Supabase read failed: {e}") from e

        logger.debug("Read %d semesters from Supabase", len(dataset))
        return dataset

    def save(self, dataset: Sequence[SemesterData]) -> None:
        client = self._client()
        table = self._table

        if not dataset:
            try:
                client.table(table).delete().neq("id", NIL_UUID).execute()
            except Exception as e:
                logger.error("Supabase delete-all on %s failed: %s", table, e, exc_info=True)
                raise StorageError(f"Supabase delete failed: {e}") from e
            logger.info("All semesters deleted from Supabase")
            return

        keep = {s.semester for s in dataset}
        try:
            existing = client.table(table).select("semester").execute()
        except Exception as e:
            # Stale rows stay until the next successful write; the upsert still runs.
            logger.warning("Cannot list stored semesters in %s, skipping stale cleanup: %s", table, e)
            existing = None

        if existing is not None:
            stale = [row["semester"] for row in existing.data or [] if row.get("semester") not in keep]
            if stale:
                logger.info("Deleting %d old semesters: %s", len(stale), stale)
                try:
                    client.table(table).delete().in_("semester", stale).execute()
                except Exception as e:
                    logger.error("Supabase delete of %s failed: %s", stale, e, exc_info=True)
                    raise StorageError(f"Supabase delete failed: {e}") from e

        rows = [{"semester": s.semester, "records": [r.to_dict() for r in s.records]} for s in dataset]
        try:
            client.table(table).upsert(rows, on_conflict="semester").execute()
        except Exception as e:
            logger.error("Supabase upsert into %s failed: %s", table, e, exc_info=True)
            raise StorageError(f"Supabase upsert failed: {e}") from e

        logger.debug("Wrote %d semesters to Supabase", len(rows))
