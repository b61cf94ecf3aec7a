from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.service import AttendanceService
from .dashboard.service import DashboardService
from .database.connection import SupabaseConfig, SupabaseConnection
from .storage.database_backend import DatabaseBackend
from .storage.file_backend import FileBackend
from .storage.memory_backend import MemoryBackend
from .storage.selector import StorageSettings
from .storage.store import AttendanceStore


@dataclass(frozen=True)
class Container:
    storage_settings: StorageSettings

    memory: MemoryBackend
    file_backend: FileBackend
    database_backend: Optional[DatabaseBackend]
    store: AttendanceStore

    attendance_service: AttendanceService
    dashboard_service: DashboardService


def build_container(
    *,
    storage_settings: StorageSettings,
    strict_counts: bool = False,
    memory: Optional[MemoryBackend] = None,
) -> Container:
    memory = memory or MemoryBackend()
    file_backend = FileBackend(storage_settings.data_file)

    database_backend = None
    if storage_settings.database_configured:
        conn = SupabaseConnection(SupabaseConfig(url=storage_settings.supabase_url, key=storage_settings.supabase_key))
        database_backend = DatabaseBackend(conn)

    store = AttendanceStore(storage_settings, memory=memory, file=file_backend, database=database_backend)

    return Container(
        storage_settings=storage_settings,
        memory=memory,
        file_backend=file_backend,
        database_backend=database_backend,
        store=store,
        attendance_service=AttendanceService(store, strict_counts=strict_counts),
        dashboard_service=DashboardService(),
    )
