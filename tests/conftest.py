from __future__ import annotations

from typing import Sequence

import pytest

from src.attendance_dashboard.attendance_dashboard.attendance.model import AttendanceRecord, SemesterData
from src.attendance_dashboard.attendance_dashboard.core.enums import BackendKind
from src.attendance_dashboard.attendance_dashboard.core.exceptions import StorageError
from src.attendance_dashboard.attendance_dashboard.storage.file_backend import FileBackend
from src.attendance_dashboard.attendance_dashboard.storage.memory_backend import MemoryBackend
from src.attendance_dashboard.attendance_dashboard.storage.selector import StorageSettings
from src.attendance_dashboard.attendance_dashboard.storage.store import AttendanceStore


class FakeDatabaseBackend:
    """Stands in for the Supabase tier; flip ``fail_load``/``fail_save`` to simulate outages."""

    kind = BackendKind.DATABASE

    def __init__(self, data=None, *, fail_load: bool = False, fail_save: bool = False):
        self.data = list(data or [])
        self.fail_load = fail_load
        self.fail_save = fail_save
        self.saves: list[list[SemesterData]] = []

    def load(self):
        if self.fail_load:
            raise StorageError("database unreachable")
        return list(self.data)

    def save(self, dataset: Sequence[SemesterData]) -> None:
        if self.fail_save:
            raise StorageError("database rejected write")
        self.saves.append(list(dataset))
        self.data = list(dataset)


def make_semester(name: str, *codes: str) -> SemesterData:
    return SemesterData(
        semester=name,
        records=tuple(
            AttendanceRecord.build(
                paper_code=code,
                subject=f"Subject {code}",
                batch_code="A",
                conducted=20,
                present=15,
                absent=5,
            )
            for code in codes
        ),
    )


@pytest.fixture
def semester():
    return make_semester


@pytest.fixture
def fake_database():
    return FakeDatabaseBackend


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "data" / "attendance.json"


@pytest.fixture
def file_only_settings(data_file):
    return StorageSettings(data_file=str(data_file))


@pytest.fixture
def db_settings(data_file):
    return StorageSettings(supabase_url="https://example.supabase.co", supabase_key="anon-key", data_file=str(data_file))


@pytest.fixture
def make_store():
    def _make(settings: StorageSettings, *, database=None, memory=None):
        return AttendanceStore(
            settings,
            memory=memory or MemoryBackend(),
            file=FileBackend(settings.data_file),
            database=database,
        )

    return _make
