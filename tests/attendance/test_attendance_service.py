from __future__ import annotations

import pytest

from src.attendance_dashboard.attendance_dashboard.attendance.model import default_dataset
from src.attendance_dashboard.attendance_dashboard.attendance.service import AttendanceService
from src.attendance_dashboard.attendance_dashboard.core.enums import BackendKind
from src.attendance_dashboard.attendance_dashboard.core.exceptions import NotFoundError, ValidationError


class InMemoryStore:
    def __init__(self, dataset=None):
        self.dataset = list(dataset or [])
        self.writes = 0

    def read(self):
        return list(self.dataset)

    def write(self, dataset):
        self.writes += 1
        self.dataset = list(dataset)
        return BackendKind.FILE


def raw(code, conducted=30, present=17, absent=13, subject="Principles of Management", batch="D"):
    return {
        "paperCode": code,
        "subject": subject,
        "batchCode": batch,
        "conducted": conducted,
        "present": present,
        "absent": absent,
    }


def test_upsert_new_semester_computes_percent_and_appends():
    store = InMemoryStore()
    svc = AttendanceService(store)

    result = svc.upsert_semester("SEMESTER I", [raw("BBA-101")])

    assert result.created is True
    assert result.message == "Semester added successfully"
    assert store.dataset[0].records[0].attendance_percent == 56.67


def test_upsert_existing_semester_replaces_records_in_place(semester):
    store = InMemoryStore([semester("SEMESTER I", "A", "B"), semester("SEMESTER II", "C")])
    svc = AttendanceService(store)

    result = svc.upsert_semester("SEMESTER I", [raw("Z", conducted=10, present=10, absent=0)])

    assert result.created is False
    assert result.message == "Semester updated successfully"
    assert [s.semester for s in store.dataset] == ["SEMESTER I", "SEMESTER II"]
    assert [r.paper_code for r in store.dataset[0].records] == ["Z"]


def test_upsert_ignores_client_supplied_percent():
    store = InMemoryStore()
    svc = AttendanceService(store)
    payload = raw("BBA-101")
    payload["attendancePercent"] = 99.9

    svc.upsert_semester("SEMESTER I", [payload])

    assert store.dataset[0].records[0].attendance_percent == 56.67


def test_upsert_lenient_counts_by_default():
    store = InMemoryStore()
    svc = AttendanceService(store)

    svc.upsert_semester("SEMESTER I", [raw("X", conducted=10, present=8, absent=8)])

    assert store.dataset[0].records[0].attendance_percent == 80.0


def test_upsert_strict_counts_rejects_inconsistent_record():
    store = InMemoryStore()
    svc = AttendanceService(store, strict_counts=True)

    with pytest.raises(ValidationError):
        svc.upsert_semester("SEMESTER I", [raw("X", conducted=10, present=8, absent=8)])
    assert store.writes == 0


@pytest.mark.parametrize(
    "semester_name,records",
    [
        ("", [raw("A")]),
        ("   ", [raw("A")]),
        ("SEMESTER I", "not-a-list"),
        ("SEMESTER I", []),
        ("SEMESTER I", [raw("A", conducted=-1)]),
        ("SEMESTER I", [raw("A", present="7")]),
        ("SEMESTER I", [raw("")]),
        ("SEMESTER I", [raw("A"), raw("A")]),
        ("SEMESTER I", ["oops"]),
    ],
)
def test_upsert_rejects_malformed_input_without_writing(semester_name, records):
    store = InMemoryStore(default_dataset())
    svc = AttendanceService(store)

    with pytest.raises(ValidationError):
        svc.upsert_semester(semester_name, records)
    assert store.writes == 0


def test_delete_whole_semester(semester):
    store = InMemoryStore([semester("SEMESTER I", "A"), semester("SEMESTER II", "B")])
    svc = AttendanceService(store)

    result = svc.delete("SEMESTER I")

    assert result.message == "Semester deleted successfully"
    assert [s.semester for s in store.dataset] == ["SEMESTER II"]


def test_delete_one_of_several_records_keeps_semester(semester):
    store = InMemoryStore([semester("SEMESTER I", "A", "B", "C")])
    svc = AttendanceService(store)

    result = svc.delete("SEMESTER I", "B")

    assert result.message == "Record deleted successfully"
    assert result.semester_removed is False
    assert [r.paper_code for r in store.dataset[0].records] == ["A", "C"]


def test_delete_last_record_removes_semester():
    store = InMemoryStore(default_dataset())
    svc = AttendanceService(store)

    result = svc.delete("SEMESTER I", "BBA-101")

    assert result.semester_removed is True
    assert store.dataset == []


def test_delete_unknown_semester_is_not_found(semester):
    before = [semester("SEMESTER I", "A")]
    store = InMemoryStore(before)
    svc = AttendanceService(store)

    with pytest.raises(NotFoundError, match="Semester not found"):
        svc.delete("SEMESTER IX")
    assert store.dataset == before
    assert store.writes == 0


def test_delete_unknown_paper_code_is_not_found(semester):
    before = [semester("SEMESTER I", "A")]
    store = InMemoryStore(before)
    svc = AttendanceService(store)

    with pytest.raises(NotFoundError, match="Record not found"):
        svc.delete("SEMESTER I", "NOPE")
    assert store.dataset == before
    assert store.writes == 0


def test_delete_blank_paper_code_is_a_missing_record(semester):
    before = [semester("SEMESTER I", "A")]
    store = InMemoryStore(before)
    svc = AttendanceService(store)

    with pytest.raises(NotFoundError, match="Record not found"):
        svc.delete("SEMESTER I", "   ")
    assert store.dataset == before
    assert store.writes == 0


def test_delete_requires_semester():
    svc = AttendanceService(InMemoryStore())

    with pytest.raises(ValidationError):
        svc.delete("")
