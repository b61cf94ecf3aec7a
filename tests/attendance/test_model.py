from __future__ import annotations

import pytest

from src.attendance_dashboard.attendance_dashboard.attendance.model import (
    AttendanceRecord,
    SemesterData,
    attendance_percent,
    dataset_from_json,
    default_dataset,
)


@pytest.mark.parametrize(
    "present,conducted,expected",
    [
        (17, 30, 56.67),
        (0, 12, 0.0),
        (12, 12, 100.0),
        (1, 3, 33.33),
        (2, 3, 66.67),
        (45, 47, 95.74),
        (3, 8, 37.5),
    ],
)
def test_percent_is_share_of_conducted_to_two_decimals(present, conducted, expected):
    assert attendance_percent(present, conducted) == expected


@pytest.mark.parametrize(
    "present,conducted,expected",
    [(1, 32, 3.13), (5, 32, 15.63), (7, 32, 21.88), (1, 16, 6.25)],
)
def test_percent_rounds_exact_halves_up(present, conducted, expected):
    assert attendance_percent(present, conducted) == expected


def test_percent_is_zero_when_nothing_conducted():
    assert attendance_percent(0, 0) == 0
    assert attendance_percent(5, 0) == 0


def test_build_derives_percent():
    rec = AttendanceRecord.build(
        paper_code="BBA-101",
        subject="Principles of Management",
        batch_code="D",
        conducted=30,
        present=17,
        absent=13,
    )

    assert rec.attendance_percent == 56.67


def test_record_json_uses_camel_case_keys():
    rec = AttendanceRecord.build(paper_code="X-1", subject="S", batch_code="B", conducted=10, present=9, absent=1)

    assert rec.to_dict() == {
        "paperCode": "X-1",
        "subject": "S",
        "batchCode": "B",
        "conducted": 10,
        "present": 9,
        "absent": 1,
        "attendancePercent": 90.0,
    }


def test_from_dict_recomputes_missing_percent_and_ignores_extra_keys():
    sem = SemesterData.from_dict(
        {
            "id": "b6a1",
            "semester": "SEMESTER II",
            "created_at": "2025-01-01T00:00:00Z",
            "records": [{"paperCode": "P", "subject": "S", "batchCode": "B", "conducted": 4, "present": 3, "absent": 1}],
        }
    )

    assert sem.semester == "SEMESTER II"
    assert sem.records[0].attendance_percent == 75.0


def test_dataset_from_json_rejects_non_array():
    with pytest.raises(ValueError):
        dataset_from_json({"semester": "SEMESTER I"})


@pytest.mark.parametrize(
    "raw",
    [
        [1],
        [{"semester": "SEMESTER I", "records": [1]}],
        [{"semester": "SEMESTER I", "records": "abc"}],
        [{"semester": "SEMESTER I", "records": {"a": 1}}],
    ],
)
def test_dataset_from_json_rejects_non_object_entries(raw):
    with pytest.raises(ValueError):
        dataset_from_json(raw)


def test_default_dataset_is_single_bba_semester():
    data = default_dataset()

    assert [s.semester for s in data] == ["SEMESTER I"]
    assert data[0].records[0].paper_code == "BBA-101"
    assert data[0].records[0].attendance_percent == 56.67
