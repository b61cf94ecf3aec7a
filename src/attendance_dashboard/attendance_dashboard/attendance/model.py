from __future__ import annotations

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Mapping, Sequence

from ..core.constants import PERCENT_QUANTUM


def round_percent(value: Decimal | float) -> float:
    """Round to 2 decimals with exact halves going up (3.125 -> 3.13)."""
    if not isinstance(value, Decimal):
        value = Decimal(value)
    return float(value.quantize(PERCENT_QUANTUM, rounding=ROUND_HALF_UP))


def attendance_percent(present: int, conducted: int) -> float:
    """Share of conducted classes attended, rounded to 2 decimals (0 if none conducted)."""
    if conducted <= 0:
        return 0.0
    return round_percent(Decimal(present * 100) / Decimal(conducted))


def _require_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"{what} must be an object, got {type(data).__name__}")
    return data


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one subject's attendance counts within a semester."""

    paper_code: str
    subject: str
    batch_code: str
    conducted: int
    present: int
    absent: int
    attendance_percent: float

    @classmethod
    def build(
        cls,
        *,
        paper_code: str,
        subject: str,
        batch_code: str,
        conducted: int,
        present: int,
        absent: int,
    ) -> "AttendanceRecord":
        return cls(
            paper_code=paper_code,
            subject=subject,
            batch_code=batch_code,
            conducted=conducted,
            present=present,
            absent=absent,
            attendance_percent=attendance_percent(present, conducted),
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AttendanceRecord":
        data = _require_mapping(data, "Attendance record")
        conducted = int(data.get("conducted") or 0)
        present = int(data.get("present") or 0)
        percent = data.get("attendancePercent")
        return cls(
            paper_code=str(data["paperCode"]),
            subject=str(data.get("subject") or ""),
            batch_code=str(data.get("batchCode") or ""),
            conducted=conducted,
            present=present,
            absent=int(data.get("absent") or 0),
            attendance_percent=float(percent) if percent is not None else attendance_percent(present, conducted),
        )

    def to_dict(self) -> dict:
        return {
            "paperCode": self.paper_code,
            "subject": self.subject,
            "batchCode": self.batch_code,
            "conducted": self.conducted,
            "present": self.present,
            "absent": self.absent,
            "attendancePercent": self.attendance_percent,
        }


@dataclass(frozen=True)
class SemesterData:
    """Domain entity: a named semester and its ordered records."""

    semester: str
    records: tuple[AttendanceRecord, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SemesterData":
        data = _require_mapping(data, "Semester")
        records = data.get("records") or []
        if not isinstance(records, list):
            raise ValueError(f"Semester records must be an array, got {type(records).__name__}")
        return cls(
            semester=str(data["semester"]),
            records=tuple(AttendanceRecord.from_dict(r) for r in records),
        )

    def to_dict(self) -> dict:
        return {
            "semester": self.semester,
            "records": [r.to_dict() for r in self.records],
        }

    def find_record(self, paper_code: str) -> int:
        for i, r in enumerate(self.records):
            if r.paper_code == paper_code:
                return i
        return -1

    def without_record(self, index: int) -> "SemesterData":
        return SemesterData(semester=self.semester, records=self.records[:index] + self.records[index + 1 :])


Dataset = list[SemesterData]


def dataset_from_json(data: Any) -> Dataset:
    if not isinstance(data, list):
        raise ValueError(f"Attendance dataset must be a JSON array, got {type(data).__name__}")
    return [SemesterData.from_dict(item) for item in data]


def dataset_to_json(dataset: Sequence[SemesterData]) -> list[dict]:
    return [s.to_dict() for s in dataset]


def default_dataset() -> Dataset:
    """Dataset served when no backend has ever held any data."""
    return [
        SemesterData(
            semester="SEMESTER I",
            records=(
                AttendanceRecord.build(
                    paper_code="BBA-101",
                    subject="Principles of Management",
                    batch_code="D",
                    conducted=30,
                    present=17,
                    absent=13,
                ),
            ),
        )
    ]
