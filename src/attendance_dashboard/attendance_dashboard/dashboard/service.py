from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..attendance.model import SemesterData, round_percent
from ..core.constants import (
    GOOD_ATTENDANCE_PERCENT,
    GOOD_SUBJECT_RATIO,
    HIGH_BAND_PERCENT,
    WARNING_ATTENDANCE_PERCENT,
)
from ..core.enums import AttendanceBand, Trend


@dataclass(frozen=True)
class DashboardSummary:
    totals: dict
    semesters: list[dict]
    subjects: list[dict]

    def to_dict(self) -> dict:
        return {"totals": self.totals, "semesters": self.semesters, "subjects": self.subjects}


def _pct(part: float, whole: float) -> float:
    return part / whole * 100 if whole > 0 else 0.0


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def trend_for(percent: float) -> Trend:
    if percent >= GOOD_ATTENDANCE_PERCENT:
        return Trend.UP
    if percent >= WARNING_ATTENDANCE_PERCENT:
        return Trend.NEUTRAL
    return Trend.DOWN


def band_for(percent: float) -> AttendanceBand:
    if percent >= HIGH_BAND_PERCENT:
        return AttendanceBand.GOOD
    if percent >= WARNING_ATTENDANCE_PERCENT:
        return AttendanceBand.WARNING
    return AttendanceBand.POOR


class DashboardService:
    """Read model for the viewer: totals, per-semester and per-subject figures."""

    def build_summary(self, dataset: Sequence[SemesterData]) -> DashboardSummary:
        conducted = present = absent = 0
        percents: list[float] = []
        semesters: list[dict] = []
        subjects: list[dict] = []

        for sem in dataset:
            sem_conducted = sum(r.conducted for r in sem.records)
            sem_present = sum(r.present for r in sem.records)
            sem_absent = sum(r.absent for r in sem.records)
            conducted += sem_conducted
            present += sem_present
            absent += sem_absent

            semesters.append(
                {
                    "semester": sem.semester,
                    "averagePercent": round_percent(_mean([r.attendance_percent for r in sem.records])),
                    "conducted": sem_conducted,
                    "present": sem_present,
                    "absent": sem_absent,
                    "recordCount": len(sem.records),
                }
            )

            for r in sem.records:
                percents.append(r.attendance_percent)
                subjects.append(
                    {
                        "semester": sem.semester,
                        "paperCode": r.paper_code,
                        "subject": r.subject,
                        "attendancePercent": r.attendance_percent,
                        "band": band_for(r.attendance_percent).value,
                    }
                )

        subjects.sort(key=lambda x: x["attendancePercent"], reverse=True)

        overall = _pct(present, conducted)
        average = _mean(percents)
        good = sum(1 for p in percents if p >= GOOD_ATTENDANCE_PERCENT)
        total_subjects = len(percents)
        good_ratio = good / total_subjects if total_subjects else 0.0

        totals = {
            "conducted": conducted,
            "present": present,
            "absent": absent,
            "overallPercent": round_percent(overall),
            "overallTrend": trend_for(overall).value,
            "averagePercent": round_percent(average),
            "averageTrend": trend_for(average).value,
            "goodSubjects": good,
            "totalSubjects": total_subjects,
            "goodSubjectsTrend": (Trend.UP if good_ratio >= GOOD_SUBJECT_RATIO else Trend.NEUTRAL).value,
        }
        return DashboardSummary(totals=totals, semesters=semesters, subjects=subjects)
