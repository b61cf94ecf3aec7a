from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Protocol, Sequence

from ..common.validators import require_non_empty, require_non_negative_int
from ..core.enums import BackendKind
from ..core.exceptions import NotFoundError, ValidationError
from .model import AttendanceRecord, Dataset, SemesterData

logger = logging.getLogger(__name__)


class DatasetStore(Protocol):
    def read(self) -> Dataset:
        raise NotImplementedError

    def write(self, dataset: Sequence[SemesterData]) -> BackendKind:
        raise NotImplementedError


@dataclass(frozen=True)
class UpsertResult:
    semester: SemesterData
    created: bool

    @property
    def message(self) -> str:
        return "Semester added successfully" if self.created else "Semester updated successfully"


@dataclass(frozen=True)
class DeleteResult:
    semester: str
    paper_code: Optional[str]
    semester_removed: bool

    @property
    def message(self) -> str:
        if self.paper_code is None:
            return "Semester deleted successfully"
        return "Record deleted successfully"


class AttendanceService:
    """Use cases over the whole dataset: list, upsert a semester, delete.

    Every mutation reads the full dataset, changes it in memory and writes the
    full dataset back.
    """

    def __init__(self, store: DatasetStore, *, strict_counts: bool = False):
        self._store = store
        self._strict_counts = bool(strict_counts)

    def list_semesters(self) -> Dataset:
        return self._store.read()

    def upsert_semester(self, semester: Any, records: Any) -> UpsertResult:
        name = require_non_empty(semester, "semester")
        if not isinstance(records, list):
            raise ValidationError("records must be an array")
        if not records:
            raise ValidationError("records must contain at least one record")

        built = tuple(self._build_record(i, raw) for i, raw in enumerate(records))
        seen: set[str] = set()
        for r in built:
            if r.paper_code in seen:
                raise ValidationError(f"Duplicate paperCode {r.paper_code!r} in semester {name!r}")
            seen.add(r.paper_code)

        new_semester = SemesterData(semester=name, records=built)
        dataset = self._store.read()
        index = _find_semester(dataset, name)
        if index >= 0:
            dataset[index] = new_semester
        else:
            dataset.append(new_semester)

        backend = self._store.write(dataset)
        logger.info("Upserted semester %r (%d records) -> %s", name, len(built), backend.value)
        return UpsertResult(semester=new_semester, created=index < 0)

    def delete(self, semester: Any, paper_code: Any = None) -> DeleteResult:
        name = require_non_empty(semester, "semester")
        code = None
        if paper_code is not None and paper_code != "":
            code = str(paper_code).strip()

        dataset = self._store.read()
        index = _find_semester(dataset, name)
        if index < 0:
            raise NotFoundError("Semester not found")

        removed = True
        if code is not None:
            current = dataset[index]
            record_index = current.find_record(code)
            if record_index < 0:
                raise NotFoundError("Record not found")
            remaining = current.without_record(record_index)
            if remaining.records:
                dataset[index] = remaining
                removed = False
            else:
                del dataset[index]
        else:
            del dataset[index]

        backend = self._store.write(dataset)
        logger.info("Deleted %s from semester %r -> %s", code or "semester", name, backend.value)
        return DeleteResult(semester=name, paper_code=code, semester_removed=removed)

    def _build_record(self, index: int, raw: Any) -> AttendanceRecord:
        prefix = f"records[{index}]"
        if not isinstance(raw, dict):
            raise ValidationError(f"{prefix} must be an object")

        conducted = require_non_negative_int(raw.get("conducted"), f"{prefix}.conducted")
        present = require_non_negative_int(raw.get("present"), f"{prefix}.present")
        absent = require_non_negative_int(raw.get("absent"), f"{prefix}.absent")
        if self._strict_counts and present + absent != conducted:
            raise ValidationError(f"{prefix}: present + absent must equal conducted")

        return AttendanceRecord.build(
            paper_code=require_non_empty(raw.get("paperCode"), f"{prefix}.paperCode"),
            subject=require_non_empty(raw.get("subject"), f"{prefix}.subject"),
            batch_code=require_non_empty(raw.get("batchCode"), f"{prefix}.batchCode"),
            conducted=conducted,
            present=present,
            absent=absent,
        )


def _find_semester(dataset: Sequence[SemesterData], name: str) -> int:
    for i, s in enumerate(dataset):
        if s.semester == name:
            return i
    return -1
