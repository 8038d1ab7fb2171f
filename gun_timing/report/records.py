from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .timestamps import Timestamp

REPORT_COLUMNS: list[str] = [
    "field1",
    "field2",
    "field3",
    "field4",
    "time_of_day",
    "elapsed",
]


@dataclass(frozen=True)
class Record:
    f1: str
    f2: str
    f3: str
    f4: str
    f11: str
    timestamp: Timestamp
    source: Path
    position: int

    def fields(self) -> list[str]:
        return [self.f1, self.f2, self.f3, self.f4, self.f11]


@dataclass(frozen=True)
class ReportRow:
    record: Record
    elapsed: str

    def as_row(self) -> list[str]:
        return [*self.record.fields(), self.elapsed]

    def as_line(self) -> str:
        return ",".join(self.as_row())


@dataclass
class ReportResult:
    """
    Outcome of one pass over a directory.
    """

    files: List[Path] = field(default_factory=list)
    records: List[Record] = field(default_factory=list)
    rows: List[ReportRow] = field(default_factory=list)
    skipped: List[Path] = field(default_factory=list)
    dropped: List[Path] = field(default_factory=list)
    output_path: Optional[Path] = None

    @property
    def found_files(self) -> bool:
        return bool(self.files)
