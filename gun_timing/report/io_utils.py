from __future__ import annotations

import csv
from pathlib import Path
from typing import Any, Iterable, List, Optional, Tuple

from .errors import FileReadError, InvalidDirectoryError
from .records import REPORT_COLUMNS, ReportRow

DEFAULT_EXTENSION = ".lif"
DEFAULT_OUTPUT_NAME = "output.csv"
MIN_FIELDS = 11
TIME_FIELD_INDEX = 10

ExtractedFields = Tuple[str, str, str, str, str]


def validate_directory(path: Path | str) -> Path:
    directory = Path(path)
    if not directory.exists() or not directory.is_dir():
        raise InvalidDirectoryError(directory)
    return directory


def list_record_files(directory: Path | str, extension: str = DEFAULT_EXTENSION) -> List[Path]:
    base = validate_directory(directory)
    # iterdir keeps the filesystem listing order
    return [p for p in base.iterdir() if p.name.endswith(extension) and p.is_file()]


def read_first_line(path: Path, encoding: str = "utf-8") -> str:
    # undecodable bytes become U+FFFD; only OS errors make a file unreadable
    try:
        data = Path(path).read_text(encoding=encoding, errors="replace")
    except OSError as exc:
        raise FileReadError(path, exc) from exc
    return data.split("\n")[0].lstrip("\ufeff").strip()


def extract_fields(
    line: str,
    min_fields: int = MIN_FIELDS,
    time_field_index: int = TIME_FIELD_INDEX,
) -> Optional[ExtractedFields]:
    if not line:
        return None
    fields = line.split(",")
    if len(fields) < min_fields:
        return None
    return (
        fields[0].strip(),
        fields[1].strip(),
        fields[2].strip(),
        fields[3].strip(),
        fields[time_field_index].strip(),
    )


def format_report(rows: Iterable[ReportRow]) -> str:
    return "\n".join(row.as_line() for row in rows)


def write_report(
    directory: Path | str,
    rows: Iterable[ReportRow],
    output_name: str = DEFAULT_OUTPUT_NAME,
    encoding: str = "utf-8",
) -> Path:
    path = Path(directory) / output_name
    with path.open("w", encoding=encoding, newline="") as handle:
        handle.write(format_report(rows))
    return path


def read_report(path: Path) -> List[dict[str, Any]]:
    if not path.exists():
        raise FileNotFoundError(path)
    rows: list[dict[str, Any]] = []
    with path.open("r", encoding="utf-8", newline="") as handle:
        reader = csv.reader(handle)
        for lineno, raw in enumerate(reader, start=1):
            if not raw:
                continue
            if len(raw) != len(REPORT_COLUMNS):
                raise ValueError(
                    f"Archivo {path} linea {lineno}: se esperaban {len(REPORT_COLUMNS)} columnas, hay {len(raw)}."
                )
            rows.append(dict(zip(REPORT_COLUMNS, raw)))
    return rows
