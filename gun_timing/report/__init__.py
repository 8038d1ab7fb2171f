"""
Extract, sort and diff the first line of timing-log files into a single report.
"""

from __future__ import annotations

from .errors import FileReadError, InvalidDirectoryError
from .io_utils import (
    DEFAULT_EXTENSION,
    DEFAULT_OUTPUT_NAME,
    extract_fields,
    format_report,
    list_record_files,
    read_first_line,
    read_report,
    validate_directory,
    write_report,
)
from .pipeline import build_report, compute_elapsed, extract_records, order_records, run_report
from .records import REPORT_COLUMNS, Record, ReportResult, ReportRow
from .timestamps import (
    UNPARSABLE,
    ZERO_ELAPSED,
    Timestamp,
    UnparsableTime,
    ValidTime,
    elapsed_between,
    seconds_to_hhmmss,
    sort_key,
    time_to_seconds,
)

__all__ = [
    "DEFAULT_EXTENSION",
    "DEFAULT_OUTPUT_NAME",
    "REPORT_COLUMNS",
    "FileReadError",
    "InvalidDirectoryError",
    "Record",
    "ReportResult",
    "ReportRow",
    "Timestamp",
    "UNPARSABLE",
    "UnparsableTime",
    "ValidTime",
    "ZERO_ELAPSED",
    "build_report",
    "compute_elapsed",
    "elapsed_between",
    "extract_fields",
    "extract_records",
    "format_report",
    "list_record_files",
    "order_records",
    "read_first_line",
    "read_report",
    "run_report",
    "seconds_to_hhmmss",
    "sort_key",
    "time_to_seconds",
    "validate_directory",
    "write_report",
]
