from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

from ..core.config import ReportConfig
from ..core.telemetry import get_logger
from .errors import FileReadError
from .io_utils import extract_fields, list_record_files, read_first_line, write_report
from .records import Record, ReportResult, ReportRow
from .timestamps import (
    ZERO_ELAPSED,
    Timestamp,
    UnparsableTime,
    elapsed_between,
    seconds_to_hhmmss,
    sort_key,
    time_to_seconds,
)


def extract_records(
    paths: Iterable[Path],
    config: ReportConfig,
    logger: Optional[logging.Logger] = None,
) -> Tuple[List[Record], List[Path], List[Path]]:
    """
    Read the first line of every file, in order, and keep the well-formed ones.

    Returns ``(records, skipped, dropped)``: unreadable files are logged and
    skipped, lines with too few fields are dropped.
    """

    log = logger or get_logger()
    records: list[Record] = []
    skipped: list[Path] = []
    dropped: list[Path] = []
    for position, path in enumerate(paths):
        try:
            line = read_first_line(path, encoding=config.encoding)
        except FileReadError as exc:
            log.error("%s", exc)
            skipped.append(path)
            continue
        fields = extract_fields(
            line,
            min_fields=config.min_fields,
            time_field_index=config.time_field_index,
        )
        if fields is None:
            log.debug("Descartado %s: menos de %d campos", path.name, config.min_fields)
            dropped.append(path)
            continue
        f1, f2, f3, f4, f11 = fields
        records.append(
            Record(
                f1=f1,
                f2=f2,
                f3=f3,
                f4=f4,
                f11=f11,
                timestamp=time_to_seconds(f11),
                source=path,
                position=position,
            )
        )
    return records, skipped, dropped


def order_records(records: Sequence[Record]) -> List[Record]:
    return sorted(records, key=lambda r: (sort_key(r.timestamp), r.position))


def compute_elapsed(
    records: Sequence[Record],
    carry_unparsable_baseline: bool = True,
) -> List[ReportRow]:
    """
    Pair each record with the time elapsed since the previous one.

    The first record and every unparsable record get ``00:00:00``. With
    ``carry_unparsable_baseline`` the cursor also moves onto unparsable
    records, so the following diff is zero as well.
    """

    previous: Optional[Timestamp] = None
    rows: list[ReportRow] = []
    for record in records:
        current = record.timestamp
        if previous is None or isinstance(current, UnparsableTime):
            elapsed = ZERO_ELAPSED
        else:
            elapsed = seconds_to_hhmmss(elapsed_between(previous, current))
        rows.append(ReportRow(record=record, elapsed=elapsed))
        if carry_unparsable_baseline or not isinstance(current, UnparsableTime):
            previous = current
    return rows


def build_report(config: ReportConfig, logger: Optional[logging.Logger] = None) -> ReportResult:
    log = logger or get_logger()
    files = list_record_files(config.directory, config.extension)
    result = ReportResult(files=files)
    if not files:
        log.info("Sin archivos %s en %s", config.extension, config.directory)
        return result

    records, skipped, dropped = extract_records(files, config, logger=log)
    ordered = order_records(records)
    result.records = ordered
    result.rows = compute_elapsed(ordered, config.carry_unparsable_baseline)
    result.skipped = skipped
    result.dropped = dropped
    log.info(
        "archivos=%d | registros=%d | ilegibles=%d | descartados=%d",
        len(files),
        len(ordered),
        len(skipped),
        len(dropped),
    )
    return result


def run_report(config: ReportConfig, logger: Optional[logging.Logger] = None) -> ReportResult:
    result = build_report(config, logger=logger)
    if not result.found_files:
        return result
    result.output_path = write_report(
        config.directory,
        result.rows,
        output_name=config.output_name,
        encoding=config.encoding,
    )
    return result
