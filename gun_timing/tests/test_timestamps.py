from __future__ import annotations

import pytest

from gun_timing.report.timestamps import (
    UNPARSABLE,
    ValidTime,
    elapsed_between,
    seconds_to_hhmmss,
    sort_key,
    time_to_seconds,
)


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0, "00:00:00"),
        (3661, "01:01:01"),
        (59, "00:00:59"),
        (3600 * 100 + 5, "100:00:05"),
        (90.9, "00:01:30"),
    ],
)
def test_seconds_to_hhmmss(seconds, expected) -> None:
    assert seconds_to_hhmmss(seconds) == expected


def test_seconds_to_hhmmss_rejects_negative() -> None:
    with pytest.raises(ValueError):
        seconds_to_hhmmss(-1)


def test_time_to_seconds() -> None:
    assert time_to_seconds("01:02:03") == ValidTime(3723)
    assert time_to_seconds("00:00:00") == ValidTime(0)
    assert time_to_seconds("bad") is UNPARSABLE
    assert time_to_seconds("10:00") is UNPARSABLE
    assert time_to_seconds("aa:bb:cc") is UNPARSABLE
    assert time_to_seconds("") is UNPARSABLE


def test_unparsable_sorts_after_any_valid_time() -> None:
    stamps = [UNPARSABLE, ValidTime(86399), ValidTime(0)]
    assert sorted(stamps, key=sort_key) == [ValidTime(0), ValidTime(86399), UNPARSABLE]


def test_elapsed_between() -> None:
    assert elapsed_between(None, ValidTime(100)) == 0
    assert elapsed_between(ValidTime(100), ValidTime(160)) == 60
    assert elapsed_between(ValidTime(100), UNPARSABLE) == 0
    assert elapsed_between(UNPARSABLE, ValidTime(100)) == 0


def test_time_components_follow_numeric_rules() -> None:
    assert time_to_seconds("10::05") == ValidTime(36005)
    assert time_to_seconds(" 01: 02 :03") == ValidTime(3723)
    assert time_to_seconds("1_0:00:00") is UNPARSABLE
    assert time_to_seconds("01:02:03.5") is UNPARSABLE


def test_report_modules_expose_docstrings() -> None:
    import gun_timing.report as report
    import gun_timing.report.timestamps as timestamps

    assert "timing-log files" in report.__doc__
    assert "Time-of-day parsing" in timestamps.__doc__
