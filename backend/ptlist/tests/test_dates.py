from datetime import datetime, timedelta, timezone

import pytest

from ptlist.utils.dates import add_months, format_instant, round_to_hour, truncate


def utc(*args):
    return datetime(*args, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "ts, expected",
    [
        (utc(2021, 7, 14, 20, 46, 3), utc(2021, 7, 14, 21)),
        (utc(2021, 7, 14, 20, 30, 0), utc(2021, 7, 14, 21)),
        (utc(2021, 7, 14, 20, 29, 59), utc(2021, 7, 14, 20)),
        (utc(2021, 7, 14, 20, 0, 0), utc(2021, 7, 14, 20)),
        (utc(2021, 12, 31, 23, 45), utc(2022, 1, 1, 0)),
    ],
)
def test_round_to_hour(ts, expected):
    assert round_to_hour(ts) == expected


@pytest.mark.parametrize(
    "step, expected",
    [
        (timedelta(hours=3), utc(2021, 10, 10, 18)),
        (timedelta(hours=2), utc(2021, 10, 10, 20)),
        (timedelta(hours=1), utc(2021, 10, 10, 20)),
        (timedelta(0), utc(2021, 10, 10, 20, 46, 3)),
        (timedelta(hours=-4), utc(2021, 10, 10, 20, 46, 3)),
    ],
)
def test_truncate(step, expected):
    assert truncate(utc(2021, 10, 10, 20, 46, 3), step) == expected


@pytest.mark.parametrize(
    "ts, months, expected",
    [
        (utc(2021, 2, 14, 21), 1, utc(2021, 3, 14, 21)),
        (utc(2021, 11, 30, 9), 3, utc(2022, 2, 28, 9) + timedelta(days=2)),
        (utc(2021, 1, 31), 1, utc(2021, 3, 3)),
        (utc(2020, 1, 31), 1, utc(2020, 3, 2)),
        (utc(2021, 3, 31), 1, utc(2021, 5, 1)),
        (utc(2020, 2, 29), 12, utc(2021, 3, 1)),
        (utc(2020, 2, 29), 48, utc(2024, 2, 29)),
    ],
)
def test_add_months_rolls_over(ts, months, expected):
    assert add_months(ts, months) == expected


def test_format_instant():
    assert format_instant(utc(2021, 7, 14, 21)) == "20210714T210000Z"
