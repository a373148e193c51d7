"""
Calendar helpers for timestamp generation.

All instants handled here are timezone-aware. Rounding and truncation are
measured from 0001-01-01T00:00:00Z so that any step that divides a day lines
up with UTC midnight.
"""
import re
from datetime import datetime, timedelta, timezone

from dateutil.relativedelta import relativedelta


# strptime/strftime layout of invocation points and generated timestamps
UTC_FORM = "%Y%m%dT%H%M%SZ"

TIMESTAMP_REGEX = re.compile(r"[1-9][0-9]{3}[0-9]{2}[0-9]{2}T[0-9]{2}[0-9]{2}[0-9]{2}Z", re.ASCII)

ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)

HOUR = timedelta(hours=1)


def round_to_hour(ts: datetime) -> datetime:
    """Round to the nearest hour; exactly half past rounds up."""
    floored = truncate(ts, HOUR)
    if ts - floored >= HOUR / 2:
        return floored + HOUR
    return floored


def truncate(ts: datetime, step: timedelta) -> datetime:
    """Floor ``ts`` to a multiple of ``step``. A non-positive step returns ``ts`` unchanged."""
    if step <= timedelta(0):
        return ts
    return ts - (ts - ZERO_TIME) % step


def add_months(ts: datetime, months: int) -> datetime:
    """
    Add calendar months, rolling surplus days over into the next month.

    relativedelta alone clamps to the last day of the target month
    (Jan 31 + 1 month = Feb 28). Here the day offset is re-applied to the
    first of the target month instead, so Jan 31 + 1 month = Mar 3 in a
    common year and Feb 29 + 12 months = Mar 1.
    """
    try:
        first = ts.replace(day=1) + relativedelta(months=months)
    except ValueError as e:
        # relativedelta reports a year past 9999 as ValueError
        raise OverflowError(str(e)) from e
    return first + timedelta(days=ts.day - 1)


def local_utc_offset(ts: datetime) -> timedelta:
    """UTC offset of the process local zone at instant ``ts``."""
    return ts.astimezone().utcoffset() or timedelta(0)


def format_instant(ts: datetime) -> str:
    return ts.strftime(UTC_FORM)
