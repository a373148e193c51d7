"""
Request Validation

Turns the raw query strings of a ``/ptlist`` request into typed values:
two boundary instants, a repetition period and a timezone. Every rejection
is an ``ApplicationError`` with the ``bad_request`` code.
"""
import re
from datetime import datetime, timedelta, timezone, tzinfo
from typing import List, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from loguru import logger

from ptlist.errors import INVOCATION_POINTS_ERROR, PERIOD_ERROR, TIMEZONE_ERROR, bad_request
from ptlist.generators import generate
from ptlist.models.timestamp_models import Period, PeriodUnit
from ptlist.utils.dates import TIMESTAMP_REGEX, UTC_FORM


PERIOD_REGEX = re.compile(r"([1-9])(h|d|mo|y)", re.ASCII)


def validate_timezone(name: str) -> ZoneInfo:
    """
    Resolve an IANA timezone name against the host timezone database.

    An empty name resolves to UTC.
    """
    try:
        return ZoneInfo(name or "UTC")
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        logger.warning(f"  ! [Validator] Unknown timezone {name!r}: {e}")
        raise bad_request(TIMEZONE_ERROR) from e


def validate_format(t1: str, t2: str) -> bool:
    """Both invocation points must match ``YYYYMMDDTHHMMSSZ`` exactly."""
    return TIMESTAMP_REGEX.fullmatch(t1) is not None and TIMESTAMP_REGEX.fullmatch(t2) is not None


def validate_sequence(t1: str, t2: str, layout: str = UTC_FORM) -> bool:
    """
    True only if ``t1`` is strictly before ``t2`` when both are parsed with
    ``layout``. Unparsable input is logged and reported as out of order.
    """
    try:
        ts1 = datetime.strptime(t1, layout)
        ts2 = datetime.strptime(t2, layout)
    except ValueError as e:
        logger.warning(f"  ! [Validator] Cannot compare invocation points {t1!r} and {t2!r}: {e}")
        return False

    return ts1 < ts2


def parse_instant(invocation_point: str) -> datetime:
    """Parse a ``YYYYMMDDTHHMMSSZ`` string into an aware UTC datetime."""
    if TIMESTAMP_REGEX.fullmatch(invocation_point) is None:
        raise bad_request(INVOCATION_POINTS_ERROR)
    try:
        parsed = datetime.strptime(invocation_point, UTC_FORM)
    except ValueError as e:
        raise bad_request(INVOCATION_POINTS_ERROR) from e
    return parsed.replace(tzinfo=timezone.utc)


def parse_period(period: str) -> Period:
    """Split a period such as ``3d`` into its multiplier and unit."""
    match = PERIOD_REGEX.fullmatch(period)
    if match is None:
        raise bad_request(PERIOD_ERROR)
    multiplier, unit = match.groups()
    return Period(multiplier=int(multiplier), unit=PeriodUnit(unit))


def validate_invocation_points(
    t1: str,
    t2: str,
    period: str,
    tz: tzinfo,
    *,
    local_offset: Optional[timedelta] = None,
    limit: Optional[int] = None,
) -> List[str]:
    """
    Validate both invocation points and the period, then compute the
    timestamps between them.

    Malformed and out-of-order invocation points fail alike with
    "cannot parse invocation points".
    """
    if not (validate_format(t1, t2) and validate_sequence(t1, t2)):
        raise bad_request(INVOCATION_POINTS_ERROR)

    start = parse_instant(t1)
    end = parse_instant(t2)
    parsed_period = parse_period(period)

    return generate(start, end, parsed_period, tz, local_offset=local_offset, limit=limit)
