from datetime import datetime, timedelta, tzinfo
from typing import List, Optional

from loguru import logger

from ptlist.errors import TOO_MANY_TIMESTAMPS_ERROR, bad_request
from ptlist.models.timestamp_models import PeriodUnit
from ptlist.utils.dates import format_instant, round_to_hour


class BaseGenerator:
    """
    Walks from an anchor derived from ``start`` towards ``end`` one period
    at a time. Subclasses decide how the anchor is normalized, how one step
    is taken and how an instant is rendered.
    """

    def __init__(self, unit: PeriodUnit):
        self.unit = unit

    def anchor(self, start: datetime, local_offset: Optional[timedelta] = None) -> datetime:
        return round_to_hour(start)

    def advance(self, timestamp: datetime, multiplier: int) -> datetime:
        raise NotImplementedError

    def render(self, timestamp: datetime, tz: tzinfo) -> str:
        return format_instant(timestamp)

    def generate(
        self,
        start: datetime,
        end: datetime,
        multiplier: int,
        tz: tzinfo,
        *,
        local_offset: Optional[timedelta] = None,
        limit: Optional[int] = None,
    ) -> List[str]:
        timestamps: List[str] = []
        try:
            timestamp = self.anchor(start, local_offset)
        except OverflowError:
            # Anchor lies past year 9999, so it cannot precede ``end``
            return timestamps

        while timestamp < end:
            if limit is not None and len(timestamps) >= limit:
                logger.warning(f"  ! [Generator] Range exceeds {limit} timestamps for period {multiplier}{self.unit.value}")
                raise bad_request(TOO_MANY_TIMESTAMPS_ERROR)
            try:
                # Wall time in a zone east of UTC can pass year 9999 before the instant does
                timestamps.append(self.render(timestamp, tz))
                timestamp = self.advance(timestamp, multiplier)
            except OverflowError:
                break

        return timestamps
