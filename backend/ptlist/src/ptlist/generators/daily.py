from datetime import datetime, timedelta, tzinfo
from typing import Optional

from ptlist.generators.base import BaseGenerator
from ptlist.models.timestamp_models import PeriodUnit
from ptlist.utils.dates import format_instant, local_utc_offset, truncate
from ptlist.utils.registry import register_generator


@register_generator(PeriodUnit.day)
class DailyGenerator(BaseGenerator):
    """
    Daily occurrences.

    The anchor is ``start`` floored to a multiple of the process local UTC
    offset (taken at ``start``), not rounded. A zero or negative offset
    leaves ``start`` as is. Each occurrence is shown as wall time in the
    requested zone.
    """

    def anchor(self, start: datetime, local_offset: Optional[timedelta] = None) -> datetime:
        if local_offset is None:
            local_offset = local_utc_offset(start)
        return truncate(start, local_offset)

    def advance(self, timestamp: datetime, multiplier: int) -> datetime:
        return timestamp + timedelta(days=multiplier)

    def render(self, timestamp: datetime, tz: tzinfo) -> str:
        return format_instant(timestamp.astimezone(tz))
