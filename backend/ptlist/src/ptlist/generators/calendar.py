from datetime import datetime

from ptlist.generators.base import BaseGenerator
from ptlist.models.timestamp_models import PeriodUnit
from ptlist.utils.dates import add_months
from ptlist.utils.registry import register_generators


MONTHS_PER_UNIT = {
    PeriodUnit.month: 1,
    PeriodUnit.year: 12,
}


@register_generators(PeriodUnit.month, PeriodUnit.year)
class CalendarGenerator(BaseGenerator):
    """
    Monthly and yearly occurrences.

    Each step adds calendar months to the previous occurrence with roll-over
    (see ``add_months``), so a day pushed into the next month stays there.
    """

    def __init__(self, unit: PeriodUnit):
        super().__init__(unit)
        self.months_per_unit = MONTHS_PER_UNIT[unit]

    def advance(self, timestamp: datetime, multiplier: int) -> datetime:
        return add_months(timestamp, multiplier * self.months_per_unit)
