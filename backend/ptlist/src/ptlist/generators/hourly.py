from datetime import datetime, timedelta

from ptlist.generators.base import BaseGenerator
from ptlist.models.timestamp_models import PeriodUnit
from ptlist.utils.registry import register_generator


@register_generator(PeriodUnit.hour)
class HourlyGenerator(BaseGenerator):
    """Fixed steps of ``multiplier`` hours from the hour nearest to ``start``."""

    def advance(self, timestamp: datetime, multiplier: int) -> datetime:
        return timestamp + timedelta(hours=multiplier)
