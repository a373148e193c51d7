from datetime import datetime, timedelta, tzinfo
from typing import List, Optional

from loguru import logger

from ptlist.models.timestamp_models import Period
from ptlist.utils.utils import generatorsRegister

# Importing the modules registers one generator per period unit
from .base import BaseGenerator
from .hourly import HourlyGenerator
from .daily import DailyGenerator
from .calendar import CalendarGenerator


def generate(
    start: datetime,
    end: datetime,
    period: Period,
    tz: tzinfo,
    *,
    local_offset: Optional[timedelta] = None,
    limit: Optional[int] = None,
) -> List[str]:
    """
    Produce the occurrences of ``period`` between ``start`` and ``end``.

    Occurrences are strictly before ``end``; an empty list means the anchor
    already reached ``end``. Raises ``ApplicationError`` for an unregistered
    unit or when more than ``limit`` occurrences would be produced.
    """
    generator = generatorsRegister.get_generator(period.unit)
    logger.debug(f"  › [Generator] {type(generator).__name__} x{period.multiplier} from {start} to {end}")
    return generator.generate(start, end, period.multiplier, tz, local_offset=local_offset, limit=limit)


__all__ = [
    "BaseGenerator",
    "HourlyGenerator",
    "DailyGenerator",
    "CalendarGenerator",
    "generate",
]
