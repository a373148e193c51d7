import time
import uuid
from typing import Optional

from loguru import logger

from ptlist.models.timestamp_models import PeriodicTask, TimestampsResponse
from ptlist.validation.validator import validate_invocation_points, validate_timezone


class TimestampService:
    def __init__(self, max_timestamps: Optional[int] = None):
        self.max_timestamps = max_timestamps

    def list_timestamps(self, period: str, tz: str, t1: str, t2: str) -> TimestampsResponse:
        """
        Validates one ``/ptlist`` query and computes its timestamps.

        The timezone is checked first, then the invocation points, then the
        period. Any failure raises ``ApplicationError``.
        """
        task_id = str(uuid.uuid4())
        ctx_logger = logger.bind(task_id=task_id, period=period, tz=tz, t1=t1, t2=t2)
        ctx_logger.info("► [Service] Computing timestamps")

        zone = validate_timezone(tz)

        start_time = time.perf_counter()
        timestamps = validate_invocation_points(t1, t2, period, zone, limit=self.max_timestamps)
        elapsed = time.perf_counter() - start_time

        ctx_logger.info(f"✔ [Service] {len(timestamps)} timestamps computed in {elapsed:.4f} sec.")
        return TimestampsResponse(
            status=200,
            body=PeriodicTask(period=period, tz=zone.key, t1=t1, t2=t2, timestamps=timestamps),
        )
