"""
API Routes

This module defines the FastAPI routes.
It reads the query parameters of incoming HTTP requests, delegates
validation and timestamp generation to the service, and returns the
results wrapped in the JSON envelope. Validation failures are raised as
``ApplicationError`` and rendered by the handler installed in ``ptlist.main``.
"""

from fastapi import APIRouter, Depends, Query

from ptlist.config import Settings, get_settings
from ptlist.models.timestamp_models import ErrorResponse, TimestampsResponse
from ptlist.services.timestamp_service import TimestampService


def get_service(settings: Settings = Depends(get_settings)) -> TimestampService:
    return TimestampService(max_timestamps=settings.max_timestamps)


router = APIRouter(tags=["timestamps"])


@router.get(
    "/ptlist",
    response_model=TimestampsResponse,
    responses={400: {"model": ErrorResponse}},
)
def get_all_timestamps(
    period: str = Query("", description="Repetition period: 1-9 followed by h, d, mo or y"),
    tz: str = Query("", description="IANA timezone name, e.g. Europe/Athens"),
    t1: str = Query("", description="First invocation point, YYYYMMDDTHHMMSSZ"),
    t2: str = Query("", description="Second invocation point, YYYYMMDDTHHMMSSZ"),
    svc: TimestampService = Depends(get_service),
):
    return svc.list_timestamps(period=period, tz=tz, t1=t1, t2=t2)
