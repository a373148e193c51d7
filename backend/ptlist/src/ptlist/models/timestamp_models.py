"""
API Data Models

This module defines the typed values produced by request validation and the
Pydantic models used to serialize responses. The response models are also
used to generate the OpenAPI documentation of the service.
"""
from enum import Enum
from typing import List, NamedTuple

from pydantic import BaseModel, Field


class PeriodUnit(str, Enum):
    hour = "h"
    day = "d"
    month = "mo"
    year = "y"


class Period(NamedTuple):
    """A repetition period such as ``3d``: a multiplier in 1..9 and a unit."""

    multiplier: int
    unit: PeriodUnit


class PeriodicTask(BaseModel):
    period: str
    tz: str
    t1: str
    t2: str
    timestamps: List[str] = Field(default_factory=list, description="Occurrences in YYYYMMDDTHHMMSSZ layout")


class ErrorBody(BaseModel):
    status: int
    code: str
    desc: str


class TimestampsResponse(BaseModel):
    status: int
    body: PeriodicTask


class ErrorResponse(BaseModel):
    status: int
    body: ErrorBody
