from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from ..domain.errors import ProfileValidationError
from ..domain.metrics import (
    calculate_energy_savings,
    calculate_energy_usage_for_day,
    calculate_energy_usage_simple,
)
from ..domain.models import MAX_DAY, MAX_IN_PERIOD, MIN_DAY
from .schemas import (
    DayMetricResponse,
    DayUsageRequest,
    MetricResponse,
    PeriodResponse,
    ProfileIn,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _rejected(e: ProfileValidationError) -> HTTPException:
    logger.info("Rejected profile: %s (%s)", e.message, e.code)
    return HTTPException(status_code=400, detail=e.to_dict())


@router.get("/period", response_model=PeriodResponse)
async def get_period():
    return PeriodResponse(minutes_per_period=MAX_IN_PERIOD, min_day=MIN_DAY, max_day=MAX_DAY)


@router.post("/usage", response_model=MetricResponse)
async def post_usage(req: ProfileIn):
    try:
        minutes = calculate_energy_usage_simple(req.to_domain())
    except ProfileValidationError as e:
        raise _rejected(e)
    return MetricResponse(metric="usage", minutes=minutes)


@router.post("/savings", response_model=MetricResponse)
async def post_savings(req: ProfileIn):
    try:
        minutes = calculate_energy_savings(req.to_domain())
    except ProfileValidationError as e:
        raise _rejected(e)
    return MetricResponse(metric="savings", minutes=minutes)


@router.post("/usage/day", response_model=DayMetricResponse)
async def post_usage_for_day(req: DayUsageRequest):
    try:
        minutes = calculate_energy_usage_for_day(req.profile.to_domain(), req.day)
    except ProfileValidationError as e:
        raise _rejected(e)
    return DayMetricResponse(metric="usage", day=int(req.day), minutes=minutes)
