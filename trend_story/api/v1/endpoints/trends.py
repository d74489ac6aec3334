from typing import List

from fastapi import APIRouter, Depends

from ...dependencies import get_trend_query_service
from ....schemas.responses import DayRecordsResponse, DateEntry, ErrorResponse
from ....services.trend_query_service import TrendQueryService

router = APIRouter()


@router.get(
    "/latest",
    response_model=DayRecordsResponse,
    response_model_exclude_none=True,
    responses={500: {"model": ErrorResponse}}
)
async def get_latest(query_service: TrendQueryService = Depends(get_trend_query_service)):
    """Get all news records from the latest date with keywords"""
    return query_service.get_latest()


@router.get(
    "/dates",
    response_model=List[DateEntry],
    response_model_exclude_none=True,
    responses={500: {"model": ErrorResponse}}
)
async def get_dates(query_service: TrendQueryService = Depends(get_trend_query_service)):
    """List every available day in yyyymmdd form with its browse URL"""
    return query_service.get_all_dates()


@router.get(
    "/date/{date}",
    response_model=DayRecordsResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}
)
async def get_by_date(date: str, query_service: TrendQueryService = Depends(get_trend_query_service)):
    """Get all news records of one yyyymmdd day"""
    return query_service.get_by_date(date)
