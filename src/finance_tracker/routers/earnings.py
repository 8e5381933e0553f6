"""Earning routes."""
from datetime import datetime

from fastapi import APIRouter, Query

from finance_tracker.db import EarningType
from finance_tracker.deps import CurrentUser, EarningServiceDep
from finance_tracker.schemas import (ApiResponse, EarningCreate, EarningData,
                                     EarningListData, EarningUpdate)
from finance_tracker.services import DateRange, Page

router = APIRouter(prefix="/earnings", tags=["earnings"])


@router.post(
    "",
    status_code=201,
    response_model=ApiResponse[EarningData],
    response_model_exclude_none=True,
)
def create_earning(
    body: EarningCreate,
    current: CurrentUser,
    service: EarningServiceDep,
) -> ApiResponse[EarningData]:
    earning = service.create(current.user_id, body)
    return ApiResponse(
        message="Earning transaction created successfully",
        data=EarningData(earning=earning),
    )


@router.get("", response_model=ApiResponse[EarningListData], response_model_exclude_none=True)
def list_earnings(
    current: CurrentUser,
    service: EarningServiceDep,
    page: int = Query(default=1),
    limit: int = Query(default=10),
    start_date: datetime | None = Query(default=None, alias="startDate"),
    end_date: datetime | None = Query(default=None, alias="endDate"),
    month: int | None = Query(default=None, ge=1, le=12),
    year: int | None = Query(default=None, ge=1, le=9999),
    earning_type: EarningType | None = Query(default=None, alias="type"),
    sort: str | None = Query(default=None),
) -> ApiResponse[EarningListData]:
    """List earnings; stats are totals per type over the whole filtered set."""
    data = service.list_earnings(
        current.user_id,
        DateRange.resolve(start_date, end_date, month, year),
        Page(page, limit),
        earning_type=earning_type,
        sort=sort,
    )
    return ApiResponse(data=data)


@router.put("/{earning_id}", response_model=ApiResponse[EarningData], response_model_exclude_none=True)
def update_earning(
    earning_id: int,
    body: EarningUpdate,
    current: CurrentUser,
    service: EarningServiceDep,
) -> ApiResponse[EarningData]:
    earning = service.update(current.user_id, earning_id, body)
    return ApiResponse(
        message="Earning transaction updated successfully",
        data=EarningData(earning=earning),
    )


@router.delete("/{earning_id}", response_model=ApiResponse, response_model_exclude_none=True)
def delete_earning(earning_id: int, current: CurrentUser, service: EarningServiceDep) -> ApiResponse:
    service.delete(current.user_id, earning_id)
    return ApiResponse(message="Earning transaction deleted successfully")
