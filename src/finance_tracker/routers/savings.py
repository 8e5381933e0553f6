"""Saving routes."""
from datetime import datetime

from fastapi import APIRouter, Query

from finance_tracker.db import SavingCategory, SavingType
from finance_tracker.deps import CurrentUser, SavingServiceDep
from finance_tracker.schemas import (ApiResponse, SavingCreate, SavingData,
                                     SavingListData, SavingUpdate)
from finance_tracker.services import DateRange, Page

router = APIRouter(prefix="/savings", tags=["savings"])


@router.post(
    "",
    status_code=201,
    response_model=ApiResponse[SavingData],
    response_model_exclude_none=True,
)
def create_saving(
    body: SavingCreate,
    current: CurrentUser,
    service: SavingServiceDep,
) -> ApiResponse[SavingData]:
    saving = service.create(current.user_id, body)
    return ApiResponse(
        message="Saving transaction created successfully",
        data=SavingData(saving=saving),
    )


@router.get("", response_model=ApiResponse[SavingListData], response_model_exclude_none=True)
def list_savings(
    current: CurrentUser,
    service: SavingServiceDep,
    page: int = Query(default=1),
    limit: int = Query(default=10),
    start_date: datetime | None = Query(default=None, alias="startDate"),
    end_date: datetime | None = Query(default=None, alias="endDate"),
    month: int | None = Query(default=None, ge=1, le=12),
    year: int | None = Query(default=None, ge=1, le=9999),
    saving_type: SavingType | None = Query(default=None, alias="type"),
    category: SavingCategory | None = Query(default=None),
    sort: str | None = Query(default=None),
) -> ApiResponse[SavingListData]:
    """List savings; stats report added, withdrawn and the net."""
    data = service.list_savings(
        current.user_id,
        DateRange.resolve(start_date, end_date, month, year),
        Page(page, limit),
        saving_type=saving_type,
        category=category,
        sort=sort,
    )
    return ApiResponse(data=data)


@router.put("/{saving_id}", response_model=ApiResponse[SavingData], response_model_exclude_none=True)
def update_saving(
    saving_id: int,
    body: SavingUpdate,
    current: CurrentUser,
    service: SavingServiceDep,
) -> ApiResponse[SavingData]:
    saving = service.update(current.user_id, saving_id, body)
    return ApiResponse(
        message="Saving transaction updated successfully",
        data=SavingData(saving=saving),
    )


@router.delete("/{saving_id}", response_model=ApiResponse, response_model_exclude_none=True)
def delete_saving(saving_id: int, current: CurrentUser, service: SavingServiceDep) -> ApiResponse:
    service.delete(current.user_id, saving_id)
    return ApiResponse(message="Saving transaction deleted successfully")
