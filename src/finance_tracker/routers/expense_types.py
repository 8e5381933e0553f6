"""Expense type routes."""
from fastapi import APIRouter, Query

from finance_tracker.deps import CurrentUser, TypeServiceDep
from finance_tracker.schemas import (ApiResponse, TypeCreate, TypeData,
                                     TypeListData, TypeRead, TypeUpdate)

router = APIRouter(prefix="/expense-types", tags=["expense-types"])


@router.post(
    "",
    status_code=201,
    response_model=ApiResponse[TypeData],
    response_model_exclude_none=True,
)
def create_type(body: TypeCreate, current: CurrentUser, service: TypeServiceDep) -> ApiResponse[TypeData]:
    expense_type = service.create(current.user_id, body.name)
    return ApiResponse(
        message="Expense type created successfully",
        data=TypeData(type=TypeRead.from_row(expense_type)),
    )


@router.get("", response_model=ApiResponse[TypeListData], response_model_exclude_none=True)
def list_types(
    current: CurrentUser,
    service: TypeServiceDep,
    search: str | None = Query(default=None, description="Case-insensitive name substring"),
) -> ApiResponse[TypeListData]:
    types = [TypeRead.from_row(t) for t in service.list_for_owner(current.user_id, search)]
    return ApiResponse(data=TypeListData(types=types, total=len(types)))


@router.put("/{type_id}", response_model=ApiResponse[TypeData], response_model_exclude_none=True)
def update_type(
    type_id: int,
    body: TypeUpdate,
    current: CurrentUser,
    service: TypeServiceDep,
) -> ApiResponse[TypeData]:
    expense_type = service.update(current.user_id, type_id, body.name)
    return ApiResponse(
        message="Expense type updated successfully",
        data=TypeData(type=TypeRead.from_row(expense_type)),
    )


@router.delete("/{type_id}", response_model=ApiResponse, response_model_exclude_none=True)
def delete_type(type_id: int, current: CurrentUser, service: TypeServiceDep) -> ApiResponse:
    """Delete an expense type; refused while expenses still reference it."""
    service.delete(current.user_id, type_id)
    return ApiResponse(message="Expense type deleted successfully")
