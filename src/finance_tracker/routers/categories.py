"""Expense category routes."""
from fastapi import APIRouter, Query

from finance_tracker.deps import CategoryServiceDep, CurrentUser
from finance_tracker.schemas import (ApiResponse, CategoryCreate,
                                     CategoryData, CategoryListData,
                                     CategoryRead, CategoryUpdate)

router = APIRouter(prefix="/expense-categories", tags=["expense-categories"])


@router.post(
    "",
    status_code=201,
    response_model=ApiResponse[CategoryData],
    response_model_exclude_none=True,
)
def create_category(
    body: CategoryCreate,
    current: CurrentUser,
    service: CategoryServiceDep,
) -> ApiResponse[CategoryData]:
    category = service.create(current.user_id, body.name, icon=body.icon)
    return ApiResponse(
        message="Category created successfully",
        data=CategoryData(category=CategoryRead.from_row(category)),
    )


@router.get("", response_model=ApiResponse[CategoryListData], response_model_exclude_none=True)
def list_categories(
    current: CurrentUser,
    service: CategoryServiceDep,
    search: str | None = Query(default=None, description="Case-insensitive name substring"),
) -> ApiResponse[CategoryListData]:
    categories = [CategoryRead.from_row(c) for c in service.list_for_owner(current.user_id, search)]
    return ApiResponse(data=CategoryListData(categories=categories, total=len(categories)))


@router.put(
    "/{category_id}",
    response_model=ApiResponse[CategoryData],
    response_model_exclude_none=True,
)
def update_category(
    category_id: int,
    body: CategoryUpdate,
    current: CurrentUser,
    service: CategoryServiceDep,
) -> ApiResponse[CategoryData]:
    category = service.update(current.user_id, category_id, body.name, icon=body.icon)
    return ApiResponse(
        message="Category updated successfully",
        data=CategoryData(category=CategoryRead.from_row(category)),
    )


@router.delete("/{category_id}", response_model=ApiResponse, response_model_exclude_none=True)
def delete_category(category_id: int, current: CurrentUser, service: CategoryServiceDep) -> ApiResponse:
    """Delete a category; refused while expenses still reference it."""
    service.delete(current.user_id, category_id)
    return ApiResponse(message="Category deleted successfully")
