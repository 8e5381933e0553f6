"""Expense routes: batch create, filtered listing, update/delete and analytics."""
from datetime import datetime

from fastapi import APIRouter, Query

from finance_tracker.db import NeedOrWant
from finance_tracker.deps import CurrentUser, ExpenseServiceDep
from finance_tracker.schemas import (ApiResponse, CategoryTransactionsData,
                                     DailyExpensesData, ExpenseBatchCreate,
                                     ExpenseData, ExpenseListData,
                                     ExpensesCreatedData, ExpenseUpdate,
                                     TopCategoriesData)
from finance_tracker.services import Page, expense_filters

router = APIRouter(prefix="/expenses", tags=["expenses"])


@router.post(
    "",
    status_code=201,
    response_model=ApiResponse[ExpensesCreatedData],
    response_model_exclude_none=True,
)
def create_expenses(
    body: ExpenseBatchCreate,
    current: CurrentUser,
    service: ExpenseServiceDep,
) -> ApiResponse[ExpensesCreatedData]:
    """Create several expenses at once; nothing is stored if any entry is invalid."""
    created = service.create_many(current.user_id, body.expenses)
    return ApiResponse(
        message=f"{len(created)} expense(s) created successfully",
        data=ExpensesCreatedData(expenses=created),
    )


@router.get("", response_model=ApiResponse[ExpenseListData], response_model_exclude_none=True)
def list_expenses(
    current: CurrentUser,
    service: ExpenseServiceDep,
    page: int = Query(default=1),
    limit: int = Query(default=10),
    start_date: datetime | None = Query(default=None, alias="startDate"),
    end_date: datetime | None = Query(default=None, alias="endDate"),
    month: int | None = Query(default=None, ge=1, le=12),
    year: int | None = Query(default=None, ge=1, le=9999),
    categories: str | None = Query(default=None, description="Comma-separated category ids"),
    expense_type: int | None = Query(default=None, alias="expenseType"),
    need_or_want: NeedOrWant | None = Query(default=None),
    sort: str | None = Query(default=None, description="Field name, '-' prefix for descending"),
) -> ApiResponse[ExpenseListData]:
    """List expenses with filters, sorting and pagination.

    Stats cover every expense matching the filters, not just the returned page.
    month + year takes precedence over startDate/endDate.
    """
    filters = expense_filters(
        start_date, end_date, month, year, categories, expense_type, need_or_want
    )
    data = service.list_expenses(current.user_id, filters, Page(page, limit), sort)
    return ApiResponse(data=data)


@router.get(
    "/analytics/daily",
    response_model=ApiResponse[DailyExpensesData],
    response_model_exclude_none=True,
)
def get_daily_expenses(
    current: CurrentUser,
    service: ExpenseServiceDep,
    month: int | None = Query(default=None, ge=1, le=12),
    year: int | None = Query(default=None, ge=1, le=9999),
) -> ApiResponse[DailyExpensesData]:
    """Per-day totals for a month (defaults to the current one), zero-filled."""
    return ApiResponse(data=service.daily(current.user_id, month, year))


@router.get(
    "/analytics/top-categories",
    response_model=ApiResponse[TopCategoriesData],
    response_model_exclude_none=True,
)
def get_top_categories(
    current: CurrentUser,
    service: ExpenseServiceDep,
    month: int | None = Query(default=None, ge=1, le=12),
    year: int | None = Query(default=None, ge=1, le=9999),
    limit: int = Query(default=10, ge=1, le=100),
) -> ApiResponse[TopCategoriesData]:
    return ApiResponse(data=service.top_categories(current.user_id, limit, month, year))


@router.get(
    "/analytics/category-transactions/{category_id}",
    response_model=ApiResponse[CategoryTransactionsData],
    response_model_exclude_none=True,
)
def get_category_transactions(
    category_id: int,
    current: CurrentUser,
    service: ExpenseServiceDep,
    month: int | None = Query(default=None, ge=1, le=12),
    year: int | None = Query(default=None, ge=1, le=9999),
    page: int = Query(default=1),
    limit: int = Query(default=50),
) -> ApiResponse[CategoryTransactionsData]:
    """Expenses of one category with its stats and transaction count."""
    data = service.category_transactions(
        current.user_id, category_id, Page(page, limit), month, year
    )
    return ApiResponse(data=data)


@router.put(
    "/{expense_id}",
    response_model=ApiResponse[ExpenseData],
    response_model_exclude_none=True,
)
def update_expense(
    expense_id: int,
    body: ExpenseUpdate,
    current: CurrentUser,
    service: ExpenseServiceDep,
) -> ApiResponse[ExpenseData]:
    expense = service.update(current.user_id, expense_id, body)
    return ApiResponse(message="Expense updated successfully", data=ExpenseData(expense=expense))


@router.delete("/{expense_id}", response_model=ApiResponse, response_model_exclude_none=True)
def delete_expense(expense_id: int, current: CurrentUser, service: ExpenseServiceDep) -> ApiResponse:
    service.delete(current.user_id, expense_id)
    return ApiResponse(message="Expense deleted successfully")
