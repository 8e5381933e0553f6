"""Expense payloads, list results and analytics shapes."""
from datetime import datetime

from pydantic import Field, field_validator

from finance_tracker.db import ExpenseTransaction, NeedOrWant
from finance_tracker.schemas.common import ApiModel, PaginationInfo
from finance_tracker.utils import to_naive_utc


class ExpenseCreate(ApiModel):
    amount: float = Field(ge=0)
    expense_category_id: int = Field(alias="expenseCategory")
    expense_type_id: int = Field(alias="expenseTypeId")
    need_or_want: NeedOrWant
    could_have_saved: float = Field(default=0.0, ge=0)
    description: str = ""
    expense_date: datetime | None = None

    @field_validator("expense_date")
    @classmethod
    def _naive_utc(cls, v: datetime | None) -> datetime | None:
        return to_naive_utc(v)

    @field_validator("description")
    @classmethod
    def _strip(cls, v: str) -> str:
        return v.strip()


class ExpenseBatchCreate(ApiModel):
    expenses: list[ExpenseCreate] = Field(min_length=1)


class ExpenseUpdate(ApiModel):
    """Partial update; only fields present in the body are applied."""

    amount: float | None = Field(default=None, ge=0)
    expense_category_id: int | None = Field(default=None, alias="expenseCategory")
    expense_type_id: int | None = Field(default=None, alias="expenseTypeId")
    need_or_want: NeedOrWant | None = None
    could_have_saved: float | None = Field(default=None, ge=0)
    description: str | None = None
    expense_date: datetime | None = None

    @field_validator("expense_date")
    @classmethod
    def _naive_utc(cls, v: datetime | None) -> datetime | None:
        return to_naive_utc(v)


class ExpenseRead(ApiModel):
    id: int
    user_id: int = Field(alias="userId")
    amount: float
    expense_category_id: int = Field(alias="expenseCategory")
    expense_type_id: int = Field(alias="expenseTypeId")
    category_name: str | None = Field(default=None, alias="categoryName")
    category_icon: str | None = Field(default=None, alias="categoryIcon")
    type_name: str | None = Field(default=None, alias="typeName")
    need_or_want: NeedOrWant
    could_have_saved: float
    description: str
    expense_date: datetime
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    @classmethod
    def from_row(
        cls,
        expense: ExpenseTransaction,
        category_name: str | None = None,
        category_icon: str | None = None,
        type_name: str | None = None,
    ) -> "ExpenseRead":
        return cls(
            id=expense.id,
            user_id=expense.user_id,
            amount=expense.amount,
            expense_category_id=expense.expense_category_id,
            expense_type_id=expense.expense_type_id,
            category_name=category_name,
            category_icon=category_icon,
            type_name=type_name,
            need_or_want=expense.need_or_want,
            could_have_saved=expense.could_have_saved,
            description=expense.description,
            expense_date=expense.expense_date,
            created_at=expense.created_at,
            updated_at=expense.updated_at,
        )


class ExpenseStats(ApiModel):
    total_amount: float = Field(default=0.0, alias="totalAmount")
    total_could_have_saved: float = Field(default=0.0, alias="totalCouldHaveSaved")
    total_needs: float = Field(default=0.0, alias="totalNeeds")
    total_wants: float = Field(default=0.0, alias="totalWants")


class CategoryExpenseStats(ExpenseStats):
    transaction_count: int = Field(default=0, alias="transactionCount")


class ExpenseListData(ApiModel):
    expenses: list[ExpenseRead]
    pagination: PaginationInfo
    stats: ExpenseStats


class ExpensesCreatedData(ApiModel):
    expenses: list[ExpenseRead]


class ExpenseData(ApiModel):
    expense: ExpenseRead


class DailyExpense(ApiModel):
    day: int
    amount: float = 0.0
    count: int = 0


class DailyExpensesData(ApiModel):
    month: int
    year: int
    daily_expenses: list[DailyExpense] = Field(alias="dailyExpenses")


class TopCategory(ApiModel):
    category_id: int = Field(alias="categoryId")
    total_amount: float = Field(alias="totalAmount")
    count: int
    category_name: str | None = Field(default=None, alias="categoryName")
    category_icon: str | None = Field(default=None, alias="categoryIcon")


class TopCategoriesData(ApiModel):
    top_categories: list[TopCategory] = Field(alias="topCategories")


class CategoryTransactionsData(ApiModel):
    transactions: list[ExpenseRead]
    pagination: PaginationInfo
    stats: CategoryExpenseStats
