"""Expense store: batch create, filtered listing with stats, and analytics."""
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from sqlalchemy import case, extract
from sqlmodel import col, func, select

from finance_tracker.core.exceptions import ValidationError
from finance_tracker.db import (ExpenseCategory, ExpenseTransaction,
                                ExpenseType, NeedOrWant)
from finance_tracker.schemas import (CategoryExpenseStats,
                                     CategoryTransactionsData, DailyExpense,
                                     DailyExpensesData, ExpenseCreate,
                                     ExpenseListData, ExpenseRead,
                                     ExpenseStats, ExpenseUpdate,
                                     TopCategoriesData, TopCategory)
from finance_tracker.services.base import OwnedRecordService
from finance_tracker.services.query import (DateRange, Page, month_window,
                                            parse_id_list, parse_sort)
from finance_tracker.utils import round2, utcnow

logger = logging.getLogger(__name__)

DEFAULT_SORT = "-expense_date"
SORT_COLUMNS = {
    "expense_date": ExpenseTransaction.expense_date,
    "amount": ExpenseTransaction.amount,
    "could_have_saved": ExpenseTransaction.could_have_saved,
    "createdAt": ExpenseTransaction.created_at,
    "created_at": ExpenseTransaction.created_at,
}


@dataclass(frozen=True)
class ExpenseFilters:
    """Optional, independently combinable list filters."""

    dates: DateRange = DateRange()
    categories: str | None = None
    expense_type: int | None = None
    need_or_want: NeedOrWant | None = None


class ExpenseService(OwnedRecordService[ExpenseTransaction]):
    """Owner-scoped expense transactions."""

    model = ExpenseTransaction
    resource_name = "Expense"

    # ---- Writes ----
    def create_many(self, owner_id: int, payloads: list[ExpenseCreate]) -> list[ExpenseRead]:
        """Insert a batch atomically; every category/type must belong to the owner."""
        errors = []
        for index, payload in enumerate(payloads):
            errors.extend(
                self._reference_errors(
                    owner_id,
                    payload.expense_category_id,
                    payload.expense_type_id,
                    prefix=f"expenses[{index}].",
                )
            )
        if errors:
            raise ValidationError(errors=errors)

        expenses = [
            ExpenseTransaction(
                user_id=owner_id,
                **payload.model_dump(exclude={"expense_date"}),
                expense_date=payload.expense_date or utcnow(),
            )
            for payload in payloads
        ]
        self._session.add_all(expenses)
        self._commit(*expenses, action="create")
        logger.info("Created %d expense(s) for user %s", len(expenses), owner_id)
        return [self._read(expense) for expense in expenses]

    def update(self, owner_id: int, expense_id: int, payload: ExpenseUpdate) -> ExpenseRead:
        expense = self.get_owned(owner_id, expense_id)
        changes = payload.model_dump(exclude_unset=True, exclude_none=True)
        errors = self._reference_errors(
            owner_id,
            changes.get("expense_category_id"),
            changes.get("expense_type_id"),
        )
        if errors:
            raise ValidationError(errors=errors)
        for field, value in changes.items():
            setattr(expense, field, value)
        expense.updated_at = utcnow()
        self._session.add(expense)
        self._commit(expense, action="update")
        return self._read(expense)

    def _reference_errors(
        self,
        owner_id: int,
        category_id: int | None,
        type_id: int | None,
        prefix: str = "",
    ) -> list[str]:
        errors = []
        if category_id is not None:
            category = self._session.get(ExpenseCategory, category_id)
            if category is None or category.user_id != owner_id:
                errors.append(f"{prefix}expenseCategory: category {category_id} not found")
        if type_id is not None:
            expense_type = self._session.get(ExpenseType, type_id)
            if expense_type is None or expense_type.user_id != owner_id:
                errors.append(f"{prefix}expenseTypeId: expense type {type_id} not found")
        return errors

    # ---- Reads ----
    def list_expenses(
        self,
        owner_id: int,
        filters: ExpenseFilters,
        page: Page,
        sort: str | None = None,
    ) -> ExpenseListData:
        """One page of expenses plus stats over the whole filtered set."""
        where = self._where(owner_id, filters)
        order_by = parse_sort(sort, SORT_COLUMNS, DEFAULT_SORT, ExpenseTransaction.id)
        rows, total = self._page(self._joined_select(), where, page, order_by)
        return ExpenseListData(
            expenses=[ExpenseRead.from_row(*row) for row in rows],
            pagination=page.info(total),
            stats=self._stats(where),
        )

    def category_transactions(
        self,
        owner_id: int,
        category_id: int,
        page: Page,
        month: int | None = None,
        year: int | None = None,
    ) -> CategoryTransactionsData:
        """Expenses of one category (optionally one month), newest first."""
        where = self._where(
            owner_id,
            ExpenseFilters(dates=DateRange.resolve(month=month, year=year)),
        )
        where.append(ExpenseTransaction.expense_category_id == category_id)
        order_by = parse_sort(None, SORT_COLUMNS, DEFAULT_SORT, ExpenseTransaction.id)
        rows, total = self._page(self._joined_select(), where, page, order_by)
        stats = self._stats(where)
        return CategoryTransactionsData(
            transactions=[ExpenseRead.from_row(*row) for row in rows],
            pagination=page.info(total),
            stats=CategoryExpenseStats(**stats.model_dump(), transaction_count=total),
        )

    def daily(self, owner_id: int, month: int | None = None, year: int | None = None) -> DailyExpensesData:
        """Per-day totals for a month (default: current), one entry per calendar day."""
        today = utcnow()
        month = month or today.month
        year = year or today.year
        start, end = month_window(month, year)

        day = extract("day", ExpenseTransaction.expense_date)
        statement = (
            select(day, func.sum(ExpenseTransaction.amount), func.count(ExpenseTransaction.id))
            .where(
                ExpenseTransaction.user_id == owner_id,
                *DateRange(start, end).clauses(ExpenseTransaction.expense_date),
            )
            .group_by(day)
        )
        totals = {
            int(day_of_month): (amount, count)
            for day_of_month, amount, count in self._session.exec(statement).all()
        }
        daily = []
        for day_of_month in range(1, end.day + 1):
            amount, count = totals.get(day_of_month, (0.0, 0))
            daily.append(DailyExpense(day=day_of_month, amount=round2(amount), count=count))
        return DailyExpensesData(month=month, year=year, daily_expenses=daily)

    def top_categories(
        self,
        owner_id: int,
        limit: int = 10,
        month: int | None = None,
        year: int | None = None,
    ) -> TopCategoriesData:
        """Categories ranked by total spend, highest first."""
        where = self._where(owner_id, ExpenseFilters(dates=DateRange.resolve(month=month, year=year)))
        total_amount = func.sum(ExpenseTransaction.amount).label("total_amount")
        statement = (
            select(
                ExpenseTransaction.expense_category_id,
                total_amount,
                func.count(ExpenseTransaction.id),
                ExpenseCategory.name,
                ExpenseCategory.icon,
            )
            .outerjoin(
                ExpenseCategory,
                ExpenseCategory.id == ExpenseTransaction.expense_category_id,
            )
            .where(*where)
            .group_by(
                ExpenseTransaction.expense_category_id,
                ExpenseCategory.name,
                ExpenseCategory.icon,
            )
            .order_by(total_amount.desc())
            .limit(limit)
        )
        return TopCategoriesData(
            top_categories=[
                TopCategory(
                    category_id=category_id,
                    total_amount=round2(amount),
                    count=count,
                    category_name=name,
                    category_icon=icon,
                )
                for category_id, amount, count, name, icon in self._session.exec(statement).all()
            ]
        )

    # ---- Query construction ----
    def _where(self, owner_id: int, filters: ExpenseFilters) -> list[Any]:
        where: list[Any] = [ExpenseTransaction.user_id == owner_id]
        where.extend(filters.dates.clauses(ExpenseTransaction.expense_date))
        category_ids = parse_id_list(filters.categories, "categories")
        if category_ids is not None:
            where.append(col(ExpenseTransaction.expense_category_id).in_(category_ids))
        if filters.expense_type is not None:
            where.append(ExpenseTransaction.expense_type_id == filters.expense_type)
        if filters.need_or_want is not None:
            where.append(ExpenseTransaction.need_or_want == filters.need_or_want)
        return where

    @staticmethod
    def _joined_select():
        return (
            select(
                ExpenseTransaction,
                ExpenseCategory.name,
                ExpenseCategory.icon,
                ExpenseType.name,
            )
            .outerjoin(
                ExpenseCategory,
                ExpenseCategory.id == ExpenseTransaction.expense_category_id,
            )
            .outerjoin(ExpenseType, ExpenseType.id == ExpenseTransaction.expense_type_id)
        )

    def _stats(self, where: list[Any]) -> ExpenseStats:
        amount = ExpenseTransaction.amount
        needs = case((ExpenseTransaction.need_or_want == NeedOrWant.NEED, amount), else_=0)
        wants = case((ExpenseTransaction.need_or_want == NeedOrWant.WANT, amount), else_=0)
        statement = select(
            func.sum(amount),
            func.sum(ExpenseTransaction.could_have_saved),
            func.sum(needs),
            func.sum(wants),
        ).where(*where)
        total, could_have_saved, total_needs, total_wants = self._session.exec(statement).one()
        return ExpenseStats(
            total_amount=round2(total),
            total_could_have_saved=round2(could_have_saved),
            total_needs=round2(total_needs),
            total_wants=round2(total_wants),
        )

    def _read(self, expense: ExpenseTransaction) -> ExpenseRead:
        category = self._session.get(ExpenseCategory, expense.expense_category_id)
        expense_type = self._session.get(ExpenseType, expense.expense_type_id)
        return ExpenseRead.from_row(
            expense,
            category.name if category else None,
            category.icon if category else None,
            expense_type.name if expense_type else None,
        )


def expense_filters(
    start_date: datetime | None = None,
    end_date: datetime | None = None,
    month: int | None = None,
    year: int | None = None,
    categories: str | None = None,
    expense_type: int | None = None,
    need_or_want: NeedOrWant | None = None,
) -> ExpenseFilters:
    """Build ExpenseFilters from raw request parameters."""
    return ExpenseFilters(
        dates=DateRange.resolve(start_date, end_date, month, year),
        categories=categories,
        expense_type=expense_type,
        need_or_want=need_or_want,
    )
