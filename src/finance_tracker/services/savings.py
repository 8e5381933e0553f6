"""Saving store: deposits and withdrawals with a running net."""
from typing import Any

from sqlmodel import select

from finance_tracker.db import SavingCategory, SavingTransaction, SavingType
from finance_tracker.schemas import (SavingCreate, SavingListData, SavingRead,
                                     SavingStats, SavingUpdate)
from finance_tracker.services.base import OwnedRecordService
from finance_tracker.services.query import DateRange, Page, parse_sort
from finance_tracker.utils import round2, utcnow

DEFAULT_SORT = "-createdOn"
SORT_COLUMNS = {
    "createdOn": SavingTransaction.created_on,
    "created_on": SavingTransaction.created_on,
    "amount": SavingTransaction.amount,
    "title": SavingTransaction.title,
    "type": SavingTransaction.type,
    "category": SavingTransaction.category,
}


class SavingService(OwnedRecordService[SavingTransaction]):
    model = SavingTransaction
    resource_name = "Saving"

    def create(self, owner_id: int, payload: SavingCreate) -> SavingRead:
        saving = SavingTransaction(
            user_id=owner_id,
            amount=payload.amount,
            type=payload.type,
            category=payload.category,
            title=payload.title,
            created_on=payload.created_on or utcnow(),
        )
        self._session.add(saving)
        self._commit(saving, action="create")
        return SavingRead.from_row(saving)

    def update(self, owner_id: int, saving_id: int, payload: SavingUpdate) -> SavingRead:
        saving = self.get_owned(owner_id, saving_id)
        for field, value in payload.model_dump(exclude_unset=True, exclude_none=True).items():
            setattr(saving, field, value)
        self._session.add(saving)
        self._commit(saving, action="update")
        return SavingRead.from_row(saving)

    def list_savings(
        self,
        owner_id: int,
        dates: DateRange,
        page: Page,
        saving_type: SavingType | None = None,
        category: SavingCategory | None = None,
        sort: str | None = None,
    ) -> SavingListData:
        where: list[Any] = [SavingTransaction.user_id == owner_id]
        where.extend(dates.clauses(SavingTransaction.created_on))
        if saving_type is not None:
            where.append(SavingTransaction.type == saving_type)
        if category is not None:
            where.append(SavingTransaction.category == category)
        order_by = parse_sort(sort, SORT_COLUMNS, DEFAULT_SORT, SavingTransaction.id)
        rows, total = self._page(select(SavingTransaction), where, page, order_by)
        return SavingListData(
            savings=[SavingRead.from_row(row) for row in rows],
            pagination=page.info(total),
            stats=self._stats(where),
        )

    def _stats(self, where: list[Any]) -> SavingStats:
        by_type = self._sum_by(SavingTransaction.type, where)
        added = round2(by_type.get(SavingType.ADD))
        withdrawn = round2(by_type.get(SavingType.WITHDRAW))
        return SavingStats(
            total_added=added,
            total_withdrawn=withdrawn,
            net_savings=round2(added - withdrawn),
        )
