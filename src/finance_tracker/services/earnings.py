"""Earning store: create, list with per-type totals, update, delete."""
from typing import Any

from sqlmodel import select

from finance_tracker.db import EarningTransaction, EarningType
from finance_tracker.schemas import (EarningCreate, EarningListData,
                                     EarningRead, EarningStats, EarningUpdate)
from finance_tracker.services.base import OwnedRecordService
from finance_tracker.services.query import DateRange, Page, parse_sort
from finance_tracker.utils import round2, utcnow

DEFAULT_SORT = "-createdOn"
SORT_COLUMNS = {
    "createdOn": EarningTransaction.created_on,
    "created_on": EarningTransaction.created_on,
    "amount": EarningTransaction.amount,
    "title": EarningTransaction.title,
    "type": EarningTransaction.type,
}


class EarningService(OwnedRecordService[EarningTransaction]):
    model = EarningTransaction
    resource_name = "Earning"

    def create(self, owner_id: int, payload: EarningCreate) -> EarningRead:
        earning = EarningTransaction(
            user_id=owner_id,
            amount=payload.amount,
            type=payload.type,
            title=payload.title,
            created_on=payload.created_on or utcnow(),
        )
        self._session.add(earning)
        self._commit(earning, action="create")
        return EarningRead.from_row(earning)

    def update(self, owner_id: int, earning_id: int, payload: EarningUpdate) -> EarningRead:
        earning = self.get_owned(owner_id, earning_id)
        for field, value in payload.model_dump(exclude_unset=True, exclude_none=True).items():
            setattr(earning, field, value)
        self._session.add(earning)
        self._commit(earning, action="update")
        return EarningRead.from_row(earning)

    def list_earnings(
        self,
        owner_id: int,
        dates: DateRange,
        page: Page,
        earning_type: EarningType | None = None,
        sort: str | None = None,
    ) -> EarningListData:
        where: list[Any] = [EarningTransaction.user_id == owner_id]
        where.extend(dates.clauses(EarningTransaction.created_on))
        if earning_type is not None:
            where.append(EarningTransaction.type == earning_type)
        order_by = parse_sort(sort, SORT_COLUMNS, DEFAULT_SORT, EarningTransaction.id)
        rows, total = self._page(select(EarningTransaction), where, page, order_by)
        return EarningListData(
            earnings=[EarningRead.from_row(row) for row in rows],
            pagination=page.info(total),
            stats=self._stats(where),
        )

    def _stats(self, where: list[Any]) -> EarningStats:
        by_type = self._sum_by(EarningTransaction.type, where)
        return EarningStats(
            total_earnings=round2(sum(by_type.values())),
            by_salary=round2(by_type.get(EarningType.SALARY)),
            by_freelance=round2(by_type.get(EarningType.FREELANCE)),
            by_others=round2(by_type.get(EarningType.OTHERS)),
        )
