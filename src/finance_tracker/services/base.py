"""Shared plumbing for owner-scoped record stores."""
from collections.abc import Sequence
from typing import Any, Generic, TypeVar

from sqlmodel import Session, SQLModel, func, select

from finance_tracker.core import PERSISTENCE_EXCEPTIONS, ErrorMapper
from finance_tracker.core.exceptions import NotFoundError
from finance_tracker.services.query import Page

ModelT = TypeVar("ModelT", bound=SQLModel)


class OwnedRecordService(Generic[ModelT]):
    """Base for services over a table whose rows carry a user_id.

    Every lookup goes through the owner; a row owned by someone else is
    reported exactly like a missing one.
    """

    model: type[ModelT]
    resource_name: str = "Record"

    def __init__(self, session: Session, error_mapper: ErrorMapper | None = None) -> None:
        self._session = session
        self._error_mapper = error_mapper or ErrorMapper(resource_name=self.resource_name)

    def get_owned(self, owner_id: int, record_id: int) -> ModelT:
        record = self._session.get(self.model, record_id)
        if record is None or record.user_id != owner_id:
            raise NotFoundError(
                f"{self.resource_name} not found or you do not have permission to access it"
            )
        return record

    def delete(self, owner_id: int, record_id: int) -> None:
        record = self.get_owned(owner_id, record_id)
        self._session.delete(record)
        self._commit(action="delete")

    def _count(self, where: Sequence[Any]) -> int:
        statement = select(func.count()).select_from(self.model).where(*where)
        return self._session.exec(statement).one()

    def _page(self, statement: Any, where: Sequence[Any], page: Page, order_by: Sequence[Any]):
        """Apply filters, order and page window to `statement`; return (rows, total)."""
        total = self._count(where)
        rows = self._session.exec(
            statement.where(*where).order_by(*order_by).offset(page.offset).limit(page.size)
        ).all()
        return rows, total

    def _commit(self, *records: SQLModel, action: str = "save") -> None:
        """Commit pending changes, mapping store failures; refresh `records` afterwards."""
        try:
            self._session.commit()
        except PERSISTENCE_EXCEPTIONS as e:
            self._session.rollback()
            self._error_mapper.raise_domain(e, action=action)
        for record in records:
            self._session.refresh(record)

    def _sum_by(self, column: Any, where: Sequence[Any]) -> dict[Any, float]:
        """Total amount per distinct value of `column` over the filtered rows."""
        statement = (
            select(column, func.sum(self.model.amount))
            .where(*where)
            .group_by(column)
        )
        return {key: float(total or 0) for key, total in self._session.exec(statement).all()}
