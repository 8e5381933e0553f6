"""Lookup stores for expense categories and expense types.

Names are unique per owner (exact, case-sensitive match). A lookup still
referenced by expenses cannot be deleted.
"""
from typing import Any, TypeVar

from sqlmodel import Session, col, func, select

from finance_tracker.core import ErrorMapper
from finance_tracker.core.exceptions import DuplicateKeyError, ValidationError
from finance_tracker.db import ExpenseCategory, ExpenseTransaction, ExpenseType
from finance_tracker.services.base import OwnedRecordService

LookupT = TypeVar("LookupT", ExpenseCategory, ExpenseType)


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class LookupService(OwnedRecordService[LookupT]):
    """CRUD + name search over one lookup table."""

    def __init__(
        self,
        session: Session,
        model: type[LookupT],
        resource_name: str,
        reference_column: Any,
    ) -> None:
        """Initialize for a lookup table.

        Args:
            session: Request-scoped database session.
            model: ExpenseCategory or ExpenseType.
            resource_name: Label for messages (e.g. "Category").
            reference_column: ExpenseTransaction column pointing at this table.
        """
        self.model = model
        self.resource_name = resource_name
        self._reference_column = reference_column
        super().__init__(session, ErrorMapper(resource_name=resource_name))

    def create(self, owner_id: int, name: str, **fields: Any) -> LookupT:
        self._ensure_unique(owner_id, name)
        record = self.model(user_id=owner_id, name=name, **fields)
        self._session.add(record)
        self._commit(record, action="create")
        return record

    def list_for_owner(self, owner_id: int, search: str | None = None) -> list[LookupT]:
        """All of the owner's lookups ordered by name, optionally filtered by a substring."""
        statement = select(self.model).where(self.model.user_id == owner_id)
        if search:
            statement = statement.where(
                col(self.model.name).ilike(f"%{_escape_like(search)}%", escape="\\")
            )
        return list(self._session.exec(statement.order_by(self.model.name)).all())

    def update(self, owner_id: int, record_id: int, name: str | None = None, **fields: Any) -> LookupT:
        """Rename and/or change fields; uniqueness is re-checked only when the name changes."""
        record = self.get_owned(owner_id, record_id)
        if name is not None and name != record.name:
            self._ensure_unique(owner_id, name, exclude_id=record.id)
            record.name = name
        for field, value in fields.items():
            if value is not None:
                setattr(record, field, value)
        self._session.add(record)
        self._commit(record, action="update")
        return record

    def delete(self, owner_id: int, record_id: int) -> None:
        record = self.get_owned(owner_id, record_id)
        statement = select(func.count()).select_from(ExpenseTransaction).where(
            ExpenseTransaction.user_id == owner_id,
            self._reference_column == record.id,
        )
        in_use = self._session.exec(statement).one()
        if in_use:
            raise ValidationError(
                f"{self.resource_name} is used by {in_use} expense(s) and cannot be deleted"
            )
        self._session.delete(record)
        self._commit(action="delete")

    def _ensure_unique(self, owner_id: int, name: str, exclude_id: int | None = None) -> None:
        statement = select(self.model.id).where(
            self.model.user_id == owner_id,
            self.model.name == name,
        )
        if exclude_id is not None:
            statement = statement.where(self.model.id != exclude_id)
        if self._session.exec(statement).first() is not None:
            raise DuplicateKeyError(f"{self.resource_name} with this name already exists")


def create_category_service(session: Session) -> LookupService[ExpenseCategory]:
    """LookupService over expense categories."""
    return LookupService(
        session,
        ExpenseCategory,
        "Category",
        ExpenseTransaction.expense_category_id,
    )


def create_type_service(session: Session) -> LookupService[ExpenseType]:
    """LookupService over expense types."""
    return LookupService(
        session,
        ExpenseType,
        "Expense type",
        ExpenseTransaction.expense_type_id,
    )
