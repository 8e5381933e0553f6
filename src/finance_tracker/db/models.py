"""Database models for the finance tracker.

Every row except User carries an owning user_id; all queries filter on it.
Timestamps are naive UTC (see utils.utcnow) in plain DateTime columns.
"""
from datetime import datetime
from enum import Enum

from sqlalchemy import DateTime, Index, UniqueConstraint
from sqlmodel import Field, SQLModel

from finance_tracker.utils import utcnow


class LoginMedium(str, Enum):
    """How the user signed in with the identity provider."""

    GOOGLE = "google"
    FACEBOOK = "facebook"
    EMAIL = "email"

    @classmethod
    def from_provider(cls, provider: str | None) -> "LoginMedium":
        """Map a Firebase sign-in provider id (e.g. "google.com"); unknown ids fall back to EMAIL."""
        return _PROVIDER_TO_MEDIUM.get(provider or "", cls.EMAIL)


_PROVIDER_TO_MEDIUM = {
    "google.com": LoginMedium.GOOGLE,
    "facebook.com": LoginMedium.FACEBOOK,
}


class NeedOrWant(str, Enum):
    NEED = "need"
    WANT = "want"


class EarningType(str, Enum):
    SALARY = "salary"
    FREELANCE = "freelance"
    OTHERS = "others"


class SavingType(str, Enum):
    ADD = "add"
    WITHDRAW = "withdraw"


class SavingCategory(str, Enum):
    FIXED = "fixed"
    TOPUP = "topup"


class User(SQLModel, table=True):
    """Account linked to one external (Firebase) identity."""

    __tablename__ = "users"

    id: int | None = Field(default=None, primary_key=True)
    firebase_user_id: str = Field(unique=True, index=True)
    email: str = Field(unique=True, index=True)
    name: str
    login_medium: LoginMedium = Field(default=LoginMedium.GOOGLE)
    created_at: datetime = Field(default_factory=utcnow, sa_type=DateTime)
    updated_at: datetime = Field(default_factory=utcnow, sa_type=DateTime)


class ExpenseCategory(SQLModel, table=True):
    """User-defined expense category (e.g. Groceries)."""

    __tablename__ = "expense_categories"
    __table_args__ = (
        UniqueConstraint("user_id", "name", name="uq_expense_category_user_name"),
    )

    id: int | None = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    name: str
    icon: str = ""
    created_on: datetime = Field(default_factory=utcnow, sa_type=DateTime)


class ExpenseType(SQLModel, table=True):
    """User-defined expense type (e.g. Card, Cash)."""

    __tablename__ = "expense_types"
    __table_args__ = (
        UniqueConstraint("user_id", "name", name="uq_expense_type_user_name"),
    )

    id: int | None = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    name: str
    created_on: datetime = Field(default_factory=utcnow, sa_type=DateTime)


class ExpenseTransaction(SQLModel, table=True):
    """A single spend, tagged with category, type and need/want."""

    __tablename__ = "expense_transactions"
    __table_args__ = (
        Index("ix_expense_user_date", "user_id", "expense_date"),
        Index("ix_expense_user_category", "user_id", "expense_category_id"),
        Index("ix_expense_user_type", "user_id", "expense_type_id"),
        Index("ix_expense_user_need_or_want", "user_id", "need_or_want"),
    )

    id: int | None = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id")
    amount: float = Field(ge=0)
    expense_category_id: int = Field(foreign_key="expense_categories.id")
    expense_type_id: int = Field(foreign_key="expense_types.id")
    need_or_want: NeedOrWant
    could_have_saved: float = Field(default=0.0, ge=0)
    description: str = ""
    expense_date: datetime = Field(default_factory=utcnow, sa_type=DateTime)
    created_at: datetime = Field(default_factory=utcnow, sa_type=DateTime)
    updated_at: datetime = Field(default_factory=utcnow, sa_type=DateTime)


class EarningTransaction(SQLModel, table=True):
    """Income entry (salary, freelance or other)."""

    __tablename__ = "earning_transactions"
    __table_args__ = (
        Index("ix_earning_user_created_on", "user_id", "created_on"),
        Index("ix_earning_user_type", "user_id", "type"),
    )

    id: int | None = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id")
    amount: float = Field(ge=0)
    type: EarningType
    title: str
    created_on: datetime = Field(default_factory=utcnow, sa_type=DateTime)


class SavingTransaction(SQLModel, table=True):
    """Deposit into or withdrawal from savings."""

    __tablename__ = "saving_transactions"
    __table_args__ = (
        Index("ix_saving_user_created_on", "user_id", "created_on"),
        Index("ix_saving_user_type", "user_id", "type"),
        Index("ix_saving_user_category", "user_id", "category"),
    )

    id: int | None = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id")
    amount: float = Field(ge=0)
    type: SavingType
    category: SavingCategory
    title: str
    created_on: datetime = Field(default_factory=utcnow, sa_type=DateTime)
