"""Saving payloads and list results."""
from datetime import datetime

from pydantic import Field, field_validator

from finance_tracker.db import SavingCategory, SavingTransaction, SavingType
from finance_tracker.schemas.common import ApiModel, NonBlankStr, PaginationInfo
from finance_tracker.utils import to_naive_utc


class SavingCreate(ApiModel):
    amount: float = Field(ge=0)
    type: SavingType
    category: SavingCategory
    title: NonBlankStr
    created_on: datetime | None = Field(default=None, alias="createdOn")

    @field_validator("created_on")
    @classmethod
    def _naive_utc(cls, v: datetime | None) -> datetime | None:
        return to_naive_utc(v)


class SavingUpdate(ApiModel):
    amount: float | None = Field(default=None, ge=0)
    type: SavingType | None = None
    category: SavingCategory | None = None
    title: NonBlankStr | None = None
    created_on: datetime | None = Field(default=None, alias="createdOn")

    @field_validator("created_on")
    @classmethod
    def _naive_utc(cls, v: datetime | None) -> datetime | None:
        return to_naive_utc(v)


class SavingRead(ApiModel):
    id: int
    user_id: int = Field(alias="userId")
    amount: float
    type: SavingType
    category: SavingCategory
    title: str
    created_on: datetime = Field(alias="createdOn")

    @classmethod
    def from_row(cls, saving: SavingTransaction) -> "SavingRead":
        return cls(
            id=saving.id,
            user_id=saving.user_id,
            amount=saving.amount,
            type=saving.type,
            category=saving.category,
            title=saving.title,
            created_on=saving.created_on,
        )


class SavingStats(ApiModel):
    total_added: float = Field(default=0.0, alias="totalAdded")
    total_withdrawn: float = Field(default=0.0, alias="totalWithdrawn")
    net_savings: float = Field(default=0.0, alias="netSavings")


class SavingListData(ApiModel):
    savings: list[SavingRead]
    pagination: PaginationInfo
    stats: SavingStats


class SavingData(ApiModel):
    saving: SavingRead
