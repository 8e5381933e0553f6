"""Earning payloads and list results."""
from datetime import datetime

from pydantic import Field, field_validator

from finance_tracker.db import EarningTransaction, EarningType
from finance_tracker.schemas.common import ApiModel, NonBlankStr, PaginationInfo
from finance_tracker.utils import to_naive_utc


class EarningCreate(ApiModel):
    amount: float = Field(ge=0)
    type: EarningType
    title: NonBlankStr
    created_on: datetime | None = Field(default=None, alias="createdOn")

    @field_validator("created_on")
    @classmethod
    def _naive_utc(cls, v: datetime | None) -> datetime | None:
        return to_naive_utc(v)


class EarningUpdate(ApiModel):
    amount: float | None = Field(default=None, ge=0)
    type: EarningType | None = None
    title: NonBlankStr | None = None
    created_on: datetime | None = Field(default=None, alias="createdOn")

    @field_validator("created_on")
    @classmethod
    def _naive_utc(cls, v: datetime | None) -> datetime | None:
        return to_naive_utc(v)


class EarningRead(ApiModel):
    id: int
    user_id: int = Field(alias="userId")
    amount: float
    type: EarningType
    title: str
    created_on: datetime = Field(alias="createdOn")

    @classmethod
    def from_row(cls, earning: EarningTransaction) -> "EarningRead":
        return cls(
            id=earning.id,
            user_id=earning.user_id,
            amount=earning.amount,
            type=earning.type,
            title=earning.title,
            created_on=earning.created_on,
        )


class EarningStats(ApiModel):
    total_earnings: float = Field(default=0.0, alias="totalEarnings")
    by_salary: float = Field(default=0.0, alias="bySalary")
    by_freelance: float = Field(default=0.0, alias="byFreelance")
    by_others: float = Field(default=0.0, alias="byOthers")


class EarningListData(ApiModel):
    earnings: list[EarningRead]
    pagination: PaginationInfo
    stats: EarningStats


class EarningData(ApiModel):
    earning: EarningRead
