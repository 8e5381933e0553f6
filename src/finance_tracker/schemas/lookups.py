"""Expense category and expense type payloads."""
from datetime import datetime

from pydantic import Field

from finance_tracker.db import ExpenseCategory, ExpenseType
from finance_tracker.schemas.common import ApiModel, NonBlankStr


class CategoryCreate(ApiModel):
    name: NonBlankStr = Field(alias="expenseCategoryName")
    icon: str = Field(default="", alias="expenseCategoryIcon")


class CategoryUpdate(ApiModel):
    name: NonBlankStr | None = Field(default=None, alias="expenseCategoryName")
    icon: str | None = Field(default=None, alias="expenseCategoryIcon")


class CategoryRead(ApiModel):
    id: int
    user_id: int = Field(alias="userId")
    name: str = Field(alias="expenseCategoryName")
    icon: str = Field(alias="expenseCategoryIcon")
    created_on: datetime = Field(alias="createdOn")

    @classmethod
    def from_row(cls, category: ExpenseCategory) -> "CategoryRead":
        return cls(
            id=category.id,
            user_id=category.user_id,
            name=category.name,
            icon=category.icon,
            created_on=category.created_on,
        )


class CategoryListData(ApiModel):
    categories: list[CategoryRead]
    total: int


class CategoryData(ApiModel):
    category: CategoryRead


class TypeCreate(ApiModel):
    name: NonBlankStr = Field(alias="expenseTypeName")


class TypeUpdate(ApiModel):
    name: NonBlankStr | None = Field(default=None, alias="expenseTypeName")


class TypeRead(ApiModel):
    id: int
    user_id: int = Field(alias="userId")
    name: str = Field(alias="expenseTypeName")
    created_on: datetime = Field(alias="createdOn")

    @classmethod
    def from_row(cls, expense_type: ExpenseType) -> "TypeRead":
        return cls(
            id=expense_type.id,
            user_id=expense_type.user_id,
            name=expense_type.name,
            created_on=expense_type.created_on,
        )


class TypeListData(ApiModel):
    types: list[TypeRead]
    total: int


class TypeData(ApiModel):
    type: TypeRead
