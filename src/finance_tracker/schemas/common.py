"""Envelope and pagination shapes shared by every endpoint."""
from typing import Annotated, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

T = TypeVar("T")

NonBlankStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class ApiModel(BaseModel):
    """Base for API payloads: wire names are aliases, Python names work too."""

    model_config = ConfigDict(populate_by_name=True)


class ApiResponse(ApiModel, Generic[T]):
    """Response envelope: {success, message?, data?, errors?}."""

    success: bool = True
    message: str | None = None
    data: T | None = None
    errors: list[str] | None = None


class PaginationInfo(ApiModel):
    current_page: int = Field(alias="currentPage")
    total_pages: int = Field(alias="totalPages")
    total_items: int = Field(alias="totalItems")
    items_per_page: int = Field(alias="itemsPerPage")
