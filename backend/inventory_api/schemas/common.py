from math import ceil
from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")

SortOrder = Literal["asc", "desc"]


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class PaginationOut(ApiModel):
    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool

    @classmethod
    def build(cls, *, page: int, limit: int, total: int) -> "PaginationOut":
        total_pages = ceil(total / limit) if limit else 0
        return cls(
            page=page,
            limit=limit,
            total=total,
            total_pages=total_pages,
            has_next=page < total_pages,
            has_prev=page > 1,
        )


class ItemResponse(ApiModel, Generic[T]):
    success: bool = True
    data: T


class ListResponse(ApiModel, Generic[T]):
    success: bool = True
    data: list[T]
    pagination: PaginationOut


class DeletedResponse(ApiModel):
    success: bool = True
    data: None = None


class ErrorOut(ApiModel):
    message: str
    status_code: int = Field(ge=400, le=599)
    error: Any = None
