"""Response envelope schemas shared by all endpoints."""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Pagination(BaseModel):
    """Pagination metadata for a windowed list."""

    current_page: int
    per_page: int
    total: int
    total_pages: int


class DataResponse(BaseModel, Generic[T]):
    """Successful response wrapping a payload."""

    success: bool = True
    data: T


class PaginatedResponse(BaseModel, Generic[T]):
    """Successful response wrapping one page of results."""

    success: bool = True
    data: list[T]
    pagination: Pagination


class MessageResponse(BaseModel):
    """Successful response carrying only a message."""

    success: bool = True
    message: str


class ErrorResponse(BaseModel):
    """Failed response."""

    success: bool = False
    error: str


ERROR_RESPONSES: dict[int | str, dict] = {
    400: {"model": ErrorResponse, "description": "Invalid request"},
    404: {"model": ErrorResponse, "description": "Resource not found"},
}
