"""Pydantic schemas for API requests and responses."""

from src.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate
from src.schemas.common import (
    DataResponse,
    ErrorResponse,
    MessageResponse,
    PaginatedResponse,
    Pagination,
)
from src.schemas.todo import TodoCreate, TodoResponse, TodoUpdate

__all__ = [
    "CategoryCreate",
    "CategoryUpdate",
    "CategoryResponse",
    "TodoCreate",
    "TodoUpdate",
    "TodoResponse",
    "DataResponse",
    "PaginatedResponse",
    "Pagination",
    "MessageResponse",
    "ErrorResponse",
]
