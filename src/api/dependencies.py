"""FastAPI dependencies for services and listing parameters."""

from typing import Annotated

from fastapi import Depends, Path, Query
from sqlalchemy.orm import Session

from src.config import get_settings
from src.database import MAX_INTEGER, get_db
from src.models.enums import Priority
from src.services.category_service import CategoryService
from src.services.todo_query import PageRequest, TodoFilters
from src.services.todo_service import TodoService

ResourceId = Annotated[int, Path(ge=1, le=MAX_INTEGER)]


def get_todo_service(db: Annotated[Session, Depends(get_db)]) -> TodoService:
    """Get todo service bound to the request session."""
    return TodoService(db)


def get_category_service(db: Annotated[Session, Depends(get_db)]) -> CategoryService:
    """Get category service bound to the request session."""
    return CategoryService(db)


def get_page_request(
    page: int = Query(default=1, ge=1, le=MAX_INTEGER, description="Page number, starting at 1"),
    limit: int | None = Query(default=None, ge=1, description="Items per page"),
) -> PageRequest:
    """Parse and bound the pagination query parameters."""
    settings = get_settings()
    return PageRequest(
        page=page,
        limit=limit if limit is not None else settings.default_page_size,
        max_limit=settings.max_page_size,
    )


def get_todo_filters(
    search: str | None = Query(default=None, description="Case-insensitive title search"),
    completed: bool | None = Query(default=None, description="Filter by completion status"),
    category_id: int | None = Query(
        default=None, ge=1, le=MAX_INTEGER, description="Filter by category"
    ),
    priority: Priority | None = Query(default=None, description="Filter by priority"),
) -> TodoFilters:
    """Collect the optional todo listing filters."""
    return TodoFilters(
        search=search,
        completed=completed,
        category_id=category_id,
        priority=priority,
    )
