"""Filter composition and pagination for todo listings.

A listing request carries a handful of independently optional filters. Each
filter that is present adds one condition, and all conditions are ANDed
together; an absent filter matches every row. The filtered rows are then cut
into a page window, newest first.
"""

import math
from dataclasses import dataclass, field

from sqlalchemy import ColumnElement, func
from sqlalchemy.orm import Session, joinedload

from src.models.enums import Priority
from src.models.todo import Todo
from src.services.errors import ErrorKind, StoreError

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class TodoFilters:
    """Optional filters for a todo listing."""

    search: str | None = None
    completed: bool | None = None
    category_id: int | None = None
    priority: Priority | None = None


@dataclass(frozen=True)
class PageRequest:
    """A 1-based page window."""

    page: int = 1
    limit: int = DEFAULT_PAGE_SIZE
    max_limit: int = field(default=MAX_PAGE_SIZE, repr=False)

    def __post_init__(self) -> None:
        if self.page < 1:
            raise StoreError(ErrorKind.VALIDATION, "page must be a positive integer")
        if self.limit < 1:
            raise StoreError(ErrorKind.VALIDATION, "limit must be a positive integer")
        if self.limit > self.max_limit:
            raise StoreError(ErrorKind.VALIDATION, f"limit cannot exceed {self.max_limit}")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass
class TodoPage:
    """One window of a filtered listing plus the unwindowed total."""

    rows: list[Todo]
    total: int
    request: PageRequest

    @property
    def total_pages(self) -> int:
        return total_pages(self.total, self.request.limit)


def total_pages(total: int, limit: int) -> int:
    """Number of pages needed to show ``total`` rows, ``limit`` at a time."""
    if limit <= 0:
        raise ValueError("limit must be positive")
    return math.ceil(total / limit)


def build_predicates(filters: TodoFilters) -> list[ColumnElement[bool]]:
    """Translate the filters that are set into SQL conditions."""
    predicates: list[ColumnElement[bool]] = []

    search = filters.search.strip() if filters.search else ""
    if search:
        predicates.append(Todo.title.icontains(search, autoescape=True))

    if filters.completed is not None:
        predicates.append(Todo.completed.is_(filters.completed))

    if filters.category_id is not None:
        predicates.append(Todo.category_id == filters.category_id)

    if filters.priority is not None:
        predicates.append(Todo.priority == filters.priority)

    return predicates


def query_todos(db: Session, filters: TodoFilters, page: PageRequest) -> TodoPage:
    """Fetch one page of todos matching ``filters`` and the total match count."""
    predicates = build_predicates(filters)

    total = db.query(func.count(Todo.id)).filter(*predicates).scalar() or 0

    rows = (
        db.query(Todo)
        .options(joinedload(Todo.category))
        .filter(*predicates)
        .order_by(Todo.created_at.desc(), Todo.id.desc())
        .offset(page.offset)
        .limit(page.limit)
        .all()
    )

    return TodoPage(rows=rows, total=total, request=page)
