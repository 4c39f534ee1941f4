"""In-memory client state kept in sync with the API."""

import logging
from dataclasses import asdict, dataclass, field, replace
from typing import Any

from src.client.api import TodoAPIClient

logger = logging.getLogger(__name__)


@dataclass
class PaginationState:
    current: int = 1
    page_size: int = 10
    total: int = 0
    total_pages: int = 0


@dataclass
class FilterState:
    search: str = ""
    completed: bool | None = None
    category_id: int | None = None
    priority: str | None = None


@dataclass
class TodoStore:
    """Local view of todos and categories.

    Every mutation goes to the server first; local state only changes once
    the server has accepted it. Failures are logged and re-raised.
    """

    api: TodoAPIClient
    todos: list[dict[str, Any]] = field(default_factory=list)
    categories: list[dict[str, Any]] = field(default_factory=list)
    loading: bool = False
    pagination: PaginationState = field(default_factory=PaginationState)
    filters: FilterState = field(default_factory=FilterState)

    @property
    def total_pages(self) -> int:
        return self.pagination.total_pages

    def fetch_todos(self) -> None:
        """Reload the current page with the current filters."""
        self.loading = True
        try:
            response = self.api.get_todos(
                page=self.pagination.current,
                limit=self.pagination.page_size,
                **asdict(self.filters),
            )
        except Exception as e:
            logger.error(f"Error fetching todos: {e}")
            raise
        finally:
            self.loading = False

        self.todos = response["data"]
        pagination = response["pagination"]
        self.pagination.current = pagination["current_page"]
        self.pagination.page_size = pagination["per_page"]
        self.pagination.total = pagination["total"]
        self.pagination.total_pages = pagination["total_pages"]

    def fetch_categories(self) -> None:
        try:
            self.categories = self.api.get_categories()
        except Exception as e:
            logger.error(f"Error fetching categories: {e}")
            raise

    def set_filters(self, **changes: Any) -> None:
        """Merge filter changes and go back to the first page."""
        self.filters = replace(self.filters, **changes)
        self.pagination.current = 1

    def set_pagination(self, current: int | None = None, page_size: int | None = None) -> None:
        if current is not None and current < 1:
            raise ValueError(f"Page must be at least 1, got {current}")
        if page_size is not None and page_size < 1:
            raise ValueError(f"Page size must be at least 1, got {page_size}")
        if current is not None:
            self.pagination.current = current
        if page_size is not None:
            self.pagination.page_size = page_size

    def add_todo(self, data: dict[str, Any]) -> dict[str, Any]:
        try:
            todo = self.api.create_todo(data)
        except Exception as e:
            logger.error(f"Error creating todo: {e}")
            raise
        self.todos.insert(0, todo)
        return todo

    def update_todo(self, todo_id: int, data: dict[str, Any]) -> dict[str, Any]:
        try:
            todo = self.api.update_todo(todo_id, data)
        except Exception as e:
            logger.error(f"Error updating todo: {e}")
            raise
        self._replace_todo(todo)
        return todo

    def toggle_todo(self, todo_id: int) -> dict[str, Any]:
        try:
            todo = self.api.toggle_todo(todo_id)
        except Exception as e:
            logger.error(f"Error toggling todo: {e}")
            raise
        self._replace_todo(todo)
        return todo

    def delete_todo(self, todo_id: int) -> None:
        try:
            self.api.delete_todo(todo_id)
        except Exception as e:
            logger.error(f"Error deleting todo: {e}")
            raise
        self.todos = [todo for todo in self.todos if todo["id"] != todo_id]

    def create_category(self, data: dict[str, Any]) -> None:
        try:
            self.api.create_category(data)
        except Exception as e:
            logger.error(f"Error creating category: {e}")
            raise
        self.fetch_categories()

    def update_category(self, category_id: int, data: dict[str, Any]) -> None:
        try:
            self.api.update_category(category_id, data)
        except Exception as e:
            logger.error(f"Error updating category: {e}")
            raise
        self.fetch_categories()

    def delete_category(self, category_id: int) -> None:
        try:
            self.api.delete_category(category_id)
        except Exception as e:
            logger.error(f"Error deleting category: {e}")
            raise
        self.fetch_categories()

    def _replace_todo(self, updated: dict[str, Any]) -> None:
        self.todos = [updated if todo["id"] == updated["id"] else todo for todo in self.todos]
