"""Todo service for CRUD operations."""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from src.models.category import Category
from src.models.todo import Todo
from src.schemas.todo import TodoCreate, TodoUpdate
from src.services.errors import ErrorKind, StoreError, not_found
from src.services.todo_query import PageRequest, TodoFilters, TodoPage, query_todos

logger = logging.getLogger(__name__)

# Fields where an explicit null means "leave unchanged" rather than "clear"
NON_NULLABLE_UPDATES = ("title", "priority", "completed")


class TodoService:
    """Service for todo-related operations."""

    def __init__(self, db: Session):
        self.db = db

    def list(self, filters: TodoFilters, page: PageRequest) -> TodoPage:
        """Return one page of todos matching the filters."""
        return query_todos(self.db, filters, page)

    def get(self, todo_id: int) -> Todo:
        """Get a todo with its category loaded."""
        todo = (
            self.db.query(Todo)
            .options(joinedload(Todo.category))
            .filter(Todo.id == todo_id)
            .first()
        )
        if not todo:
            raise not_found("Todo")
        return todo

    def create(self, data: TodoCreate) -> Todo:
        """Create a todo."""
        self._check_category(data.category_id)

        todo = Todo(
            title=data.title,
            description=data.description,
            category_id=data.category_id,
            priority=data.priority,
            due_date=data.due_date,
        )
        self.db.add(todo)
        self._commit()
        logger.info(f"Created todo {todo.id}")
        return self.get(todo.id)

    def update(self, todo_id: int, data: TodoUpdate) -> Todo:
        """Apply the fields present in ``data`` to a todo."""
        todo = self.get(todo_id)

        changes = data.model_dump(exclude_unset=True)
        for key in NON_NULLABLE_UPDATES:
            if key in changes and changes[key] is None:
                del changes[key]
        if "category_id" in changes:
            self._check_category(changes["category_id"])

        for key, value in changes.items():
            setattr(todo, key, value)

        self._commit()
        return self.get(todo_id)

    def toggle(self, todo_id: int) -> Todo:
        """Flip a todo's completed flag."""
        todo = self.get(todo_id)
        todo.completed = not todo.completed
        self._commit()
        return self.get(todo_id)

    def delete(self, todo_id: int) -> None:
        """Permanently delete a todo."""
        todo = self.get(todo_id)
        self.db.delete(todo)
        self._commit()
        logger.info(f"Deleted todo {todo_id}")

    def _check_category(self, category_id: int | None) -> None:
        if category_id is None:
            return
        if self.db.get(Category, category_id) is None:
            raise StoreError(ErrorKind.VALIDATION, f"Category {category_id} does not exist")

    def _commit(self) -> None:
        try:
            self.db.commit()
        except IntegrityError:
            # Category removed between the existence check and the write
            self.db.rollback()
            raise StoreError(ErrorKind.VALIDATION, "Category does not exist") from None
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to save todo: {e}")
            raise StoreError(ErrorKind.INTERNAL, "Failed to save todo") from e
