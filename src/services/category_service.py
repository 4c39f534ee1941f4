"""Category service, including the guarded delete."""

import logging

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from src.models.category import Category
from src.models.todo import Todo
from src.schemas.category import CategoryCreate, CategoryUpdate
from src.services.errors import ErrorKind, StoreError, not_found

logger = logging.getLogger(__name__)

DUPLICATE_NAME = "Category name already exists"
HAS_TODOS = "Cannot delete category with associated todos"


class CategoryService:
    """Service for category-related operations."""

    def __init__(self, db: Session):
        self.db = db

    def list(self) -> list[Category]:
        """Get all categories, oldest first."""
        return self.db.query(Category).order_by(Category.created_at, Category.id).all()

    def get(self, category_id: int) -> Category:
        """Get a category by id."""
        category = self.db.get(Category, category_id)
        if category is None:
            raise not_found("Category")
        return category

    def create(self, data: CategoryCreate) -> Category:
        """Create a category with a unique name."""
        self._check_name_free(data.name)

        category = Category(name=data.name, color=data.color)
        self.db.add(category)
        self._commit()
        self.db.refresh(category)
        logger.info(f"Created category {category.id} ({category.name!r})")
        return category

    def update(self, category_id: int, data: CategoryUpdate) -> Category:
        """Rename or recolor a category."""
        category = self.get(category_id)

        if data.name is not None and data.name != category.name:
            self._check_name_free(data.name, exclude_id=category_id)
            category.name = data.name
        if data.color is not None:
            category.color = data.color

        self._commit()
        self.db.refresh(category)
        return category

    def delete(self, category_id: int) -> None:
        """Delete a category that no todo references.

        The category row is locked for the rest of the transaction so a
        concurrent insert of a todo pointing at it waits until we are done.
        """
        category = (
            self.db.query(Category).filter(Category.id == category_id).with_for_update().first()
        )
        if category is None:
            self.db.rollback()
            raise not_found("Category")

        todo_count = (
            self.db.query(func.count(Todo.id)).filter(Todo.category_id == category_id).scalar()
        )
        if todo_count:
            self.db.rollback()
            logger.warning(f"Refused to delete category {category_id}: {todo_count} todo(s)")
            raise StoreError(ErrorKind.CONFLICT, HAS_TODOS)

        self.db.delete(category)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise StoreError(ErrorKind.CONFLICT, HAS_TODOS) from None
        logger.info(f"Deleted category {category_id}")

    def _check_name_free(self, name: str, exclude_id: int | None = None) -> None:
        query = self.db.query(Category.id).filter(Category.name == name)
        if exclude_id is not None:
            query = query.filter(Category.id != exclude_id)
        if query.first() is not None:
            raise StoreError(ErrorKind.CONFLICT, DUPLICATE_NAME)

    def _commit(self) -> None:
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise StoreError(ErrorKind.CONFLICT, DUPLICATE_NAME) from None
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to save category: {e}")
            raise StoreError(ErrorKind.INTERNAL, "Failed to save category") from e
