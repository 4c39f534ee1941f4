"""SQLAlchemy models."""

from src.models.category import Category
from src.models.todo import Todo

__all__ = [
    "Category",
    "Todo",
]
