"""Todo schemas."""

from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, StringConstraints

from src.database import MAX_INTEGER
from src.models.enums import Priority
from src.schemas.category import CategoryResponse


def clean_title(value: str) -> str:
    """Trim a title and reject blanks."""
    value = value.strip()
    if not value:
        raise ValueError("Title is required")
    return value


def clean_description(value: str | None) -> str | None:
    """Trim a description."""
    return value.strip() if value is not None else None


Title = Annotated[str, StringConstraints(max_length=255), AfterValidator(clean_title)]
Description = Annotated[str | None, AfterValidator(clean_description)]


class TodoCreate(BaseModel):
    """Create a new todo."""

    title: Title
    description: Description = None
    category_id: int | None = Field(None, ge=1, le=MAX_INTEGER)
    priority: Priority = Priority.MEDIUM
    due_date: datetime | None = None


class TodoUpdate(BaseModel):
    """Update a todo.

    Only fields present in the request body are applied. ``description``,
    ``category_id`` and ``due_date`` may be cleared with an explicit null.
    """

    title: Title | None = None
    description: Description = None
    category_id: int | None = Field(None, ge=1, le=MAX_INTEGER)
    priority: Priority | None = None
    due_date: datetime | None = None
    completed: bool | None = None


class TodoResponse(BaseModel):
    """Todo response with its category expanded."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str | None
    completed: bool
    category_id: int | None
    category: CategoryResponse | None
    priority: Priority
    due_date: datetime | None
    created_at: datetime
    updated_at: datetime
