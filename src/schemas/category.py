"""Category schemas."""

import re
from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, StringConstraints

from src.models.category import DEFAULT_CATEGORY_COLOR

HEX_COLOR_RE = re.compile(r"#[0-9A-Fa-f]{6}")


def clean_name(value: str) -> str:
    """Trim a category name and reject blanks."""
    value = value.strip()
    if not value:
        raise ValueError("Category name is required")
    return value


def check_color(value: str) -> str:
    """Require a #RRGGBB hex color."""
    if not HEX_COLOR_RE.fullmatch(value):
        raise ValueError("Invalid color format. Use hex format like #3B82F6")
    return value


CategoryName = Annotated[str, StringConstraints(max_length=100), AfterValidator(clean_name)]
HexColor = Annotated[str, AfterValidator(check_color)]


class CategoryCreate(BaseModel):
    """Create a new category."""

    name: CategoryName
    color: HexColor = DEFAULT_CATEGORY_COLOR


class CategoryUpdate(BaseModel):
    """Update a category."""

    name: CategoryName | None = None
    color: HexColor | None = None


class CategoryResponse(BaseModel):
    """Category response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    color: str
    created_at: datetime
