"""Enums for model fields."""

from enum import Enum


class Priority(str, Enum):
    """Priority levels for todos."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
