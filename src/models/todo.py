"""Todo model."""

from sqlalchemy import Boolean, Column, DateTime, Enum, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.enums import Priority
from src.models.mixins import TimestampMixin


class Todo(Base, TimestampMixin):
    """Todo model for a single task."""

    __tablename__ = "todos"
    __table_args__ = (Index("ix_todos_created_at", "created_at"),)

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=True)
    completed = Column(Boolean, nullable=False, default=False, index=True)
    # Rows are nulled out if the category disappears underneath them
    category_id = Column(
        Integer,
        ForeignKey("categories.id", onupdate="CASCADE", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    priority = Column(
        Enum(
            Priority,
            name="priority",
            values_callable=lambda x: [e.value for e in x],
        ),
        nullable=False,
        default=Priority.MEDIUM,
        index=True,
    )
    due_date = Column(DateTime(timezone=True), nullable=True)

    # Relationships
    category = relationship("Category", back_populates="todos")
