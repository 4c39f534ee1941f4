"""Category model."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import CreatedAtMixin

DEFAULT_CATEGORY_COLOR = "#3B82F6"


class Category(Base, CreatedAtMixin):
    """Named, colored label for grouping todos."""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False, unique=True)
    color = Column(String(7), nullable=False, default=DEFAULT_CATEGORY_COLOR)

    # Relationships
    todos = relationship("Todo", back_populates="category", passive_deletes=True)
