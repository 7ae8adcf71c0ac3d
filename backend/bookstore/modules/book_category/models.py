"""SQLAlchemy models for book category entities."""

from typing import Optional

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from ...infrastructure.database.session import Base


class BookCategory(Base):
    """Book category, optionally nested under a parent category.

    Categories form a tree through ``parent_id``: each category has at most
    one parent and any number of children.
    """

    __tablename__ = "book_categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True, init=False)
    name: Mapped[str] = mapped_column(String(255), index=True)
    parent_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("book_categories.id", name="fk_book_categories_parent_id_book_categories"),
        index=True,
        default=None,
    )
