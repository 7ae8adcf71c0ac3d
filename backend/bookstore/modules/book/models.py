"""SQLAlchemy models for book entities."""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ...infrastructure.database.session import Base
from ..author.models import Author
from ..book_category.models import BookCategory
from ..language.models import Language
from ..library.models import Library


class Book(Base):
    """Book model, the central entity.

    Each book belongs to exactly one author, library, category and language.
    All four foreign keys are mandatory and use the store's default
    referential action, so referenced rows cannot be deleted while the book
    exists. Relationships are only loaded on request (``lazy="raise"``).
    """

    __tablename__ = "books"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True, init=False)
    title: Mapped[str] = mapped_column(String(255), index=True)
    year: Mapped[int] = mapped_column(Integer)
    isbn: Mapped[str] = mapped_column(String(32))
    author_id: Mapped[int] = mapped_column(Integer, ForeignKey("authors.id"), index=True)
    library_id: Mapped[int] = mapped_column(Integer, ForeignKey("libraries.id"), index=True)
    book_category_id: Mapped[int] = mapped_column(Integer, ForeignKey("book_categories.id"), index=True)
    language_id: Mapped[int] = mapped_column(Integer, ForeignKey("languages.id"), index=True)

    author: Mapped[Author] = relationship(init=False, repr=False, lazy="raise")
    library: Mapped[Library] = relationship(init=False, repr=False, lazy="raise")
    book_category: Mapped[BookCategory] = relationship(init=False, repr=False, lazy="raise")
    language: Mapped[Language] = relationship(init=False, repr=False, lazy="raise")
