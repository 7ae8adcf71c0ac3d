"""SQLAlchemy models for library entities."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from ...infrastructure.database.session import Base


class Library(Base):
    """Library model.

    A library owns the books it holds. Books reference their library with a
    plain foreign key and no cascade, so a library can only be deleted once
    no book points at it.
    """

    __tablename__ = "libraries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True, init=False)
    name: Mapped[str] = mapped_column(String(255), index=True)
    address: Mapped[str] = mapped_column(String(500))
