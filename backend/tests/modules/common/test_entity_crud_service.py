"""Tests for the generic entity CRUD service."""

from unittest.mock import patch

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from bookstore.modules.author.schemas import AuthorCreate, AuthorRead, AuthorReplace
from bookstore.modules.author.services import AuthorService
from bookstore.modules.book.schemas import BookCreate
from bookstore.modules.book.services import BookService
from bookstore.modules.book_category.schemas import BookCategoryCreate
from bookstore.modules.book_category.services import BookCategoryService
from bookstore.modules.common.exceptions import (
    IdentityMismatchError,
    ResourceNotFoundError,
    StoreUnavailableError,
    WriteConflictError,
)
from bookstore.modules.language.schemas import LanguageCreate
from bookstore.modules.language.services import LanguageService
from bookstore.modules.library.schemas import LibraryCreate
from bookstore.modules.library.services import LibraryService


@pytest.fixture
def author_service():
    """Create author service instance."""
    return AuthorService()


@pytest.mark.asyncio
async def test_create_assigns_identity(author_service: AuthorService, db_session: AsyncSession):
    result = await author_service.create(AuthorCreate(first_name="Ada", last_name="Lovelace"), db_session)

    assert isinstance(result, AuthorRead)
    assert result.id == 1
    assert result.first_name == "Ada"
    assert result.last_name == "Lovelace"


@pytest.mark.asyncio
async def test_get_returns_entity(author_service: AuthorService, db_session: AsyncSession, test_author: dict):
    result = await author_service.get(test_author["id"], db_session)

    assert result.model_dump() == test_author


@pytest.mark.asyncio
async def test_get_not_found(author_service: AuthorService, db_session: AsyncSession):
    with pytest.raises(ResourceNotFoundError, match="Author with ID 7 was not found."):
        await author_service.get(7, db_session)


@pytest.mark.asyncio
async def test_get_all_ordered_by_id(db_session: AsyncSession):
    service = LanguageService()
    for name in ["English", "French", "German"]:
        await service.create(LanguageCreate(name=name), db_session)

    result = await service.get_all(db_session)
    assert [language.name for language in result] == ["English", "French", "German"]

    page = await service.get_all(db_session, offset=2, limit=5)
    assert [language.name for language in page] == ["German"]


@pytest.mark.asyncio
@pytest.mark.parametrize("operation", ["get_all", "get", "create", "replace", "delete"])
async def test_missing_store_is_reported(author_service: AuthorService, operation: str):
    """Every operation refuses to run without a session."""
    calls = {
        "get_all": lambda: author_service.get_all(None),
        "get": lambda: author_service.get(1, None),
        "create": lambda: author_service.create(AuthorCreate(first_name="A", last_name="B"), None),
        "replace": lambda: author_service.replace(1, AuthorReplace(id=1, first_name="A", last_name="B"), None),
        "delete": lambda: author_service.delete(1, None),
    }

    with pytest.raises(StoreUnavailableError, match="Entity set 'Author' is not available."):
        await calls[operation]()


@pytest.mark.asyncio
async def test_replace_overwrites_row(author_service: AuthorService, db_session: AsyncSession, test_author: dict):
    payload = AuthorReplace(id=test_author["id"], first_name="Augusta Ada", last_name="King")

    result = await author_service.replace(test_author["id"], payload, db_session)

    assert result.last_name == "King"
    stored = await author_service.get(test_author["id"], db_session)
    assert stored.first_name == "Augusta Ada"
    assert stored.last_name == "King"


@pytest.mark.asyncio
async def test_replace_identity_mismatch(author_service: AuthorService, db_session: AsyncSession, test_author: dict):
    payload = AuthorReplace(id=test_author["id"] + 1, first_name="X", last_name="Y")

    with pytest.raises(IdentityMismatchError):
        await author_service.replace(test_author["id"], payload, db_session)


@pytest.mark.asyncio
async def test_replace_missing_row(author_service: AuthorService, db_session: AsyncSession):
    payload = AuthorReplace(id=3, first_name="No", last_name="One")

    with pytest.raises(ResourceNotFoundError):
        await author_service.replace(3, payload, db_session)


@pytest.mark.asyncio
async def test_replace_conflict_on_existing_row(
    author_service: AuthorService, db_session: AsyncSession, test_author: dict
):
    """A stale write on a row that still exists is reported as a conflict."""
    payload = AuthorReplace(id=test_author["id"], first_name="X", last_name="Y")

    with patch.object(AuthorService, "_write_replacement", side_effect=StaleDataError("stale")):
        with pytest.raises(WriteConflictError):
            await author_service.replace(test_author["id"], payload, db_session)


@pytest.mark.asyncio
async def test_replace_conflict_on_vanished_row(author_service: AuthorService, db_session: AsyncSession):
    """A stale write on a row deleted meanwhile is reported as not found."""
    payload = AuthorReplace(id=11, first_name="X", last_name="Y")

    with (
        patch.object(AuthorService, "exists", side_effect=[True, False]),
        patch.object(AuthorService, "_write_replacement", side_effect=StaleDataError("stale")),
    ):
        with pytest.raises(ResourceNotFoundError):
            await author_service.replace(11, payload, db_session)


@pytest.mark.asyncio
async def test_delete_removes_row(author_service: AuthorService, db_session: AsyncSession, test_author: dict):
    await author_service.delete(test_author["id"], db_session)

    assert not await author_service.exists(test_author["id"], db_session)


@pytest.mark.asyncio
async def test_delete_not_found(author_service: AuthorService, db_session: AsyncSession):
    with pytest.raises(ResourceNotFoundError):
        await author_service.delete(5, db_session)


@pytest.mark.asyncio
async def test_delete_referenced_row_propagates(
    author_service: AuthorService, db_session: AsyncSession, test_book: dict
):
    with pytest.raises(IntegrityError):
        await author_service.delete(test_book["author_id"], db_session)

    assert await author_service.exists(test_book["author_id"], db_session)


@pytest.mark.asyncio
async def test_create_with_dangling_reference_propagates(db_session: AsyncSession, test_book: dict):
    service = BookService()
    payload = BookCreate(
        title="Ghost",
        year=2000,
        isbn="0",
        author_id=test_book["author_id"],
        library_id=404,
        book_category_id=test_book["book_category_id"],
        language_id=test_book["language_id"],
    )

    with pytest.raises(IntegrityError):
        await service.create(payload, db_session)

    assert [book.id for book in await service.get_all(db_session)] == [test_book["id"]]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "service, payload",
    [
        (LanguageService(), LanguageCreate(name="Latin")),
        (BookCategoryService(), BookCategoryCreate(name="Poetry")),
        (LibraryService(), LibraryCreate(name="Annex", address="3 Side Street")),
    ],
)
async def test_create_returns_stored_row_for_each_entity(service, payload, db_session: AsyncSession):
    result = await service.create(payload, db_session)

    assert isinstance(result, service.read_schema)
    assert result.id == 1
    assert (await service.get(result.id, db_session)) == result
