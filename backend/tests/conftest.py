"""Test configuration and fixtures for the Books Store API."""

import os

os.environ.setdefault("ENVIRONMENT", "local")
os.environ["USE_POSTGRES"] = "false"
os.environ["SQLITE_URI"] = ":memory:"
os.environ["SQLITE_ASYNC_PREFIX"] = "sqlite+aiosqlite:///"
os.environ["CREATE_TABLES_ON_STARTUP"] = "false"
os.environ["LOG_SQL_QUERIES"] = "false"

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402

# mypy: disable-error-code="import-untyped"
from testcontainers.core.docker_client import DockerClient  # noqa: E402
from testcontainers.postgres import PostgresContainer  # noqa: E402

from bookstore.infrastructure.database.session import Base, async_session, enable_sqlite_foreign_keys  # noqa: E402
from bookstore.infrastructure.logging import configure_testing_logging, mark_logging_configured  # noqa: E402
from bookstore.interfaces.main import app  # noqa: E402
from bookstore.modules.author.models import Author  # noqa: E402
from bookstore.modules.book.models import Book  # noqa: E402
from bookstore.modules.book_category.models import BookCategory  # noqa: E402
from bookstore.modules.language.models import Language  # noqa: E402
from bookstore.modules.library.models import Library  # noqa: E402

configure_testing_logging()
mark_logging_configured()

USE_POSTGRES_CONTAINER = os.environ.get("TEST_DATABASE", "sqlite").lower() == "postgres"


def is_docker_running() -> bool:
    """Check if Docker daemon is running."""
    try:
        DockerClient()
        return True
    except Exception:
        return False


@pytest.fixture(scope="session")
def pg_container():
    """Create a PostgreSQL container for testing."""
    if not is_docker_running():
        pytest.skip("Docker is required, but not running")

    with PostgresContainer("postgres:16-alpine") as pg:
        yield pg


@pytest.fixture(scope="function")
def test_db_url(request, tmp_path):
    """Database URL for one test: a fresh SQLite file, or the PostgreSQL container."""
    if not USE_POSTGRES_CONTAINER:
        return f"sqlite+aiosqlite:///{tmp_path / 'books_store_test.db'}"

    pg_container = request.getfixturevalue("pg_container")
    host = pg_container.get_container_host_ip()
    port = pg_container.get_exposed_port(5432)
    user = pg_container.username
    password = pg_container.password
    db = pg_container.dbname

    return f"postgresql+asyncpg://{user}:{password}@{host}:{port}/{db}"


@pytest_asyncio.fixture(scope="function")
async def test_db_engine(test_db_url):
    """Create a SQLAlchemy engine for testing."""
    engine = create_async_engine(test_db_url, echo=False)
    if engine.dialect.name == "sqlite":
        enable_sqlite_foreign_keys(engine)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def test_session_factory(test_db_engine):
    return async_sessionmaker(test_db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture(scope="function")
async def db_session(test_session_factory):
    """Create a test database session."""
    async with test_session_factory() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def client(test_session_factory):
    """Create a test client where every request gets its own session on the test database."""
    app.dependency_overrides = {}

    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[async_session] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides = {}


# Entity fixtures commit their row and return a plain dict; tests do not
# reuse the fixture session for reads after the API has written.
@pytest_asyncio.fixture
async def test_author(db_session: AsyncSession):
    """Create a test author."""
    author = Author(first_name="Ada", last_name="Lovelace")
    db_session.add(author)
    await db_session.commit()
    return {"id": author.id, "first_name": author.first_name, "last_name": author.last_name}


@pytest_asyncio.fixture
async def test_library(db_session: AsyncSession):
    """Create a test library."""
    library = Library(name="Central Library", address="1 Main Street")
    db_session.add(library)
    await db_session.commit()
    return {"id": library.id, "name": library.name, "address": library.address}


@pytest_asyncio.fixture
async def test_library_2(db_session: AsyncSession):
    """Create a second test library."""
    library = Library(name="Harbour Branch", address="22 Quay Road")
    db_session.add(library)
    await db_session.commit()
    return {"id": library.id, "name": library.name, "address": library.address}


@pytest_asyncio.fixture
async def test_category(db_session: AsyncSession):
    """Create a root test category."""
    category = BookCategory(name="Science")
    db_session.add(category)
    await db_session.commit()
    return {"id": category.id, "name": category.name, "parent_id": category.parent_id}


@pytest_asyncio.fixture
async def test_language(db_session: AsyncSession):
    """Create a test language."""
    language = Language(name="English")
    db_session.add(language)
    await db_session.commit()
    return {"id": language.id, "name": language.name}


@pytest_asyncio.fixture
async def test_book(
    db_session: AsyncSession,
    test_author: dict,
    test_library: dict,
    test_category: dict,
    test_language: dict,
):
    """Create a test book linked to the other test entities."""
    book = Book(
        title="Notes on the Analytical Engine",
        year=1843,
        isbn="978-0-00-000000-1",
        author_id=test_author["id"],
        library_id=test_library["id"],
        book_category_id=test_category["id"],
        language_id=test_language["id"],
    )
    db_session.add(book)
    await db_session.commit()
    return {
        "id": book.id,
        "title": book.title,
        "year": book.year,
        "isbn": book.isbn,
        "author_id": book.author_id,
        "library_id": book.library_id,
        "book_category_id": book.book_category_id,
        "language_id": book.language_id,
    }
