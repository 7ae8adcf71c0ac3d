from typing import Any, AsyncGenerator, Dict

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase, MappedAsDataclass

from ..config.settings import Settings, settings


def engine_options(app_settings: Settings) -> Dict[str, Any]:
    """Build engine keyword arguments for the configured storage engine.

    Pool sizing only applies to PostgreSQL; aiosqlite picks its own pool
    class and rejects those arguments.
    """
    options: Dict[str, Any] = {"echo": app_settings.LOG_SQL_QUERIES, "future": True}
    if app_settings.USE_POSTGRES:
        options["pool_size"] = app_settings.POSTGRES_POOL_SIZE
        options["max_overflow"] = app_settings.POSTGRES_MAX_OVERFLOW
    return options


def enable_sqlite_foreign_keys(async_engine: AsyncEngine) -> None:
    """Turn on foreign key enforcement for every new SQLite connection.

    SQLite ships with foreign keys disabled per connection. Book rows and
    category parents rely on the store to reject dangling references, so the
    pragma has to be issued on connect.
    """

    @event.listens_for(async_engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


engine = create_async_engine(settings.DATABASE_URL, **engine_options(settings))

if engine.dialect.name == "sqlite":
    enable_sqlite_foreign_keys(engine)

local_session = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


class Base(DeclarativeBase, MappedAsDataclass):
    """Base class for all database models.

    Combines SQLAlchemy's DeclarativeBase with MappedAsDataclass, so every
    model gets a dataclass ``__init__`` built from its mapped columns.
    Identity columns are declared with ``init=False`` and assigned by the
    store on insert.

    Example:
        ```python
        class Language(Base):
            __tablename__ = "languages"

            id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True, init=False)
            name: Mapped[str] = mapped_column(String(100))

        language = Language(name="English")
        ```
    """

    pass


async def async_session() -> AsyncGenerator[AsyncSession, None]:
    """Dependency for database session management with proper lifecycle.

    Each request gets its own session, opened on entry and closed when the
    response is done. No session outlives its request.

    Yields:
        AsyncSession: A configured async database session.

    Example:
        ```python
        @router.get("/")
        async def get_authors(db: AsyncSession = Depends(async_session)):
            result = await db.execute(select(Author))
            return result.scalars().all()
        ```
    """
    async_get_db = local_session
    async with async_get_db() as db:
        yield db


async def create_tables() -> None:
    """Create all tables in the database if they don't exist.

    Mirrors an ensure-created start-up: existing tables are left untouched.
    Schema changes to an existing database go through the Alembic
    revisions in ``migrations/`` instead.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
