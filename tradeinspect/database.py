from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base
from contextlib import asynccontextmanager
from typing import AsyncGenerator, AsyncIterator
from urllib.parse import urlparse, parse_qs, urlencode, urlunparse
from tradeinspect.config import get_settings
import logging

settings = get_settings()
logger = logging.getLogger(__name__)


def convert_database_url(url: str) -> str:
    """
    Convert a database URL to its async driver form.
    SQLite URLs get the aiosqlite driver, PostgreSQL URLs get asyncpg with
    unsupported query parameters removed.
    """
    if not url:
        raise ValueError("DATABASE_URL cannot be empty")

    if url.startswith("sqlite+aiosqlite://"):
        return url
    if url.startswith("sqlite://"):
        return url.replace("sqlite://", "sqlite+aiosqlite://", 1)

    # Replace postgresql:// with postgresql+asyncpg://
    if url.startswith("postgresql://"):
        url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
    elif url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql+asyncpg://", 1)
    elif not url.startswith("postgresql+asyncpg://"):
        raise ValueError(f"Invalid DATABASE_URL format: {url[:50]}...")

    parsed = urlparse(url)
    query_params = parse_qs(parsed.query)

    # asyncpg uses ssl parameter, not sslmode
    if "sslmode" in query_params:
        sslmode = query_params.pop("sslmode")[0].lower()
        if sslmode in ["require", "prefer", "allow"]:
            query_params["ssl"] = ["require"]

    for param in ["channel_binding", "connect_timeout", "application_name"]:
        query_params.pop(param, None)

    new_query = urlencode(query_params, doseq=True)
    return urlunparse(parsed._replace(query=new_query))


try:
    db_url = convert_database_url(settings.DATABASE_URL)
except ValueError as e:
    raise ValueError(
        f"Failed to convert DATABASE_URL: {str(e)}\n"
        f"Please check your DATABASE_URL in .env file or environment variables."
    ) from e

_is_sqlite = db_url.startswith("sqlite")
_engine_kwargs = {"echo": False}
if _is_sqlite:
    _engine_kwargs["connect_args"] = {"check_same_thread": False}
else:
    _engine_kwargs.update(
        pool_size=10,
        max_overflow=20,
        pool_pre_ping=True,  # Verify connections before using
        pool_recycle=3600,   # Recycle connections after 1 hour
    )

engine = create_async_engine(db_url, **_engine_kwargs)

# Create async session factory
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)

# Base class for models
Base = declarative_base()


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency to get database session"""
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


@asynccontextmanager
async def atomic(session: AsyncSession) -> AsyncIterator[AsyncSession]:
    """
    Run a block of work as one transaction.
    Commits when the block exits normally and rolls back when anything is
    raised, validation errors included.
    """
    try:
        yield session
        await session.commit()
    except Exception:
        await session.rollback()
        raise


async def init_db():
    """Initialize database tables"""
    async with engine.begin() as conn:
        # Import all models to ensure they're registered
        from tradeinspect.models import (  # noqa: F401
            user, customer, inspector, company, parameter, enquiry
        )

        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ready")
