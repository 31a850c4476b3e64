import os

from fastapi import Request
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

from app.config import Settings


def normalize_database_url(url: str) -> str:
    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql+asyncpg://", 1)
    elif url.startswith("postgresql://"):
        url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


def _is_sqlite(url: str) -> bool:
    return url.startswith("sqlite")


def build_engine(settings: Settings) -> AsyncEngine:
    url = normalize_database_url(settings.resolved_database_url)

    engine_kwargs: dict = {"echo": False}
    if _is_sqlite(url):
        database = make_url(url).database
        if database and database != ":memory:":
            os.makedirs(os.path.dirname(os.path.abspath(database)), exist_ok=True)
    else:
        engine_kwargs.update(pool_size=5, max_overflow=10, pool_pre_ping=True)

    return create_async_engine(url, **engine_kwargs)


def build_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


class Base(DeclarativeBase):
    pass


async def create_tables(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        from app.models import user, exercise  # noqa: F401
        await conn.run_sync(Base.metadata.create_all)


async def get_db(request: Request):
    """Yield a session from the factory opened at startup."""
    async with request.app.state.session_factory() as session:
        yield session
