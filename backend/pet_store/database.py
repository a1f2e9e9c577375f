"""
Pet Store Backend: Database Session Management
=================================================

What:  Async SQLAlchemy engine, session factory, and FastAPI dependencies.
How:   Creates an async engine with connection pooling and provides two
       session dependencies: a read-write one that commits on success and
       rolls back on error, and a read-only one that always rolls back.
Who:   Used by route handlers via FastAPI's dependency injection system.
When:  Engine is created at module import; sessions are created per-request.

Transaction Boundaries:
    Write endpoints (POST, PUT, DELETE)  → get_db_session
    Read endpoints  (GET)                → get_read_only_db_session

    Each request gets exactly one session and one transaction. Services only
    flush; the dependency decides whether the transaction is kept.
"""

from typing import Any, AsyncGenerator, Dict

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from pet_store.config import settings


def _engine_options() -> Dict[str, Any]:
    """Engine keyword arguments for the configured database."""
    options: Dict[str, Any] = {
        # Echo SQL queries in DEBUG mode for development visibility
        "echo": settings.log_level == "DEBUG",
    }
    if not settings.is_sqlite:
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=3600,
        )
    return options


# ── Engine Configuration ──────────────────────────────────────────────────
engine = create_async_engine(settings.database_url, **_engine_options())

# ── Session Factory ───────────────────────────────────────────────────────
# expire_on_commit=False: loaded attributes stay readable after commit,
# so response shaping never triggers lazy IO outside the session
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    All models share this metadata object, which Alembic reads for
    autogenerate and tests use for `create_all`.
    """
    pass


# ── Session Dependencies ──────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a read-write database session per request.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the route handler
        3. On success: commits the transaction
        4. On error: rolls back the transaction and re-raises
        5. Always: closes the session (returns connection to pool)

    Example usage in a route:
        @router.post("/pet_store")
        async def create(data: PetStoreData, db: AsyncSession = Depends(get_db_session)):
            return await pet_store_service.save_pet_store(db, data)
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise  # Re-raise so the global error handler can respond
        finally:
            await session.close()


async def get_read_only_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for read-only endpoints.

    The transaction is always rolled back, so nothing a GET handler does
    can be persisted.
    """
    async with async_session_factory() as session:
        try:
            yield session
        finally:
            await session.rollback()
            await session.close()


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def dispose_engine() -> None:
    """
    What:  Gracefully closes all connections in the pool.
    When:  Called during application shutdown (lifespan handler).
    """
    await engine.dispose()
