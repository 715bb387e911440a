import uuid

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase, Session

from hypehouse.config import get_settings

settings = get_settings()

# Session.info key carrying the authenticated user id for row-level policies
IDENTITY_KEY = "current_user_id"


def _engine_options(database_url: str) -> dict:
    """Pool settings for Postgres; other backends (tests) keep driver defaults."""
    if not database_url.startswith("postgresql"):
        return {"echo": settings.debug}

    # Lower pool settings to avoid connection exhaustion on cold starts
    return {
        "echo": settings.debug,  # Log SQL queries in debug mode
        "pool_pre_ping": True,   # Check connection health before using
        "pool_size": 3,
        "max_overflow": 5,
        "pool_timeout": 10,      # Fail fast if can't get connection
        "pool_recycle": 300,     # Recycle connections every 5 min to avoid stale connections
        "connect_args": {
            "statement_cache_size": 0,           # Required for pgbouncer (Supabase)
            "prepared_statement_cache_size": 0,  # Also required for pgbouncer
            "command_timeout": 30,               # Query timeout
        },
    }


engine = create_async_engine(settings.database_url, **_engine_options(settings.database_url))

# Create async session factory
AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""
    pass


def _identity_sql_value(session: Session) -> str:
    user_id = session.info.get(IDENTITY_KEY)
    return str(user_id) if user_id else ""


@event.listens_for(Session, "after_begin")
def _apply_row_level_identity(session: Session, transaction, connection) -> None:
    """
    Expose the caller to Postgres row-level policies for this transaction.

    The setting is transaction-local, so it never leaks to the next request
    that checks the pooled connection out.
    """
    if connection.dialect.name != "postgresql":
        return
    connection.execute(
        text("SELECT set_config('app.current_user_id', :user_id, true)"),
        {"user_id": _identity_sql_value(session)},
    )


async def bind_identity(db: AsyncSession, user_id: uuid.UUID | None) -> None:
    """
    Attach the authenticated user to the session.

    Applies immediately when a transaction is already open; later
    transactions pick it up in `_apply_row_level_identity`.
    """
    db.info[IDENTITY_KEY] = user_id
    if db.in_transaction() and db.get_bind().dialect.name == "postgresql":
        await db.execute(
            text("SELECT set_config('app.current_user_id', :user_id, true)"),
            {"user_id": str(user_id) if user_id else ""},
        )


async def get_db():
    """
    Dependency that provides a database session.

    Usage in FastAPI:
        @app.get("/items")
        async def get_items(db: AsyncSession = Depends(get_db)):
            ...
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
