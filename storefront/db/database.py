"""
Database engine and session management.

Builds the SQLAlchemy engine from environment configuration with a test
fallback (SQLite in-memory) and exposes the FastAPI session dependency.
"""
import os
import sys
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

DEFAULT_DATABASE_URL = "postgresql://localhost:5432/storefront"


# Database connection URL
# Generate from individual components when DATABASE_URL is not provided
def _get_database_url() -> str:
    if os.getenv("DATABASE_URL"):
        return os.getenv("DATABASE_URL")

    db_user = os.getenv("POSTGRES_USER")
    db_password = os.getenv("POSTGRES_PASSWORD")
    db_host = os.getenv("POSTGRES_HOST")
    db_port = os.getenv("POSTGRES_PORT", "5432")
    db_name = os.getenv("POSTGRES_DB")

    if not any([db_user, db_password, db_host, db_name]):
        return DEFAULT_DATABASE_URL

    if not all([db_user, db_password, db_host, db_name]):
        missing = []
        if not db_user: missing.append("POSTGRES_USER")
        if not db_password: missing.append("POSTGRES_PASSWORD")
        if not db_host: missing.append("POSTGRES_HOST")
        if not db_name: missing.append("POSTGRES_DB")
        raise ValueError(f"Missing required database environment variables: {', '.join(missing)}")

    return f"postgresql://{db_user}:{db_password}@{db_host}:{db_port}/{db_name}"


def _is_pytest_runtime() -> bool:
    """Best-effort detection that we're executing under pytest.

    ``PYTEST_CURRENT_TEST`` is only set while a test runs, so module import
    during collection is detected through ``sys.modules`` instead.
    """
    if os.getenv("PYTEST_RUNNING") == "1":
        return True
    if "PYTEST_CURRENT_TEST" in os.environ:
        return True
    return "pytest" in sys.modules


# Test override strategy:
# 1. STOREFRONT_TEST_DB wins when set.
# 2. Else TEST_DATABASE_URL (e2e fixtures against a real Postgres).
# 3. Else under pytest, force in-memory sqlite shared through a StaticPool.
explicit_test_db = os.getenv("STOREFRONT_TEST_DB")
explicit_e2e_db = os.getenv("TEST_DATABASE_URL")

DATABASE_URL = _get_database_url()
_engine_kwargs = {"pool_pre_ping": True}

if explicit_test_db:
    DATABASE_URL = explicit_test_db
    _engine_kwargs = {"connect_args": {"check_same_thread": False}} if DATABASE_URL.startswith("sqlite") else {}
elif explicit_e2e_db:
    DATABASE_URL = explicit_e2e_db
    _engine_kwargs = {}
elif _is_pytest_runtime():
    DATABASE_URL = "sqlite+pysqlite:///:memory:"
    _engine_kwargs = {
        "connect_args": {"check_same_thread": False},
        "poolclass": StaticPool,
    }

engine = create_engine(DATABASE_URL, **_engine_kwargs)


if DATABASE_URL.startswith("sqlite"):
    # SQLite ignores ON DELETE rules unless foreign keys are enabled per connection
    @event.listens_for(engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def is_in_memory_sqlite() -> bool:
    url = str(engine.url)
    return url.startswith("sqlite") and ":memory:" in url


def init_sqlite_schema() -> None:
    """Create all tables on SQLite; Postgres schemas are owned by Alembic."""
    if not str(engine.url).startswith("sqlite"):
        return
    from storefront.db import models  # local import avoids a cycle at module load
    models.Base.metadata.create_all(bind=engine)


# Every new connection to the in-memory database shares the StaticPool
# connection, so the schema has to exist before the first request.
if is_in_memory_sqlite():
    init_sqlite_schema()


def get_db():
    """Dependency to get a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
