import os
import sqlite3

from sqlalchemy import create_engine, event, inspect
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

from apps.api.core.config import settings
from apps.api.core.logging import get_logger

logger = get_logger(__name__)

# ----------------------------------------------------
# 1. DATABASE URL
# ----------------------------------------------------
DATABASE_URL = settings.DATABASE_URL

# Ensure the directory of a file-backed SQLite database exists
if DATABASE_URL.startswith("sqlite:///"):
    db_path = DATABASE_URL[len("sqlite:///"):]
    if db_path and db_path != ":memory:":
        os.makedirs(os.path.dirname(os.path.abspath(db_path)), exist_ok=True)

# ----------------------------------------------------
# 2. CREATE ENGINE
# ----------------------------------------------------
connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(
    DATABASE_URL,
    connect_args=connect_args,
    echo=settings.SQL_ECHO,
)


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """
    SQLite ships with foreign keys switched off; invoices rely on them for
    comp_code integrity and ON DELETE CASCADE.
    """
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# ----------------------------------------------------
# 3. SESSION FACTORY
# ----------------------------------------------------
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# ----------------------------------------------------
# 4. BASE CLASS FOR ALL MODELS
# ----------------------------------------------------
Base = declarative_base()


# ----------------------------------------------------
# 5. DEPENDENCY FOR FASTAPI
# ----------------------------------------------------
def get_db():
    """
    FastAPI dependency: yields a DB session.

    The session is the query executor for one request; closing it rolls
    back anything left uncommitted after a failed statement.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# ----------------------------------------------------
# 6. SCHEMA BOOTSTRAP
# ----------------------------------------------------
def table_exists(table_name: str, bind=None) -> bool:
    inspector = inspect(bind or engine)
    return table_name in inspector.get_table_names()


def run_migrations(bind=None):
    """
    Create any missing tables from the declarative models.

    Existing tables are left untouched; schema changes go through the
    Alembic migrations in apps/api/migrations.
    """
    # Register the models on Base.metadata
    from apps.api.models.company_model import Company  # noqa: F401
    from apps.api.models.invoice_model import Invoice  # noqa: F401

    bind = bind or engine

    missing = [
        name for name in Base.metadata.tables if not table_exists(name, bind)
    ]
    if not missing:
        logger.info("[DB] Schema up to date")
        return

    for name in missing:
        logger.info(f"[DB] Creating table: {name}")
    Base.metadata.create_all(bind=bind)
