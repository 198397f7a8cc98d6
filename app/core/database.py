# app/core/database.py
import logging
import time
from contextlib import contextmanager

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from app.core.config import get_settings

logger = logging.getLogger(__name__)


def build_engine(url: str, log_sql: bool = False, **kwargs) -> Engine:
    """Create an engine for ``url``.

    SQLite connections get foreign key enforcement switched on so assignment
    rows can never point at a missing ticket or user. With ``log_sql`` every
    statement is logged at DEBUG together with its duration.
    """
    is_sqlite = url.startswith("sqlite")
    connect_args = {"check_same_thread": False} if is_sqlite else {}
    engine = create_engine(url, connect_args=connect_args, **kwargs)

    if is_sqlite:
        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    if log_sql:
        @event.listens_for(engine, "before_cursor_execute")
        def _start_timer(conn, cursor, statement, parameters, context, executemany):
            conn.info.setdefault("query_start", []).append(time.perf_counter())

        @event.listens_for(engine, "after_cursor_execute")
        def _log_query(conn, cursor, statement, parameters, context, executemany):
            duration_ms = (time.perf_counter() - conn.info["query_start"].pop()) * 1000
            logger.debug(
                "executed query %s (%.1f ms, rows=%s)", statement, duration_ms, cursor.rowcount
            )

    return engine


settings = get_settings()

engine = build_engine(settings.DATABASE_URL, log_sql=settings.LOG_SQL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()

# Common DB dependency
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def transaction(db: Session):
    """Commit everything done inside the block, or roll all of it back."""
    try:
        yield
        db.commit()
    except Exception:
        db.rollback()
        raise
