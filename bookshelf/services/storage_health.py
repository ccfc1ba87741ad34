import time
from typing import Dict

from sqlalchemy import inspect, text
from sqlalchemy.exc import SQLAlchemyError

from bookshelf import db
from bookshelf.errors import StorageUnavailable
from bookshelf.repositories.store import ensure_connection


REQUIRED_TABLES = ("book_tracking", "reading_list_full")


def storage_health() -> Dict:
    started = time.monotonic()
    ensure_connection(db.session)
    try:
        db.session.execute(text("SELECT 1"))
        tables = set(inspect(db.engine).get_table_names())
    except SQLAlchemyError as exc:
        db.session.rollback()
        raise StorageUnavailable("Database is not available", details=str(exc)) from exc
    missing = [name for name in REQUIRED_TABLES if name not in tables]
    return {
        "status": "ok" if not missing else "degraded",
        "dialect": db.engine.dialect.name,
        "missing_tables": missing,
        "latency_ms": round((time.monotonic() - started) * 1000, 2),
    }
