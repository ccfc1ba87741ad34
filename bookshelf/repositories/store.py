from flask import current_app
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import SQLAlchemyError

from bookshelf.errors import StorageUnavailable


EXTENSION_KEY = "bookshelf.upsert_insert"

_UPSERT_INSERTS = {
    "sqlite": sqlite_insert,
    "postgresql": postgresql_insert,
}


def insert_for(engine):
    """Return the dialect ``insert`` that supports ``ON CONFLICT`` for ``engine``."""
    name = engine.dialect.name
    try:
        return _UPSERT_INSERTS[name]
    except KeyError:
        raise StorageUnavailable(
            f"No upsert support for '{name}' databases",
            details=f"supported: {', '.join(sorted(_UPSERT_INSERTS))}",
        )


def current_insert():
    insert = current_app.extensions.get(EXTENSION_KEY)
    if insert is None:
        raise StorageUnavailable("Database binding is not configured")
    return insert


def ensure_connection(session):
    try:
        session.connection()
    except SQLAlchemyError as exc:
        session.rollback()
        raise StorageUnavailable("Database is not available", details=str(exc)) from exc
