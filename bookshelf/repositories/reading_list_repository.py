import logging
from collections import namedtuple

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from bookshelf import db
from bookshelf.errors import ConstraintViolation, OperationFailed
from bookshelf.models import utcnow
from bookshelf.models.reading_list import ReadingListEntry, promotable_from
from bookshelf.repositories.store import current_insert, ensure_connection


logger = logging.getLogger(__name__)


class SyncResult(namedtuple("SyncResult", ["status", "error"])):
    """Outcome of a progress-driven reading-list sync.

    ``status`` is the entry's status after the sync, ``error`` the exception
    that stopped it. Exactly one of the two is set.
    """

    __slots__ = ()

    @property
    def ok(self):
        return self.error is None


class ReadingListRepository:
    def __init__(self, session=None, insert=None):
        self._session = session
        self._insert = insert

    @property
    def session(self):
        return self._session if self._session is not None else db.session

    @property
    def insert(self):
        return self._insert or current_insert()

    def get_entry(self, user_id, book_id):
        return (
            self.session.query(ReadingListEntry)
            .filter_by(user_id=user_id, book_id=book_id)
            .populate_existing()
            .first()
        )

    def get_entry_by_id(self, user_id, entry_id):
        return (
            self.session.query(ReadingListEntry)
            .filter_by(id=entry_id, user_id=user_id)
            .populate_existing()
            .first()
        )

    def sync_from_progress(self, user_id, book_id, derived):
        try:
            table = ReadingListEntry.__table__
            now = utcnow()
            self.session.execute(
                self.insert(table)
                .values(user_id=user_id, book_id=book_id, status=derived, added_at=now, updated_at=now)
                .on_conflict_do_nothing(index_elements=[table.c.user_id, table.c.book_id])
            )
            self.session.execute(
                table.update()
                .where(
                    table.c.user_id == user_id,
                    table.c.book_id == book_id,
                    table.c.status.in_(promotable_from(derived)),
                )
                .values(status=derived, updated_at=now)
            )
            self.session.commit()
            entry = self.get_entry(user_id, book_id)
            return SyncResult(status=entry.status if entry else None, error=None)
        except Exception as exc:
            self.session.rollback()
            return SyncResult(status=None, error=exc)

    def list_entries(self, user_id, book_id=None, status=None):
        ensure_connection(self.session)
        query = self.session.query(ReadingListEntry).filter_by(user_id=user_id)
        if book_id:
            query = query.filter_by(book_id=book_id)
        if status:
            query = query.filter_by(status=status)
        try:
            return query.order_by(
                ReadingListEntry.added_at.desc(), ReadingListEntry.id.desc()
            ).all()
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise OperationFailed("Failed to fetch reading list", details=str(exc)) from exc

    def save_entry(self, user_id, book_id, status):
        ensure_connection(self.session)
        table = ReadingListEntry.__table__
        now = utcnow()
        stmt = self.insert(table).values(
            user_id=user_id, book_id=book_id, status=status, added_at=now, updated_at=now
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[table.c.user_id, table.c.book_id],
            set_={"status": stmt.excluded.status, "updated_at": now},
        )
        self._commit(stmt, "Failed to save reading list item")
        return self.get_entry(user_id, book_id)

    def update_status(self, user_id, entry_id, status):
        ensure_connection(self.session)
        table = ReadingListEntry.__table__
        stmt = (
            table.update()
            .where(table.c.id == entry_id, table.c.user_id == user_id)
            .values(status=status, updated_at=utcnow())
        )
        if not self._commit(stmt, "Failed to update reading-list item"):
            return None
        return self.get_entry_by_id(user_id, entry_id)

    def delete_entry(self, user_id, entry_id=None, book_id=None):
        ensure_connection(self.session)
        table = ReadingListEntry.__table__
        stmt = table.delete().where(table.c.user_id == user_id)
        if entry_id:
            stmt = stmt.where(table.c.id == entry_id)
        else:
            stmt = stmt.where(table.c.book_id == book_id)
        return self._commit(stmt, "Failed to delete reading-list item")

    def _commit(self, stmt, message):
        try:
            result = self.session.execute(stmt)
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            raise ConstraintViolation(message, details=str(exc)) from exc
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise OperationFailed(message, details=str(exc)) from exc
        return result.rowcount
