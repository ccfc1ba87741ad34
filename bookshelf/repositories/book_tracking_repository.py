import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from bookshelf import db
from bookshelf.errors import ConstraintViolation, OperationFailed
from bookshelf.models import utcnow
from bookshelf.models.book_tracking import BookTracking
from bookshelf.repositories.store import current_insert, ensure_connection


logger = logging.getLogger(__name__)


class BookTrackingRepository:
    def __init__(self, session=None, insert=None):
        self._session = session
        self._insert = insert

    @property
    def session(self):
        return self._session if self._session is not None else db.session

    @property
    def insert(self):
        return self._insert or current_insert()

    def get_progress(self, user_id, book_id):
        ensure_connection(self.session)
        try:
            return (
                self.session.query(BookTracking)
                .filter_by(user_id=user_id, book_id=book_id)
                .populate_existing()
                .first()
            )
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise OperationFailed("Failed to load reading progress", details=str(exc)) from exc

    def fetch_progress(self, user_id, book_id=None):
        ensure_connection(self.session)
        query = self.session.query(BookTracking).filter_by(user_id=user_id)
        if book_id:
            query = query.filter_by(book_id=book_id)
        try:
            return (
                query.order_by(BookTracking.last_read_at.desc(), BookTracking.id.desc())
                .populate_existing()
                .all()
            )
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise OperationFailed("Failed to fetch reading progress", details=str(exc)) from exc

    def upsert_progress(self, user_id, book_id, current_page, total_pages, percentage):
        ensure_connection(self.session)
        now = utcnow()
        table = BookTracking.__table__
        stmt = self.insert(table).values(
            user_id=user_id,
            book_id=book_id,
            current_page=current_page,
            total_pages=total_pages,
            progress_percentage=percentage,
            last_read_at=now,
            created_at=now,
            updated_at=now,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[table.c.user_id, table.c.book_id],
            set_={
                "current_page": stmt.excluded.current_page,
                "total_pages": stmt.excluded.total_pages,
                "progress_percentage": stmt.excluded.progress_percentage,
                "last_read_at": now,
                "updated_at": now,
            },
        )
        try:
            self.session.execute(stmt)
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            raise ConstraintViolation("Failed to update reading progress", details=str(exc)) from exc
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise OperationFailed("Failed to update reading progress", details=str(exc)) from exc
        logger.debug(
            "Stored progress user=%s book=%s page=%s/%s (%.2f%%)",
            user_id, book_id, current_page, total_pages, percentage,
        )
        return self.get_progress(user_id, book_id)

    def all_progress(self):
        ensure_connection(self.session)
        return self.session.query(BookTracking).order_by(BookTracking.id.asc()).all()
