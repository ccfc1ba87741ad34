from sqlalchemy.exc import SQLAlchemyError

from bookshelf import db
from bookshelf.errors import OperationFailed
from bookshelf.models.book import Book
from bookshelf.models.reading_list import ReadingListEntry
from bookshelf.repositories.store import ensure_connection


class BookRepository:
    def __init__(self, session=None):
        self._session = session

    @property
    def session(self):
        return self._session if self._session is not None else db.session

    def get_recent(self, limit=300):
        ensure_connection(self.session)
        try:
            return (
                self.session.query(Book)
                .order_by(Book.created_at.desc(), Book.id.desc())
                .limit(limit)
                .all()
            )
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise OperationFailed("Failed to load books", details=str(exc)) from exc

    def get_on_reading_list(self, user_id):
        ensure_connection(self.session)
        try:
            return (
                self.session.query(Book)
                .join(ReadingListEntry, ReadingListEntry.book_id == Book.id)
                .filter(ReadingListEntry.user_id == user_id)
                .all()
            )
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise OperationFailed("Failed to load reading list books", details=str(exc)) from exc
