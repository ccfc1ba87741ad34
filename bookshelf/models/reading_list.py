from typing import Optional, Tuple

from bookshelf import db
from bookshelf.models import utcnow


TO_READ = "to_read"
READING = "reading"
COMPLETED = "completed"

READING_STATUSES = (TO_READ, READING, COMPLETED)

# Forward order of reading-list statuses. Progress never moves an entry backwards.
_RANK = {TO_READ: 0, READING: 1, COMPLETED: 2}


def next_status(current: Optional[str], derived: str) -> str:
    """Status an entry ends up in after syncing ``derived`` onto ``current``.

    ``current`` is None when the user has no reading-list entry yet.
    """
    if current is None:
        return derived
    if _RANK[derived] > _RANK[current]:
        return derived
    return current


def promotable_from(derived: str) -> Tuple[str, ...]:
    return tuple(
        status
        for status in READING_STATUSES
        if status != derived and next_status(status, derived) == derived
    )


class ReadingListEntry(db.Model):
    __tablename__ = "reading_list_full"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(255), nullable=False, index=True)
    book_id = db.Column(db.Integer, nullable=False, index=True)
    status = db.Column(db.String(20), nullable=False, default="to_read")
    added_at = db.Column(db.DateTime, nullable=False, default=utcnow, index=True)
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    book = db.relationship(
        "Book",
        primaryjoin="foreign(ReadingListEntry.book_id) == Book.id",
        lazy="joined",
        viewonly=True,
    )

    __table_args__ = (
        db.UniqueConstraint("user_id", "book_id", name="uq_reading_list_user_book"),
        db.CheckConstraint(
            "status IN ('to_read', 'reading', 'completed')",
            name="ck_reading_list_status",
        ),
    )

    def to_dict(self):
        return {
            "id": self.id,
            "book_id": self.book_id,
            "status": self.status,
            "added_at": self.added_at.isoformat() if self.added_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
            "user_id": self.user_id,
            "book": self.book.to_dict() if self.book else None,
        }
