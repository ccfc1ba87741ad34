from bookshelf import db
from bookshelf.models import utcnow


class BookTracking(db.Model):
    __tablename__ = "book_tracking"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(255), nullable=False, index=True)
    book_id = db.Column(db.Integer, nullable=False, index=True)
    current_page = db.Column(db.Integer, nullable=False, default=1)
    total_pages = db.Column(db.Integer, nullable=False, default=0)
    progress_percentage = db.Column(db.Float, nullable=False, default=0)
    last_read_at = db.Column(db.DateTime, nullable=False, default=utcnow, index=True)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    __table_args__ = (
        db.UniqueConstraint("user_id", "book_id", name="uq_book_tracking_user_book"),
    )

    def to_dict(self):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "book_id": self.book_id,
            "current_page": self.current_page,
            "total_pages": self.total_pages,
            "progress_percentage": self.progress_percentage,
            "last_read_at": _iso(self.last_read_at),
            "created_at": _iso(self.created_at),
            "updated_at": _iso(self.updated_at),
        }


def _iso(value):
    return value.isoformat() if value else None
