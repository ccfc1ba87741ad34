from datetime import datetime, timezone


def utcnow():
    return datetime.now(timezone.utc).replace(tzinfo=None)


from bookshelf.models.book import Book  # noqa: E402
from bookshelf.models.book_tracking import BookTracking  # noqa: E402
from bookshelf.models.reading_list import ReadingListEntry, READING_STATUSES  # noqa: E402
from bookshelf.models.user import User  # noqa: E402

__all__ = [
    "Book",
    "BookTracking",
    "ReadingListEntry",
    "READING_STATUSES",
    "User",
    "utcnow",
]
