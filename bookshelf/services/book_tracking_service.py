import logging

from bookshelf.errors import ValidationError
from bookshelf.parsing import first_present, parse_positive_int
from bookshelf.repositories.book_tracking_repository import BookTrackingRepository
from bookshelf.repositories.reading_list_repository import ReadingListRepository
from bookshelf.services.progress import calculate_progress, derive_status


logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "book_id, current_page, and total_pages are required positive integers"


class BookTrackingService:
    def __init__(self, repository=None, reading_list_repository=None):
        self.repository = repository or BookTrackingRepository()
        self.reading_list_repository = reading_list_repository or ReadingListRepository()

    def list_progress(self, user_id, book_id=None):
        return self.repository.fetch_progress(user_id, parse_positive_int(book_id))

    def record_progress(self, user_id, payload):
        book_id = parse_positive_int(first_present(payload, "book_id", "bookId"))
        current_page = parse_positive_int(first_present(payload, "current_page", "currentPage"))
        total_pages = parse_positive_int(first_present(payload, "total_pages", "totalPages"))
        if not book_id or not current_page or not total_pages:
            raise ValidationError(REQUIRED_FIELDS_MESSAGE)

        percentage = calculate_progress(current_page, total_pages)
        self.repository.upsert_progress(user_id, book_id, current_page, total_pages, percentage)

        result = self.reading_list_repository.sync_from_progress(
            user_id, book_id, derive_status(percentage)
        )
        if not result.ok:
            logger.warning(
                "Reading list sync skipped for user=%s book=%s: %s",
                user_id, book_id, result.error,
            )

        return self.repository.get_progress(user_id, book_id)

    def backfill_reading_list(self):
        synced = failed = 0
        for record in self.repository.all_progress():
            result = self.reading_list_repository.sync_from_progress(
                record.user_id, record.book_id, derive_status(record.progress_percentage)
            )
            if result.ok:
                synced += 1
            else:
                failed += 1
                logger.warning(
                    "Reading list backfill failed for user=%s book=%s: %s",
                    record.user_id, record.book_id, result.error,
                )
        return synced, failed
