import re

from bookshelf.errors import NotFound, OperationFailed, ValidationError
from bookshelf.models.reading_list import READING_STATUSES, TO_READ
from bookshelf.parsing import first_present, parse_positive_int
from bookshelf.repositories.book_repository import BookRepository
from bookshelf.repositories.reading_list_repository import ReadingListRepository


SUGGESTION_LIMIT = 12
CANDIDATE_POOL = 300
AUTHOR_SCORE = 4
TAG_SCORE = 2

_TAG_SEPARATORS = re.compile(r"[,，、;|/]+")


def normalize_status(value):
    if not isinstance(value, str):
        return None
    normalized = value.strip().lower()
    return normalized if normalized in READING_STATUSES else None


def normalize_token(value):
    if not value:
        return None
    normalized = value.strip().lower()
    return normalized or None


def parse_tags(tags):
    if not tags:
        return []
    return [tag for tag in map(normalize_token, _TAG_SEPARATORS.split(tags)) if tag]


def _suggestion(book, score, reasons):
    item = book.to_dict()
    item.pop("user_id", None)
    item["score"] = score
    item["reasons"] = reasons
    return item


class ReadingListService:
    """Explicit reading-list management.

    Unlike progress-driven sync, these calls set the status as given, so a
    completed book can be moved back to ``reading`` or ``to_read`` here.
    """

    def __init__(self, repository=None, book_repository=None):
        self.repository = repository or ReadingListRepository()
        self.book_repository = book_repository or BookRepository()

    def list_items(self, user_id, book_id=None, status=None):
        return self.repository.list_entries(
            user_id, parse_positive_int(book_id), normalize_status(status)
        )

    def add_item(self, user_id, payload):
        book_id = parse_positive_int(first_present(payload, "book_id", "bookId"))
        if not book_id:
            raise ValidationError("book_id is required")
        status = normalize_status(payload.get("status")) or TO_READ
        entry = self.repository.save_entry(user_id, book_id, status)
        if entry is None:
            raise OperationFailed("Failed to load saved reading-list item")
        return entry

    def change_status(self, user_id, payload):
        entry_id = parse_positive_int(payload.get("id"))
        if not entry_id:
            raise ValidationError("id is required")
        status = normalize_status(payload.get("status"))
        if not status:
            raise ValidationError("status must be to_read, reading, or completed")
        entry = self.repository.update_status(user_id, entry_id, status)
        if entry is None:
            raise NotFound("Reading-list item not found")
        return entry

    def remove_item(self, user_id, entry_id=None, book_id=None):
        entry_id = parse_positive_int(entry_id)
        book_id = parse_positive_int(book_id)
        if not entry_id and not book_id:
            raise ValidationError("Provide id or bookId to delete")
        deleted = self.repository.delete_entry(user_id, entry_id=entry_id, book_id=book_id)
        if not deleted:
            raise NotFound("Reading-list item not found")
        return deleted

    def suggest(self, user_id):
        """Recommend recent books that share authors or tags with the user's list.

        Each matching author scores 4 and each matching tag 2. Remaining
        slots are filled with the most recent unlisted books at score 0.
        """
        listed = self.book_repository.get_on_reading_list(user_id)
        listed_ids = {book.id for book in listed}
        authors = {normalize_token(book.author) for book in listed} - {None}
        tags = {tag for book in listed for tag in parse_tags(book.tags)}

        candidates = [
            book for book in self.book_repository.get_recent(CANDIDATE_POOL)
            if book.id not in listed_ids
        ]

        scored = []
        for book in candidates:
            score = 0
            reasons = []
            if normalize_token(book.author) in authors:
                score += AUTHOR_SCORE
                reasons.append("Same author as books in your reading list")
            matched = [tag for tag in parse_tags(book.tags) if tag in tags]
            if matched:
                score += TAG_SCORE * len(matched)
                reasons.append(f"Matched tags: {', '.join(matched[:3])}")
            if score > 0:
                scored.append(_suggestion(book, score, reasons))

        scored.sort(key=lambda item: item["score"], reverse=True)
        suggestions = scored[:SUGGESTION_LIMIT]

        selected = {item["id"] for item in suggestions}
        filler = "Popular recent addition" if listed else "Start with recent additions"
        for book in candidates:
            if len(suggestions) >= SUGGESTION_LIMIT:
                break
            if book.id in selected:
                continue
            suggestions.append(_suggestion(book, 0, [filler]))
            selected.add(book.id)
        return suggestions
