from bookshelf.models.reading_list import (  # noqa: F401
    COMPLETED,
    READING,
    TO_READ,
    next_status,
    promotable_from,
)


def calculate_progress(current_page: int, total_pages: int) -> float:
    if total_pages <= 0:
        return 0
    clamped = max(0, min(current_page, total_pages))
    return round((clamped / total_pages) * 100, 2)


def derive_status(percentage: float) -> str:
    return COMPLETED if percentage >= 100 else READING
