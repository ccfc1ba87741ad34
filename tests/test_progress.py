import pytest

from bookshelf.services.progress import (
    COMPLETED,
    READING,
    TO_READ,
    calculate_progress,
    derive_status,
    next_status,
    promotable_from,
)


@pytest.mark.parametrize("current, total", [(1, 3), (50, 200), (2, 3), (199, 200), (7, 9)])
def test_calculate_progress_rounds_to_two_decimals(current, total):
    assert calculate_progress(current, total) == round(current / total * 100, 2)


def test_calculate_progress_clamps_overflow_to_hundred():
    assert calculate_progress(250, 200) == 100


def test_calculate_progress_with_no_pages_is_zero():
    assert calculate_progress(5, 0) == 0
    assert calculate_progress(5, -3) == 0


def test_derive_status():
    assert derive_status(0) == READING
    assert derive_status(99.99) == READING
    assert derive_status(100) == COMPLETED
    assert derive_status(100.5) == COMPLETED


@pytest.mark.parametrize(
    "current, derived, expected",
    [
        (None, READING, READING),
        (None, COMPLETED, COMPLETED),
        (TO_READ, READING, READING),
        (TO_READ, COMPLETED, COMPLETED),
        (READING, READING, READING),
        (READING, COMPLETED, COMPLETED),
        (COMPLETED, READING, COMPLETED),
        (COMPLETED, COMPLETED, COMPLETED),
    ],
)
def test_next_status_is_forward_only(current, derived, expected):
    assert next_status(current, derived) == expected


def test_promotable_from():
    assert promotable_from(READING) == (TO_READ,)
    assert promotable_from(COMPLETED) == (TO_READ, READING)


def test_transition_table_is_shared_with_models_layer():
    from bookshelf.models import reading_list
    from bookshelf.repositories import reading_list_repository

    assert reading_list_repository.promotable_from is reading_list.promotable_from
    assert next_status is reading_list.next_status
