import pytest

from bookshelf import create_app, db
from bookshelf.config import TestingConfig
from bookshelf.models import Book
from bookshelf.repositories.book_tracking_repository import BookTrackingRepository
from bookshelf.repositories.reading_list_repository import ReadingListRepository
from bookshelf.services.book_tracking_service import BookTrackingService
from bookshelf.services.reading_list_service import ReadingListService


@pytest.fixture
def app():
    """Application bound to a fresh in-memory database."""
    app = create_app(TestingConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def tracking_repository(app):
    return BookTrackingRepository()


@pytest.fixture
def reading_list_repository(app):
    return ReadingListRepository()


@pytest.fixture
def tracking_service(tracking_repository, reading_list_repository):
    return BookTrackingService(tracking_repository, reading_list_repository)


@pytest.fixture
def reading_list_service(reading_list_repository):
    return ReadingListService(reading_list_repository)


@pytest.fixture
def sample_book(app):
    book = Book(id=42, title="Test Book", author="Test Author", year=2020)
    db.session.add(book)
    db.session.commit()
    return book
