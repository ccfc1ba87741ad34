from flask import Blueprint

book_tracking_bp = Blueprint("book_tracking", __name__, url_prefix="/api/book-tracking")

from bookshelf.blueprints.book_tracking import routes  # noqa: E402,F401
