from flask import Blueprint

reading_list_bp = Blueprint("reading_list", __name__, url_prefix="/api/reading-list")

from bookshelf.blueprints.reading_list import routes  # noqa: E402,F401
