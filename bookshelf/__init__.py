import logging

from flask import Flask
from flask_sqlalchemy import SQLAlchemy


db = SQLAlchemy()


def create_app(config_object=None):
    app = Flask(__name__)

    from bookshelf.config import DevelopmentConfig

    app.config.from_object(config_object or DevelopmentConfig)
    app.logger.setLevel(getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO))

    db.init_app(app)

    from bookshelf import models  # noqa: F401
    from bookshelf.repositories.store import EXTENSION_KEY, insert_for

    with app.app_context():
        app.extensions[EXTENSION_KEY] = insert_for(db.engine)

    from bookshelf.blueprints.auth import auth_bp
    from bookshelf.blueprints.book_tracking import book_tracking_bp
    from bookshelf.blueprints.health import health_bp
    from bookshelf.blueprints.reading_list import reading_list_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(book_tracking_bp)
    app.register_blueprint(health_bp)
    app.register_blueprint(reading_list_bp)

    return app
