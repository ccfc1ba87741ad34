import os


def _env_flag(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class BaseConfig:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key")
    SQLALCHEMY_DATABASE_URI = os.environ.get(
        "DATABASE_URL", "sqlite:///bookshelf.db"
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    ALLOW_ANONYMOUS = _env_flag("ALLOW_ANONYMOUS", True)
    ANONYMOUS_USER_ID = os.environ.get("ANONYMOUS_USER_ID", "anonymous")
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


class DevelopmentConfig(BaseConfig):
    DEBUG = True


class TestingConfig(BaseConfig):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    ALLOW_ANONYMOUS = True
    LOG_LEVEL = "DEBUG"
