from bookshelf.config.base import BaseConfig, DevelopmentConfig, TestingConfig

__all__ = ["BaseConfig", "DevelopmentConfig", "TestingConfig"]
