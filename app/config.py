"""
Configuration classes for the seeder app.

Usage:
    config_name = os.getenv("APP_ENV", "development")
    app.config.from_object(config[config_name])

Seeder settings:
    SEED_TEST_DATA         seed test users, lifecycle users and investments
    SEED_DEFAULT_PASSWORD  plain-text password hashed for every seeded account
    SEED_BCRYPT_ROUNDS     bcrypt cost for those hashes
"""

import os
import secrets

basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))

_SQLITE_DEV = f"sqlite:///{os.path.join(basedir, 'instance', 'preiposip_dev.db')}"
_SQLITE_TEST = "sqlite:///:memory:"


def _env_flag(name, default):
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _database_url(fallback=None):
    """``DATABASE_URL`` with Heroku-style ``postgres://`` rewritten for SQLAlchemy 2."""
    url = os.getenv("DATABASE_URL", "")
    if not url:
        return fallback
    return url.replace("postgres://", "postgresql://", 1)


class Config:
    """Shared across environments."""

    SECRET_KEY = os.getenv("SECRET_KEY") or secrets.token_hex(32)
    DEBUG = False
    TESTING = False
    LOG_FORMAT = os.getenv("LOG_FORMAT")

    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {}

    SEED_TEST_DATA = _env_flag("SEED_TEST_DATA", False)
    SEED_DEFAULT_PASSWORD = os.getenv("SEED_DEFAULT_PASSWORD", "password")
    SEED_BCRYPT_ROUNDS = int(os.getenv("SEED_BCRYPT_ROUNDS", "12"))


class DevelopmentConfig(Config):
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = _database_url(_SQLITE_DEV)
    SEED_TEST_DATA = _env_flag("SEED_TEST_DATA", True)


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = os.getenv("TEST_DATABASE_URL", _SQLITE_TEST)
    SEED_TEST_DATA = True
    # bcrypt minimum
    SEED_BCRYPT_ROUNDS = 4


class ProductionConfig(Config):
    """Production: Postgres only, test data off unless explicitly enabled."""

    SQLALCHEMY_DATABASE_URI = _database_url()
    SQLALCHEMY_ENGINE_OPTIONS = {
        "pool_pre_ping": True,
        "pool_recycle": 300,
        "connect_args": {
            # per-statement cap, milliseconds
            "options": "-c statement_timeout=60000",
        },
    }

    @classmethod
    def check(cls):
        if not cls.SQLALCHEMY_DATABASE_URI:
            raise RuntimeError("DATABASE_URL environment variable is required in production")
        if not os.getenv("SECRET_KEY"):
            raise RuntimeError("SECRET_KEY environment variable must be set in production")


config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}
