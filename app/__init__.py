"""
Pre-IPO SIP platform: database seeders.

Usage:
    from app import create_app
    app = create_app()           # APP_ENV, else "development"
    app = create_app("testing")

The app carries no HTTP routes. It exists to give the seeders a configured
``db`` session, ``flask db`` migrations and the ``flask seed`` command group.
"""

import logging
import os

from flask import Flask
from flask_migrate import Migrate
from sqlalchemy import event as _sa_event, engine as _sa_engine

from app.config import config
from app.middleware.logging_config import configure_logging
from app.models import db

logger = logging.getLogger(__name__)

migrate = Migrate()

MODEL_MODULES = (
    "auth",
    "configuration",
    "catalog",
    "plan",
    "cms",
    "communication",
    "campaign",
    "ledger",
    "investment",
    "disclosure",
)


@_sa_event.listens_for(_sa_engine.Engine, "connect")
def _enable_sqlite_fk(dbapi_conn, connection_record):
    """SQLite ignores FOREIGN KEY clauses unless this pragma is on."""
    if "sqlite" in type(dbapi_conn).__module__:
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def _import_models():
    """Register every seeded table on ``db.metadata``."""
    import importlib

    for name in MODEL_MODULES:
        importlib.import_module(f"app.models.{name}")


def create_app(config_name=None):
    """
    Create and configure the Flask application.

    Args:
        config_name: "development", "testing" or "production".
                     Defaults to the APP_ENV env var, then "development".

    Raises:
        RuntimeError: production without DATABASE_URL or SECRET_KEY.
    """
    config_name = config_name or os.getenv("APP_ENV", "development")
    config_cls = config[config_name]
    if hasattr(config_cls, "check"):
        config_cls.check()

    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(config_cls)

    configure_logging(app)

    db.init_app(app)
    migrate.init_app(app, db)
    _import_models()

    if app.config["SQLALCHEMY_DATABASE_URI"].startswith("sqlite:///") and not app.testing:
        os.makedirs(app.instance_path, exist_ok=True)

    # create_all only adds missing tables; Alembic owns schema changes
    with app.app_context():
        db.create_all()

    from app.seeders.cli import seed_cli
    app.cli.add_command(seed_cli)

    logger.debug("App created (%s)", config_name)
    return app
