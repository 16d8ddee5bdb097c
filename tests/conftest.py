"""
Shared pytest fixtures for the Pre-IPO SIP seeder test suite.

Provides:
    - app: Flask application (session-scoped)
    - _setup_db: Database table creation/teardown (session-scoped)
    - session: Per-test DB cleanup w/ rollback + recreate (autouse)
    - cli_runner: Flask CLI runner (function-scoped)
    - seed_up_to: run every seeder up to and including a name
"""

import pytest

from app import create_app
from app.models import db as _db


# ── App & DB fixtures ────────────────────────────────────────────────────


@pytest.fixture(scope="session")
def app():
    """Create the Flask application once per test session."""
    application = create_app("testing")
    return application


@pytest.fixture(scope="session")
def _setup_db(app):
    """Create all tables at session start, drop at end."""
    with app.app_context():
        _db.create_all()
    yield
    with app.app_context():
        _db.drop_all()


@pytest.fixture(autouse=True)
def session(app, _setup_db):
    """Per-test: open app context, rollback after test, recreate tables."""
    with app.app_context():
        yield
        _db.session.rollback()
        _db.drop_all()
        _db.create_all()


@pytest.fixture()
def cli_runner(app):
    """Flask CLI runner."""
    return app.test_cli_runner()


# ── Convenience fixtures ─────────────────────────────────────────────────


@pytest.fixture()
def seed_up_to():
    """Return a callable that runs the registry in order through ``name``.

    Usage:
        def test_x(seed_up_to):
            seed_up_to("companies_products")
    """
    from app.seeders import SEEDERS, run_seeder

    def _run(name, allow_test_data=True):
        results = {}
        for module in SEEDERS:
            if module.PROD_SAFE or allow_test_data:
                results[module.NAME] = run_seeder(module.NAME, allow_test_data=allow_test_data)
            if module.NAME == name:
                break
        return results

    return _run
