"""
Flask CLI entry point.

Usage:
    FLASK_APP=wsgi flask seed all
    FLASK_APP=wsgi flask seed validate
    FLASK_APP=wsgi flask db upgrade
"""

from app import create_app

app = create_app()
