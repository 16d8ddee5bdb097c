"""
SQLAlchemy models for the Pre-IPO SIP platform tables written by the seeders.

The ``db`` handle lives here so every model module can do
``from app.models import db`` without importing the app factory.
"""

from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()
