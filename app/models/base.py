"""
TimestampMixin — created_at / updated_at columns shared by seeded tables.

Usage:
    class Sector(TimestampMixin, db.Model):
        ...
"""

from datetime import datetime, timezone

from app.models import db


def utcnow():
    return datetime.now(timezone.utc)


class TimestampMixin:
    """Adds created_at / updated_at audit columns."""

    created_at = db.Column(db.DateTime, default=utcnow)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow)
