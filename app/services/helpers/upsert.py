"""
Natural-key upsert helpers.

Every seeder write MUST go through these helpers instead of a bare
``db.session.add``. Looking up by natural key first is what makes a seeder
safe to run twice: the second run finds the row and updates it in place.

Usage:
    sector, created = upsert(Sector, {"slug": "fintech"}, {"name": "Fintech"})

    # Leave an existing row untouched (e.g. a KYC record a reviewer edited)
    kyc, created = find_or_create(UserKyc, {"user_id": user.id}, {"status": "pending"})

Neither helper commits. Transaction boundaries belong to the caller
(``app.seeders.run_seeder``).
"""

import logging
from collections import defaultdict
from dataclasses import dataclass, field

from sqlalchemy import select

from app.core.exceptions import ConflictError
from app.models import db

logger = logging.getLogger(__name__)


def _lookup(model, lookup: dict):
    """Return the single row matching ``lookup`` or None.

    Raises ConflictError if the natural key is ambiguous.
    """
    stmt = select(model).filter_by(**lookup).limit(2)
    rows = db.session.execute(stmt).scalars().all()
    if len(rows) > 1:
        raise ConflictError(
            resource=model.__name__,
            field=",".join(sorted(lookup)),
            value=str(lookup),
        )
    return rows[0] if rows else None


def upsert(model, lookup: dict, values: dict | None = None):
    """Find by natural key, then create or update.

    Args:
        model: SQLAlchemy model class.
        lookup: Natural-key column values used for the lookup.
        values: Non-key column values applied on create and on update.

    Returns:
        (instance, created) tuple.
    """
    values = values or {}
    instance = _lookup(model, lookup)
    if instance is None:
        instance = model(**lookup, **values)
        db.session.add(instance)
        db.session.flush()
        return instance, True

    for key, val in values.items():
        setattr(instance, key, val)
    db.session.flush()
    return instance, False


def find_or_create(model, lookup: dict, values: dict | None = None):
    """Like ``upsert`` but an existing row is returned unchanged."""
    instance = _lookup(model, lookup)
    if instance is not None:
        return instance, False
    instance = model(**lookup, **(values or {}))
    db.session.add(instance)
    db.session.flush()
    return instance, True


@dataclass
class UpsertStats:
    """Created/updated counters per table label, plus best-effort failures."""

    seeder: str = ""
    created: dict = field(default_factory=lambda: defaultdict(int))
    updated: dict = field(default_factory=lambda: defaultdict(int))
    failures: list = field(default_factory=list)
    duration_ms: int = 0

    def record(self, label: str, created: bool) -> None:
        if created:
            self.created[label] += 1
        else:
            self.updated[label] += 1

    def fail(self, step: str, exc: Exception) -> None:
        self.failures.append((step, str(exc)))

    @property
    def total_created(self) -> int:
        return sum(self.created.values())

    @property
    def total_updated(self) -> int:
        return sum(self.updated.values())

    def labels(self) -> list[str]:
        return sorted(set(self.created) | set(self.updated))

    def log_summary(self) -> None:
        for label in self.labels():
            logger.info(
                "  %s: %d created, %d updated",
                label, self.created.get(label, 0), self.updated.get(label, 0),
                extra={
                    "seeder": self.seeder,
                    "table": label,
                    "rows_created": self.created.get(label, 0),
                    "rows_updated": self.updated.get(label, 0),
                },
            )
        if self.failures:
            logger.warning(
                "%d step(s) failed: %s",
                len(self.failures), ", ".join(step for step, _ in self.failures),
                extra={"seeder": self.seeder, "steps_failed": len(self.failures)},
            )
