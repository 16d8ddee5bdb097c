"""
Best-effort step runner for seeders whose steps are independent of each other.

Each step runs inside a savepoint. A step that raises is rolled back to its
savepoint, logged and recorded on ``stats.failures``; the remaining steps
still run and the seeder's outer transaction still commits.
"""

import logging

from app.models import db

logger = logging.getLogger(__name__)


def run_best_effort(stats, steps):
    """Run ``[(label, fn), ...]`` where each ``fn`` takes ``stats``."""
    for label, fn in steps:
        created, updated = dict(stats.created), dict(stats.updated)
        try:
            with db.session.begin_nested():
                fn(stats)
        except Exception as exc:
            logger.exception(
                "Step %s failed; continuing", label,
                extra={"seeder": stats.seeder, "table": label},
            )
            # counters from the rolled-back step no longer describe the database
            stats.created.clear()
            stats.created.update(created)
            stats.updated.clear()
            stats.updated.update(updated)
            stats.fail(label, exc)
