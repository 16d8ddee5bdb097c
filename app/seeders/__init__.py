"""
Seeder registry and orchestrator.

SEEDERS is the single, ordered list of seeders. Order follows foreign keys:
roles before users, sectors and the admin before companies, plans before
the subscriptions that reference them.

Usage:
    from app.seeders import run_seeder, seed_all

    with app.app_context():
        run_seeder("foundation")             # one seeder, own transaction
        report = seed_all()                  # everything, in order
        report = seed_all(allow_test_data=False)

Each seeder runs in its own transaction: commit on success, rollback and
re-raise on any error. ``allow_test_data=None`` means "ask the config"
(``SEED_TEST_DATA``).
"""

import logging
import time
from dataclasses import dataclass, field

from flask import current_app

from app.core.exceptions import SeedError
from app.models import db
from app.models.auth import Permission, Role, User
from app.models.catalog import BulkPurchase, Company, Product
from app.models.communication import EmailTemplate
from app.models.configuration import Setting
from app.models.investment import Wallet
from app.models.ledger import AdminLedgerEntry, LedgerAccount
from app.models.plan import Plan
from app.seeders import (
    communication_campaigns,
    companies_products,
    disclosure_modules,
    foundation,
    identity_access,
    investment_plans,
    ledger_accounts,
    user_investments,
    user_lifecycle,
)
from app.services.helpers.upsert import UpsertStats

logger = logging.getLogger(__name__)

SEEDERS = [
    foundation,
    ledger_accounts,
    identity_access,
    disclosure_modules,
    companies_products,
    investment_plans,
    communication_campaigns,
    user_lifecycle,
    user_investments,
]

SEEDERS_BY_NAME = {m.NAME: m for m in SEEDERS}


def seeder_names():
    return [m.NAME for m in SEEDERS]


def _test_data_allowed(allow_test_data):
    if allow_test_data is None:
        return bool(current_app.config.get("SEED_TEST_DATA", False))
    return bool(allow_test_data)


# ═══════════════════════════════════════════════════════════════
# Running
# ═══════════════════════════════════════════════════════════════
@dataclass
class SeederResult:
    name: str
    stats: UpsertStats | None = None
    duration_ms: int = 0
    skipped: bool = False


@dataclass
class SeedReport:
    """Outcome of ``seed_all``."""

    results: list[SeederResult] = field(default_factory=list)
    duration_ms: int = 0
    # empty for partial runs (``only=``)
    validation: list = field(default_factory=list)

    @property
    def ran(self) -> list[str]:
        return [r.name for r in self.results if not r.skipped]

    @property
    def skipped(self) -> list[str]:
        return [r.name for r in self.results if r.skipped]

    @property
    def failures(self) -> list[tuple[str, str, str]]:
        """(seeder, step, error) for every best-effort step that failed."""
        return [
            (r.name, step, error)
            for r in self.results if r.stats
            for step, error in r.stats.failures
        ]

    @property
    def total_created(self) -> int:
        return sum(r.stats.total_created for r in self.results if r.stats)

    @property
    def validation_failures(self) -> list[str]:
        return [v.message for v in self.validation if not v.passed]


def run_seeder(name, allow_test_data=None) -> UpsertStats:
    """Run one seeder by name in its own transaction.

    Raises:
        SeedError: unknown name, or a test-data seeder while test data is off.
    """
    module = SEEDERS_BY_NAME.get(name)
    if module is None:
        raise SeedError(
            f"Unknown seeder {name!r}. Available: {', '.join(seeder_names())}", seeder=name
        )
    allowed = _test_data_allowed(allow_test_data)
    if not module.PROD_SAFE and not allowed:
        raise SeedError(
            f"Seeder {name!r} creates test data and SEED_TEST_DATA is off", seeder=name
        )

    stats = UpsertStats(seeder=name)
    logger.info("Seeding %s...", name, extra={"seeder": name})
    start = time.perf_counter()
    try:
        module.run(stats, allow_test_data=allowed)
        db.session.commit()
    except Exception:
        db.session.rollback()
        logger.exception("Seeder %s failed; rolled back", name, extra={"seeder": name})
        raise
    duration_ms = int((time.perf_counter() - start) * 1000)

    stats.log_summary()
    logger.info(
        "Seeded %s: %d created, %d updated in %dms",
        name, stats.total_created, stats.total_updated, duration_ms,
        extra={
            "seeder": name,
            "rows_created": stats.total_created,
            "rows_updated": stats.total_updated,
            "steps_failed": len(stats.failures),
            "duration_ms": duration_ms,
        },
    )
    stats.duration_ms = duration_ms
    return stats


def seed_all(allow_test_data=None, only=None) -> SeedReport:
    """Run every seeder in order.

    Seeders that are not prod-safe are skipped (not failed) when test data
    is off. ``only`` restricts the run to the named seeders, still in
    registry order. A full run ends with ``validate_seed``; the checks land
    on ``report.validation``.
    """
    allowed = _test_data_allowed(allow_test_data)
    if only:
        unknown = set(only) - set(SEEDERS_BY_NAME)
        if unknown:
            raise SeedError(f"Unknown seeder(s): {', '.join(sorted(unknown))}")

    report = SeedReport()
    start = time.perf_counter()
    for module in SEEDERS:
        if only and module.NAME not in only:
            continue
        if not module.PROD_SAFE and not allowed:
            logger.info("Skipping %s (test data not allowed)", module.NAME, extra={"seeder": module.NAME})
            report.results.append(SeederResult(name=module.NAME, skipped=True))
            continue
        stats = run_seeder(module.NAME, allow_test_data=allowed)
        report.results.append(SeederResult(name=module.NAME, stats=stats, duration_ms=stats.duration_ms))
    report.duration_ms = int((time.perf_counter() - start) * 1000)

    logger.info(
        "Seed complete: %d seeders ran, %d skipped, %d rows created in %dms",
        len(report.ran), len(report.skipped), report.total_created, report.duration_ms,
        extra={"rows_created": report.total_created, "duration_ms": report.duration_ms},
    )
    if report.failures:
        logger.warning("%d best-effort step(s) failed", len(report.failures),
                       extra={"steps_failed": len(report.failures)})
    if not only:
        report.validation = validate_seed(allowed)
    return report


# ═══════════════════════════════════════════════════════════════
# Validation
# ═══════════════════════════════════════════════════════════════
@dataclass
class ValidationResult:
    """Result of one validation check."""

    name: str
    expected: int | None
    actual: int
    passed: bool
    message: str = ""


# (label, model, minimum); the second block only applies with test data
MINIMUM_COUNTS = [
    ("settings", Setting, 50),
    ("permissions", Permission, 70),
    ("roles", Role, 5),
    ("users", User, 3),
    ("companies", Company, 5),
    ("products", Product, 5),
    ("plans", Plan, 3),
    ("bulk_purchases", BulkPurchase, 5),
    ("email_templates", EmailTemplate, 10),
    ("ledger_accounts", LedgerAccount, 17),
    ("admin_ledger_entries", AdminLedgerEntry, 2),
]
TEST_DATA_MINIMUM_COUNTS = [
    ("users", User, 8),
    ("wallets", Wallet, 5),
]


def validate_seed(with_test_data=None) -> list[ValidationResult]:
    """Check row-count minimums and bulk-purchase inventory conservation.

    Returns every check; callers filter on ``passed``.
    """
    checks = list(MINIMUM_COUNTS)
    if _test_data_allowed(with_test_data):
        checks = [c for c in checks if c[0] != "users"] + TEST_DATA_MINIMUM_COUNTS

    results = []
    for label, model, minimum in checks:
        actual = db.session.query(model).count()
        passed = actual >= minimum
        results.append(ValidationResult(
            name=label,
            expected=minimum,
            actual=actual,
            passed=passed,
            message="" if passed else f"{label}: expected at least {minimum}, found {actual}",
        ))

    for bulk in BulkPurchase.query.order_by(BulkPurchase.id).all():
        held = (bulk.quantity_allocated or 0) + (bulk.quantity_reserved or 0)
        passed = held == bulk.total_quantity
        results.append(ValidationResult(
            name=f"bulk_purchase:{bulk.id}:inventory",
            expected=bulk.total_quantity,
            actual=held,
            passed=passed,
            message="" if passed else (
                f"bulk purchase {bulk.id}: allocated + reserved = {held}, total = {bulk.total_quantity}"
            ),
        ))

    failed = [r for r in results if not r.passed]
    if failed:
        for r in failed:
            logger.warning("Seed validation failed: %s", r.message)
    else:
        logger.info("Seed validation passed (%d checks)", len(results))
    return results
