"""
Seeder registry, orchestration and post-seed validation.
"""

import logging

import pytest

from app.core.exceptions import SeedError
from app.models.auth import User
from app.models.catalog import BulkPurchase
from app.models.configuration import Setting
from app.models import db
from app.seeders import (
    SEEDERS,
    foundation,
    run_seeder,
    seed_all,
    seeder_names,
    validate_seed,
)


# ═══════════════════════════════════════════════════════════════
# REGISTRY
# ═══════════════════════════════════════════════════════════════


class TestRegistry:
    def test_order(self):
        assert seeder_names() == [
            "foundation",
            "ledger_accounts",
            "identity_access",
            "disclosure_modules",
            "companies_products",
            "investment_plans",
            "communication_campaigns",
            "user_lifecycle",
            "user_investments",
        ]

    def test_test_data_seeders_last(self):
        flags = [m.PROD_SAFE for m in SEEDERS]
        assert flags == sorted(flags, reverse=True)
        assert [m.NAME for m in SEEDERS if not m.PROD_SAFE] == ["user_lifecycle", "user_investments"]

    def test_unknown_name(self):
        with pytest.raises(SeedError) as exc:
            run_seeder("nope")
        assert exc.value.seeder == "nope"

    def test_test_seeder_guarded(self):
        with pytest.raises(SeedError):
            run_seeder("user_investments", allow_test_data=False)


# ═══════════════════════════════════════════════════════════════
# RUN
# ═══════════════════════════════════════════════════════════════


class TestRunSeeder:
    def test_rollback_on_failure(self, monkeypatch):
        def boom(stats):
            raise RuntimeError("agreements table locked")

        monkeypatch.setattr(foundation, "seed_legal_agreements", boom)
        with pytest.raises(RuntimeError):
            run_seeder("foundation")
        assert Setting.query.count() == 0

    def test_logs_with_seeder_extra(self, caplog):
        with caplog.at_level(logging.INFO, logger="app.seeders"):
            run_seeder("ledger_accounts")
        records = [r for r in caplog.records if getattr(r, "seeder", None) == "ledger_accounts"]
        assert records
        assert any(getattr(r, "rows_created", None) == 17 for r in records)

    def test_table_summary_logged(self, caplog):
        with caplog.at_level(logging.DEBUG):
            run_seeder("ledger_accounts")
        summary = [r for r in caplog.records if getattr(r, "table", None) == "ledger_accounts"]
        assert [(r.rows_created, r.rows_updated) for r in summary] == [(17, 0)]

    def test_duration_recorded(self):
        stats = run_seeder("ledger_accounts")
        assert stats.duration_ms >= 0
        assert stats.seeder == "ledger_accounts"


class TestSeedAll:
    def test_full_run(self):
        report = seed_all(allow_test_data=True)
        assert report.ran == seeder_names()
        assert report.skipped == []
        assert report.failures == []
        assert report.total_created > 0

    def test_skips_test_seeders(self):
        report = seed_all(allow_test_data=False)
        assert report.skipped == ["user_lifecycle", "user_investments"]
        assert User.query.count() == 3

    def test_only(self):
        report = seed_all(only=["ledger_accounts", "foundation"])
        assert report.ran == ["foundation", "ledger_accounts"]
        assert report.validation == []

    def test_full_run_validates(self, caplog):
        with caplog.at_level(logging.INFO, logger="app.seeders"):
            report = seed_all(allow_test_data=True)
        assert report.validation
        assert report.validation_failures == []
        assert any(r.getMessage().startswith("Seed validation passed") for r in caplog.records)

    def test_validation_failures_reported(self, monkeypatch):
        from app import seeders

        monkeypatch.setattr(seeders, "MINIMUM_COUNTS", seeders.MINIMUM_COUNTS + [("plans", seeders.Plan, 99)])
        report = seed_all(allow_test_data=False)
        assert report.validation_failures == ["plans: expected at least 99, found 3"]

    def test_only_unknown(self):
        with pytest.raises(SeedError):
            seed_all(only=["foundation", "bogus"])

    def test_idempotent(self):
        seed_all(allow_test_data=True)
        counts = (User.query.count(), Setting.query.count(), BulkPurchase.query.count())
        report = seed_all(allow_test_data=True)
        assert report.total_created == 0
        assert (User.query.count(), Setting.query.count(), BulkPurchase.query.count()) == counts

    def test_config_default(self, app):
        # testing config turns test data on
        assert app.config["SEED_TEST_DATA"] is True
        report = seed_all()
        assert report.skipped == []


# ═══════════════════════════════════════════════════════════════
# VALIDATION
# ═══════════════════════════════════════════════════════════════


class TestValidateSeed:
    def test_passes_after_full_seed(self):
        seed_all(allow_test_data=True)
        results = validate_seed(with_test_data=True)
        assert all(r.passed for r in results), [r.message for r in results if not r.passed]
        assert sum(r.name.endswith(":inventory") for r in results) == 5

    def test_passes_without_test_data(self):
        seed_all(allow_test_data=False)
        assert all(r.passed for r in validate_seed(with_test_data=False))

    def test_empty_database_fails(self):
        failed = [r for r in validate_seed(with_test_data=False) if not r.passed]
        assert {r.name for r in failed} >= {"settings", "users", "companies"}
        assert all(r.actual == 0 for r in failed)

    def test_inventory_mismatch(self):
        seed_all(allow_test_data=False)
        bulk = BulkPurchase.query.first()
        bulk.quantity_reserved += 1
        db.session.commit()
        failed = [r for r in validate_seed(with_test_data=False) if not r.passed]
        assert [r.name for r in failed] == [f"bulk_purchase:{bulk.id}:inventory"]
