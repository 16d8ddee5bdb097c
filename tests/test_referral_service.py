"""
Referral service tests — tier parsing from settings and multiplier lookup.
"""

from decimal import Decimal

import pytest

from app.models import db
from app.models.auth import User
from app.models.configuration import Setting
from app.models.investment import Referral
from app.seeders import run_seeder
from app.services import referral_service


TIERS = [(5, Decimal("1.5")), (10, Decimal("2.0")), (20, Decimal("3.0"))]


class TestMultiplierFor:
    @pytest.mark.parametrize("count,expected", [
        (0, "1.0"),
        (4, "1.0"),
        (5, "1.5"),
        (9, "1.5"),
        (10, "2.0"),
        (20, "3.0"),
        (500, "3.0"),
    ])
    def test_tiers(self, count, expected):
        assert referral_service.multiplier_for(count, TIERS) == Decimal(expected)

    def test_no_tiers(self):
        assert referral_service.multiplier_for(100, []) == Decimal("1.0")


class TestReferralTiers:
    def test_from_seeded_settings(self):
        run_seeder("foundation")
        assert referral_service.referral_tiers() == TIERS

    def test_incomplete_tier_skipped(self):
        db.session.add_all([
            Setting(key="referral_tier_1_threshold", value="3", group="referral"),
            Setting(key="referral_tier_2_threshold", value="8", group="referral"),
            Setting(key="referral_tier_2_multiplier", value="2.5", group="referral"),
        ])
        db.session.flush()
        assert referral_service.referral_tiers() == [(8, Decimal("2.5"))]

    def test_empty(self):
        assert referral_service.referral_tiers() == []


class TestRecomputeMultiplier:
    def _users(self, n):
        users = [User(username=f"u{i}", email=f"u{i}@test.com", password_hash="x") for i in range(n)]
        db.session.add_all(users)
        db.session.flush()
        return users

    def test_only_completed_referrals_count(self):
        run_seeder("foundation")
        referrer, *referred = self._users(7)
        for i, user in enumerate(referred):
            db.session.add(Referral(
                referrer_id=referrer.id, referred_id=user.id,
                status="completed" if i < 5 else "pending",
            ))
        db.session.flush()

        assert referral_service.completed_referral_count(referrer) == 5
        assert referral_service.recompute_multiplier(referrer) == Decimal("1.5")
        assert Decimal(str(referrer.referral_multiplier)) == Decimal("1.5")

    def test_without_referrals(self):
        run_seeder("foundation")
        (user,) = self._users(1)
        assert referral_service.recompute_multiplier(user) == Decimal("1.0")
