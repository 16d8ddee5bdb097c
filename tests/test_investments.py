"""
User investments seeder — payments, wallet movements, share allocation from
bulk inventory, progressive bonus and referrals.

Expected balances (paise) start from the identity wallets and add, per
payment, the credit minus the whole-share debit, plus the plan bonus.
"""

from decimal import Decimal

import pytest

from app.models import db
from app.models.auth import User
from app.models.catalog import BulkPurchase, CompanyShareListing, Product
from app.models.investment import (
    BonusTransaction,
    Investment,
    Payment,
    Referral,
    Subscription,
    Transaction,
    UserInvestment,
)
from app.models.plan import Plan
from app.seeders import run_seeder
from app.seeders.user_investments import progressive_bonus, shares_for


EXPECTED_BALANCES = {
    "user1@test.com": 5_005_000,
    "user2@test.com": 10_095_000,
    "user3@test.com": 2_600_000,
    "user4@test.com": 22_500,
    "user5@test.com": 7_500,
}

# product slug -> shares allocated across its payments
EXPECTED_SHARES = {
    "techcorp-india-shares": 20,
    "financehub-technologies-shares": 32,
    "greenenergy-innovations-shares": 66,
    "healthplus-solutions-shares": 6,
    "edutech-academy-shares": 10,
}


def _bulk(slug):
    product = Product.query.filter_by(slug=slug).first()
    return BulkPurchase.query.filter_by(product_id=product.id).first()


@pytest.fixture()
def before_investments(seed_up_to):
    seed_up_to("user_lifecycle")
    return {slug: _bulk(slug).quantity_allocated for slug in EXPECTED_SHARES}


@pytest.fixture()
def seeded(before_investments):
    run_seeder("user_investments")
    return before_investments


# ═══════════════════════════════════════════════════════════════
# HELPERS
# ═══════════════════════════════════════════════════════════════


class TestHelpers:
    def test_shares_for_floors(self):
        assert shares_for(Decimal("10000"), Decimal("600")) == (16, Decimal("9600"))
        assert shares_for(Decimal("500"), Decimal("800")) == (0, Decimal("0"))

    def test_progressive_bonus(self):
        run_seeder("investment_plans")
        growth = Plan.query.filter_by(slug="plan-b-growth").first()
        assert progressive_bonus(growth, Decimal("20000")) == Decimal("150")

    def test_progressive_bonus_rounds_half_up(self):
        run_seeder("investment_plans")
        starter = Plan.query.filter_by(slug="plan-a-starter").first()
        # 0.5% of 4900 is 24.5
        assert progressive_bonus(starter, Decimal("4900")) == Decimal("25")


# ═══════════════════════════════════════════════════════════════
# FLOWS
# ═══════════════════════════════════════════════════════════════


class TestInvestmentFlows:
    def test_rows(self, seeded):
        assert Investment.query.count() == 5
        assert Payment.query.count() == 8
        assert UserInvestment.query.count() == 8
        assert BonusTransaction.query.count() == 5
        # credit + debit per payment, one bonus credit per subscription
        assert Transaction.query.count() == 21

    def test_wallet_balances(self, seeded):
        for email, paise in EXPECTED_BALANCES.items():
            user = User.query.filter_by(email=email).first()
            assert user.wallet.balance_paise == paise, email

    def test_transaction_chain(self, seeded):
        user = User.query.filter_by(email="user2@test.com").first()
        txns = Transaction.query.filter_by(user_id=user.id).order_by(Transaction.id).all()
        for prev, nxt in zip(txns, txns[1:]):
            assert nxt.balance_before_paise == prev.balance_after_paise
        assert txns[-1].balance_after_paise == user.wallet.balance_paise

    def test_inventory_moved(self, seeded):
        for slug, shares in EXPECTED_SHARES.items():
            bulk = _bulk(slug)
            assert bulk.quantity_allocated == seeded[slug] + shares, slug
            assert bulk.quantity_allocated + bulk.quantity_reserved == bulk.total_quantity

    def test_listing_follows_bulk(self, seeded):
        product = Product.query.filter_by(slug="techcorp-india-shares").first()
        listing = CompanyShareListing.query.filter_by(company_id=product.company_id).first()
        bulk = _bulk("techcorp-india-shares")
        assert listing.shares_allocated == bulk.quantity_allocated
        assert listing.shares_reserved == bulk.quantity_reserved

    def test_bonus_amounts(self, seeded):
        emails = {u.id: u.email for u in User.query.all()}
        bonuses = {emails[b.user_id]: b.amount for b in BonusTransaction.query.all()}
        assert {k: int(v) for k, v in bonuses.items()} == {
            "user1@test.com": 50,
            "user2@test.com": 150,
            "user3@test.com": 500,
            "user4@test.com": 25,
            "user5@test.com": 75,
        }

    def test_subscription_codes(self, seeded):
        assert Subscription.query.filter_by(subscription_code="SUB-USER0001-PLAN-A-STARTER").count() == 1


class TestRerun:
    def test_no_double_apply(self, seeded):
        stats = run_seeder("user_investments")
        assert Transaction.query.count() == 21
        assert UserInvestment.query.count() == 8
        assert stats.created.get("transactions", 0) == 0
        for email, paise in EXPECTED_BALANCES.items():
            assert User.query.filter_by(email=email).first().wallet.balance_paise == paise
        for slug, shares in EXPECTED_SHARES.items():
            assert _bulk(slug).quantity_allocated == seeded[slug] + shares


class TestInsufficientInventory:
    def test_no_allocation_without_reserved_shares(self, before_investments):
        bulk = _bulk("techcorp-india-shares")
        bulk.quantity_allocated = bulk.total_quantity
        bulk.quantity_reserved = 0
        db.session.commit()

        run_seeder("user_investments")

        user = User.query.filter_by(email="user1@test.com").first()
        assert UserInvestment.query.filter_by(user_id=user.id).count() == 0
        # credited payments and bonus, nothing debited
        assert user.wallet.balance_paise == 5_000_000 + 1_000_000 + 5_000
        assert _bulk("techcorp-india-shares").quantity_reserved == 0


# ═══════════════════════════════════════════════════════════════
# REFERRALS
# ═══════════════════════════════════════════════════════════════


class TestReferrals:
    def test_pairs_completed(self, seeded):
        pairs = {(r.referrer_id, r.referred_id, r.status) for r in Referral.query.all()}
        ids = {u.email: u.id for u in User.query.all()}
        assert pairs == {
            (ids["user1@test.com"], ids["user4@test.com"], "completed"),
            (ids["user2@test.com"], ids["user5@test.com"], "completed"),
        }

    def test_campaign_linked(self, seeded):
        assert all(r.referral_campaign_id is not None for r in Referral.query.all())

    def test_multiplier_below_first_tier(self, seeded):
        referrer = User.query.filter_by(email="user1@test.com").first()
        assert Decimal(str(referrer.referral_multiplier)) == Decimal("1.0")
