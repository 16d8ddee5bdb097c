"""
User lifecycle seeder — one synthetic user per account state.
"""

import pytest

from app.core.exceptions import ValidationError
from app.models import db
from app.models.auth import User, UserKyc
from app.models.investment import Subscription, Wallet
from app.seeders import run_seeder
from app.seeders.user_lifecycle import STATE_NAMES, lifecycle_identity, lifecycle_spec


@pytest.fixture()
def seeded(seed_up_to):
    return seed_up_to("user_lifecycle")


def _user(state):
    return User.query.filter_by(username=f"{state}_1").first()


class TestLifecycleSpec:
    def test_seven_states(self):
        assert STATE_NAMES == (
            "new_signup", "kyc_pending", "kyc_rejected", "kyc_verified",
            "active_investor", "paused_subscriber", "suspended",
        )

    def test_unknown_state_raises(self):
        with pytest.raises(ValidationError) as exc:
            lifecycle_spec("zombie")
        assert exc.value.details["state"] == "zombie"

    def test_identity(self):
        ident = lifecycle_identity("suspended", 7)
        assert ident["username"] == "suspended_1"
        assert ident["email"] == "suspended_1@test.com"
        assert ident["referral_code"] == "LIFE0007"


class TestLifecycleUsers:
    def test_one_user_per_state(self, seeded):
        for state in STATE_NAMES:
            user = _user(state)
            assert user is not None, state
            assert user.lifecycle_state == state

    def test_new_signup_unverified_without_kyc(self, seeded):
        user = _user("new_signup")
        assert user.email_verified_at is None
        assert UserKyc.query.filter_by(user_id=user.id).count() == 0
        assert user.wallet is None

    def test_kyc_statuses(self, seeded):
        expected = {
            "kyc_pending": "submitted",
            "kyc_rejected": "rejected",
            "kyc_verified": "verified",
            "active_investor": "verified",
            "paused_subscriber": "verified",
            "suspended": "verified",
        }
        for state, status in expected.items():
            assert _user(state).kyc_status == status, state

    def test_rejected_has_reason(self, seeded):
        kyc = _user("kyc_rejected").kyc
        assert kyc.rejection_reason.startswith("PAN card image")
        assert _user("kyc_verified").kyc.rejection_reason is None

    def test_suspended_wallet_frozen(self, seeded):
        user = _user("suspended")
        assert user.status == "suspended"
        assert user.wallet.is_frozen is True
        assert user.wallet.balance_paise == 500_000
        assert _user("active_investor").wallet.is_frozen is False

    def test_subscriptions(self, seeded):
        active = Subscription.query.filter_by(subscription_code="SUB-ACTIVE_INVESTOR").one()
        paused = Subscription.query.filter_by(subscription_code="SUB-PAUSED_SUBSCRIBER").one()
        assert active.status == "active"
        assert active.paused_at is None
        assert active.plan.slug == "plan-a-starter"
        assert paused.status == "paused"
        assert paused.paused_at is not None

    def test_multiplier_is_base(self, seeded):
        assert float(_user("active_investor").referral_multiplier) == 1.0


class TestLifecycleRerun:
    def test_idempotent(self, seeded):
        before = (User.query.count(), UserKyc.query.count(),
                  Wallet.query.count(), Subscription.query.count())
        stats = run_seeder("user_lifecycle")
        after = (User.query.count(), UserKyc.query.count(),
                 Wallet.query.count(), Subscription.query.count())
        assert before == after
        assert stats.created.get("users", 0) == 0

    def test_refrozen_on_rerun(self, seeded):
        _user("suspended").wallet.is_frozen = False
        db.session.commit()
        run_seeder("user_lifecycle")
        assert _user("suspended").wallet.is_frozen is True

    def test_requires_test_data(self, seeded):
        from app.core.exceptions import SeedError

        with pytest.raises(SeedError):
            run_seeder("user_lifecycle", allow_test_data=False)
