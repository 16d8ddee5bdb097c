"""
User lifecycle seeder — one synthetic user per account lifecycle state.

    new_signup         no KYC record, email unverified
    kyc_pending        KYC submitted, awaiting review
    kyc_rejected       KYC rejected with a reason
    kyc_verified       KYC verified, empty wallet
    active_investor    funded wallet, active subscription
    paused_subscriber  funded wallet, paused subscription
    suspended          account suspended, wallet frozen

KYC moves through ``user_service`` so every state is reached by legal
transitions. Test data only.
"""

import logging
from datetime import date, timedelta

from app.core.exceptions import NotFoundError, ValidationError
from app.models.base import utcnow
from app.models.investment import Subscription, Wallet
from app.models.plan import Plan
from app.seeders.data.identity import INVESTOR_ROLE
from app.seeders.data.lifecycle import LIFECYCLE_STATES
from app.seeders.identity_access import seed_password_hash, seed_profile, upsert_user
from app.services import referral_service, user_service
from app.services.helpers.upsert import find_or_create, upsert

logger = logging.getLogger(__name__)

NAME = "user_lifecycle"
PROD_SAFE = False

STATE_NAMES = tuple(s["state"] for s in LIFECYCLE_STATES)


def lifecycle_spec(state):
    """Return the definition of ``state``; ValidationError if unknown."""
    for spec in LIFECYCLE_STATES:
        if spec["state"] == state:
            return spec
    raise ValidationError(
        f"Unknown lifecycle state: {state}",
        details={"state": state, "allowed": list(STATE_NAMES)},
    )


def lifecycle_identity(state, index):
    """Username, email and referral code for the synthetic user in ``state``."""
    return {
        "username": f"{state}_1",
        "email": f"{state}_1@test.com",
        "mobile": f"+9198765600{index:02d}",
        "referral_code": f"LIFE{index:04d}",
    }


def _seed_wallet(user, spec, stats):
    wallet, created = find_or_create(
        Wallet, {"user_id": user.id},
        {"balance_paise": spec["wallet_paise"], "locked_balance_paise": 0},
    )
    wallet.is_frozen = spec.get("wallet_frozen", False)
    stats.record("wallets", created)


def _seed_subscription(user, spec, stats):
    sub_spec = spec["subscription"]
    plan = Plan.query.filter_by(slug=sub_spec["plan"]).first()
    if plan is None:
        raise NotFoundError(resource="Plan", resource_id=sub_spec["plan"])

    today = date.today()
    paused = sub_spec["status"] == "paused"
    _, created = upsert(
        Subscription, {"subscription_code": f"SUB-{spec['state'].upper()}"},
        {
            "user_id": user.id,
            "plan_id": plan.id,
            "status": sub_spec["status"],
            "amount": plan.monthly_amount,
            "payment_frequency": "monthly",
            "start_date": today - timedelta(days=90),
            "end_date": today + timedelta(days=30 * plan.duration_months - 90),
            "paused_at": utcnow() if paused else None,
        },
    )
    stats.record("subscriptions", created)


def seed_lifecycle_user(state, index, password_hash, stats):
    """Create or bring up to date the synthetic user for one lifecycle state."""
    spec = lifecycle_spec(state)
    extra = {"status": spec["status"], "lifecycle_state": state}
    if not spec.get("email_verified", True):
        extra["email_verified_at"] = None

    user = upsert_user(lifecycle_identity(state, index), password_hash, stats, **extra)
    if user_service.assign_role(user, INVESTOR_ROLE):
        stats.record("user_roles", True)
    seed_profile(user, index, stats)

    if spec.get("kyc"):
        _, created = user_service.get_or_create_kyc(user)
        stats.record("user_kyc", created)
        user_service.advance_kyc_to(user, spec["kyc"], reason=spec.get("rejection_reason"))

    if "wallet_paise" in spec:
        _seed_wallet(user, spec, stats)
    if spec.get("subscription"):
        _seed_subscription(user, spec, stats)

    logger.debug("Lifecycle user %s ready", user.username)
    return user


def run(stats, allow_test_data=False):
    password_hash = seed_password_hash()
    users = [
        seed_lifecycle_user(spec["state"], i, password_hash, stats)
        for i, spec in enumerate(LIFECYCLE_STATES, start=1)
    ]
    for user in users:
        referral_service.recompute_multiplier(user)
