"""
User investments seeder — end-to-end investment history for the test
investors: subscription, investment, monthly payments, wallet movements,
share allocations from bulk-purchase inventory, progressive bonus, and the
referral pairs.

Every wallet movement is keyed by a deterministic ``transaction_id``
(``txn_credit_<payment>``, ``txn_invest_<payment>``, ``txn_bonus_<subscription>``).
Balances and inventory only move when that transaction row is new, so a
re-run neither duplicates rows nor double-applies money or shares.

Test data only.
"""

import logging
from datetime import timedelta
from decimal import ROUND_HALF_UP, Decimal

from app.core.exceptions import NotFoundError
from app.models import db
from app.models.auth import User
from app.models.base import utcnow
from app.models.campaign import ReferralCampaign
from app.models.catalog import BulkPurchase, CompanyShareListing, Product
from app.models.investment import (
    BonusTransaction,
    Investment,
    Payment,
    Referral,
    Subscription,
    Transaction,
    UserInvestment,
    Wallet,
)
from app.models.plan import Plan
from app.seeders.data.investments import INVESTMENT_FLOWS, REFERRAL_CAMPAIGN_CODE, REFERRALS
from app.services import referral_service
from app.services.helpers.upsert import find_or_create

logger = logging.getLogger(__name__)

NAME = "user_investments"
PROD_SAFE = False


def _paise(amount):
    return int((Decimal(amount) * 100).to_integral_value(rounding=ROUND_HALF_UP))


def _require(model, label, **lookup):
    row = model.query.filter_by(**lookup).first()
    if row is None:
        raise NotFoundError(resource=label, resource_id=next(iter(lookup.values())))
    return row


def shares_for(amount, price):
    """Whole shares ``amount`` buys at ``price`` and what they cost."""
    quantity = int(Decimal(amount) // Decimal(price))
    return quantity, Decimal(price) * quantity


def progressive_bonus(plan, total_paid):
    """``total_paid * progressive_bonus_rate / 100``, rounded to whole rupees."""
    rate = plan.config_value("progressive_bonus_rate")
    if rate is None:
        return Decimal("0")
    bonus = Decimal(total_paid) * Decimal(str(rate)) / 100
    return bonus.quantize(Decimal("1"), rounding=ROUND_HALF_UP)


def move_wallet(wallet, user, txn_id, txn_type, amount_paise, description,
                reference_type, reference_id, created_at, stats):
    """Record a wallet transaction and apply it, once.

    Returns True if the transaction is new (and the balance moved).
    """
    existing = Transaction.query.filter_by(transaction_id=txn_id).first()
    if existing is not None:
        stats.record("transactions", False)
        return False

    before = wallet.balance_paise
    after = before + amount_paise if txn_type == "credit" else before - amount_paise
    db.session.add(Transaction(
        transaction_id=txn_id,
        user_id=user.id,
        wallet_id=wallet.id,
        type=txn_type,
        amount_paise=amount_paise,
        balance_before_paise=before,
        balance_after_paise=after,
        description=description,
        reference_type=reference_type,
        reference_id=reference_id,
        created_at=created_at,
    ))
    wallet.balance_paise = after
    db.session.flush()
    stats.record("transactions", True)
    return True


def _sync_listing(product, bulk):
    listing = CompanyShareListing.query.filter_by(company_id=product.company_id).first()
    if listing is not None:
        listing.shares_allocated = bulk.quantity_allocated
        listing.shares_reserved = bulk.quantity_reserved


def allocate_shares(user, product, payment, investment, amount, paid_at, stats):
    """Allocate whole shares for one payment from the product's bulk purchase.

    Returns the allocation, or None when the lot has too few reserved shares.
    """
    bulk = BulkPurchase.query.filter_by(product_id=product.id).first()
    quantity, value = shares_for(amount, product.price_per_share)
    if bulk is None or quantity == 0:
        logger.warning("No allocation for payment %s: no inventory for %s", payment.id, product.slug)
        return None

    existing = UserInvestment.query.filter_by(
        user_id=user.id, product_id=product.id, payment_id=payment.id
    ).first()
    if existing is not None:
        stats.record("user_investments", False)
        return existing

    if bulk.quantity_reserved < quantity:
        logger.warning(
            "No allocation for payment %s: %d shares reserved, %d needed",
            payment.id, bulk.quantity_reserved, quantity,
        )
        return None

    allocation = UserInvestment(
        user_id=user.id,
        product_id=product.id,
        payment_id=payment.id,
        investment_id=investment.id,
        bulk_purchase_id=bulk.id,
        quantity=quantity,
        price_per_unit=product.price_per_share,
        value_allocated=value,
        status="active",
        allocation_status="allocated",
        invested_at=paid_at,
    )
    db.session.add(allocation)
    bulk.quantity_allocated += quantity
    bulk.quantity_reserved -= quantity
    _sync_listing(product, bulk)
    db.session.flush()
    stats.record("user_investments", True)
    return allocation


def seed_flow(flow, stats):
    """Subscription → investment → payments (credit, allocate, debit) → bonus."""
    user = _require(User, "User", email=flow["email"])
    plan = _require(Plan, "Plan", slug=flow["plan"])
    product = _require(Product, "Product", slug=flow["product"])
    amount, count = flow["amount"], flow["payments"]
    now = utcnow()

    subscription, created = find_or_create(
        Subscription, {"subscription_code": f"SUB-{user.referral_code}-{plan.slug.upper()}"},
        {
            "user_id": user.id,
            "plan_id": plan.id,
            "status": "active",
            "amount": amount,
            "payment_frequency": "monthly",
            "start_date": (now - timedelta(days=30 * count)).date(),
            "end_date": (now + timedelta(days=30 * (plan.duration_months - count))).date(),
        },
    )
    stats.record("subscriptions", created)

    investment, created = find_or_create(
        Investment, {"subscription_id": subscription.id},
        {
            "user_id": user.id,
            "plan_id": plan.id,
            "total_amount": amount * count,
            "invested_amount": amount * count,
            "status": "active",
            "start_date": subscription.start_date,
        },
    )
    stats.record("investments", created)

    wallet, created = find_or_create(Wallet, {"user_id": user.id}, {"balance_paise": 0})
    stats.record("wallets", created)

    for i in range(1, count + 1):
        paid_at = now - timedelta(days=30 * (count - i + 1))
        payment, created = find_or_create(
            Payment, {"gateway_payment_id": f"pay_test_{subscription.id}_{i}"},
            {
                "user_id": user.id,
                "subscription_id": subscription.id,
                "gateway": "razorpay",
                "amount": amount,
                "status": "completed",
                "payment_method": "upi",
                "paid_at": paid_at,
            },
        )
        stats.record("payments", created)

        move_wallet(
            wallet, user, f"txn_credit_{payment.id}", "credit", _paise(amount),
            f"Payment received for {plan.name}", "payment", payment.id, paid_at, stats,
        )

        allocation = allocate_shares(user, product, payment, investment, amount, paid_at, stats)
        if allocation is not None:
            move_wallet(
                wallet, user, f"txn_invest_{payment.id}", "debit", _paise(allocation.value_allocated),
                f"Investment in {product.name}", "user_investment", allocation.id, paid_at, stats,
            )

    bonus = progressive_bonus(plan, amount * count)
    if bonus > 0:
        bonus_row, created = find_or_create(
            BonusTransaction,
            {"user_id": user.id, "subscription_id": subscription.id, "bonus_type": "progressive"},
            {
                "amount": bonus,
                "description": f"Progressive bonus for {plan.name} ({count} months)",
                "credited_at": now - timedelta(days=1),
            },
        )
        stats.record("bonus_transactions", created)
        move_wallet(
            wallet, user, f"txn_bonus_{subscription.id}", "credit", _paise(bonus),
            "Progressive bonus credited", "bonus_transaction", bonus_row.id,
            now - timedelta(days=1), stats,
        )


def seed_referrals(stats):
    campaign = ReferralCampaign.query.filter_by(code=REFERRAL_CAMPAIGN_CODE).first()
    referrers = []
    for referrer_email, referred_email, bonus, days_ago in REFERRALS:
        referrer = _require(User, "User", email=referrer_email)
        referred = _require(User, "User", email=referred_email)
        _, created = find_or_create(
            Referral, {"referrer_id": referrer.id, "referred_id": referred.id},
            {
                "referral_campaign_id": campaign.id if campaign else None,
                "bonus_earned": bonus,
                "status": "completed",
                "completed_at": utcnow() - timedelta(days=days_ago),
            },
        )
        stats.record("referrals", created)
        if referred.referred_by_id is None:
            referred.referred_by_id = referrer.id
        referrers.append(referrer)

    for referrer in referrers:
        referral_service.recompute_multiplier(referrer)


def run(stats, allow_test_data=False):
    for flow in INVESTMENT_FLOWS:
        seed_flow(flow, stats)
    seed_referrals(stats)
