"""
Investment Models — wallets and wallet transactions, subscriptions, payments,
investments, share allocations, bonuses and referrals.

Wallet balances and wallet transaction amounts are integer paise;
everything else is rupees.
"""

from app.models import db
from app.models.base import TimestampMixin, utcnow


# ═══════════════════════════════════════════════════════════════
# 1. WALLETS
# ═══════════════════════════════════════════════════════════════
class Wallet(TimestampMixin, db.Model):
    __tablename__ = "wallets"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False
    )
    balance_paise = db.Column(db.BigInteger, nullable=False, default=0)
    locked_balance_paise = db.Column(db.BigInteger, nullable=False, default=0)
    is_frozen = db.Column(db.Boolean, default=False)

    user = db.relationship("User", back_populates="wallet")


class Transaction(db.Model):
    """Wallet movement. ``transaction_id`` is the idempotency key."""
    __tablename__ = "transactions"

    id = db.Column(db.Integer, primary_key=True)
    transaction_id = db.Column(db.String(100), unique=True, nullable=False)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    wallet_id = db.Column(db.Integer, db.ForeignKey("wallets.id", ondelete="CASCADE"))
    type = db.Column(db.String(10), nullable=False)  # credit, debit
    amount_paise = db.Column(db.BigInteger, nullable=False)
    balance_before_paise = db.Column(db.BigInteger)
    balance_after_paise = db.Column(db.BigInteger)
    description = db.Column(db.String(255))
    reference_type = db.Column(db.String(100))
    reference_id = db.Column(db.Integer)
    created_at = db.Column(db.DateTime, default=utcnow)


# ═══════════════════════════════════════════════════════════════
# 2. SUBSCRIPTIONS & PAYMENTS
# ═══════════════════════════════════════════════════════════════
class Subscription(TimestampMixin, db.Model):
    __tablename__ = "subscriptions"

    id = db.Column(db.Integer, primary_key=True)
    subscription_code = db.Column(db.String(50), unique=True, nullable=False)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    plan_id = db.Column(db.Integer, db.ForeignKey("plans.id"), nullable=False)
    status = db.Column(db.String(20), default="active")  # active, paused, cancelled, completed
    amount = db.Column(db.Numeric(15, 2), nullable=False)
    payment_frequency = db.Column(db.String(20), default="monthly")
    start_date = db.Column(db.Date)
    end_date = db.Column(db.Date)
    paused_at = db.Column(db.DateTime)

    __table_args__ = (
        db.UniqueConstraint("user_id", "plan_id", name="uq_subscription_user_plan"),
    )

    plan = db.relationship("Plan")


class Payment(TimestampMixin, db.Model):
    __tablename__ = "payments"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    subscription_id = db.Column(db.Integer, db.ForeignKey("subscriptions.id", ondelete="CASCADE"))
    gateway = db.Column(db.String(30), default="razorpay")
    gateway_payment_id = db.Column(db.String(100), unique=True, nullable=False)
    amount = db.Column(db.Numeric(15, 2), nullable=False)
    status = db.Column(db.String(20), default="pending")  # pending, completed, failed
    payment_method = db.Column(db.String(30))
    paid_at = db.Column(db.DateTime)


# ═══════════════════════════════════════════════════════════════
# 3. INVESTMENTS & ALLOCATIONS
# ═══════════════════════════════════════════════════════════════
class Investment(TimestampMixin, db.Model):
    __tablename__ = "investments"

    id = db.Column(db.Integer, primary_key=True)
    subscription_id = db.Column(
        db.Integer, db.ForeignKey("subscriptions.id", ondelete="CASCADE"), unique=True, nullable=False
    )
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    plan_id = db.Column(db.Integer, db.ForeignKey("plans.id"), nullable=False)
    total_amount = db.Column(db.Numeric(15, 2), default=0)
    invested_amount = db.Column(db.Numeric(15, 2), default=0)
    status = db.Column(db.String(20), default="active")
    start_date = db.Column(db.Date)


class UserInvestment(TimestampMixin, db.Model):
    """Shares allocated to a user from a bulk purchase for one payment."""
    __tablename__ = "user_investments"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    product_id = db.Column(db.Integer, db.ForeignKey("products.id"), nullable=False)
    payment_id = db.Column(db.Integer, db.ForeignKey("payments.id", ondelete="CASCADE"), nullable=False)
    investment_id = db.Column(db.Integer, db.ForeignKey("investments.id", ondelete="CASCADE"))
    bulk_purchase_id = db.Column(db.Integer, db.ForeignKey("bulk_purchases.id"))
    quantity = db.Column(db.Integer, nullable=False)
    price_per_unit = db.Column(db.Numeric(15, 2), nullable=False)
    value_allocated = db.Column(db.Numeric(15, 2), nullable=False)
    status = db.Column(db.String(20), default="active")
    allocation_status = db.Column(db.String(20), default="allocated")
    invested_at = db.Column(db.DateTime)

    __table_args__ = (
        db.UniqueConstraint("user_id", "product_id", "payment_id", name="uq_user_investment_payment"),
    )


class BonusTransaction(db.Model):
    __tablename__ = "bonus_transactions"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    subscription_id = db.Column(db.Integer, db.ForeignKey("subscriptions.id", ondelete="CASCADE"))
    bonus_type = db.Column(db.String(30), nullable=False)  # progressive, milestone, referral
    amount = db.Column(db.Numeric(15, 2), nullable=False)
    description = db.Column(db.String(255))
    credited_at = db.Column(db.DateTime, default=utcnow)

    __table_args__ = (
        db.UniqueConstraint("user_id", "subscription_id", "bonus_type", name="uq_bonus_subscription_type"),
    )


class Referral(TimestampMixin, db.Model):
    __tablename__ = "referrals"

    id = db.Column(db.Integer, primary_key=True)
    referrer_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    referred_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    referral_campaign_id = db.Column(db.Integer, db.ForeignKey("referral_campaigns.id"))
    bonus_earned = db.Column(db.Numeric(15, 2), default=0)
    status = db.Column(db.String(20), default="pending")  # pending, completed
    completed_at = db.Column(db.DateTime)

    __table_args__ = (
        db.UniqueConstraint("referrer_id", "referred_id", name="uq_referral_pair"),
    )
