"""
Campaign Models — referral programmes, promotional offers and lucky draws.

Prize and entry-rule structures are stored as JSON blobs so admins can
reshape them without a schema change.
"""

from app.models import db
from app.models.base import TimestampMixin


class ReferralCampaign(TimestampMixin, db.Model):
    __tablename__ = "referral_campaigns"

    id = db.Column(db.Integer, primary_key=True)
    code = db.Column(db.String(50), unique=True, nullable=False)
    name = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text)
    bonus_amount = db.Column(db.Numeric(15, 2), nullable=False)
    min_investment_required = db.Column(db.Numeric(15, 2), default=0)
    start_date = db.Column(db.Date)
    end_date = db.Column(db.Date)
    is_active = db.Column(db.Boolean, default=True)
    max_redemptions = db.Column(db.Integer)  # NULL = unlimited
    current_redemptions = db.Column(db.Integer, default=0)


class Campaign(TimestampMixin, db.Model):
    """Promotional offer (discount or cashback)."""
    __tablename__ = "campaigns"

    id = db.Column(db.Integer, primary_key=True)
    code = db.Column(db.String(50), unique=True, nullable=False)
    name = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text)
    discount_type = db.Column(db.String(20), nullable=False)  # percentage, fixed_amount
    discount_value = db.Column(db.Numeric(15, 2), nullable=False)
    min_investment = db.Column(db.Numeric(15, 2), default=0)
    max_discount_amount = db.Column(db.Numeric(15, 2))
    start_date = db.Column(db.Date)
    end_date = db.Column(db.Date)
    is_active = db.Column(db.Boolean, default=True)
    max_redemptions = db.Column(db.Integer)
    current_redemptions = db.Column(db.Integer, default=0)
    terms = db.Column(db.JSON, default=list)
    features = db.Column(db.JSON, default=list)


class LuckyDraw(TimestampMixin, db.Model):
    __tablename__ = "lucky_draws"

    id = db.Column(db.Integer, primary_key=True)
    code = db.Column(db.String(50), unique=True, nullable=False)
    name = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text)
    prize_pool = db.Column(db.Numeric(15, 2), nullable=False)
    min_investment_required = db.Column(db.Numeric(15, 2), default=0)
    start_date = db.Column(db.Date)
    end_date = db.Column(db.Date)
    draw_date = db.Column(db.Date)
    is_active = db.Column(db.Boolean, default=True)
    status = db.Column(db.String(20), default="upcoming")  # upcoming, active, drawn
    prize_structure = db.Column(db.JSON, default=list)
    entry_rules = db.Column(db.JSON, default=dict)
