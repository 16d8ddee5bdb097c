"""
Plan Models — monthly SIP plans, their marketing features and the
per-plan configuration values (bonus rates, milestones, allocation priority).
"""

from app.models import db
from app.models.base import TimestampMixin


class Plan(TimestampMixin, db.Model):
    __tablename__ = "plans"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    slug = db.Column(db.String(100), unique=True, nullable=False)
    description = db.Column(db.Text)
    monthly_amount = db.Column(db.Numeric(15, 2), nullable=False)
    duration_months = db.Column(db.Integer, default=12)
    is_active = db.Column(db.Boolean, default=True)
    is_featured = db.Column(db.Boolean, default=False)
    display_order = db.Column(db.Integer, default=0)

    features = db.relationship(
        "PlanFeature", back_populates="plan", lazy="dynamic", cascade="all, delete-orphan"
    )
    configs = db.relationship(
        "PlanConfig", back_populates="plan", lazy="dynamic", cascade="all, delete-orphan"
    )

    def config_value(self, key, default=None):
        """Return the JSON value of a plan config key, or ``default``."""
        cfg = self.configs.filter_by(config_key=key).first()
        return cfg.value if cfg is not None else default


class PlanFeature(db.Model):
    __tablename__ = "plan_features"

    id = db.Column(db.Integer, primary_key=True)
    plan_id = db.Column(db.Integer, db.ForeignKey("plans.id", ondelete="CASCADE"), nullable=False)
    feature_text = db.Column(db.String(255), nullable=False)
    display_order = db.Column(db.Integer, default=0)

    __table_args__ = (
        db.UniqueConstraint("plan_id", "feature_text", name="uq_plan_feature"),
    )

    plan = db.relationship("Plan", back_populates="features")


class PlanConfig(db.Model):
    __tablename__ = "plan_configs"

    id = db.Column(db.Integer, primary_key=True)
    plan_id = db.Column(db.Integer, db.ForeignKey("plans.id", ondelete="CASCADE"), nullable=False)
    config_key = db.Column(db.String(100), nullable=False)
    value = db.Column(db.JSON)

    __table_args__ = (
        db.UniqueConstraint("plan_id", "config_key", name="uq_plan_config_key"),
    )

    plan = db.relationship("Plan", back_populates="configs")
