"""
Platform configuration models — settings, feature flags, KYC rejection
templates and legal agreements.

Settings hold every business-rule value as a typed string so admins can
edit them without a deploy; ``Setting.typed_value`` casts on read.
"""

import json

from app.models import db
from app.models.base import TimestampMixin


class Setting(TimestampMixin, db.Model):
    """Key/value business configuration row."""
    __tablename__ = "settings"

    id = db.Column(db.Integer, primary_key=True)
    key = db.Column(db.String(100), unique=True, nullable=False)
    value = db.Column(db.Text)
    type = db.Column(db.String(20), default="string")  # string, integer, float, number, boolean, json
    group = db.Column(db.String(50), default="system", index=True)
    description = db.Column(db.Text)

    @property
    def typed_value(self):
        if self.value is None:
            return None
        if self.type == "boolean":
            return self.value.lower() == "true"
        if self.type == "integer":
            return int(self.value)
        if self.type in ("float", "number"):
            return float(self.value)
        if self.type == "json":
            return json.loads(self.value)
        return self.value


class FeatureFlag(TimestampMixin, db.Model):
    """Global module toggle."""
    __tablename__ = "feature_flags"

    id = db.Column(db.Integer, primary_key=True)
    key = db.Column(db.String(100), unique=True, nullable=False)  # e.g. "enable_withdrawal"
    name = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text)
    is_active = db.Column(db.Boolean, default=True)
    is_enabled = db.Column(db.Boolean, default=False)


class KycRejectionTemplate(TimestampMixin, db.Model):
    __tablename__ = "kyc_rejection_templates"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), unique=True, nullable=False)
    title = db.Column(db.String(200), nullable=False)
    category = db.Column(db.String(50))
    reason = db.Column(db.Text)
    message = db.Column(db.Text)


class LegalAgreement(TimestampMixin, db.Model):
    __tablename__ = "legal_agreements"

    id = db.Column(db.Integer, primary_key=True)
    type = db.Column(db.String(50), unique=True, nullable=False)  # terms_of_service, privacy_policy, ...
    title = db.Column(db.String(200), nullable=False)
    version = db.Column(db.String(20), default="1.0")
    content = db.Column(db.Text)
    require_signature = db.Column(db.Boolean, default=False)
    effective_date = db.Column(db.Date)
    status = db.Column(db.String(20), default="draft")  # draft, active, archived
