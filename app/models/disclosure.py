"""
Disclosure Module Model — the SEBI-mandated disclosure sections a company
fills in before listing.

Freshness policy is declared per module:
  - ``update_required`` modules go stale after ``expected_update_days``.
  - ``version_controlled`` modules are unstable if they change more than
    ``max_changes_per_window`` times within ``stability_window_days``.
"""

from app.models import db
from app.models.base import TimestampMixin

DISCLOSURE_CATEGORIES = ("governance", "financial", "legal", "operational")


class DisclosureModule(TimestampMixin, db.Model):
    __tablename__ = "disclosure_modules"

    id = db.Column(db.Integer, primary_key=True)
    code = db.Column(db.String(50), unique=True, nullable=False)
    name = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text)
    help_text = db.Column(db.Text)
    is_required = db.Column(db.Boolean, default=True)
    is_active = db.Column(db.Boolean, default=True)
    display_order = db.Column(db.Integer, default=0)
    tier = db.Column(db.Integer, nullable=False, default=1)  # 1 visibility, 2 investable, 3 full
    category = db.Column(db.String(20), nullable=False, default="operational")
    document_type = db.Column(db.String(30), nullable=False)  # update_required, version_controlled
    expected_update_days = db.Column(db.Integer)
    stability_window_days = db.Column(db.Integer)
    max_changes_per_window = db.Column(db.Integer)
    freshness_weight = db.Column(db.Numeric(4, 2), default=1)
    icon = db.Column(db.String(50))
    color = db.Column(db.String(20))
    json_schema = db.Column(db.JSON, default=dict)
    sebi_category = db.Column(db.String(100))
    regulatory_references = db.Column(db.JSON, default=list)
    requires_admin_approval = db.Column(db.Boolean, default=True)
    min_approval_reviews = db.Column(db.Integer, default=1)
    approval_checklist = db.Column(db.JSON, default=list)
    created_by = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="SET NULL"))

    def to_dict(self):
        return {
            "id": self.id,
            "code": self.code,
            "name": self.name,
            "tier": self.tier,
            "category": self.category,
            "document_type": self.document_type,
            "sebi_category": self.sebi_category,
            "is_required": self.is_required,
        }
