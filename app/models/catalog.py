"""
Catalog Models — sectors, companies, products and the product detail rows
shown on a deal page, inventory (bulk purchases), share listings and the
company-portal accounts and updates.

Inventory conservation: for every BulkPurchase,
``quantity_allocated + quantity_reserved == total_quantity``.
"""

from app.models import db
from app.models.base import TimestampMixin


# ═══════════════════════════════════════════════════════════════
# 1. TAXONOMY
# ═══════════════════════════════════════════════════════════════
class Sector(TimestampMixin, db.Model):
    __tablename__ = "sectors"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    slug = db.Column(db.String(100), unique=True, nullable=False)
    description = db.Column(db.Text)

    companies = db.relationship("Company", back_populates="sector_ref", lazy="dynamic")


class Company(TimestampMixin, db.Model):
    __tablename__ = "companies"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(200), unique=True, nullable=False)
    sector = db.Column(db.String(100))  # denormalised display label
    sector_id = db.Column(db.Integer, db.ForeignKey("sectors.id", ondelete="SET NULL"))
    description = db.Column(db.Text)
    website = db.Column(db.String(255))
    founded_year = db.Column(db.String(4))
    headquarters = db.Column(db.String(200))
    employees_count = db.Column(db.Integer)
    status = db.Column(db.String(20), default="active")
    is_featured = db.Column(db.Boolean, default=False)

    sector_ref = db.relationship("Sector", back_populates="companies")
    products = db.relationship("Product", back_populates="company", lazy="dynamic")


# ═══════════════════════════════════════════════════════════════
# 2. PRODUCTS
# ═══════════════════════════════════════════════════════════════
class Product(TimestampMixin, db.Model):
    __tablename__ = "products"

    id = db.Column(db.Integer, primary_key=True)
    company_id = db.Column(db.Integer, db.ForeignKey("companies.id", ondelete="CASCADE"), nullable=False)
    name = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(200), unique=True, nullable=False)
    description = db.Column(db.JSON, default=dict)
    category = db.Column(db.String(50), default="equity")
    face_value = db.Column(db.Numeric(15, 2))
    price_per_share = db.Column(db.Numeric(15, 2), nullable=False)
    min_investment = db.Column(db.Numeric(15, 2))
    max_investment = db.Column(db.Numeric(15, 2))
    is_active = db.Column(db.Boolean, default=True)
    is_featured = db.Column(db.Boolean, default=False)
    listing_date = db.Column(db.Date)

    company = db.relationship("Company", back_populates="products")
    highlights = db.relationship("ProductHighlight", lazy="dynamic", cascade="all, delete-orphan")
    founders = db.relationship("ProductFounder", lazy="dynamic", cascade="all, delete-orphan")
    funding_rounds = db.relationship("ProductFundingRound", lazy="dynamic", cascade="all, delete-orphan")
    key_metrics = db.relationship("ProductKeyMetric", lazy="dynamic", cascade="all, delete-orphan")
    risk_disclosures = db.relationship("ProductRiskDisclosure", lazy="dynamic", cascade="all, delete-orphan")
    price_history = db.relationship("ProductPriceHistory", lazy="dynamic", cascade="all, delete-orphan")


class ProductHighlight(db.Model):
    __tablename__ = "product_highlights"

    id = db.Column(db.Integer, primary_key=True)
    product_id = db.Column(db.Integer, db.ForeignKey("products.id", ondelete="CASCADE"), nullable=False)
    highlight_text = db.Column(db.String(255), nullable=False)
    display_order = db.Column(db.Integer, default=0)

    __table_args__ = (
        db.UniqueConstraint("product_id", "highlight_text", name="uq_product_highlight"),
    )


class ProductFounder(db.Model):
    __tablename__ = "product_founders"

    id = db.Column(db.Integer, primary_key=True)
    product_id = db.Column(db.Integer, db.ForeignKey("products.id", ondelete="CASCADE"), nullable=False)
    name = db.Column(db.String(200), nullable=False)
    role = db.Column(db.String(100))
    bio = db.Column(db.Text)
    display_order = db.Column(db.Integer, default=0)

    __table_args__ = (
        db.UniqueConstraint("product_id", "name", name="uq_product_founder"),
    )


class ProductFundingRound(db.Model):
    __tablename__ = "product_funding_rounds"

    id = db.Column(db.Integer, primary_key=True)
    product_id = db.Column(db.Integer, db.ForeignKey("products.id", ondelete="CASCADE"), nullable=False)
    round_type = db.Column(db.String(50), nullable=False)  # Seed, Series A, ...
    amount_raised = db.Column(db.Numeric(18, 2))
    valuation = db.Column(db.Numeric(18, 2))
    funded_at = db.Column(db.Date)

    __table_args__ = (
        db.UniqueConstraint("product_id", "round_type", name="uq_product_funding_round"),
    )


class ProductKeyMetric(db.Model):
    __tablename__ = "product_key_metrics"

    id = db.Column(db.Integer, primary_key=True)
    product_id = db.Column(db.Integer, db.ForeignKey("products.id", ondelete="CASCADE"), nullable=False)
    metric_name = db.Column(db.String(100), nullable=False)
    metric_value = db.Column(db.String(100))
    display_order = db.Column(db.Integer, default=0)

    __table_args__ = (
        db.UniqueConstraint("product_id", "metric_name", name="uq_product_key_metric"),
    )


class ProductRiskDisclosure(db.Model):
    __tablename__ = "product_risk_disclosures"

    id = db.Column(db.Integer, primary_key=True)
    product_id = db.Column(db.Integer, db.ForeignKey("products.id", ondelete="CASCADE"), nullable=False)
    risk_type = db.Column(db.String(50), nullable=False)  # market, liquidity, ...
    description = db.Column(db.Text)
    severity = db.Column(db.String(20))  # low, medium, high

    __table_args__ = (
        db.UniqueConstraint("product_id", "risk_type", name="uq_product_risk_disclosure"),
    )


class ProductPriceHistory(db.Model):
    __tablename__ = "product_price_history"

    id = db.Column(db.Integer, primary_key=True)
    product_id = db.Column(db.Integer, db.ForeignKey("products.id", ondelete="CASCADE"), nullable=False)
    price_per_share = db.Column(db.Numeric(15, 2), nullable=False)
    effective_date = db.Column(db.Date)
    reason = db.Column(db.String(255), nullable=False)

    __table_args__ = (
        db.UniqueConstraint("product_id", "reason", name="uq_product_price_reason"),
    )


# ═══════════════════════════════════════════════════════════════
# 3. INVENTORY
# ═══════════════════════════════════════════════════════════════
class BulkPurchase(TimestampMixin, db.Model):
    """A lot of shares bought from the company and held for retail allocation."""
    __tablename__ = "bulk_purchases"

    id = db.Column(db.Integer, primary_key=True)
    product_id = db.Column(db.Integer, db.ForeignKey("products.id", ondelete="CASCADE"), nullable=False)
    company_id = db.Column(db.Integer, db.ForeignKey("companies.id", ondelete="CASCADE"), nullable=False)
    admin_id = db.Column(db.Integer, db.ForeignKey("users.id"))
    approved_by_admin_id = db.Column(db.Integer, db.ForeignKey("users.id"))
    total_quantity = db.Column(db.Integer, nullable=False)
    quantity_allocated = db.Column(db.Integer, default=0)
    quantity_reserved = db.Column(db.Integer, default=0)
    price_per_unit = db.Column(db.Numeric(15, 2), nullable=False)
    discount_percentage = db.Column(db.Numeric(5, 2), default=0)
    total_cost = db.Column(db.Numeric(18, 2))
    source_type = db.Column(db.String(50), default="direct_company_purchase")
    status = db.Column(db.String(20), default="active")
    purchase_date = db.Column(db.Date)
    approved_at = db.Column(db.DateTime)

    __table_args__ = (
        db.UniqueConstraint("product_id", "company_id", name="uq_bulk_purchase_product_company"),
    )

    product = db.relationship("Product")


class CompanyShareListing(TimestampMixin, db.Model):
    __tablename__ = "company_share_listings"

    id = db.Column(db.Integer, primary_key=True)
    company_id = db.Column(
        db.Integer, db.ForeignKey("companies.id", ondelete="CASCADE"), unique=True, nullable=False
    )
    share_type = db.Column(db.String(20), default="equity")
    total_shares_available = db.Column(db.Integer, default=0)
    shares_allocated = db.Column(db.Integer, default=0)
    shares_reserved = db.Column(db.Integer, default=0)
    price_per_share = db.Column(db.Numeric(15, 2))
    listing_status = db.Column(db.String(20), default="pending")
    approved_by_admin_id = db.Column(db.Integer, db.ForeignKey("users.id"))
    approved_at = db.Column(db.DateTime)


# ═══════════════════════════════════════════════════════════════
# 4. COMPANY PORTAL
# ═══════════════════════════════════════════════════════════════
class CompanyUser(TimestampMixin, db.Model):
    """A platform user who manages a company's page through the company portal."""
    __tablename__ = "company_users"

    id = db.Column(db.Integer, primary_key=True)
    company_id = db.Column(db.Integer, db.ForeignKey("companies.id", ondelete="CASCADE"), nullable=False)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    role = db.Column(db.String(20), default="admin")  # admin, editor, viewer
    status = db.Column(db.String(20), default="active")
    is_primary = db.Column(db.Boolean, default=False)

    __table_args__ = (
        db.UniqueConstraint("company_id", "user_id", name="uq_company_user"),
    )

    company = db.relationship("Company")
    user = db.relationship("User")


class CompanyUpdate(TimestampMixin, db.Model):
    """Investor-facing news post on a company page."""
    __tablename__ = "company_updates"

    id = db.Column(db.Integer, primary_key=True)
    company_id = db.Column(db.Integer, db.ForeignKey("companies.id", ondelete="CASCADE"), nullable=False)
    title = db.Column(db.String(255), nullable=False)
    content = db.Column(db.Text)
    update_type = db.Column(db.String(30), default="news")  # news, financial, milestone
    status = db.Column(db.String(20), default="draft")
    published_at = db.Column(db.DateTime)

    __table_args__ = (
        db.UniqueConstraint("company_id", "title", name="uq_company_update_title"),
    )
