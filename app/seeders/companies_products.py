"""
Companies & products seeder — five Pre-IPO companies, one equity product
each with its deal-page detail rows, the opening bulk-purchase inventory,
a share listing and investor updates per company, and the company-portal
accounts of the test-data company reps.

Requires the ``superadmin`` user (identity_access) and the sectors
(foundation).
"""

import logging
from datetime import date, timedelta
from decimal import ROUND_HALF_UP, Decimal

from app.core.exceptions import NotFoundError
from app.models.auth import User
from app.models.base import utcnow
from app.models.catalog import (
    BulkPurchase,
    Company,
    CompanyShareListing,
    CompanyUpdate,
    CompanyUser,
    Product,
    ProductFounder,
    ProductFundingRound,
    ProductHighlight,
    ProductKeyMetric,
    ProductPriceHistory,
    ProductRiskDisclosure,
    Sector,
)
from app.seeders.data.catalog import (
    BULK_DISCOUNT_PERCENT,
    COMPANIES,
    COMPANY_PORTAL_USERS,
    COMPANY_UPDATES,
    FOUNDERS,
    FUNDING_ROUNDS,
    LISTING_MONTHS_AHEAD,
    PRICE_HISTORY,
    PRODUCT_MAX_INVESTMENT,
    PRODUCT_MIN_INVESTMENT,
    RISK_DISCLOSURES,
)
from app.services.helpers.upsert import find_or_create, upsert

logger = logging.getLogger(__name__)

NAME = "companies_products"
PROD_SAFE = True

FACE_VALUE = Decimal("10")
_CENTS = Decimal("0.01")


def product_slug(company_slug):
    return f"{company_slug}-shares"


def _months_ago(today, months):
    return today - timedelta(days=30 * months)


def seed_company(row, stats):
    sector = Sector.query.filter_by(slug=row["sector_slug"]).first()
    if sector is None:
        raise NotFoundError(resource="Sector", resource_id=row["sector_slug"])
    company, created = upsert(
        Company, {"slug": row["slug"]},
        {
            "name": row["name"],
            "sector": sector.name,
            "sector_id": sector.id,
            "description": row["description"],
            "website": row["website"],
            "founded_year": row["founded_year"],
            "headquarters": row["headquarters"],
            "employees_count": row["employees_count"],
            "is_featured": row["is_featured"],
            "status": "active",
        },
    )
    stats.record("companies", created)
    return company


def seed_product(company, row, today, stats):
    product, created = upsert(
        Product, {"slug": product_slug(row["slug"])},
        {
            "company_id": company.id,
            "name": row["product_name"],
            "description": {"overview": row["description"], "highlights": row["highlights"]},
            "category": "equity",
            "face_value": FACE_VALUE,
            "price_per_share": row["price_per_share"],
            "min_investment": PRODUCT_MIN_INVESTMENT,
            "max_investment": PRODUCT_MAX_INVESTMENT,
            "is_active": True,
            "is_featured": row["is_featured"],
            "listing_date": today + timedelta(days=30 * LISTING_MONTHS_AHEAD),
        },
    )
    stats.record("products", created)
    return product


def seed_product_details(product, row, today, stats):
    """Highlights, founders, funding rounds, metrics, risks and price history."""
    for order, text in enumerate(row["highlights"], start=1):
        _, created = upsert(
            ProductHighlight, {"product_id": product.id, "highlight_text": text},
            {"display_order": order},
        )
        stats.record("product_highlights", created)

    for founder in FOUNDERS:
        _, created = upsert(
            ProductFounder, {"product_id": product.id, "name": founder["name"]},
            {"role": founder["role"], "bio": founder["bio"], "display_order": founder["display_order"]},
        )
        stats.record("product_founders", created)

    for rnd in FUNDING_ROUNDS:
        _, created = upsert(
            ProductFundingRound, {"product_id": product.id, "round_type": rnd["round_type"]},
            {
                "amount_raised": rnd["amount_raised"],
                "valuation": rnd["valuation"],
                "funded_at": today - timedelta(days=365 * rnd["years_ago"]),
            },
        )
        stats.record("product_funding_rounds", created)

    for order, (metric, value) in enumerate(row["metrics"].items(), start=1):
        _, created = upsert(
            ProductKeyMetric, {"product_id": product.id, "metric_name": metric},
            {"metric_value": value, "display_order": order},
        )
        stats.record("product_key_metrics", created)

    for risk in RISK_DISCLOSURES:
        _, created = upsert(
            ProductRiskDisclosure, {"product_id": product.id, "risk_type": risk["risk_type"]},
            {"description": risk["description"], "severity": risk["severity"]},
        )
        stats.record("product_risk_disclosures", created)

    for factor, months_ago, reason in PRICE_HISTORY:
        price = (row["price_per_share"] * factor).quantize(_CENTS, rounding=ROUND_HALF_UP)
        _, created = upsert(
            ProductPriceHistory, {"product_id": product.id, "reason": reason},
            {"price_per_share": price, "effective_date": _months_ago(today, months_ago)},
        )
        stats.record("product_price_history", created)


def seed_bulk_purchase(company, product, row, admin, today, stats):
    """Opening inventory lot for a product.

    Quantities are only set when the lot is created: allocations made by
    later seeders move shares from reserved to allocated, and a re-run must
    not undo them. Prices and cost are refreshed every run.
    """
    discount = BULK_DISCOUNT_PERCENT
    unit_price = (row["price_per_share"] * (100 - discount) / 100).quantize(_CENTS, rounding=ROUND_HALF_UP)
    total = row["inventory"]["quantity"]
    allocated = row["inventory"]["allocated"]

    bulk, created = find_or_create(
        BulkPurchase, {"product_id": product.id, "company_id": company.id},
        {
            "admin_id": admin.id,
            "approved_by_admin_id": admin.id,
            "total_quantity": total,
            "quantity_allocated": allocated,
            "quantity_reserved": total - allocated,
            "source_type": "direct_company_purchase",
            "status": "active",
            "purchase_date": _months_ago(today, 6),
            "approved_at": utcnow(),
            "price_per_unit": unit_price,
            "discount_percentage": discount,
            "total_cost": unit_price * total,
        },
    )
    if not created:
        bulk.price_per_unit = unit_price
        bulk.discount_percentage = discount
        bulk.total_cost = unit_price * bulk.total_quantity
    stats.record("bulk_purchases", created)
    return bulk


def seed_share_listing(company, product, bulk, admin, stats):
    _, created = upsert(
        CompanyShareListing, {"company_id": company.id},
        {
            "share_type": "equity",
            "total_shares_available": bulk.total_quantity,
            "shares_allocated": bulk.quantity_allocated,
            "shares_reserved": bulk.quantity_reserved,
            "price_per_share": product.price_per_share,
            "listing_status": "approved",
            "approved_by_admin_id": admin.id,
            "approved_at": utcnow(),
        },
    )
    stats.record("company_share_listings", created)


def seed_company_updates(company, stats):
    for row in COMPANY_UPDATES:
        title = row["title"].format(company=company.name)
        _, created = find_or_create(
            CompanyUpdate, {"company_id": company.id, "title": title},
            {
                "content": row["content"].format(company=company.name),
                "update_type": row["update_type"],
                "status": "published",
                "published_at": utcnow(),
            },
        )
        stats.record("company_updates", created)


def seed_company_portal_users(stats):
    """Link the company reps to their companies. Reps only exist with test data."""
    for row in COMPANY_PORTAL_USERS:
        user = User.query.filter_by(email=row["email"]).first()
        if user is None:
            logger.debug("No company rep %s; portal account skipped", row["email"])
            continue
        company = Company.query.filter_by(slug=row["company_slug"]).first()
        _, created = upsert(
            CompanyUser, {"company_id": company.id, "user_id": user.id},
            {"role": row["role"], "status": "active", "is_primary": True},
        )
        stats.record("company_users", created)


def run(stats, allow_test_data=False):
    admin = User.query.filter_by(username="superadmin").first()
    if admin is None:
        raise NotFoundError(resource="User", resource_id="superadmin")

    today = date.today()
    for row in COMPANIES:
        company = seed_company(row, stats)
        product = seed_product(company, row, today, stats)
        seed_product_details(product, row, today, stats)
        bulk = seed_bulk_purchase(company, product, row, admin, today, stats)
        seed_share_listing(company, product, bulk, admin, stats)
        seed_company_updates(company, stats)
        logger.debug("Seeded %s (%s)", company.name, product.slug)
    seed_company_portal_users(stats)
