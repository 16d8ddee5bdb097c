"""
Disclosure modules seeder — the five SEBI disclosure sections every
company fills in, each tagged with a category.

The category comes from ``categorize_module``, a keyword matcher over the
module's code, name and description:

    categorize_module("board_management", "Board & Management")  -> "governance"
    categorize_module("risk_factors", "Risk Factors")            -> "legal"

Keyword groups are tried in priority order (financial, governance, legal,
operational); the first group with a hit wins. The code and name are
checked before the description so a module's long description cannot
override what its title says. No hit at all means ``operational``.
"""

import logging

from app.models.auth import User
from app.models.disclosure import DISCLOSURE_CATEGORIES, DisclosureModule
from app.seeders.data.disclosure import DISCLOSURE_MODULES
from app.services.helpers.upsert import upsert

logger = logging.getLogger(__name__)

NAME = "disclosure_modules"
PROD_SAFE = True

DEFAULT_CATEGORY = "operational"

CATEGORY_KEYWORDS = [
    ("financial", ("financial", "finance", "revenue", "profit", "cash flow", "balance sheet",
                   "earnings", "valuation", "audit")),
    ("governance", ("governance", "board", "director", "management", "shareholder", "committee",
                    "ownership")),
    ("legal", ("legal", "compliance", "litigation", "regulatory", "risk", "contract",
               "intellectual property")),
    ("operational", ("business", "operation", "product", "customer", "market", "strategy",
                     "supply chain")),
]


def _match(text):
    for category, keywords in CATEGORY_KEYWORDS:
        if any(kw in text for kw in keywords):
            return category
    return None


def categorize_module(code, name="", description=""):
    """Return the disclosure category for a module."""
    title = f"{code.replace('_', ' ')} {name}".lower()
    return _match(title) or _match((description or "").lower()) or DEFAULT_CATEGORY


def run(stats, allow_test_data=False):
    # created_by stays NULL when no admin exists yet
    admin = User.query.filter_by(username="superadmin").first()

    for row in DISCLOSURE_MODULES:
        values = {k: v for k, v in row.items() if k != "code"}
        category = values.get("category") or categorize_module(
            row["code"], row["name"], row.get("description", "")
        )
        if category not in DISCLOSURE_CATEGORIES:
            logger.warning("Module %s has unknown category %r; using %s",
                           row["code"], category, DEFAULT_CATEGORY)
            category = DEFAULT_CATEGORY
        values["category"] = category
        values.setdefault("freshness_weight", 1)
        values.setdefault("requires_admin_approval", True)
        values.setdefault("min_approval_reviews", 1)
        values.setdefault("is_active", True)
        if admin is not None:
            values["created_by"] = admin.id

        _, created = upsert(DisclosureModule, {"code": row["code"]}, values)
        stats.record("disclosure_modules", created)
        logger.debug("Disclosure module %s -> %s", row["code"], category)
