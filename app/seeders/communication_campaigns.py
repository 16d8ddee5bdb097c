"""
Communication & campaigns seeder — email and SMS templates, support canned
responses, knowledge-base categories and articles, referral programmes, promotional
campaigns and lucky draws.

Best-effort per step, like the plans/CMS seeder.
"""

import re

from app.models.auth import User
from app.models.base import utcnow
from app.models.campaign import Campaign, LuckyDraw, ReferralCampaign
from app.models.cms import CannedResponse, KbArticle, KbCategory
from app.models.communication import EmailTemplate, SmsTemplate
from app.seeders.data.communication import (
    CANNED_RESPONSES,
    EMAIL_TEMPLATES,
    KB_ARTICLES,
    KB_CATEGORIES,
    LUCKY_DRAWS,
    PROMO_CAMPAIGNS,
    REFERRAL_CAMPAIGNS,
    SMS_TEMPLATES,
)
from app.seeders.steps import run_best_effort
from app.services.helpers.upsert import upsert

NAME = "communication_campaigns"
PROD_SAFE = True

PLACEHOLDER_RE = re.compile(r"\{\{\s*(\w+)\s*\}\}")


def template_variables(declared, *texts):
    """Declared variables, then any ``{{name}}`` used in ``texts`` but not declared.

    >>> template_variables(["user_name"], "Hi {{user_name}}, ₹{{amount}}")
    ['user_name', 'amount']
    """
    result = list(declared)
    for text in texts:
        for name in PLACEHOLDER_RE.findall(text or ""):
            if name not in result:
                result.append(name)
    return result


def seed_email_templates(stats):
    for row in EMAIL_TEMPLATES:
        _, created = upsert(
            EmailTemplate, {"slug": row["slug"]},
            {
                "name": row["name"],
                "subject": row["subject"],
                "body": row["body"],
                "variables": template_variables(row["variables"], row["subject"], row["body"]),
                "is_active": True,
            },
        )
        stats.record("email_templates", created)


def seed_sms_templates(stats):
    for row in SMS_TEMPLATES:
        _, created = upsert(
            SmsTemplate, {"slug": row["slug"]},
            {
                "name": row["name"],
                "body": row["body"],
                "variables": template_variables(row["variables"], row["body"]),
                "is_active": True,
            },
        )
        stats.record("sms_templates", created)


def seed_canned_responses(stats):
    for title, content in CANNED_RESPONSES:
        _, created = upsert(CannedResponse, {"title": title}, {"content": content})
        stats.record("canned_responses", created)


def seed_kb_categories(stats):
    for order, row in enumerate(KB_CATEGORIES, start=1):
        _, created = upsert(
            KbCategory, {"slug": row["slug"]},
            {"name": row["name"], "description": row["description"], "display_order": order},
        )
        stats.record("kb_categories", created)


def seed_kb_articles(stats):
    """Published help articles; authored by ``superadmin`` when present."""
    categories = {c.slug: c for c in KbCategory.query.all()}
    admin = User.query.filter_by(username="superadmin").first()
    for row in KB_ARTICLES:
        values = {k: v for k, v in row.items() if k not in ("slug", "category")}
        article, created = upsert(
            KbArticle, {"slug": row["slug"]},
            {
                **values,
                "kb_category_id": categories[row["category"]].id,
                "author_id": admin.id if admin else None,
                "status": "published",
            },
        )
        if article.published_at is None:
            article.published_at = utcnow()
        stats.record("kb_articles", created)


def _seed_coded(model, rows, label, stats):
    for row in rows:
        values = {k: v for k, v in row.items() if k != "code"}
        _, created = upsert(model, {"code": row["code"]}, values)
        stats.record(label, created)


def seed_referral_campaigns(stats):
    _seed_coded(ReferralCampaign, REFERRAL_CAMPAIGNS, "referral_campaigns", stats)


def seed_promo_campaigns(stats):
    _seed_coded(Campaign, PROMO_CAMPAIGNS, "campaigns", stats)


def seed_lucky_draws(stats):
    _seed_coded(LuckyDraw, LUCKY_DRAWS, "lucky_draws", stats)


def run(stats, allow_test_data=False):
    run_best_effort(stats, [
        ("email_templates", seed_email_templates),
        ("sms_templates", seed_sms_templates),
        ("canned_responses", seed_canned_responses),
        ("kb_categories", seed_kb_categories),
        ("kb_articles", seed_kb_articles),
        ("referral_campaigns", seed_referral_campaigns),
        ("campaigns", seed_promo_campaigns),
        ("lucky_draws", seed_lucky_draws),
    ])
