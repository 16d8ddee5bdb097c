"""
Investment plans & CMS seeder — the three SIP plans with their features and
business-rule configs, navigation menus, static pages, banners, blog
categories and the promotional materials referrers download.

Best-effort: each step runs in its own savepoint, so a bad CMS row does not
take the plans down with it.
"""

from app.models.cms import Banner, BlogCategory, Menu, MenuItem, Page, PromotionalMaterial
from app.models.plan import Plan, PlanConfig, PlanFeature
from app.seeders.data.plans import (
    BANNERS,
    BLOG_CATEGORIES,
    MENUS,
    PAGES,
    PLAN_CONFIGS,
    PLAN_FEATURES,
    PLANS,
    PROMOTIONAL_MATERIALS,
)
from app.seeders.steps import run_best_effort
from app.services.helpers.upsert import upsert

NAME = "investment_plans"
PROD_SAFE = True


def seed_plans(stats):
    for row in PLANS:
        values = {k: v for k, v in row.items() if k != "slug"}
        plan, created = upsert(Plan, {"slug": row["slug"]}, {**values, "is_active": True})
        stats.record("plans", created)

        for order, text in enumerate(PLAN_FEATURES.get(row["slug"], []), start=1):
            _, created = upsert(
                PlanFeature, {"plan_id": plan.id, "feature_text": text}, {"display_order": order}
            )
            stats.record("plan_features", created)

        for key, value in PLAN_CONFIGS.get(row["slug"], {}).items():
            _, created = upsert(PlanConfig, {"plan_id": plan.id, "config_key": key}, {"value": value})
            stats.record("plan_configs", created)


def seed_menus(stats):
    for slug, (name, items) in MENUS.items():
        menu, created = upsert(Menu, {"slug": slug}, {"name": name})
        stats.record("menus", created)
        for order, (label, url) in enumerate(items, start=1):
            _, created = upsert(
                MenuItem, {"menu_id": menu.id, "label": label}, {"url": url, "display_order": order}
            )
            stats.record("menu_items", created)


def seed_pages(stats):
    for row in PAGES:
        _, created = upsert(
            Page, {"slug": row["slug"]},
            {"title": row["title"], "content": row["content"], "status": row["status"]},
        )
        stats.record("pages", created)


def seed_banners(stats):
    for row in BANNERS:
        values = {k: v for k, v in row.items() if k != "title"}
        _, created = upsert(Banner, {"title": row["title"]}, {**values, "is_active": True})
        stats.record("banners", created)


def seed_blog_categories(stats):
    for order, row in enumerate(BLOG_CATEGORIES, start=1):
        _, created = upsert(
            BlogCategory, {"slug": row["slug"]},
            {"name": row["name"], "description": row["description"], "display_order": order},
        )
        stats.record("blog_categories", created)


def seed_promotional_materials(stats):
    for row in PROMOTIONAL_MATERIALS:
        values = {k: v for k, v in row.items() if k != "title"}
        _, created = upsert(PromotionalMaterial, {"title": row["title"]}, {**values, "is_active": True})
        stats.record("promotional_materials", created)


def run(stats, allow_test_data=False):
    run_best_effort(stats, [
        ("plans", seed_plans),
        ("menus", seed_menus),
        ("pages", seed_pages),
        ("banners", seed_banners),
        ("blog_categories", seed_blog_categories),
        ("promotional_materials", seed_promotional_materials),
    ])
