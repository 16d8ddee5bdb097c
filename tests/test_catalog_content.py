"""
Companies & products, investment plans & CMS, communication & campaigns.

Covers the admin prerequisite, inventory conservation, template variable
derivation, and best-effort step isolation.
"""

import pytest

from app.core.exceptions import NotFoundError
from app.models.campaign import Campaign, LuckyDraw, ReferralCampaign
from app.models.catalog import (
    BulkPurchase,
    Company,
    CompanyShareListing,
    CompanyUpdate,
    CompanyUser,
    Product,
    ProductFundingRound,
    ProductHighlight,
    ProductPriceHistory,
)
from app.models.auth import User
from app.models.cms import (
    Banner,
    BlogCategory,
    CannedResponse,
    KbArticle,
    KbCategory,
    Menu,
    MenuItem,
    Page,
    PromotionalMaterial,
)
from app.models.communication import EmailTemplate, SmsTemplate
from app.models.plan import Plan, PlanConfig, PlanFeature
from app.models import db
from app.seeders import communication_campaigns, investment_plans, run_seeder
from app.seeders.communication_campaigns import template_variables


# ═══════════════════════════════════════════════════════════════
# COMPANIES & PRODUCTS
# ═══════════════════════════════════════════════════════════════


class TestCompaniesProducts:
    def test_requires_admin(self):
        run_seeder("foundation")
        with pytest.raises(NotFoundError):
            run_seeder("companies_products")
        assert Company.query.count() == 0

    def test_catalog_rows(self, seed_up_to):
        seed_up_to("companies_products", allow_test_data=False)
        assert Company.query.count() == 5
        assert Product.query.count() == 5
        assert BulkPurchase.query.count() == 5
        assert CompanyShareListing.query.count() == 5
        assert ProductHighlight.query.count() == 15
        assert ProductFundingRound.query.count() == 10
        assert ProductPriceHistory.query.count() == 10

    def test_company_linked_to_sector(self, seed_up_to):
        seed_up_to("companies_products", allow_test_data=False)
        company = Company.query.filter_by(slug="techcorp-india").first()
        assert company.sector_ref.slug == "technology"
        assert company.sector == "Technology"
        assert company.products.first().slug == "techcorp-india-shares"

    def test_inventory_conserved(self, seed_up_to):
        seed_up_to("companies_products", allow_test_data=False)
        for bulk in BulkPurchase.query.all():
            assert bulk.quantity_allocated + bulk.quantity_reserved == bulk.total_quantity

    def test_bulk_discount(self, seed_up_to):
        seed_up_to("companies_products", allow_test_data=False)
        product = Product.query.filter_by(slug="techcorp-india-shares").first()
        bulk = BulkPurchase.query.filter_by(product_id=product.id).first()
        assert float(bulk.discount_percentage) == 5.0
        assert float(bulk.price_per_unit) == 475.0
        assert float(bulk.total_cost) == 475.0 * 10000

    def test_rerun_refreshes_lot_pricing(self, seed_up_to):
        seed_up_to("companies_products", allow_test_data=False)
        bulk = BulkPurchase.query.first()
        bulk.price_per_unit = 1
        bulk.total_cost = 1
        db.session.commit()

        run_seeder("companies_products")
        bulk = db.session.get(BulkPurchase, bulk.id)
        assert float(bulk.price_per_unit) > 1
        assert bulk.total_cost == bulk.price_per_unit * bulk.total_quantity

    def test_rerun_keeps_allocations(self, seed_up_to):
        seed_up_to("companies_products", allow_test_data=False)
        bulk = BulkPurchase.query.first()
        bulk.quantity_allocated += 10
        bulk.quantity_reserved -= 10
        db.session.commit()
        allocated = bulk.quantity_allocated

        run_seeder("companies_products")
        assert db.session.get(BulkPurchase, bulk.id).quantity_allocated == allocated

    def test_idempotent(self, seed_up_to):
        seed_up_to("companies_products", allow_test_data=False)
        stats = run_seeder("companies_products")
        assert stats.total_created == 0
        assert Product.query.count() == 5

    def test_company_updates(self, seed_up_to):
        seed_up_to("companies_products", allow_test_data=False)
        assert CompanyUpdate.query.count() == 10
        company = Company.query.filter_by(slug="techcorp-india").first()
        titles = [u.title for u in CompanyUpdate.query.filter_by(company_id=company.id)]
        assert any(company.name in t for t in titles)
        assert {u.status for u in CompanyUpdate.query.all()} == {"published"}

    def test_portal_accounts_for_company_reps(self, seed_up_to):
        seed_up_to("companies_products", allow_test_data=True)
        assert CompanyUser.query.count() == 2
        rep = User.query.filter_by(email="company1@example.com").first()
        link = CompanyUser.query.filter_by(user_id=rep.id).one()
        assert link.company.slug == "techcorp-india"
        assert link.role == "admin"
        assert link.is_primary is True

    def test_no_portal_accounts_without_test_data(self, seed_up_to):
        seed_up_to("companies_products", allow_test_data=False)
        assert CompanyUser.query.count() == 0


# ═══════════════════════════════════════════════════════════════
# PLANS & CMS
# ═══════════════════════════════════════════════════════════════


class TestInvestmentPlans:
    def test_plans_with_features_and_configs(self):
        run_seeder("investment_plans")
        assert Plan.query.count() == 3
        assert PlanFeature.query.count() == 12
        assert PlanConfig.query.count() == 15
        growth = Plan.query.filter_by(slug="plan-b-growth").first()
        assert growth.config_value("progressive_bonus_rate") == 0.75
        assert growth.config_value("milestone_bonus_enabled") is True
        assert growth.config_value("missing", "x") == "x"

    def test_cms_rows(self):
        run_seeder("investment_plans")
        assert Menu.query.count() == 4
        assert MenuItem.query.count() == 20
        assert Page.query.count() == 3
        assert Banner.query.count() == 3
        assert BlogCategory.query.count() == 5
        assert PromotionalMaterial.query.count() == 7

    def test_promotional_material_fields(self):
        run_seeder("investment_plans")
        video = PromotionalMaterial.query.filter_by(title="PreIPO SIP Explainer Video").first()
        assert video.category == "videos"
        assert video.material_type == "video"
        assert video.file_size == 8388608
        assert video.is_active is True

    def test_menu_items_ordered(self):
        run_seeder("investment_plans")
        header = Menu.query.filter_by(slug="header").first()
        assert [i.label for i in header.items][:2] == ["Home", "Companies"]

    def test_failed_step_does_not_abort(self, monkeypatch):
        def boom(stats):
            db.session.add(Page(title="Half", slug="half"))
            db.session.flush()
            raise RuntimeError("menus exploded")

        monkeypatch.setattr(investment_plans, "seed_menus", boom)
        stats = run_seeder("investment_plans")

        assert stats.failures == [("menus", "menus exploded")]
        assert Plan.query.count() == 3
        assert Page.query.filter_by(slug="half").count() == 0
        assert Page.query.count() == 3
        assert BlogCategory.query.count() == 5

    def test_idempotent(self):
        run_seeder("investment_plans")
        stats = run_seeder("investment_plans")
        assert stats.total_created == 0
        assert MenuItem.query.count() == 20


# ═══════════════════════════════════════════════════════════════
# COMMUNICATION & CAMPAIGNS
# ═══════════════════════════════════════════════════════════════


class TestTemplateVariables:
    def test_keeps_declared_order(self):
        assert template_variables(["b", "a"], "{{a}} {{b}}") == ["b", "a"]

    def test_appends_undeclared(self):
        assert template_variables(["user_name"], "Hi {{user_name}}", "₹{{ amount }}") == [
            "user_name", "amount",
        ]

    def test_none_text(self):
        assert template_variables([], None) == []


class TestCommunicationCampaigns:
    def test_rows(self):
        run_seeder("communication_campaigns")
        assert EmailTemplate.query.count() == 10
        assert SmsTemplate.query.count() == 5
        assert CannedResponse.query.count() == 10
        assert KbCategory.query.count() == 5
        assert KbArticle.query.count() == 10
        assert ReferralCampaign.query.count() == 2
        assert Campaign.query.count() == 3
        assert LuckyDraw.query.count() == 1

    def test_kb_articles_filed_and_published(self, seed_up_to):
        seed_up_to("communication_campaigns", allow_test_data=False)
        admin = User.query.filter_by(username="superadmin").first()
        kyc = KbCategory.query.filter_by(slug="kyc-verification").first()
        assert kyc.articles.count() == 2
        for article in KbArticle.query.all():
            assert article.status == "published"
            assert article.published_at is not None
            assert article.author_id == admin.id

    def test_kb_articles_need_categories(self, monkeypatch):
        def boom(stats):
            raise RuntimeError("kb categories locked")

        monkeypatch.setattr(communication_campaigns, "seed_kb_categories", boom)
        stats = run_seeder("communication_campaigns")
        assert [step for step, _ in stats.failures] == ["kb_categories", "kb_articles"]
        assert KbArticle.query.count() == 0
        assert CannedResponse.query.count() == 10

    def test_template_variables_cover_placeholders(self):
        run_seeder("communication_campaigns")
        for template in EmailTemplate.query.all():
            used = set(template_variables([], template.subject, template.body))
            assert used <= set(template.variables), template.slug

    def test_festival_campaign_inactive(self):
        run_seeder("communication_campaigns")
        assert Campaign.query.filter_by(code="FESTIVAL2026").first().is_active is False

    def test_lucky_draw_json(self):
        run_seeder("communication_campaigns")
        draw = LuckyDraw.query.filter_by(code="MONTHLY_JAN2026").first()
        assert [p["rank"] for p in draw.prize_structure] == [1, 2, 3]
        assert draw.entry_rules["min_investment"] == 5000

    def test_redemption_counter_survives_rerun(self):
        run_seeder("communication_campaigns")
        campaign = Campaign.query.filter_by(code="NEWYEAR2026").first()
        campaign.current_redemptions = 42
        db.session.commit()
        run_seeder("communication_campaigns")
        assert Campaign.query.filter_by(code="NEWYEAR2026").first().current_redemptions == 42

    def test_failed_step_does_not_abort(self, monkeypatch):
        def boom(stats):
            raise RuntimeError("sms provider down")

        monkeypatch.setattr(communication_campaigns, "seed_sms_templates", boom)
        stats = run_seeder("communication_campaigns")
        assert [step for step, _ in stats.failures] == ["sms_templates"]
        assert SmsTemplate.query.count() == 0
        assert EmailTemplate.query.count() == 10
        assert LuckyDraw.query.count() == 1
