"""
Foundation seeder tests — settings, permissions, role wildcard expansion,
sectors, feature flags, KYC rejection templates, legal agreements.
"""

import pytest

from app.models import db
from app.models.auth import Permission, Role, RolePermission
from app.models.catalog import Sector
from app.models.configuration import FeatureFlag, KycRejectionTemplate, LegalAgreement, Setting
from app.seeders import foundation, run_seeder
from app.seeders.data.foundation import PERMISSIONS, SETTINGS


@pytest.fixture()
def seeded():
    return run_seeder("foundation")


# ═══════════════════════════════════════════════════════════════
# PERMISSION EXPANSION
# ═══════════════════════════════════════════════════════════════

NAMES = {"users.view", "users.edit", "kyc.view", "kyc.approve", "system.developer.tools"}


class TestExpandPermissions:
    def test_star_is_everything(self):
        assert foundation.expand_permissions("*", NAMES) == NAMES

    def test_area_wildcard(self):
        assert foundation.expand_permissions(["kyc.*"], NAMES) == {"kyc.view", "kyc.approve"}

    def test_exact_names_and_unknowns(self):
        result = foundation.expand_permissions(["users.view", "nope.view"], NAMES)
        assert result == {"users.view"}

    def test_exclude_prefix(self):
        result = foundation.expand_permissions("*", NAMES, exclude=["system.developer"])
        assert "system.developer.tools" not in result
        assert len(result) == len(NAMES) - 1

    def test_area_wildcard_does_not_match_prefix_of_other_area(self):
        names = {"users.view", "users_admin.view"}
        assert foundation.expand_permissions(["users.*"], names) == {"users.view"}


# ═══════════════════════════════════════════════════════════════
# SEEDED ROWS
# ═══════════════════════════════════════════════════════════════


class TestFoundationSeeder:
    def test_row_counts(self, seeded):
        assert Setting.query.count() == len(SETTINGS)
        assert Permission.query.count() == len(PERMISSIONS) == 71
        assert Role.query.count() == 5
        assert Sector.query.count() == 15
        assert FeatureFlag.query.count() == 20
        assert KycRejectionTemplate.query.count() == 10
        assert LegalAgreement.query.count() == 6

    def test_super_admin_has_everything(self, seeded):
        role = Role.query.filter_by(name="Super Admin").first()
        assert len(role.permission_names) == 71
        assert "system.developer.tools" in role.permission_names

    def test_admin_excludes_developer_tools(self, seeded):
        role = Role.query.filter_by(name="Admin").first()
        assert len(role.permission_names) == 70
        assert "system.developer.tools" not in role.permission_names

    def test_kyc_reviewer(self, seeded):
        role = Role.query.filter_by(name="KYC Reviewer").first()
        assert role.permission_names == [
            "kyc.approve", "kyc.edit", "kyc.reject", "kyc.view", "users.view",
        ]

    def test_user_role_has_no_permissions(self, seeded):
        assert Role.query.filter_by(name="User").first().permission_names == []

    def test_stale_permission_removed_on_rerun(self, seeded):
        reviewer = Role.query.filter_by(name="KYC Reviewer").first()
        extra = Permission.query.filter_by(name="settings.edit").first()
        db.session.add(RolePermission(role_id=reviewer.id, permission_id=extra.id))
        db.session.commit()

        run_seeder("foundation")
        assert "settings.edit" not in reviewer.permission_names

    def test_feature_flags_off_by_default(self, seeded):
        for key in ("enable_2fa", "maintenance_mode"):
            flag = FeatureFlag.query.filter_by(key=key).first()
            assert flag.is_enabled is False
        assert FeatureFlag.query.filter_by(key="enable_investment").first().is_enabled is True

    def test_setting_typed_values(self, seeded):
        assert Setting.query.filter_by(key="maintenance_mode").first().typed_value is False
        assert Setting.query.filter_by(key="kyc_min_age").first().typed_value == 18
        assert Setting.query.filter_by(key="referral_tier_2_multiplier").first().typed_value == 2.0
        docs = Setting.query.filter_by(key="kyc_required_documents").first().typed_value
        assert docs == ["aadhaar", "pan", "bank_statement"]

    def test_legal_agreements_active(self, seeded):
        for agreement in LegalAgreement.query.all():
            assert agreement.status == "active"
            assert agreement.version == "1.0"

    def test_idempotent(self, seeded):
        before = (Setting.query.count(), RolePermission.query.count(), Sector.query.count())
        stats = run_seeder("foundation")
        after = (Setting.query.count(), RolePermission.query.count(), Sector.query.count())
        assert before == after
        assert stats.total_created == 0

    def test_edited_setting_is_restored(self, seeded):
        setting = Setting.query.filter_by(key="platform_name").first()
        setting.value = "Something Else"
        db.session.commit()
        run_seeder("foundation")
        assert Setting.query.filter_by(key="platform_name").first().value == "PreIPOsip"
