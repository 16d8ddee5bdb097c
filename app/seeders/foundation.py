"""
Foundation seeder — settings, permissions, roles, sectors, feature flags,
KYC rejection templates and legal agreements.

No foreign-key dependencies on other seeders. Production-safe.
"""

import logging

from app.models import db
from app.models.auth import Permission, Role, RolePermission
from app.models.catalog import Sector
from app.models.configuration import FeatureFlag, KycRejectionTemplate, LegalAgreement, Setting
from app.seeders.data.foundation import (
    AGREEMENTS_EFFECTIVE,
    FEATURE_FLAGS,
    KYC_REJECTION_TEMPLATES,
    LEGAL_AGREEMENTS,
    PERMISSIONS,
    ROLES,
    SECTORS,
    SETTINGS,
)
from app.services.helpers.upsert import upsert

logger = logging.getLogger(__name__)

NAME = "foundation"
PROD_SAFE = True


def expand_permissions(perm_spec, all_names, exclude=()):
    """Expand ``"*"`` / ``"<area>.*"`` specs into concrete permission names.

    Names that do not exist are dropped. Anything starting with one of the
    ``exclude`` prefixes is removed after expansion.
    """
    if perm_spec == "*":
        result = set(all_names)
    else:
        result = set()
        for p in perm_spec:
            if p.endswith(".*"):
                area = p[:-2]
                result.update(n for n in all_names if n.startswith(f"{area}."))
            elif p in all_names:
                result.add(p)
    return {n for n in result if not any(n.startswith(prefix) for prefix in exclude)}


def seed_settings(stats):
    for group, key, value, type_, description in SETTINGS:
        _, created = upsert(
            Setting, {"key": key},
            {"value": value, "type": type_, "group": group, "description": description},
        )
        stats.record("settings", created)


def seed_permissions(stats):
    for name, area in PERMISSIONS:
        _, created = upsert(Permission, {"name": name}, {"category": area})
        stats.record("permissions", created)


def seed_roles(stats):
    """Create the system roles and sync each one's permission set."""
    perms_by_name = {p.name: p for p in Permission.query.all()}
    all_names = set(perms_by_name)

    for role_name, cfg in ROLES.items():
        role, created = upsert(
            Role, {"name": role_name},
            {"description": cfg["description"], "is_system": True},
        )
        stats.record("roles", created)

        target = expand_permissions(cfg["permissions"], all_names, cfg.get("exclude", ()))
        existing = {rp.permission.name: rp for rp in role.role_permissions.all()}

        for name in sorted(target - set(existing)):
            db.session.add(RolePermission(role_id=role.id, permission_id=perms_by_name[name].id))
            stats.record("role_permissions", True)

        # Remove permissions that should no longer be assigned
        for name in set(existing) - target:
            db.session.delete(existing[name])
        db.session.flush()
        logger.debug("Role %s: %d permissions", role_name, len(target))


def seed_sectors(stats):
    for row in SECTORS:
        _, created = upsert(
            Sector, {"slug": row["slug"]},
            {"name": row["name"], "description": row["description"]},
        )
        stats.record("sectors", created)


def seed_feature_flags(stats):
    for row in FEATURE_FLAGS:
        values = {k: v for k, v in row.items() if k != "key"}
        _, created = upsert(FeatureFlag, {"key": row["key"]}, values)
        stats.record("feature_flags", created)


def seed_kyc_rejection_templates(stats):
    for row in KYC_REJECTION_TEMPLATES:
        values = {k: v for k, v in row.items() if k != "name"}
        _, created = upsert(KycRejectionTemplate, {"name": row["name"]}, values)
        stats.record("kyc_rejection_templates", created)


def seed_legal_agreements(stats):
    for row in LEGAL_AGREEMENTS:
        _, created = upsert(
            LegalAgreement, {"type": row["type"]},
            {
                "title": row["title"],
                "content": row["content"],
                "require_signature": row["require_signature"],
                "version": "1.0",
                "status": "active",
                "effective_date": AGREEMENTS_EFFECTIVE,
            },
        )
        stats.record("legal_agreements", created)


def run(stats, allow_test_data=False):
    seed_settings(stats)
    seed_permissions(stats)
    seed_roles(stats)
    seed_sectors(stats)
    seed_feature_flags(stats)
    seed_kyc_rejection_templates(stats)
    seed_legal_agreements(stats)
