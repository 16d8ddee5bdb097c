"""
User Service — role assignment and KYC status transitions.

Only the operations the seeders need; the host application owns the full
user and KYC workflows.
"""

import logging
from datetime import datetime, timezone

from app.core.exceptions import NotFoundError, ValidationError
from app.models import db
from app.models.auth import Role, User, UserKyc, UserRole
from app.services.helpers.upsert import find_or_create

logger = logging.getLogger(__name__)

KYC_STATUSES = ("pending", "submitted", "verified", "rejected")

# current status → statuses it may move to
KYC_TRANSITIONS = {
    "pending": {"submitted"},
    "submitted": {"verified", "rejected"},
    "rejected": {"submitted"},
    "verified": set(),
}


# ═══════════════════════════════════════════════════════════════
# Roles
# ═══════════════════════════════════════════════════════════════
def assign_role(user: User, role_name: str) -> bool:
    """Attach ``role_name`` to ``user``. Returns True if newly assigned."""
    role = Role.query.filter_by(name=role_name).first()
    if role is None:
        raise NotFoundError(resource="Role", resource_id=role_name)
    _, created = find_or_create(UserRole, {"user_id": user.id, "role_id": role.id})
    if created:
        logger.debug("Assigned role %s to %s", role_name, user.username)
    return created


# ═══════════════════════════════════════════════════════════════
# KYC
# ═══════════════════════════════════════════════════════════════
def get_or_create_kyc(user: User, **values) -> tuple[UserKyc, bool]:
    """Return the user's KYC record, creating a ``pending`` one if missing."""
    values.setdefault("status", "pending")
    return find_or_create(UserKyc, {"user_id": user.id}, values)


def set_kyc_status(user: User, status: str, reason: str | None = None) -> UserKyc:
    """Move the user's KYC record one step along the transition table.

    Setting the current status again is a no-op.

    Raises:
        ValidationError: unknown status, or a transition the table forbids.
        NotFoundError: the user has no KYC record.
    """
    if status not in KYC_STATUSES:
        raise ValidationError(f"Unknown KYC status: {status}", details={"status": status})

    kyc = UserKyc.query.filter_by(user_id=user.id).first()
    if kyc is None:
        raise NotFoundError(resource="UserKyc", resource_id=user.id)
    if kyc.status == status:
        return kyc

    allowed = KYC_TRANSITIONS.get(kyc.status, set())
    if status not in allowed:
        raise ValidationError(
            f"Illegal KYC transition {kyc.status} -> {status}",
            details={"from": kyc.status, "to": status, "allowed": sorted(allowed)},
        )

    now = datetime.now(timezone.utc)
    kyc.status = status
    if status == "submitted":
        kyc.submitted_at = now
        kyc.rejection_reason = None
    elif status == "verified":
        kyc.verified_at = now
    elif status == "rejected":
        if not reason:
            raise ValidationError("A rejection reason is required", details={"reason": "missing"})
        kyc.rejection_reason = reason
    db.session.flush()
    return kyc


def advance_kyc_to(user: User, target: str, reason: str | None = None) -> UserKyc:
    """Walk the transition table from the current status to ``target``.

    ``verified`` from ``pending`` goes pending → submitted → verified.
    """
    paths = {
        "pending": [],
        "submitted": ["submitted"],
        "verified": ["submitted", "verified"],
        "rejected": ["submitted", "rejected"],
    }
    if target not in paths:
        raise ValidationError(f"Unknown KYC status: {target}", details={"status": target})

    kyc, _ = get_or_create_kyc(user)
    if kyc.status == target:
        return kyc
    if target == "pending":
        raise ValidationError(
            f"Illegal KYC transition {kyc.status} -> pending",
            details={"from": kyc.status, "to": "pending"},
        )
    for step in paths[target]:
        if kyc.status == step:
            continue
        kyc = set_kyc_status(user, step, reason=reason if step == "rejected" else None)
    return kyc
