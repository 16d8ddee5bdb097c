"""
User service tests — role assignment and the KYC transition table.
"""

import pytest

from app.core.exceptions import NotFoundError, ValidationError
from app.models import db
from app.models.auth import Role, User, UserKyc, UserRole
from app.services import user_service


def _make_user(username="alice"):
    user = User(username=username, email=f"{username}@test.com", password_hash="x")
    db.session.add(user)
    db.session.flush()
    return user


@pytest.fixture()
def user():
    return _make_user()


# ═══════════════════════════════════════════════════════════════
# ROLES
# ═══════════════════════════════════════════════════════════════


class TestAssignRole:
    def test_assigns_once(self, user):
        db.session.add(Role(name="User"))
        db.session.flush()
        assert user_service.assign_role(user, "User") is True
        assert user_service.assign_role(user, "User") is False
        assert UserRole.query.filter_by(user_id=user.id).count() == 1
        assert user.role_names == ["User"]

    def test_missing_role(self, user):
        with pytest.raises(NotFoundError):
            user_service.assign_role(user, "Ghost")


# ═══════════════════════════════════════════════════════════════
# KYC TRANSITIONS
# ═══════════════════════════════════════════════════════════════


class TestSetKycStatus:
    def test_happy_path(self, user):
        user_service.get_or_create_kyc(user)
        kyc = user_service.set_kyc_status(user, "submitted")
        assert kyc.submitted_at is not None
        kyc = user_service.set_kyc_status(user, "verified")
        assert kyc.status == "verified"
        assert kyc.verified_at is not None

    def test_pending_cannot_jump_to_verified(self, user):
        user_service.get_or_create_kyc(user)
        with pytest.raises(ValidationError) as exc:
            user_service.set_kyc_status(user, "verified")
        assert exc.value.details["from"] == "pending"
        assert exc.value.details["allowed"] == ["submitted"]

    def test_verified_is_terminal(self, user):
        user_service.advance_kyc_to(user, "verified")
        with pytest.raises(ValidationError):
            user_service.set_kyc_status(user, "rejected", reason="late")

    def test_rejection_needs_reason(self, user):
        user_service.advance_kyc_to(user, "submitted")
        with pytest.raises(ValidationError):
            user_service.set_kyc_status(user, "rejected")

    def test_resubmit_clears_reason(self, user):
        user_service.advance_kyc_to(user, "rejected", reason="blurry")
        kyc = user_service.set_kyc_status(user, "submitted")
        assert kyc.rejection_reason is None

    def test_same_status_is_noop(self, user):
        user_service.get_or_create_kyc(user)
        assert user_service.set_kyc_status(user, "pending").status == "pending"

    def test_unknown_status(self, user):
        user_service.get_or_create_kyc(user)
        with pytest.raises(ValidationError):
            user_service.set_kyc_status(user, "approved")

    def test_missing_record(self, user):
        with pytest.raises(NotFoundError):
            user_service.set_kyc_status(user, "submitted")


class TestAdvanceKyc:
    def test_creates_record_and_walks_path(self, user):
        kyc = user_service.advance_kyc_to(user, "verified")
        assert kyc.status == "verified"
        assert kyc.submitted_at is not None
        assert UserKyc.query.filter_by(user_id=user.id).count() == 1

    def test_rejected_carries_reason(self, user):
        kyc = user_service.advance_kyc_to(user, "rejected", reason="blurry")
        assert kyc.status == "rejected"
        assert kyc.rejection_reason == "blurry"

    def test_already_there(self, user):
        user_service.advance_kyc_to(user, "submitted")
        assert user_service.advance_kyc_to(user, "submitted").status == "submitted"

    def test_back_to_pending_raises(self, user):
        user_service.advance_kyc_to(user, "submitted")
        with pytest.raises(ValidationError):
            user_service.advance_kyc_to(user, "pending")

    def test_unknown_target(self, user):
        with pytest.raises(ValidationError):
            user_service.advance_kyc_to(user, "approved")
