"""
Auth Models — permissions, roles, users, profiles, KYC records, user settings.

Roles are platform-wide. A user's KYC status lives on
``UserKyc`` only; ``User.kyc_status`` is a read-through convenience.
"""

from datetime import datetime, timezone

from app.models import db
from app.models.base import TimestampMixin


# ═══════════════════════════════════════════════════════════════
# 1. PERMISSIONS
# ═══════════════════════════════════════════════════════════════
class Permission(db.Model):
    __tablename__ = "permissions"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), unique=True, nullable=False)  # e.g. "kyc.approve"
    category = db.Column(db.String(50), nullable=False)  # e.g. "kyc"
    created_at = db.Column(db.DateTime, default=lambda: datetime.now(timezone.utc))

    role_permissions = db.relationship("RolePermission", back_populates="permission", lazy="dynamic")


# ═══════════════════════════════════════════════════════════════
# 2. ROLES
# ═══════════════════════════════════════════════════════════════
class Role(db.Model):
    __tablename__ = "roles"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), unique=True, nullable=False)  # e.g. "Super Admin"
    description = db.Column(db.Text)
    is_system = db.Column(db.Boolean, default=True)
    created_at = db.Column(db.DateTime, default=lambda: datetime.now(timezone.utc))

    role_permissions = db.relationship(
        "RolePermission", back_populates="role", lazy="dynamic", cascade="all, delete-orphan"
    )
    user_roles = db.relationship("UserRole", back_populates="role", lazy="dynamic")

    @property
    def permission_names(self):
        return sorted(rp.permission.name for rp in self.role_permissions.all())


class RolePermission(db.Model):
    __tablename__ = "role_permissions"

    id = db.Column(db.Integer, primary_key=True)
    role_id = db.Column(db.Integer, db.ForeignKey("roles.id", ondelete="CASCADE"), nullable=False)
    permission_id = db.Column(
        db.Integer, db.ForeignKey("permissions.id", ondelete="CASCADE"), nullable=False
    )

    __table_args__ = (
        db.UniqueConstraint("role_id", "permission_id", name="uq_role_permission"),
    )

    role = db.relationship("Role", back_populates="role_permissions")
    permission = db.relationship("Permission", back_populates="role_permissions")


class UserRole(db.Model):
    __tablename__ = "user_roles"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    role_id = db.Column(db.Integer, db.ForeignKey("roles.id", ondelete="CASCADE"), nullable=False)
    assigned_at = db.Column(db.DateTime, default=lambda: datetime.now(timezone.utc))

    __table_args__ = (
        db.UniqueConstraint("user_id", "role_id", name="uq_user_role"),
    )

    user = db.relationship("User", back_populates="user_roles")
    role = db.relationship("Role", back_populates="user_roles")


# ═══════════════════════════════════════════════════════════════
# 3. USERS
# ═══════════════════════════════════════════════════════════════
class User(TimestampMixin, db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(100), unique=True, nullable=False)
    email = db.Column(db.String(200), unique=True, nullable=False)
    mobile = db.Column(db.String(20))
    password_hash = db.Column(db.String(256), nullable=False)
    status = db.Column(db.String(20), default="active")  # active, suspended, blocked
    referral_code = db.Column(db.String(20), unique=True)
    referred_by_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="SET NULL"))
    referral_multiplier = db.Column(db.Numeric(4, 2), default=1)
    lifecycle_state = db.Column(db.String(40))  # synthetic test users only
    email_verified_at = db.Column(db.DateTime)
    mobile_verified_at = db.Column(db.DateTime)

    user_roles = db.relationship(
        "UserRole", back_populates="user", lazy="dynamic", cascade="all, delete-orphan"
    )
    referred_by = db.relationship("User", remote_side=[id])
    profile = db.relationship(
        "UserProfile", back_populates="user", uselist=False, cascade="all, delete-orphan"
    )
    kyc = db.relationship("UserKyc", back_populates="user", uselist=False, cascade="all, delete-orphan")
    wallet = db.relationship("Wallet", back_populates="user", uselist=False, cascade="all, delete-orphan")

    @property
    def role_names(self):
        """List of role names for this user."""
        return [ur.role.name for ur in self.user_roles.all()]

    @property
    def kyc_status(self):
        return self.kyc.status if self.kyc else None

    def to_dict(self, include_roles=False):
        d = {
            "id": self.id,
            "username": self.username,
            "email": self.email,
            "status": self.status,
            "referral_code": self.referral_code,
            "kyc_status": self.kyc_status,
            "lifecycle_state": self.lifecycle_state,
        }
        if include_roles:
            d["roles"] = self.role_names
        return d


class UserProfile(TimestampMixin, db.Model):
    __tablename__ = "user_profiles"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False
    )
    first_name = db.Column(db.String(100))
    last_name = db.Column(db.String(100))
    dob = db.Column(db.Date)
    gender = db.Column(db.String(10))
    address_line_1 = db.Column(db.String(255))
    address_line_2 = db.Column(db.String(255))
    city = db.Column(db.String(100))
    state = db.Column(db.String(100))
    pincode = db.Column(db.String(10))
    country = db.Column(db.String(100), default="India")

    user = db.relationship("User", back_populates="profile")


# ═══════════════════════════════════════════════════════════════
# 4. KYC
# ═══════════════════════════════════════════════════════════════
class UserKyc(TimestampMixin, db.Model):
    __tablename__ = "user_kyc"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False
    )
    status = db.Column(db.String(20), nullable=False, default="pending")  # pending, submitted, verified, rejected
    pan_number = db.Column(db.String(10))
    aadhaar_number = db.Column(db.String(12))
    bank_account = db.Column(db.String(30))
    bank_ifsc = db.Column(db.String(11))
    rejection_reason = db.Column(db.Text)
    submitted_at = db.Column(db.DateTime)
    verified_at = db.Column(db.DateTime)

    user = db.relationship("User", back_populates="kyc")


class UserSetting(db.Model):
    __tablename__ = "user_settings"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    key = db.Column(db.String(100), nullable=False)
    value = db.Column(db.String(255))

    __table_args__ = (
        db.UniqueConstraint("user_id", "key", name="uq_user_setting_key"),
    )
