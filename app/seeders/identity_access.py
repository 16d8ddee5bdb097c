"""
Identity & access seeder — admin accounts, test investors, company
representatives, and everything hanging off a user: role, profile, KYC
record, settings and wallet. Also writes the admin-ledger genesis pair.

Admins and the genesis pair are always seeded. Test investors, company
representatives and their wallets only when test data is allowed.
"""

import logging

from flask import current_app

from app.models import db
from app.models.auth import User, UserProfile, UserSetting
from app.models.base import utcnow
from app.models.investment import Wallet
from app.models.ledger import AdminLedgerEntry
from app.seeders.data.identity import (
    ADMINS,
    CITIES,
    GENESIS_AMOUNT_PAISE,
    GENESIS_MARKER,
    INVESTOR_ROLE,
    NAME_STRIP,
    TEST_USERS,
    USER_SETTINGS,
    WALLET_BALANCES_PAISE,
)
from app.services import user_service
from app.services.helpers.upsert import find_or_create, upsert
from app.utils.crypto import hash_password

logger = logging.getLogger(__name__)

NAME = "identity_access"
PROD_SAFE = True


def seed_password_hash():
    """Hash SEED_DEFAULT_PASSWORD once per run; every seeded user shares it."""
    return hash_password(
        current_app.config["SEED_DEFAULT_PASSWORD"],
        rounds=current_app.config["SEED_BCRYPT_ROUNDS"],
    )


def upsert_user(row, password_hash, stats, **extra):
    """Find a user by username (falling back to email) and create or update it.

    The password is only set on create so a changed password survives a
    re-run.
    """
    user = (
        User.query.filter_by(username=row["username"]).first()
        or User.query.filter_by(email=row["email"]).first()
    )
    values = {
        "username": row["username"],
        "email": row["email"],
        "mobile": row.get("mobile"),
        "referral_code": row.get("referral_code"),
        **extra,
    }
    if user is None:
        user = User(password_hash=password_hash, **{"email_verified_at": utcnow(), **values})
        db.session.add(user)
        db.session.flush()
        stats.record("users", True)
        return user

    for key, val in values.items():
        setattr(user, key, val)
    db.session.flush()
    stats.record("users", False)
    return user


def _first_name(username):
    base = username
    for fragment in NAME_STRIP:
        base = base.replace(fragment, "")
    if base and not base.isdigit():
        return base.capitalize()
    return username.rstrip("0123456789").capitalize()


def seed_profile(user, index, stats, last_name="User"):
    city, state, pincode = CITIES[index % len(CITIES)]
    _, created = upsert(
        UserProfile, {"user_id": user.id},
        {
            "first_name": _first_name(user.username),
            "last_name": last_name,
            "city": city,
            "state": state,
            "pincode": pincode,
            "country": "India",
        },
    )
    stats.record("user_profiles", created)


def seed_user_settings(user, stats):
    # find_or_create: a user's own preference changes survive re-runs
    for key, value in USER_SETTINGS.items():
        _, created = find_or_create(UserSetting, {"user_id": user.id, "key": key}, {"value": value})
        stats.record("user_settings", created)


def seed_kyc(user, status, index, stats):
    """Create the KYC record and walk it to ``status``.

    An existing record is left alone; a reviewer may have moved it since.
    """
    kyc, created = user_service.get_or_create_kyc(
        user,
        pan_number=f"TESTP{index:04d}K",
        aadhaar_number=f"{900000000000 + index}",
        bank_account=f"50100{index:07d}",
        bank_ifsc="HDFC0000001",
    )
    stats.record("user_kyc", created)
    if created and status != "pending":
        user_service.advance_kyc_to(user, status)
    return kyc


def seed_admins(password_hash, stats):
    admins = []
    for i, row in enumerate(ADMINS):
        user = upsert_user(row, password_hash, stats, status="active")
        if user_service.assign_role(user, row["role"]):
            stats.record("user_roles", True)
        seed_profile(user, i, stats, last_name="Admin")
        seed_user_settings(user, stats)
        admins.append(user)
    return admins


def seed_test_users(password_hash, stats):
    users = {}
    for i, row in enumerate(TEST_USERS, start=1):
        user = upsert_user(row, password_hash, stats, status="active")
        if user_service.assign_role(user, INVESTOR_ROLE):
            stats.record("user_roles", True)
        seed_profile(user, i, stats)
        seed_kyc(user, row["kyc_status"], i, stats)
        seed_user_settings(user, stats)
        users[row["referral_code"]] = user

    # Referrers are resolved once every user exists
    for row in TEST_USERS:
        code = row.get("referred_by")
        if code:
            users[row["referral_code"]].referred_by_id = users[code].id
    db.session.flush()
    return users


def seed_wallets(stats):
    """Opening wallets for the test investors.

    Balances are only set on create; later seeders move money through
    transactions.
    """
    for email, balance in WALLET_BALANCES_PAISE.items():
        user = User.query.filter_by(email=email).first()
        if user is None:
            continue
        _, created = find_or_create(
            Wallet, {"user_id": user.id},
            {"balance_paise": balance, "locked_balance_paise": 0, "is_frozen": False},
        )
        stats.record("wallets", created)


def seed_genesis_pair(stats):
    """Opening wallet-liability pair in the admin ledger.

    Skipped if any entry already carries the GENESIS marker, so it is
    written at most once per database. Both entries record the wallet
    balances seeded so far and the buffer the opening amount leaves over
    them.
    """
    existing = AdminLedgerEntry.query.filter(
        AdminLedgerEntry.description.contains(GENESIS_MARKER)
    ).first()
    if existing is not None:
        logger.info("Genesis pair already present (entry %s)", existing.id, extra={"seeder": NAME})
        return False

    wallets_paise = db.session.query(db.func.coalesce(db.func.sum(Wallet.balance_paise), 0)).scalar()
    metadata = {
        "source": NAME,
        "total_test_wallets_paise": int(wallets_paise),
        "buffer_paise": GENESIS_AMOUNT_PAISE - int(wallets_paise),
    }
    now = utcnow()
    common = {
        "entry_date": now,
        "category": "wallet_liability",
        "subcategory": "genesis",
        "amount_paise": GENESIS_AMOUNT_PAISE,
        "reference_type": "system",
    }
    debit = AdminLedgerEntry(
        entry_type="debit",
        entry_metadata={**metadata, "type": "genesis"},
        balance_after_paise=GENESIS_AMOUNT_PAISE,
        description=f"{GENESIS_MARKER}: opening platform capital",
        **common,
    )
    credit = AdminLedgerEntry(
        entry_type="credit",
        entry_metadata={**metadata, "type": "genesis_offset"},
        balance_after_paise=0,
        description=f"{GENESIS_MARKER}: opening user wallet liability",
        **common,
    )
    db.session.add_all([debit, credit])
    db.session.flush()
    debit.entry_pair_id = credit.id
    credit.entry_pair_id = debit.id
    db.session.flush()
    stats.record("admin_ledger_entries", True)
    stats.record("admin_ledger_entries", True)
    return True


def run(stats, allow_test_data=False):
    password_hash = seed_password_hash()
    seed_admins(password_hash, stats)
    if allow_test_data:
        seed_test_users(password_hash, stats)
        seed_wallets(stats)
    else:
        logger.info("Test users skipped (test data not allowed)", extra={"seeder": NAME})
    seed_genesis_pair(stats)
