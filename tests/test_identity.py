"""
Identity & access seeder tests — admins, test investors, KYC, wallets,
referral links and the admin-ledger genesis pair.
"""

import pytest
from werkzeug.security import generate_password_hash

from app.models import db
from app.models.auth import User, UserKyc, UserSetting
from app.models.investment import Wallet
from app.models.ledger import AdminLedgerEntry
from app.seeders import run_seeder
from app.seeders.identity_access import seed_genesis_pair
from app.services.helpers.upsert import UpsertStats
from app.utils.crypto import hash_password, verify_password


@pytest.fixture()
def seeded():
    run_seeder("foundation")
    return run_seeder("identity_access", allow_test_data=True)


class TestAdmins:
    def test_admin_roles(self, seeded):
        expected = {
            "superadmin": "Super Admin",
            "supportmanager": "Support Agent",
            "kycreviewer": "KYC Reviewer",
        }
        for username, role in expected.items():
            user = User.query.filter_by(username=username).first()
            assert user.role_names == [role]

    def test_password_is_bcrypt_of_default(self, app, seeded):
        admin = User.query.filter_by(username="superadmin").first()
        assert admin.password_hash.startswith("$2b$")
        assert verify_password(app.config["SEED_DEFAULT_PASSWORD"], admin.password_hash)

    def test_changed_password_survives_rerun(self, seeded):
        admin = User.query.filter_by(username="superadmin").first()
        admin.password_hash = "custom"
        db.session.commit()
        run_seeder("identity_access", allow_test_data=True)
        assert User.query.filter_by(username="superadmin").first().password_hash == "custom"

    def test_profile_and_settings(self, seeded):
        admin = User.query.filter_by(username="superadmin").first()
        assert admin.profile.first_name == "Super"
        assert admin.profile.last_name == "Admin"
        assert UserSetting.query.filter_by(user_id=admin.id).count() == 8


class TestTestUsers:
    def test_counts(self, seeded):
        assert User.query.count() == 10
        assert UserKyc.query.count() == 7

    def test_verified_investors(self, seeded):
        for n in range(1, 6):
            user = User.query.filter_by(username=f"testuser{n}").first()
            assert user.kyc_status == "verified"
            assert user.kyc.verified_at is not None
            assert user.role_names == ["User"]
            assert user.referral_code == f"USER000{n}"

    def test_company_reps_pending(self, seeded):
        for username in ("companyrep1", "companyrep2"):
            assert User.query.filter_by(username=username).first().kyc_status == "pending"

    def test_referred_by(self, seeded):
        user1 = User.query.filter_by(username="testuser1").first()
        user2 = User.query.filter_by(username="testuser2").first()
        assert User.query.filter_by(username="testuser4").first().referred_by_id == user1.id
        assert User.query.filter_by(username="testuser5").first().referred_by_id == user2.id
        assert User.query.filter_by(username="testuser3").first().referred_by_id is None

    def test_wallet_balances(self, seeded):
        balances = {
            w.user.email: w.balance_paise for w in Wallet.query.all()
        }
        assert balances == {
            "user1@test.com": 5_000_000,
            "user2@test.com": 10_000_000,
            "user3@test.com": 2_500_000,
            "user4@test.com": 0,
            "user5@test.com": 0,
        }

    def test_existing_kyc_not_overwritten(self, seeded):
        kyc = User.query.filter_by(username="companyrep1").first().kyc
        kyc.status = "submitted"
        db.session.commit()
        run_seeder("identity_access", allow_test_data=True)
        assert User.query.filter_by(username="companyrep1").first().kyc_status == "submitted"

    def test_wallet_balance_not_reset(self, seeded):
        wallet = User.query.filter_by(username="testuser1").first().wallet
        wallet.balance_paise = 1
        db.session.commit()
        run_seeder("identity_access", allow_test_data=True)
        assert User.query.filter_by(username="testuser1").first().wallet.balance_paise == 1

    def test_idempotent(self, seeded):
        stats = run_seeder("identity_access", allow_test_data=True)
        assert User.query.count() == 10
        assert Wallet.query.count() == 5
        assert stats.created.get("users", 0) == 0


class TestWithoutTestData:
    def test_only_admins(self):
        run_seeder("foundation")
        run_seeder("identity_access", allow_test_data=False)
        assert User.query.count() == 3
        assert Wallet.query.count() == 0
        assert AdminLedgerEntry.query.count() == 2


class TestGenesisPair:
    def test_pair_linked(self, seeded):
        debit = AdminLedgerEntry.query.filter_by(entry_type="debit").one()
        credit = AdminLedgerEntry.query.filter_by(entry_type="credit").one()
        assert debit.entry_pair_id == credit.id
        assert credit.entry_pair_id == debit.id
        assert debit.amount_paise == credit.amount_paise == 100_000_000
        assert debit.category == "wallet_liability"
        assert debit.subcategory == "genesis"

    def test_metadata_records_wallet_cover(self, seeded):
        debit = AdminLedgerEntry.query.filter_by(entry_type="debit").one()
        credit = AdminLedgerEntry.query.filter_by(entry_type="credit").one()
        assert debit.entry_metadata["total_test_wallets_paise"] == 17_500_000
        assert debit.entry_metadata["buffer_paise"] == 82_500_000
        assert debit.entry_metadata["type"] == "genesis"
        assert credit.entry_metadata["type"] == "genesis_offset"
        assert credit.entry_metadata["buffer_paise"] == 82_500_000

    def test_metadata_without_test_wallets(self):
        run_seeder("foundation")
        run_seeder("identity_access", allow_test_data=False)
        debit = AdminLedgerEntry.query.filter_by(entry_type="debit").one()
        assert debit.entry_metadata["total_test_wallets_paise"] == 0
        assert debit.entry_metadata["buffer_paise"] == 100_000_000

    def test_written_once(self, seeded):
        run_seeder("identity_access", allow_test_data=True)
        assert AdminLedgerEntry.query.count() == 2

    def test_skipped_when_marker_present(self):
        db.session.add(AdminLedgerEntry(
            entry_type="credit", category="wallet_liability", amount_paise=1,
            description="GENESIS imported from legacy ledger",
        ))
        db.session.flush()
        assert seed_genesis_pair(UpsertStats()) is False
        assert AdminLedgerEntry.query.count() == 1


class TestPasswordHashing:
    def test_bcrypt_round_trip(self):
        hashed = hash_password("s3cret", rounds=4)
        assert hashed.startswith("$2b$04$")
        assert verify_password("s3cret", hashed)
        assert not verify_password("wrong", hashed)

    def test_werkzeug_hash_accepted(self):
        hashed = generate_password_hash("s3cret")
        assert verify_password("s3cret", hashed)
        assert not verify_password("wrong", hashed)

    def test_empty_hash_rejected(self):
        assert verify_password("s3cret", "") is False
