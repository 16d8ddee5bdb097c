"""
Identity reference data — admin accounts, test investors, company
representatives, their wallets and default user settings.

Passwords are not stored here; the seeder hashes SEED_DEFAULT_PASSWORD.
"""

ADMINS = [
    {"email": "admin@preiposip.com", "username": "superadmin", "mobile": "+919876543210",
     "referral_code": "ADMIN001", "role": "Super Admin"},
    {"email": "support@preiposip.com", "username": "supportmanager", "mobile": "+919876543211",
     "referral_code": "SUPPORT01", "role": "Support Agent"},
    {"email": "kyc@preiposip.com", "username": "kycreviewer", "mobile": "+919876543212",
     "referral_code": "KYCREV01", "role": "KYC Reviewer"},
]

# referred_by is a referral code, resolved after every user exists
TEST_USERS = [
    {"email": "user1@test.com", "username": "testuser1", "mobile": "+919876540001",
     "referral_code": "USER0001", "kyc_status": "verified"},
    {"email": "user2@test.com", "username": "testuser2", "mobile": "+919876540002",
     "referral_code": "USER0002", "kyc_status": "verified"},
    {"email": "user3@test.com", "username": "testuser3", "mobile": "+919876540003",
     "referral_code": "USER0003", "kyc_status": "verified"},
    {"email": "user4@test.com", "username": "testuser4", "mobile": "+919876540004",
     "referral_code": "USER0004", "kyc_status": "verified", "referred_by": "USER0001"},
    {"email": "user5@test.com", "username": "testuser5", "mobile": "+919876540005",
     "referral_code": "USER0005", "kyc_status": "verified", "referred_by": "USER0002"},
    {"email": "company1@example.com", "username": "companyrep1", "mobile": "+919876550001",
     "referral_code": "COMP0001", "kyc_status": "pending"},
    {"email": "company2@example.com", "username": "companyrep2", "mobile": "+919876550002",
     "referral_code": "COMP0002", "kyc_status": "pending"},
]

INVESTOR_ROLE = "User"

# Opening wallet balances in paise, keyed by email
WALLET_BALANCES_PAISE = {
    "user1@test.com": 5_000_000,    # ₹50,000
    "user2@test.com": 10_000_000,   # ₹1,00,000
    "user3@test.com": 2_500_000,    # ₹25,000
    "user4@test.com": 0,
    "user5@test.com": 0,
}

# Username fragments stripped when deriving a profile first name
NAME_STRIP = ("admin", "manager", "reviewer", "testuser", "companyrep")

CITIES = [
    ("Mumbai", "Maharashtra", "400001"),
    ("Delhi", "Delhi", "110001"),
    ("Bangalore", "Karnataka", "560001"),
    ("Pune", "Maharashtra", "411001"),
    ("Hyderabad", "Telangana", "500001"),
]

USER_SETTINGS = {
    "theme": "light",
    "language": "en",
    "timezone": "Asia/Kolkata",
    "email_notifications": "true",
    "sms_notifications": "true",
    "push_notifications": "true",
    "marketing_emails": "true",
    "two_factor_enabled": "false",
}

# ₹10,00,000 opening liability: covers the test wallets plus a buffer
GENESIS_AMOUNT_PAISE = 100_000_000
GENESIS_MARKER = "GENESIS"
