"""
Synthetic users, one per account lifecycle state.

Each user is created as ``{state}_1`` / ``{state}_1@test.com`` so QA can log
in as "a user in state X" without hunting for one.
"""

LIFECYCLE_STATES = [
    {
        "state": "new_signup",
        "status": "active",
        "kyc": None,
        "email_verified": False,
    },
    {
        "state": "kyc_pending",
        "status": "active",
        "kyc": "submitted",
        "email_verified": True,
    },
    {
        "state": "kyc_rejected",
        "status": "active",
        "kyc": "rejected",
        "rejection_reason": "PAN card image is blurred or unreadable. Please upload a clear scan.",
        "email_verified": True,
    },
    {
        "state": "kyc_verified",
        "status": "active",
        "kyc": "verified",
        "wallet_paise": 0,
        "email_verified": True,
    },
    {
        "state": "active_investor",
        "status": "active",
        "kyc": "verified",
        "wallet_paise": 2_000_000,
        "subscription": {"plan": "plan-a-starter", "status": "active"},
        "email_verified": True,
    },
    {
        "state": "paused_subscriber",
        "status": "active",
        "kyc": "verified",
        "wallet_paise": 1_000_000,
        "subscription": {"plan": "plan-b-growth", "status": "paused"},
        "email_verified": True,
    },
    {
        "state": "suspended",
        "status": "suspended",
        "kyc": "verified",
        "wallet_paise": 500_000,
        "wallet_frozen": True,
        "email_verified": True,
    },
]
