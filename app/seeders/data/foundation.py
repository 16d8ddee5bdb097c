"""
Foundation reference data — settings, permissions, roles, sectors,
feature flags, KYC rejection templates, legal agreements.

No foreign-key dependencies; everything here is production-safe.
"""

import json
from datetime import date

# ═════════════════════════════════════════════════════════════════════════════
# SETTINGS: (group, key, value, type, description)
# ═════════════════════════════════════════════════════════════════════════════

SETTINGS = [
    # System (8)
    ("system", "platform_name", "PreIPOsip", "string", "Platform display name"),
    ("system", "platform_url", "https://preiposip.com", "string", "Primary platform URL"),
    ("system", "support_email", "support@preiposip.com", "string", "Support contact email"),
    ("system", "support_phone", "+91-9876543210", "string", "Support contact phone"),
    ("system", "maintenance_mode", "false", "boolean", "Enable maintenance mode"),
    ("system", "timezone", "Asia/Kolkata", "string", "Platform timezone"),
    ("system", "currency", "INR", "string", "Platform currency"),
    ("system", "currency_symbol", "₹", "string", "Currency symbol"),
    # Investment (6)
    ("investment", "min_investment_amount", "5000", "integer", "Minimum investment amount in INR"),
    ("investment", "max_investment_amount", "1000000", "integer", "Maximum investment amount in INR"),
    ("investment", "allow_partial_exits", "true", "boolean", "Allow partial investment exits"),
    ("investment", "exit_penalty_percentage", "2.0", "float", "Early exit penalty percentage"),
    ("investment", "allocation_priority", "plan_tier", "string",
     "Allocation priority logic (plan_tier, fcfs, proportional)"),
    ("investment", "enable_auto_allocation", "true", "boolean", "Enable automatic share allocation"),
    # Bonus (6)
    ("bonus", "enable_progressive_bonus", "true", "boolean", "Enable progressive monthly bonuses"),
    ("bonus", "enable_milestone_bonus", "true", "boolean", "Enable milestone bonuses"),
    ("bonus", "enable_referral_bonus", "true", "boolean", "Enable referral bonuses"),
    ("bonus", "enable_consistency_bonus", "true", "boolean", "Enable consistency streak bonuses"),
    ("bonus", "progressive_bonus_calculation", "monthly", "string",
     "Progressive bonus frequency (monthly, quarterly)"),
    ("bonus", "bonus_credit_timing", "immediate", "string", "When to credit bonuses (immediate, month_end)"),
    # KYC (6)
    ("kyc", "kyc_required_for_investment", "true", "boolean", "Require KYC verification before investment"),
    ("kyc", "kyc_auto_approval_enabled", "false", "boolean", "Enable automatic KYC approval"),
    ("kyc", "kyc_document_expiry_days", "365", "integer", "KYC document validity in days"),
    ("kyc", "kyc_required_documents", json.dumps(["aadhaar", "pan", "bank_statement"]), "json",
     "Required KYC documents"),
    ("kyc", "kyc_min_age", "18", "integer", "Minimum age for KYC approval"),
    ("kyc", "kyc_max_age", "75", "integer", "Maximum age for KYC approval"),
    # Withdrawal (5)
    ("withdrawal", "min_withdrawal_amount", "500", "integer", "Minimum withdrawal amount in INR"),
    ("withdrawal", "max_withdrawal_per_day", "100000", "integer", "Maximum daily withdrawal limit"),
    ("withdrawal", "withdrawal_processing_fee_percentage", "1.0", "float", "Withdrawal processing fee percentage"),
    ("withdrawal", "withdrawal_auto_approval_threshold", "10000", "integer",
     "Auto-approve withdrawals below this amount"),
    ("withdrawal", "withdrawal_processing_time_hours", "24", "integer", "Expected withdrawal processing time"),
    # Payment gateway (5)
    ("payment", "razorpay_enabled", "true", "boolean", "Enable Razorpay gateway"),
    ("payment", "payment_timeout_minutes", "15", "integer", "Payment session timeout in minutes"),
    ("payment", "enable_upi", "true", "boolean", "Enable UPI payments"),
    ("payment", "enable_cards", "true", "boolean", "Enable card payments"),
    ("payment", "enable_netbanking", "true", "boolean", "Enable netbanking payments"),
    # Referral (4 + tiers)
    ("referral", "referral_bonus_amount", "500", "integer", "Referral bonus amount in INR"),
    ("referral", "referral_minimum_investment", "5000", "integer", "Minimum investment to earn referral bonus"),
    ("referral", "referral_max_level", "3", "integer", "Maximum referral levels (multi-level)"),
    ("referral", "enable_referral_system", "true", "boolean", "Enable referral system"),
    ("referral", "referral_tier_1_threshold", "5", "number", "Completed referrals needed for tier 1"),
    ("referral", "referral_tier_1_multiplier", "1.5", "number", "Bonus multiplier at tier 1"),
    ("referral", "referral_tier_2_threshold", "10", "number", "Completed referrals needed for tier 2"),
    ("referral", "referral_tier_2_multiplier", "2.0", "number", "Bonus multiplier at tier 2"),
    ("referral", "referral_tier_3_threshold", "20", "number", "Completed referrals needed for tier 3"),
    ("referral", "referral_tier_3_multiplier", "3.0", "number", "Bonus multiplier at tier 3"),
    # Lucky draw (4)
    ("lucky_draw", "enable_lucky_draws", "true", "boolean", "Enable lucky draw feature"),
    ("lucky_draw", "lucky_draw_frequency", "monthly", "string", "Lucky draw frequency (monthly, quarterly)"),
    ("lucky_draw", "lucky_draw_min_investment", "5000", "integer", "Minimum investment for lucky draw entry"),
    ("lucky_draw", "lucky_draw_entries_per_investment", "1", "integer", "Draw entries per investment"),
    # Profit sharing (3)
    ("profit_sharing", "enable_profit_sharing", "true", "boolean", "Enable profit sharing feature"),
    ("profit_sharing", "profit_share_frequency", "quarterly", "string", "Profit sharing frequency"),
    ("profit_sharing", "profit_share_min_months", "6", "integer",
     "Minimum active months for profit sharing eligibility"),
    # Notification (5)
    ("notification", "enable_email_notifications", "true", "boolean", "Enable email notifications"),
    ("notification", "enable_sms_notifications", "true", "boolean", "Enable SMS notifications"),
    ("notification", "enable_push_notifications", "true", "boolean", "Enable push notifications"),
    ("notification", "sms_provider", "msg91", "string", "SMS provider (msg91, twilio)"),
    ("notification", "email_provider", "smtp", "string", "Email provider"),
    # Security (6)
    ("security", "enable_2fa", "false", "boolean", "Require 2FA for all users"),
    ("security", "session_timeout_minutes", "60", "integer", "Session timeout in minutes"),
    ("security", "max_login_attempts", "5", "integer", "Maximum login attempts before lockout"),
    ("security", "lockout_duration_minutes", "30", "integer", "Account lockout duration"),
    ("security", "password_expiry_days", "90", "integer", "Password expiry in days (0 = never)"),
    ("security", "require_password_history", "5", "integer", "Number of previous passwords to prevent reuse"),
    # TDS (3)
    ("tds", "tds_rate_percentage", "10", "float", "TDS deduction rate percentage"),
    ("tds", "tds_threshold_amount", "10000", "integer", "Minimum amount for TDS deduction"),
    ("tds", "enable_tds_deduction", "true", "boolean", "Enable TDS deductions"),
]


# ═════════════════════════════════════════════════════════════════════════════
# PERMISSIONS: 71 "<area>.<action>" names across 19 areas
# ═════════════════════════════════════════════════════════════════════════════

_PERMISSION_AREAS = [
    ("users", ["view", "create", "edit", "delete", "suspend", "activate"]),
    ("kyc", ["view", "approve", "reject", "edit"]),
    ("investments", ["view", "create", "edit", "delete", "allocate"]),
    ("payments", ["view", "process", "refund"]),
    ("withdrawals", ["view", "approve", "reject", "process"]),
    ("plans", ["view", "create", "edit", "delete"]),
    ("products", ["view", "create", "edit", "delete"]),
    ("companies", ["view", "create", "edit", "delete"]),
    ("bulk_purchases", ["view", "create", "edit", "delete"]),
    ("bonuses", ["view", "create", "edit", "delete", "calculate"]),
    ("campaigns", ["view", "create", "edit", "delete"]),
    ("lucky_draws", ["view", "create", "execute", "edit"]),
    ("profit_shares", ["view", "create", "distribute", "edit"]),
    ("support", ["view", "respond", "assign", "close"]),
    ("content", ["view", "create", "edit", "delete", "publish"]),
    ("settings", ["view", "edit"]),
    ("reports", ["view", "generate", "export"]),
    ("audit", ["view"]),
    ("system", ["developer.tools"]),
]

PERMISSIONS = [
    (f"{area}.{action}", area)
    for area, actions in _PERMISSION_AREAS
    for action in actions
]


# ═════════════════════════════════════════════════════════════════════════════
# ROLES: permission specs accept "*", "<area>.*" and exact names;
#         "exclude" prefixes are removed after expansion
# ═════════════════════════════════════════════════════════════════════════════

ROLES = {
    "Super Admin": {
        "description": "Full platform access including developer tools",
        "permissions": "*",
    },
    "Admin": {
        "description": "Platform administration without developer tools",
        "permissions": "*",
        "exclude": ["system.developer"],
    },
    "Support Agent": {
        "description": "Handles support tickets and read-only account lookups",
        "permissions": [
            "users.view", "kyc.view", "support.*",
            "investments.view", "payments.view", "withdrawals.view",
        ],
    },
    "KYC Reviewer": {
        "description": "Reviews and decides KYC submissions",
        "permissions": ["users.view", "kyc.*"],
    },
    "User": {
        "description": "Retail investor; no admin permissions",
        "permissions": [],
    },
}


# ═════════════════════════════════════════════════════════════════════════════
# SECTORS
# ═════════════════════════════════════════════════════════════════════════════

SECTORS = [
    {"name": "Technology", "slug": "technology", "description": "Software, Hardware, IT Services"},
    {"name": "Healthcare", "slug": "healthcare", "description": "Medical, Pharmaceuticals, Biotech"},
    {"name": "Financial Services", "slug": "financial-services", "description": "Banking, FinTech, Insurance"},
    {"name": "E-commerce", "slug": "ecommerce", "description": "Online Retail, Marketplaces"},
    {"name": "Education", "slug": "education", "description": "EdTech, Online Learning, Training"},
    {"name": "Real Estate", "slug": "real-estate", "description": "PropTech, Real Estate Services"},
    {"name": "Manufacturing", "slug": "manufacturing", "description": "Industrial, Automotive, Consumer Goods"},
    {"name": "Energy", "slug": "energy", "description": "Renewable Energy, CleanTech, Power"},
    {"name": "Consumer Services", "slug": "consumer-services", "description": "Food, Hospitality, Lifestyle"},
    {"name": "Logistics", "slug": "logistics", "description": "Supply Chain, Transportation, Delivery"},
    {"name": "Agriculture", "slug": "agriculture", "description": "AgriTech, Farming, Food Production"},
    {"name": "Media & Entertainment", "slug": "media-entertainment", "description": "Content, Gaming, Streaming"},
    {"name": "Telecommunications", "slug": "telecommunications", "description": "Telecom, Networking, Communication"},
    {"name": "Travel & Tourism", "slug": "travel-tourism", "description": "Hospitality, Travel Tech, Tourism"},
    {"name": "Others", "slug": "others", "description": "Miscellaneous sectors"},
]


# ═════════════════════════════════════════════════════════════════════════════
# FEATURE FLAGS: (key, name, description); all on unless listed in _OFF
# ═════════════════════════════════════════════════════════════════════════════

_FLAGS = [
    ("enable_user_registration", "Enable User Registration", "Allow new user registrations"),
    ("enable_user_login", "Enable User Login", "Allow user login"),
    ("enable_investment", "Enable Investment", "Allow new investments"),
    ("enable_withdrawal", "Enable Withdrawal", "Allow withdrawal requests"),
    ("enable_kyc_submission", "Enable KYC Submission", "Allow KYC document submission"),
    ("enable_referral_system", "Enable Referral System", "Enable referral functionality"),
    ("enable_lucky_draws", "Enable Lucky Draws", "Enable lucky draw participation"),
    ("enable_profit_sharing", "Enable Profit Sharing", "Enable profit sharing distributions"),
    ("enable_bonuses", "Enable Bonuses", "Enable bonus calculations"),
    ("enable_support_tickets", "Enable Support Tickets", "Allow support ticket creation"),
    ("enable_live_chat", "Enable Live Chat", "Enable live chat support"),
    ("enable_company_portal", "Enable Company Portal", "Allow company user access"),
    ("enable_blog", "Enable Blog", "Display blog posts"),
    ("enable_promotional_campaigns", "Enable Promotional Campaigns", "Enable promotional campaigns"),
    ("enable_mobile_app", "Enable Mobile App", "Enable mobile app API access"),
    ("enable_notifications", "Enable Notifications", "Send notifications to users"),
    ("enable_email_verification", "Enable Email Verification", "Require email verification"),
    ("enable_mobile_verification", "Enable Mobile Verification", "Require mobile verification"),
    ("enable_2fa", "Enable 2FA", "Enable two-factor authentication"),
    ("maintenance_mode", "Maintenance Mode", "Enable maintenance mode"),
]
_OFF = {"enable_2fa", "maintenance_mode"}

FEATURE_FLAGS = [
    {
        "key": key, "name": name, "description": description,
        "is_active": key not in _OFF, "is_enabled": key not in _OFF,
    }
    for key, name, description in _FLAGS
]


# ═════════════════════════════════════════════════════════════════════════════
# KYC REJECTION TEMPLATES
# ═════════════════════════════════════════════════════════════════════════════

KYC_REJECTION_TEMPLATES = [
    {"name": "blurred_document", "title": "Blurred Document", "category": "document_quality",
     "reason": "The submitted document is blurred or unclear. Please upload a clear, high-resolution image.",
     "message": "Your document could not be verified due to poor image quality."},
    {"name": "incomplete_document", "title": "Incomplete Document", "category": "document_quality",
     "reason": "The document appears to be incomplete or cut off. Please upload the complete document.",
     "message": "Please provide the complete document without any parts cut off."},
    {"name": "expired_document", "title": "Expired Document", "category": "document_validity",
     "reason": "The submitted document has expired. Please upload a valid, unexpired document.",
     "message": "Please upload an unexpired document."},
    {"name": "name_mismatch", "title": "Name Mismatch", "category": "identity_mismatch",
     "reason": "The name on the document does not match your registered name. "
               "Please ensure all documents have consistent information.",
     "message": "Name mismatch detected across documents."},
    {"name": "address_mismatch", "title": "Address Mismatch", "category": "identity_mismatch",
     "reason": "The address on the document does not match your registered address. "
               "Please submit documents with matching address details.",
     "message": "Address mismatch detected across documents."},
    {"name": "invalid_document_type", "title": "Invalid Document Type", "category": "document_type",
     "reason": "The submitted document type is not accepted. "
               "Please upload a valid government-issued ID (Aadhaar, PAN, Passport, etc.).",
     "message": "This document type is not accepted for KYC verification."},
    {"name": "not_readable", "title": "Document Not Readable", "category": "document_quality",
     "reason": "The text on the document is not readable. Please upload a clearer image with visible text.",
     "message": "Document text is not readable."},
    {"name": "minor_age", "title": "Minor Age", "category": "eligibility",
     "reason": "Your age is below the minimum requirement of 18 years. "
               "Unfortunately, we cannot process your KYC at this time.",
     "message": "Minimum age requirement not met."},
    {"name": "bank_details_mismatch", "title": "Bank Details Mismatch", "category": "financial_mismatch",
     "reason": "The bank account details do not match your KYC information. Please verify and resubmit.",
     "message": "Bank account information does not match KYC details."},
    {"name": "suspected_fraud", "title": "Suspected Fraud", "category": "security",
     "reason": "We detected potential discrepancies in your submission. "
               "Please contact support for further assistance.",
     "message": "Verification could not be completed. Please contact support."},
]


# ═════════════════════════════════════════════════════════════════════════════
# LEGAL AGREEMENTS: keyed by type
# ═════════════════════════════════════════════════════════════════════════════

AGREEMENTS_EFFECTIVE = date(2026, 1, 1)

LEGAL_AGREEMENTS = [
    {"type": "terms_of_service", "title": "Terms and Conditions", "require_signature": True,
     "content": "<h1>Terms and Conditions</h1>"
                "<p>Please read these terms and conditions carefully before using our platform...</p>"},
    {"type": "privacy_policy", "title": "Privacy Policy", "require_signature": True,
     "content": "<h1>Privacy Policy</h1>"
                "<p>This Privacy Policy describes how we collect, use, and protect your personal information...</p>"},
    {"type": "risk_disclosure", "title": "Risk Disclosure", "require_signature": True,
     "content": "<h1>Risk Disclosure Statement</h1>"
                "<p>Investments in Pre-IPO companies carry significant risks...</p>"},
    {"type": "refund_policy", "title": "Refund Policy", "require_signature": False,
     "content": "<h1>Refund Policy</h1><p>This policy outlines the terms and conditions for refunds...</p>"},
    {"type": "cookie_policy", "title": "Cookie Policy", "require_signature": False,
     "content": "<h1>Cookie Policy</h1><p>We use cookies to improve your experience on our platform...</p>"},
    {"type": "investment_disclaimer", "title": "Investment Disclaimer", "require_signature": True,
     "content": "<h1>SEBI Compliance</h1>"
                "<p>This platform operates in accordance with SEBI regulations...</p>"},
]
