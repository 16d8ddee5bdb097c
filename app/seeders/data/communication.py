"""
Communication and campaign reference data — email/SMS templates, support
canned responses, knowledge-base categories and articles, referral and promotional
campaigns, lucky draws.

Template ``variables`` list what a sender must supply; the seeder adds any
``{{placeholder}}`` found in the subject or body that the list is missing.
"""

from datetime import date
from decimal import Decimal

EMAIL_TEMPLATES = [
    {"name": "Welcome Email", "slug": "welcome_email",
     "subject": "Welcome to PreIPOsip - Start Your Investment Journey",
     "body": "<p>Hello {{user_name}},</p><p>Welcome to PreIPOsip! We are excited to have you on board.</p>"
             "<p>Get started by completing your KYC verification and exploring our Pre-IPO "
             "investment opportunities.</p>",
     "variables": ["user_name", "email", "referral_code"]},
    {"name": "KYC Approved", "slug": "kyc_approved",
     "subject": "KYC Verification Successful - Start Investing",
     "body": "<p>Hello {{user_name}},</p><p>Congratulations! Your KYC verification has been approved.</p>"
             "<p>You can now start investing in Pre-IPO companies.</p>",
     "variables": ["user_name", "kyc_verified_at"]},
    {"name": "KYC Rejected", "slug": "kyc_rejected",
     "subject": "KYC Verification - Action Required",
     "body": "<p>Hello {{user_name}},</p><p>Your KYC submission was rejected for the following reason:</p>"
             "<p>{{rejection_reason}}</p><p>Please resubmit your documents.</p>",
     "variables": ["user_name", "rejection_reason"]},
    {"name": "Payment Success", "slug": "payment_success",
     "subject": "Payment Received - ₹{{amount}}",
     "body": "<p>Hello {{user_name}},</p><p>We have received your payment of ₹{{amount}} for {{plan_name}}.</p>"
             "<p>Transaction ID: {{transaction_id}}</p>",
     "variables": ["user_name", "amount", "plan_name", "transaction_id", "payment_date"]},
    {"name": "Investment Allocation", "slug": "investment_allocation",
     "subject": "Shares Allocated - {{company_name}}",
     "body": "<p>Hello {{user_name}},</p><p>You have been allocated {{quantity}} shares of {{company_name}} "
             "worth ₹{{amount}}.</p>",
     "variables": ["user_name", "company_name", "quantity", "amount"]},
    {"name": "Withdrawal Approved", "slug": "withdrawal_approved",
     "subject": "Withdrawal Request Approved - ₹{{amount}}",
     "body": "<p>Hello {{user_name}},</p><p>Your withdrawal request of ₹{{amount}} has been approved and will "
             "be processed within 24-48 hours.</p>",
     "variables": ["user_name", "amount", "bank_account"]},
    {"name": "Bonus Credited", "slug": "bonus_credited",
     "subject": "Bonus Credited - ₹{{amount}}",
     "body": "<p>Hello {{user_name}},</p><p>A bonus of ₹{{amount}} has been credited to your wallet "
             "for {{bonus_type}}.</p>",
     "variables": ["user_name", "amount", "bonus_type"]},
    {"name": "Referral Bonus", "slug": "referral_bonus",
     "subject": "Referral Bonus Earned - ₹{{amount}}",
     "body": "<p>Hello {{user_name}},</p><p>You earned ₹{{amount}} as referral bonus for referring "
             "{{referred_user}}!</p>",
     "variables": ["user_name", "amount", "referred_user"]},
    {"name": "Lucky Draw Winner", "slug": "lucky_draw_winner",
     "subject": "Congratulations! You Won ₹{{prize_amount}}",
     "body": "<p>Hello {{user_name}},</p><p>Congratulations! You are a winner in our {{draw_name}}. "
             "You won ₹{{prize_amount}}!</p>",
     "variables": ["user_name", "draw_name", "prize_amount", "prize_rank"]},
    {"name": "Password Reset", "slug": "password_reset",
     "subject": "Reset Your Password",
     "body": "<p>Hello {{user_name}},</p><p>Click the link below to reset your password:</p>"
             "<p>{{reset_link}}</p>",
     "variables": ["user_name", "reset_link"]},
]

SMS_TEMPLATES = [
    {"name": "OTP Verification", "slug": "otp_verification",
     "body": "Your PreIPOsip OTP is {{otp}}. Valid for 10 minutes. Do not share this with anyone.",
     "variables": ["otp"]},
    {"name": "Payment Success", "slug": "payment_success",
     "body": "Payment of Rs.{{amount}} received for {{plan_name}}. Thank you for investing with PreIPOsip!",
     "variables": ["amount", "plan_name"]},
    {"name": "KYC Approved", "slug": "kyc_approved",
     "body": "Your KYC has been approved! You can now start investing in Pre-IPO companies. - PreIPOsip",
     "variables": []},
    {"name": "Withdrawal Approved", "slug": "withdrawal_approved",
     "body": "Withdrawal of Rs.{{amount}} approved. Funds will be transferred within 24-48 hours. - PreIPOsip",
     "variables": ["amount"]},
    {"name": "Bonus Credited", "slug": "bonus_credited",
     "body": "Bonus of Rs.{{amount}} credited to your wallet for {{bonus_type}}. "
             "Check your account now! - PreIPOsip",
     "variables": ["amount", "bonus_type"]},
]

CANNED_RESPONSES = [
    ("Welcome Message", "Hello! Welcome to PreIPOsip support. How can I help you today?"),
    ("KYC Under Review",
     "Your KYC documents are currently under review. You will receive an update within 24-48 hours."),
    ("Payment Processing",
     "Your payment is being processed. You will receive a confirmation email once it is completed."),
    ("Withdrawal Timeline", "Withdrawal requests are typically processed within 24-48 business hours."),
    ("Investment Allocation",
     "Share allocations are done on a priority basis according to your plan tier. "
     "You will be notified once shares are allocated."),
    ("Bonus Eligibility",
     "Bonuses are calculated based on your investment plan and tenure. "
     "Please refer to your plan details for more information."),
    ("Referral Program",
     "You can earn referral bonuses by sharing your unique referral code. "
     "Your referee must complete KYC and invest at least ₹5,000."),
    ("Account Security",
     "For account security, we recommend enabling two-factor authentication and using a strong password."),
    ("Technical Issue",
     "I apologize for the technical issue you are facing. "
     "Our team is looking into this and will resolve it shortly."),
    ("Escalation",
     "I am escalating your query to our senior support team. You will receive a response within 4 hours."),
]

KB_CATEGORIES = [
    {"name": "Getting Started", "slug": "getting-started", "description": "Basic guides for new users"},
    {"name": "KYC Verification", "slug": "kyc-verification", "description": "KYC submission and verification help"},
    {"name": "Investment & Plans", "slug": "investment-plans",
     "description": "Understanding investment plans and SIPs"},
    {"name": "Payments & Wallet", "slug": "payments-wallet", "description": "Payment methods and wallet management"},
    {"name": "Withdrawals", "slug": "withdrawals", "description": "Withdrawal process and timelines"},
]

# ``category`` is a KB_CATEGORIES slug
KB_ARTICLES = [
    {"category": "getting-started", "title": "What is PreIPOsip?", "slug": "what-is-preiposip",
     "summary": "Overview of PreIPOsip and what we offer.", "last_updated": date(2025, 11, 20),
     "content": "PreIPOsip helps retail investors take part in pre-IPO opportunities through SIP-style "
                "recurring investments: curated deals, compliance-first onboarding and transparent fees."},
    {"category": "getting-started", "title": "How to create an account", "slug": "how-to-create-an-account",
     "summary": "Step-by-step sign up guide.", "last_updated": date(2025, 11, 25),
     "content": "Sign up with your email and mobile number, verify both with an OTP, then complete KYC "
                "with your PAN and Aadhaar to start investing."},
    {"category": "kyc-verification", "title": "What documents are required for KYC",
     "slug": "what-documents-are-required-for-kyc",
     "summary": "List of acceptable documents.", "last_updated": date(2025, 11, 29),
     "content": "We need a government-issued ID (PAN and Aadhaar), proof of address and a clear selfie. "
                "Upload high-resolution scans; avoid photocopies and filtered photos."},
    {"category": "kyc-verification", "title": "How long does KYC take?", "slug": "how-long-does-kyc-take",
     "summary": "Typical verification timeframes.", "last_updated": date(2025, 11, 18),
     "content": "Automated checks usually finish within minutes; manual reviews can take 24 to 72 hours, "
                "longer around public holidays."},
    {"category": "investment-plans", "title": "Start a SIP for pre-IPO investments",
     "slug": "start-a-sip-for-pre-ipo-investments",
     "summary": "Setting up recurring investments.", "last_updated": date(2025, 11, 13),
     "content": "Pick a plan, choose a monthly amount and pay the first instalment. Contributions fund "
                "allocations in curated deals; you can pause or stop the SIP at any time."},
    {"category": "investment-plans", "title": "Lock-up periods & transfer restrictions",
     "slug": "lock-up-periods-transfer-restrictions",
     "summary": "Understanding lock-ups after listing.", "last_updated": date(2025, 11, 6),
     "content": "Many pre-IPO allocations carry a lock-up during which shares cannot be sold. Plan for "
                "the lock-up when sizing an investment."},
    {"category": "payments-wallet", "title": "Deposit via UPI / instant pay", "slug": "deposit-via-upi-instant-pay",
     "summary": "Using UPI and instant payment rails.", "last_updated": date(2025, 11, 22),
     "content": "UPI deposits reach your wallet instantly. Link your UPI ID once; SIP instalments can "
                "use UPI auto-debit where your bank supports it."},
    {"category": "payments-wallet", "title": "Failed or pending deposit", "slug": "failed-or-pending-deposit",
     "summary": "Troubleshooting failed deposits.", "last_updated": date(2025, 11, 26),
     "content": "Deposits fail on a wrong reference, a bank reversal or a limit. Share the transaction ID "
                "and a bank statement with support to reconcile it."},
    {"category": "withdrawals", "title": "Withdraw funds to your bank", "slug": "withdraw-funds-to-your-bank",
     "summary": "Withdrawal limits and steps.", "last_updated": date(2025, 11, 23),
     "content": "Request a withdrawal from the Wallet page; it is processed in 1 to 3 business days to "
                "your verified bank account."},
    {"category": "withdrawals", "title": "Add or change bank account", "slug": "add-or-change-bank-account",
     "summary": "How to link and verify bank accounts.", "last_updated": date(2025, 10, 30),
     "content": "Add a bank account with its IFSC code and complete the penny-drop verification before "
                "your first withdrawal."},
]


# ═════════════════════════════════════════════════════════════════════════════
# CAMPAIGNS
# ═════════════════════════════════════════════════════════════════════════════

REFERRAL_CAMPAIGNS = [
    {"code": "STANDARD_REFERRAL", "name": "Standard Referral Program",
     "description": "Earn ₹500 for each successful referral who completes KYC and invests ₹5,000 or more.",
     "bonus_amount": Decimal("500"), "min_investment_required": Decimal("5000"),
     "start_date": date(2025, 7, 1), "end_date": date(2027, 1, 1), "is_active": True,
     "max_redemptions": None},
    {"code": "PREMIUM_REFERRAL", "name": "Premium Referral Campaign",
     "description": "Earn ₹1,000 for each referral who invests ₹25,000 or more in Plan C.",
     "bonus_amount": Decimal("1000"), "min_investment_required": Decimal("25000"),
     "start_date": date(2025, 12, 1), "end_date": date(2026, 4, 1), "is_active": True,
     "max_redemptions": 1000},
]

PROMO_CAMPAIGNS = [
    {"code": "NEWYEAR2026", "name": "New Year Investment Offer",
     "description": "Get 10% discount on your first investment in any plan.",
     "discount_type": "percentage", "discount_value": Decimal("10"),
     "min_investment": Decimal("5000"), "max_discount_amount": Decimal("2500"),
     "start_date": date(2026, 1, 1), "end_date": date(2026, 3, 1), "is_active": True,
     "max_redemptions": 500,
     "terms": ["Valid for first investment only", "Cannot be combined with other offers"],
     "features": ["10% instant discount", "No upper limit", "Auto-applied"]},
    {"code": "FIRST500", "name": "First Investment Cashback",
     "description": "Get ₹500 cashback on your first investment of ₹10,000 or more.",
     "discount_type": "fixed_amount", "discount_value": Decimal("500"),
     "min_investment": Decimal("10000"), "max_discount_amount": Decimal("500"),
     "start_date": date(2025, 12, 1), "end_date": date(2026, 7, 1), "is_active": True,
     "max_redemptions": None,
     "terms": ["Valid for investments ₹10,000+", "Credited within 24 hours"],
     "features": ["₹500 instant cashback", "One-time offer", "No code required"]},
    {"code": "FESTIVAL2026", "name": "Festival Bonus Campaign",
     "description": "Special bonus on investments during festival season.",
     "discount_type": "percentage", "discount_value": Decimal("5"),
     "min_investment": Decimal("5000"), "max_discount_amount": Decimal("1000"),
     "start_date": date(2026, 10, 1), "end_date": date(2026, 11, 1), "is_active": False,
     "max_redemptions": 1000,
     "terms": ["Limited period offer", "Valid on all plans"],
     "features": ["5% bonus", "Festival special", "Auto-applied"]},
]

LUCKY_DRAWS = [
    {"code": "MONTHLY_JAN2026", "name": "Monthly Lucky Draw - January 2026",
     "description": "Monthly lucky draw for all active investors",
     "prize_pool": Decimal("50000"), "min_investment_required": Decimal("5000"),
     "start_date": date(2026, 1, 1), "end_date": date(2026, 1, 31), "draw_date": date(2026, 2, 3),
     "is_active": True, "status": "active",
     "prize_structure": [
         {"rank": 1, "amount": 25000, "quantity": 1},
         {"rank": 2, "amount": 15000, "quantity": 1},
         {"rank": 3, "amount": 10000, "quantity": 1},
     ],
     "entry_rules": {"min_investment": 5000, "min_active_months": 1, "entries_per_investment": 1}},
]
