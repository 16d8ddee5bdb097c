"""
Test investment flows: which test user subscribes to which plan, which
product their payments buy, and how many monthly payments they have made.
"""

from decimal import Decimal

INVESTMENT_FLOWS = [
    {"email": "user1@test.com", "plan": "plan-a-starter", "product": "techcorp-india-shares",
     "payments": 2, "amount": Decimal("5000")},
    {"email": "user2@test.com", "plan": "plan-b-growth", "product": "financehub-technologies-shares",
     "payments": 2, "amount": Decimal("10000")},
    {"email": "user3@test.com", "plan": "plan-c-premium", "product": "greenenergy-innovations-shares",
     "payments": 2, "amount": Decimal("25000")},
    {"email": "user4@test.com", "plan": "plan-a-starter", "product": "healthplus-solutions-shares",
     "payments": 1, "amount": Decimal("5000")},
    {"email": "user5@test.com", "plan": "plan-b-growth", "product": "edutech-academy-shares",
     "payments": 1, "amount": Decimal("10000")},
]

# (referrer email, referred email, bonus, completed days ago)
REFERRALS = [
    ("user1@test.com", "user4@test.com", Decimal("500"), 10),
    ("user2@test.com", "user5@test.com", Decimal("500"), 8),
]

REFERRAL_CAMPAIGN_CODE = "STANDARD_REFERRAL"
