"""
Catalog reference data — five Pre-IPO companies, one equity product each,
deal-page detail rows and the opening share inventory.

Inventory:
  TechCorp     10,000 @ ₹500   (5,000 allocated, 5,000 reserved)
  HealthPlus    5,000 @ ₹800   (2,000 allocated, 3,000 reserved)
  FinanceHub    8,000 @ ₹600   (4,000 allocated, 4,000 reserved)
  EduTech       3,000 @ ₹1000  (1,000 allocated, 2,000 reserved)
  GreenEnergy   6,000 @ ₹750   (3,000 allocated, 3,000 reserved)
"""

from decimal import Decimal

COMPANIES = [
    {
        "name": "TechCorp India", "slug": "techcorp-india", "sector_slug": "technology",
        "description": "Leading SaaS platform for enterprise automation and AI-driven workflows.",
        "website": "https://techcorpindia.example.com", "founded_year": "2018",
        "headquarters": "Bangalore, Karnataka", "employees_count": 250, "is_featured": True,
        "product_name": "TechCorp Equity Shares", "price_per_share": Decimal("500"),
        "inventory": {"quantity": 10000, "allocated": 5000},
        "highlights": [
            "250+ Enterprise Clients",
            "40% YoY Revenue Growth",
            "AI-Powered Automation Platform",
        ],
        "metrics": {"Annual Revenue": "₹85 Cr", "Monthly Active Users": "420000", "YoY Growth": "40%"},
    },
    {
        "name": "HealthPlus Solutions", "slug": "healthplus-solutions", "sector_slug": "healthcare",
        "description": "AI-powered telemedicine platform connecting patients with healthcare providers.",
        "website": "https://healthplus.example.com", "founded_year": "2019",
        "headquarters": "Mumbai, Maharashtra", "employees_count": 180, "is_featured": True,
        "product_name": "HealthPlus Equity Shares", "price_per_share": Decimal("800"),
        "inventory": {"quantity": 5000, "allocated": 2000},
        "highlights": [
            "1M+ Registered Users",
            "Network of 5,000+ Doctors",
            "ISO 27001 Certified Platform",
        ],
        "metrics": {"Annual Revenue": "₹42 Cr", "Monthly Active Users": "1000000", "YoY Growth": "35%"},
    },
    {
        "name": "FinanceHub Technologies", "slug": "financehub-technologies",
        "sector_slug": "financial-services",
        "description": "Digital lending platform providing instant personal and business loans.",
        "website": "https://financehub.example.com", "founded_year": "2020",
        "headquarters": "Gurugram, Haryana", "employees_count": 320, "is_featured": True,
        "product_name": "FinanceHub Equity Shares", "price_per_share": Decimal("600"),
        "inventory": {"quantity": 8000, "allocated": 4000},
        "highlights": [
            "₹500 Cr+ Loan Book",
            "NBFC License Approved",
            "15% Average Monthly Growth",
        ],
        "metrics": {"Annual Revenue": "₹96 Cr", "Monthly Active Users": "650000", "YoY Growth": "55%"},
    },
    {
        "name": "EduTech Academy", "slug": "edutech-academy", "sector_slug": "education",
        "description": "Online learning platform offering skill development courses and certifications.",
        "website": "https://edutech.example.com", "founded_year": "2017",
        "headquarters": "Pune, Maharashtra", "employees_count": 150, "is_featured": False,
        "product_name": "EduTech Equity Shares", "price_per_share": Decimal("1000"),
        "inventory": {"quantity": 3000, "allocated": 1000},
        "highlights": [
            "500,000+ Active Learners",
            "200+ Industry-Certified Courses",
            "Partnerships with Top Corporations",
        ],
        "metrics": {"Annual Revenue": "₹28 Cr", "Monthly Active Users": "500000", "YoY Growth": "22%"},
    },
    {
        "name": "GreenEnergy Innovations", "slug": "greenenergy-innovations", "sector_slug": "energy",
        "description": "Renewable energy solutions provider focused on solar and wind power.",
        "website": "https://greenenergy.example.com", "founded_year": "2016",
        "headquarters": "Chennai, Tamil Nadu", "employees_count": 200, "is_featured": True,
        "product_name": "GreenEnergy Equity Shares", "price_per_share": Decimal("750"),
        "inventory": {"quantity": 6000, "allocated": 3000},
        "highlights": [
            "100 MW+ Renewable Capacity",
            "Government-Approved Projects",
            "Carbon Credit Certified",
        ],
        "metrics": {"Annual Revenue": "₹64 Cr", "Monthly Active Users": "15000", "YoY Growth": "30%"},
    },
]

PRODUCT_MIN_INVESTMENT = Decimal("5000")
PRODUCT_MAX_INVESTMENT = Decimal("1000000")

FOUNDERS = [
    {"name": "Rajesh Kumar", "role": "CEO & Co-Founder",
     "bio": "Former VP at Tech Giant, IIT Delhi alumni", "display_order": 1},
    {"name": "Priya Sharma", "role": "CTO & Co-Founder",
     "bio": "Ex-Engineering Lead, Stanford MS", "display_order": 2},
]

# years_ago counts back from the seed date
FUNDING_ROUNDS = [
    {"round_type": "Seed", "amount_raised": Decimal("50000000"), "valuation": Decimal("200000000"),
     "years_ago": 2},
    {"round_type": "Series A", "amount_raised": Decimal("150000000"), "valuation": Decimal("600000000"),
     "years_ago": 1},
]

RISK_DISCLOSURES = [
    {"risk_type": "market",
     "description": "Market volatility and regulatory changes may impact valuation.", "severity": "medium"},
    {"risk_type": "liquidity",
     "description": "Limited liquidity until IPO or secondary sale opportunities arise.", "severity": "high"},
]

# (price factor, months ago, reason)
PRICE_HISTORY = [
    (Decimal("0.8"), 6, "Initial offering price"),
    (Decimal("1"), 1, "Post-funding valuation adjustment"),
]

BULK_DISCOUNT_PERCENT = Decimal("5.0")
LISTING_MONTHS_AHEAD = 12

# Company-portal accounts: the test-data company reps, each admin of one company
COMPANY_PORTAL_USERS = [
    {"email": "company1@example.com", "company_slug": "techcorp-india", "role": "admin"},
    {"email": "company2@example.com", "company_slug": "healthplus-solutions", "role": "admin"},
]

# Investor updates shown on every company page; ``{company}`` is the company name
COMPANY_UPDATES = [
    {"title": "Record Quarter: {company} Achieves 150% Revenue Growth", "update_type": "financial",
     "content": "{company} closed a record quarter with 150% year-on-year revenue growth."},
    {"title": "Expanding to 10 New Cities Across India", "update_type": "milestone",
     "content": "{company} is expanding operations to 10 new cities this year."},
]
