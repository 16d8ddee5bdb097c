"""
Investment plan and CMS reference data.

Plan business rules (bonus rates, milestone amounts, allocation priority)
live in PLAN_CONFIGS so the bonus engine reads them from the database.
"""

from decimal import Decimal

PLANS = [
    {"name": "Plan A - Starter", "slug": "plan-a-starter",
     "description": "Entry-level SIP plan ideal for first-time investors with monthly "
                    "investments starting at ₹5,000.",
     "monthly_amount": Decimal("5000"), "duration_months": 12, "is_featured": False, "display_order": 1},
    {"name": "Plan B - Growth", "slug": "plan-b-growth",
     "description": "Mid-tier SIP plan with priority allocation and enhanced bonus rates "
                    "for committed investors.",
     "monthly_amount": Decimal("10000"), "duration_months": 12, "is_featured": True, "display_order": 2},
    {"name": "Plan C - Premium", "slug": "plan-c-premium",
     "description": "Premium SIP plan with guaranteed allocation, highest bonus rates, "
                    "and exclusive benefits.",
     "monthly_amount": Decimal("25000"), "duration_months": 12, "is_featured": True, "display_order": 3},
]

PLAN_FEATURES = {
    "plan-a-starter": [
        "Monthly SIP of ₹5,000",
        "0.5% Progressive Bonus",
        "Standard allocation priority",
        "12-month commitment period",
    ],
    "plan-b-growth": [
        "Monthly SIP of ₹10,000",
        "0.75% Progressive Bonus",
        "Priority allocation on oversubscribed shares",
        "12-month commitment with flexibility",
    ],
    "plan-c-premium": [
        "Monthly SIP of ₹25,000",
        "1.0% Progressive Bonus",
        "Guaranteed allocation on all deals",
        "Dedicated relationship manager",
    ],
}

PLAN_CONFIGS = {
    "plan-a-starter": {
        "progressive_bonus_rate": 0.5,
        "milestone_bonus_enabled": True,
        "milestone_bonus_6_months": 500,
        "milestone_bonus_12_months": 1000,
        "allocation_priority": "standard",
    },
    "plan-b-growth": {
        "progressive_bonus_rate": 0.75,
        "milestone_bonus_enabled": True,
        "milestone_bonus_6_months": 1000,
        "milestone_bonus_12_months": 2500,
        "allocation_priority": "priority",
    },
    "plan-c-premium": {
        "progressive_bonus_rate": 1.0,
        "milestone_bonus_enabled": True,
        "milestone_bonus_6_months": 2500,
        "milestone_bonus_12_months": 6000,
        "allocation_priority": "guaranteed",
    },
}


# ═════════════════════════════════════════════════════════════════════════════
# NAVIGATION: menu slug → (menu name, [(label, url), ...])
# ═════════════════════════════════════════════════════════════════════════════

MENUS = {
    "header": ("Header Menu", [
        ("Home", "/"),
        ("Companies", "/companies"),
        ("Plans", "/plans"),
        ("About Us", "/about"),
        ("Contact", "/contact"),
    ]),
    "footer": ("Footer Menu", [
        ("Privacy Policy", "/privacy-policy"),
        ("Terms & Conditions", "/terms"),
        ("Risk Disclosure", "/risk-disclosure"),
        ("Refund Policy", "/refund-policy"),
        ("Help Center", "/help-center"),
    ]),
    "user-sidebar": ("User Dashboard Menu", [
        ("Dashboard", "/dashboard"),
        ("My Investments", "/portfolio"),
        ("Wallet", "/wallet"),
        ("KYC", "/kyc"),
        ("Referrals", "/referrals"),
    ]),
    "admin-sidebar": ("Admin Panel Menu", [
        ("Dashboard", "/admin/dashboard"),
        ("Users", "/admin/users"),
        ("KYC Queue", "/admin/kyc-queue"),
        ("Investments", "/admin/investments"),
        ("Settings", "/admin/settings"),
    ]),
}


# ═════════════════════════════════════════════════════════════════════════════
# STATIC CONTENT
# ═════════════════════════════════════════════════════════════════════════════

PAGES = [
    {"title": "About Us", "slug": "about", "status": "published",
     "content": "<h1>About PreIPOsip</h1><p>We are India's leading Pre-IPO investment platform...</p>"},
    {"title": "How It Works", "slug": "how-it-works", "status": "published",
     "content": "<h1>How It Works</h1>"
                "<p>Invest in Pre-IPO companies through systematic investment plans...</p>"},
    {"title": "Contact Us", "slug": "contact", "status": "published",
     "content": "<h1>Contact Us</h1><p>Email: support@preiposip.com</p><p>Phone: +91-9876543210</p>"},
]

BANNERS = [
    {"title": "Invest in Tomorrow's IPOs Today",
     "subtitle": "Start a Pre-IPO SIP from ₹5,000 a month",
     "image_url": "/storage/banners/home-hero.jpg", "link_url": "/plans",
     "placement": "home_hero", "display_order": 1},
    {"title": "Refer & Earn ₹500",
     "subtitle": "Invite friends and earn a bonus on their first investment",
     "image_url": "/storage/banners/referral.jpg", "link_url": "/referrals",
     "placement": "dashboard", "display_order": 2},
    {"title": "Monthly Lucky Draw",
     "subtitle": "Every SIP instalment is an entry to win up to ₹25,000",
     "image_url": "/storage/banners/lucky-draw.jpg", "link_url": "/lucky-draws",
     "placement": "dashboard", "display_order": 3},
]

BLOG_CATEGORIES = [
    {"name": "Pre-IPO Basics", "slug": "pre-ipo-basics",
     "description": "Understanding unlisted shares and how Pre-IPO investing works"},
    {"name": "Market Insights", "slug": "market-insights",
     "description": "Sector trends and upcoming IPO pipeline analysis"},
    {"name": "Company Spotlights", "slug": "company-spotlights",
     "description": "Deep dives into companies listed on the platform"},
    {"name": "Investing Guides", "slug": "investing-guides",
     "description": "SIP strategy, diversification and tax guides"},
    {"name": "Platform Updates", "slug": "platform-updates",
     "description": "New features, plans and announcements"},
]

# Marketing assets for referrers, keyed by title; file_size in bytes
PROMOTIONAL_MATERIALS = [
    {"title": "PreIPO SIP Facebook Cover Banner", "category": "banners", "material_type": "image",
     "description": "Facebook cover banner for promoting PreIPO SIP investments.",
     "file_url": "/storage/materials/banners/facebook-cover.jpg", "file_name": "preipo-facebook-cover.jpg",
     "file_size": 524288, "dimensions": "1920x1080"},
    {"title": "Instagram Square Post", "category": "social", "material_type": "image",
     "description": "Square post about pre-IPO investment opportunities.",
     "file_url": "/storage/materials/social/instagram-square.jpg", "file_name": "preipo-instagram-post.jpg",
     "file_size": 358400, "dimensions": "1080x1080"},
    {"title": "Referral Program Banner", "category": "social", "material_type": "image",
     "description": "Banner for sharing your referral link and earning rewards.",
     "file_url": "/storage/materials/social/referral-banner.jpg", "file_name": "referral-program-banner.jpg",
     "file_size": 409600, "dimensions": "1200x630"},
    {"title": "PreIPO SIP Explainer Video", "category": "videos", "material_type": "video",
     "description": "60-second explainer on how PreIPO SIP works.",
     "file_url": "/storage/materials/videos/explainer-60s.mp4", "file_name": "preipo-explainer-60s.mp4",
     "file_size": 8388608, "dimensions": "1920x1080"},
    {"title": "PreIPO Investment Guide PDF", "category": "documents", "material_type": "document",
     "description": "Guide to pre-IPO investing for first-time investors.",
     "file_url": "/storage/materials/documents/investment-guide.pdf", "file_name": "preipo-investment-guide.pdf",
     "file_size": 2097152, "dimensions": "A4"},
    {"title": "Risk Disclosure Statement", "category": "documents", "material_type": "document",
     "description": "Risk disclosure to share with potential investors.",
     "file_url": "/storage/materials/documents/risk-disclosure.pdf", "file_name": "risk-disclosure.pdf",
     "file_size": 524288, "dimensions": "A4"},
    {"title": "Investment Pitch Deck", "category": "presentations", "material_type": "document",
     "description": "Pitch deck with market analysis and investment opportunities.",
     "file_url": "/storage/materials/presentations/pitch-deck.pdf", "file_name": "preipo-pitch-deck.pdf",
     "file_size": 3145728, "dimensions": "16:9"},
]
