"""
SEBI-mandated disclosure modules for Pre-IPO companies.

SEBI (ICDR) Regulations, 2018 — sections 26(1), 32, 33.

Tiers:
  1  Visibility        basic business information
  2  Investable        financial data (enables buying)
  3  Full disclosure   legal and compliance

``category`` is left out; the seeder derives it with ``categorize_module``.
"""

_ICDR = "SEBI (ICDR) Regulations, 2018"
_DRAFT7 = "http://json-schema.org/draft-07/schema#"

DISCLOSURE_MODULES = [
    {
        "code": "business_model",
        "name": "Business Model & Operations",
        "description": "Comprehensive description of the company's business model, operations, "
                       "products/services, and competitive positioning.",
        "help_text": "Provide detailed information about your business model, revenue streams, customer "
                     "segments, key partners, and operational structure. This helps investors understand "
                     "how your company creates, delivers, and captures value.",
        "is_required": True,
        "display_order": 1,
        "tier": 1,
        "document_type": "version_controlled",
        "stability_window_days": 365,
        "max_changes_per_window": 2,
        "expected_update_days": None,
        "icon": "building",
        "color": "blue",
        "json_schema": {
            "$schema": _DRAFT7,
            "type": "object",
            "required": ["business_description", "revenue_streams", "customer_segments", "competitive_advantages"],
            "properties": {
                "business_description": {
                    "type": "string", "minLength": 500, "maxLength": 5000,
                    "description": "Detailed description of business model and operations",
                },
                "revenue_streams": {
                    "type": "array", "minItems": 1,
                    "items": {
                        "type": "object",
                        "required": ["name", "percentage", "description"],
                        "properties": {
                            "name": {"type": "string"},
                            "percentage": {"type": "number", "minimum": 0, "maximum": 100},
                            "description": {"type": "string", "minLength": 50},
                        },
                    },
                },
                "customer_segments": {"type": "array", "minItems": 1, "items": {"type": "string"}},
                "competitive_advantages": {
                    "type": "array", "minItems": 2, "items": {"type": "string", "minLength": 50},
                },
                "key_partners": {"type": "array", "items": {"type": "string"}},
                "market_size": {
                    "type": "object",
                    "properties": {
                        "tam": {"type": "number", "description": "Total Addressable Market in USD"},
                        "sam": {"type": "number", "description": "Serviceable Addressable Market in USD"},
                        "som": {"type": "number", "description": "Serviceable Obtainable Market in USD"},
                    },
                },
            },
        },
        "sebi_category": "Business Information",
        "regulatory_references": [
            {"regulation": _ICDR, "section": "26(1)", "description": "Nature of business"},
        ],
        "approval_checklist": [
            "Verify business description is comprehensive and clear",
            "Check revenue stream percentages total 100%",
            "Validate competitive advantages are substantiated",
            "Confirm market size estimates are reasonable",
        ],
    },
    {
        "code": "financial_performance",
        "name": "Financial Performance",
        "description": "Historical and current financial performance including revenue, profitability, "
                       "cash flows, and key financial metrics.",
        "help_text": "Provide audited financial statements for the last 3 years. Include revenue trends, "
                     "profitability metrics, cash flow statements, and key financial ratios. Be prepared "
                     "to explain any significant changes.",
        "is_required": True,
        "display_order": 2,
        "tier": 2,
        "document_type": "update_required",
        "expected_update_days": 90,
        "stability_window_days": None,
        "max_changes_per_window": None,
        "icon": "chart-line",
        "color": "green",
        "json_schema": {
            "$schema": _DRAFT7,
            "type": "object",
            "required": ["fiscal_year", "revenue", "expenses", "net_profit", "cash_flow"],
            "properties": {
                "fiscal_year": {"type": "string", "pattern": "^[0-9]{4}-[0-9]{4}$"},
                "revenue": {
                    "type": "object",
                    "required": ["total", "breakdown"],
                    "properties": {
                        "total": {"type": "number", "minimum": 0},
                        "breakdown": {
                            "type": "array",
                            "items": {
                                "type": "object",
                                "properties": {"quarter": {"type": "string"}, "amount": {"type": "number"}},
                            },
                        },
                    },
                },
                "expenses": {
                    "type": "object",
                    "required": ["total", "operating", "non_operating"],
                    "properties": {
                        "total": {"type": "number"},
                        "operating": {"type": "number"},
                        "non_operating": {"type": "number"},
                    },
                },
                "net_profit": {"type": "number"},
                "ebitda": {"type": "number"},
                "cash_flow": {
                    "type": "object",
                    "properties": {
                        "operating": {"type": "number"},
                        "investing": {"type": "number"},
                        "financing": {"type": "number"},
                    },
                },
                "key_metrics": {
                    "type": "object",
                    "properties": {
                        "gross_margin": {"type": "number"},
                        "net_margin": {"type": "number"},
                        "roe": {"type": "number", "description": "Return on Equity"},
                        "roa": {"type": "number", "description": "Return on Assets"},
                    },
                },
            },
        },
        "sebi_category": "Financial Data",
        "regulatory_references": [
            {"regulation": _ICDR, "section": "32", "description": "Financial information"},
        ],
        "approval_checklist": [
            "Verify financial statements are audited",
            "Check quarter breakdown matches annual total",
            "Validate profit/loss calculations",
            "Confirm cash flow statement balances",
        ],
    },
    {
        "code": "risk_factors",
        "name": "Risk Factors",
        "description": "Comprehensive disclosure of material risks that could impact the company's business, "
                       "financial condition, or future prospects.",
        "help_text": "Identify and describe all material risks including business risks, financial risks, "
                     "regulatory risks, market risks, and operational risks. Be honest and comprehensive - "
                     "this protects both you and investors.",
        "is_required": True,
        "display_order": 3,
        "tier": 3,
        "document_type": "version_controlled",
        "stability_window_days": 180,
        "max_changes_per_window": 3,
        "expected_update_days": None,
        "icon": "shield",
        "color": "red",
        "json_schema": {
            "$schema": _DRAFT7,
            "type": "object",
            "required": ["business_risks", "financial_risks", "regulatory_risks"],
            "properties": {
                "business_risks": {
                    "type": "array", "minItems": 3,
                    "items": {
                        "type": "object",
                        "required": ["title", "description", "severity", "mitigation"],
                        "properties": {
                            "title": {"type": "string"},
                            "description": {"type": "string", "minLength": 100},
                            "severity": {"type": "string", "enum": ["low", "medium", "high", "critical"]},
                            "mitigation": {"type": "string", "minLength": 50},
                            "likelihood": {"type": "string", "enum": ["unlikely", "possible", "likely", "certain"]},
                        },
                    },
                },
                "financial_risks": {
                    "type": "array", "minItems": 2,
                    "items": {
                        "type": "object",
                        "required": ["title", "description", "severity"],
                        "properties": {
                            "title": {"type": "string"},
                            "description": {"type": "string", "minLength": 100},
                            "severity": {"type": "string", "enum": ["low", "medium", "high", "critical"]},
                        },
                    },
                },
                "regulatory_risks": {
                    "type": "array", "minItems": 1,
                    "items": {
                        "type": "object",
                        "required": ["title", "description"],
                        "properties": {
                            "title": {"type": "string"},
                            "description": {"type": "string", "minLength": 100},
                        },
                    },
                },
                "market_risks": {"type": "array"},
                "operational_risks": {"type": "array"},
            },
        },
        "sebi_category": "Risk Factors",
        "regulatory_references": [
            {"regulation": _ICDR, "section": "33", "description": "Risk factors disclosure"},
        ],
        "approval_checklist": [
            "Verify all material risks are disclosed",
            "Check risk severity assessments are reasonable",
            "Validate mitigation strategies are provided",
            "Confirm no generic/boilerplate risk disclosures",
        ],
    },
    {
        "code": "board_management",
        "name": "Board & Management",
        "description": "Information about board of directors, key management personnel, their backgrounds, "
                       "and governance structure.",
        "help_text": "Provide details about your board composition, director qualifications, management team "
                     "backgrounds, and corporate governance practices. Include any conflicts of interest or "
                     "related party relationships.",
        "is_required": True,
        "display_order": 4,
        "tier": 1,
        "document_type": "version_controlled",
        "stability_window_days": 365,
        "max_changes_per_window": 2,
        "expected_update_days": None,
        "icon": "users",
        "color": "purple",
        "json_schema": {
            "$schema": _DRAFT7,
            "type": "object",
            "required": ["board_members", "key_management", "governance_practices"],
            "properties": {
                "board_members": {
                    "type": "array", "minItems": 3,
                    "items": {
                        "type": "object",
                        "required": ["name", "designation", "qualification", "experience"],
                        "properties": {
                            "name": {"type": "string"},
                            "designation": {
                                "type": "string",
                                "enum": ["Chairperson", "Managing Director", "Independent Director",
                                         "Non-Executive Director"],
                            },
                            "qualification": {"type": "string"},
                            "experience": {"type": "string", "minLength": 100},
                            "other_directorships": {"type": "array"},
                        },
                    },
                },
                "key_management": {
                    "type": "array", "minItems": 3,
                    "items": {
                        "type": "object",
                        "required": ["name", "designation", "background"],
                        "properties": {
                            "name": {"type": "string"},
                            "designation": {"type": "string"},
                            "background": {"type": "string", "minLength": 100},
                        },
                    },
                },
                "governance_practices": {
                    "type": "object",
                    "properties": {
                        "board_meetings_per_year": {"type": "number", "minimum": 4},
                        "audit_committee_exists": {"type": "boolean"},
                        "nomination_committee_exists": {"type": "boolean"},
                        "remuneration_policy": {"type": "string"},
                    },
                },
            },
        },
        "sebi_category": "Corporate Governance",
        "regulatory_references": [
            {"regulation": _ICDR, "section": "26(1)(c)", "description": "Management and board details"},
        ],
        "approval_checklist": [
            "Verify board has minimum required independent directors",
            "Check director qualifications are appropriate",
            "Validate governance practices meet standards",
            "Confirm no undisclosed conflicts of interest",
        ],
    },
    {
        "code": "legal_compliance",
        "name": "Legal & Compliance",
        "description": "Legal structure, compliance status, ongoing litigation, regulatory approvals, "
                       "and intellectual property.",
        "help_text": "Disclose all material legal matters including pending litigation, regulatory "
                     "investigations, compliance violations, intellectual property ownership, and material "
                     "contracts. Full transparency is required.",
        "is_required": False,
        "display_order": 5,
        "tier": 3,
        "document_type": "version_controlled",
        "stability_window_days": 365,
        "max_changes_per_window": 2,
        "expected_update_days": None,
        "icon": "file-text",
        "color": "gray",
        "json_schema": {
            "$schema": _DRAFT7,
            "type": "object",
            "properties": {
                "legal_structure": {"type": "string"},
                "pending_litigation": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "properties": {
                            "case_number": {"type": "string"},
                            "description": {"type": "string"},
                            "status": {"type": "string"},
                            "potential_liability": {"type": "number"},
                        },
                    },
                },
                "intellectual_property": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "properties": {
                            "type": {"type": "string",
                                     "enum": ["patent", "trademark", "copyright", "trade_secret"]},
                            "description": {"type": "string"},
                            "status": {"type": "string"},
                        },
                    },
                },
                "regulatory_approvals": {"type": "array"},
                "material_contracts": {"type": "array"},
            },
        },
        "sebi_category": "Legal Information",
        "regulatory_references": [
            {"regulation": _ICDR, "section": "26(1)(f)", "description": "Legal and regulatory information"},
        ],
        "approval_checklist": [
            "Verify all material litigation is disclosed",
            "Check IP ownership is clear and documented",
            "Validate regulatory compliance status",
            "Confirm material contracts are disclosed",
        ],
    },
]
