"""
Chart of accounts for the platform's double-entry ledger.

Normal balance follows the account type: DEBIT for ASSET and EXPENSE,
CREDIT for LIABILITY, EQUITY and INCOME.
"""

# (code, name, type, description)
LEDGER_ACCOUNTS = [
    # Assets
    ("BANK", "Platform Bank Account", "ASSET",
     "Primary bank account holding platform capital. Mirrors real bank balance."),
    ("INVENTORY", "Pre-IPO Share Inventory", "ASSET",
     "Value of shares purchased in bulk and held for retail distribution."),
    ("ACCOUNTS_RECEIVABLE", "Accounts Receivable", "ASSET",
     "Amounts owed to the platform (pending payments, etc.)"),
    # Liabilities
    ("USER_WALLET_LIABILITY", "User Wallet Balances", "LIABILITY",
     "Total funds held in user wallets. Platform owes this to users."),
    ("BONUS_LIABILITY", "Bonus Balances", "LIABILITY",
     "Accrued bonus obligations owed to users."),
    ("TDS_PAYABLE", "TDS Payable", "LIABILITY",
     "Tax Deducted at Source to be remitted to government."),
    ("REFUNDS_PAYABLE", "Refunds Payable", "LIABILITY",
     "Pending refunds owed to users."),
    # Equity
    ("OWNER_CAPITAL", "Owner Capital", "EQUITY",
     "Capital contributed by platform owners."),
    ("RETAINED_EARNINGS", "Retained Earnings", "EQUITY",
     "Accumulated profits retained in the business."),
    # Income
    ("SUBSCRIPTION_INCOME", "Subscription Revenue", "INCOME",
     "Revenue from user subscriptions and investments."),
    ("PLATFORM_FEES", "Platform Fees", "INCOME",
     "Transaction fees, service charges, and other fee income."),
    ("SHARE_SALE_INCOME", "Share Sale Income", "INCOME",
     "Revenue from selling shares to users at retail price."),
    ("INTEREST_INCOME", "Interest Income", "INCOME",
     "Interest earned on platform funds."),
    # Expenses
    ("MARKETING_EXPENSE", "Marketing & Bonus Cost", "EXPENSE",
     "Costs for bonuses, referral payouts, and marketing campaigns."),
    ("OPERATING_EXPENSES", "Operating Expenses", "EXPENSE",
     "Salaries, rent, utilities, and other operational costs."),
    ("COST_OF_SHARES", "Cost of Shares Sold", "EXPENSE",
     "Cost basis of shares allocated to users (reduces inventory)."),
    ("PAYMENT_GATEWAY_FEES", "Payment Gateway Fees", "EXPENSE",
     "Fees charged by Razorpay, PayU, and other gateways."),
]

NORMAL_BALANCE = {
    "ASSET": "DEBIT",
    "EXPENSE": "DEBIT",
    "LIABILITY": "CREDIT",
    "EQUITY": "CREDIT",
    "INCOME": "CREDIT",
}
