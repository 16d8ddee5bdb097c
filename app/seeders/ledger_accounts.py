"""
Ledger accounts seeder — the platform's chart of accounts.

Every account is a system account; ``normal_balance`` is derived from the
account type.
"""

from app.models.ledger import LedgerAccount
from app.seeders.data.ledger import LEDGER_ACCOUNTS, NORMAL_BALANCE
from app.services.helpers.upsert import upsert

NAME = "ledger_accounts"
PROD_SAFE = True


def run(stats, allow_test_data=False):
    for code, name, type_, description in LEDGER_ACCOUNTS:
        _, created = upsert(
            LedgerAccount, {"code": code},
            {
                "name": name,
                "type": type_,
                "description": description,
                "normal_balance": NORMAL_BALANCE[type_],
                "is_system": True,
            },
        )
        stats.record("ledger_accounts", created)
