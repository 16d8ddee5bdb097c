"""
Ledger Models — chart of accounts and the admin (platform) ledger.

Admin ledger entries are append-only. Paired entries point at each other
through ``entry_pair_id``; amounts are integer paise.
"""

from app.models import db
from app.models.base import TimestampMixin, utcnow

ACCOUNT_TYPES = ("ASSET", "LIABILITY", "EQUITY", "INCOME", "EXPENSE")


class LedgerAccount(TimestampMixin, db.Model):
    __tablename__ = "ledger_accounts"

    id = db.Column(db.Integer, primary_key=True)
    code = db.Column(db.String(50), unique=True, nullable=False)  # e.g. BANK, INVENTORY
    name = db.Column(db.String(255), nullable=False)
    type = db.Column(db.String(10), nullable=False, index=True)
    is_system = db.Column(db.Boolean, default=True)
    description = db.Column(db.Text)
    normal_balance = db.Column(db.String(10), default="DEBIT")  # DEBIT, CREDIT

    def to_dict(self):
        return {
            "id": self.id,
            "code": self.code,
            "name": self.name,
            "type": self.type,
            "normal_balance": self.normal_balance,
            "is_system": self.is_system,
        }


class AdminLedgerEntry(db.Model):
    __tablename__ = "admin_ledger_entries"

    id = db.Column(db.Integer, primary_key=True)
    entry_date = db.Column(db.DateTime, default=utcnow)
    entry_type = db.Column(db.String(10), nullable=False)  # debit, credit
    category = db.Column(db.String(50), nullable=False)
    subcategory = db.Column(db.String(50))
    amount_paise = db.Column(db.BigInteger, nullable=False)
    balance_after_paise = db.Column(db.BigInteger, default=0)
    description = db.Column(db.String(255))
    reference_type = db.Column(db.String(100))
    reference_id = db.Column(db.Integer)
    entry_metadata = db.Column("metadata", db.JSON, default=dict)
    entry_pair_id = db.Column(db.Integer, db.ForeignKey("admin_ledger_entries.id"))
    created_at = db.Column(db.DateTime, default=utcnow)
