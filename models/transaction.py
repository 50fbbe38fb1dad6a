"""
models/transaction.py
---------------------
Domain model for money moving in or out of an account.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Transaction:
    """
    A single recorded transaction.

    Attributes:
        id: Database primary key (None for new records).
        account_id: The account this transaction belongs to.
        type: Either 'debit' or 'credit'.
        amount: Transaction amount, always positive.
        category: Optional spending category.
        description: Optional human-readable note.
        cleared: Whether the transaction has been reconciled.
    """
    account_id: Optional[int] = None
    type: Optional[str] = None  # 'debit' | 'credit'
    amount: Optional[float] = None
    category: Optional[str] = None
    description: Optional[str] = None
    cleared: bool = False
    id: Optional[int] = None

    def is_debit(self) -> bool:
        return self.type == "debit"

    def signed_amount(self) -> float:
        """Amount with debits negative, credits positive. An unset amount counts as zero."""
        amount = self.amount or 0.0
        return -amount if self.is_debit() else amount
