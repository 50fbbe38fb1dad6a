"""
models/account.py
-----------------
Domain model for a tracked account.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Account:
    """
    Represents an account whose balance is tracked.

    Attributes:
        account_id: Database primary key (None for new records).
        owner: Name of the account holder.
        balance: Current balance. Required when saving.
    """
    owner: Optional[str] = None
    balance: Optional[float] = None
    account_id: Optional[int] = None

    def __str__(self) -> str:
        balance = "-" if self.balance is None else f"{self.balance:.2f}"
        return f"#{self.account_id} {self.owner or '-'}: {balance}"
