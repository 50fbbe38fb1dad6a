"""
repositories/account_repo.py
-----------------------------
Table mapping and repository for the `accounts` table.
"""

from db.connection import ConnectionProvider
from models.account import Account
from repositories.base import Repository
from repositories.descriptor import Column, TableDescriptor

ACCOUNT_TABLE: TableDescriptor[Account] = TableDescriptor.for_attributes(
    table_name="accounts",
    id_column="account_id",
    columns=[
        Column.attribute("owner", value_type=str),
        Column.attribute("balance", required=True, value_type=float),
    ],
    new_record=Account,
)


class AccountRepository(Repository[Account]):
    """Repository for CRUD operations on the accounts table."""

    def __init__(self, database: ConnectionProvider):
        super().__init__(database, ACCOUNT_TABLE)

    def total_balance(self) -> float:
        """Sum of all account balances."""
        return sum(account.balance or 0.0 for account in self.fetch_all())
