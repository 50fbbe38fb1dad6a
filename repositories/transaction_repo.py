"""
repositories/transaction_repo.py
---------------------------------
Table mapping and repository for the `transactions` table.
"""

from db.connection import ConnectionProvider
from models.transaction import Transaction
from repositories.base import Repository
from repositories.descriptor import Column, TableDescriptor

TRANSACTION_TABLE: TableDescriptor[Transaction] = TableDescriptor.for_attributes(
    table_name="transactions",
    id_column="id",
    columns=[
        Column.attribute("account_id", required=True, value_type=int),
        Column.attribute("type", required=True, value_type=str),
        Column.attribute("amount", required=True, value_type=float),
        Column.attribute("category", value_type=str),
        Column.attribute("description", value_type=str),
        Column.attribute("cleared", required=True, value_type=bool),
    ],
    new_record=Transaction,
)


class TransactionRepository(Repository[Transaction]):
    """Repository for CRUD operations on the transactions table."""

    def __init__(self, database: ConnectionProvider):
        super().__init__(database, TRANSACTION_TABLE)

    def for_account(self, account_id: int) -> list[Transaction]:
        """All transactions of one account, in table order."""
        return [t for t in self.fetch_all() if t.account_id == account_id]

    def balance_of(self, account_id: int) -> float:
        """Net effect of an account's transactions (credits minus debits)."""
        return sum(t.signed_amount() for t in self.for_account(account_id))
