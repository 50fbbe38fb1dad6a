import pytest

from db.connection import SQLiteDatabase

SCHEMA_SQL = """
CREATE TABLE accounts (
    account_id  INTEGER PRIMARY KEY AUTOINCREMENT,
    owner       TEXT,
    balance     REAL NOT NULL
);

CREATE TABLE transactions (
    id          INTEGER PRIMARY KEY AUTOINCREMENT,
    account_id  INTEGER NOT NULL REFERENCES accounts(account_id),
    type        TEXT NOT NULL CHECK (type IN ('debit', 'credit')),
    amount      REAL NOT NULL,
    category    TEXT,
    description TEXT,
    cleared     INTEGER NOT NULL DEFAULT 0
);
"""


@pytest.fixture()
def database():
    """In-memory SQLite provider with the example tables created."""
    db = SQLiteDatabase(":memory:")
    db.get_connection().executescript(SCHEMA_SQL)
    yield db
    db.close()


@pytest.fixture()
def row_count(database):
    """Count rows of a table directly, bypassing the repository."""
    def count(table: str) -> int:
        return database.get_connection().execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]
    return count
