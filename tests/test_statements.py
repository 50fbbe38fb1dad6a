"""Tests for repositories/statements.py."""

from repositories import statements
from repositories.account_repo import ACCOUNT_TABLE
from repositories.transaction_repo import TRANSACTION_TABLE


def test_insert_statement_lists_columns_and_returns_identifier():
    assert statements.insert_statement(ACCOUNT_TABLE, "?") == (
        "INSERT INTO accounts (owner,balance) VALUES (?,?) RETURNING account_id;"
    )


def test_insert_statement_uses_psycopg2_placeholder_by_default():
    assert statements.insert_statement(ACCOUNT_TABLE) == (
        "INSERT INTO accounts (owner,balance) VALUES (%s,%s) RETURNING account_id;"
    )


def test_select_by_id_statement_puts_identifier_first():
    assert statements.select_by_id_statement(ACCOUNT_TABLE, "?") == (
        "SELECT account_id,owner,balance FROM accounts WHERE account_id = ?;"
    )


def test_delete_statement():
    assert statements.delete_statement(ACCOUNT_TABLE, "?") == (
        "DELETE FROM accounts WHERE account_id = ?;"
    )


def test_update_statement_has_one_placeholder_per_column():
    assert statements.update_statement(ACCOUNT_TABLE, "?") == (
        "UPDATE accounts SET owner = ?, balance = ? WHERE account_id = ?;"
    )


def test_update_statement_identifier_is_parameter_after_columns():
    sql = statements.update_statement(TRANSACTION_TABLE, "?")
    assert sql.count("?") == len(TRANSACTION_TABLE.columns) + 1
    assert sql.endswith("WHERE id = ?;")


def test_select_all_statement():
    assert statements.select_all_statement(ACCOUNT_TABLE) == (
        "SELECT account_id,owner,balance FROM accounts;"
    )


def test_statements_follow_descriptor_column_order():
    sql = statements.select_all_statement(TRANSACTION_TABLE)
    assert sql == (
        "SELECT id,account_id,type,amount,category,description,cleared FROM transactions;"
    )
