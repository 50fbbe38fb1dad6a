"""Tests for repositories/descriptor.py."""

from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from models.account import Account
from repositories.account_repo import ACCOUNT_TABLE
from repositories.descriptor import Column, TableDescriptor, decode


def test_attribute_column_reads_and_writes_the_attribute():
    column = Column.attribute("owner")
    account = Account(owner="A")
    assert column.getter(account) == "A"
    column.setter(account, "B")
    assert account.owner == "B"


def test_attribute_column_can_map_a_differently_named_attribute():
    column = Column.attribute("holder_name", attr="owner")
    account = Account(owner="A")
    assert column.name == "holder_name"
    assert column.getter(account) == "A"


def test_descriptor_exposes_names_in_declared_order():
    assert ACCOUNT_TABLE.column_names == ["owner", "balance"]
    assert ACCOUNT_TABLE.required_column_names == ["balance"]
    assert ACCOUNT_TABLE.column("balance").value_type is float


def test_descriptor_identifier_accessors():
    account = Account(owner="A", balance=1.0)
    assert ACCOUNT_TABLE.id_getter(account) is None
    ACCOUNT_TABLE.id_setter(account, 7)
    assert account.account_id == 7


def test_descriptor_freezes_column_list_into_tuple():
    descriptor = TableDescriptor.for_attributes(
        "accounts", "account_id", [Column.attribute("owner")], Account
    )
    assert isinstance(descriptor.columns, tuple)


def test_descriptor_is_immutable():
    with pytest.raises(FrozenInstanceError):
        ACCOUNT_TABLE.table_name = "other"  # type: ignore[misc]


def test_descriptor_rejects_no_columns():
    with pytest.raises(ValueError):
        TableDescriptor.for_attributes("accounts", "account_id", [], Account)


def test_descriptor_rejects_duplicate_columns():
    with pytest.raises(ValueError):
        TableDescriptor.for_attributes(
            "accounts", "account_id",
            [Column.attribute("owner"), Column.attribute("owner")],
            Account,
        )


def test_descriptor_rejects_identifier_among_columns():
    with pytest.raises(ValueError):
        TableDescriptor.for_attributes(
            "accounts", "account_id",
            [Column.attribute("owner"), Column.attribute("account_id")],
            Account,
        )


@pytest.mark.parametrize(
    "raw, declared, expected",
    [
        (None, int, None),
        ("42", int, 42),
        (Decimal("10.50"), float, 10.5),
        (3, float, 3.0),
        (1, bool, True),
        (0, bool, False),
        ("text", str, "text"),
        (b"raw", object, b"raw"),
    ],
)
def test_decode(raw, declared, expected):
    result = decode(raw, declared)
    assert result == expected
    if expected is not None:
        assert type(result) is type(expected)


@pytest.mark.parametrize("raw", [Decimal("3.7"), 2.5])
def test_decode_refuses_fractional_value_for_int_column(raw):
    with pytest.raises(ValueError):
        decode(raw, int)


def test_decode_accepts_whole_numeric_for_int_column():
    assert decode(Decimal("4.000"), int) == 4
