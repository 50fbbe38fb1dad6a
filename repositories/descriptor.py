"""
repositories/descriptor.py
--------------------------
Static metadata binding a record type to a relational table.

A TableDescriptor is built once per record type and shared by every
repository call. Columns are held in a tuple so that statement generation
and parameter binding always walk them in the same order.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from operator import attrgetter
from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")

Getter = Callable[[Any], Any]
# A setter mutates the record in place and returns None, or returns a replacement record.
Setter = Callable[[Any, Any], Any]


def _attribute_setter(attr: str) -> Setter:
    def setter(record, value) -> None:
        setattr(record, attr, value)
    return setter


def decode(value: Any, declared_type: type) -> Any:
    """
    Convert a raw driver value to a column's declared Python type.

    NULL stays None. Integral, floating and boolean columns are coerced
    (PostgreSQL NUMERIC arrives as Decimal, SQLite booleans as 0/1);
    every other type is passed through as the driver returned it.

    Raises:
        ValueError: A fractional value was read for an `int` column.
    """
    if value is None:
        return None
    if declared_type is bool:
        return bool(value)
    if declared_type is int:
        if isinstance(value, (float, Decimal)) and value != int(value):
            raise ValueError(f"Cannot decode fractional value {value!r} as int")
        return int(value)
    if declared_type is float and isinstance(value, (int, Decimal, str)):
        return float(value)
    return value


@dataclass(frozen=True)
class Column:
    """
    One non-identifier column of a table.

    Attributes:
        name: Column name as it appears in SQL and in result rows.
        getter: record -> value (None means absent).
        setter: (record, value) -> None, or a replacement record.
        required: If True, `create` refuses to write NULL into this column.
        value_type: Declared Python type, used to decode fetched values.
    """
    name: str
    getter: Getter
    setter: Setter
    required: bool = False
    value_type: type = object

    @classmethod
    def attribute(
        cls,
        name: str,
        *,
        attr: Optional[str] = None,
        required: bool = False,
        value_type: type = object,
    ) -> "Column":
        """Build a column mapped to a plain attribute (same name unless `attr` is given)."""
        attr = attr or name
        return cls(
            name=name,
            getter=attrgetter(attr),
            setter=_attribute_setter(attr),
            required=required,
            value_type=value_type,
        )


@dataclass(frozen=True)
class TableDescriptor(Generic[T]):
    """
    How one record type maps onto one table.

    Attributes:
        table_name: Target table.
        id_column: Identifier column name; its value is generated by the store.
        columns: Non-identifier columns, in statement order.
        new_record: Zero-argument factory returning an empty record.
        id_getter: record -> identifier, or None for unsaved records.
        id_setter: (record, identifier) -> None, or a replacement record.
        id_type: Declared Python type of the identifier column.
    """
    table_name: str
    id_column: str
    columns: tuple[Column, ...]
    new_record: Callable[[], T]
    id_getter: Getter
    id_setter: Setter
    id_type: type = int
    _by_name: dict[str, Column] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not self.columns:
            raise ValueError(f"Table '{self.table_name}' needs at least one column")
        # Lists are accepted for convenience but frozen into a tuple.
        object.__setattr__(self, "columns", tuple(self.columns))
        by_name = {c.name: c for c in self.columns}
        if len(by_name) != len(self.columns):
            raise ValueError(f"Duplicate column names in table '{self.table_name}'")
        if self.id_column in by_name:
            raise ValueError(
                f"Identifier column '{self.id_column}' must not be listed among the columns"
            )
        object.__setattr__(self, "_by_name", by_name)

    @classmethod
    def for_attributes(
        cls,
        table_name: str,
        id_column: str,
        columns: list[Column],
        new_record: Callable[[], T],
        *,
        id_attr: Optional[str] = None,
        id_type: type = int,
    ) -> "TableDescriptor[T]":
        """Build a descriptor whose identifier is a plain attribute of the record."""
        id_attr = id_attr or id_column
        return cls(
            table_name=table_name,
            id_column=id_column,
            columns=tuple(columns),
            new_record=new_record,
            id_getter=attrgetter(id_attr),
            id_setter=_attribute_setter(id_attr),
            id_type=id_type,
        )

    @property
    def column_names(self) -> list[str]:
        return [c.name for c in self.columns]

    @property
    def required_column_names(self) -> list[str]:
        return [c.name for c in self.columns if c.required]

    def column(self, name: str) -> Column:
        return self._by_name[name]
