"""
repositories/statements.py
--------------------------
SQL statement templates filled in from a TableDescriptor.

Values are never inlined: every value position is a driver placeholder
("%s" for psycopg2, "?" for sqlite3). Statements are rebuilt on each call.
"""

from repositories.descriptor import TableDescriptor

INSERT_STATEMENT = "INSERT INTO {table} ({columns}) VALUES ({values}) RETURNING {id_column};"
SELECT_BY_ID_STATEMENT = "SELECT {columns} FROM {table} WHERE {id_column} = {placeholder};"
DELETE_STATEMENT = "DELETE FROM {table} WHERE {id_column} = {placeholder};"
UPDATE_STATEMENT = "UPDATE {table} SET {assignments} WHERE {id_column} = {placeholder};"
SELECT_ALL_STATEMENT = "SELECT {columns} FROM {table};"


def _selected_columns(descriptor: TableDescriptor) -> str:
    """Identifier first, then the columns in descriptor order."""
    return ",".join([descriptor.id_column, *descriptor.column_names])


def insert_statement(descriptor: TableDescriptor, placeholder: str = "%s") -> str:
    return INSERT_STATEMENT.format(
        table=descriptor.table_name,
        columns=",".join(descriptor.column_names),
        values=",".join(placeholder for _ in descriptor.columns),
        id_column=descriptor.id_column,
    )


def select_by_id_statement(descriptor: TableDescriptor, placeholder: str = "%s") -> str:
    return SELECT_BY_ID_STATEMENT.format(
        columns=_selected_columns(descriptor),
        table=descriptor.table_name,
        id_column=descriptor.id_column,
        placeholder=placeholder,
    )


def delete_statement(descriptor: TableDescriptor, placeholder: str = "%s") -> str:
    return DELETE_STATEMENT.format(
        table=descriptor.table_name,
        id_column=descriptor.id_column,
        placeholder=placeholder,
    )


def update_statement(descriptor: TableDescriptor, placeholder: str = "%s") -> str:
    """
    One `<column> = <placeholder>` per column, then the identifier.

    The identifier is therefore bound as parameter number len(columns) + 1.
    """
    assignments = ", ".join(f"{name} = {placeholder}" for name in descriptor.column_names)
    return UPDATE_STATEMENT.format(
        table=descriptor.table_name,
        assignments=assignments,
        id_column=descriptor.id_column,
        placeholder=placeholder,
    )


def select_all_statement(descriptor: TableDescriptor) -> str:
    return SELECT_ALL_STATEMENT.format(
        columns=_selected_columns(descriptor),
        table=descriptor.table_name,
    )
