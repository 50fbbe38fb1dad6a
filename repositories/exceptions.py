"""
repositories/exceptions.py
--------------------------
Errors raised when a record breaks its table descriptor's contract.
Driver errors (psycopg2.Error, sqlite3.Error) are never wrapped in these.
"""


class RepositoryError(Exception):
    """Base exception for descriptor contract violations."""
    pass


class MissingRequiredField(RepositoryError):
    """A required column had no value when creating a record."""

    def __init__(self, column_name: str):
        super().__init__(f"Missing value for required column '{column_name}'")
        self.column_name = column_name


class MissingIdentifier(RepositoryError):
    """An update was requested for a record that has no identifier."""

    def __init__(self):
        super().__init__("Record has no identifier value")
