"""
repositories/ - Data Access Layer
==================================
A generic Repository turns a TableDescriptor into INSERT/SELECT/UPDATE/DELETE
statements. Each entity module declares its descriptor and a thin repository.
"""

from repositories.base import Repository
from repositories.descriptor import Column, TableDescriptor
from repositories.exceptions import MissingIdentifier, MissingRequiredField, RepositoryError

__all__ = [
    "Column",
    "MissingIdentifier",
    "MissingRequiredField",
    "Repository",
    "RepositoryError",
    "TableDescriptor",
]
