"""
db/table.py
-----------
Generic contract implemented by every single-entity table accessor.
"""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

E = TypeVar("E")
K = TypeVar("K")


class Table(ABC, Generic[E, K]):
    """CRUD operations over the table backing one entity type."""

    @abstractmethod
    def get_table_name(self) -> str:
        """Name of the backing table."""

    @abstractmethod
    def create_table(self) -> bool:
        """Create the table. Returns False if it could not be created."""

    @abstractmethod
    def drop_table(self) -> bool:
        """Drop the table. Returns False if it could not be dropped."""

    @abstractmethod
    def find_by_primary_key(self, key: K) -> Optional[E]:
        """Fetch one entity by key, or None if absent."""

    @abstractmethod
    def find_all(self) -> list[E]:
        """Fetch every entity in the table."""

    @abstractmethod
    def save(self, entity: E) -> bool:
        """Insert an entity. Returns False if the insert was rejected."""

    @abstractmethod
    def delete(self, key: K) -> bool:
        """Delete by key. Returns True if a row was removed."""

    @abstractmethod
    def update(self, entity: E) -> bool:
        """Update an entity by key. Returns True if a row was modified."""
