"""
models/student.py
-----------------
Domain model for a student record.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass
class Student:
    """
    Represents a single student.

    Attributes:
        id: Database primary key.
        first_name: Given name (nullable).
        last_name: Family name (nullable).
        birthday: Date of birth, or None when unknown.
    """
    id: int
    first_name: Optional[str]
    last_name: Optional[str]
    birthday: Optional[date] = None

    def has_birthday(self) -> bool:
        """Returns True if a birthday is recorded."""
        return self.birthday is not None

    def __str__(self) -> str:
        born = self.birthday.isoformat() if self.birthday else "-"
        return f"#{self.id} {self.first_name or ''} {self.last_name or ''} | {born}"
