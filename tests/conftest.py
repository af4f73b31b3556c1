"""
Shared fixtures: a real in-memory sqlite3 database for behaviour tests
and mock connections whose driver fails, for the error paths.
"""

import sqlite3
from datetime import date
from unittest.mock import MagicMock

import pytest

from repositories.students_table import StudentsTable

# Store dates as ISO text, the same shape sqlite3 returns them in.
sqlite3.register_adapter(date, date.isoformat)


class FakeDriverError(Exception):
    """Stands in for a driver's DB-API ``Error`` class."""


@pytest.fixture
def conn():
    connection = sqlite3.connect(":memory:")
    yield connection
    connection.close()


@pytest.fixture
def table(conn):
    students = StudentsTable(conn, placeholder="?")
    assert students.create_table()
    return students


@pytest.fixture
def broken_conn():
    """A connection whose every statement fails with a driver error."""
    connection = MagicMock()
    connection.Error = FakeDriverError
    connection.cursor.return_value.execute.side_effect = FakeDriverError("connection lost")
    return connection
