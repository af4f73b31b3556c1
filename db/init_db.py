"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from db.connection import close_connection, get_connection
from repositories.students_table import StudentsTable
from utils.logger import get_logger

logger = get_logger(__name__)


def create_tables(conn, placeholder: str = "%s") -> bool:
    """
    Create every table of the schema on the given connection.
    Safe to call multiple times: an existing table is left untouched.

    Returns:
        True if the students table was created by this call.
    """
    students = StudentsTable(conn, placeholder=placeholder)
    created = students.create_table()
    if created:
        logger.info(f"Created table '{students.get_table_name()}'.")
    else:
        logger.info(f"Table '{students.get_table_name()}' already exists, skipped.")
    return created


def main() -> None:
    """Open a connection from config, bootstrap the schema, then close it."""
    conn = get_connection()
    try:
        create_tables(conn)
    finally:
        close_connection(conn)


if __name__ == "__main__":
    main()
