"""
repositories/students_table.py
------------------------------
Data access layer for student records.
All SQL queries related to the `students` table live here.

Works with any DB-API 2.0 connection. The positional parameter marker
differs between drivers (psycopg2 uses ``%s``, sqlite3 uses ``?``) and is
passed in at construction.
"""

from contextlib import closing
from datetime import date
from typing import Optional

from db.errors import DataAccessError
from db.table import Table
from models.student import Student
from utils.dates import from_sql_date, to_sql_date
from utils.logger import get_logger

logger = get_logger(__name__)


def _driver_error(connection) -> type:
    """Exception base class of the connection's driver (PEP 249 extension)."""
    error = getattr(connection, "Error", None)
    if isinstance(error, type) and issubclass(error, BaseException):
        return error
    return Exception


_NAME_WIDTH = 40


def _unpad(value: Optional[str]) -> Optional[str]:
    # PostgreSQL returns CHAR(40) values blank-padded to the full width
    if isinstance(value, str) and len(value) == _NAME_WIDTH:
        return value.rstrip()
    return value


class StudentsTable(Table[Student, int]):
    """Repository for CRUD operations on the students table."""

    TABLE_NAME = "students"

    def __init__(self, connection, placeholder: str = "%s") -> None:
        """
        Args:
            connection: An open DB-API connection, owned by the caller.
            placeholder: The driver's positional parameter marker.

        Raises:
            ValueError: If no connection is given.
        """
        if connection is None:
            raise ValueError("StudentsTable requires an open database connection.")
        self._conn = connection
        self._ph = placeholder
        self._db_error = _driver_error(connection)

    def get_table_name(self) -> str:
        return self.TABLE_NAME

    # ── SCHEMA ────────────────────────────────────────────

    def create_table(self) -> bool:
        """
        Create the students table.

        Returns:
            True on success, False if it already exists or creation failed.
        """
        sql = (
            f"CREATE TABLE {self.TABLE_NAME} ("
            "id INT NOT NULL PRIMARY KEY, "
            f"firstName CHAR({_NAME_WIDTH}), "
            f"lastName CHAR({_NAME_WIDTH}), "
            "birthday DATE"
            ")"
        )
        return self._execute_or_false(sql, action="create table")

    def drop_table(self) -> bool:
        """
        Drop the students table.

        Returns:
            True on success, False if it does not exist or the drop failed.
        """
        return self._execute_or_false(f"DROP TABLE {self.TABLE_NAME}", action="drop table")

    # ── READ ──────────────────────────────────────────────

    def find_by_primary_key(self, student_id: int) -> Optional[Student]:
        """
        Fetch a single student by ID.

        Returns:
            A Student object or None if not found.

        Raises:
            DataAccessError: On any database failure.
        """
        sql = f"SELECT * FROM {self.TABLE_NAME} WHERE id = {self._ph}"
        students = self._query(sql, (student_id,))
        return students[0] if students else None

    def find_all(self) -> list[Student]:
        """
        Fetch every student, in the order the database returns them.

        Raises:
            DataAccessError: On any database failure.
        """
        return self._query(f"SELECT * FROM {self.TABLE_NAME}")

    def find_by_birthday(self, birthday: date) -> list[Student]:
        """
        Fetch all students born on the given date.

        Raises:
            DataAccessError: On any database failure.
        """
        sql = f"SELECT * FROM {self.TABLE_NAME} WHERE birthday = {self._ph}"
        return self._query(sql, (to_sql_date(birthday),))

    # ── CREATE ────────────────────────────────────────────

    def save(self, student: Student) -> bool:
        """
        Insert a new student. A missing birthday is stored as NULL.

        Returns:
            True if inserted, False if the database rejected the row
            (e.g. duplicate primary key).
        """
        ph = self._ph
        sql = (
            f"INSERT INTO {self.TABLE_NAME} (id, firstName, lastName, birthday) "
            f"VALUES ({ph}, {ph}, {ph}, {ph})"
        )
        params = (
            student.id,
            student.first_name,
            student.last_name,
            to_sql_date(student.birthday),
        )
        saved = self._execute_or_false(sql, params, action=f"save student #{student.id}")
        if saved:
            logger.info(f"Saved student #{student.id}")
        return saved

    # ── UPDATE ────────────────────────────────────────────

    def update(self, student: Student) -> bool:
        """
        Update name and birthday of an existing student.

        Args:
            student: Student with updated fields; birthday is required.

        Returns:
            True if a row was updated, False otherwise.

        Raises:
            DataAccessError: If the student has no birthday, or on any
                database failure.
        """
        if student.birthday is None:
            raise DataAccessError(
                f"Cannot update student #{student.id}: birthday is required."
            )
        ph = self._ph
        sql = (
            f"UPDATE {self.TABLE_NAME} "
            f"SET firstName = {ph}, lastName = {ph}, birthday = {ph} "
            f"WHERE id = {ph}"
        )
        params = (
            student.first_name,
            student.last_name,
            to_sql_date(student.birthday),
            student.id,
        )
        return self._execute_rowcount(sql, params, action=f"update student #{student.id}") > 0

    # ── DELETE ────────────────────────────────────────────

    def delete(self, student_id: int) -> bool:
        """
        Delete a student by ID.

        Returns:
            True if a row was deleted, False otherwise.

        Raises:
            DataAccessError: On any database failure.
        """
        sql = f"DELETE FROM {self.TABLE_NAME} WHERE id = {self._ph}"
        deleted = self._execute_rowcount(sql, (student_id,), action=f"delete student #{student_id}") > 0
        if deleted:
            logger.info(f"Deleted student #{student_id}")
        return deleted

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _run(cur, sql: str, params: Optional[tuple]) -> None:
        if params is None:
            cur.execute(sql)
        else:
            cur.execute(sql, params)

    def _execute_or_false(self, sql: str, params: Optional[tuple] = None, *, action: str) -> bool:
        """Run a write whose failure is expected; report it as False."""
        try:
            with closing(self._conn.cursor()) as cur:
                self._run(cur, sql, params)
            self._conn.commit()
            return True
        except self._db_error as e:
            self._rollback()
            logger.warning(f"Could not {action}: {e}")
            return False

    def _execute_rowcount(self, sql: str, params: tuple, *, action: str) -> int:
        """Run a write and return the affected row count; failures raise."""
        try:
            with closing(self._conn.cursor()) as cur:
                self._run(cur, sql, params)
                count = cur.rowcount
            self._conn.commit()
            return count
        except self._db_error as e:
            self._rollback()
            logger.error(f"Failed to {action}: {e}")
            raise DataAccessError(f"Failed to {action}") from e

    def _query(self, sql: str, params: Optional[tuple] = None) -> list[Student]:
        """Run a SELECT and map its rows; failures raise."""
        try:
            with closing(self._conn.cursor()) as cur:
                self._run(cur, sql, params)
                return self._read_students(cur)
        except self._db_error as e:
            self._rollback()
            logger.error(f"Query on {self.TABLE_NAME} failed: {e}")
            raise DataAccessError(f"Query on {self.TABLE_NAME} failed") from e

    def _read_students(self, cur) -> list[Student]:
        """
        Convert every remaining row of an executed cursor to a Student.

        Columns are matched by name, case-insensitively. If a row cannot be
        fetched or converted, reading stops and the students collected so
        far are returned; the failure is logged, not raised. A fetch error
        also rolls the connection back.
        """
        students: list[Student] = []
        try:
            columns = {desc[0].lower(): i for i, desc in enumerate(cur.description)}
            while True:
                row = cur.fetchone()
                if row is None:
                    break
                students.append(Student(
                    id=int(row[columns["id"]]),
                    first_name=_unpad(row[columns["firstname"]]),
                    last_name=_unpad(row[columns["lastname"]]),
                    birthday=from_sql_date(row[columns["birthday"]]),
                ))
        except self._db_error as e:
            self._rollback()
            logger.warning(
                f"Stopped reading {self.TABLE_NAME} after {len(students)} row(s): {e}"
            )
        except (ValueError, TypeError, KeyError) as e:
            logger.warning(
                f"Stopped reading {self.TABLE_NAME} after {len(students)} row(s): {e}"
            )
        return students

    def _rollback(self) -> None:
        """Roll back after a failed statement; a lost connection is only logged."""
        try:
            self._conn.rollback()
        except self._db_error as e:
            logger.warning(f"Rollback on {self.TABLE_NAME} failed: {e}")
