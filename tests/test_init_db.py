from unittest.mock import MagicMock

import db.init_db as init_db
from db.init_db import create_tables
from repositories.students_table import StudentsTable


def test_create_tables_is_repeatable(conn):
    assert create_tables(conn, placeholder="?") is True
    assert create_tables(conn, placeholder="?") is False
    assert StudentsTable(conn, placeholder="?").find_all() == []


def test_main_bootstraps_and_closes(monkeypatch, conn):
    close = MagicMock()
    monkeypatch.setattr(init_db, "get_connection", lambda: conn)
    monkeypatch.setattr(init_db, "close_connection", close)

    init_db.main()

    close.assert_called_once_with(conn)
    assert StudentsTable(conn, placeholder="?").find_all() == []
