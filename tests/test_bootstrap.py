from __future__ import annotations

from src.school_attendance.school_attendance.database.bootstrap import _iter_sql_statements


def test_splits_statements_and_keeps_semicolons_inside_quotes():
    sql = """
    CREATE TABLE a (id INTEGER);
    INSERT INTO a VALUES('x;y');

    INSERT INTO a VALUES("p;q")
    """

    assert list(_iter_sql_statements(sql)) == [
        "CREATE TABLE a (id INTEGER)",
        "INSERT INTO a VALUES('x;y')",
        'INSERT INTO a VALUES("p;q")',
    ]


def test_schema_creates_all_tables(db):
    assert db.list_tables() == ["attendance", "students", "teacher_attendance_status", "users"]
