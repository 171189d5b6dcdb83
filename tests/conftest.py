from __future__ import annotations

from datetime import datetime

import pytest

from src.school_attendance.school_attendance.container import build_container
from src.school_attendance.school_attendance.database.bootstrap import apply_schema
from src.school_attendance.school_attendance.database.sqlite_database import SQLiteDatabase


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 3, 1, 7, 30, 0)


@pytest.fixture
def db(tmp_path):
    database = SQLiteDatabase(tmp_path / "absensi.db")
    apply_schema(database)
    return database


@pytest.fixture
def container(db):
    return build_container(db=db)


@pytest.fixture
def make_teacher(container):
    def _make(username: str = "guru1", name: str = "Bu Sari", password: str = "rahasia123") -> int:
        return container.user_service.create_teacher(
            name=name,
            username=username,
            password=password,
            subject="Matematika",
        )

    return _make


@pytest.fixture
def app(tmp_path, monkeypatch):
    from src.school_attendance.school_attendance.main import create_app

    monkeypatch.setenv("APP_ENV", "testing")
    return create_app({"SQLITE_PATH": str(tmp_path / "app.db")})


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def app_container(app):
    return app.extensions["container"]


def login(client, username: str, password: str):
    return client.post("/", data={"username": username, "password": password})
