from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import List

from .base import Database


class SQLiteDatabase(Database):
    """Local file-backed store."""

    dialect = "sqlite"

    def __init__(self, path: str | Path):
        super().__init__()
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def connect(self):
        self._path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(str(self._path), timeout=10)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
        return conn

    def list_tables(self) -> List[str]:
        rows = self.fetchall("SELECT name FROM sqlite_master WHERE type='table' AND name NOT LIKE 'sqlite_%' ORDER BY name")
        return [r["name"] for r in rows]
