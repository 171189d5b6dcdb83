from __future__ import annotations

import re
from typing import List

import mysql.connector

from .base import Database
from .connection import DBConfig

_PLACEHOLDER = re.compile(r"\?")


class MySQLDatabase(Database):
    """Networked MySQL store (mysql-connector)."""

    dialect = "mysql"

    def __init__(self, config: DBConfig):
        super().__init__()
        self._config = config

    @property
    def config(self) -> DBConfig:
        return self._config

    def adapt_sql(self, sql: str) -> str:
        return _PLACEHOLDER.sub("%s", sql)

    def open_cursor(self, conn):
        return conn.cursor(dictionary=True)

    def connect(self):
        return mysql.connector.connect(
            host=self._config.host,
            port=int(self._config.port),
            user=self._config.user,
            password=self._config.password,
            database=self._config.database,
        )

    def ensure_database_exists(self) -> None:
        conn = mysql.connector.connect(
            host=self._config.host,
            port=int(self._config.port),
            user=self._config.user,
            password=self._config.password,
            use_pure=True,
        )
        try:
            cur = conn.cursor()
            cur.execute(
                f"CREATE DATABASE IF NOT EXISTS `{self._config.database}` "
                "CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
            )
            conn.commit()
        finally:
            conn.close()

    def list_tables(self) -> List[str]:
        with self.cursor() as cur:
            cur.execute("SHOW TABLES")
            return [list(row.values())[0] for row in cur.fetchall()]
