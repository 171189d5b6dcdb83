from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

logger = logging.getLogger(__name__)


@dataclass
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str

    @classmethod
    def from_mapping(cls, db_config: Mapping[str, Any]) -> "DBConfig":
        return cls(
            host=str(db_config.get("host", "localhost")),
            port=int(db_config.get("port", 3306)),
            user=str(db_config.get("user", "root")),
            password=str(db_config.get("password", "")),
            database=str(db_config.get("database", "absensi")),
        )


def create_database(*, backend: str, sqlite_path: Optional[str] = None, db_config: Optional[Mapping[str, Any]] = None):
    """Pick the storage implementation configured for this process."""

    backend = (backend or "sqlite").lower()

    if backend == "mysql":
        from .mysql_database import MySQLDatabase

        config = DBConfig.from_mapping(db_config or {})
        logger.info("Using MySQL backend %s@%s:%s/%s", config.user, config.host, config.port, config.database)
        return MySQLDatabase(config)

    if backend == "sqlite":
        from .sqlite_database import SQLiteDatabase

        path = sqlite_path or "data/absensi.db"
        logger.info("Using SQLite backend %s", path)
        return SQLiteDatabase(path)

    raise ValueError(f"Unsupported DB_BACKEND: {backend!r}")
