from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.school_attendance.school_attendance.database.bootstrap import apply_schema
from src.school_attendance.school_attendance.database.connection import create_database


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db = create_database(
        backend=settings.DB_BACKEND,
        sqlite_path=settings.SQLITE_PATH,
        db_config=dict(settings.DB_CONFIG),
    )

    apply_schema(db)
    tables = db.list_tables()
    print(f"OK: Applied {db.dialect} schema (tables={len(tables)}: {', '.join(tables)})")


if __name__ == "__main__":
    main()
