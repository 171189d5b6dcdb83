from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.school_attendance.school_attendance.core.constants import DEFAULT_ADMIN_PASSWORD, DEFAULT_ADMIN_USERNAME
from src.school_attendance.school_attendance.database.bootstrap import apply_schema, ensure_default_admin
from src.school_attendance.school_attendance.database.connection import create_database


def main() -> None:
    parser = argparse.ArgumentParser(description="Create tables and the first admin account.")
    parser.add_argument("--username", default=DEFAULT_ADMIN_USERNAME)
    parser.add_argument("--password", default=DEFAULT_ADMIN_PASSWORD)
    args = parser.parse_args()

    settings = importlib.import_module(get_settings_module())
    db = create_database(
        backend=settings.DB_BACKEND,
        sqlite_path=settings.SQLITE_PATH,
        db_config=dict(settings.DB_CONFIG),
    )

    apply_schema(db)
    if ensure_default_admin(db, username=args.username, password=args.password):
        print(f"OK: Admin account '{args.username}' created")
    else:
        print("OK: An admin account already exists, nothing to do")


if __name__ == "__main__":
    main()
