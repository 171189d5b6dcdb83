import os

SECRET_KEY = "test-secret"

DB_BACKEND = "sqlite"
SQLITE_PATH = os.getenv("SQLITE_PATH", "data/absensi_test.db")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "absensi_test"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
SESSION_DAYS = 1

AUTO_INIT_DB = True
AUTO_SEED_DB = True
