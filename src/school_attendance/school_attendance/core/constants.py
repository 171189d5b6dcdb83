"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

CLASS_LEVELS = (7, 8, 9)
DEFAULT_EXCUSED_DAYS = 1
MAX_EXCUSED_DAYS = 366
DEFAULT_SESSION_DAYS = 7
MIN_PASSWORD_LENGTH = 6

DEFAULT_ADMIN_NAME = "Administrator"
DEFAULT_ADMIN_EMAIL = "admin@example.com"
DEFAULT_ADMIN_USERNAME = "admin"
DEFAULT_ADMIN_PASSWORD = "admin123"

EXPORT_CSV_HEADER = (
    "Tanggal",
    "Guru",
    "Siswa",
    "Kelas",
    "Status",
    "Tanggal Sakit",
    "Mulai Izin",
    "Hari Izin",
    "Alasan Izin",
    "Waktu Input",
)
