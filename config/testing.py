import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "geo_attendance_test"),
}

MAIL_CONFIG = {
    "host": "",
    "port": 1025,
    "username": "",
    "password": "",
    "sender": "",
    "use_tls": False,
    "timeout_seconds": 1,
}

PRIMARY_OFFICE_ID = 1
TWO_FACTOR_TTL_MINUTES = 5

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
