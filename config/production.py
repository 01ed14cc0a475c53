import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "geo_attendance"),
    "connect_timeout": int(os.getenv("DB_CONNECT_TIMEOUT", "10")),
}

MAIL_CONFIG = {
    "host": os.getenv("MAIL_HOST", ""),
    "port": int(os.getenv("MAIL_PORT", "587")),
    "username": os.getenv("MAIL_USER", ""),
    "password": os.getenv("MAIL_PASSWORD", ""),
    "sender": os.getenv("MAIL_SENDER", ""),
    "use_tls": bool(int(os.getenv("MAIL_USE_TLS", "1"))),
    "timeout_seconds": float(os.getenv("MAIL_TIMEOUT", "10")),
}

PRIMARY_OFFICE_ID = int(os.getenv("PRIMARY_OFFICE_ID", "1"))
TWO_FACTOR_TTL_MINUTES = int(os.getenv("TWO_FACTOR_TTL_MINUTES", "5"))

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
