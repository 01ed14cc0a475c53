import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "geo_attendance"),
    "connect_timeout": int(os.getenv("DB_CONNECT_TIMEOUT", "10")),
}

# SMTP transport for 2FA codes. Leaving MAIL_HOST empty makes login fail with a configuration error.
MAIL_CONFIG = {
    "host": os.getenv("MAIL_HOST", "localhost"),
    "port": int(os.getenv("MAIL_PORT", "1025")),
    "username": os.getenv("MAIL_USER", ""),
    "password": os.getenv("MAIL_PASSWORD", ""),
    "sender": os.getenv("MAIL_SENDER", "no-reply@localhost"),
    "use_tls": bool(int(os.getenv("MAIL_USE_TLS", "0"))),
    "timeout_seconds": float(os.getenv("MAIL_TIMEOUT", "10")),
}

PRIMARY_OFFICE_ID = int(os.getenv("PRIMARY_OFFICE_ID", "1"))
TWO_FACTOR_TTL_MINUTES = int(os.getenv("TWO_FACTOR_TTL_MINUTES", "5"))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo data on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
