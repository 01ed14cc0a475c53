"""Create the database (if needed) and apply database/schema.sql.

Usage: APP_ENV=development python scripts/init_db.py
"""
from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from config import get_settings_module  # noqa: E402

from src.geo_attendance.geo_attendance.database.bootstrap import apply_schema, list_tables  # noqa: E402
from src.geo_attendance.geo_attendance.database.connection import DBConfig  # noqa: E402


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    settings = importlib.import_module(get_settings_module())

    apply_schema(settings.DB_CONFIG, schema_path=ROOT / "database" / "schema.sql")
    tables = list_tables(settings.DB_CONFIG)
    print(f"{DBConfig.from_dict(settings.DB_CONFIG).describe()}: {', '.join(tables)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
