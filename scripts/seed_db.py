"""Load the office location, sample notifications and demo accounts.

Run init_db.py first. Demo passwords are listed in bootstrap.DEMO_USERS.
"""
from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from config import get_settings_module  # noqa: E402

from src.geo_attendance.geo_attendance.database.bootstrap import apply_seed_sql, ensure_demo_users  # noqa: E402


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    settings = importlib.import_module(get_settings_module())

    apply_seed_sql(settings.DB_CONFIG, seed_path=ROOT / "database" / "seed.sql")
    count = ensure_demo_users(settings.DB_CONFIG)
    print(f"Seeded office, notifications and {count} demo users")
    return 0


if __name__ == "__main__":
    sys.exit(main())
