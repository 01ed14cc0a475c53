from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .database.bootstrap import apply_schema, apply_seed_sql, ensure_demo_users, list_tables
from .database.connection import DBConfig

from .container import Container, build_container
from .attendance.controller import register as register_attendance
from .locations.controller import register as register_locations
from .notifications.controller import register as register_notifications
from .users.controller import register as register_users

logger = logging.getLogger("geo_attendance")

DATABASE_DIR = Path(__file__).resolve().parents[3] / "database"


def create_app(container: Optional[Container] = None) -> Flask:
    """Application factory.

    Pass a prebuilt `container` (e.g. over in-memory repositories) to skip
    all database and SMTP wiring.
    """

    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info("settings=%s db=%s", settings_module, DBConfig.from_dict(db_config).describe())

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=DATABASE_DIR / "schema.sql")
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(db_config, seed_path=DATABASE_DIR / "seed.sql")
            ensure_demo_users(db_config)
            logger.info("demo seed ready")

        container = build_container(
            db_config=db_config,
            mail_config=getattr(settings, "MAIL_CONFIG", {}),
            primary_office_id=int(getattr(settings, "PRIMARY_OFFICE_ID", 1)),
            two_factor_ttl_minutes=int(getattr(settings, "TWO_FACTOR_TTL_MINUTES", 5)),
        )

    register_users(app, container)
    register_locations(app, container)
    register_attendance(app, container)
    register_notifications(app, container)

    return app
