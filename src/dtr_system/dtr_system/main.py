from __future__ import annotations

import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module, load_settings

from .container import Container, build_container
from .attendance.controller import register as register_attendance

logger = logging.getLogger("dtr-system")


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = load_settings()
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    db_config = getattr(settings, "DB_CONFIG")
    punch_db_config = getattr(settings, "PUNCH_DB_CONFIG", None)

    if container is None:
        container = build_container(db_config=db_config, punch_db_config=punch_db_config)
        logger.info(
            "settings=%s db=%s punches=%s",
            settings_module,
            container.conn.describe(),
            container.punch_conn.describe(),
        )

    register_attendance(app, container)

    return app
