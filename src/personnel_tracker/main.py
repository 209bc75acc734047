from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .config import get_settings_module
from .container import Container, build_container, build_store
from .core.errors import register_error_handlers
from .core.logging import setup_logging

from .attendance.controller import register as register_attendance
from .departments.controller import register as register_departments
from .personnel.controller import register as register_personnel
from .reports.controller import register as register_reports

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.sort_keys = False

    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    if container is None:
        backend = getattr(settings, "STORE_BACKEND", "memory")
        db_config = getattr(settings, "DB_CONFIG", {})
        store = build_store(
            backend=backend,
            db_config=db_config,
            auto_init_db=bool(getattr(settings, "AUTO_INIT_DB", False)),
        )
        logger.info("settings=%s store=%s", settings_module, backend)
        container = build_container(store=store)

    app.extensions["container"] = container

    register_error_handlers(app)
    register_personnel(app, container)
    register_departments(app, container)
    register_attendance(app, container)
    register_reports(app, container)

    return app
