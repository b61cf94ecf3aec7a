from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import Container, build_container
from .dashboard.controller import register as register_dashboard
from .storage.controller import register as register_storage
from .storage.selector import StorageSettings, write_order

logger = logging.getLogger("attendance_dashboard")


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.sort_keys = False

    logging.basicConfig(
        level=str(getattr(settings, "LOG_LEVEL", "INFO")).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if container is None:
        container = build_container(
            storage_settings=StorageSettings.from_settings(settings),
            strict_counts=bool(getattr(settings, "STRICT_COUNTS", False)),
        )

    storage = container.storage_settings
    logger.info(
        "settings=%s supabase=%s data_file=%s serverless=%s write_order=%s",
        settings_module,
        "configured" if storage.database_configured else "not configured",
        storage.data_file,
        storage.serverless,
        [k.value for k in write_order(storage)],
    )

    register_attendance(app, container)
    register_dashboard(app, container)
    register_storage(app, container)

    return app
