from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import Container, build_container
from .logging_setup import configure_logging
from .upstream.config import UpstreamConfig
from .dashboard.controller import register as register_dashboard
from .directory.controller import register as register_directory
from .exports.controller import register as register_exports
from .profiles.controller import register as register_profiles
from .substitutes.controller import register as register_substitutes

logger = logging.getLogger(__name__)


def create_app(*, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    configure_logging(settings)

    upstream_config = UpstreamConfig.from_settings(settings)
    if not upstream_config.attendance_export_url:
        logger.warning("No attendance export endpoint configured (set UPSTREAM_BASE_URL or ATTENDANCE_EXPORT_URL)")
    logger.info("settings=%s upstream=%s", settings_module, upstream_config.attendance_export_url or "-")

    container = container or build_container(upstream_config=upstream_config)

    register_dashboard(app, container)
    register_exports(app, container)
    register_substitutes(app, container)
    register_profiles(app, container)
    register_directory(app, container)

    return app
