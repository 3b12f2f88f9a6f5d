from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .reports.controller import register as register_reports
from .schedules.repository import ScheduleSource


def create_app(*, schedules: Optional[ScheduleSource] = None) -> Flask:
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
    logger = logging.getLogger(__name__)

    container = build_container(settings=settings, schedules=schedules)
    logger.info(
        "timecard-engine settings=%s closing_day=%s expected_working_days=%s",
        settings_module,
        container.period_resolver.default_closing_day,
        container.expected_working_days,
    )

    register_reports(app, container)

    return app
