from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .attendance.controller import register as register_attendance
from .config import get_settings_module
from .container import Container, build_container
from .students.controller import register as register_students

logger = logging.getLogger(__name__)


def create_app(*, settings_module: Optional[str] = None, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if container is None:
        container = build_container(
            students_fixture=getattr(settings, "STUDENTS_FIXTURE", "") or None,
            attendance_fixture=getattr(settings, "ATTENDANCE_FIXTURE", "") or None,
            latency_scale=float(getattr(settings, "LATENCY_SCALE", 0.0)),
        )
    app.extensions["classroom_attendance"] = container

    if app.config["DEBUG"]:
        logger.info(
            "settings=%s students=%d attendance=%d",
            settings_module,
            len(container.students_repo.list_all()),
            len(container.attendance_repo.list_all()),
        )

    register_students(app, container)
    register_attendance(app, container)

    return app
