from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS

from .config import get_settings_module

from .container import Container, build_container
from .attendance.controller import register as register_attendance
from .media.controller import register as register_media
from .posts.controller import register as register_posts
from .students.controller import register as register_students
from .support.controller import register as register_support

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )
    # Request lines from the dev server are noise next to our own logs.
    logging.getLogger("werkzeug").setLevel(logging.WARNING)
    logging.getLogger("googleapiclient.discovery_cache").setLevel(logging.ERROR)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app = Flask(__name__)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    CORS(app)

    if container is None:
        container = build_container(settings=settings)
    app.extensions["container"] = container

    logger.info(
        "settings=%s class_sheets=%s media=%s",
        settings_module,
        ",".join(container.sheets_config.class_sheets),
        container.media_config.root_dir,
    )

    register_students(app, container)
    register_attendance(app, container)
    register_media(app, container)
    register_posts(app, container)
    register_support(app, container)

    return app
