from __future__ import annotations

import importlib
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .app_logger import get_logger, setup_logging
from .common.http import error_response
from .config import get_settings_module
from .container import build_container
from .core.constants import DEFAULT_PORT, DEFAULT_TOKEN_DAYS
from .database.bootstrap import apply_schema, ensure_demo_data, list_tables
from .database.connection import db, describe_target

from .attendance.controller import register as register_attendance
from .classes.controller import register as register_classes
from .sessions.controller import register as register_sessions
from .stats.controller import register as register_stats
from .students.controller import register as register_students
from .subjects.controller import register as register_subjects
from .users.controller import register as register_users

logger = get_logger(__name__)


def create_app(settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    setup_logging(getattr(settings, "LOG_LEVEL", None))

    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["SQLALCHEMY_DATABASE_URI"] = getattr(settings, "SQLALCHEMY_DATABASE_URI")
    app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = False
    app.config["PORT"] = int(getattr(settings, "PORT", DEFAULT_PORT))
    db.init_app(app)

    logger.info("settings=%s db=%s", settings_module, describe_target(db_config))

    if getattr(settings, "AUTO_INIT_DB", False):
        apply_schema(app)
        logger.info("schema ready (tables=%d)", len(list_tables(app)))
    if getattr(settings, "AUTO_SEED_DB", False):
        ensure_demo_data(app)
        logger.info("demo seed ready")

    jwt_secret = getattr(settings, "JWT_SECRET", None)
    if not jwt_secret:
        logger.warning("JWT_SECRET is not set; authenticated routes will answer 500")

    container = build_container(
        jwt_secret=jwt_secret,
        jwt_expires_days=int(getattr(settings, "JWT_EXPIRES_DAYS", DEFAULT_TOKEN_DAYS)),
    )
    app.extensions["container"] = container

    register_users(app, container)
    register_classes(app, container)
    register_subjects(app, container)
    register_students(app, container)
    register_sessions(app, container)
    register_attendance(app, container)
    register_stats(app, container)

    @app.errorhandler(404)
    def not_found(_e):
        return error_response("Not found", 404)

    @app.errorhandler(405)
    def method_not_allowed(_e):
        return error_response("Method not allowed", 405)

    return app
