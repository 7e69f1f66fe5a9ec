"""Bootstrap helpers for configuring the Flask application."""

from __future__ import annotations

import logging
import os

from flask import Flask
from sqlalchemy.engine import make_url

from .error_handlers import register_error_handlers
from .extensions import db, login_manager
from .logging_config import setup_logging
from .module_registry import register_default_modules
from .schema_migrations import migrate_schema


def configure_logging(app: Flask) -> None:
    """Configure application logging if no handlers are present."""

    level_name = str(app.config.get("LOG_LEVEL", "INFO")).upper()
    app.logger.setLevel(getattr(logging, level_name, logging.INFO))

    if not app.logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        handler.setFormatter(formatter)
        app.logger.addHandler(handler)
        app.logger.propagate = False

    if app.config.get("LOG_TO_FILE"):
        setup_logging(app, log_level=level_name, log_dir=app.config.get("LOG_DIR"))

    app.logger.info("Flask app logger configured successfully.")


def register_extensions(app: Flask) -> None:
    """Initialize shared extensions with the Flask app instance."""

    db.init_app(app)
    login_manager.init_app(app)


def register_auth_loaders(app: Flask) -> None:
    """Resolve ``current_user`` from the ``Authorization: Bearer`` header."""

    from ..modules.auth.models import User
    from ..modules.auth.services.credential_service import verify_token

    @login_manager.user_loader
    def load_user(user_id: str):
        return db.session.get(User, int(user_id))

    @login_manager.request_loader
    def load_user_from_request(req):
        scheme, _, token = req.headers.get("Authorization", "").partition(" ")
        if scheme.lower() != "bearer" or not token.strip():
            return None
        payload = verify_token(token.strip())
        if payload is None:
            return None
        return db.session.get(User, payload["userId"])

    @login_manager.unauthorized_handler
    def unauthorized():
        from .error_handlers import error_response

        return error_response("Authentication required", "UNAUTHENTICATED", 401)


def register_blueprints(app: Flask) -> None:
    """Register all default blueprints with the app."""

    register_default_modules(app)
    register_error_handlers(app)


def ensure_database_directory(app: Flask) -> None:
    """Make sure the parent directory of a file-backed SQLite database exists."""

    url = make_url(app.config["SQLALCHEMY_DATABASE_URI"])
    if url.get_backend_name() != "sqlite" or not url.database or url.database == ":memory:":
        return
    directory = os.path.dirname(os.path.abspath(url.database))
    os.makedirs(directory, exist_ok=True)


def initialize_database(app: Flask) -> None:
    """Create missing tables, then bring existing ones up to date."""

    from .. import models  # noqa: F401  (register every table on the metadata)

    ensure_database_directory(app)
    db.create_all()
    added = migrate_schema(db.engine, app.logger)
    if added:
        app.logger.info("Database migration completed: %s", added)
    app.logger.info("Database initialized successfully")
