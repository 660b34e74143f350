from __future__ import annotations

import importlib
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.logging_config import configure_logging, get_logger
from .container import build_container
from .database.bootstrap import create_schema, list_tables, seed_demo_data
from .companies.controller import register as register_companies
from .employees.controller import register as register_employees
from .incidents.controller import register as register_incidents
from .movements.controller import register as register_movements
from .offices.controller import register as register_offices
from .periods.controller import register as register_periods
from .reports.controller import register as register_reports
from .users.controller import register as register_users
from .web.dashboard import register as register_dashboard
from .web.errors import register_error_handlers
from .web.session import register as register_session

logger = get_logger(__name__)


def _load_settings(overrides: Optional[Mapping[str, Any]]) -> tuple[str, dict]:
    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    values = {name: getattr(settings, name) for name in dir(settings) if name.isupper()}
    values.update(overrides or {})
    return settings_module, values


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates", static_folder="../../../static")

    settings_module, settings = _load_settings(overrides)
    app.config.update(settings)
    app.secret_key = settings["SECRET_KEY"]

    configure_logging(settings.get("LOG_LEVEL", "INFO"))
    logger.info("settings=%s", settings_module)

    container = build_container(
        database_url=settings["DATABASE_URL"],
        jwt_secret=settings.get("JWT_SECRET") or settings["SECRET_KEY"],
        session_hours=int(settings.get("SESSION_TTL_HOURS", 24)),
        echo_sql=bool(settings.get("SQL_ECHO", False)),
    )
    logger.info("database=%s", container.conn.url)

    if settings.get("AUTO_INIT_DB"):
        create_schema(container.conn)
        logger.info("schema ready (tables=%s)", len(list_tables(container.conn)))
    if settings.get("AUTO_SEED_DB"):
        seed_demo_data(container.conn)

    app.extensions["container"] = container

    register_error_handlers(app)
    register_session(app, container)
    register_dashboard(app, container)
    register_users(app, container)
    register_companies(app, container)
    register_offices(app, container)
    register_employees(app, container)
    register_incidents(app, container)
    register_periods(app, container)
    register_movements(app, container)
    register_reports(app, container)

    return app
