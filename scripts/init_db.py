from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.incidence_system.incidence_system.common.logging_config import configure_logging
from src.incidence_system.incidence_system.database.bootstrap import create_schema, list_tables
from src.incidence_system.incidence_system.database.connection import DatabaseConnection, DBConfig


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    conn = DatabaseConnection(DBConfig(url=settings.DATABASE_URL))
    try:
        create_schema(conn)
        tables = list_tables(conn)
        print(f"OK: schema ready -> {conn.url} (tables={len(tables)})")
    finally:
        conn.dispose()


if __name__ == "__main__":
    main()
