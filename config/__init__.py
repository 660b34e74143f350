import os
from urllib.parse import quote_plus


def get_settings_module() -> str:
    # APP_ENV selects the settings module; development is the default
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "config.production"

    if env in {"test", "testing"}:
        return "config.testing"

    return "config.development"


def database_url_from_env(default_name: str) -> str:
    """DATABASE_URL when set, otherwise a MySQL URL built from the DB_* variables."""
    url = os.getenv("DATABASE_URL")
    if url:
        return url

    user = os.getenv("DB_USER", "root")
    password = quote_plus(os.getenv("DB_PASSWORD", ""))
    host = os.getenv("DB_HOST", "localhost")
    port = int(os.getenv("DB_PORT", "3306"))
    name = os.getenv("DB_NAME", default_name)
    return f"mysql+mysqlconnector://{user}:{password}@{host}:{port}/{name}?charset=utf8mb4"
