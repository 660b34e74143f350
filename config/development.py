import os

from config import database_url_from_env

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")
JWT_SECRET = os.getenv("JWT_SECRET", SECRET_KEY)

DATABASE_URL = database_url_from_env("incidence_db")

SESSION_TTL_HOURS = int(os.getenv("SESSION_TTL_HOURS", "24"))
SESSION_COOKIE_SECURE = False

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
SQL_ECHO = bool(int(os.getenv("SQL_ECHO", "0")))

# If enabled, missing tables are created on startup
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo data on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
