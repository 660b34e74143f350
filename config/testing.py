SECRET_KEY = "test-secret"
JWT_SECRET = "test-jwt-secret"

# In-memory SQLite, one shared connection per app
DATABASE_URL = "sqlite://"

SESSION_TTL_HOURS = 24
SESSION_COOKIE_SECURE = False

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
SQL_ECHO = False

AUTO_INIT_DB = True
AUTO_SEED_DB = False
