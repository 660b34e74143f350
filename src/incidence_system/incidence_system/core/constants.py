"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100
DEFAULT_SESSION_HOURS = 24
SESSION_COOKIE_NAME = "token"
MIN_PASSWORD_LENGTH = 6
EXPORT_COLUMNS = ("nombre_periodo", "codigo_empleado", "codigo_incidencia")
