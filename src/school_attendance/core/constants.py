"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_TOKEN_DAYS = 7
MIN_PASSWORD_LENGTH = 6
JWT_ALGORITHM = "HS256"
DEFAULT_PORT = 3000
