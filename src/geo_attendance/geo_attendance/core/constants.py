"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

TWO_FACTOR_CODE_LENGTH = 6
DEFAULT_TWO_FACTOR_TTL_MINUTES = 5

EARTH_RADIUS_M = 6_371_000

DEFAULT_PRIMARY_OFFICE_ID = 1

DEFAULT_MAIL_TIMEOUT_SECONDS = 10

MIN_PASSWORD_LENGTH = 6
STUDENT_REFERENCE_PREFIX = "NIM"
