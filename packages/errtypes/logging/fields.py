"""Canonical logging field names.

Formatters render exactly these keys; records carry the optional ones through
``extra=``.
"""

TIMESTAMP = "timestamp"
LEVEL = "level"
LOGGER = "logger"
MESSAGE = "message"

# Classification fields.
ERROR_CATEGORY = "error_category"
STATUS_CODE = "status_code"

# Common service-level fields.
SERVICE = "service"
ENVIRONMENT = "environment"

STRUCTURED_FIELDS: tuple[str, ...] = (
    SERVICE,
    ENVIRONMENT,
    ERROR_CATEGORY,
    STATUS_CODE,
)
