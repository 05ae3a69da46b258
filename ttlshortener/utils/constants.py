from enum import StrEnum


class Defaults:
    """Default values used when configuration is not provided."""

    BASE_URL = 'http://localhost:3000'
    SHORTCODE_LENGTH = 6
    VALIDITY_MINUTES = 30
    MAX_GENERATION_ATTEMPTS = 10
    SWEEP_INTERVAL_SECONDS = 300  # 5 minutes
    LOG_LEVEL = 'INFO'
    LOG_FORMAT = 'json'


class Shortcode:
    """Format bounds for user-supplied shortcodes."""

    MIN_LENGTH = 3
    MAX_LENGTH = 20


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        APP_NAME = 'APP_NAME'
        BASE_URL = 'BASE_URL'
        LOG_LEVEL = 'LOG_LEVEL'
        LOG_FORMAT = 'LOG_FORMAT'

    class Store(StrEnum):
        SHORTCODE_LENGTH = 'SHORTCODE_LENGTH'
        DEFAULT_VALIDITY_MINUTES = 'DEFAULT_VALIDITY_MINUTES'
        MAX_GENERATION_ATTEMPTS = 'MAX_GENERATION_ATTEMPTS'
        SWEEP_INTERVAL_SECONDS = 'SWEEP_INTERVAL_SECONDS'


# Error codes
UNKNOWN_INTERNAL_SERVER_ERROR = 'UNKNOWN_INTERNAL_SERVER_ERROR'
