"""Utility functions for application configuration management.

All configuration is read from environment variables. Every setting has a
sensible default, so an empty environment yields a working local setup.

Environment variables:
    APP_ENV                   : application environment (default: 'local')
    APP_NAME                  : application name (optional)
    BASE_URL                  : public prefix for short links (default: 'http://localhost:3000')
    SHORTCODE_LENGTH          : length of generated shortcodes (default: 6)
    DEFAULT_VALIDITY_MINUTES  : validity used when a request omits one (default: 30)
    MAX_GENERATION_ATTEMPTS   : shortcode generation retry bound (default: 10)
    SWEEP_INTERVAL_SECONDS    : period of the expired-link sweeper (default: 300)
    LOG_LEVEL                 : root log level (default: 'INFO')
    LOG_FORMAT                : 'json' or 'text' (default: 'json')

Functions:
    app_env() -> str
        Return the current application environment, defaulting to 'local'.

    app_name() -> str | None
        Return the application name, or None if not set.

    load_config() -> dict
        Read and validate every setting into a plain dictionary.

Example:
    >>> from ttlshortener.utils.config import load_config
    >>> config = load_config()
    >>> config['shortcode_length']
    6
"""

import os
import logging

from ttlshortener.types import AppConfig
from ttlshortener.exceptions import BadConfigurationError
from ttlshortener.utils.constants import ENV, Defaults, Shortcode
from ttlshortener.utils.logging import LOG_FORMATS


logger = logging.getLogger(__name__)


def app_env() -> str:
    """Return the current application environment by reading 'APP_ENV'

    Example:
        >>> os.environ['APP_ENV'] = 'dev'
        >>> app_env()
        'dev'
    """
    return os.environ.get(ENV.App.APP_ENV, 'local').lower()


def app_name() -> str | None:
    return os.environ.get(ENV.App.APP_NAME)


def _positive_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == '':
        return default

    try:
        value = int(raw)
    except ValueError as e:
        raise BadConfigurationError(f"{name} must be an integer (given value: '{raw}').") from e

    if value <= 0:
        raise BadConfigurationError(f'{name} must be a positive integer (given value: {value}).')
    return value


def load_config() -> AppConfig:
    """Load application configuration from environment variables

    Returns:
        dict: parsed settings keyed by lower-case names, e.g.
              {'app_env': 'local', 'shortcode_length': 6, ...}

    Raises:
        BadConfigurationError:
            If a numeric setting is not a positive integer, the shortcode
            length is outside 3..20 or the log level or format is unsupported.
    """
    shortcode_length = _positive_int(ENV.Store.SHORTCODE_LENGTH, Defaults.SHORTCODE_LENGTH)
    if not Shortcode.MIN_LENGTH <= shortcode_length <= Shortcode.MAX_LENGTH:
        raise BadConfigurationError(
            f'{ENV.Store.SHORTCODE_LENGTH} must be between {Shortcode.MIN_LENGTH} and '
            f'{Shortcode.MAX_LENGTH} (given value: {shortcode_length}).'
        )

    log_format = os.environ.get(ENV.App.LOG_FORMAT, Defaults.LOG_FORMAT).lower()
    if log_format not in LOG_FORMATS:
        raise BadConfigurationError(f"{ENV.App.LOG_FORMAT} must be one of {sorted(LOG_FORMATS)} (given value: '{log_format}').")

    log_level = os.environ.get(ENV.App.LOG_LEVEL, Defaults.LOG_LEVEL).upper()
    if log_level not in logging.getLevelNamesMapping():
        raise BadConfigurationError(f"{ENV.App.LOG_LEVEL} must be a logging level name (given value: '{log_level}').")

    config = {
        'app_env': app_env(),
        'app_name': app_name(),
        'base_url': os.environ.get(ENV.App.BASE_URL, Defaults.BASE_URL).rstrip('/'),
        'shortcode_length': shortcode_length,
        'default_validity': _positive_int(ENV.Store.DEFAULT_VALIDITY_MINUTES, Defaults.VALIDITY_MINUTES),
        'max_generation_attempts': _positive_int(ENV.Store.MAX_GENERATION_ATTEMPTS, Defaults.MAX_GENERATION_ATTEMPTS),
        'sweep_interval': _positive_int(ENV.Store.SWEEP_INTERVAL_SECONDS, Defaults.SWEEP_INTERVAL_SECONDS),
        'log_level': log_level,
        'log_format': log_format,
    }
    logger.debug('Loaded application configuration.', extra={'appEnv': config['app_env']})
    return config
