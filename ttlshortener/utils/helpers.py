"""Helper utilities for request handlers.

Functions:
    base_url() -> str
        Resolve the public base URL from configuration or the request event
    get_short_url() -> str
        Get string representation of short URL for a given shortcode
    isoformat_utc() -> str
        Render a datetime as an ISO-8601 UTC string with a trailing 'Z'
    guarantee_500_response(handler) -> Callable
        Decorator: turn unexpected handler exceptions into a 500 response

Example:
    Typical usage inside a handler:

        >>> from ttlshortener.utils.helpers import base_url
        >>> event = {"requestContext": {"domainName": "sho.rt"}}
        >>> base_url(event)
        'https://sho.rt'

        >>> base_url({})
        'http://localhost:3000'
"""

import os
import json
import logging
import functools
from datetime import datetime, UTC
from typing import Any
from collections.abc import Callable

from ttlshortener.utils.constants import ENV, Defaults, UNKNOWN_INTERNAL_SERVER_ERROR


logger = logging.getLogger(__name__)


def base_url(event: dict[str, Any]) -> str:
    """Resolve the public base URL used to build short links

    Resolution order:
        1. `BASE_URL` environment variable, if set.
        2. `requestContext.domainName` of the event (served over https).
        3. 'http://localhost:3000' as a local fallback.

    Args:
        event (dict): request event passed to a handler

    Returns:
        str: Base URL without a trailing slash, e.g. "https://sho.rt"
    """
    configured = os.environ.get(ENV.App.BASE_URL)
    if configured:
        return configured.rstrip('/')

    domain = event.get('requestContext', {}).get('domainName', '')
    if domain:
        return f'https://{domain}'
    return Defaults.BASE_URL


def get_short_url(shortcode: str, event: dict[str, Any], base: str | None = None) -> str:
    """Get string representation of shortened URL

    Args:
        shortcode (str): shortcode
        event (dict): request event passed to a handler
        base (str | None): explicit base URL, overrides base_url(event)

    Returns:
        str: short url string representation
    """
    return f'{(base or base_url(event)).rstrip("/")}/{shortcode}'


def isoformat_utc(moment: datetime) -> str:
    """Render `moment` as ISO-8601 in UTC with millisecond precision.

    Example:
        >>> isoformat_utc(datetime(2025, 10, 15, 12, 0, tzinfo=UTC))
        '2025-10-15T12:00:00.000Z'
    """
    # fmt: off
    return moment.astimezone(UTC) \
                 .isoformat(timespec='milliseconds') \
                 .replace('+00:00', 'Z')
    # fmt: on


def guarantee_500_response(handler: Callable) -> Callable:
    """Decorator ensuring a handler always answers with a response dict.

    Any exception escaping the wrapped handler is logged with its traceback
    and converted into a generic 500 response. Expected failures (bad input,
    unknown shortcodes, ...) must be handled inside the handler itself.

    Example:
        >>> @guarantee_500_response
        ... def handler(event, dao):
        ...     raise RuntimeError('boom')
        >>> handler({}, None)['statusCode']
        500
    """

    @functools.wraps(handler)
    def wrapper(*args, **kwargs) -> dict[str, Any]:
        try:
            return handler(*args, **kwargs)
        except Exception:
            logger.exception(
                'Unhandled exception in request handler. Responding with 500.',
                extra={'handler': handler.__module__, 'event': UNKNOWN_INTERNAL_SERVER_ERROR},
            )
            return {
                'statusCode': 500,
                'headers': {'Content-Type': 'application/json'},
                'body': json.dumps(
                    {
                        'error': 'Internal Server Error',
                        'message': 'An unexpected error occurred',
                        'errorCode': UNKNOWN_INTERNAL_SERVER_ERROR,
                    }
                ),
            }

    return wrapper
