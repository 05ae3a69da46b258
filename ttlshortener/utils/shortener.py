"""Shortcode generation and validation utilities

This module provides the pure, stateless helpers the data store relies on
to mint random shortcodes and to validate client input before anything is
stored.

Functions:
    generate_shortcode(length=6):
        Generate a random Base62 shortcode.

    is_valid_shortcode(shortcode):
        Check a user-supplied shortcode against the format rules.

    is_valid_url(url):
        Check that a target URL is an absolute http(s) URL.

    is_valid_validity(minutes):
        Check that a validity period is a positive number of minutes.

Example:
    >>> from ttlshortener.utils import generate_shortcode, is_valid_shortcode
    >>> code = generate_shortcode()
    >>> len(code)
    6
    >>> is_valid_shortcode(code)
    True
    >>> is_valid_shortcode('ab')
    False
"""

import re
import secrets
import string
from typing import Any
from urllib.parse import urlsplit

from ttlshortener.utils.constants import Defaults, Shortcode


ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits

ALLOWED_URL_SCHEMES = frozenset({'http', 'https'})

_SHORTCODE_PATTERN = re.compile(r'[A-Za-z0-9]+')


def generate_shortcode(length: int = Defaults.SHORTCODE_LENGTH) -> str:
    """Generate a random Base62 shortcode.

    Each character is drawn independently and uniformly from ALPHABET using
    the `secrets` CSPRNG, so codes are not predictable from previous ones.
    Uniqueness is NOT guaranteed; the data store retries on collision.

    Args:
        length (int, optional):
            Number of characters in the shortcode. Defaults to 6.

    Returns:
        str: A random alphanumeric shortcode of exactly `length` characters.

    Raises:
        TypeError: If `length` is not an integer.
        ValueError: If `length` is smaller than 1.

    Example:
        >>> generate_shortcode(8)
        'q7FemOj2'
    """
    if not isinstance(length, int) or isinstance(length, bool):
        raise TypeError(f'Length must be of type integer (given type: {type(length)}).')
    if length < 1:
        raise ValueError(f'Length must be a positive integer (given value: {length}).')

    return ''.join(secrets.choice(ALPHABET) for _ in range(length))


def is_valid_shortcode(shortcode: Any) -> bool:
    """Check whether a user-supplied shortcode is well-formed.

    A valid shortcode is an ASCII alphanumeric string between 3 and 20
    characters long (inclusive). Generated shortcodes always qualify as long
    as the configured length is within those bounds.

    Example:
        >>> is_valid_shortcode('abc')
        True
        >>> is_valid_shortcode('my-link')
        False
    """
    if not isinstance(shortcode, str):
        return False
    if not Shortcode.MIN_LENGTH <= len(shortcode) <= Shortcode.MAX_LENGTH:
        return False
    return _SHORTCODE_PATTERN.fullmatch(shortcode) is not None


def is_valid_url(url: Any) -> bool:
    """Check whether `url` is an absolute URL with an http or https scheme.

    The URL is only validated here; it is stored verbatim (no normalization).

    Example:
        >>> is_valid_url('https://example.com/page?q=1')
        True
        >>> is_valid_url('ftp://example.com')
        False
        >>> is_valid_url('not-a-url')
        False
    """
    if not isinstance(url, str) or not url:
        return False

    try:
        components = urlsplit(url)
        # accessing .port validates the port range and raises ValueError
        components.port
    except ValueError:
        return False

    if components.scheme not in ALLOWED_URL_SCHEMES:
        return False
    hostname = components.hostname
    return bool(hostname) and not any(character.isspace() for character in hostname)


def is_valid_validity(minutes: Any) -> bool:
    """Check whether `minutes` is a positive integer number of minutes.

    Booleans and floats are rejected even though they compare like numbers.

    Example:
        >>> is_valid_validity(30)
        True
        >>> is_valid_validity(0)
        False
        >>> is_valid_validity(1.5)
        False
    """
    if not isinstance(minutes, int) or isinstance(minutes, bool):
        return False
    return minutes > 0
