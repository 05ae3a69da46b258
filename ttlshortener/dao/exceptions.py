"""Exceptions related to Data Access Objects (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    InvalidInputError:
        Base class for rejected create() arguments.

    InvalidURLError:
        Raised when a target URL is not an absolute http(s) URL.

    InvalidValidityError:
        Raised when a validity period is not a positive number of minutes.

    InvalidShortcodeError:
        Raised when a requested shortcode is not 3-20 alphanumeric characters.

    ShortURLNotFoundError:
        Raised when no ShortURLModel is stored under a shortcode.

    ShortURLExpiredError:
        Raised when a ShortURLModel was found past its expiry (and evicted).

    ShortURLAlreadyExistsError:
        Raised when a requested shortcode is held by a live ShortURLModel.

    ShortcodeGenerationError:
        Raised when no free shortcode was generated within the attempt bound.

Example:
    >>> from ttlshortener.dao.exceptions import ShortURLExpiredError
    >>> raise ShortURLExpiredError("Short URL with code 'abc123' has expired.")
    Traceback (most recent call last):
        ...
    ttlshortener.dao.exceptions.ShortURLExpiredError: Short URL with code 'abc123' has expired.
"""

from ttlshortener.exceptions import ShortenerError


class DAOError(ShortenerError):
    """Generic base class for DAO-related exceptions."""

    error_code = 'dao:dao_error'


class InvalidInputError(DAOError):
    """Base class for exceptions raised on invalid create() arguments."""

    error_code = 'dao:invalid_input'


class InvalidURLError(InvalidInputError):
    """Exception raised when a target URL is malformed or not http(s)."""

    error_code = 'dao:invalid_url'


class InvalidValidityError(InvalidInputError):
    """Exception raised when a validity period is not a positive integer."""

    error_code = 'dao:invalid_validity'


class InvalidShortcodeError(InvalidInputError):
    """Exception raised when a requested shortcode has an invalid format."""

    error_code = 'dao:invalid_shortcode'


class ShortURLNotFoundError(DAOError):
    """Exception raised when a ShortURLModel is not found in the data store."""

    error_code = 'dao:short_url_not_found'


class ShortURLExpiredError(DAOError):
    """Exception raised when a ShortURLModel is found past its expiry.

    The expired record has already been evicted by the time this is raised,
    so a repeated lookup raises ShortURLNotFoundError instead.
    """

    error_code = 'dao:short_url_expired'


class ShortURLAlreadyExistsError(DAOError):
    """Exception raised when attempting to claim a shortcode held by a live ShortURLModel."""

    error_code = 'dao:short_url_already_exists'


class ShortcodeGenerationError(DAOError):
    """Exception raised when no free shortcode could be generated.

    This is a fault condition, not a client error: it means the shortcode
    space is close to exhaustion for the configured length.
    """

    error_code = 'dao:shortcode_generation_error'
