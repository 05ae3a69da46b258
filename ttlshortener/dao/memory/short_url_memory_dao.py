"""Data Access Object (DAO) implementation for short-lived URLs kept in process memory

This module provides an in-memory implementation of ShortURLBaseDAO. Records
live only as long as the process does: nothing is persisted or shared with
other processes.

Responsibilities:
    - Create mappings under requested or randomly generated shortcodes;
    - Enforce per-record expiry, evicting expired records lazily on access;
    - Count successful resolutions without losing concurrent updates;
    - Evict expired records eagerly on sweep();
    - Raise appropriate DAO exceptions.

Classes:
    ShortURLMemoryDAO:
        Thread-safe DAO for short-lived ShortURLModel records.

Example:
    >>> from ttlshortener.dao.memory import ShortURLMemoryDAO

    >>> dao = ShortURLMemoryDAO()

    >>> short_url = dao.create('https://example.com/page', validity=5, shortcode='abc123')
    >>> short_url.shortcode
    'abc123'

    >>> dao.hit('abc123')
    'https://example.com/page'
    >>> dao.get('abc123').hits
    1
"""

from dataclasses import replace
from datetime import datetime, timedelta, UTC

from beartype import beartype

from ttlshortener.models import ShortURLModel
from ttlshortener.dao.base import ShortURLBaseDAO
from ttlshortener.dao.memory.mixins import MemoryStoreMixin
from ttlshortener.dao.memory.helpers import synchronized
from ttlshortener.dao.exceptions import (
    InvalidShortcodeError,
    InvalidURLError,
    InvalidValidityError,
    ShortcodeGenerationError,
    ShortURLAlreadyExistsError,
    ShortURLExpiredError,
    ShortURLNotFoundError,
)
from ttlshortener.utils.constants import Defaults
from ttlshortener.utils.shortener import generate_shortcode, is_valid_shortcode, is_valid_url, is_valid_validity


class ShortURLMemoryDAO(MemoryStoreMixin, ShortURLBaseDAO):
    """In-memory Data Access Object (DAO) for short-lived URL mappings

    A single re-entrant lock guards the whole record map (see MemoryStoreMixin
    and the `synchronized` decorator). Each public method runs entirely under
    one acquisition, so check-then-insert, check-then-increment and
    check-then-evict are atomic with respect to each other and to sweep().

    Attributes:
        shortcode_length (int):
            Length of generated shortcodes.
        max_attempts (int):
            Maximum number of generated candidates tried per create().

    Methods:
        create(target: str, validity: int = 30, shortcode: str | None = None, **kwargs) -> ShortURLModel
        get(shortcode: str, **kwargs) -> ShortURLModel
        hit(shortcode: str, **kwargs) -> str
        sweep(**kwargs) -> int
        count(**kwargs) -> int

    Example:
        >>> dao = ShortURLMemoryDAO(shortcode_length=8)
        >>> len(dao.create('https://example.com').shortcode)
        8
    """

    @beartype
    def __init__(
        self,
        shortcode_length: int = Defaults.SHORTCODE_LENGTH,
        max_attempts: int = Defaults.MAX_GENERATION_ATTEMPTS,
    ):
        """Initialize an empty in-memory store

        Args:
            shortcode_length (int):
                Length of generated shortcodes, 3 to 20. Defaults to 6.

            max_attempts (int):
                Generated candidates tried before giving up. Defaults to 10.

        Raises:
            ValueError:
                If `shortcode_length` is outside 3..20 or `max_attempts` < 1.
        """
        if not is_valid_shortcode('a' * shortcode_length):
            raise ValueError(f'Shortcode length must be between 3 and 20 (given value: {shortcode_length}).')
        if max_attempts < 1:
            raise ValueError(f'Max attempts must be a positive integer (given value: {max_attempts}).')

        super().__init__()
        self.shortcode_length = shortcode_length
        self.max_attempts = max_attempts

    @synchronized
    def create(
        self,
        target: str,
        validity: int = Defaults.VALIDITY_MINUTES,
        shortcode: str | None = None,
        **kwargs,
    ) -> ShortURLModel:
        """Store a new short URL mapping

        Arguments are validated in order (target, validity, shortcode) and the
        first violation is raised. A requested shortcode held only by an
        expired record counts as free: the stale record is evicted and the
        claim succeeds.

        Args:
            target (str):
                Absolute http(s) URL to redirect to. Stored verbatim.
            validity (int):
                Lifetime in minutes. Defaults to 30.
            shortcode (str | None):
                Requested shortcode, or None to generate one.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShortURLModel:
                Snapshot of the stored record (hits == 0).

        Raises:
            InvalidURLError:
                If `target` is not an absolute http(s) URL.
            InvalidValidityError:
                If `validity` is not a positive integer (or is too large to represent).
            InvalidShortcodeError:
                If `shortcode` is not 3-20 alphanumeric characters.
            ShortURLAlreadyExistsError:
                If a live record already holds `shortcode`.
            ShortcodeGenerationError:
                If `max_attempts` generated shortcodes were all taken.

        Example:
            >>> dao.create('https://example.com', validity=1, shortcode='abc')
            ShortURLModel(target='https://example.com', shortcode='abc', ...)
        """
        if not is_valid_url(target):
            raise InvalidURLError(f"Target URL '{target}' is not an absolute http(s) URL.")
        if not is_valid_validity(validity):
            raise InvalidValidityError(f'Validity must be a positive integer of minutes (given value: {validity!r}).')

        now = datetime.now(UTC)
        try:
            expires_at = now + timedelta(minutes=validity)
        except OverflowError as e:
            raise InvalidValidityError(f'Validity of {validity} minutes is too large.') from e

        if shortcode is None:
            shortcode = self._free_shortcode(now)
        elif not is_valid_shortcode(shortcode):
            raise InvalidShortcodeError(f"Shortcode '{shortcode}' must be alphanumeric, 3-20 characters long.")
        elif not self._is_free(shortcode, now):
            raise ShortURLAlreadyExistsError(f"Short URL with code '{shortcode}' already exists.")

        short_url = ShortURLModel(
            target=target,
            shortcode=shortcode,
            created_at=now,
            expires_at=expires_at,
        )
        self._entries[shortcode] = short_url
        return short_url

    @synchronized
    @beartype
    def get(self, shortcode: str, **kwargs) -> ShortURLModel:
        """Retrieve a snapshot of a live record without counting a hit

        Args:
            shortcode (str):
                The shortcode identifier for the shortened URL.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShortURLModel:
                Immutable snapshot of the record.

        Raises:
            ShortURLNotFoundError:
                If no record is stored under `shortcode`.
            ShortURLExpiredError:
                If the record has expired. It is evicted before raising.

        Example:
            >>> dao.get('abc123')
            ShortURLModel(target='https://example.com', shortcode='abc123', ...)
        """
        return self._lookup(shortcode, datetime.now(UTC))

    @synchronized
    @beartype
    def hit(self, shortcode: str, **kwargs) -> str:
        """Count one resolution of a live record and return its target URL

        NOTE: the expiry check and the increment happen under the same lock
              acquisition, so a resolution racing an eviction either succeeds
              and counts, or fails with ShortURLExpiredError/ShortURLNotFoundError.
              It never counts a hit on a record that is being evicted.

        Args:
            shortcode (str):
                The shortcode identifier for the shortened URL.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            str:
                The record's target URL.

        Raises:
            ShortURLNotFoundError:
                If no record is stored under `shortcode`.
            ShortURLExpiredError:
                If the record has expired. It is evicted before raising.

        Example:
            >>> dao.hit('abc123')
            'https://example.com'
        """
        short_url = self._lookup(shortcode, datetime.now(UTC))
        self._entries[shortcode] = replace(short_url, hits=short_url.hits + 1)
        return short_url.target

    @synchronized
    def sweep(self, **kwargs) -> int:
        """Evict every expired record

        Returns:
            int:
                Number of evicted records. 0 on an empty or fully live store.

        Example:
            >>> dao.sweep()
            3
            >>> dao.sweep()
            0
        """
        now = datetime.now(UTC)
        expired = [shortcode for shortcode, short_url in self._entries.items() if short_url.expired(now)]
        for shortcode in expired:
            del self._entries[shortcode]
        return len(expired)

    @synchronized
    def count(self, **kwargs) -> int:
        """Return the number of stored records (expired-but-unswept included)"""
        return len(self._entries)

    def _is_free(self, shortcode: str, now: datetime) -> bool:
        try:
            self._lookup(shortcode, now)
        except (ShortURLNotFoundError, ShortURLExpiredError):
            return True
        return False

    def _free_shortcode(self, now: datetime) -> str:
        for _ in range(self.max_attempts):
            candidate = generate_shortcode(self.shortcode_length)
            if self._is_free(candidate, now):
                return candidate

        raise ShortcodeGenerationError(
            f'Could not generate a free shortcode of length {self.shortcode_length} '
            f'after {self.max_attempts} attempts.'
        )
