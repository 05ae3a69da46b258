"""In-memory store mixin providing shared state initialization and health checks.

Responsibilities:
    - Initialize the process-local record map and the lock guarding it
    - Healthcheck the store (the lock can be acquired in bounded time)
    - Look up records, evicting expired ones the moment they are observed

Classes:
    - MemoryStoreMixin: Base mixin to inject store state, lookup & healthcheck.

Example:
    Typical usage with a DAO implementation:

        >>> class ShortURLMemoryDAO(MemoryStoreMixin, ShortURLBaseDAO):
        ...     pass
        ...
        >>> dao = ShortURLMemoryDAO()
        >>> dao.healthcheck()
        True
"""

import threading
from datetime import datetime

from ttlshortener.models import ShortURLModel
from ttlshortener.dao.exceptions import ShortURLExpiredError, ShortURLNotFoundError


class MemoryStoreMixin:
    """Mixin providing the record map and lock for in-memory DAOs.

    Attributes:
        _entries (dict[str, ShortURLModel]):
            Records keyed by shortcode. Only ever touched while holding `_lock`.

        _lock (threading.RLock):
            Store-wide lock. Re-entrant so a locked operation may call
            other locked helpers.

    Methods:
        healthcheck(timeout: float = 1.0) -> bool:
            True if the store lock can be acquired within `timeout` seconds.

        _lookup(shortcode: str, now: datetime) -> ShortURLModel:
            Return a live record or raise, evicting it if expired.
            Callers must hold `_lock`.
    """

    def __init__(self):
        self._entries: dict[str, ShortURLModel] = {}
        self._lock = threading.RLock()

    def healthcheck(self, timeout: float = 1.0) -> bool:
        """Check that the store is responsive

        Args:
            timeout (float):
                Seconds to wait for the store lock. Defaults to 1.0.

        Returns:
            bool:
                True if the lock was acquired (and released) in time, False otherwise.

        Example:
            >>> dao.healthcheck()
            True
        """
        if not self._lock.acquire(timeout=timeout):
            return False
        self._lock.release()
        return True

    def _lookup(self, shortcode: str, now: datetime) -> ShortURLModel:
        short_url = self._entries.get(shortcode)
        if short_url is None:
            raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.")

        if short_url.expired(now):
            del self._entries[shortcode]
            raise ShortURLExpiredError(f"Short URL with code '{shortcode}' has expired.")

        return short_url
