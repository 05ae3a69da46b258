"""Abstract base class for ShortURL data access objects (DAOs).

This class establishes a consistent contract for short-lived URL mappings,
regardless of how the underlying store keeps them.

Responsibilities:
    - Provide an interface for creating, reading, hitting and sweeping
      ShortURLModel records.
    - Standardize error handling across data store implementations.
    - Enforce a consistent API for use by request handlers and the sweeper.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from ttlshortener.dao import ShortURLMemoryDAO

        >>> dao = ShortURLMemoryDAO()

        >>> short_url = dao.create('https://example.com/blog/article-123', validity=30)
        >>> len(short_url.shortcode)
        6

        >>> dao.hit(short_url.shortcode)
        'https://example.com/blog/article-123'

        >>> dao.get(short_url.shortcode).hits
        1
"""

from abc import ABC, abstractmethod

from ttlshortener.models import ShortURLModel
from ttlshortener.utils.constants import Defaults


class ShortURLBaseDAO(ABC):
    """Interface for ShortURL data access objects (DAOs).

    Methods:
        create(target: str, validity: int = 30, shortcode: str | None = None, **kwargs) -> ShortURLModel:
            Store a new mapping under a requested or generated shortcode.
            Raises InvalidURLError, InvalidValidityError or InvalidShortcodeError on bad input.
            Raises ShortURLAlreadyExistsError if a live mapping holds the requested shortcode.
            Raises ShortcodeGenerationError if no free shortcode could be generated.

        get(shortcode: str, **kwargs) -> ShortURLModel:
            Return a snapshot of a live mapping without touching its hit counter.
            Raises ShortURLNotFoundError if the entry does not exist.
            Raises ShortURLExpiredError (after evicting it) if the entry has expired.

        hit(shortcode: str, **kwargs) -> str:
            Count one access to a live mapping and return its target URL.
            Raises ShortURLNotFoundError / ShortURLExpiredError like get().

        sweep(**kwargs) -> int:
            Evict every expired mapping and return how many were evicted.

        count(**kwargs) -> int:
            Return the number of stored mappings.

        healthcheck(**kwargs) -> bool:
            Return True if the data store is responsive (not abstract).

    Subclassing:
        Datastore-specific implementations must extend this class and
        implement all abstract methods.

    NOTE:
        - Expired mappings must never be returned to callers. They are
          evicted lazily, the moment an operation observes them, and eagerly
          by sweep().
    """

    @abstractmethod
    def create(
        self,
        target: str,
        validity: int = Defaults.VALIDITY_MINUTES,
        shortcode: str | None = None,
        **kwargs,
    ) -> ShortURLModel:
        """Create a new short URL mapping.

        Args:
            target (str):
                Absolute http(s) URL to redirect to.

            validity (int):
                Lifetime of the mapping in minutes. Defaults to 30.

            shortcode (str | None):
                Requested shortcode. A random one is generated when None.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortURLModel: snapshot of the stored mapping.

        Raises:
            InvalidURLError:
                If `target` is not an absolute http(s) URL.

            InvalidValidityError:
                If `validity` is not a positive integer.

            InvalidShortcodeError:
                If `shortcode` is not 3-20 alphanumeric characters.

            ShortURLAlreadyExistsError:
                If a live mapping already holds `shortcode`.

            ShortcodeGenerationError:
                If no free shortcode was found within the attempt bound.
        """
        pass

    @abstractmethod
    def get(self, shortcode: str, **kwargs) -> ShortURLModel:
        """Retrieve a snapshot of a live mapping by its shortcode.

        Args:
            shortcode (str):
                The shortcode of the mapping to be retrieved.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortURLModel: snapshot of the mapping.

        Raises:
            ShortURLNotFoundError:
                If no mapping with the given shortcode exists.

            ShortURLExpiredError:
                If the mapping exists but has expired. It is evicted first.
        """
        pass

    @abstractmethod
    def hit(self, shortcode: str, **kwargs) -> str:
        """Count an access to a live mapping and return its target URL.

        Args:
            shortcode (str):
                The shortcode of the mapping being resolved.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            str: the mapping's target URL.

        Raises:
            ShortURLNotFoundError:
                If no mapping with the given shortcode exists.

            ShortURLExpiredError:
                If the mapping exists but has expired. It is evicted first.
        """
        pass

    @abstractmethod
    def sweep(self, **kwargs) -> int:
        """Evict every expired mapping.

        Returns:
            int: number of evicted mappings (0 when nothing has expired).
        """
        pass

    @abstractmethod
    def count(self, **kwargs) -> int:
        """Return the number of stored mappings, expired-but-unswept included."""
        pass

    def healthcheck(self, **kwargs) -> bool:
        """Return True if the data store is responsive. Stores override this."""
        return True
