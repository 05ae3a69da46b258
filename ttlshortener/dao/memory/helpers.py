import functools
from typing import TypeVar, Any
from collections.abc import Callable


__all__ = []

F = TypeVar('F', bound=Callable[..., Any])


def synchronized(method: F) -> F:
    """Run an in-memory DAO method while holding the DAO's store lock

    Every public operation of the store goes through this decorator, so
    lookups, expiry checks, counter increments and evictions on the same
    shortcode are linearizable and the sweeper can never evict a record
    halfway through another operation.

    Args:
        method (Callable[..., Any]):
            DAO method reading or mutating `self._entries`.

    Returns:
        Callable[..., Any]:
            Wrapped method executed inside `with self._lock`.

    Example:
        >>> @synchronized
        ... def count(self):
        ...     return len(self._entries)
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        with self._lock:
            return method(self, *args, **kwargs)

    return wrapper
