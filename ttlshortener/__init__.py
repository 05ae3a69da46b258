"""In-process, expiring short URL store with a thin request-handling layer."""

__version__ = '0.1.0'
