from ttlshortener.handlers import health, redirect_url, shorten_url, url_stats


__all__ = [
    'health',
    'redirect_url',
    'shorten_url',
    'url_stats',
]
