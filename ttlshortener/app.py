"""Application wiring: one store, one sweeper, four handlers

`ShortenerApp` is constructed once at process start. It owns the in-memory
store for the whole process lifetime; there is no teardown of data because
nothing outlives the process anyway.

Example:
    >>> from ttlshortener.app import ShortenerApp
    >>> with ShortenerApp() as app:
    ...     response = app.shorten({'body': '{"url": "https://example.com"}'})
    ...     response['statusCode']
    201
"""

import logging

from ttlshortener.types import AppConfig, HandlerEvent, HandlerResponse
from ttlshortener.dao.memory import ShortURLMemoryDAO
from ttlshortener.sweeper import ExpiredURLSweeper
from ttlshortener.handlers import health, redirect_url, shorten_url, url_stats
from ttlshortener.utils.config import load_config
from ttlshortener.utils.logging import initialize_logging


logger = logging.getLogger(__name__)


class ShortenerApp:
    """Host process for the short URL store

    Attributes:
        config (dict):
            Settings as returned by `load_config()`.
        dao (ShortURLMemoryDAO):
            The process-wide store.
        sweeper (ExpiredURLSweeper):
            Background task evicting expired records every `sweep_interval` seconds.
    """

    def __init__(self, config: AppConfig | None = None, configure_logging: bool = False):
        """Build the store and sweeper from configuration

        Args:
            config (dict | None):
                Settings; read from the environment via `load_config()` when None.
            configure_logging (bool):
                If True, call `initialize_logging()` with the configured level and format.
        """
        self.config = load_config() if config is None else config
        if configure_logging:
            initialize_logging(self.config['log_level'], self.config['log_format'])

        self.dao = ShortURLMemoryDAO(
            shortcode_length=self.config['shortcode_length'],
            max_attempts=self.config['max_generation_attempts'],
        )
        self.sweeper = ExpiredURLSweeper(self.dao, interval=self.config['sweep_interval'])

    def start(self) -> 'ShortenerApp':
        self.sweeper.start()
        logger.info('URL shortener service started.', extra={'appEnv': self.config['app_env']})
        return self

    def stop(self) -> None:
        self.sweeper.stop()
        logger.info('URL shortener service stopped.')

    def __enter__(self) -> 'ShortenerApp':
        return self.start()

    def __exit__(self, *exc_info) -> None:
        self.stop()

    def shorten(self, event: HandlerEvent) -> HandlerResponse:
        return shorten_url.handler(
            event,
            self.dao,
            default_validity=self.config['default_validity'],
            short_link_base=self.config['base_url'],
        )

    def stats(self, event: HandlerEvent) -> HandlerResponse:
        return url_stats.handler(event, self.dao)

    def redirect(self, event: HandlerEvent) -> HandlerResponse:
        return redirect_url.handler(event, self.dao)

    def health(self, event: HandlerEvent) -> HandlerResponse:
        return health.handler(event, self.dao)
