"""Background reclamation of expired short URLs

The sweeper is a daemon thread that calls `dao.sweep()` on a fixed period,
independently of request traffic, so records that are never looked up again
still get evicted. It goes through the DAO's public API and therefore
shares the store's locking discipline with request handlers.

Classes:
    ExpiredURLSweeper:
        Recurring sweep task with start()/stop() lifecycle.

Example:
    >>> from ttlshortener.dao import ShortURLMemoryDAO
    >>> from ttlshortener.sweeper import ExpiredURLSweeper
    >>> sweeper = ExpiredURLSweeper(ShortURLMemoryDAO(), interval=300)
    >>> sweeper.start()
    >>> sweeper.run_once()
    0
    >>> sweeper.stop()
"""

import logging
import threading

from ttlshortener.dao.base import ShortURLBaseDAO
from ttlshortener.utils.constants import Defaults


logger = logging.getLogger(__name__)


class ExpiredURLSweeper:
    """Periodically evict expired records from a ShortURL DAO

    Attributes:
        dao (ShortURLBaseDAO):
            Store to sweep.
        interval (float):
            Seconds between two sweeps.
    """

    def __init__(self, dao: ShortURLBaseDAO, interval: float = Defaults.SWEEP_INTERVAL_SECONDS):
        if interval <= 0:
            raise ValueError(f'Sweep interval must be positive (given value: {interval}).')

        self.dao = dao
        self.interval = interval
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def run_once(self) -> int:
        """Sweep the store once and log the outcome

        Returns:
            int: number of evicted records.
        """
        evicted = self.dao.sweep()
        if evicted:
            logger.info('Swept expired short URLs.', extra={'evicted': evicted})
        else:
            logger.debug('Sweep found no expired short URLs.', extra={'evicted': 0})
        return evicted

    def start(self) -> None:
        """Start the background sweep thread (no-op if already running)"""
        if self.running:
            return

        # One event per thread; a signalled event is never cleared
        self._stop_event = threading.Event()
        self._thread = threading.Thread(
            target=self._run,
            args=(self._stop_event,),
            name='expired-url-sweeper',
            daemon=True,
        )
        self._thread.start()
        logger.info('Started expired URL sweeper.', extra={'interval': self.interval})

    def stop(self, timeout: float | None = None) -> None:
        """Signal the sweep thread to exit and wait for it (idempotent)

        If the thread is still busy sweeping when `timeout` elapses, it stays
        tracked: `running` remains True and `start()` does nothing until it exits.

        Args:
            timeout (float | None):
                Seconds to wait for the thread to finish. None waits indefinitely.
        """
        self._stop_event.set()
        if self._thread is None:
            return

        self._thread.join(timeout)
        if self._thread.is_alive():
            logger.warning('Expired URL sweeper did not stop in time.', extra={'timeout': timeout})
            return

        self._thread = None
        logger.info('Stopped expired URL sweeper.')

    def _run(self, stop_event: threading.Event) -> None:
        # Event.wait() returns True once stop() is called, ending the loop
        while not stop_event.wait(self.interval):
            try:
                self.run_once()
            except Exception:
                logger.exception('Expired URL sweep failed. Retrying on next interval.')
