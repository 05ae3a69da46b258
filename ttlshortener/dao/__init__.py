from ttlshortener.dao.base import ShortURLBaseDAO
from ttlshortener.dao.memory import ShortURLMemoryDAO


__all__ = [
    'ShortURLBaseDAO',
    'ShortURLMemoryDAO',
]
