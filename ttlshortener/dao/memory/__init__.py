from ttlshortener.dao.memory.mixins import MemoryStoreMixin
from ttlshortener.dao.memory.short_url_memory_dao import ShortURLMemoryDAO


__all__ = [
    'MemoryStoreMixin',
    'ShortURLMemoryDAO',
]
