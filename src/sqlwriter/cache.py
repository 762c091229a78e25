"""
Template cache for built SQL statements.

Migration writers emit rows for a small, fixed set of tables, so the SQL text
for a table and operation is built once and reused for the life of the
process. Entries are immutable strings and are never evicted.
"""
import logging
import math
import threading
from collections.abc import Callable
from typing import NamedTuple

import cachetools

from sqlwriter.record import OperationKind

logger = logging.getLogger(__name__)


class TemplateKey(NamedTuple):
    kind: OperationKind
    table_name: str


class CacheInfo(NamedTuple):
    hits: int
    misses: int
    currsize: int


class TemplateCache:
    """Thread-safe, unbounded map of TemplateKey -> SQL template.

    The lock only protects the mapping itself. Templates are computed outside
    of it, so two workers missing on the same key at once may both build it;
    the first insert wins and both receive that string.
    """

    def __init__(self) -> None:
        self._entries: cachetools.Cache = cachetools.Cache(maxsize=math.inf)
        self._lock = threading.RLock()
        self._hits = 0
        self._misses = 0

    def get(self, key: TemplateKey) -> str | None:
        """Get a cached template, or None."""
        with self._lock:
            return self._entries.get(key)

    def get_or_create(self, key: TemplateKey, factory: Callable[[], str]) -> str:
        """Get the template for key, building it with factory on a miss.

        Args:
            key: Operation kind and table name
            factory: Zero-argument callable returning the template text

        Returns
            The cached template for key
        """
        with self._lock:
            template = self._entries.get(key)
            if template is not None:
                self._hits += 1
                return template
            self._misses += 1

        logger.debug(f'Template cache miss for {key.kind.value} {key.table_name}')
        built = factory()
        with self._lock:
            return self._entries.setdefault(key, built)

    def cache_info(self) -> CacheInfo:
        """Report hit and miss counts and the number of entries."""
        with self._lock:
            return CacheInfo(self._hits, self._misses, len(self._entries))

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
