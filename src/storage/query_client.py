# src/storage/query_client.py

"""In-memory data-fetching cache shared through the wallet provider."""

import logging
import time
from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Any

from src.config.settings import Settings

logger = logging.getLogger("nft_market.cache")

QueryKey = tuple[Hashable, ...]


@dataclass
class QueryEntry:
    """Cached data for one query key."""

    data: Any
    updated_at: float


class QueryClient:
    """Keyed cache where fresh data is served without refetching.

    An entry is fresh for ``stale_time`` seconds after it was stored.
    Stale entries are refetched on the next :meth:`fetch_query`.
    """

    def __init__(self, stale_time: float | None = None) -> None:
        self._entries: dict[QueryKey, QueryEntry] = {}
        self.stale_time: float = (
            Settings.QUERY_STALE_TIME if stale_time is None else stale_time
        )

    def get_query_data(self, key: QueryKey) -> Any | None:
        """Return cached data for *key* regardless of staleness."""
        entry = self._entries.get(key)
        return entry.data if entry else None

    def set_query_data(self, key: QueryKey, data: Any) -> None:
        """Store *data* under *key*, marking it fresh."""
        self._entries[key] = QueryEntry(data=data, updated_at=time.time())
        logger.debug("Stored query data for %s", key)

    def is_stale(self, key: QueryKey) -> bool:
        """True when *key* is missing or older than ``stale_time``."""
        entry = self._entries.get(key)
        if entry is None:
            return True
        return time.time() - entry.updated_at >= self.stale_time

    def fetch_query(self, key: QueryKey, fetcher: Callable[[], Any]) -> Any:
        """Return fresh cached data, otherwise call *fetcher* and cache it.

        Exceptions from *fetcher* propagate and leave the cache untouched.
        """
        if not self.is_stale(key):
            logger.debug("Query cache hit for %s", key)
            return self._entries[key].data
        data = fetcher()
        self.set_query_data(key, data)
        return data

    def invalidate_queries(self, prefix: QueryKey = ()) -> int:
        """Drop every entry whose key starts with *prefix*.

        Returns the number of entries removed.
        """
        doomed = [k for k in self._entries if k[: len(prefix)] == prefix]
        for key in doomed:
            del self._entries[key]
        logger.info(
            "Invalidated %d queries (prefix=%s)", len(doomed), prefix
        )
        return len(doomed)
