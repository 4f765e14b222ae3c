# src/filters/listing_filter.py

"""Tab views over the listing page's catalogue."""

import logging
from collections.abc import Callable

from src.config.settings import Settings
from src.models.nft import NFT

logger = logging.getLogger("nft_market.filters")

LISTING_TABS: list[tuple[str, str]] = [
    ("all", "All NFTs"),
    ("trending", "Trending"),
    ("hot", "Hot"),
    ("new", "New"),
]


class ListingFilter:
    """Order-preserving views over a list of catalogue entries."""

    @staticmethod
    def all(nfts: list[NFT]) -> list[NFT]:
        """Every entry, unchanged."""
        return list(nfts)

    @staticmethod
    def trending(nfts: list[NFT]) -> list[NFT]:
        """Entries with more than ``TRENDING_MIN_LIKES`` likes."""
        return [
            n for n in nfts if n.likes > Settings.TRENDING_MIN_LIKES
        ]

    @staticmethod
    def hot(nfts: list[NFT]) -> list[NFT]:
        """Entries flagged as hot."""
        return [n for n in nfts if n.is_hot]

    @staticmethod
    def new(nfts: list[NFT]) -> list[NFT]:
        """The first ``NEW_ITEMS_COUNT`` entries."""
        return nfts[: Settings.NEW_ITEMS_COUNT]

    @classmethod
    def for_tab(cls, tab: str, nfts: list[NFT]) -> list[NFT]:
        """Apply the filter registered for *tab*.

        Raises ``KeyError`` for an unknown tab id.
        """
        filters: dict[str, Callable[[list[NFT]], list[NFT]]] = {
            "all": cls.all,
            "trending": cls.trending,
            "hot": cls.hot,
            "new": cls.new,
        }
        result = filters[tab](nfts)
        logger.debug(
            "Tab '%s' shows %d of %d entries",
            tab,
            len(result),
            len(nfts),
        )
        return result
