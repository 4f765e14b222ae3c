# tests/test_listing_filter.py

"""Tests for the listing page's tab filters."""

import unittest

from src.filters.listing_filter import LISTING_TABS, ListingFilter
from src.models.nft import NFT
from src.services.catalogue_service import sample_catalogue


def _ids(nfts: list[NFT]) -> list[str]:
    return [n.id for n in nfts]


class TestListingFilter(unittest.TestCase):
    """ListingFilter over the six-entry sample catalogue."""

    def setUp(self) -> None:
        self.nfts = sample_catalogue([f"img{i}" for i in range(6)])

    def test_all_is_unfiltered(self) -> None:
        """The all tab keeps every entry in order."""
        self.assertEqual(
            _ids(ListingFilter.all(self.nfts)),
            ["1", "2", "3", "4", "5", "6"],
        )

    def test_trending_is_more_than_twenty_likes(self) -> None:
        """likes > 20 selects ids 1, 3, 5 and 6."""
        trending = ListingFilter.trending(self.nfts)
        self.assertEqual(_ids(trending), ["1", "3", "5", "6"])
        self.assertEqual([n.likes for n in trending], [24, 36, 29, 21])

    def test_hot_flag(self) -> None:
        """Only the flagged entries are hot."""
        self.assertEqual(_ids(ListingFilter.hot(self.nfts)), ["1", "3"])

    def test_new_is_first_three(self) -> None:
        """The new tab is the first three entries, original order."""
        self.assertEqual(_ids(ListingFilter.new(self.nfts)), ["1", "2", "3"])

    def test_for_tab_matches_direct_calls(self) -> None:
        """for_tab dispatches to the matching filter."""
        expected = {
            "all": ["1", "2", "3", "4", "5", "6"],
            "trending": ["1", "3", "5", "6"],
            "hot": ["1", "3"],
            "new": ["1", "2", "3"],
        }
        for tab_id, _ in LISTING_TABS:
            with self.subTest(tab=tab_id):
                self.assertEqual(
                    _ids(ListingFilter.for_tab(tab_id, self.nfts)),
                    expected[tab_id],
                )

    def test_unknown_tab_raises(self) -> None:
        """An unregistered tab id is a KeyError."""
        with self.assertRaises(KeyError):
            ListingFilter.for_tab("sold", self.nfts)

    def test_exactly_twenty_likes_is_not_trending(self) -> None:
        """The threshold is strict."""
        edge = [NFT(id="x", name="Edge", creator="0x0", price=1.0, likes=20)]
        self.assertEqual(ListingFilter.trending(edge), [])

    def test_empty_input(self) -> None:
        """Every tab of an empty catalogue is empty."""
        for tab_id, _ in LISTING_TABS:
            with self.subTest(tab=tab_id):
                self.assertEqual(ListingFilter.for_tab(tab_id, []), [])

    def test_filters_do_not_mutate_input(self) -> None:
        """The source list is left untouched."""
        before = list(self.nfts)
        ListingFilter.trending(self.nfts)
        ListingFilter.new(self.nfts)
        self.assertEqual(self.nfts, before)


if __name__ == "__main__":
    unittest.main()
