# tests/test_catalogue_service.py

"""Tests for page data composition."""

import unittest
from unittest.mock import MagicMock

from src.models.nft import Currency
from src.services.catalogue_service import (
    PROFILE_ADDRESS,
    CatalogueService,
    sample_catalogue,
)
from src.services.image_provider import ImageProvider, SeededImageProvider


def _fake_images(many: list[str], one: str = "https://img.test/one") -> MagicMock:
    """Image provider stub with canned results."""
    images = MagicMock(spec=ImageProvider)
    images.fetch_many.return_value = many
    images.fetch_one.return_value = one
    return images


class TestSampleCatalogue(unittest.TestCase):
    """The literal listing data."""

    def test_images_matched_by_position(self) -> None:
        """Entry N gets image N."""
        urls = [f"https://img.test/{i}" for i in range(6)]
        nfts = sample_catalogue(urls)
        self.assertEqual([n.image for n in nfts], urls)

    def test_entries(self) -> None:
        """Six ETH entries with the expected names and likes."""
        nfts = sample_catalogue(["u"] * 6)
        self.assertEqual(len(nfts), 6)
        self.assertEqual(nfts[0].name, "Cosmic Voyager #42")
        self.assertEqual(nfts[5].name, "Crypto Creature #64")
        self.assertEqual([n.likes for n in nfts], [24, 18, 36, 12, 29, 21])
        self.assertTrue(all(n.currency is Currency.ETH for n in nfts))

    def test_fresh_objects_per_call(self) -> None:
        """Each call builds new entries."""
        a = sample_catalogue(["u"] * 6)
        b = sample_catalogue(["u"] * 6)
        a[0].likes = 99
        self.assertEqual(b[0].likes, 24)


class TestCatalogueService(unittest.IsolatedAsyncioTestCase):
    """CatalogueService loaders."""

    async def test_load_listing_requests_six(self) -> None:
        """The listing asks for six 'digital art nft' images."""
        urls = [f"https://img.test/{i}" for i in range(6)]
        images = _fake_images(urls)
        nfts = await CatalogueService(images).load_listing()
        images.fetch_many.assert_called_once_with(6, "digital art nft")
        self.assertEqual(nfts[3].image, urls[3])

    async def test_load_listing_with_placeholders(self) -> None:
        """Placeholder images still produce a full catalogue."""
        images = _fake_images(["/placeholder.svg"] * 6)
        nfts = await CatalogueService(images).load_listing()
        self.assertEqual(len(nfts), 6)
        self.assertTrue(all(n.image == "/placeholder.svg" for n in nfts))

    async def test_detail_ignores_id_for_content(self) -> None:
        """Every id yields the same record apart from the id itself."""
        service = CatalogueService(_fake_images([]))
        first = await service.load_detail("1")
        other = await service.load_detail("999")
        self.assertEqual(first.id, "1")
        self.assertEqual(other.id, "999")
        self.assertEqual(first.name, other.name)
        self.assertEqual(first.history, other.history)

    async def test_detail_record_fields(self) -> None:
        """Detail carries attributes, history and a 600x600 image."""
        images = _fake_images([], one="https://img.test/detail")
        nft = await CatalogueService(images).load_detail("42")
        images.fetch_one.assert_called_once_with("digital art nft", 600, 600)
        self.assertEqual(nft.image, "https://img.test/detail")
        self.assertEqual(nft.collection, "Cosmic Series")
        self.assertEqual(
            [a.trait for a in nft.attributes],
            ["Background", "Character", "Rarity", "Edition"],
        )
        self.assertEqual(
            [e.event for e in nft.history], ["Minted", "Transfer", "Listed"]
        )
        self.assertIsNone(nft.history[-1].to_address)

    async def test_load_profile(self) -> None:
        """Profile: 3 owned, 2 created by the user, 4 activity items."""
        urls = [f"https://img.test/{i}" for i in range(5)]
        images = _fake_images(urls, one="https://img.test/one")
        page = await CatalogueService(images).load_profile()

        self.assertEqual(page.user.username, "CryptoCollector")
        self.assertEqual(page.user.banner, "https://img.test/one")
        self.assertEqual([n.id for n in page.owned], ["1", "2", "3"])
        self.assertEqual([n.id for n in page.created], ["4", "5"])
        self.assertTrue(
            all(n.creator == PROFILE_ADDRESS for n in page.created)
        )
        self.assertEqual(page.created[1].image, urls[4])
        self.assertEqual(
            [a.type for a in page.activity],
            ["Purchase", "Sale", "Mint", "Transfer"],
        )

    async def test_load_profile_image_requests(self) -> None:
        """Banner and avatar use their own queries and sizes."""
        images = _fake_images(["u"] * 5)
        await CatalogueService(images).load_profile()
        images.fetch_one.assert_any_call("abstract art", 1200, 400)
        images.fetch_one.assert_any_call("profile picture", 200, 200)
        images.fetch_many.assert_called_once_with(5, "digital art nft")

    async def test_seeded_provider_reproducible(self) -> None:
        """Two services with one seed produce identical listings."""
        a = await CatalogueService(SeededImageProvider(3)).load_listing()
        b = await CatalogueService(SeededImageProvider(3)).load_listing()
        self.assertEqual([n.image for n in a], [n.image for n in b])


class TestActivityRoute(unittest.IsolatedAsyncioTestCase):
    """Activity items link to the detail page by edition number."""

    async def test_item_routes(self) -> None:
        page = await CatalogueService(_fake_images(["u"] * 5)).load_profile()
        self.assertEqual(
            [a.item_route for a in page.activity],
            ["/nft/42", "/nft/19", "/nft/27", "/nft/15"],
        )


if __name__ == "__main__":
    unittest.main()
