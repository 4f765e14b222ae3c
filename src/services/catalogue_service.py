# src/services/catalogue_service.py

"""Builds the in-memory page data from image provider output.

Every call builds fresh objects. Nothing is shared between screens, so
like counts and other view state never leak from one page load to the
next.
"""

import asyncio
import logging

from src.config.settings import Settings
from src.models.nft import NFT, Attribute, Currency, HistoryEvent, NFTDetail
from src.models.profile import ActivityItem, ProfilePage, UserProfile
from src.services.image_provider import ImageProvider

logger = logging.getLogger("nft_market.catalogue")

PROFILE_ADDRESS = "0x1a2b3c4d5e6f7g8h9i0j"


def sample_catalogue(images: list[str]) -> list[NFT]:
    """The six-entry sample catalogue, images matched by position."""
    return [
        NFT(
            id="1",
            name="Cosmic Voyager #42",
            creator="0x1a2b...3c4d",
            price=0.45,
            currency=Currency.ETH,
            image=images[0],
            likes=24,
            is_hot=True,
        ),
        NFT(
            id="2",
            name="Digital Dreams #08",
            creator="0x5e6f...7g8h",
            price=0.32,
            currency=Currency.ETH,
            image=images[1],
            likes=18,
        ),
        NFT(
            id="3",
            name="Neon Genesis #15",
            creator="0x9i0j...1k2l",
            price=0.67,
            currency=Currency.ETH,
            image=images[2],
            likes=36,
            is_hot=True,
        ),
        NFT(
            id="4",
            name="Pixel Punk #103",
            creator="0x3m4n...5o6p",
            price=0.28,
            currency=Currency.ETH,
            image=images[3],
            likes=12,
        ),
        NFT(
            id="5",
            name="Abstract Realm #27",
            creator="0x7q8r...9s0t",
            price=0.51,
            currency=Currency.ETH,
            image=images[4],
            likes=29,
        ),
        NFT(
            id="6",
            name="Crypto Creature #64",
            creator="0x1u2v...3w4x",
            price=0.38,
            currency=Currency.ETH,
            image=images[5],
            likes=21,
        ),
    ]


def sample_detail(nft_id: str, image: str) -> NFTDetail:
    """The detail record. Only ``id`` follows the route parameter."""
    return NFTDetail(
        id=nft_id,
        name="Cosmic Voyager #42",
        description=(
            "A unique digital collectible exploring the boundaries of "
            "space and imagination. This NFT represents a journey "
            "through the cosmos, with vibrant colors and intricate "
            "details."
        ),
        creator="0x1a2b...3c4d",
        owner="0x5e6f...7g8h",
        price=0.45,
        currency=Currency.ETH,
        image=image,
        likes=24,
        views=142,
        created_at="2023-10-15",
        collection="Cosmic Series",
        attributes=[
            Attribute("Background", "Deep Space"),
            Attribute("Character", "Explorer"),
            Attribute("Rarity", "Rare"),
            Attribute("Edition", "42 of 100"),
        ],
        history=[
            HistoryEvent(
                event="Minted",
                from_address="Creator",
                to_address="0x1a2b...3c4d",
                price=0.2,
                date="2023-10-15",
            ),
            HistoryEvent(
                event="Transfer",
                from_address="0x1a2b...3c4d",
                to_address="0x5e6f...7g8h",
                price=0.35,
                date="2023-11-02",
            ),
            HistoryEvent(
                event="Listed",
                from_address="0x5e6f...7g8h",
                price=0.45,
                date="2023-11-10",
            ),
        ],
    )


def sample_profile(
    banner: str, avatar: str, images: list[str],
) -> ProfilePage:
    """The profile page data, item images matched by position."""
    user = UserProfile(
        address=PROFILE_ADDRESS,
        username="CryptoCollector",
        bio=(
            "Digital art enthusiast and NFT collector. Building the "
            "future of digital ownership."
        ),
        avatar=avatar,
        banner=banner,
        joined="October 2022",
        followers=128,
        following=56,
    )
    owned = [
        NFT(
            id="1",
            name="Cosmic Voyager #42",
            creator="0x1a2b...3c4d",
            price=0.45,
            image=images[0],
            likes=24,
            is_hot=True,
        ),
        NFT(
            id="2",
            name="Digital Dreams #08",
            creator="0x5e6f...7g8h",
            price=0.32,
            image=images[1],
            likes=18,
        ),
        NFT(
            id="3",
            name="Neon Genesis #15",
            creator="0x9i0j...1k2l",
            price=0.67,
            image=images[2],
            likes=36,
            is_hot=True,
        ),
    ]
    created = [
        NFT(
            id="4",
            name="Pixel Punk #103",
            creator=user.address,
            price=0.28,
            image=images[3],
            likes=12,
        ),
        NFT(
            id="5",
            name="Abstract Realm #27",
            creator=user.address,
            price=0.51,
            image=images[4],
            likes=29,
        ),
    ]
    activity = [
        ActivityItem(
            type="Purchase",
            item="Cosmic Voyager #42",
            price=0.45,
            from_address="0x5e6f...7g8h",
            date="2 days ago",
        ),
        ActivityItem(
            type="Sale",
            item="Digital Wave #19",
            price=0.38,
            to_address="0x7q8r...9s0t",
            date="1 week ago",
        ),
        ActivityItem(
            type="Mint",
            item="Abstract Realm #27",
            date="2 weeks ago",
        ),
        ActivityItem(
            type="Transfer",
            item="Neon Genesis #15",
            to_address="0x3m4n...5o6p",
            date="3 weeks ago",
        ),
    ]
    return ProfilePage(
        user=user, owned=owned, created=created, activity=activity,
    )


class CatalogueService:
    """Loads page data, running blocking image lookups off the loop."""

    def __init__(self, images: ImageProvider) -> None:
        self.images = images

    async def load_listing(self) -> list[NFT]:
        """Catalogue entries for the listing page."""
        urls: list[str] = await asyncio.to_thread(
            self.images.fetch_many,
            Settings.LISTING_IMAGE_COUNT,
            Settings.NFT_IMAGE_QUERY,
        )
        nfts = sample_catalogue(urls)
        logger.info("Loaded %d catalogue entries", len(nfts))
        return nfts

    async def load_detail(self, nft_id: str) -> NFTDetail:
        """Detail record for *nft_id*; the content is the same for any id."""
        width, height = Settings.DETAIL_IMAGE_SIZE
        url: str = await asyncio.to_thread(
            self.images.fetch_one,
            Settings.NFT_IMAGE_QUERY,
            width,
            height,
        )
        logger.info("Loaded detail record for id '%s'", nft_id)
        return sample_detail(nft_id, url)

    async def load_profile(self) -> ProfilePage:
        """Profile data; the three image lookups run concurrently."""
        banner_w, banner_h = Settings.BANNER_SIZE
        avatar_w, avatar_h = Settings.AVATAR_SIZE
        banner, avatar, urls = await asyncio.gather(
            asyncio.to_thread(
                self.images.fetch_one,
                Settings.BANNER_QUERY,
                banner_w,
                banner_h,
            ),
            asyncio.to_thread(
                self.images.fetch_one,
                Settings.AVATAR_QUERY,
                avatar_w,
                avatar_h,
            ),
            asyncio.to_thread(
                self.images.fetch_many,
                Settings.PROFILE_IMAGE_COUNT,
                Settings.NFT_IMAGE_QUERY,
            ),
        )
        page = sample_profile(banner, avatar, urls)
        logger.info(
            "Loaded profile '%s' (%d owned, %d created, %d events)",
            page.user.username,
            len(page.owned),
            len(page.created),
            len(page.activity),
        )
        return page
