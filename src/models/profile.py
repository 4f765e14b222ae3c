# src/models/profile.py

"""User profile and activity models."""

from dataclasses import dataclass, field

from src.models.nft import NFT


@dataclass
class UserProfile:
    """Public profile of a marketplace user."""

    address: str
    username: str
    bio: str = ""
    avatar: str = ""
    banner: str = ""
    joined: str = ""
    followers: int = 0
    following: int = 0


@dataclass
class ActivityItem:
    """A single entry in a user's activity feed."""

    type: str
    item: str
    date: str
    price: float | None = None
    from_address: str | None = None
    to_address: str | None = None

    @property
    def item_route(self) -> str:
        """Detail route for the item, keyed by its edition number."""
        _, _, number = self.item.partition("#")
        return f"/nft/{number}"


@dataclass
class ProfilePage:
    """Everything the profile screen renders."""

    user: UserProfile
    owned: list[NFT] = field(default_factory=lambda: list[NFT]())
    created: list[NFT] = field(default_factory=lambda: list[NFT]())
    activity: list[ActivityItem] = field(
        default_factory=lambda: list[ActivityItem]()
    )
