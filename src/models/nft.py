# src/models/nft.py

"""Catalogue entry and detail record models."""

from dataclasses import dataclass, field
from enum import Enum


class Currency(str, Enum):
    """Payment symbols accepted by the marketplace."""

    ETH = "ETH"
    MATIC = "MATIC"
    USDC = "USDC"


@dataclass
class Attribute:
    """A single trait/value pair of an item."""

    trait: str
    value: str


@dataclass
class HistoryEvent:
    """One ownership or listing event in an item's history."""

    event: str
    from_address: str
    date: str
    to_address: str | None = None
    price: float | None = None


@dataclass
class NFT:
    """Displayable summary of one marketplace listing."""

    id: str
    name: str
    creator: str
    price: float
    currency: Currency = Currency.ETH
    image: str = ""
    likes: int = 0
    is_hot: bool = False


@dataclass
class NFTDetail(NFT):
    """Extended single-item record shown on the detail page."""

    description: str = ""
    owner: str = ""
    views: int = 0
    created_at: str = ""
    collection: str = ""
    attributes: list[Attribute] = field(
        default_factory=lambda: list[Attribute]()
    )
    history: list[HistoryEvent] = field(
        default_factory=lambda: list[HistoryEvent]()
    )
