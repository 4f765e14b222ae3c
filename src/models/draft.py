# src/models/draft.py

"""Transient form state for minting a new item."""

from dataclasses import dataclass, field
from enum import Enum

from src.config.settings import Settings
from src.models.nft import Attribute, Currency


class PreviewState(str, Enum):
    """Lifecycle of the create form's local image preview."""

    EMPTY = "empty"
    PENDING = "pending"
    LOADED = "loaded"


def clamp_royalty(value: int) -> int:
    """Clamp a royalty percentage into the allowed range."""
    return max(Settings.ROYALTY_MIN, min(Settings.ROYALTY_MAX, value))


@dataclass
class NFTDraft:
    """Unpersisted create-form values. Nothing here is validated."""

    name: str = ""
    description: str = ""
    price: str = ""
    currency: Currency = Currency.ETH
    collection: str = "new"
    properties: list[Attribute] = field(
        default_factory=lambda: list[Attribute]()
    )
    royalties_enabled: bool = True
    royalty_percentage: int = Settings.ROYALTY_DEFAULT
    image_preview: str | None = None

    def __post_init__(self) -> None:
        self.royalty_percentage = clamp_royalty(self.royalty_percentage)
