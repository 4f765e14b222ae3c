# src/ui/widgets/nft_card.py

"""Card widget for a single catalogue entry."""

import logging
from typing import TYPE_CHECKING, cast

from rich.style import Style
from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.reactive import reactive
from textual.widgets import Button, Label, Static

from src.models.nft import NFT
from src.services.image_provider import is_valid_image_url

if TYPE_CHECKING:
    from src.ui.app import NFTMarketApp

logger = logging.getLogger("nft_market.ui.card")


def image_link(url: str, label: str = "🖼  Open image") -> Text:
    """Clickable terminal link for an image URL."""
    if not is_valid_image_url(url):
        return Text(f"{label} (placeholder)", style="dim")
    return Text(label, style=Style(link=url, underline=True))


def format_price(price: float, currency: str) -> str:
    """Price as shown on cards, e.g. ``0.45 ETH``."""
    return f"{price} {currency}"


class NFTCard(Vertical):
    """One listing: image, name, creator, likes, price and actions.

    Like state lives only in this widget and resets when it remounts.
    """

    liked: reactive[bool] = reactive(False)
    like_count: reactive[int] = reactive(0)

    def __init__(
        self,
        nft: NFT,
        *,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(
            name=name,
            id=id,
            classes=" ".join(filter(None, ("nft-card", classes))),
        )
        self.nft = nft
        self.set_reactive(NFTCard.like_count, nft.likes)

    def compose(self) -> ComposeResult:
        """Build the card body."""
        with Horizontal(classes="card-top"):
            yield Static(image_link(self.nft.image), classes="card-image")
            if self.nft.is_hot:
                yield Label("🔥 Hot", classes="hot-badge")
        yield Label(self.nft.name, classes="card-name", markup=False)
        yield Label(
            f"Creator: {self.nft.creator}",
            classes="card-creator muted",
            markup=False,
        )
        with Horizontal(classes="card-actions"):
            yield Button(self._like_label(), classes="like")
            yield Button("Share", classes="share")
            yield Button("Report", classes="report")
        with Horizontal(classes="card-footer"):
            yield Label(
                format_price(self.nft.price, self.nft.currency.value),
                classes="card-price",
            )
            yield Button("View", classes="view")
            yield Button("Buy Now", variant="primary", classes="buy")

    def _like_label(self) -> str:
        heart = "♥" if self.liked else "♡"
        return f"{heart} {self.like_count}"

    def _refresh_like(self) -> None:
        for button in self.query(".like").results(Button):
            button.label = self._like_label()
            button.set_class(self.liked, "liked")

    def watch_liked(self) -> None:
        self._refresh_like()

    def watch_like_count(self) -> None:
        self._refresh_like()

    def toggle_like(self) -> None:
        """Flip the liked flag and move the counter by one."""
        if self.liked:
            self.like_count -= 1
        else:
            self.like_count += 1
        self.liked = not self.liked

    def buy(self) -> None:
        """Announce the purchase; nothing is bought."""
        self.app.notify(
            f"You're about to purchase {self.nft.name} for "
            f"{format_price(self.nft.price, self.nft.currency.value)}",
            title="Success",
        )

    def share(self) -> None:
        self.app.notify("Sharing options opened", title="Success")

    def report(self) -> None:
        logger.info("Report submitted for '%s'", self.nft.name)
        self.app.notify("Report submitted", title="Success")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Dispatch the card's buttons; presses never leave the card."""
        event.stop()
        button = event.button
        if button.has_class("like"):
            self.toggle_like()
        elif button.has_class("buy"):
            self.buy()
        elif button.has_class("share"):
            self.share()
        elif button.has_class("report"):
            self.report()
        elif button.has_class("view"):
            cast("NFTMarketApp", self.app).navigate(f"/nft/{self.nft.id}")
