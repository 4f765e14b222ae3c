# src/ui/screens/detail.py

"""Single-item page: price, description, attributes and history."""

import logging

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, Vertical, VerticalScroll
from textual.widgets import (
    Button,
    Label,
    LoadingIndicator,
    Static,
    TabbedContent,
    TabPane,
)

from src.models.nft import HistoryEvent, NFTDetail
from src.services.catalogue_service import CatalogueService
from src.ui.screens.base import PageScreen
from src.ui.widgets.nft_card import format_price, image_link

logger = logging.getLogger("nft_market.ui.detail")


def format_history_event(event: HistoryEvent) -> str:
    """Multi-line summary of one history event."""
    lines = [event.event]
    if event.from_address:
        lines.append(f"From: {event.from_address}")
    if event.to_address:
        lines.append(f"To: {event.to_address}")
    if event.price:
        lines.append(f"Price: {event.price} ETH")
    return "\n".join(lines)


class DetailScreen(PageScreen):
    """Detail view for ``/nft/<id>``."""

    BINDINGS = [
        Binding("escape", "back", "Back"),
    ]

    def __init__(self, catalogue: CatalogueService, nft_id: str) -> None:
        super().__init__()
        self.catalogue = catalogue
        self.nft_id = nft_id
        self.nft: NFTDetail | None = None

    def compose_page(self) -> ComposeResult:
        with VerticalScroll(id="detail"):
            yield Button("← Back to marketplace", id="back_btn")
            yield LoadingIndicator(id="loader")
            with Horizontal(id="detail_body"):
                yield Static("", id="detail_image", classes="image-panel")
                with Vertical(id="detail_info"):
                    yield Label("", id="detail_collection", classes="badge")
                    yield Label("", id="detail_name", classes="page-title")
                    yield Label("", id="detail_stats", classes="muted")
                    yield Label("Current Price", classes="section-title")
                    yield Label("", id="detail_price", classes="big-price")
                    with Horizontal(classes="button-row"):
                        yield Button(
                            "⚡ Buy Now", variant="primary", id="buy_btn"
                        )
                        yield Button("🏷 Make Offer", id="offer_btn")
                    with TabbedContent(initial="details", id="detail_tabs"):
                        with TabPane("Details", id="details"):
                            yield Label("Description", classes="muted")
                            yield Static(
                                "", id="detail_description", markup=False
                            )
                            yield Static("", id="detail_meta", markup=False)
                        with TabPane("Attributes", id="attributes"):
                            yield Container(
                                id="attribute_grid", classes="attribute-grid"
                            )
                        with TabPane("History", id="history"):
                            yield Vertical(id="history_list")

    def on_mount(self) -> None:
        self.run_worker(self.load_detail(), exclusive=True, group="detail")

    async def load_detail(self) -> None:
        """Fetch the record and fill in the page."""
        loader = self.query_one("#loader", LoadingIndicator)
        loader.display = True
        try:
            nft = await self.catalogue.load_detail(self.nft_id)
        finally:
            loader.display = False
        self.nft = nft

        self.query_one("#detail_image", Static).update(
            image_link(nft.image)
        )
        self.query_one("#detail_collection", Label).update(nft.collection)
        self.query_one("#detail_name", Label).update(nft.name)
        self.query_one("#detail_stats", Label).update(
            f"👁 {nft.views} views   ♥ {nft.likes} favorites"
        )
        self.query_one("#detail_price", Label).update(
            format_price(nft.price, nft.currency.value)
        )
        self.query_one("#detail_description", Static).update(
            nft.description
        )
        self.query_one("#detail_meta", Static).update(
            f"Creator: {nft.creator}\n"
            f"Owner: {nft.owner}\n"
            f"Collection: {nft.collection}\n"
            f"Created: {nft.created_at}"
        )

        await self.query_one("#attribute_grid", Container).mount_all(
            Static(
                f"{attr.trait}\n{attr.value}",
                classes="attribute-card",
                markup=False,
            )
            for attr in nft.attributes
        )
        await self.query_one("#history_list", Vertical).mount_all(
            Horizontal(
                Static(format_history_event(event), markup=False),
                Label(f"🕒 {event.date}", classes="muted history-date"),
                classes="history-row",
            )
            for event in nft.history
        )

    def action_back(self) -> None:
        self.market.navigate("/")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "back_btn":
            self.action_back()
        elif self.nft is None:
            return
        elif event.button.id == "buy_btn":
            self.app.notify(
                f"You're about to purchase {self.nft.name} for "
                f"{format_price(self.nft.price, self.nft.currency.value)}",
                title="Success",
            )
        elif event.button.id == "offer_btn":
            self.app.notify(f"Make an offer on {self.nft.name}")
