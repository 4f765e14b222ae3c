# src/ui/screens/listing.py

"""Marketplace landing page with the tabbed catalogue."""

import logging

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.widgets import (
    Button,
    Label,
    LoadingIndicator,
    TabbedContent,
    TabPane,
)

from src.filters.listing_filter import LISTING_TABS, ListingFilter
from src.models.nft import NFT
from src.services.catalogue_service import CatalogueService
from src.ui.screens.base import PageScreen
from src.ui.widgets.nft_grid import NFTGrid
from src.ui.widgets.search_bar import SearchBar

logger = logging.getLogger("nft_market.ui.listing")

_TAB_ICONS: dict[str, str] = {
    "trending": "📈 ",
    "hot": "🔥 ",
    "new": "✨ ",
}


class ListingScreen(PageScreen):
    """All / Trending / Hot / New views over the sample catalogue."""

    BINDINGS = [
        Binding("slash", "focus_search", "Search"),
    ]

    def __init__(self, catalogue: CatalogueService) -> None:
        super().__init__()
        self.catalogue = catalogue
        self.nfts: list[NFT] = []

    def compose_page(self) -> ComposeResult:
        with VerticalScroll(id="listing"):
            with Horizontal(id="listing_header", classes="page-header"):
                with Vertical(classes="page-heading"):
                    yield Label("NFT Marketplace", classes="page-title")
                    yield Label(
                        "Discover, collect, and trade unique digital assets",
                        classes="muted",
                    )
                yield SearchBar(id="search_bar")
                yield Button(
                    "+ Create NFT", variant="primary", id="create_btn"
                )

            yield LoadingIndicator(id="loader")

            with TabbedContent(initial="all", id="listing_tabs"):
                for tab_id, title in LISTING_TABS:
                    with TabPane(
                        _TAB_ICONS.get(tab_id, "") + title, id=tab_id
                    ):
                        yield NFTGrid(
                            id=f"grid_{tab_id}", classes="nft-grid"
                        )

            with Horizontal(id="create_cta", classes="cta"):
                with Vertical(classes="page-heading"):
                    yield Label(
                        "Start Creating Your NFTs", classes="cta-title"
                    )
                    yield Label(
                        "Mint, sell, and manage your digital assets "
                        "in one place",
                        classes="muted",
                    )
                yield Button("Create Now", id="create_now_btn")

    def on_mount(self) -> None:
        """Start loading the catalogue as soon as the page shows."""
        self.run_worker(
            self.load_catalogue(), exclusive=True, group="listing"
        )

    async def load_catalogue(self) -> None:
        """Fetch the catalogue and fill each tab's grid."""
        loader = self.query_one("#loader", LoadingIndicator)
        loader.display = True
        try:
            self.nfts = await self.catalogue.load_listing()
        finally:
            loader.display = False

        for tab_id, _ in LISTING_TABS:
            grid = self.query_one(f"#grid_{tab_id}", NFTGrid)
            await grid.show(ListingFilter.for_tab(tab_id, self.nfts))

    def action_focus_search(self) -> None:
        self.query_one("#search_bar .search-input").focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id in ("create_btn", "create_now_btn"):
            self.market.navigate("/create")
