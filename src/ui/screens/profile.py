# src/ui/screens/profile.py

"""User profile: collected, created and activity tabs."""

import logging

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.widgets import (
    Button,
    Label,
    LoadingIndicator,
    Static,
    TabbedContent,
    TabPane,
)

from src.models.profile import ActivityItem, ProfilePage
from src.services.catalogue_service import CatalogueService
from src.ui.screens.base import PageScreen
from src.ui.widgets.nft_card import image_link
from src.ui.widgets.nft_grid import NFTGrid

logger = logging.getLogger("nft_market.ui.profile")


class ActivityRow(Horizontal):
    """One activity feed line with a link to the item."""

    def __init__(self, item: ActivityItem) -> None:
        super().__init__(classes="activity-row")
        self.item = item

    def compose(self) -> ComposeResult:
        item = self.item
        with Vertical():
            with Horizontal(classes="activity-head"):
                yield Label(item.type, classes="badge")
                yield Button(item.item, classes="activity-link")
            parties: list[str] = []
            if item.from_address:
                parties.append(f"From: {item.from_address}")
            if item.to_address:
                parties.append(f"To: {item.to_address}")
            yield Label("  ".join(parties), classes="muted", markup=False)
        with Vertical(classes="activity-meta"):
            if item.price:
                yield Label(f"{item.price} ETH", classes="activity-price")
            yield Label(item.date, classes="muted")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.has_class("activity-link"):
            event.stop()
            screen = self.screen
            if isinstance(screen, PageScreen):
                screen.market.navigate(self.item.item_route)


class ProfileScreen(PageScreen):
    """Profile page for the sample collector."""

    def __init__(self, catalogue: CatalogueService) -> None:
        super().__init__()
        self.catalogue = catalogue
        self.page: ProfilePage | None = None

    def compose_page(self) -> ComposeResult:
        with VerticalScroll(id="profile"):
            with Horizontal(id="profile_banner", classes="panel"):
                yield Static("", id="banner", classes="image-panel")
                yield Static("", id="avatar", classes="image-panel")
                yield Button("⚙ Edit Profile", id="edit_profile_btn")
            yield LoadingIndicator(id="loader")
            with Horizontal(id="profile_info", classes="page-header"):
                with Vertical(classes="page-heading"):
                    yield Label("", id="username", classes="page-title")
                    with Horizontal(classes="button-row"):
                        yield Label("", id="address", classes="muted")
                        yield Button("Copy", id="copy_address_btn")
                yield Label("", id="followers", classes="stat")
                yield Label("", id="following", classes="stat")
            yield Label("", id="bio", markup=False)
            yield Label("", id="joined", classes="muted")

            with TabbedContent(initial="collected", id="profile_tabs"):
                with TabPane("Collected", id="collected"):
                    yield NFTGrid(id="grid_collected", classes="nft-grid")
                with TabPane("Created", id="created"):
                    yield NFTGrid(id="grid_created", classes="nft-grid")
                with TabPane("Activity", id="activity"):
                    yield Vertical(id="activity_list", classes="panel")

    def on_mount(self) -> None:
        self.run_worker(self.load_profile(), exclusive=True, group="profile")

    async def load_profile(self) -> None:
        """Fetch the profile and fill each section."""
        loader = self.query_one("#loader", LoadingIndicator)
        loader.display = True
        try:
            page = await self.catalogue.load_profile()
        finally:
            loader.display = False
        self.page = page
        user = page.user

        self.query_one("#banner", Static).update(
            image_link(user.banner, "🖼  Banner")
        )
        self.query_one("#avatar", Static).update(
            image_link(user.avatar, "👤 Avatar")
        )
        self.query_one("#username", Label).update(user.username)
        self.query_one("#address", Label).update(user.address)
        self.query_one("#followers", Label).update(
            f"{user.followers}\nFollowers"
        )
        self.query_one("#following", Label).update(
            f"{user.following}\nFollowing"
        )
        self.query_one("#bio", Label).update(user.bio)
        self.query_one("#joined", Label).update(f"Joined {user.joined}")

        await self.query_one("#grid_collected", NFTGrid).show(page.owned)
        create_tile = Vertical(
            Button("Create New NFT", variant="primary", id="create_tile_btn"),
            classes="create-tile",
        )
        await self.query_one("#grid_created", NFTGrid).show(
            page.created, trailing=[create_tile]
        )
        await self.query_one("#activity_list", Vertical).mount_all(
            ActivityRow(item) for item in page.activity
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id
        if button_id == "create_tile_btn":
            self.market.navigate("/create")
        elif button_id == "copy_address_btn" and self.page is not None:
            self.app.copy_to_clipboard(self.page.user.address)
            self.app.notify("Address copied to clipboard")
        elif button_id == "edit_profile_btn":
            self.app.notify("Profile editing is not available yet")
