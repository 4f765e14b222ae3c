# src/ui/app.py

"""Terminal UI for the NFT marketplace."""

import logging

from textual.app import App
from textual.binding import Binding
from textual.screen import Screen

from src.config.settings import Settings
from src.services.catalogue_service import CatalogueService
from src.services.image_provider import ImageProvider, UnsplashImageProvider
from src.services.wallet_provider import WalletProvider
from src.ui.router import Route, RouteNotFoundError, resolve
from src.ui.screens.connect_wallet import ConnectWalletScreen
from src.ui.screens.create import CreateScreen
from src.ui.screens.detail import DetailScreen
from src.ui.screens.listing import ListingScreen
from src.ui.screens.profile import ProfileScreen

logger = logging.getLogger("nft_market.ui")


class NFTMarketApp(App[None]):
    """Terminal UI for the NFT marketplace."""

    CSS_PATH = "styles.tcss"
    TITLE = "NFT Market"
    SUB_TITLE = "Buy, sell, and trade digital assets"

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("e", "navigate('/')", "Explore"),
        Binding("c", "navigate('/create')", "Create"),
        Binding("p", "navigate('/profile')", "My NFTs"),
        Binding("w", "connect_wallet", "Connect Wallet"),
        Binding("d", "toggle_theme", "Theme"),
    ]

    def __init__(
        self,
        images: ImageProvider | None = None,
        wallet: WalletProvider | None = None,
        initial_route: str = "/",
    ) -> None:
        super().__init__()
        self.images = images or UnsplashImageProvider()
        self.catalogue = CatalogueService(self.images)
        self.wallet = wallet or WalletProvider()
        self.initial_route = initial_route
        self.current_route: Route | None = None
        self._pending_route: str | None = None

    def on_mount(self) -> None:
        """Mount the wallet context, then open the first page."""
        self.wallet.mount()
        route = self._pending_route or self.initial_route
        self._pending_route = None
        if not self.navigate(route):
            self.navigate("/")

    def _build_screen(self, route: Route) -> Screen[None]:
        if route.name == "create":
            return CreateScreen()
        if route.name == "detail":
            return DetailScreen(self.catalogue, route.params["id"])
        if route.name == "profile":
            return ProfileScreen(self.catalogue)
        return ListingScreen(self.catalogue)

    def navigate(self, path: str) -> bool:
        """Show the page for *path*, replacing the current one.

        Returns False when *path* names no page.
        """
        try:
            route = resolve(path)
        except RouteNotFoundError as e:
            logger.warning("Navigation failed: %s", e)
            self.notify(str(e), severity="error")
            return False

        screen = self.wallet.render(lambda: self._build_screen(route))
        if screen is None:
            logger.debug("Deferring navigation to %s until mounted", path)
            self._pending_route = path
            return True

        logger.info("Navigating to %s", path)
        self.current_route = route
        if len(self.screen_stack) > 1:
            self.switch_screen(screen)
        else:
            self.push_screen(screen)
        return True

    def action_navigate(self, path: str) -> None:
        self.navigate(path)

    def action_connect_wallet(self) -> None:
        """Open the wallet picker."""
        self.push_screen(
            ConnectWalletScreen(self.wallet), self._on_wallet_chosen
        )

    def _on_wallet_chosen(self, wallet_name: str | None) -> None:
        if wallet_name is None:
            return
        self.wallet.ui.select(wallet_name)
        logger.info("Wallet selected: %s", wallet_name)
        self.notify(
            f"{wallet_name} selected. Connecting wallets is not "
            f"available in {Settings.APP_NAME}.",
            severity="warning",
        )

    def action_toggle_theme(self) -> None:
        self.theme = (
            "textual-light" if self.theme == "textual-dark" else "textual-dark"
        )
