# src/ui/screens/base.py

"""Shared page chrome: header on top, key bindings in the footer."""

from typing import TYPE_CHECKING, cast

from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import Footer, Header

if TYPE_CHECKING:
    from src.ui.app import NFTMarketApp


class PageScreen(Screen[None]):
    """Base class for the routed pages."""

    def compose(self) -> ComposeResult:
        yield Header()
        yield from self.compose_page()
        yield Footer()

    def compose_page(self) -> ComposeResult:
        """Page body, between header and footer."""
        yield from ()

    @property
    def market(self) -> "NFTMarketApp":
        """The running app, typed for navigation."""
        return cast("NFTMarketApp", self.app)
