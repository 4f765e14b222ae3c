# src/ui/widgets/search_bar.py

"""Free-text search box for the listing page."""

import logging
from collections.abc import Callable

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Input, Label

logger = logging.getLogger("nft_market.ui.search")

SearchHandler = Callable[[str], None]


class SearchBar(Horizontal):
    """Search input that hands its query to an optional handler.

    Without a handler, submitting only logs the query.
    """

    def __init__(
        self,
        search_handler: SearchHandler | None = None,
        *,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        self.search_handler = search_handler

    def compose(self) -> ComposeResult:
        yield Label("🔍", classes="search-icon")
        yield Input(placeholder="Search NFTs...", classes="search-input")

    @property
    def query_text(self) -> str:
        """Current contents of the search box."""
        return self.query_one(Input).value

    def submit(self) -> None:
        """Run the search for the current text, empty or not."""
        query = self.query_text
        logger.info("Searching for: %s", query)
        if self.search_handler is not None:
            self.search_handler(query)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.submit()
