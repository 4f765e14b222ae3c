# src/cli/runner.py

"""Headless listing output, reusing the catalogue service."""

import logging

from rich.console import Console
from rich.table import Table

from src.filters.listing_filter import LISTING_TABS, ListingFilter
from src.models.nft import NFT
from src.services.catalogue_service import CatalogueService
from src.services.image_provider import ImageProvider

logger = logging.getLogger("nft_market.cli")

TAB_IDS: list[str] = [tab_id for tab_id, _ in LISTING_TABS]


def build_table(title: str, nfts: list[NFT]) -> Table:
    """Rich table of catalogue entries in display order."""
    table = Table(
        title=f"{title} ({len(nfts)})",
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("#", style="dim", width=4)
    table.add_column("Name", max_width=40)
    table.add_column("Creator", style="magenta")
    table.add_column("Price", justify="right", style="green")
    table.add_column("Likes", justify="right")
    table.add_column("Hot", justify="center")
    table.add_column("Image", overflow="fold", style="dim")

    for nft in nfts:
        table.add_row(
            nft.id,
            nft.name,
            nft.creator,
            f"{nft.price} {nft.currency.value}",
            str(nft.likes),
            "🔥" if nft.is_hot else "",
            nft.image,
        )
    return table


async def list_tab(
    tab: str,
    images: ImageProvider,
    console: Console | None = None,
) -> int:
    """Print one listing tab as a table. Returns a process exit code."""
    titles = dict(LISTING_TABS)
    if tab not in titles:
        logger.error("Unknown listing tab '%s'", tab)
        (console or Console(stderr=True)).print(
            f"[red]Unknown tab: {tab}[/red] "
            f"[dim](available: {', '.join(TAB_IDS)})[/dim]"
        )
        return 1

    nfts = await CatalogueService(images).load_listing()
    rows = ListingFilter.for_tab(tab, nfts)
    (console or Console()).print(build_table(titles[tab], rows))
    return 0
