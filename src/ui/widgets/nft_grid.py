# src/ui/widgets/nft_grid.py

"""Grid of catalogue cards."""

from textual.containers import Container
from textual.widget import Widget

from src.models.nft import NFT
from src.ui.widgets.nft_card import NFTCard


class NFTGrid(Container):
    """Lays out cards in a grid. An empty list leaves it empty."""

    async def show(
        self,
        nfts: list[NFT],
        trailing: list[Widget] | None = None,
    ) -> None:
        """Replace the grid contents with cards for *nfts*.

        *trailing* widgets (e.g. a call-to-action tile) go after the
        cards.
        """
        await self.remove_children()
        widgets: list[Widget] = [NFTCard(nft) for nft in nfts]
        widgets.extend(trailing or [])
        if widgets:
            await self.mount_all(widgets)

    @property
    def cards(self) -> list[NFTCard]:
        """Cards currently in the grid, in display order."""
        return list(self.query(NFTCard))
