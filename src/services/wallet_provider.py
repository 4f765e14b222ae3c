# src/services/wallet_provider.py

"""Composition root for wallet-connection context.

Built once at startup and handed to the app explicitly. It holds the
chain configuration, the shared :class:`QueryClient` and the state of
the wallet-selection widgets. No connection is ever attempted.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TypeVar

from src.config.settings import Settings
from src.storage.query_client import QueryClient

logger = logging.getLogger("nft_market.wallet")

T = TypeVar("T")


@dataclass(frozen=True)
class Chain:
    """A single network the app is scoped to."""

    id: int
    name: str
    rpc_url: str


@dataclass(frozen=True)
class ChainConfig:
    """Connection configuration: chains, transports and wallets."""

    app_name: str
    project_id: str
    chains: tuple[Chain, ...]
    wallets: tuple[str, ...]

    @property
    def transports(self) -> dict[int, str]:
        """HTTP transport URL per chain id."""
        return {chain.id: chain.rpc_url for chain in self.chains}

    @classmethod
    def from_settings(cls) -> "ChainConfig":
        """Mainnet-only configuration from :class:`Settings`."""
        mainnet = Chain(
            id=Settings.CHAIN_ID,
            name=Settings.CHAIN_NAME,
            rpc_url=Settings.CHAIN_RPC_URL,
        )
        return cls(
            app_name=Settings.APP_NAME,
            project_id=Settings.WALLET_CONNECT_PROJECT_ID,
            chains=(mainnet,),
            wallets=tuple(Settings.DEFAULT_WALLETS),
        )


@dataclass
class WalletUIContext:
    """State backing the wallet-selection widgets."""

    wallets: tuple[str, ...] = ()
    selected_wallet: str | None = None

    def select(self, wallet: str) -> None:
        """Remember the wallet picked in the connect dialog."""
        if wallet not in self.wallets:
            raise ValueError(f"Unknown wallet: {wallet}")
        self.selected_wallet = wallet


@dataclass
class WalletProvider:
    """Supplies chain config, query client and wallet UI context."""

    config: ChainConfig = field(default_factory=ChainConfig.from_settings)
    query_client: QueryClient = field(default_factory=QueryClient)
    ui: WalletUIContext = field(default_factory=WalletUIContext)
    mounted: bool = False

    def __post_init__(self) -> None:
        if not self.ui.wallets:
            self.ui.wallets = self.config.wallets
        logger.debug(
            "Wallet provider for %s on chain(s) %s",
            self.config.app_name,
            [c.id for c in self.config.chains],
        )

    def mount(self) -> None:
        """Flag the client side as mounted; children may now render."""
        self.mounted = True
        logger.info("Wallet provider mounted")

    def render(self, children: Callable[[], T]) -> T | None:
        """Build children only after :meth:`mount`, otherwise ``None``."""
        if not self.mounted:
            return None
        return children()
