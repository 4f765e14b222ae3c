# src/ui/screens/connect_wallet.py

"""Wallet-selection dialog."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Label

from src.services.wallet_provider import WalletProvider


class ConnectWalletScreen(ModalScreen[str | None]):
    """Lists the configured wallets; dismisses with the chosen name."""

    BINDINGS = [Binding("escape", "cancel", "Cancel")]

    def __init__(self, wallet: WalletProvider) -> None:
        super().__init__()
        self.wallet = wallet

    def compose(self) -> ComposeResult:
        chain = self.wallet.config.chains[0]
        options: list[str] = self.wallet.query_client.fetch_query(
            ("wallets", chain.id),
            lambda: list(self.wallet.ui.wallets),
        )
        with Vertical(id="wallet_dialog", classes="panel"):
            yield Label("Connect a Wallet", classes="section-title")
            yield Label(f"Network: {chain.name}", classes="muted")
            for name in options:
                yield Button(name, name=name, classes="wallet-option")
            yield Button("Cancel", variant="error", id="cancel_wallet_btn")

    def action_cancel(self) -> None:
        self.dismiss(None)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.has_class("wallet-option"):
            self.dismiss(event.button.name)
        else:
            self.dismiss(None)
