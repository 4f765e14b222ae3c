# src/ui/screens/create.py

"""Minting form. Nothing entered here is stored or sent anywhere."""

import logging

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.reactive import reactive
from textual.widgets import (
    Button,
    Input,
    Label,
    Select,
    Static,
    Switch,
    TextArea,
)

from src.config.settings import Settings
from src.models.draft import NFTDraft, PreviewState
from src.models.nft import Attribute, Currency
from src.services.image_preview import PreviewError, load_preview
from src.ui.screens.base import PageScreen
from src.ui.widgets.royalty_slider import RoyaltySlider

logger = logging.getLogger("nft_market.ui.create")

_UPLOAD_HINT = (
    "Enter a file path and press Load\n"
    "Support for JPG, PNG, GIF, SVG, MP4, WEBM\n"
    "Max size: 100 MB"
)


class CreateScreen(PageScreen):
    """Collects draft fields, previews a local file, "mints" on submit."""

    preview_state: reactive[PreviewState] = reactive(
        PreviewState.EMPTY, always_update=True
    )

    def __init__(self) -> None:
        super().__init__()
        self.image_preview: str | None = None
        self.properties: list[Attribute] = []

    def compose_page(self) -> ComposeResult:
        with VerticalScroll(id="create_form"):
            yield Label("Create New NFT", classes="page-title")
            with Horizontal(id="create_columns"):
                with Vertical(id="upload_panel", classes="panel"):
                    yield Label("Upload File", classes="section-title")
                    yield Static(_UPLOAD_HINT, id="upload_hint", classes="muted")
                    yield Input(
                        placeholder="Path to an image or video", id="file_path"
                    )
                    with Horizontal(classes="button-row"):
                        yield Button("Load", id="load_btn")
                        yield Button("✕ Clear", variant="error", id="clear_btn")
                    yield Static("", id="preview", markup=False)
                    yield Label("Collection")
                    yield Select(
                        Settings.COLLECTIONS,
                        value="new",
                        allow_blank=False,
                        id="collection",
                    )

                with Vertical(id="details_panel", classes="panel"):
                    yield Label("Name")
                    yield Input(placeholder="Item name", id="name")
                    yield Label("Description")
                    yield TextArea(id="description")
                    with Horizontal(classes="field-row"):
                        with Vertical():
                            yield Label("Price")
                            yield Input(
                                placeholder="0.00", type="number", id="price"
                            )
                        with Vertical():
                            yield Label("Currency")
                            yield Select(
                                [(c, c) for c in Settings.CURRENCIES],
                                value=Currency.ETH.value,
                                allow_blank=False,
                                id="currency",
                            )

                    yield Label("Properties", classes="section-title")
                    with Horizontal(classes="field-row"):
                        with Vertical():
                            yield Label("Trait Type")
                            yield Input(placeholder="E.g. Color", id="trait_type")
                        with Vertical():
                            yield Label("Value")
                            yield Input(placeholder="E.g. Blue", id="trait_value")
                    yield Button("+ Add Property", id="add_property_btn")
                    yield Static("", id="properties", markup=False)

                    with Horizontal(classes="field-row"):
                        with Vertical():
                            yield Label("Royalties", classes="section-title")
                            yield Label(
                                "Earn a percentage of future sales",
                                classes="muted",
                            )
                        yield Switch(value=True, id="royalties_switch")
                    yield Label("Percentage")
                    yield RoyaltySlider(id="royalty")

                    yield Button(
                        "Create NFT", variant="primary", id="submit_btn"
                    )

    def watch_preview_state(self, state: PreviewState) -> None:
        for preview in self.query("#preview").results(Static):
            if state is PreviewState.PENDING:
                preview.update("Loading preview…")
            elif state is PreviewState.LOADED and self.image_preview:
                header, _, payload = self.image_preview.partition(",")
                preview.update(
                    f"Preview ready ({header}, {len(payload)} chars)"
                )
            else:
                preview.update("No file selected")

    # ── Image preview ────────────────────────────────────

    def load_image(self) -> None:
        """Start reading the file named in the path input."""
        path = self.query_one("#file_path", Input).value.strip()
        if not path:
            self.app.notify("Enter a file path to preview", severity="warning")
            return
        self.preview_state = PreviewState.PENDING
        self.run_worker(
            self._read_preview(path), exclusive=True, group="preview"
        )

    async def _read_preview(self, path: str) -> None:
        try:
            data_url = await load_preview(path)
        except PreviewError as e:
            logger.warning("Preview failed for %s: %s", path, e)
            self.image_preview = None
            self.preview_state = PreviewState.EMPTY
            self.app.notify(str(e), severity="warning")
            return
        self.image_preview = data_url
        self.preview_state = PreviewState.LOADED

    def clear_image(self) -> None:
        """Drop the preview, abandoning any read still in flight."""
        self.workers.cancel_group(self, "preview")
        self.image_preview = None
        self.preview_state = PreviewState.EMPTY

    # ── Form ─────────────────────────────────────────────

    def _current_property(self) -> Attribute | None:
        trait = self.query_one("#trait_type", Input).value.strip()
        value = self.query_one("#trait_value", Input).value.strip()
        if not trait and not value:
            return None
        return Attribute(trait, value)

    def add_property(self) -> None:
        """Move the trait/value inputs into the property list."""
        prop = self._current_property()
        if prop is None:
            return
        self.properties.append(prop)
        self.query_one("#trait_type", Input).value = ""
        self.query_one("#trait_value", Input).value = ""
        self.query_one("#properties", Static).update(
            "\n".join(f"{p.trait}: {p.value}" for p in self.properties)
        )

    def collect_draft(self) -> NFTDraft:
        """Snapshot the form into an :class:`NFTDraft`."""
        properties = list(self.properties)
        pending = self._current_property()
        if pending is not None:
            properties.append(pending)
        return NFTDraft(
            name=self.query_one("#name", Input).value,
            description=self.query_one("#description", TextArea).text,
            price=self.query_one("#price", Input).value,
            currency=Currency(str(self.query_one("#currency", Select).value)),
            collection=str(self.query_one("#collection", Select).value),
            properties=properties,
            royalties_enabled=self.query_one("#royalties_switch", Switch).value,
            royalty_percentage=self.query_one("#royalty", RoyaltySlider).value,
            image_preview=self.image_preview,
        )

    def submit(self) -> None:
        """Announce the mint and return to the marketplace."""
        draft = self.collect_draft()
        logger.info(
            "Mint requested: name=%r price=%r %s royalty=%d%% "
            "(%d properties, preview=%s)",
            draft.name,
            draft.price,
            draft.currency.value,
            draft.royalty_percentage,
            len(draft.properties),
            draft.image_preview is not None,
        )
        self.app.notify(
            "Your NFT has been successfully minted!", title="Success"
        )
        self.market.navigate("/")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id
        if button_id == "load_btn":
            self.load_image()
        elif button_id == "clear_btn":
            self.clear_image()
        elif button_id == "add_property_btn":
            self.add_property()
        elif button_id == "submit_btn":
            self.submit()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "file_path":
            self.load_image()
