# src/ui/widgets/royalty_slider.py

"""Stepper for the royalty percentage, bounded to the allowed range."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.reactive import reactive
from textual.widgets import Button, Label

from src.config.settings import Settings
from src.models.draft import clamp_royalty


class RoyaltySlider(Horizontal, can_focus=True):
    """Integer percentage control, one step per press."""

    BINDINGS = [
        Binding("left", "decrement", "Less"),
        Binding("right", "increment", "More"),
    ]

    value: reactive[int] = reactive(Settings.ROYALTY_DEFAULT)

    def compose(self) -> ComposeResult:
        yield Button("−", classes="royalty-down")
        yield Label(f"{self.value}%", classes="royalty-value")
        yield Button("+", classes="royalty-up")

    def validate_value(self, value: int) -> int:
        return clamp_royalty(value)

    def watch_value(self, value: int) -> None:
        for label in self.query(".royalty-value").results(Label):
            label.update(f"{value}%")

    def action_increment(self) -> None:
        self.value += 1

    def action_decrement(self) -> None:
        self.value -= 1

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.has_class("royalty-up"):
            self.action_increment()
        elif event.button.has_class("royalty-down"):
            self.action_decrement()
