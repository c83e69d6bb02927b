from __future__ import annotations

from collections.abc import Sequence

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, VerticalScroll
from textual.widgets import Header, Label, Markdown

from cvgen.dataset import ResumeDataset
from cvgen.keys import KEY_BINDINGS, WizardKey
from cvgen.models import LoadWarning
from cvgen.tui_rendering import render_hints, render_screen
from cvgen.wizard import (
    Error,
    Generating,
    Renderer,
    Success,
    Welcome,
    WizardState,
    dispatch,
    starts_generation,
)


class ResumeWizardTUI(App[None]):
    """Step-by-step resume builder: pick a role, curate entries, build the PDF."""

    TITLE = "CV GEN"

    # Priority bindings so scroll containers never swallow navigation keys.
    BINDINGS = [
        Binding(name, f"wizard('{key.value}')", key.name.title(), show=False, priority=True)
        for name, key in KEY_BINDINGS.items()
    ]

    CSS = """
Screen {
    layout: vertical;
    background: $background;
}

#output-container {
    height: 1fr;
    border: heavy $primary;
    background: $surface;
    padding: 1;
}

#output {
    color: $text;
}

#statusbar {
    height: auto;
    padding: 0 1;
    border: heavy $primary;
    background: $panel;
    color: $text;
}
"""

    def __init__(
        self,
        dataset: ResumeDataset,
        render: Renderer,
        warnings: Sequence[LoadWarning] = (),
    ) -> None:
        super().__init__()
        self._wizard_state = WizardState(Welcome(), dataset)
        self._renderer = render
        self._load_warnings = list(warnings)
        self._generating = False
        self.outcome: Success | Error | None = None

    @property
    def state(self) -> WizardState:
        return self._wizard_state

    def compose(self) -> ComposeResult:
        yield Header()
        yield VerticalScroll(Markdown("", id="output"), id="output-container")
        yield Container(Label("", id="status"), id="statusbar")

    def on_mount(self) -> None:
        self._refresh_view(self._wizard_state)

    # ---------------------------------------------------------------------
    # KEY HANDLING
    # ---------------------------------------------------------------------

    def action_wizard(self, key_name: str) -> None:
        """Forward a bound key to the wizard."""
        self.handle_wizard_key(WizardKey(key_name))

    def handle_wizard_key(self, key: WizardKey) -> None:
        # Keys pressed while the compiler runs are dropped.
        if self._generating:
            return

        if starts_generation(self._wizard_state, key):
            self._generating = True
            self._refresh_view(WizardState(Generating(), self._wizard_state.dataset))
            # Paint the Generating screen once before the blocking compile.
            self.call_after_refresh(self._finish_generation, key)
            return

        self._apply(key)

    def _finish_generation(self, key: WizardKey) -> None:
        try:
            self._apply(key)
        finally:
            self._generating = False

    def _apply(self, key: WizardKey) -> None:
        self._wizard_state = dispatch(self._wizard_state, key, self._renderer)
        if isinstance(self._wizard_state.screen, (Success, Error)):
            self.outcome = self._wizard_state.screen
        if self._wizard_state.finished:
            self.exit()
            return
        self._refresh_view(self._wizard_state)

    # ---------------------------------------------------------------------
    # VIEW
    # ---------------------------------------------------------------------

    def _refresh_view(self, state: WizardState) -> None:
        output = self.query_one("#output", Markdown)
        status = self.query_one("#status", Label)

        output.update(render_screen(state, self._load_warnings))
        status.update(render_hints(state.screen))
