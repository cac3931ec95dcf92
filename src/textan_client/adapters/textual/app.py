"""Executable Textual app hosting the report wizard."""

from __future__ import annotations

import argparse
from dataclasses import replace
from typing import Any, Dict, Iterable, List, Optional, Sequence, Set

try:  # pragma: no cover - imported only when the app is run
    from rich.cells import cell_len
    from textual import events
    from textual.app import App, ComposeResult
    from textual.containers import Horizontal, Vertical, VerticalScroll
    from textual.message import Message
    from textual.widgets import (
        Button,
        ContentSwitcher,
        Footer,
        Header,
        Static,
        TextArea,
    )
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use textan_client.adapters.textual.app"
    ) from exc

from textan_client.config import ClientSettings
from textan_client.report import Token
from textan_client.runtime import telemetry
from textan_client.wizard import PointerKind, create_report_wizard

from .controller import TextualReportAdapter, TextualUIHooks

_GLYPHS = {"\n": "↵", "\r": "", "\t": "    "}


def _glyph(token: Token) -> str:
    return _GLYPHS.get(token.text, token.text)


def wrap_token_rows(tokens: Iterable[Token], width: int) -> List[List[Token]]:
    """Group tokens into rows no wider than ``width`` cells.

    A newline token closes its row. A token wider than ``width`` gets a row
    of its own.
    """

    rows: List[List[Token]] = []
    current: List[Token] = []
    used = 0
    for token in tokens:
        cells = cell_len(_glyph(token))
        if current and used + cells > width:
            rows.append(current)
            current, used = [], 0
        current.append(token)
        used += cells
        if token.text == "\n":
            rows.append(current)
            current, used = [], 0
    if current:
        rows.append(current)
    return rows


class TokenLabel(Static):
    """One rendered token; forwards pointer events tagged with its index."""

    class Pointer(Message):
        def __init__(self, kind: PointerKind, index: int) -> None:
            super().__init__()
            self.kind = kind
            self.index = index

    def __init__(self, token: Token) -> None:
        super().__init__(_glyph(token), markup=False)
        self.index = token.index
        if token.is_separator:
            self.add_class("separator")

    def on_mouse_down(self, event: events.MouseDown) -> None:
        self.post_message(self.Pointer("press", self.index))
        event.stop()

    def on_enter(self, event: events.Enter) -> None:
        del event
        self.post_message(self.Pointer("drag_enter", self.index))


class TokenFlow(VerticalScroll):
    """Token labels laid out in rows that wrap at the visible width."""

    def __init__(self, *, id: Optional[str] = None) -> None:
        super().__init__(id=id)
        self._tokens: List[Token] = []
        self._selected: Set[int] = set()
        self._width = 0

    def set_tokens(self, tokens: Sequence[Token]) -> None:
        self._tokens = list(tokens)
        self._selected = set()
        self.call_later(self.reflow, force=True)

    def set_selected(self, indices: Iterable[int]) -> None:
        self._selected = set(indices)
        for label in self.query(TokenLabel):
            label.set_class(label.index in self._selected, "selected")

    async def on_resize(self, event: events.Resize) -> None:
        del event
        await self.reflow()

    async def reflow(self, *, force: bool = False) -> None:
        width = self.scrollable_content_region.width
        if not force and (width <= 0 or width == self._width):
            return
        self._width = width
        await self.remove_children()
        if width <= 0:
            # Hidden for now; the first resize after it is shown lays it out.
            return
        rows = []
        for row in wrap_token_rows(self._tokens, width):
            labels = [TokenLabel(token) for token in row]
            for label in labels:
                label.set_class(label.index in self._selected, "selected")
            rows.append(Horizontal(*labels, classes="token-row"))
        if rows:
            await self.mount(*rows)


class TextAnApp(App[None]):
    """Two-step report wizard: edit the text, then select entity spans."""

    TITLE = "TextAn"

    CSS = """
	#editor {
		height: 1fr;
	}

	#tokens {
		height: 1fr;
		border: round $accent;
		padding: 0 1;
	}

	.token-row {
		height: auto;
		width: auto;
	}

	TokenLabel {
		width: auto;
	}

	TokenLabel.separator {
		color: $text-muted;
	}

	TokenLabel.selected {
		background: $accent;
		color: $text;
	}

	.actions {
		height: auto;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, settings: Optional[ClientSettings] = None) -> None:
        super().__init__()
        self.settings = settings or ClientSettings()
        self.adapter: TextualReportAdapter | None = None
        self._telemetry_log = telemetry.get_logger("textan_client.adapters.textual")

    def compose(self) -> ComposeResult:
        yield Header()
        with ContentSwitcher(initial="edit"):
            with Vertical(id="edit"):
                yield TextArea(self.settings.sample_text, id="editor")
                with Horizontal(classes="actions"):
                    yield Button("Cancel", id="edit-cancel")
                    yield Button("Next", id="edit-next", variant="primary")
            with Vertical(id="entities"):
                yield TokenFlow(id="tokens")
                with Horizontal(classes="actions"):
                    yield Button("Cancel", id="entities-cancel")
                    yield Button("Done", id="entities-next", variant="primary")
        yield Static("", id="status-line")
        yield Footer()

    def on_mount(self) -> None:
        wizard = create_report_wizard(self.settings)
        self.sub_title = wizard.title
        hooks = TextualUIHooks(
            render_tokens=self._render_tokens,
            update_selection=self._update_selection,
            update_status=self._update_status,
            handle_event=self._handle_event,
            log=self._telemetry_log.debug,
        )
        self.adapter = TextualReportAdapter(wizard, hooks)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if not self.adapter:
            return
        if event.button.id == "edit-next":
            self.adapter.set_report_text(self.query_one("#editor", TextArea).text)
            self.adapter.next()
        elif event.button.id == "entities-next":
            self.adapter.next()
        elif event.button.id in {"edit-cancel", "entities-cancel"}:
            self.adapter.cancel()

    def on_token_label_pointer(self, message: TokenLabel.Pointer) -> None:
        if self.adapter and not self.adapter.wizard.closed:
            self.adapter.handle_pointer(message.kind, message.index)

    def on_mouse_up(self, event: events.MouseUp) -> None:
        del event
        if not self.adapter or self.adapter.wizard.closed:
            return
        if self.query_one(ContentSwitcher).current == "entities":
            self.adapter.handle_pointer("release")

    def _render_tokens(self, tokens: Sequence[Token]) -> None:
        self.query_one(TokenFlow).set_tokens(tokens)

    def _update_selection(self, indices: Sequence[int]) -> None:
        self.query_one(TokenFlow).set_selected(indices)

    def _update_status(self, status: str) -> None:
        self.query_one("#status-line", Static).update(status)

    def _handle_event(self, name: str, payload: Any | None) -> None:
        if name == "wizard.step" and isinstance(payload, str):
            self.query_one(ContentSwitcher).current = payload
            if payload == "entities":
                self.call_after_refresh(self.query_one(TokenFlow).reflow)
        elif name == "report.created" and isinstance(payload, dict):
            self._announce(payload)
        elif name == "wizard.close":
            # Leave the confirmation toast on screen briefly before exiting.
            self.set_timer(1.5, self.exit)

    def _announce(self, payload: Dict[str, Any]) -> None:
        covered = payload.get("text") or ""
        message = "Zpráva úspěšně vytvořena"
        if covered:
            message = f"{message}: {covered!r}"
        self.notify(message, title="Hotovo!")


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    defaults = ClientSettings.from_env()
    parser = argparse.ArgumentParser(description="Run the TextAn report wizard.")
    parser.add_argument(
        "--sample-text",
        default=defaults.sample_text,
        help="Initial report text shown in the editor",
    )
    parser.add_argument(
        "--preserve-on-press",
        action="store_true",
        default=defaults.preserve_on_press,
        help="Pressing inside the committed selection keeps it instead of re-anchoring",
    )
    parser.add_argument(
        "--log-preset",
        choices=telemetry.PRESETS,
        default=defaults.log_preset or "file",
        help="Telemetry preset (default: file, the terminal belongs to the UI)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:  # pragma: no cover
    args = _parse_args(argv)
    settings = replace(
        ClientSettings.from_env(),
        sample_text=args.sample_text,
        preserve_on_press=args.preserve_on_press,
        log_preset=args.log_preset,
    )
    telemetry.configure(preset=settings.log_preset)
    TextAnApp(settings).run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
