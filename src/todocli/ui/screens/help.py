"""Help screen showing keyboard shortcuts."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Static

SHORTCUTS: list[tuple[str, list[tuple[str, str]]]] = [
    (
        "Navigation",
        [
            ("j / Down", "Next task"),
            ("k / Up", "Previous task"),
        ],
    ),
    (
        "Tasks",
        [
            ("n", "Add a new task"),
            ("Space / c", "Mark task completed"),
            ("d", "Delete task"),
            ("Escape", "Cancel new task"),
        ],
    ),
    (
        "General",
        [
            ("r", "Reload from disk"),
            ("?", "Show this help"),
            ("q", "Quit"),
        ],
    ),
]


class HelpScreen(ModalScreen):
    """Modal help screen showing keyboard shortcuts."""

    DEFAULT_CSS = """
    HelpScreen {
        align: center middle;
    }

    HelpScreen > Vertical {
        width: 50;
        height: auto;
        max-height: 90%;
        padding: 1 2;
        background: $surface;
        border: solid $primary;
    }

    HelpScreen .help-title {
        text-align: center;
        text-style: bold;
        padding-bottom: 1;
    }

    HelpScreen .section-title {
        text-style: bold;
        color: $primary;
        padding-top: 1;
    }

    HelpScreen .help-row {
        height: 1;
    }

    HelpScreen .help-key {
        width: 14;
        text-style: bold;
    }

    HelpScreen .help-desc {
        width: 1fr;
        color: $text-muted;
    }

    HelpScreen .help-footer {
        text-align: center;
        color: $text-muted;
        padding-top: 1;
    }
    """

    BINDINGS = [
        Binding("escape", "dismiss", "Close", show=False),
    ]

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Static("Keyboard Shortcuts", classes="help-title")
            for section, rows in SHORTCUTS:
                yield Static(section, classes="section-title")
                for key, description in rows:
                    with Horizontal(classes="help-row"):
                        yield Static(key, classes="help-key")
                        yield Static(description, classes="help-desc")
            yield Static("Press any key to close", classes="help-footer")

    def on_key(self, event) -> None:
        """Dismiss on any key press and prevent propagation."""
        event.stop()
        self.dismiss()
