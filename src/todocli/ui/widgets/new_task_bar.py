"""Input bar for typing a new task title."""

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widget import Widget
from textual.widgets import Input, Static


class NewTaskBar(Widget):
    """Bottom bar holding the new-task title input. Hidden until opened."""

    DEFAULT_CSS = """
    NewTaskBar {
        height: 1;
        dock: bottom;
        background: $surface;
        display: none;
    }

    NewTaskBar.-visible {
        display: block;
    }

    NewTaskBar .mode-indicator {
        width: auto;
        padding: 0 1;
        background: $primary;
        color: $text;
    }

    NewTaskBar .title-input {
        width: 1fr;
        border: none;
        background: $surface;
    }

    NewTaskBar .title-input:focus {
        border: none;
    }
    """

    INPUT_ID = "new-task-input"

    def compose(self) -> ComposeResult:
        with Horizontal():
            yield Static("New task:", classes="mode-indicator")
            yield Input(
                placeholder="What needs doing?",
                id=self.INPUT_ID,
                classes="title-input",
            )

    def open(self) -> None:
        """Show the bar with an empty, focused input."""
        self.add_class("-visible")
        input_widget = self.query_one(f"#{self.INPUT_ID}", Input)
        input_widget.value = ""
        input_widget.focus()

    def close(self) -> None:
        """Hide the bar without creating anything."""
        self.remove_class("-visible")

    @property
    def is_open(self) -> bool:
        """Check if the bar is visible."""
        return self.has_class("-visible")
