"""Main task list screen."""

from rich.markup import escape
from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import DataTable, Footer, Header, Static

from ...models import STATUS_COMPLETED, TaskListing, TaskStats
from ..widgets.new_task_bar import NewTaskBar

DONE_MARK = "[green]✓[/]"
OPEN_MARK = "[dim]○[/]"
EMPTY_MESSAGE = "No tasks. Press [b]n[/] to add one."


class TaskListScreen(Screen):
    """Table of tasks with a summary line."""

    DEFAULT_CSS = """
    TaskListScreen #tasks {
        height: 1fr;
    }

    TaskListScreen #empty-message {
        height: 1fr;
        content-align: center middle;
        color: $text-muted;
        display: none;
    }

    TaskListScreen.-empty #tasks {
        display: none;
    }

    TaskListScreen.-empty #empty-message {
        display: block;
    }

    TaskListScreen #summary {
        height: 1;
        padding: 0 1;
        background: $boost;
    }
    """

    def compose(self) -> ComposeResult:
        yield Header()
        yield DataTable(id="tasks", cursor_type="row", zebra_stripes=True)
        yield Static(EMPTY_MESSAGE, id="empty-message")
        yield Static("", id="summary")
        yield NewTaskBar()
        yield Footer()

    def on_mount(self) -> None:
        """Set up columns and fill the table."""
        table = self.query_one("#tasks", DataTable)
        table.add_column("", key="mark", width=2)
        table.add_column("ID", key="id", width=5)
        table.add_column("Title", key="title")
        self.load_tasks()
        table.focus()

    def load_tasks(self, focus_task_id: int | None = None) -> None:
        """Rebuild the table from the app's task service."""
        service = self.app.task_service  # pyrefly: ignore[missing-attribute]
        self.show_listing(service.list_tasks(), service.get_stats(), focus_task_id)

    def show_listing(
        self,
        listing: TaskListing,
        stats: TaskStats,
        focus_task_id: int | None = None,
    ) -> None:
        """Render a listing, keeping the cursor near where it was."""
        table = self.query_one("#tasks", DataTable)
        previous_row = table.cursor_row
        table.clear()

        for entry in listing.entries:
            if entry.status == STATUS_COMPLETED:
                mark, title = DONE_MARK, f"[dim strike]{escape(entry.title)}[/]"
            else:
                mark, title = OPEN_MARK, escape(entry.title)
            table.add_row(mark, str(entry.id), title, key=str(entry.id))

        self.set_class(listing.is_empty, "-empty")
        self.query_one("#summary", Static).update(
            f"{stats.total} total • {stats.active} active • {stats.completed} completed"
        )

        if listing.is_empty:
            return
        row = previous_row
        if focus_task_id is not None:
            ids = [entry.id for entry in listing.entries]
            if focus_task_id in ids:
                row = ids.index(focus_task_id)
        table.move_cursor(row=min(max(row, 0), table.row_count - 1))

    def get_current_task_id(self) -> int | None:
        """Id of the task under the cursor, or None when the table is empty."""
        table = self.query_one("#tasks", DataTable)
        if table.row_count == 0:
            return None
        row_key, _ = table.coordinate_to_cell_key(table.cursor_coordinate)
        if row_key.value is None:
            return None
        return int(row_key.value)

    def open_new_task_bar(self) -> None:
        """Show the title input."""
        self.query_one(NewTaskBar).open()

    def close_new_task_bar(self) -> None:
        """Hide the title input and return focus to the table."""
        self.query_one(NewTaskBar).close()
        self.query_one("#tasks", DataTable).focus()
