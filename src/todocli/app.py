"""todocli TUI Application."""

from textual.app import App
from textual.binding import Binding
from textual.screen import ModalScreen
from textual.widgets import DataTable, Input

from .config import Settings
from .errors import StorageError, TaskNotFoundError
from .repositories import JsonFileRepository
from .services import TaskService
from .ui.screens import HelpScreen, TaskListScreen
from .ui.widgets import ConfirmModal, NewTaskBar


class TodoApp(App):
    """todocli - terminal task list."""

    TITLE = "todocli"

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
        Binding("?", "help", "Help", show=True),
        Binding("r", "refresh", "Reload", show=True),
        Binding("j", "nav_down", "↓ Task", show=False),
        Binding("k", "nav_up", "↑ Task", show=False),
        Binding("n", "new_task", "New", show=True),
        Binding("space", "complete_task", "Complete", show=True),
        Binding("c", "complete_task", "Complete", show=False),
        Binding("d", "delete_task", "Delete", show=True),
        Binding("escape", "escape", "Back", show=False, priority=True),
    ]

    SCREENS = {
        "tasks": TaskListScreen,
    }

    def __init__(self, settings: Settings | None = None) -> None:
        super().__init__()
        self.settings = settings or Settings()
        self.task_service = TaskService(JsonFileRepository(self.settings.todo_file))
        self.sub_title = str(self.settings.todo_file)

    def on_mount(self) -> None:
        """Load the task file and show the task list."""
        self._load()
        self.push_screen("tasks")

    def _load(self) -> None:
        try:
            self.task_service.load()
        except StorageError as e:
            self.task_service.reset()
            self.notify(f"Load failed, starting empty: {e}", severity="error")

    def action_refresh(self) -> None:
        """Reload tasks from disk."""
        screen = self.screen
        if isinstance(screen, TaskListScreen):
            self._load()
            screen.load_tasks()

    def action_help(self) -> None:
        """Show help screen."""
        self.push_screen(HelpScreen())

    def action_nav_down(self) -> None:
        """Move the cursor to the next task."""
        screen = self.screen
        if isinstance(screen, TaskListScreen):
            screen.query_one("#tasks", DataTable).action_cursor_down()

    def action_nav_up(self) -> None:
        """Move the cursor to the previous task."""
        screen = self.screen
        if isinstance(screen, TaskListScreen):
            screen.query_one("#tasks", DataTable).action_cursor_up()

    def action_new_task(self) -> None:
        """Open the title input."""
        screen = self.screen
        if isinstance(screen, TaskListScreen):
            screen.open_new_task_bar()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Create a task from the submitted title."""
        if event.input.id != NewTaskBar.INPUT_ID:
            return
        screen = self.screen
        if not isinstance(screen, TaskListScreen):
            return

        screen.close_new_task_bar()
        title = event.value.strip()
        if not title:
            self.notify("Task title cannot be empty", severity="warning")
            return

        try:
            task = self.task_service.add_task(title)
        except StorageError as e:
            self.notify(f"Save failed: {e}", severity="error")
            screen.load_tasks()
            return

        screen.load_tasks(focus_task_id=task.id)
        self.notify("Task added", timeout=2)

    def action_complete_task(self) -> None:
        """Mark the task under the cursor as completed."""
        screen = self.screen
        if not isinstance(screen, TaskListScreen):
            return

        task_id = screen.get_current_task_id()
        if task_id is None:
            return

        try:
            self.task_service.complete_task(task_id)
        except TaskNotFoundError as e:
            self.notify(str(e), severity="warning")
        except StorageError as e:
            self.notify(f"Save failed: {e}", severity="error")
        else:
            self.notify(f"Task {task_id} completed", timeout=2)

        screen.load_tasks(focus_task_id=task_id)

    def action_delete_task(self) -> None:
        """Delete the task under the cursor (with confirmation)."""
        screen = self.screen
        if not isinstance(screen, TaskListScreen):
            return

        task_id = screen.get_current_task_id()
        if task_id is None:
            return

        try:
            task = self.task_service.todo_list.get(task_id)
        except TaskNotFoundError as e:
            self.notify(str(e), severity="warning")
            return

        self.push_screen(  # pyrefly: ignore[no-matching-overload]
            ConfirmModal(f"Delete task {task.id}?", task.title),
            callback=lambda confirmed: self._handle_delete_confirm(task.id, confirmed),
        )

    def _handle_delete_confirm(self, task_id: int, confirmed: bool) -> None:
        """Handle delete confirmation result."""
        if not confirmed:
            return

        screen = self.screen
        if not isinstance(screen, TaskListScreen):
            return

        try:
            self.task_service.remove_task(task_id)
        except TaskNotFoundError as e:
            self.notify(str(e), severity="warning")
        except StorageError as e:
            self.notify(f"Save failed: {e}", severity="error")
        else:
            self.notify("Task deleted", timeout=2)

        screen.load_tasks()

    def action_escape(self) -> None:
        """Dismiss a modal or cancel the new-task input."""
        screen = self.screen

        if isinstance(screen, ModalScreen):
            screen.dismiss()
            return

        if isinstance(screen, TaskListScreen) and screen.query_one(NewTaskBar).is_open:
            screen.close_new_task_bar()


def run(settings: Settings | None = None) -> None:
    """Run the todocli application."""
    app = TodoApp(settings)
    app.run()
