"""Task id parsing for command line input."""


def parse_task_id(text: str) -> int | None:
    """Parse a task id typed by the user. Returns None if it is not a valid id."""
    text = text.strip()
    if not (text.isascii() and text.isdigit()):
        return None
    return int(text)
