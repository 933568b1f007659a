"""Terminal UI components."""
