"""todocli - a small personal task tracker."""

__version__ = "0.1.0"
