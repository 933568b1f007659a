"""Command line front ends."""

from .interactive import run_interactive
from .oneshot import run_oneshot

__all__ = [
    "run_interactive",
    "run_oneshot",
]
