"""External process execution."""

from vite_pages.process.runner import CommandRunner, CompletedCommand

__all__ = ["CommandRunner", "CompletedCommand"]
