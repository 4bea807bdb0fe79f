"""Error types raised by the autoloader itself.

Faults raised by loaded units are never wrapped: extension faults are
converted into results at the fault boundary and host faults propagate as
they were raised.
"""

from __future__ import annotations

from pathlib import Path


class AutoloadError(Exception):
    """Base class for autoloader errors."""


class MissingHostFile(AutoloadError, FileNotFoundError):
    """A file the host installation must provide does not exist."""

    def __init__(self, name: str, path: Path):
        self.name = name
        self.path = path
        super().__init__(f"{name}: required file missing at {path}")


class LayoutFileError(AutoloadError):
    """The YAML layout file is unreadable or malformed."""
