"""vibedetector exception hierarchy.

All public exceptions inherit from VibeDetectorError, giving callers a single
base class to catch when they want to handle any vibedetector failure
without swallowing unrelated errors.
"""

from __future__ import annotations

from pathlib import Path


class VibeDetectorError(Exception):
    """Base exception for all vibedetector errors."""


class TargetDirectoryError(VibeDetectorError):
    """Raised when the directory to scan cannot be used.

    Covers paths that cannot be made absolute, paths that do not exist,
    and paths that exist but are not directories. Scanning never starts
    once this is raised.
    """

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class UnknownToolError(VibeDetectorError, KeyError):
    """Raised when a tool name is not present in the signature registry."""

    def __str__(self) -> str:
        return f"Unknown tool: {self.args[0]}"


class OutputError(VibeDetectorError):
    """Raised when a result set cannot be serialized.

    The data model is finite and fully known, so this indicates an
    internal bug rather than a user error.
    """
