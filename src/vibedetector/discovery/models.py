"""Data models for the discovery module.

Contains the result type produced by ``detect_tools``: one record per
configuration file or directory found on disk.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from vibedetector.discovery.tool_registry import ToolSignature


@dataclass(frozen=True)
class Detection:
    """A single tool configuration entry found in the scanned directory.

    Attributes:
        tool: The ``ToolSignature`` whose candidate matched.
        path: Absolute path to the matching file or directory.
        is_directory: True for a directory candidate, False for a file.
    """

    tool: ToolSignature
    path: Path
    is_directory: bool = False

    @property
    def kind(self) -> str:
        """Entry kind as used in structured output ("file" or "directory")."""
        return "directory" if self.is_directory else "file"
