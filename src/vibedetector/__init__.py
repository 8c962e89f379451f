"""vibedetector: Detect AI coding assistant configuration files in a project."""

from __future__ import annotations

__version__ = "1.0.0"
__license__ = "MIT"

PROGRAM_NAME = "vibedetector"
