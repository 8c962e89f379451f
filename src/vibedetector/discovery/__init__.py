"""Detection of AI coding tool configurations in a project directory.

Public API::

    from vibedetector.discovery import detect_tools, resolve_target_directory

    directory = resolve_target_directory("./my-project")
    for detection in detect_tools(directory):
        print(f"{detection.tool.name}: {detection.path}")
"""

from __future__ import annotations

from vibedetector.discovery.detector import detect_tools, resolve_target_directory
from vibedetector.discovery.models import Detection
from vibedetector.discovery.tool_registry import (
    TOOL_SIGNATURES,
    ToolSignature,
    get_signature,
    sorted_signatures,
)

__all__ = [
    "Detection",
    "TOOL_SIGNATURES",
    "ToolSignature",
    "detect_tools",
    "get_signature",
    "resolve_target_directory",
    "sorted_signatures",
]
