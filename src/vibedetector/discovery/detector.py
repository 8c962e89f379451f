"""Project-level detector for AI coding tool configurations.

Checks every ``ToolSignature`` candidate against a single target directory
and records what exists on disk. Nothing is read, cached or written.

Detection Algorithm:
    For each signature, in registry order:
    1. For each candidate file, emit a file detection when
       ``directory / candidate`` exists and is not a directory.
    2. For each candidate directory, emit a directory detection when
       ``directory / candidate`` exists and is a directory.

Output order therefore follows the registry and the candidate lists, never
the operating system's directory listing order.
"""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

from vibedetector.discovery.models import Detection
from vibedetector.discovery.tool_registry import TOOL_SIGNATURES, ToolSignature
from vibedetector.exceptions import TargetDirectoryError

logger = logging.getLogger(__name__)


def resolve_target_directory(directory: str | os.PathLike[str] | None = None) -> Path:
    """Turn a user-supplied path into an absolute, validated directory.

    Symlinks are not resolved; ``..`` segments are normalized away.

    Args:
        directory: Path to scan. Defaults to the current working directory.

    Returns:
        The absolute directory path.

    Raises:
        TargetDirectoryError: If the path cannot be made absolute, does not
            exist, or is not a directory.
    """
    try:
        absolute = Path(os.path.abspath(directory if directory is not None else "."))
    except (OSError, ValueError) as exc:
        raise TargetDirectoryError(str(exc)) from exc

    try:
        info = absolute.stat()
    except (OSError, ValueError) as exc:
        raise TargetDirectoryError(
            f"Directory does not exist: {absolute}", path=absolute,
        ) from exc

    if not stat.S_ISDIR(info.st_mode):
        raise TargetDirectoryError(f"Not a directory: {absolute}", path=absolute)
    return absolute


def _entry_is_directory(path: Path) -> bool | None:
    """Stat a candidate, returning None when it is absent or unreadable."""
    try:
        return stat.S_ISDIR(path.stat().st_mode)
    except (PermissionError, OSError):
        logger.debug("Skipping unreadable candidate: %s", path)
        return None


def detect_tools(
    directory: Path,
    signatures: tuple[ToolSignature, ...] = TOOL_SIGNATURES,
) -> list[Detection]:
    """Find every tool configuration present directly under a directory.

    Args:
        directory: Absolute directory to scan, usually from
            ``resolve_target_directory``.
        signatures: Registry to check. Defaults to ``TOOL_SIGNATURES``.

    Returns:
        Detections in registry order, files before directories within
        each signature. Empty if nothing matched.
    """
    detections: list[Detection] = []
    for signature in signatures:
        for file_name in signature.files:
            candidate = directory / file_name
            if _entry_is_directory(candidate) is False:
                detections.append(Detection(tool=signature, path=candidate))

        for dir_name in signature.directories:
            candidate = directory / dir_name
            if _entry_is_directory(candidate) is True:
                detections.append(
                    Detection(tool=signature, path=candidate, is_directory=True)
                )
    return detections
