"""Output formatting for the vibedetector CLI.

Every renderer is a pure function that turns a detection list and the
scanned directory into a string. Nothing here touches the filesystem.

Formats:
    plain   -- grouped, human-readable report (default).
    json    -- structured document for scripts.
    compact -- comma-separated tool names.
    table   -- one aligned row per detection.

Entry kinds are tagged ``file``/``dir `` in plain and table output but
``file``/``directory`` in JSON. The JSON spelling is what downstream
scripts already parse, so the two stay different.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

from vibedetector.discovery.models import Detection
from vibedetector.discovery.tool_registry import (
    TOOL_SIGNATURES,
    ToolSignature,
    sorted_signatures,
)
from vibedetector.exceptions import OutputError

NONE_DETECTED = "No AI coding tools detected"

# Tool column width for table output; longer names are truncated.
TABLE_NAME_WIDTH = 22

_TABLE_HEADER = f"{'Tool':<{TABLE_NAME_WIDTH}} | Type | Path"
_TABLE_DIVIDER = f"{'-' * (TABLE_NAME_WIDTH + 1)}|------|-----"


def relative_path(path: Path, directory: Path) -> str:
    """Return ``path`` relative to ``directory``, or absolute if it is not under it."""
    try:
        return str(path.relative_to(directory))
    except ValueError:
        return str(path)


def kind_marker(detection: Detection) -> str:
    """Fixed-width kind tag used by plain and table output."""
    return "dir " if detection.is_directory else "file"


def group_by_tool(detections: list[Detection]) -> list[tuple[ToolSignature, list[Detection]]]:
    """Group detections by tool name, sorting groups by name.

    Detections inside a group keep the order the scan produced them in.

    Returns:
        ``(signature, detections)`` pairs ordered by ordinal name comparison.
    """
    groups: dict[str, list[Detection]] = {}
    for detection in detections:
        groups.setdefault(detection.tool.name, []).append(detection)
    return [(groups[name][0].tool, groups[name]) for name in sorted(groups)]


def format_plain(detections: list[Detection], directory: Path) -> str:
    """Render the grouped, human-readable report."""
    if not detections:
        return f"No AI coding tool configurations detected in {directory}"

    lines = [f"AI coding tools detected in {directory}:", ""]
    for tool, tool_detections in group_by_tool(detections):
        lines.append(f"  {tool.name}")
        lines.append(f"    {tool.description}")
        lines.append(f"    {tool.url}")
        lines.append("    Files:")
        for d in tool_detections:
            lines.append(f"      [{kind_marker(d)}] {relative_path(d.path, directory)}")
        lines.append("")
    return "\n".join(lines) + "\n"


def build_json_document(detections: list[Detection], directory: Path) -> dict[str, Any]:
    """Build the JSON-serializable report structure.

    Key order is part of the output contract and is fixed here.
    """
    tools: list[dict[str, Any]] = []
    for tool, tool_detections in group_by_tool(detections):
        tools.append({
            "name": tool.name,
            "description": tool.description,
            "url": tool.url,
            "paths": [
                {"path": relative_path(d.path, directory), "type": d.kind}
                for d in tool_detections
            ],
        })
    return {
        "directory": str(directory),
        "detected": len(detections) > 0,
        "tools": tools,
    }


def format_json(detections: list[Detection], directory: Path) -> str:
    """Render the structured JSON document with two-space indentation.

    Raises:
        OutputError: If the document cannot be encoded.
    """
    document = build_json_document(detections, directory)
    try:
        return json.dumps(document, indent=2, ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        raise OutputError(f"Failed to encode JSON output: {exc}") from exc


def format_compact(detections: list[Detection], directory: Path) -> str:
    """Render the sorted, comma-separated list of distinct tool names."""
    if not detections:
        return NONE_DETECTED
    names = sorted({d.tool.name for d in detections})
    return ", ".join(names)


def format_table(detections: list[Detection], directory: Path) -> str:
    """Render one aligned row per detection, sorted by tool name then path."""
    if not detections:
        return NONE_DETECTED

    lines = [_TABLE_HEADER, _TABLE_DIVIDER]
    for d in sorted(detections, key=lambda d: (d.tool.name, str(d.path))):
        name = d.tool.name[:TABLE_NAME_WIDTH]
        lines.append(
            f"{name:<{TABLE_NAME_WIDTH}} | {kind_marker(d)} | "
            f"{relative_path(d.path, directory)}"
        )
    return "\n".join(lines) + "\n"


def format_tool_list(signatures: tuple[ToolSignature, ...] = TOOL_SIGNATURES) -> str:
    """Render the registry itself, sorted case-insensitively by name.

    Returns:
        Multi-line string ready for terminal output. Never raises.
    """
    lines = ["Supported AI coding tools:", ""]
    for tool in sorted_signatures(signatures):
        lines.append(f"  {tool.name}")
        lines.append(f"    {tool.description}")
        lines.append(f"    URL: {tool.url}")
        if tool.files:
            lines.append(f"    Files: {', '.join(tool.files)}")
        if tool.directories:
            lines.append(f"    Directories: {'/, '.join(tool.directories)}/")
        lines.append("")
    return "\n".join(lines) + "\n"


Formatter = Callable[[list[Detection], Path], str]

FORMATTERS: dict[str, Formatter] = {
    "plain": format_plain,
    "json": format_json,
    "compact": format_compact,
    "table": format_table,
}


def render(output_format: str, detections: list[Detection], directory: Path) -> str:
    """Dispatch to the named formatter, falling back to plain for unknown names."""
    formatter = FORMATTERS.get(output_format, format_plain)
    return formatter(detections, directory)
