"""Static registry of known AI coding tools and their project-level files.

Each ``ToolSignature`` lists the file names and directory names a specific
AI coding assistant drops into a project root. ``detect_tools`` checks each
candidate relative to the scanned directory, so a candidate may contain a
separator (``.github/copilot-instructions.md``) but never starts with one.

Some tools use the same name for a file or a directory (Cline's
``.clinerules``, Bolt's ``.bolt``, Replit's ``.replit``). Both spellings are
listed; the entry kind on disk decides which one matches.
"""

from __future__ import annotations

from dataclasses import dataclass

from vibedetector.exceptions import UnknownToolError


@dataclass(frozen=True)
class ToolSignature:
    """Describes how an AI coding tool shows up in a project directory.

    Attributes:
        name: Human-readable display name (e.g., "Claude Code"). Unique.
        description: One-line description of the tool.
        url: Homepage or documentation URL.
        files: Candidate file names, relative to the project root.
        directories: Candidate directory names, relative to the project root.
    """

    name: str
    description: str
    url: str
    files: tuple[str, ...] = ()
    directories: tuple[str, ...] = ()


def _build_signatures() -> tuple[ToolSignature, ...]:
    """Build the complete, ordered list of known tool signatures.

    Returns:
        Tuple of signatures in detection order.
    """
    return (
        ToolSignature(
            name="Claude Code",
            description="Anthropic's CLI for Claude",
            url="https://claude.ai/code",
            files=("CLAUDE.md",),
            directories=(".claude",),
        ),
        ToolSignature(
            name="Cursor",
            description="AI-powered code editor",
            url="https://cursor.com",
            files=(".cursorrules",),
            directories=(".cursor",),
        ),
        ToolSignature(
            name="Windsurf",
            description="Codeium's AI IDE",
            url="https://codeium.com/windsurf",
            files=(".windsurfrules",),
            directories=(".windsurf",),
        ),
        ToolSignature(
            name="GitHub Copilot",
            description="GitHub's AI pair programmer",
            url="https://github.com/features/copilot",
            files=(".github/copilot-instructions.md",),
        ),
        ToolSignature(
            name="Aider",
            description="AI pair programming in your terminal",
            url="https://aider.chat",
            files=(".aider.conf.yml", ".aiderignore", "CONVENTIONS.md"),
            directories=(".aider",),
        ),
        ToolSignature(
            name="Cline",
            description="AI coding assistant for VS Code",
            url="https://github.com/cline/cline",
            files=(".clinerules",),
            directories=(".clinerules",),
        ),
        ToolSignature(
            name="Zed",
            description="Zed editor AI configuration",
            url="https://zed.dev",
            directories=(".zed",),
        ),
        ToolSignature(
            name="Continue.dev",
            description="Open-source AI code assistant",
            url="https://continue.dev",
            directories=(".continue",),
        ),
        ToolSignature(
            name="Kiro",
            description="AWS agentic AI IDE",
            url="https://kiro.dev",
            directories=(".kiro",),
        ),
        ToolSignature(
            name="Gemini CLI",
            description="Google's Gemini Code Assist",
            url="https://developers.google.com/gemini-code-assist",
            files=("GEMINI.md", "AGENT.md"),
            directories=(".gemini",),
        ),
        ToolSignature(
            name="AGENTS.md Standard",
            description="Proposed cross-tool agent rules standard",
            url="https://github.com/anthropics/agent-rules",
            files=("AGENTS.md",),
        ),
        ToolSignature(
            name="Bolt",
            description="StackBlitz AI full-stack development",
            url="https://bolt.new",
            files=(".bolt",),
            directories=(".bolt",),
        ),
        ToolSignature(
            name="Replit Agent",
            description="Replit's AI coding agent",
            url="https://replit.com",
            files=(".replit",),
            directories=(".replit",),
        ),
        ToolSignature(
            name="Codex CLI",
            description="OpenAI's coding agent CLI",
            url="https://github.com/openai/codex",
            files=("codex.md",),
            directories=(".codex",),
        ),
        ToolSignature(
            name="Tabnine",
            description="AI code completion assistant",
            url="https://tabnine.com",
            files=(".tabnine.json", "tabnine.yaml"),
            directories=(".tabnine",),
        ),
        ToolSignature(
            name="Amazon Q Developer",
            description="AWS AI coding assistant",
            url="https://aws.amazon.com/q/developer/",
            directories=(".amazonq", ".q"),
        ),
        ToolSignature(
            name="Sourcegraph Cody",
            description="Sourcegraph's AI coding assistant",
            url="https://sourcegraph.com/cody",
            files=(".cody.json", "cody.json"),
            directories=(".cody",),
        ),
        ToolSignature(
            name="Augment Code",
            description="Enterprise AI coding assistant",
            url="https://augmentcode.com",
            directories=(".augment",),
        ),
        ToolSignature(
            name="Supermaven",
            description="AI code completion with large context",
            url="https://supermaven.com",
            directories=(".supermaven",),
        ),
    )


# Module-level constant: the canonical list of all known tool signatures.
TOOL_SIGNATURES: tuple[ToolSignature, ...] = _build_signatures()


def get_signature(
    name: str,
    signatures: tuple[ToolSignature, ...] = TOOL_SIGNATURES,
) -> ToolSignature:
    """Look up a signature by its exact display name.

    Raises:
        UnknownToolError: If no signature has that name.
    """
    for signature in signatures:
        if signature.name == name:
            return signature
    raise UnknownToolError(name)


def sorted_signatures(
    signatures: tuple[ToolSignature, ...] = TOOL_SIGNATURES,
) -> list[ToolSignature]:
    """Return the signatures sorted case-insensitively by name."""
    return sorted(signatures, key=lambda s: s.name.lower())
