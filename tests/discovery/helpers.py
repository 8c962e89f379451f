"""Shared test helpers for creating fake project directories.

Each helper lays down the minimal on-disk footprint a given AI coding tool
leaves in a project root. Used by the detector, output and CLI tests.
"""

from __future__ import annotations

from pathlib import Path


def create_claude_project(root: Path) -> None:
    """Create a project with a lone CLAUDE.md."""
    root.mkdir(parents=True, exist_ok=True)
    (root / "CLAUDE.md").write_text("# Project notes\n")


def create_cursor_project(root: Path) -> None:
    """Create a project with both a .cursor/ directory and .cursorrules."""
    (root / ".cursor").mkdir(parents=True, exist_ok=True)
    (root / ".cursorrules").write_text("Always use type hints.\n")


def create_copilot_project(root: Path) -> None:
    """Create a project with nested Copilot instructions."""
    github = root / ".github"
    github.mkdir(parents=True, exist_ok=True)
    (github / "copilot-instructions.md").write_text("Prefer small PRs.\n")


def create_aider_project(root: Path) -> None:
    """Create a project with several Aider files and its directory."""
    root.mkdir(parents=True, exist_ok=True)
    (root / ".aider.conf.yml").write_text("model: gpt-4\n")
    (root / "CONVENTIONS.md").write_text("- tabs\n")
    (root / ".aider").mkdir(exist_ok=True)


def create_unrelated_project(root: Path) -> None:
    """Create ordinary project files that belong to no AI tool."""
    root.mkdir(parents=True, exist_ok=True)
    (root / "README.md").write_text("# Hello\n")
    (root / ".git").mkdir(exist_ok=True)
    (root / ".vscode").mkdir(exist_ok=True)
    (root / "src").mkdir(exist_ok=True)
