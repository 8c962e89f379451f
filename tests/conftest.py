"""Shared fixtures for vibedetector tests."""

import pathlib

import pytest

from tests.discovery.helpers import (
    create_aider_project,
    create_claude_project,
    create_cursor_project,
)


@pytest.fixture
def empty_project(tmp_path: pathlib.Path) -> pathlib.Path:
    """An existing directory with nothing in it."""
    project = tmp_path / "empty-project"
    project.mkdir()
    return project


@pytest.fixture
def multi_tool_project(tmp_path: pathlib.Path) -> pathlib.Path:
    """A project configured for Claude Code, Cursor and Aider."""
    project = tmp_path / "multi-tool"
    create_claude_project(project)
    create_cursor_project(project)
    create_aider_project(project)
    return project
