"""
Pytest configuration and shared fixtures for gridmenu tests.

This module provides a scripted terminal, menus built on it, and helpers for
inspecting rendered frames.
"""

import re
from typing import Callable, List

import pytest

from gridmenu.config import settings
from gridmenu.menu import CommandMenu, PageConfig
from gridmenu.ui.colors import ColorScheme, Palette
from gridmenu.ui.keyboard import KeyBindings
from gridmenu.ui.renderer import CURSOR_HOME, LayoutConfig
from gridmenu.ui.terminal import BufferTerminal

ANSI_PATTERN = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")

ESC = "\x1b"


def strip_ansi(text: str) -> str:
    return ANSI_PATTERN.sub("", text)


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    """Isolate every test from a settings file in the user's home."""
    monkeypatch.setattr(
        settings.settings_store, "values", dict(settings.DEFAULT_SETTINGS)
    )


@pytest.fixture
def terminal() -> BufferTerminal:
    return BufferTerminal()


@pytest.fixture
def plain_colors() -> ColorScheme:
    """Color scheme that emits no escape sequences at all."""
    return ColorScheme(highlight_foreground=Palette.NONE)


@pytest.fixture
def make_menu(terminal) -> Callable[..., CommandMenu]:
    """Factory for menus wired to the scripted terminal."""

    def _make(count: int = 0, columns: int = 1, **layout_kwargs) -> CommandMenu:
        layout = LayoutConfig(max_columns=columns, **layout_kwargs)
        menu = CommandMenu(
            terminal,
            layout=layout,
            bindings=KeyBindings(),
            page=PageConfig(),
        )
        for index in range(count):
            menu.add_option(f"Option {index}", lambda: None)
        return menu

    return _make


@pytest.fixture
def frame_text() -> Callable[[List[str]], str]:
    """Join frame writes, dropping the cursor-home prefix and colors."""

    def _join(writes: List[str]) -> str:
        text = "".join(writes)
        if text.startswith(CURSOR_HOME):
            text = text[len(CURSOR_HOME):]
        return strip_ansi(text)

    return _join


@pytest.fixture
def temp_settings_file(tmp_path, monkeypatch):
    """Point the settings module at a scratch file."""
    path = tmp_path / "settings.json"
    monkeypatch.setattr("gridmenu.config.settings.SETTINGS_PATH", path)
    return path
