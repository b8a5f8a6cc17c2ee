from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Union

import readchar

from gridmenu.config import settings

Key = Union[int, str]

# readchar reports Enter as CR on Windows and LF elsewhere.
DEFAULT_CONFIRM_KEY = ord(readchar.key.ENTER)
DEFAULT_EXIT_KEY = ord(readchar.key.ESC)


class KeyAction(Enum):
    NONE = "none"
    CONFIRM = "confirm"
    EXIT = "exit"
    LEFT = "left"
    UP = "up"
    RIGHT = "right"
    DOWN = "down"


def to_key_code(key: Key) -> int:
    if isinstance(key, str):
        if len(key) != 1:
            raise ValueError(f"Key must be a single character, got {key!r}")
        return ord(key)
    return int(key)


@dataclass
class KeyBindings:
    confirm: int = DEFAULT_CONFIRM_KEY
    exit: int = DEFAULT_EXIT_KEY
    left: int = ord("a")
    up: int = ord("w")
    right: int = ord("d")
    down: int = ord("s")

    def __post_init__(self) -> None:
        self.confirm = to_key_code(self.confirm)
        self.exit = to_key_code(self.exit)
        self.set_directional(self.left, self.up, self.right, self.down)

    def set_directional(self, left: Key, up: Key, right: Key, down: Key) -> None:
        self.left = to_key_code(left)
        self.up = to_key_code(up)
        self.right = to_key_code(right)
        self.down = to_key_code(down)

    def set_directional_keys(self, keys: Sequence[Key]) -> None:
        """Set left, up, right, down from a 4-sequence."""
        if len(keys) != 4:
            raise ValueError(f"Expected 4 directional keys, got {len(keys)}")
        self.set_directional(*keys)

    def classify(self, key: int) -> KeyAction:
        # Confirm and exit win over a directional binding on the same key.
        if key == self.confirm:
            return KeyAction.CONFIRM
        if key == self.exit:
            return KeyAction.EXIT
        if key == self.left:
            return KeyAction.LEFT
        if key == self.up:
            return KeyAction.UP
        if key == self.right:
            return KeyAction.RIGHT
        if key == self.down:
            return KeyAction.DOWN
        return KeyAction.NONE

    @classmethod
    def from_settings(cls) -> "KeyBindings":
        confirm = settings.get_setting("confirm_key")
        left, up, right, down = settings.get_setting(
            "directional_keys", settings.DEFAULT_DIRECTIONAL_KEYS
        )
        return cls(
            confirm=DEFAULT_CONFIRM_KEY if confirm is None else confirm,
            exit=settings.get_setting("exit_key", DEFAULT_EXIT_KEY),
            left=left,
            up=up,
            right=right,
            down=down,
        )
