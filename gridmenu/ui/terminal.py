"""Terminal boundary used by the menu core.

The core never touches the input device directly: it reads key codes,
writes text and clears the screen through a ``TerminalSink``.
"""

from __future__ import annotations

import os
import subprocess
import sys
from collections import deque
from typing import Iterable, List, Protocol, TextIO

import readchar

from gridmenu.ui.keyboard import Key, to_key_code


class TerminalSink(Protocol):
    """Protocol for terminal backends.

    Allows swapping the console for a scripted buffer in tests.
    """

    def read_key(self) -> int:
        """Block until one key is available and return its code."""
        ...

    def write(self, text: str) -> None:
        """Write text to the terminal."""
        ...

    def clear_screen(self) -> None:
        """Clear the whole screen."""
        ...


class ConsoleTerminal:
    """The process console: raw key reads via readchar, output to stdout."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream or sys.stdout

    def read_key(self) -> int:
        # readchar switches the tty to raw mode for the duration of one read.
        return ord(readchar.readchar())

    def write(self, text: str) -> None:
        self._stream.write(text)
        self._stream.flush()

    def clear_screen(self) -> None:
        self._stream.flush()
        if os.name == "nt":
            subprocess.run("cls", shell=True, check=False)
        else:
            subprocess.run(["clear"], check=False)


class BufferTerminal:
    """Scripted keys in, captured text out.

    ``read_key`` raises ``EOFError`` once the scripted keys run out, so a
    loop that never sees its exit key fails loudly instead of hanging.
    """

    def __init__(self, keys: Iterable[Key] = ()) -> None:
        self._keys = deque(to_key_code(key) for key in keys)
        self.output: List[str] = []
        self.transcript: List[str] = []
        self.clear_count = 0

    def feed(self, *keys: Key) -> None:
        self._keys.extend(to_key_code(key) for key in keys)

    @property
    def pending_keys(self) -> int:
        return len(self._keys)

    def read_key(self) -> int:
        if not self._keys:
            raise EOFError("No more scripted keys")
        return self._keys.popleft()

    def write(self, text: str) -> None:
        self.output.append(text)
        self.transcript.append(text)

    def clear_screen(self) -> None:
        # output holds what is on screen now; transcript keeps everything.
        self.clear_count += 1
        self.output.clear()

    @property
    def text(self) -> str:
        return "".join(self.output)
