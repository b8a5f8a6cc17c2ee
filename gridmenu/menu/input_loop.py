from __future__ import annotations

import threading
from enum import Enum
from typing import Callable

from gridmenu.logging import LoggerFactory
from gridmenu.menu.invoker import CallbackInvoker
from gridmenu.menu.navigator import Direction, GridNavigator
from gridmenu.ui.keyboard import KeyAction, KeyBindings
from gridmenu.ui.terminal import TerminalSink

log = LoggerFactory.for_input()

_DIRECTIONS = {
    KeyAction.LEFT: Direction.LEFT,
    KeyAction.UP: Direction.UP,
    KeyAction.RIGHT: Direction.RIGHT,
    KeyAction.DOWN: Direction.DOWN,
}


class LoopState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    STOPPED = "stopped"


class InputLoop:
    """Blocking key loop driving navigation and callbacks.

    ``request_stop`` may be called from any thread, before or during
    ``run``. It is only polled between key reads: a read already blocked
    keeps waiting until the next key arrives. The request is consumed when
    the loop exits, so a stopped loop can be run again.
    """

    def __init__(
        self,
        navigator: GridNavigator,
        invoker: CallbackInvoker,
        bindings: KeyBindings,
        sink: TerminalSink,
        render: Callable[[], None],
    ) -> None:
        self.navigator = navigator
        self.invoker = invoker
        self.bindings = bindings
        self.sink = sink
        self.render = render
        self._stop_requested = threading.Event()
        self._state = LoopState.IDLE

    @property
    def state(self) -> LoopState:
        return self._state

    @property
    def stop_requested(self) -> bool:
        return self._stop_requested.is_set()

    def request_stop(self) -> None:
        self._stop_requested.set()

    def run(self) -> None:
        """Read and handle keys until the exit key or a stop request."""
        self._state = LoopState.RUNNING
        log.info("Input loop started")
        try:
            while not self._stop_requested.is_set():
                self.handle_key(self.sink.read_key())
        finally:
            self._stop_requested.clear()
            self._state = LoopState.STOPPED
            log.info("Input loop stopped")

    def handle_key(self, key: int) -> bool:
        """Apply one key. Returns True if the frame was re-rendered."""
        action = self.bindings.classify(key)
        log.trace(f"Key press {key:#04x} -> {action.value}")

        if action is KeyAction.CONFIRM:
            self.invoker.trigger(self.navigator.selected)
            self.render()
            return True
        if action is KeyAction.EXIT:
            self._stop_requested.set()
            return False
        direction = _DIRECTIONS.get(action)
        if direction is None:
            return False
        if not self.navigator.move(direction):
            return False
        self.render()
        return True
