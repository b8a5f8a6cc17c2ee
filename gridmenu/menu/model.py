from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, List, Optional, Sequence

from gridmenu.exceptions import IndexOutOfRangeError, InvalidOperationError
from gridmenu.logging import LoggerFactory
from gridmenu.ui.colors import ColorScheme
from gridmenu.ui.renderer import LayoutConfig

# Extra cells kept free when growing the cell width automatically, so an
# "[index] " prefix still fits beside the longest text.
RESERVE_SPACE = 8

# Sentinel for "no arg given", distinct from an explicit arg=None.
NO_ARG = object()

log = LoggerFactory.for_menu()


class Callback:
    """Action bound to an option."""

    def is_valid(self) -> bool:
        return False

    def execute(self) -> None:
        return None


@dataclass
class NoCallback(Callback):
    """Selectable but inert."""


@dataclass
class NoArgCallback(Callback):
    func: Callable[[], Any]

    def is_valid(self) -> bool:
        return self.func is not None

    def execute(self) -> None:
        self.func()


@dataclass
class ArgCallback(Callback):
    """Callback receiving a stored argument.

    The argument is held by reference, so a callback may mutate it (or the
    menu that owns it) in place.
    """

    func: Optional[Callable[[Any], Any]]
    arg: Any = None

    def is_valid(self) -> bool:
        return self.func is not None

    def execute(self) -> None:
        if self.func is not None:
            self.func(self.arg)


def as_callback(value: Any, arg: Any = NO_ARG) -> Callback:
    if isinstance(value, Callback):
        if arg is not NO_ARG:
            raise ValueError("arg cannot be combined with a Callback instance")
        return value
    if value is None:
        # An arg with no function yet: keep the slot so set_arg works later.
        return NoCallback() if arg is NO_ARG else ArgCallback(None, arg)
    if not callable(value):
        raise TypeError(f"Option callback must be callable, got {type(value).__name__}")
    if arg is NO_ARG:
        return NoArgCallback(value)
    return ArgCallback(value, arg)


@dataclass
class Option:
    text: str
    callback: Callback = field(default_factory=NoCallback)
    enable_new_page: bool = True


@dataclass
class MenuState:
    options: Sequence[Option] = field(default_factory=list)
    selected: int = 0
    top_text: str = ""
    bottom_text: str = ""
    colors: ColorScheme = field(default_factory=ColorScheme)
    should_stop: bool = False


class OptionStore:
    """Ordered options plus the auto-width bookkeeping tied to them."""

    def __init__(self, layout: Optional[LayoutConfig] = None) -> None:
        self.layout = layout if layout is not None else LayoutConfig()
        self._options: List[Option] = []

    def __len__(self) -> int:
        return len(self._options)

    def __iter__(self) -> Iterator[Option]:
        return iter(self._options)

    def count(self) -> int:
        return len(self._options)

    @property
    def options(self) -> List[Option]:
        return self._options

    def get(self, index: int) -> Option:
        self._check_index(index, "get")
        return self._options[index]

    def add(
        self,
        text: str,
        callback: Any = None,
        enable_new_page: bool = True,
        *,
        arg: Any = NO_ARG,
    ) -> Option:
        option = Option(text, as_callback(callback, arg), enable_new_page)
        self._options.append(option)
        self._grow_width(text)
        log.debug(f"Added option {len(self._options) - 1}: {text!r}")
        return option

    def insert(
        self,
        index: int,
        text: str,
        callback: Any = None,
        enable_new_page: bool = True,
        *,
        arg: Any = NO_ARG,
    ) -> Option:
        self._check_index(index, "insert")
        option = Option(text, as_callback(callback, arg), enable_new_page)
        self._options.insert(index, option)
        self._grow_width(text)
        log.debug(f"Inserted option {index}: {text!r}")
        return option

    def remove_at(self, index: int) -> Option:
        self._check_index(index, "remove")
        option = self._options.pop(index)
        log.debug(f"Removed option {index}: {option.text!r}")
        return option

    def remove_all(self) -> None:
        self._options.clear()
        if self.layout.auto_width:
            self.layout.cell_width = 0
        log.debug("Removed all options")

    def set_text(self, index: int, text: str) -> None:
        self._check_index(index, "set_text")
        self._options[index].text = text
        self._grow_width(text)

    def set_callback(self, index: int, callback: Any, *, arg: Any = NO_ARG) -> None:
        self._check_index(index, "set_callback")
        self._options[index].callback = as_callback(callback, arg)

    def set_arg(self, index: int, arg: Any) -> None:
        self._check_index(index, "set_arg")
        callback = self._options[index].callback
        if not isinstance(callback, ArgCallback):
            raise InvalidOperationError(
                f"Option {index} has no callback function with argument", index=index
            )
        callback.arg = arg

    def set_enable_new_page(self, index: int, enable: bool) -> None:
        self._check_index(index, "set_enable_new_page")
        self._options[index].enable_new_page = bool(enable)

    def _check_index(self, index: int, operation: str) -> None:
        if not 0 <= index < len(self._options):
            raise IndexOutOfRangeError(index, len(self._options), operation)

    def _grow_width(self, text: str) -> None:
        if not self.layout.auto_width:
            return
        wanted = len(text) + RESERVE_SPACE
        if wanted > self.layout.cell_width:
            self.layout.cell_width = wanted
