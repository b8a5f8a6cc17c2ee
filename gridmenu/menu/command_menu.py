from __future__ import annotations

from typing import Any, Optional

from gridmenu.menu.input_loop import InputLoop, LoopState
from gridmenu.menu.invoker import CallbackInvoker, PageConfig
from gridmenu.menu.model import NO_ARG, MenuState, Option, OptionStore
from gridmenu.menu.navigator import GridNavigator
from gridmenu.ui.colors import Color, ColorScheme, Rgb, to_color
from gridmenu.ui.keyboard import Key, KeyBindings, to_key_code
from gridmenu.ui.renderer import Alignment, LayoutConfig, render_menu_screen
from gridmenu.ui.terminal import ConsoleTerminal, TerminalSink


def _color_from_args(args: tuple) -> Color:
    if len(args) == 3:
        return Rgb(*(int(channel) for channel in args))
    if len(args) == 1:
        return to_color(args[0])
    raise TypeError(f"Expected a color or three RGB channels, got {len(args)} values")


class CommandMenu:
    """A grid of options on the terminal, driven by a blocking key loop.

    Each instance owns its options, cursor and configuration. A sub-menu is
    simply another ``CommandMenu`` shown and run from inside a callback.

    Example:
        menu = CommandMenu()
        menu.set_max_columns(3)
        menu.add_option("Say hi", lambda: print("hi"))
        menu.add_option("Exit", menu.end_receive_input, enable_new_page=False)
        menu.show()
        menu.start_receive_input()
    """

    def __init__(
        self,
        sink: Optional[TerminalSink] = None,
        *,
        layout: Optional[LayoutConfig] = None,
        bindings: Optional[KeyBindings] = None,
        page: Optional[PageConfig] = None,
        colors: Optional[ColorScheme] = None,
    ) -> None:
        self.sink = sink if sink is not None else ConsoleTerminal()
        self.layout = layout if layout is not None else LayoutConfig.from_settings()
        self.bindings = bindings if bindings is not None else KeyBindings.from_settings()
        self.page = page if page is not None else PageConfig.from_settings()
        self.colors = colors if colors is not None else ColorScheme()
        self.top_text = ""
        self.bottom_text = ""
        self.store = OptionStore(self.layout)
        self.navigator = GridNavigator(self.store.count, lambda: self.layout.max_columns)
        self.invoker = CallbackInvoker(
            self.store, self.navigator, self.sink, self.bindings, self.page
        )
        self._loop = InputLoop(
            self.navigator, self.invoker, self.bindings, self.sink, self.render
        )

    # ---------- Options ----------

    def add_option(
        self,
        text: str,
        callback: Any = None,
        enable_new_page: bool = True,
        *,
        arg: Any = NO_ARG,
    ) -> Option:
        return self.store.add(text, callback, enable_new_page, arg=arg)

    def insert_option(
        self,
        index: int,
        text: str,
        callback: Any = None,
        enable_new_page: bool = True,
        *,
        arg: Any = NO_ARG,
    ) -> Option:
        return self.store.insert(index, text, callback, enable_new_page, arg=arg)

    def remove_option(self, index: int) -> Option:
        option = self.store.remove_at(index)
        self.navigator.clamp()
        return option

    def remove_all_options(self) -> None:
        self.store.remove_all()
        self.navigator.clamp()

    def set_option_text(self, index: int, text: str) -> None:
        self.store.set_text(index, text)

    def set_option_callback(self, index: int, callback: Any, *, arg: Any = NO_ARG) -> None:
        self.store.set_callback(index, callback, arg=arg)

    def set_option_arg(self, index: int, arg: Any) -> None:
        self.store.set_arg(index, arg)

    def set_option_enable_new_page(self, index: int, enable: bool) -> None:
        self.store.set_enable_new_page(index, enable)

    def option_count(self) -> int:
        return self.store.count()

    # ---------- Layout ----------

    def set_show_index(self, enable: bool) -> None:
        self.layout.show_index = bool(enable)

    def set_auto_width(self, enable: bool) -> None:
        """Grow the cell width to fit added texts. Set it before adding options."""
        self.layout.auto_width = bool(enable)

    def set_column_separator(self, separator: str) -> None:
        self.layout.set_column_separator(separator)

    def set_row_separator(self, separator: Optional[str]) -> None:
        self.layout.set_row_separator(separator)

    def set_alignment(self, alignment) -> None:
        self.layout.alignment = Alignment.parse(alignment)

    def set_max_columns(self, max_columns: int) -> None:
        self.layout.set_max_columns(max_columns)

    def set_cell_width(self, width: int) -> None:
        self.layout.cell_width = max(0, int(width))

    # ---------- Keys ----------

    def set_confirm_key(self, key: Key) -> None:
        self.bindings.confirm = to_key_code(key)

    def set_exit_key(self, key: Key) -> None:
        self.bindings.exit = to_key_code(key)

    def set_directional_keys(self, *keys) -> None:
        """Set left, up, right, down keys, as four values or one 4-sequence."""
        if len(keys) == 1:
            self.bindings.set_directional_keys(keys[0])
        else:
            self.bindings.set_directional_keys(keys)

    # ---------- Colors and texts ----------

    def set_foreground_color(self, *color) -> None:
        self.colors.foreground = _color_from_args(color)

    def set_background_color(self, *color) -> None:
        self.colors.background = _color_from_args(color)

    def set_highlight_foreground_color(self, *color) -> None:
        self.colors.highlight_foreground = _color_from_args(color)

    def set_highlight_background_color(self, *color) -> None:
        self.colors.highlight_background = _color_from_args(color)

    def set_top_text(self, text: str) -> None:
        self.top_text = text

    def set_bottom_text(self, text: str) -> None:
        self.bottom_text = text

    # ---------- Selection and dispatch ----------

    @property
    def selected(self) -> int:
        return self.navigator.selected

    def set_highlighted(self, index: int) -> None:
        """Select an option; indices past the end select the last option."""
        self.navigator.set_highlighted(index)

    select = set_highlighted

    def trigger(self, index: int) -> bool:
        return self.invoker.trigger(index)

    # ---------- Screen and input ----------

    def menu_state(self) -> MenuState:
        return MenuState(
            options=list(self.store.options),
            selected=self.navigator.selected,
            top_text=self.top_text,
            bottom_text=self.bottom_text,
            colors=self.colors,
            should_stop=self._loop.stop_requested,
        )

    def clear_screen(self) -> None:
        self.sink.clear_screen()

    def render(self) -> None:
        render_menu_screen(self.sink, self.menu_state(), self.layout)

    def show(self) -> None:
        self.clear_screen()
        self.render()

    @property
    def input_state(self) -> LoopState:
        return self._loop.state

    def start_receive_input(self) -> None:
        """Block the calling thread in the input loop until it is exited."""
        self._loop.run()

    def end_receive_input(self) -> None:
        """Ask the input loop to stop. Thread safe.

        Called before ``start_receive_input``, the loop returns without
        reading a key. Called while a key read is blocked, it takes effect
        after that key.
        """
        self._loop.request_stop()
