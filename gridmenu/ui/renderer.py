from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, List, Optional

from gridmenu.config import settings
from gridmenu.logging import LoggerFactory

if TYPE_CHECKING:
    from gridmenu.menu.model import MenuState
    from gridmenu.ui.terminal import TerminalSink

# Clear the scrollback and move the cursor to the top left position.
CURSOR_HOME = "\x1b[3J\x1b[H"
ELLIPSIS = "..."

log = LoggerFactory.for_layout()


class Alignment(IntEnum):
    LEFT = 0
    RIGHT = 1
    CENTER = 2

    @classmethod
    def parse(cls, value) -> "Alignment":
        if isinstance(value, str):
            return cls[value.upper()]
        return cls(value)


def _check_separator(separator: str, name: str) -> str:
    # Borders are sized in cells, one character per cell.
    if not isinstance(separator, str) or len(separator) != 1:
        raise ValueError(f"{name} must be a single character, got {separator!r}")
    return separator


def _normalize_row_separator(separator: Optional[str]) -> Optional[str]:
    if separator in (None, "", "\0"):
        return None
    return _check_separator(separator, "Row separator")


@dataclass
class LayoutConfig:
    """Grid layout knobs.

    ``cell_width == 0`` is compact mode: texts are not justified and no row
    separators are drawn. ``row_separator=None`` disables separator rows.
    """

    max_columns: int = settings.DEFAULT_MAX_COLUMNS
    cell_width: int = settings.DEFAULT_CELL_WIDTH
    alignment: Alignment = Alignment.LEFT
    column_separator: str = settings.DEFAULT_COLUMN_SEPARATOR
    row_separator: Optional[str] = settings.DEFAULT_ROW_SEPARATOR
    show_index: bool = False
    auto_width: bool = True

    def __post_init__(self) -> None:
        self.set_max_columns(self.max_columns)
        self.cell_width = max(0, int(self.cell_width))
        self.alignment = Alignment.parse(self.alignment)
        self.set_column_separator(self.column_separator)
        self.row_separator = _normalize_row_separator(self.row_separator)

    def set_max_columns(self, max_columns: int) -> None:
        self.max_columns = max(1, int(max_columns))

    def set_column_separator(self, separator: str) -> None:
        self.column_separator = _check_separator(separator, "Column separator")

    def set_row_separator(self, separator: Optional[str]) -> None:
        self.row_separator = _normalize_row_separator(separator)

    @property
    def draws_row_separators(self) -> bool:
        return self.row_separator is not None and self.cell_width > 0

    @classmethod
    def from_settings(cls) -> "LayoutConfig":
        return cls(
            max_columns=settings.get_int("max_columns", settings.DEFAULT_MAX_COLUMNS),
            cell_width=settings.get_int("cell_width", settings.DEFAULT_CELL_WIDTH),
            alignment=Alignment.parse(settings.get_setting("alignment", "left")),
            column_separator=settings.get_setting(
                "column_separator", settings.DEFAULT_COLUMN_SEPARATOR
            ),
            row_separator=settings.get_setting(
                "row_separator", settings.DEFAULT_ROW_SEPARATOR
            ),
            show_index=settings.get_bool("show_index", False),
            auto_width=settings.get_bool("auto_width", True),
        )


def effective_columns(max_columns: int, count: int) -> int:
    return max(1, min(max_columns, count))


def row_width(config: LayoutConfig, columns: int) -> int:
    # One separator per column plus the trailing border.
    return (config.cell_width + 1) * columns + 1


def cutoff_text(text: str, width: int) -> str:
    if len(text) <= width:
        return text
    # Too narrow for an ellipsis: plain truncation.
    if width < len(ELLIPSIS):
        return text[:width]
    return text[: width - len(ELLIPSIS)] + ELLIPSIS


def justify_text(text: str, width: int, alignment: Alignment) -> str:
    if len(text) > width:
        text = cutoff_text(text, width)
    padding = width - len(text)
    if alignment == Alignment.RIGHT:
        return " " * padding + text
    if alignment == Alignment.CENTER:
        left = padding // 2
        return " " * left + text + " " * (padding - left)
    return text + " " * padding


def option_label(index: int, text: str, config: LayoutConfig) -> str:
    label = f"[{index}] {text}" if config.show_index else text
    if config.cell_width > 0:
        label = justify_text(label, config.cell_width, config.alignment)
    return label


def separator_row(config: LayoutConfig, columns: int, *, closing: bool) -> str:
    width = row_width(config, columns)
    if closing:
        return config.row_separator * width
    cell = config.row_separator * config.cell_width
    sep = config.column_separator
    return sep + sep.join([cell] * columns) + sep


def build_frame(state: MenuState, config: LayoutConfig) -> List[str]:
    """Return the ordered terminal writes making up one full frame."""
    writes = [CURSOR_HOME]
    if state.top_text:
        writes.append(f"{state.top_text}\n\n")

    options = list(state.options)
    count = len(options)
    if count:
        columns = effective_columns(config.max_columns, count)
        bordered = config.draws_row_separators
        sep = config.column_separator
        if bordered:
            writes.append(config.row_separator * row_width(config, columns) + "\n")

        for index, option in enumerate(options):
            writes.append(sep)
            writes.append(
                state.colors.paint(
                    option_label(index, option.text, config),
                    highlighted=index == state.selected,
                )
            )
            position = index % columns
            is_last = index == count - 1
            if position != columns - 1 and not is_last:
                continue

            writes.append(sep)
            if not bordered:
                writes.append("\n")
                continue
            # Pad a short final row so the vertical borders line up.
            missing = columns - position - 1
            if missing:
                writes.append((" " * config.cell_width + sep) * missing)
            writes.append("\n")
            writes.append(separator_row(config, columns, closing=is_last) + "\n")

    if state.bottom_text:
        writes.append(f"\n{state.bottom_text}\n")
    writes.append("\n")
    return writes


def render_menu_screen(sink: TerminalSink, state: MenuState, config: LayoutConfig) -> None:
    writes = build_frame(state, config)
    for text in writes:
        sink.write(text)
    log.trace(f"Rendered frame: {len(state.options)} options, selected={state.selected}")
