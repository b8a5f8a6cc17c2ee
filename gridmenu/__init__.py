"""Interactive option grids for text terminals."""

from loguru import logger

from gridmenu.__version__ import __version__
from gridmenu.exceptions import IndexOutOfRangeError, InvalidOperationError, MenuError
from gridmenu.menu import (
    ArgCallback,
    CommandMenu,
    NoArgCallback,
    NoCallback,
    PageConfig,
)
from gridmenu.ui import (
    RGB_UNSET,
    Alignment,
    BufferTerminal,
    ConsoleTerminal,
    KeyBindings,
    LayoutConfig,
    Palette,
    Rgb,
)

# Silent until the application opts in through gridmenu.logging.setup_logging().
logger.disable("gridmenu")

__all__ = [
    "Alignment",
    "ArgCallback",
    "BufferTerminal",
    "CommandMenu",
    "ConsoleTerminal",
    "IndexOutOfRangeError",
    "InvalidOperationError",
    "KeyBindings",
    "LayoutConfig",
    "MenuError",
    "NoArgCallback",
    "NoCallback",
    "PageConfig",
    "Palette",
    "RGB_UNSET",
    "Rgb",
    "__version__",
]
