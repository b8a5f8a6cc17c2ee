from gridmenu.ui.colors import RGB_UNSET, ColorScheme, Palette, Rgb
from gridmenu.ui.keyboard import KeyAction, KeyBindings
from gridmenu.ui.renderer import Alignment, LayoutConfig, build_frame, justify_text
from gridmenu.ui.terminal import BufferTerminal, ConsoleTerminal, TerminalSink

__all__ = [
    "Alignment",
    "BufferTerminal",
    "ColorScheme",
    "ConsoleTerminal",
    "KeyAction",
    "KeyBindings",
    "LayoutConfig",
    "Palette",
    "RGB_UNSET",
    "Rgb",
    "TerminalSink",
    "build_frame",
    "justify_text",
]
