from gridmenu.menu.command_menu import CommandMenu
from gridmenu.menu.input_loop import InputLoop, LoopState
from gridmenu.menu.invoker import CallbackInvoker, PageConfig
from gridmenu.menu.model import (
    ArgCallback,
    Callback,
    MenuState,
    NoArgCallback,
    NoCallback,
    Option,
    OptionStore,
)
from gridmenu.menu.navigator import Direction, GridNavigator

__all__ = [
    "ArgCallback",
    "Callback",
    "CallbackInvoker",
    "CommandMenu",
    "Direction",
    "GridNavigator",
    "InputLoop",
    "LoopState",
    "MenuState",
    "NoArgCallback",
    "NoCallback",
    "Option",
    "OptionStore",
    "PageConfig",
]
