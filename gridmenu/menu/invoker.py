from __future__ import annotations

from dataclasses import dataclass

from gridmenu.config import settings
from gridmenu.logging import LoggerFactory
from gridmenu.menu.model import OptionStore
from gridmenu.menu.navigator import GridNavigator
from gridmenu.ui.keyboard import KeyBindings
from gridmenu.ui.terminal import TerminalSink

log = LoggerFactory.for_menu()


@dataclass
class PageConfig:
    """Framing applied around callbacks of options with a new page."""

    show_page_title: bool = False
    page_title_format: str = settings.DEFAULT_PAGE_TITLE_FORMAT
    wait_for_acknowledgement: bool = False
    end_message: str = settings.DEFAULT_END_MESSAGE

    def page_title(self, text: str) -> str:
        return self.page_title_format.format(text=text)

    @classmethod
    def from_settings(cls) -> "PageConfig":
        return cls(
            show_page_title=settings.get_bool("show_page_title", False),
            page_title_format=settings.get_setting(
                "page_title_format", settings.DEFAULT_PAGE_TITLE_FORMAT
            ),
            wait_for_acknowledgement=settings.get_bool("wait_for_acknowledgement", False),
            end_message=settings.get_setting("end_message", settings.DEFAULT_END_MESSAGE),
        )


class CallbackInvoker:
    def __init__(
        self,
        store: OptionStore,
        navigator: GridNavigator,
        sink: TerminalSink,
        bindings: KeyBindings,
        page: PageConfig | None = None,
    ) -> None:
        self.store = store
        self.navigator = navigator
        self.sink = sink
        self.bindings = bindings
        self.page = page or PageConfig()

    def trigger(self, index: int) -> bool:
        """Select and run the option at ``index``.

        Out-of-range indices and inert options are silently ignored. Errors
        raised by the callback propagate unchanged.

        Returns:
            True if a callback ran
        """
        if not 0 <= index < self.store.count():
            return False
        option = self.store.options[index]
        if not option.callback.is_valid():
            return False

        self.navigator.set_highlighted(index)
        if option.enable_new_page:
            self.sink.clear_screen()
            if self.page.show_page_title:
                self.sink.write(f"{self.page.page_title(option.text)}\n\n")

        log.debug(f"Triggering option {index}: {option.text!r}")
        option.callback.execute()

        if option.enable_new_page and self.page.wait_for_acknowledgement:
            self._wait_for_exit_key()
        self.sink.clear_screen()
        return True

    def _wait_for_exit_key(self) -> None:
        if self.page.end_message:
            self.sink.write(f"\n{self.page.end_message}\n")
        while self.sink.read_key() != self.bindings.exit:
            pass
