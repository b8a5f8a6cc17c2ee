import argparse
from pathlib import Path

from gridmenu.logging import LoggerFactory, setup_logging
from gridmenu.menu import CommandMenu
from gridmenu.ui.renderer import Alignment
from gridmenu.ui.terminal import ConsoleTerminal


def build_demo_menu(sink=None, columns: int = 3) -> CommandMenu:
    menu = CommandMenu(sink)
    sink = menu.sink

    menu.set_show_index(True)
    menu.set_auto_width(True)
    menu.set_alignment(Alignment.CENTER)
    menu.set_max_columns(columns)
    menu.set_top_text("Welcome to the command line menu test program.")
    menu.set_bottom_text(
        "Use the WASD keys to navigate, and the Enter key to select an option, "
        "or the Esc key to exit."
    )

    def announce(name):
        sink.write(f"{name} called.\n")
        sink.write("Press any key to back to the main menu.\n")
        sink.read_key()

    menu.add_option("Function A", lambda: announce("Function A"))
    menu.add_option("Function B", lambda: announce("Function B"))

    placeholders = {"next": 0}

    def add_placeholder(counter):
        menu.add_option(f"Placeholder {counter['next']}")
        counter["next"] += 1

    menu.add_option("Add new", add_placeholder, False, arg=placeholders)

    def remove_last(target):
        if target.option_count() > 0:
            target.remove_option(target.option_count() - 1)

    menu.add_option("Remove last", remove_last, False, arg=menu)

    def change_column(target):
        sink.write("Please enter the new column number (1-9): ")
        key = sink.read_key()
        if ord("0") <= key <= ord("9"):
            target.set_max_columns(key - ord("0"))

    menu.add_option("Change column", change_column, arg=menu)

    def open_submenu():
        submenu = CommandMenu(sink)
        submenu.set_top_text("Sub Menu")
        submenu.add_option("Func 1", lambda: sink.write("Hello,\n"))
        submenu.add_option("Func 2", lambda: sink.write("World!\n"))
        submenu.add_option("Placeholder")
        submenu.show()
        submenu.start_receive_input()

    menu.add_option("Sub Menu", open_submenu)
    menu.add_option("Exit", menu.end_receive_input, False)
    return menu


def main(argv=None):
    parser = argparse.ArgumentParser(description="Command line menu demo")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable verbose debug output")
    parser.add_argument("--trace", action="store_true", help="Log every key press")
    parser.add_argument("--columns", type=int, default=3, help="Maximum grid columns")
    parser.add_argument("--log-dir", type=Path, default=None, help="Directory for log files")
    args = parser.parse_args(argv)

    setup_logging(debug=args.debug, trace=args.trace, log_dir=args.log_dir)
    log = LoggerFactory.for_system()
    log.info(f"Starting demo menu with {args.columns} column(s)")

    menu = build_demo_menu(ConsoleTerminal(), columns=args.columns)
    try:
        menu.show()
        menu.start_receive_input()
    except KeyboardInterrupt:
        pass
    finally:
        log.info("Demo menu closed")


if __name__ == "__main__":
    main()
