#!/usr/bin/env python3
"""Program entry point: interactive menukit demo."""

import sys
from pathlib import Path

# Add the project root to the Python path
ROOT = Path(__file__).resolve().parents[0]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from menukit.cli.io import MenuIO
from menukit.cli.menu import Menu, run_menu
from menukit.config import autoload_dotenv, configure_logging, load_settings

NO_CLEAR_FLAG = "--no-clear"


def _effective_argv(argv: list[str] | None) -> list[str]:
    if argv is None:
        return list(sys.argv[1:])
    return list(argv)


def say_hello(io: MenuIO, name: str = "world") -> None:
    io.write(f"Hello, {name}!")


def fail() -> None:
    raise RuntimeError("This action always fails.")


def build_demo_menu(io: MenuIO) -> Menu:
    root = Menu("Main", is_root=True, io=io)
    _ = root.add_action("Say Hello", say_hello, io)

    settings_menu = Menu("Settings")
    _ = settings_menu.add_action("Up", io.write, "Volume up.")
    _ = settings_menu.add_action("Down", io.write, "Volume down.")
    _ = root.add_sub_menu(settings_menu)

    _ = root.add_action("Fail", fail)
    return root


def main(argv: list[str] | None = None) -> int:
    autoload_dotenv()
    effective_argv = _effective_argv(argv)
    settings = load_settings()
    configure_logging(settings.log_level)

    if NO_CLEAR_FLAG in effective_argv:
        settings = settings.without_clear()
    io = MenuIO(settings=settings)

    if not io.is_interactive():
        io.write("Error: the menu requires an interactive TTY (stdin/stdout).")
        return 2

    extra_args = [item for item in effective_argv if item != NO_CLEAR_FLAG]
    if extra_args:
        io.write("Notice: extra args are ignored in menu mode.")
    return run_menu(build_demo_menu(io))


if __name__ == "__main__":
    sys.exit(main())
