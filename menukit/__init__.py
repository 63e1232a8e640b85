from .cli.io import MenuIO
from .cli.items import ActionItem, MenuItem
from .cli.menu import Menu, MenuSelection, build_menu_lines, run_menu, select_item
from .config import MenuSettings, autoload_dotenv, configure_logging, load_settings

__version__ = "0.1.0"

__all__ = [
    "MenuIO",
    "MenuItem",
    "ActionItem",
    "Menu",
    "MenuSelection",
    "build_menu_lines",
    "select_item",
    "run_menu",
    "MenuSettings",
    "load_settings",
    "autoload_dotenv",
    "configure_logging",
]
