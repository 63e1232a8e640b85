from .io import MenuIO
from .items import ActionItem, MenuItem
from .menu import (
    Menu,
    MenuSelection,
    build_menu_lines,
    run_menu,
    select_item,
)

__all__ = [
    "MenuIO",
    "MenuItem",
    "ActionItem",
    "Menu",
    "MenuSelection",
    "build_menu_lines",
    "select_item",
    "run_menu",
]
