from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from functools import partial
import logging

from menukit.config import INVALID_CHOICE_MESSAGE, MenuSettings

from .io import MenuIO
from .items import ActionItem, MenuItem

LOG = logging.getLogger(__name__)

EXIT_CHOICE = 0


@dataclass(frozen=True, slots=True)
class MenuSelection:
    choice: int
    item: MenuItem | None
    should_exit: bool
    error: str | None = None


def build_menu_lines(
    items: Sequence[MenuItem],
    *,
    is_root: bool,
    settings: MenuSettings | None = None,
) -> tuple[str, ...]:
    menu_settings = settings if settings is not None else MenuSettings()
    lines = [f"{index}. {item.get_title()}" for index, item in enumerate(items, 1)]
    sentinel = menu_settings.exit_label if is_root else menu_settings.back_label
    lines.append(f"{EXIT_CHOICE}. {sentinel}")
    return tuple(lines)


def select_item(
    choice: int,
    items: Sequence[MenuItem],
    *,
    invalid_message: str = INVALID_CHOICE_MESSAGE,
) -> MenuSelection:
    if choice == EXIT_CHOICE:
        return MenuSelection(choice=choice, item=None, should_exit=True)

    if 0 < choice <= len(items):
        return MenuSelection(choice=choice, item=items[choice - 1], should_exit=False)

    return MenuSelection(
        choice=choice, item=None, should_exit=False, error=invalid_message
    )


class Menu(MenuItem):
    """Composite item that lists its children and runs the chosen one.

    Children are numbered from 1 in insertion order; 0 leaves the menu.
    Sub-menus added without their own console adopt this menu's one.
    """

    pause_after = False

    def __init__(
        self,
        title: str,
        is_root: bool = False,
        *,
        io: MenuIO | None = None,
    ) -> None:
        super().__init__(title)
        self._is_root = is_root
        self._io = io
        self._items: list[MenuItem] = []

    @property
    def is_root(self) -> bool:
        return self._is_root

    @property
    def items(self) -> tuple[MenuItem, ...]:
        return tuple(self._items)

    @property
    def io(self) -> MenuIO:
        # the default is never stored; a parent may still hand down its console
        return self._io if self._io is not None else MenuIO()

    def __len__(self) -> int:
        return len(self._items)

    def add_item(self, item: MenuItem) -> MenuItem:
        if item is None:
            raise TypeError("menu item must not be None")
        if not isinstance(item, MenuItem):
            raise TypeError(f"expected a MenuItem, got {type(item).__name__}")
        if isinstance(item, Menu):
            if any(menu is self for menu in item.iter_menus()):
                raise ValueError(
                    f"adding {item.title!r} to {self.title!r} would create a cycle"
                )
            if self._io is not None:
                item._adopt_io(self._io)
        self._items.append(item)
        return item

    def add_action(
        self,
        title: str,
        func: Callable[..., object] | None,
        *args: object,
        **kwargs: object,
    ) -> ActionItem:
        bound = None if func is None else partial(func, *args, **kwargs)
        item = ActionItem(title, bound)
        self._items.append(item)
        return item

    def add_sub_menu(self, menu: Menu) -> Menu:
        if not isinstance(menu, Menu):
            raise TypeError(f"expected a Menu, got {type(menu).__name__}")
        _ = self.add_item(menu)
        return menu

    def iter_menus(self) -> Iterator[Menu]:
        """Yield this menu and every menu nested below it, depth first."""
        yield self
        for item in self._items:
            if isinstance(item, Menu):
                yield from item.iter_menus()

    def render_lines(self) -> tuple[str, ...]:
        return build_menu_lines(
            self._items, is_root=self._is_root, settings=self.io.settings
        )

    def execute(self) -> bool:
        io = self.io
        settings = io.settings
        while True:
            io.clear_screen()
            for line in build_menu_lines(
                self._items, is_root=self._is_root, settings=settings
            ):
                io.write(line)

            choice = io.read_integer(settings.prompt)
            selection = select_item(
                choice,
                self._items,
                invalid_message=settings.invalid_choice_message,
            )
            if selection.should_exit:
                LOG.debug("leaving menu %r", self.title)
                return False
            if selection.error is not None or selection.item is None:
                io.write(selection.error or settings.invalid_choice_message)
                io.pause()
                continue

            _run_item_with_guard(io, selection.item)

    def _adopt_io(self, io: MenuIO) -> None:
        for menu in self.iter_menus():
            if menu._io is None:
                menu._io = io


def run_menu(menu: Menu) -> int:
    """Run ``menu`` as a whole session and return a process exit code."""
    try:
        _ = menu.execute()
    except EOFError:
        return 0
    except KeyboardInterrupt:
        menu.io.write("")
        return 130
    return 0


def _coerce_system_exit_code(code: object) -> int:
    if code is None:
        return 0
    if isinstance(code, int):
        return code
    if isinstance(code, (str, bytes, bytearray)):
        try:
            return int(code)
        except ValueError:
            return 1
    return 1


def _describe_error(exc: BaseException) -> str:
    message = str(exc)
    return message if message else type(exc).__name__


def _run_item_with_guard(io: MenuIO, item: MenuItem) -> None:
    LOG.debug("dispatching %r", item.title)
    try:
        _ = item.execute()
    except SystemExit as exc:
        exit_code = _coerce_system_exit_code(exc.code)
        LOG.debug("item %r exited with code %s", item.title, exit_code)
        io.write_error(f"Action exited with exit code: {exit_code}")
        io.pause(io.settings.error_pause_message)
        return
    except Exception as exc:  # noqa: BLE001
        LOG.debug("item %r failed", item.title, exc_info=True)
        io.write_error(_describe_error(exc))
        io.pause(io.settings.error_pause_message)
        return

    if item.pause_after:
        io.pause()
