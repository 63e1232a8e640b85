from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

Action = Callable[[], object]


class MenuItem(ABC):
    """Anything a menu can list and run.

    ``execute`` returns True to keep the parent loop going and False when
    the user asked to leave. ``pause_after`` tells the enclosing menu
    whether to wait for acknowledgment once the item has run.
    """

    pause_after: bool = True

    def __init__(self, title: str) -> None:
        self._title = title

    @property
    def title(self) -> str:
        return self._title

    def get_title(self) -> str:
        return self._title

    @abstractmethod
    def execute(self) -> bool: ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(title={self._title!r})"


class ActionItem(MenuItem):
    """Leaf item bound to a zero-argument callable.

    Errors raised by the callable propagate to the enclosing menu.
    """

    def __init__(self, title: str, action: Action | None = None) -> None:
        super().__init__(title)
        self._action = action

    @property
    def action(self) -> Action | None:
        return self._action

    def execute(self) -> bool:
        if self._action is not None:
            _ = self._action()
        return True
