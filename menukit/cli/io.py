from __future__ import annotations

from dataclasses import dataclass, field
import sys
from typing import Callable

from menukit.config import MenuSettings

InputFunc = Callable[[str], str]
PrintFunc = Callable[[str], None]
ClearFunc = Callable[[], None]
IsATTYFunc = Callable[[], bool]

CLEAR_SEQUENCE = "\033[2J\033[1;1H"


def _stdin_isatty() -> bool:
    stream = getattr(sys, "stdin", None)
    checker = getattr(stream, "isatty", None)
    if not callable(checker):
        return False
    return bool(checker())


def _stdout_isatty() -> bool:
    stream = getattr(sys, "stdout", None)
    checker = getattr(stream, "isatty", None)
    if not callable(checker):
        return False
    return bool(checker())


def _print_stderr(message: str) -> None:
    print(message, file=sys.stderr)


def _ansi_clear() -> None:
    sys.stdout.write(CLEAR_SEQUENCE)
    sys.stdout.flush()


@dataclass(slots=True)
class MenuIO:
    """Console collaborator used by menus for every read and write."""

    input_func: InputFunc = field(default_factory=lambda: input)
    print_func: PrintFunc = field(default_factory=lambda: print)
    error_func: PrintFunc = _print_stderr
    clear_func: ClearFunc = _ansi_clear
    stdin_isatty: IsATTYFunc = _stdin_isatty
    stdout_isatty: IsATTYFunc = _stdout_isatty
    settings: MenuSettings = field(default_factory=MenuSettings)

    def read(self, prompt: str = "") -> str:
        return self.input_func(prompt)

    def write(self, message: str) -> None:
        self.print_func(message)

    def write_error(self, message: str) -> None:
        self.error_func(message)

    def clear_screen(self) -> None:
        if self.settings.clear_screen:
            self.clear_func()

    def read_integer(self, prompt: str) -> int:
        """Block until the user types a whole number.

        EOFError and KeyboardInterrupt are left to the caller.
        """
        while True:
            raw = self.read(prompt).strip()
            try:
                return int(raw)
            except ValueError:
                self.write(self.settings.invalid_number_message)

    def pause(self, message: str | None = None) -> None:
        self.write("")
        _ = self.read(self.settings.pause_message if message is None else message)

    def is_interactive(self) -> bool:
        return self.stdin_isatty() and self.stdout_isatty()
