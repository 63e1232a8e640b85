from __future__ import annotations

import builtins
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from menukit.cli.io import MenuIO
from menukit.cli.menu import Menu, run_menu
from menukit.config import MenuSettings


def _patch_input_steps(
    monkeypatch: pytest.MonkeyPatch,
    steps: list[str | BaseException],
) -> None:
    iterator = iter(steps)

    def _input(_prompt: str = "") -> str:
        step = next(iterator)
        if isinstance(step, BaseException):
            raise step
        return step

    monkeypatch.setattr(builtins, "input", _input)


def _quiet_io() -> MenuIO:
    return MenuIO(settings=MenuSettings(clear_screen=False))


def test_run_menu_returns_zero_on_exit(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _patch_input_steps(monkeypatch, ["x", "7", "", "0"])
    root = Menu("Main", is_root=True, io=_quiet_io())
    _ = root.add_action("Say Hello", print, "Hello!")

    exit_code = run_menu(root)

    captured = capsys.readouterr()
    assert exit_code == 0
    assert captured.out.count("1. Say Hello") == 2
    assert "Invalid choice! Please enter a number." in captured.out
    assert "Invalid choice!\n" in captured.out
    assert "Hello!" not in captured.out


def test_run_menu_eoferror_returns_zero(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _patch_input_steps(monkeypatch, [EOFError()])

    exit_code = run_menu(Menu("Main", is_root=True, io=_quiet_io()))

    assert exit_code == 0


def test_run_menu_keyboardinterrupt_returns_130(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _patch_input_steps(monkeypatch, [KeyboardInterrupt()])

    exit_code = run_menu(Menu("Main", is_root=True, io=_quiet_io()))

    assert exit_code == 130


def test_keyboardinterrupt_during_action_returns_130(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    def _interrupted() -> None:
        raise KeyboardInterrupt

    _patch_input_steps(monkeypatch, ["1"])
    root = Menu("Main", is_root=True, io=_quiet_io())
    _ = root.add_action("Long job", _interrupted)

    assert run_menu(root) == 130


def test_closed_stdin_inside_sub_menu_ends_session(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _patch_input_steps(monkeypatch, ["1", EOFError(), EOFError()])
    root = Menu("Main", is_root=True, io=_quiet_io())
    _ = root.add_sub_menu(Menu("Settings"))

    exit_code = run_menu(root)

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "EOFError" in captured.err


def test_eoferror_raised_by_action_is_reported_and_menu_continues(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    def _read_more() -> None:
        raise EOFError("action hit eof")

    _patch_input_steps(monkeypatch, ["1", "", "0"])
    root = Menu("Main", is_root=True, io=_quiet_io())
    _ = root.add_action("Read", _read_more)

    assert root.execute() is False

    captured = capsys.readouterr()
    assert "action hit eof" in captured.err
    assert captured.out.count("1. Read") == 2


def test_action_error_goes_to_stderr(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    def _boom() -> None:
        raise RuntimeError("disk on fire")

    _patch_input_steps(monkeypatch, ["1", "", "0"])
    root = Menu("Main", is_root=True, io=_quiet_io())
    _ = root.add_action("Explode", _boom)

    exit_code = run_menu(root)

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "disk on fire" in captured.err
    assert "disk on fire" not in captured.out
    assert captured.out.count("1. Explode") == 2


def test_clear_screen_writes_ansi_sequence(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _patch_input_steps(monkeypatch, ["0"])

    exit_code = run_menu(Menu("Main", is_root=True, io=MenuIO()))

    captured = capsys.readouterr()
    assert exit_code == 0
    assert captured.out.startswith("\033[2J\033[1;1H")
