from __future__ import annotations

from dataclasses import dataclass, replace
import logging
import os

from dotenv import find_dotenv, load_dotenv

DEFAULT_PROMPT = "\nChoice >> "
DEFAULT_PAUSE_MESSAGE = "Please press enter to continue..."
ERROR_PAUSE_MESSAGE = (
    "Please read error message after that you can press enter to continue..."
)
INVALID_CHOICE_MESSAGE = "Invalid choice!"
INVALID_NUMBER_MESSAGE = "Invalid choice! Please enter a number."
EXIT_LABEL = "Exit"
BACK_LABEL = "Go back."
DEFAULT_LOG_LEVEL = "WARNING"

_TRUE_VALUES = frozenset({"1", "true", "yes", "y", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "n", "off"})


@dataclass(frozen=True, slots=True)
class MenuSettings:
    prompt: str = DEFAULT_PROMPT
    pause_message: str = DEFAULT_PAUSE_MESSAGE
    error_pause_message: str = ERROR_PAUSE_MESSAGE
    invalid_choice_message: str = INVALID_CHOICE_MESSAGE
    invalid_number_message: str = INVALID_NUMBER_MESSAGE
    exit_label: str = EXIT_LABEL
    back_label: str = BACK_LABEL
    clear_screen: bool = True
    log_level: str = DEFAULT_LOG_LEVEL

    def without_clear(self) -> MenuSettings:
        return replace(self, clear_screen=False)


def load_settings() -> MenuSettings:
    """Build settings from ``MENUKIT_*`` environment variables.

    Unset or blank variables keep their defaults. Invalid values raise
    ``ValueError`` naming the variable.
    """
    return MenuSettings(
        prompt=_env_raw("MENUKIT_PROMPT") or DEFAULT_PROMPT,
        pause_message=_env_str("MENUKIT_PAUSE_MESSAGE") or DEFAULT_PAUSE_MESSAGE,
        clear_screen=_env_bool("MENUKIT_CLEAR_SCREEN", True),
        log_level=_env_log_level("MENUKIT_LOG_LEVEL", DEFAULT_LOG_LEVEL),
    )


def autoload_dotenv() -> None:
    dotenv_path = find_dotenv(filename=".env", usecwd=True)
    if dotenv_path:
        _ = load_dotenv(dotenv_path=dotenv_path, encoding="utf-8")


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")


def _env_raw(name: str) -> str | None:
    # prompts keep their surrounding whitespace
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value


def _env_str(name: str) -> str | None:
    value = os.getenv(name)
    if value is None:
        return None
    stripped = value.strip()
    return stripped if stripped else None


def _env_bool(name: str, default: bool) -> bool:
    raw = _env_str(name)
    if raw is None:
        return default

    normalized = raw.lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(
        f"Environment variable {name} is not a valid boolean: {raw} "
        "(accepted: 1/0 true/false yes/no on/off)"
    )


def _env_log_level(name: str, default: str) -> str:
    raw = _env_str(name)
    if raw is None:
        return default
    normalized = raw.upper()
    if not isinstance(logging.getLevelName(normalized), int):
        raise ValueError(f"Environment variable {name} is not a log level: {raw}")
    return normalized
