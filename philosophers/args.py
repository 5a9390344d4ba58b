"""Command-line argument validation for the dining philosophers simulation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

INT_MAX = 2**31 - 1
MAX_PHILOSOPHERS = 200
USAGE_EXIT_CODE = 1
INVALID_EXIT_CODE = 2

_DIGITS = frozenset("0123456789")


class ArgumentError(ValueError):
    """Raised when the command-line arguments cannot start a simulation."""

    def __init__(self, message: str, exit_code: int = INVALID_EXIT_CODE) -> None:
        super().__init__(message)
        self.exit_code = exit_code


@dataclass(frozen=True)
class Config:
    """Settings of one simulation; times are in milliseconds."""

    philosophers: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    meal_target: int | None = None


def parse_number(text: str) -> int:
    """Parse a plain run of decimal digits no larger than ``INT_MAX``."""
    if not text or not set(text) <= _DIGITS:
        raise ValueError(f"not a non-negative integer: {text!r}")
    value = int(text)
    if value > INT_MAX:
        raise ValueError(f"number too large: {text!r}")
    return value


def is_valid_args(args: Iterable[str]) -> bool:
    """Check every argument is a number and the first two are in range."""
    for position, arg in enumerate(args):
        try:
            value = parse_number(arg)
        except ValueError:
            return False
        if position == 0 and value > MAX_PHILOSOPHERS:
            return False
        if position == 1 and value == 0:
            return False
    return True


def parse_args(args: Iterable[str]) -> Config:
    """Turn the arguments (without the program name) into a ``Config``."""
    args = list(args)
    if not 4 <= len(args) <= 5:
        raise ArgumentError("wrong number of arguments", USAGE_EXIT_CODE)
    if not is_valid_args(args):
        raise ArgumentError("Error: Invalid arguments")
    numbers = [parse_number(arg) for arg in args]
    if not 1 <= numbers[0] <= MAX_PHILOSOPHERS:
        raise ArgumentError("Error: Philosophers 1-200")
    return Config(*numbers)