"""Command-line argument parsing for the dining philosophers simulation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

_WHITESPACE = " \t\n\v\f\r"
_INT_BITS = 32
_LONG_MAX = 2**63 - 1
_LONG_MIN = -(2**63)


class ArgumentError(ValueError):
    """Raised when the simulation arguments are missing or invalid."""


@dataclass(frozen=True)
class Settings:
    """Parameters of one simulation run; times are in milliseconds."""

    num_philos: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    meals_required: int | None = None


def _wrap_int(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer, wrapping on overflow."""
    span = 1 << _INT_BITS
    value %= span
    return value - span if value >= span // 2 else value


def _split_number(text: str) -> tuple[int, str]:
    """Return the sign and the leading run of digits, after whitespace."""
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] in ("-", "+"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    digits = []
    for char in stripped:
        if not "0" <= char <= "9":
            break
        digits.append(char)
    return sign, "".join(digits)


def c_atoi(text: str) -> int:
    """Parse a leading integer leniently, wrapping to 32 bits.

    Leading whitespace is skipped, one sign is accepted, and parsing stops
    at the first non-digit. Text with no digits yields 0.
    """
    sign, digits = _split_number(text)
    result = 0
    for char in digits:
        result = _wrap_int(result * 10 + int(char))
    return _wrap_int(sign * result)


def c_atol(text: str) -> int:
    """Parse a leading integer leniently, saturating at the 64-bit limits."""
    sign, digits = _split_number(text)
    value = sign * int(digits) if digits else 0
    return max(_LONG_MIN, min(_LONG_MAX, value))


def parse_args(args: Sequence[str]) -> Settings:
    """Build :class:`Settings` from the arguments that follow the program name.

    Expects four or five arguments: number of philosophers, time to die,
    time to eat, time to sleep and, optionally, the number of meals each
    philosopher must eat. Every value must be positive.
    """
    if len(args) not in (4, 5):
        raise ArgumentError("expected 4 or 5 arguments")
    num_philos = c_atoi(args[0])
    time_to_die = c_atol(args[1])
    time_to_eat = c_atol(args[2])
    time_to_sleep = c_atol(args[3])
    meals_required = c_atoi(args[4]) if len(args) == 5 else None
    if min(num_philos, time_to_die, time_to_eat, time_to_sleep) <= 0:
        raise ArgumentError("all values must be positive")
    if meals_required is not None and meals_required <= 0:
        raise ArgumentError("the number of meals must be positive")
    return Settings(num_philos, time_to_die, time_to_eat, time_to_sleep, meals_required)