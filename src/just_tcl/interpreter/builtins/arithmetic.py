"""Arithmetic builtins: +, -, *, /.

Usage: + ?number ...?
       - number ?number ...?
       * ?number ...?
       / number ?number ...?

Arguments are parsed as numbers on demand. Integers stay integers (``/``
floors, as Tcl does); any float argument makes the result a float.
"""

import math
import re
from functools import reduce
from typing import TYPE_CHECKING, Union

from ...errors import CommandFailure, NotANumber

if TYPE_CHECKING:
    from ..types import InterpreterContext

Number = Union[int, float]

_INT_RE = re.compile(r"[+-]?[0-9]+")
_HEX_RE = re.compile(r"[+-]?0[xX][0-9a-fA-F]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.[0-9]*|\.[0-9]+|[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_number(text: str) -> Number:
    """Parse a value as an int or float.

    Surrounding whitespace is ignored.

    Raises:
        NotANumber: if ``text`` is not a decimal integer, a ``0x`` hex
            integer or a decimal float.
    """
    stripped = text.strip()
    if _INT_RE.fullmatch(stripped):
        return int(stripped)
    if _HEX_RE.fullmatch(stripped):
        return int(stripped, 16)
    if _FLOAT_RE.fullmatch(stripped):
        return float(stripped)
    raise NotANumber(text)


def format_number(value: Number) -> str:
    """Render a number as a value.

    Raises:
        CommandFailure: for an infinite or NaN result, which could not be
            read back as a number.
    """
    if isinstance(value, float):
        if not math.isfinite(value):
            raise CommandFailure(f"floating-point value out of range: {value}")
        return repr(value)
    return str(value)


def _divide(left: Number, right: Number) -> Number:
    if right == 0:
        raise CommandFailure("divide by zero")
    if isinstance(left, int) and isinstance(right, int):
        return left // right
    return left / right


def handle_add(ctx: "InterpreterContext", args: list[str]) -> str:
    """Execute the + builtin."""
    return format_number(sum((parse_number(arg) for arg in args), 0))


def handle_subtract(ctx: "InterpreterContext", args: list[str]) -> str:
    """Execute the - builtin; a single argument is negated."""
    numbers = [parse_number(arg) for arg in args]
    if len(numbers) == 1:
        return format_number(-numbers[0])
    return format_number(reduce(lambda left, right: left - right, numbers))


def handle_multiply(ctx: "InterpreterContext", args: list[str]) -> str:
    """Execute the * builtin."""
    return format_number(reduce(lambda left, right: left * right, (parse_number(arg) for arg in args), 1))


def handle_divide(ctx: "InterpreterContext", args: list[str]) -> str:
    """Execute the / builtin; a single argument gives its reciprocal."""
    numbers = [parse_number(arg) for arg in args]
    if len(numbers) == 1:
        numbers.insert(0, 1.0 if isinstance(numbers[0], float) else 1)
    return format_number(reduce(_divide, numbers))
