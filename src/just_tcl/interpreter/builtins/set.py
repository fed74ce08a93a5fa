"""Set builtin implementation.

Usage: set name ?value?

With a value, binds ``name`` in the innermost scope and returns the value.
Without one, returns the current value of ``name``.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..types import InterpreterContext


def handle_set(ctx: "InterpreterContext", args: list[str]) -> str:
    """Execute the set builtin."""
    if len(args) == 1:
        return ctx.env.get(args[0])
    return ctx.env.set(args[0], args[1])
