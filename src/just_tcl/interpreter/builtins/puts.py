"""Puts builtin implementation.

Usage: puts value ...

Writes the arguments, joined by single spaces and followed by a newline, to
the interpreter's output sink.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..types import InterpreterContext


def handle_puts(ctx: "InterpreterContext", args: list[str]) -> str:
    """Execute the puts builtin."""
    ctx.output(" ".join(args) + "\n")
    return ""
