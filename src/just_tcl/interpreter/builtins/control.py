"""Procedure builtins: proc, return.

These define commands in the language and control how they finish.
"""

from typing import TYPE_CHECKING

from ...errors import ReturnSignal, TclSyntaxError
from ...parser import read_script, split_words

if TYPE_CHECKING:
    from ..types import InterpreterContext


def handle_proc(ctx: "InterpreterContext", args: list[str]) -> str:
    """Execute the proc builtin.

    Usage: proc name params body

    Define a command named ``name``. ``params`` is a whitespace-separated
    list of parameter names, bound positionally on each call. The body is
    parsed once, here, and evaluated in a fresh scope on every call.
    """
    name, params, body = args
    names = []
    for word in split_words(params):
        if not word.text:
            raise TclSyntaxError(f"proc {name}: empty parameter name")
        names.append(word.text)
    line, column = ctx.state.block_position or (1, 1)
    ctx.commands.define_proc(name, names, read_script(body, line, column))
    return ""


def handle_return(ctx: "InterpreterContext", args: list[str]) -> str:
    """Execute the return builtin.

    Usage: return ?value?

    Finish the current proc (or top-level script) with ``value``.
    """
    raise ReturnSignal(args[0] if args else "")
