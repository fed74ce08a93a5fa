"""Builtin commands.

The minimal set every interpreter starts with: variable access, output,
arithmetic and procedure definition. Hosts add their own commands with
``CommandTable.register``.
"""

from ..commands import CommandTable, NativeCommand
from .arithmetic import handle_add, handle_divide, handle_multiply, handle_subtract
from .control import handle_proc, handle_return
from .puts import handle_puts
from .set import handle_set

BUILTINS: dict[str, NativeCommand] = {
    "set": NativeCommand("set", handle_set, min_args=1, max_args=2),
    "puts": NativeCommand("puts", handle_puts),
    "+": NativeCommand("+", handle_add),
    "-": NativeCommand("-", handle_subtract, min_args=1),
    "*": NativeCommand("*", handle_multiply),
    "/": NativeCommand("/", handle_divide, min_args=1),
    "proc": NativeCommand("proc", handle_proc, min_args=3, max_args=3, takes_block=True),
    "return": NativeCommand("return", handle_return, max_args=1),
}


def create_command_table() -> CommandTable:
    """Create a command table holding the builtin commands."""
    return CommandTable(BUILTINS)


__all__ = [
    "BUILTINS",
    "create_command_table",
]
