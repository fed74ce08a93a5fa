"""Command table and command entries.

A command is either native (a host callback) or a proc (a parameter list and
a body script). Both expose ``invoke(ctx, args)`` so dispatch does not care
where a command came from.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Optional, Sequence, Union

from ..errors import ArityError, CommandFailure, ReturnSignal, TclError, UnknownCommand

if TYPE_CHECKING:
    from ..ast.types import Script
    from .types import InterpreterContext

logger = logging.getLogger(__name__)

NativeCallback = Callable[["InterpreterContext", list[str]], Optional[str]]
"""Signature of a native command: ``fn(ctx, args) -> value``."""


def describe_arity(min_args: int, max_args: Optional[int]) -> Union[int, str]:
    """Describe an accepted argument count for ArityError."""
    if max_args is None:
        return f"at least {min_args}"
    if min_args == max_args:
        return min_args
    return f"{min_args} to {max_args}"


def check_arity(name: str, args: Sequence[str], min_args: int, max_args: Optional[int]) -> None:
    """Raise ArityError unless ``min_args <= len(args) <= max_args``."""
    if len(args) < min_args or (max_args is not None and len(args) > max_args):
        raise ArityError(name, describe_arity(min_args, max_args), len(args))


@dataclass
class NativeCommand:
    """A command implemented by the host in Python."""

    name: str
    fn: NativeCallback
    min_args: int = 0
    max_args: Optional[int] = None
    takes_block: bool = False
    """Receive a trailing brace block as one literal argument."""

    def invoke(self, ctx: "InterpreterContext", args: list[str]) -> str:
        check_arity(self.name, args, self.min_args, self.max_args)
        try:
            result = self.fn(ctx, args)
        except (TclError, ReturnSignal, RecursionError):
            raise
        except Exception as e:
            raise CommandFailure(f"{self.name}: {e}") from e
        return "" if result is None else str(result)


@dataclass
class ProcCommand:
    """A command defined in the language with ``proc``."""

    name: str
    params: list[str]
    body: "Script"
    takes_block: bool = field(default=False, init=False)

    def invoke(self, ctx: "InterpreterContext", args: list[str]) -> str:
        if len(args) != len(self.params):
            raise ArityError(self.name, len(self.params), len(args))
        with ctx.descend(), ctx.env.scope() as scope:
            scope.update(zip(self.params, args))
            try:
                return ctx.execute_script(self.body)
            except ReturnSignal as signal:
                return signal.value


CommandEntry = Union[NativeCommand, ProcCommand]


class CommandTable(dict):
    """Dict from command name to entry, with registration helpers."""

    def register(
        self,
        name: str,
        fn: NativeCallback,
        min_args: int = 0,
        max_args: Optional[int] = None,
        takes_block: bool = False,
    ) -> NativeCommand:
        """Install (or replace) a native command."""
        entry = NativeCommand(name, fn, min_args, max_args, takes_block)
        self[name] = entry
        return entry

    def define_proc(self, name: str, params: Sequence[str], body: "Script") -> ProcCommand:
        """Install (or replace) a proc."""
        entry = ProcCommand(name, list(params), body)
        self[name] = entry
        logger.debug("defined proc %s with params %s", name, entry.params)
        return entry

    def lookup(self, name: str) -> CommandEntry:
        """Find a command by name.

        Raises:
            UnknownCommand: if no command is registered under ``name``.
        """
        try:
            return self[name]
        except KeyError:
            raise UnknownCommand(name) from None

    def copy(self) -> CommandTable:
        return CommandTable(self)
