"""Interpreter types for just-tcl."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, ContextManager, Iterator, Mapping, Optional

from ..errors import UndefinedVariable

if TYPE_CHECKING:
    from ..ast.types import Script
    from ..types import ExecutionLimits, OutputSink
    from .commands import CommandTable


class Environment:
    """Scoped variable store.

    Holds a stack of scopes, each a plain dict from name to value. The first
    scope is the global scope and is never popped. Lookups walk from the
    innermost scope outwards; writes go to the innermost scope unless a
    global write is requested.
    """

    _scopes: list[dict[str, str]]

    def __init__(self, variables: Optional[Mapping[str, str]] = None):
        self._scopes = [{name: str(value) for name, value in (variables or {}).items()}]

    def get(self, name: str) -> str:
        """Look up a variable, innermost scope first.

        Raises:
            UndefinedVariable: if no scope binds ``name``.
        """
        for scope in reversed(self._scopes):
            if name in scope:
                return scope[name]
        raise UndefinedVariable(name)

    def set(self, name: str, value: str, global_: bool = False) -> str:
        """Bind ``name`` in the innermost (or global) scope and return the value."""
        scope = self._scopes[0] if global_ else self._scopes[-1]
        scope[name] = str(value)
        return scope[name]

    def unset(self, name: str) -> None:
        """Remove the innermost binding of ``name``, if any."""
        for scope in reversed(self._scopes):
            if name in scope:
                del scope[name]
                return

    def exists(self, name: str) -> bool:
        """Check whether any scope binds ``name``."""
        return any(name in scope for scope in self._scopes)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.exists(name)

    def push_scope(self) -> None:
        """Open a new innermost scope (on proc entry)."""
        self._scopes.append({})

    def pop_scope(self) -> dict[str, str]:
        """Close the innermost scope and return its bindings."""
        if len(self._scopes) == 1:
            raise RuntimeError("cannot pop the global scope")
        return self._scopes.pop()

    def unwind(self, depth: int) -> None:
        """Drop every scope above ``depth``, keeping at least the global scope."""
        del self._scopes[max(depth, 1):]

    @contextmanager
    def scope(self) -> Iterator[dict[str, str]]:
        """Push a scope for the duration of a ``with`` block.

        The scope is popped on every exit path, including exceptions.
        """
        self.push_scope()
        try:
            yield self._scopes[-1]
        finally:
            self.pop_scope()

    @property
    def depth(self) -> int:
        """Number of scopes, 1 when only the global scope is active."""
        return len(self._scopes)

    @property
    def globals(self) -> dict[str, str]:
        """The global scope's bindings."""
        return self._scopes[0]

    def to_dict(self) -> dict[str, str]:
        """Return the visible bindings, inner scopes shadowing outer ones."""
        merged: dict[str, str] = {}
        for scope in self._scopes:
            merged.update(scope)
        return merged

    def copy(self) -> Environment:
        """Create a copy holding only the global scope."""
        return Environment(self._scopes[0])


@dataclass
class InterpreterState:
    """Mutable state maintained by the interpreter."""

    depth: int = 0
    """Current nesting of command substitutions and proc calls."""

    block_position: Optional[tuple[int, int]] = None
    """Source (line, column) of the block passed to the command being
    dispatched, for commands registered with ``takes_block``."""


@dataclass
class InterpreterContext:
    """Context handed to every command invocation."""

    env: Environment
    """Variable store."""

    commands: "CommandTable"
    """Command table."""

    limits: "ExecutionLimits"
    """Execution limits."""

    state: InterpreterState
    """Mutable interpreter state."""

    output: "OutputSink"
    """Sink that receives text written by ``puts``."""

    evaluate: Callable[..., str]
    """``evaluate(text, line=1, column=1)``: evaluate a script string in the
    current environment, counting one level of nesting."""

    execute_script: Callable[["Script"], str]
    """Execute an already-parsed script in the current environment."""

    descend: Callable[[], ContextManager[None]]
    """Context manager that counts one level of nesting against the limit."""
