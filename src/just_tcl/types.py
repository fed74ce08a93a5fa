"""Public types for just-tcl."""

from dataclasses import dataclass
from typing import Callable, Optional

Value = str
"""Every value in the language is a string; builtins parse numbers on demand."""

OutputSink = Callable[[str], None]
"""Callable that receives text written by ``puts``."""


@dataclass
class ExecResult:
    """Outcome of one ``Tcl.run`` call."""

    stdout: str
    """Text written by ``puts`` during the run."""

    stderr: str
    """Error message if the script failed, otherwise empty."""

    exit_code: int
    """0 on success, 1 if the script raised an error."""

    result: Optional[Value] = None
    """Value of the script's last command (None if the script failed)."""


@dataclass
class ExecutionLimits:
    """Execution limits for an interpreter instance."""

    max_recursion_depth: int = 100
    """Maximum nesting of command substitutions and proc calls."""
