"""Interpreter module for just-tcl."""

from .builtins import BUILTINS, create_command_table
from .commands import CommandEntry, CommandTable, NativeCommand, ProcCommand
from .interpreter import Interpreter
from .substitution import substitute
from .types import Environment, InterpreterContext, InterpreterState

__all__ = [
    "Interpreter",
    "InterpreterContext",
    "InterpreterState",
    "Environment",
    "CommandTable",
    "CommandEntry",
    "NativeCommand",
    "ProcCommand",
    "BUILTINS",
    "create_command_table",
    "substitute",
]
