"""just-tcl: an embeddable, Tcl-style command language.

Example usage:
    from just_tcl import Tcl

    tcl = Tcl()
    result = tcl.run("puts [+ 1 2]")
    print(result.stdout)  # "3\\n"
"""

from .ast import Command, RawCommand, Script, Word, WordKind
from .errors import (
    ArityError,
    CommandFailure,
    ExtraCharacters,
    MismatchedBracket,
    NotANumber,
    RecursionLimitExceeded,
    TclError,
    TclSyntaxError,
    UndefinedVariable,
    UnknownCommand,
    UnterminatedBrace,
    UnterminatedQuote,
)
from .interpreter import (
    CommandTable,
    Environment,
    Interpreter,
    InterpreterContext,
    NativeCommand,
    ProcCommand,
    create_command_table,
)
from .parser import read_commands, read_script, tokenize
from .tcl import Tcl, evaluate, get_variable, register_command, set_variable
from .types import ExecResult, ExecutionLimits, Value

__version__ = "0.1.0"

__all__ = [
    # Main API
    "Tcl",
    "evaluate",
    "register_command",
    "get_variable",
    "set_variable",
    # Types
    "ExecResult",
    "ExecutionLimits",
    "Value",
    # Interpreter
    "Interpreter",
    "InterpreterContext",
    "Environment",
    "CommandTable",
    "NativeCommand",
    "ProcCommand",
    "create_command_table",
    # Parser
    "read_commands",
    "read_script",
    "tokenize",
    "Command",
    "RawCommand",
    "Script",
    "Word",
    "WordKind",
    # Errors
    "TclError",
    "TclSyntaxError",
    "UnterminatedQuote",
    "UnterminatedBrace",
    "MismatchedBracket",
    "ExtraCharacters",
    "UndefinedVariable",
    "UnknownCommand",
    "ArityError",
    "NotANumber",
    "RecursionLimitExceeded",
    "CommandFailure",
]
