"""Error types for just-tcl.

Every failure the interpreter reports derives from TclError. The first error
raised while evaluating a script aborts the rest of that script and propagates
unchanged to the caller of ``evaluate``.
"""

from typing import Optional


class TclError(Exception):
    """Base class for all interpreter errors.

    Errors optionally carry the line and column of the command (or the
    opening delimiter, for syntax errors) they were raised for.
    """

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column

    def locate(self, line: int, column: int) -> None:
        """Record a source position unless a more precise one is already set."""
        if self.line is None:
            self.line = line
            self.column = column

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"{self.message} (line {self.line}, column {self.column})"


class TclSyntaxError(TclError):
    """Raised by the reader and tokenizer for malformed source text."""


class UnterminatedQuote(TclSyntaxError):
    """A double-quoted word has no closing quote."""

    def __init__(self, line: Optional[int] = None, column: Optional[int] = None):
        super().__init__("missing close-quote", line, column)


class UnterminatedBrace(TclSyntaxError):
    """A brace group (or ``${name}`` reference) has no closing brace."""

    def __init__(self, line: Optional[int] = None, column: Optional[int] = None):
        super().__init__("missing close-brace", line, column)


class MismatchedBracket(TclSyntaxError):
    """A command substitution has no closing bracket."""

    def __init__(self, line: Optional[int] = None, column: Optional[int] = None):
        super().__init__("missing close-bracket", line, column)


class ExtraCharacters(TclSyntaxError):
    """A quoted or braced word is followed directly by more text."""

    def __init__(self, delimiter: str, line: Optional[int] = None, column: Optional[int] = None):
        self.delimiter = delimiter
        super().__init__(f"extra characters after close-{delimiter}", line, column)


class UndefinedVariable(TclError):
    """A ``$name`` reference names a variable that is not set in any scope."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"can't read \"{name}\": no such variable")


class UnknownCommand(TclError):
    """Word 0 of a command names nothing in the command table."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"invalid command name \"{name}\"")


class ArityError(TclError):
    """A command was called with the wrong number of arguments."""

    def __init__(self, command: str, expected, got: int):
        """
        Args:
            command: Name of the command that was called.
            expected: Expected argument count, either an int or a description
                such as ``"at least 1"`` for variadic commands.
            got: Number of arguments actually passed.
        """
        self.command = command
        self.expected = expected
        self.got = got
        super().__init__(
            f"wrong # args to \"{command}\": expected {expected}, got {got}"
        )


class NotANumber(TclError):
    """A numeric builtin was given text that does not parse as a number."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"expected number but got \"{text}\"")


class RecursionLimitExceeded(TclError):
    """Nested command substitution or proc calls went deeper than allowed."""

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(
            f"too many nested evaluations (limit {limit}), "
            "increase limits.max_recursion_depth"
        )


class CommandFailure(TclError):
    """Opaque failure raised by a native command or a proc body."""


class ReturnSignal(Exception):
    """Unwinds a proc body when ``return`` is executed.

    Not a TclError: it is control flow, caught by the enclosing proc call
    (or by the top-level evaluation, which then yields ``value``).
    """

    def __init__(self, value: str = ""):
        super().__init__(value)
        self.value = value
