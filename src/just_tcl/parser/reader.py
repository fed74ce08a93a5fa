"""Reader - splits source text into raw commands.

A command ends at a newline or semicolon, but only outside quoted words,
brace groups and command substitutions. A ``#`` at the start of a command
begins a comment that runs to the end of the line.
"""

from ..ast.types import RawCommand, Script
from .scanner import SPACE, TERMINATORS, at_word_start, find_group_end, find_variable_end, locate


def _skip_comment(text: str, i: int) -> int:
    """Skip from ``#`` to the newline ending the comment."""
    n = len(text)
    while i < n and text[i] != "\n":
        i += 2 if text[i] == "\\" else 1
    return i


def read_commands(text: str, line: int = 1, column: int = 1) -> list[RawCommand]:
    """Split ``text`` into raw commands.

    Blank commands and comments are dropped. ``line`` and ``column`` give the
    position of ``text[0]`` in the original source.

    Raises:
        UnterminatedQuote, UnterminatedBrace, MismatchedBracket: if the text
            ends inside a group.
    """
    commands: list[RawCommand] = []
    start = None
    i = 0
    n = len(text)

    def emit(end: int) -> None:
        cmd_line, cmd_column = locate(text, start, line, column)
        commands.append(RawCommand(text[start:end], cmd_line, cmd_column))

    while i < n:
        c = text[i]

        if start is None:
            if c in SPACE or c in TERMINATORS:
                i += 1
                continue
            if c == "#":
                i = _skip_comment(text, i)
                continue
            start = i

        if c in TERMINATORS:
            emit(i)
            start = None
            i += 1
        elif c == "\\":
            i += 2
        elif c == "[" or (c in '{"' and at_word_start(text, i)):
            i = find_group_end(text, i, line, column)
        elif c == "$" and text.startswith("{", i + 1):
            i = find_variable_end(text, i, line, column)
        else:
            i += 1

    if start is not None:
        emit(min(i, n))
    return commands


def read_script(text: str, line: int = 1, column: int = 1) -> Script:
    """Read and tokenize ``text`` into a Script."""
    from .tokenizer import tokenize

    commands = (tokenize(raw) for raw in read_commands(text, line, column))
    return Script(tuple(command for command in commands if command.words))
