"""Substitution engine.

Expands the content of a bare or quoted word, left to right:

- ``$name`` and ``${name}`` are replaced with the variable's value
- ``[script]`` is replaced with the value of evaluating ``script``
- backslash sequences are replaced with the character they stand for

The result is always exactly one word and is never substituted again.
"""

import re
from typing import TYPE_CHECKING

from ..parser.scanner import find_group_end, find_variable_end, locate

if TYPE_CHECKING:
    from .types import InterpreterContext

_SPECIAL_RE = re.compile(r"[$\[\\]")
_NAME_RE = re.compile(r"[A-Za-z0-9_]+")

ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "\\": "\\",
    '"': '"',
    "$": "$",
    "[": "[",
    "]": "]",
    "{": "{",
    "}": "}",
    ";": ";",
    " ": " ",
}


def _backslash(text: str, i: int) -> tuple[str, int]:
    """Expand the backslash sequence at ``text[i]``.

    Returns the replacement text and the index after the sequence. Unknown
    sequences are kept verbatim, backslash included.
    """
    if i + 1 >= len(text):
        return "\\", i + 1
    c = text[i + 1]
    if c == "\n":
        # backslash-newline and the next line's indentation become one space
        j = i + 2
        while j < len(text) and text[j] in " \t":
            j += 1
        return " ", j
    if c in ESCAPES:
        return ESCAPES[c], i + 2
    return text[i:i + 2], i + 2


def substitute(ctx: "InterpreterContext", text: str, line: int = 1, column: int = 1) -> str:
    """Substitute variables, commands and backslashes in ``text``.

    ``line`` and ``column`` give the source position of ``text[0]`` and are
    used for error positions and for nested scripts.

    Raises:
        UndefinedVariable: for a reference to an unset variable.
        UnterminatedBrace: for ``${`` without a closing brace.
        MismatchedBracket: for ``[`` without a closing bracket.
        TclError: anything raised while evaluating a nested script.
    """
    if not _SPECIAL_RE.search(text):
        return text

    parts: list[str] = []
    i = 0
    n = len(text)
    while i < n:
        match = _SPECIAL_RE.search(text, i)
        if match is None:
            parts.append(text[i:])
            break
        if match.start() > i:
            parts.append(text[i:match.start()])
        i = match.start()
        c = text[i]

        if c == "\\":
            value, i = _backslash(text, i)
            parts.append(value)
        elif c == "$":
            if text.startswith("{", i + 1):
                end = find_variable_end(text, i, line, column)
                parts.append(ctx.env.get(text[i + 2:end - 1]))
                i = end
                continue
            name = _NAME_RE.match(text, i + 1)
            if name is None:
                parts.append("$")
                i += 1
            else:
                parts.append(ctx.env.get(name.group()))
                i = name.end()
        else:
            end = find_group_end(text, i, line, column)
            script_line, script_column = locate(text, i + 1, line, column)
            parts.append(ctx.evaluate(text[i + 1:end - 1], script_line, script_column))
            i = end

    return "".join(parts)
