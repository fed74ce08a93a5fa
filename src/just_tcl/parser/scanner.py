"""Low-level group scanning shared by the reader, tokenizer and substitution.

All three components must agree on where a quoted word, a brace group or a
command substitution ends, so the matching logic lives here. Nesting is
tracked with an explicit stack rather than recursion, so arbitrarily deep
groups cannot exhaust the Python stack.
"""

from ..errors import MismatchedBracket, TclSyntaxError, UnterminatedBrace, UnterminatedQuote

SPACE = " \t\r"
"""Characters separating words within a command."""

TERMINATORS = "\n;"
"""Characters ending a command when not inside a group."""

_CLOSERS = {'"': '"', "{": "}", "[": "]"}


def locate(text: str, index: int, line: int = 1, column: int = 1) -> tuple[int, int]:
    """Return the (line, column) of ``text[index]``.

    ``line`` and ``column`` give the position of ``text[0]`` in the original
    source, so positions stay absolute for nested text.
    """
    newlines = text.count("\n", 0, index)
    if newlines == 0:
        return line, column + index
    return line + newlines, index - text.rfind("\n", 0, index)


def at_word_start(text: str, index: int) -> bool:
    """Check whether ``text[index]`` begins a word."""
    return index == 0 or text[index - 1] in SPACE + TERMINATORS + "["


def _unterminated(opener: str, text: str, index: int, line: int, column: int) -> TclSyntaxError:
    pos = locate(text, index, line, column)
    if opener == '"':
        return UnterminatedQuote(*pos)
    if opener == "{":
        return UnterminatedBrace(*pos)
    return MismatchedBracket(*pos)


def find_group_end(text: str, start: int, line: int = 1, column: int = 1) -> int:
    """Find the end of the group opened at ``text[start]``.

    ``text[start]`` must be one of ``"``, ``{`` or ``[``. Returns the index just
    past the matching closer.

    - Inside braces only braces count (and nest); everything else is literal.
    - Inside quotes a ``[`` opens a nested command substitution.
    - Inside brackets another ``[`` nests, and quotes or braces open groups
      when they begin a word, as they would in a top-level script.

    A backslash always escapes the next character.

    Raises:
        UnterminatedQuote, UnterminatedBrace, MismatchedBracket: if the text
            ends before the group closes. The position is that of the
            innermost unclosed opener.
    """
    stack = [(text[start], start)]
    i = start + 1
    n = len(text)
    while i < n:
        c = text[i]
        if c == "\\":
            i += 2
            continue
        opener = stack[-1][0]
        if c == _CLOSERS[opener]:
            stack.pop()
            if not stack:
                return i + 1
        elif opener == "{":
            if c == "{":
                stack.append(("{", i))
        elif c == "[":
            stack.append(("[", i))
        elif opener == "[" and c in '{"' and at_word_start(text, i):
            stack.append((c, i))
        i += 1
    opener, index = stack[-1]
    raise _unterminated(opener, text, index, line, column)


def find_variable_end(text: str, start: int, line: int = 1, column: int = 1) -> int:
    """Find the end of a ``${name}`` reference starting at ``text[start]``.

    Returns the index just past the closing brace.

    Raises:
        UnterminatedBrace: if there is no closing brace.
    """
    end = text.find("}", start + 2)
    if end < 0:
        raise UnterminatedBrace(*locate(text, start + 1, line, column))
    return end + 1


def find_bare_end(text: str, start: int, line: int = 1, column: int = 1) -> int:
    """Find the end of a bare word starting at ``text[start]``.

    A bare word runs to the next unescaped space or terminator, skipping over
    command substitutions and ``${name}`` references whole.
    """
    i = start
    n = len(text)
    while i < n:
        c = text[i]
        if c in SPACE or c in TERMINATORS:
            break
        if c == "\\":
            if text.startswith("\n", i + 1):
                break
            i += 2
        elif c == "[":
            i = find_group_end(text, i, line, column)
        elif c == "$" and text.startswith("{", i + 1):
            i = find_variable_end(text, i, line, column)
        else:
            i += 1
    return min(i, n)
