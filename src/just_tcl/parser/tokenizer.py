"""Tokenizer - splits one raw command into words.

Words are separated by spaces and tabs. A word starting with ``"`` runs to
the matching quote, a word starting with ``{`` runs to its matching brace,
anything else is a bare word.

A brace group that is the last word of a command (and not its name) is a
block: its content is read as a script and every word of every command in
it is appended to the enclosing command, so::

    user "Example User" {
        uid 1000
        gid 1000
    }

tokenizes exactly like ``user "Example User" uid 1000 gid 1000``. Flattening
only applies at the top level of a command: brace groups inside a block stay
literal words.
"""

from ..ast.types import Command, RawCommand, Word, WordKind
from ..errors import ExtraCharacters
from .reader import read_commands
from .scanner import SPACE, TERMINATORS, find_bare_end, find_group_end, locate


def _is_separator(text: str, i: int) -> bool:
    c = text[i]
    return c in SPACE or c in TERMINATORS or (c == "\\" and text.startswith("\n", i + 1))


def split_words(text: str, line: int = 1, column: int = 1) -> list[Word]:
    """Split the text of one command into words.

    Raises:
        UnterminatedQuote, UnterminatedBrace, MismatchedBracket: for an
            unclosed group.
        ExtraCharacters: if a quoted or braced word is followed directly by
            more text.
    """
    words: list[Word] = []
    i = 0
    n = len(text)
    while i < n:
        if _is_separator(text, i):
            i += 2 if text[i] == "\\" else 1
            continue

        word_line, word_column = locate(text, i, line, column)
        c = text[i]
        if c == '"' or c == "{":
            end = find_group_end(text, i, line, column)
            if end < n and not _is_separator(text, end):
                delimiter = "quote" if c == '"' else "brace"
                raise ExtraCharacters(delimiter, *locate(text, end, line, column))
            kind = WordKind.QUOTED if c == '"' else WordKind.BRACED
            words.append(Word(text[i + 1:end - 1], kind, word_line, word_column))
        else:
            end = find_bare_end(text, i, line, column)
            words.append(Word(text[i:end], WordKind.BARE, word_line, word_column))
        i = end
    return words


def flatten_block(block: Word) -> list[Word]:
    """Read the content of a brace block and return all of its words."""
    words: list[Word] = []
    for raw in read_commands(block.text, block.line, block.column + 1):
        words.extend(split_words(raw.text, raw.line, raw.column))
    return words


def tokenize(raw: RawCommand) -> Command:
    """Turn a raw command into a Command, flattening a trailing block."""
    words = split_words(raw.text, raw.line, raw.column)
    if len(words) > 1 and words[-1].kind is WordKind.BRACED:
        block = words.pop()
        block_start = len(words)
        words.extend(flatten_block(block))
        return Command(tuple(words), raw.line, raw.column, block, block_start)
    return Command(tuple(words), raw.line, raw.column)
