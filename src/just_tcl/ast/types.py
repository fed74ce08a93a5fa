"""Parse tree types: words, commands and scripts.

These are created per evaluation and discarded once a command has run.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class WordKind(Enum):
    """How a word was quoted in the source."""

    BARE = "bare"
    QUOTED = "quoted"
    BRACED = "braced"


@dataclass(frozen=True)
class Word:
    """A single word of a command.

    ``text`` is the word's content with any surrounding quotes or braces
    removed. Bare and quoted words are substituted before dispatch; braced
    words are passed through verbatim.
    """

    text: str
    kind: WordKind = WordKind.BARE
    line: int = field(default=1, compare=False)
    column: int = field(default=1, compare=False)

    @property
    def is_literal(self) -> bool:
        return self.kind is WordKind.BRACED


@dataclass(frozen=True)
class RawCommand:
    """Source text of one command as split off by the reader."""

    text: str
    line: int = 1
    column: int = 1


@dataclass(frozen=True)
class Command:
    """An ordered list of words; word 0 names the command.

    When the last source word was a brace block, its words have been
    flattened into ``words`` starting at ``block_start`` and the original
    block is kept in ``block`` for commands that want it as one literal
    argument. Neither takes part in equality.
    """

    words: tuple[Word, ...]
    line: int = field(default=1, compare=False)
    column: int = field(default=1, compare=False)
    block: Optional[Word] = field(default=None, compare=False)
    block_start: Optional[int] = field(default=None, compare=False)

    @property
    def name(self) -> Word:
        return self.words[0]

    @property
    def args(self) -> tuple[Word, ...]:
        return self.words[1:]


@dataclass(frozen=True)
class Script:
    """An ordered sequence of commands."""

    commands: tuple[Command, ...] = ()

    def __len__(self) -> int:
        return len(self.commands)

    def __iter__(self):
        return iter(self.commands)
