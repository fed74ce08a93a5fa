"""Parse tree types for just-tcl."""

from .types import Command, RawCommand, Script, Word, WordKind

__all__ = [
    "Command",
    "RawCommand",
    "Script",
    "Word",
    "WordKind",
]
