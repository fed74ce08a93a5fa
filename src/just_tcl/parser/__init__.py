"""Parser module for just-tcl."""

from .reader import read_commands, read_script
from .scanner import find_bare_end, find_group_end, find_variable_end, locate
from .tokenizer import flatten_block, split_words, tokenize

__all__ = [
    # Reader
    "read_commands",
    "read_script",
    # Tokenizer
    "tokenize",
    "split_words",
    "flatten_block",
    # Scanner
    "find_group_end",
    "find_bare_end",
    "find_variable_end",
    "locate",
]
