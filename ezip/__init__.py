"""
Ezip, decoder for the experimental marker compression format

A compressed file mixes plain text with `(LxR)` markers: the `L` characters
after a marker stand for `R` copies of themselves. Version 1 takes a marker's
payload as plain text, version 2 parses it again so markers can nest.

Decompressed lengths are computed from the parsed structure, never by
expanding the text.
"""

__all__ = [
    "abstract",
    "errors",
    "grammars",
    "lexer",
    "parser",
    "walk",
    "parse_flat",
    "parse_recursive",
    "length_of",
    "decompressed_length",
]

from . import abstract
from . import errors
from . import grammars
from . import lexer
from . import parser
from . import walk

from .parser import parse_flat, parse_recursive
from .walk import length_of

def decompressed_length(text: str, recursive: bool = False) -> int:
    document = parse_recursive(text) if recursive else parse_flat(text)
    return length_of(document)
