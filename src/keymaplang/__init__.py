# src/keymaplang/__init__.py
"""
keymaplang - front end for the keymap configuration language.

Each line of a keymap file binds a key to a command::

    map ctrl+k up
    map j down

``lex`` turns source text into tokens, ``parse`` turns tokens into a
``Program``. Both raise on the first error.
"""

from .errors import KeymapError, LexError, LexErrorKind, ParseError, ParseErrorKind
from .keymap_ast import Key, MapBinding, MapStatement, Program
from .keymap_token import END_OF_INPUT, ModifierKind, SourcePosition, Token
from .lexer import Lexer, lex
from .parser import Parser, parse

__version__ = "0.1.0"


def parse_source(source: str) -> Program:
    """Lex and parse ``source`` in one step."""
    return parse(lex(source))


__all__ = [
    "END_OF_INPUT",
    "Key",
    "KeymapError",
    "LexError",
    "LexErrorKind",
    "Lexer",
    "MapBinding",
    "MapStatement",
    "ModifierKind",
    "ParseError",
    "ParseErrorKind",
    "Parser",
    "Program",
    "SourcePosition",
    "Token",
    "lex",
    "parse",
    "parse_source",
]
