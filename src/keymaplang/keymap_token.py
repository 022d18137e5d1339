# src/keymaplang/keymap_token.py
"""
Token definitions for the keymap configuration language.

A token is a classified piece of source text plus the position where that
text begins. Token kinds form a closed set::

    Identifier(text)    one or more ASCII letters
    Modifier(modifier)  ctrl / shift / alt
    Literal(text)       fixed keywords: "map", "+"
    Whitespace()        a run of spaces/tabs (never reaches the parser)
    Newline()           a single "\\n"

Kinds compare by value and ignore position, which is what the parser relies on
when it expects a particular literal or newline.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class ModifierKind(Enum):
    """Keyboard modifiers. Values are the keywords used in source text."""
    CTRL = "ctrl"
    SHIFT = "shift"
    ALT = "alt"

    def __str__(self) -> str:
        return self.value


# ---------------------------------------------------------------------------
# Positions
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SourcePosition:
    """1-based line/column of the first character of a token."""
    line: int = 1
    column: int = 1

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


class EndOfInput:
    """Position used when a failure happens after the last token."""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "EndOfInput"

    def __str__(self):
        return "end of input"


END_OF_INPUT = EndOfInput()

Position = Union[SourcePosition, EndOfInput]


# ---------------------------------------------------------------------------
# Token kinds
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Identifier:
    text: str

    def describe(self) -> str:
        return f"identifier '{self.text}'"


@dataclass(frozen=True)
class Modifier:
    modifier: ModifierKind

    @property
    def text(self) -> str:
        return self.modifier.value

    def describe(self) -> str:
        return f"modifier '{self.modifier.value}'"


@dataclass(frozen=True)
class Literal:
    text: str

    def describe(self) -> str:
        return f"'{self.text}'"


@dataclass(frozen=True)
class Whitespace:
    text = ""

    def describe(self) -> str:
        return "whitespace"


@dataclass(frozen=True)
class Newline:
    text = "\n"

    def describe(self) -> str:
        return "newline"


TokenKind = Union[Identifier, Modifier, Literal, Whitespace, Newline]

# Fixed kinds
MAP = Literal("map")
PLUS = Literal("+")
WHITESPACE = Whitespace()
NEWLINE = Newline()

# Fixed keywords recognised by the literal rules, in rule order
KEYWORDS = (MAP.text, PLUS.text)


@dataclass(frozen=True)
class Token:
    position: Position
    kind: TokenKind

    @property
    def text(self) -> str:
        return self.kind.text

    def __repr__(self):
        return f"Token({self.kind!r} at {self.position})"
