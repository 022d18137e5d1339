# src/keymaplang/errors.py
"""
Structured errors raised by the scanner, lexer and parser.

Both error types carry data, not prose: a kind, an optional payload and a
position. Turning them into readable messages is the job of
``keymaplang.error_reporter``.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional, Union

from .keymap_token import END_OF_INPUT, Position, Token, TokenKind


class KeymapError(Exception):
    """Base class for all keymap language errors."""


class LexErrorKind(Enum):
    EXPECTED = "Expected"
    EXPECTED_PHRASE = "ExpectedPhrase"
    EXPECTED_ID = "ExpectedId"
    EXPECTED_MOD = "ExpectedMod"
    EXPECTED_WHITESPACE = "ExpectedWhitespace"
    EXPECTED_NEWLINE = "ExpectedNewline"
    REMAINING_INPUT = "RemainingInput"


class LexError(KeymapError):
    """Raised by lexing rules and by ``lex``.

    Every kind except ``REMAINING_INPUT`` is a rule-level failure that the
    lexer loop recovers from by trying the next rule. ``REMAINING_INPUT`` is
    the only kind that escapes ``lex``; it carries the position where no rule
    matched and the tokens lexed up to that point.
    """

    def __init__(self, kind: LexErrorKind, expected: Optional[str] = None,
                 position: Position = END_OF_INPUT,
                 tokens: Optional[List[Token]] = None):
        self.kind = kind
        self.expected = expected
        self.position = position
        self.tokens = list(tokens or [])
        super().__init__(self._summary())

    def _summary(self) -> str:
        name = self.kind.value
        if self.expected is not None:
            name = f"{name}({self.expected!r})"
        return f"{self.position}: {name}"


class ParseErrorKind(Enum):
    EXPECTED = "Expected"
    EXPECTED_ID = "ExpectedId"
    EXPECTED_MOD = "ExpectedMod"
    REMAINING_TOKENS = "RemainingTokens"
    EXPECTED_EOF = "ExpectedEof"
    MESSAGE = "Message"


class ParseError(KeymapError):
    """A positioned parse failure. ``expected`` is set for ``EXPECTED``,
    ``message`` for ``MESSAGE``."""

    def __init__(self, kind: ParseErrorKind, position: Position = END_OF_INPUT,
                 expected: Optional[TokenKind] = None, message: Optional[str] = None):
        self.kind = kind
        self.position = position
        self.expected = expected
        self.message = message
        super().__init__(self._summary())

    @classmethod
    def at(cls, token: Optional[Token], kind: ParseErrorKind, **kwargs) -> "ParseError":
        """Build an error positioned at ``token``, or at end of input when
        there is no token left."""
        position = token.position if token is not None else END_OF_INPUT
        return cls(kind, position, **kwargs)

    def _summary(self) -> str:
        name = self.kind.value
        if self.kind is ParseErrorKind.EXPECTED and self.expected is not None:
            name = f"{name}({self.expected!r})"
        elif self.kind is ParseErrorKind.MESSAGE and self.message is not None:
            name = f"{name}({self.message!r})"
        return f"{self.position}: {name}"


ErrorType = Union[LexError, ParseError]
