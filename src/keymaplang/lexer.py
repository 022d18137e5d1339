# src/keymaplang/lexer.py
"""
Rule-based lexer.

A rule is a function ``rule(scanner) -> Token`` that either consumes at least
one character and returns a token, or raises ``LexError`` without consuming
anything. The lexer tries its rules in order at each position and takes the
first match, so the order is significant: the modifier rule must run before
the identifier rule, otherwise ``ctrl`` would lex as an identifier.

Rules stamp each token with the scanner position *after* its text.
``shift_positions`` moves every stamp back one token so that each token ends
up carrying the position where its own text starts.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional, Sequence

from .config import config
from .errors import LexError, LexErrorKind
from .keymap_token import (
    Identifier, Literal, Modifier, ModifierKind, NEWLINE, SourcePosition,
    Token, WHITESPACE, KEYWORDS,
)
from .scanner import Scanner

logger = logging.getLogger(__name__)

Rule = Callable[[Scanner], Token]

_BLANKS = (" ", "\t")


def _stamp(scanner: Scanner, kind) -> Token:
    return Token(scanner.current_position(), kind)


def lex_mod(scanner: Scanner) -> Token:
    for modifier in ModifierKind:
        if scanner.take_str(modifier.value):
            return _stamp(scanner, Modifier(modifier))
    raise LexError(LexErrorKind.EXPECTED_MOD, position=scanner.current_position())


def lex_newline(scanner: Scanner) -> Token:
    if scanner.take("\n"):
        return _stamp(scanner, NEWLINE)
    raise LexError(LexErrorKind.EXPECTED_NEWLINE, position=scanner.current_position())


def lex_whitespace(scanner: Scanner) -> Token:
    consumed = False
    while scanner.pop_in_set(_BLANKS) is not None:
        consumed = True

    if not consumed:
        raise LexError(LexErrorKind.EXPECTED_WHITESPACE, position=scanner.current_position())
    return _stamp(scanner, WHITESPACE)


def lex_phrase(phrase: str) -> Rule:
    """Build a rule matching the fixed keyword ``phrase``."""
    if not phrase:
        raise ValueError("lex_phrase needs a non-empty phrase")

    def rule(scanner: Scanner) -> Token:
        if scanner.take_str(phrase):
            return _stamp(scanner, Literal(phrase))
        raise LexError(LexErrorKind.EXPECTED_PHRASE, expected=phrase,
                       position=scanner.current_position())

    rule.__name__ = f"lex_phrase[{phrase}]"
    return rule


def _pop_letter(scanner: Scanner) -> Optional[str]:
    return scanner.pop_in_range("a", "z") or scanner.pop_in_range("A", "Z")


def lex_id(scanner: Scanner) -> Token:
    letters = []
    while True:
        letter = _pop_letter(scanner)
        if letter is None:
            break
        letters.append(letter)

    if not letters:
        raise LexError(LexErrorKind.EXPECTED_ID, position=scanner.current_position())
    return _stamp(scanner, Identifier("".join(letters)))


# Order matters: earlier rules shadow later ones. The identifier rule is last
# because it would otherwise swallow keywords and modifiers.
DEFAULT_RULES = (
    lex_mod,
    lex_newline,
    lex_whitespace,
    *(lex_phrase(keyword) for keyword in KEYWORDS),
    lex_id,
)


def shift_positions(tokens: Iterable[Token]) -> List[Token]:
    """Replace each token's end position with the previous token's.

    The first token gets 1:1. Since each token was stamped where its text
    ended, the previous token's stamp is exactly where this token's text
    begins.
    """
    shifted = []
    previous = SourcePosition(1, 1)
    for token in tokens:
        shifted.append(Token(previous, token.kind))
        previous = token.position
    return shifted


def _significant(tokens: Iterable[Token]) -> List[Token]:
    return [token for token in tokens if token.kind != WHITESPACE]


class Lexer:
    """Runs an ordered rule list over one source string."""

    def __init__(self, source: str, rules: Sequence[Rule] = DEFAULT_RULES):
        self.scanner = Scanner(source)
        self.rules = tuple(rules)

    def _next_token(self) -> Optional[Token]:
        start = self.scanner.cursor
        for rule in self.rules:
            try:
                token = rule(self.scanner)
            except LexError:
                continue
            # A match must make progress, or tokenize() would never finish
            if self.scanner.cursor > start:
                return token
        return None

    def tokenize(self) -> List[Token]:
        """Lex the whole input.

        Raises ``LexError(REMAINING_INPUT)`` at the first position no rule
        can match.
        """
        stamped = []
        while not self.scanner.is_done():
            token = self._next_token()
            if token is None:
                prefix = _significant(shift_positions(stamped))
                position = self.scanner.current_position()
                if config.should_log("debug"):
                    logger.debug("No lexing rule matches %r at %s; tokens so far: %s",
                                 self.scanner.peek(), position, prefix)
                raise LexError(LexErrorKind.REMAINING_INPUT,
                               position=position, tokens=prefix)
            stamped.append(token)

        tokens = _significant(shift_positions(stamped))
        if config.should_log("debug"):
            logger.debug("Lexed %d tokens (%d before whitespace filtering)",
                         len(tokens), len(stamped))
        return tokens


def lex(source: str) -> List[Token]:
    """Turn ``source`` into a list of positioned tokens, whitespace removed."""
    return Lexer(source).tokenize()
