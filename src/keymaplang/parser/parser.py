# src/keymaplang/parser/parser.py
"""
Recursive-descent parser for keymap configuration.

Grammar::

    Program    := Statement (Newline Statement)*
    Statement  := MapBinding
    MapBinding := "map" Key Identifier
    Key        := (Modifier "+")? Identifier

Parsing stops at the first error; there is no recovery and no partial
program.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from ..config import config
from ..errors import ParseError, ParseErrorKind
from ..keymap_ast import Key, MapBinding, MapStatement, Program, Statement
from ..keymap_token import (
    Identifier, MAP, Modifier, ModifierKind, NEWLINE, PLUS, Token, TokenKind,
)

logger = logging.getLogger(__name__)


class Parser:
    def __init__(self, tokens: Sequence[Token]):
        self.tokens: List[Token] = list(tokens)
        self._cursor = 0

    # -- token cursor ----------------------------------------------------

    @property
    def cursor(self) -> int:
        """Index of the next token. Useful for reporting errors."""
        return self._cursor

    def peek(self) -> Optional[Token]:
        """Return the next token without advancing (lookahead)."""
        if self.is_done():
            return None
        return self.tokens[self._cursor]

    def pop(self) -> Optional[Token]:
        """Return the next token, if any, and advance past it."""
        token = self.peek()
        if token is not None:
            self._cursor += 1
        return token

    def is_done(self) -> bool:
        """True when no further progress is possible."""
        return self._cursor >= len(self.tokens)

    def expect(self, kind: TokenKind) -> Token:
        """Consume the next token if its kind equals ``kind``."""
        token = self.peek()
        if token is None or token.kind != kind:
            raise ParseError.at(token, ParseErrorKind.EXPECTED, expected=kind)
        return self.pop()

    def take_identifier(self) -> str:
        token = self.peek()
        if token is None or not isinstance(token.kind, Identifier):
            raise ParseError.at(token, ParseErrorKind.EXPECTED_ID)
        self.pop()
        return token.kind.text

    def take_modifier(self) -> ModifierKind:
        token = self.peek()
        if token is None or not isinstance(token.kind, Modifier):
            raise ParseError.at(token, ParseErrorKind.EXPECTED_MOD)
        self.pop()
        return token.kind.modifier

    # -- grammar ---------------------------------------------------------

    def parse_program(self) -> Program:
        statements = []
        while True:
            statements.append(self.parse_statement())

            token = self.peek()
            if token is None:
                break
            if token.kind != NEWLINE:
                raise ParseError.at(token, ParseErrorKind.EXPECTED, expected=NEWLINE)
            self.pop()

        return Program(tuple(statements))

    def parse_statement(self) -> Statement:
        return MapStatement(self.parse_map_binding())

    def parse_map_binding(self) -> MapBinding:
        self.expect(MAP)
        key = self.parse_key()
        command_name = self.take_identifier()
        return MapBinding(key, command_name)

    def parse_key(self) -> Key:
        try:
            modifier = self.take_modifier()
        except ParseError:
            # take_modifier consumed nothing; read a bare key instead
            return Key(self.take_identifier())

        # Once a modifier is seen the "+" is mandatory
        self.expect(PLUS)
        return Key(self.take_identifier(), modifier)


def parse(tokens: Sequence[Token]) -> Program:
    """Parse a full token sequence into a Program.

    Raises ``ParseError`` on the first malformed construct, or with
    ``REMAINING_TOKENS`` if tokens are left over after the program.
    """
    parser = Parser(tokens)
    try:
        program = parser.parse_program()
        if not parser.is_done():
            raise ParseError.at(parser.peek(), ParseErrorKind.REMAINING_TOKENS)
    except ParseError as e:
        if config.should_log("debug"):
            logger.debug("Parse failed after %d of %d tokens: %s",
                         parser.cursor, len(parser.tokens), e)
        raise

    if config.should_log("debug"):
        logger.debug("Parsed %d statements", len(program))
    return program
