# src/keymaplang/scanner.py
"""
Character cursor used by the lexing rules.

Every consuming operation either advances past the characters it matched or
leaves the cursor exactly where it was. Rules are tried one after another at
the same position, so a failed attempt must cost nothing.
"""

from __future__ import annotations

from typing import Callable, Iterable, Optional, TypeVar

from .errors import LexError, LexErrorKind
from .keymap_token import SourcePosition

T = TypeVar("T")


class Scanner:
    def __init__(self, source: str):
        self.characters = source
        self._cursor = 0
        # Files start at line 1, column 1
        self.line = 1
        self.column = 1

    @property
    def cursor(self) -> int:
        """Character offset of the cursor. Useful for reporting errors."""
        return self._cursor

    def current_position(self) -> SourcePosition:
        return SourcePosition(self.line, self.column)

    def is_done(self) -> bool:
        """True when no further progress is possible."""
        return self._cursor >= len(self.characters)

    def peek(self) -> Optional[str]:
        """Return the next character without advancing."""
        if self.is_done():
            return None
        return self.characters[self._cursor]

    def pop(self) -> Optional[str]:
        """Return the next character and advance past it."""
        ch = self.peek()
        if ch is None:
            return None

        if ch == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        self._cursor += 1
        return ch

    def pop_in_range(self, low: str, high: str) -> Optional[str]:
        """Pop the next character if ``low <= ch <= high``."""
        ch = self.peek()
        if ch is not None and low <= ch <= high:
            return self.pop()
        return None

    def pop_in_set(self, chars: Iterable[str]) -> Optional[str]:
        """Pop the next character if it is one of ``chars``."""
        ch = self.peek()
        if ch is not None and ch in chars:
            return self.pop()
        return None

    def take(self, target: str) -> bool:
        """Consume ``target`` if it is the next character."""
        if self.peek() == target:
            self.pop()
            return True
        return False

    def expect(self, target: str) -> None:
        """Like ``take``, but raise ``LexError`` when ``target`` is absent."""
        if not self.take(target):
            raise LexError(LexErrorKind.EXPECTED, expected=target,
                           position=self.current_position())

    def take_str(self, target: str) -> bool:
        """Consume the whole of ``target`` or nothing at all."""
        end = self._cursor + len(target)
        if end > len(self.characters):
            return False
        if self.characters[self._cursor:end] != target:
            return False

        for _ in target:
            self.pop()
        return True

    def transform(self, fn: Callable[[str], Optional[T]]) -> Optional[T]:
        """Call ``fn`` on the next character; advance only when it returns
        something other than ``None``."""
        ch = self.peek()
        if ch is None:
            return None
        result = fn(ch)
        if result is not None:
            self.pop()
        return result

    def __repr__(self):
        return f"Scanner(cursor={self._cursor}, line={self.line}, column={self.column})"
