# src/keymaplang/error_reporter.py
"""
Turns structured lexer/parser errors into messages for people.

The reporter remembers the source text of every file it has been told about,
so it can quote the offending line and point at the column::

    keys.conf:1:10: error: expected '+'
        map ctrl k
                 ^
"""

from __future__ import annotations

from typing import Dict, Optional

from .errors import LexError, LexErrorKind, ParseError, ParseErrorKind
from .keymap_token import EndOfInput, SourcePosition

_PARSE_DESCRIPTIONS = {
    ParseErrorKind.EXPECTED_ID: "expected an identifier",
    ParseErrorKind.EXPECTED_MOD: "expected a modifier (ctrl, shift or alt)",
    ParseErrorKind.REMAINING_TOKENS: "unexpected tokens after the last statement",
    ParseErrorKind.EXPECTED_EOF: "expected end of input",
}

_LEX_DESCRIPTIONS = {
    LexErrorKind.EXPECTED_ID: "expected an identifier",
    LexErrorKind.EXPECTED_MOD: "expected a modifier",
    LexErrorKind.EXPECTED_WHITESPACE: "expected whitespace",
    LexErrorKind.EXPECTED_NEWLINE: "expected a newline",
}


class ErrorReporter:
    def __init__(self):
        self.sources: Dict[str, str] = {}

    def register_source(self, filename: str, source: str) -> None:
        self.sources[filename] = source

    def describe(self, error, filename: Optional[str] = None) -> str:
        """One-line description of ``error`` without its position."""
        if isinstance(error, LexError):
            return self._describe_lex(error, filename)
        if isinstance(error, ParseError):
            return self._describe_parse(error)
        return str(error)

    def _describe_lex(self, error: LexError, filename: Optional[str]) -> str:
        if error.kind is LexErrorKind.REMAINING_INPUT:
            found = self._char_at(error, filename)
            if found is None:
                return "unrecognised input"
            return f"unexpected character {found!r}"
        if error.kind is LexErrorKind.EXPECTED:
            return f"expected {error.expected!r}"
        if error.kind is LexErrorKind.EXPECTED_PHRASE:
            return f"expected '{error.expected}'"
        return _LEX_DESCRIPTIONS[error.kind]

    def _describe_parse(self, error: ParseError) -> str:
        if error.kind is ParseErrorKind.MESSAGE:
            return error.message or "parse error"
        if error.kind is ParseErrorKind.EXPECTED:
            if error.expected is None:
                text = "unexpected token"
            else:
                text = f"expected {error.expected.describe()}"
        else:
            text = _PARSE_DESCRIPTIONS[error.kind]
        if isinstance(error.position, EndOfInput):
            return f"{text}, found end of input"
        return text

    def _char_at(self, error: LexError, filename: Optional[str]) -> Optional[str]:
        line = self._line_text(error.position, filename)
        if line is None:
            return None
        index = error.position.column - 1
        if index >= len(line):
            return None
        return line[index]

    def _line_text(self, position, filename: Optional[str] = None) -> Optional[str]:
        if not isinstance(position, SourcePosition):
            return None
        if filename is not None:
            source = self.sources.get(filename)
        elif len(self.sources) == 1:
            source = next(iter(self.sources.values()))
        else:
            source = None
        if source is None:
            return None
        lines = source.split("\n")
        if position.line > len(lines):
            return None
        return lines[position.line - 1]

    def format_error(self, error, filename: str = "<input>") -> str:
        """Full report: ``file:line:col: error: ...`` plus a source excerpt."""
        position = getattr(error, "position", None)
        where = f"{filename}:{position}" if position is not None else filename
        lines = [f"{where}: error: {self.describe(error, filename)}"]

        line_text = self._line_text(position, filename)
        if line_text is not None:
            lines.append(f"    {line_text}")
            # Keep tabs so the caret lines up under tab-indented text
            prefix = line_text[:position.column - 1]
            padding = "".join(ch if ch == "\t" else " " for ch in prefix)
            lines.append("    " + padding + "^")
        return "\n".join(lines)


_reporter: Optional[ErrorReporter] = None


def get_error_reporter() -> ErrorReporter:
    """Process-wide reporter shared by the CLI commands."""
    global _reporter
    if _reporter is None:
        _reporter = ErrorReporter()
    return _reporter


def format_error(error, filename: str = "<input>", source: Optional[str] = None) -> str:
    reporter = get_error_reporter()
    if source is not None:
        reporter.register_source(filename, source)
    return reporter.format_error(error, filename)
