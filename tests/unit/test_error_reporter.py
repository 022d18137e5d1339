"""Human-readable rendering of lexer and parser errors."""

import pytest

from keymaplang import parse_source
from keymaplang.error_reporter import ErrorReporter
from keymaplang.errors import (
	KeymapError, LexError, LexErrorKind, ParseError, ParseErrorKind,
)
from keymaplang.keymap_token import END_OF_INPUT, SourcePosition


def failure(source):
	with pytest.raises(KeymapError) as excinfo:
		parse_source(source)
	return excinfo.value


@pytest.fixture
def reporter():
	return ErrorReporter()


def test_parse_error_with_excerpt(reporter):
	source = "map up up\nmap ctrl k up"
	reporter.register_source("keys.conf", source)
	report = reporter.format_error(failure(source), "keys.conf")
	assert report.splitlines() == [
		"keys.conf:2:10: error: expected '+'",
		"    map ctrl k up",
		"             ^",
	]


def test_end_of_input_has_no_excerpt(reporter):
	source = "map ctrl+k"
	reporter.register_source("keys.conf", source)
	report = reporter.format_error(failure(source), "keys.conf")
	assert report == "keys.conf:end of input: error: expected an identifier, found end of input"


def test_lex_error_names_the_character(reporter):
	source = "map 1 up"
	reporter.register_source("keys.conf", source)
	report = reporter.format_error(failure(source), "keys.conf")
	assert report.splitlines()[0] == "keys.conf:1:5: error: unexpected character '1'"


def test_describe_without_registered_source(reporter):
	error = LexError(LexErrorKind.REMAINING_INPUT, position=SourcePosition(1, 1))
	assert reporter.describe(error) == "unrecognised input"


@pytest.mark.parametrize("error, text", [
	(ParseError(ParseErrorKind.EXPECTED_MOD, SourcePosition(1, 1)),
	 "expected a modifier (ctrl, shift or alt)"),
	(ParseError(ParseErrorKind.REMAINING_TOKENS, SourcePosition(1, 1)),
	 "unexpected tokens after the last statement"),
	(ParseError(ParseErrorKind.MESSAGE, END_OF_INPUT, message="custom"), "custom"),
	(LexError(LexErrorKind.EXPECTED, expected="+"), "expected '+'"),
	(LexError(LexErrorKind.EXPECTED_PHRASE, expected="map"), "expected 'map'"),
])
def test_describe_kinds(reporter, error, text):
	assert reporter.describe(error) == text


def test_expected_without_a_kind(reporter):
	error = ParseError(ParseErrorKind.EXPECTED, SourcePosition(1, 1))
	assert reporter.describe(error) == "unexpected token"


def test_caret_keeps_tabs(reporter):
	source = "\tmap ctrl k"
	reporter.register_source("tabs.conf", source)
	report = reporter.format_error(failure(source), "tabs.conf")
	assert report.splitlines() == [
		"tabs.conf:1:11: error: expected '+'",
		"    \tmap ctrl k",
		"    \t         ^",
	]


@pytest.mark.parametrize("kind", list(LexErrorKind))
def test_every_lex_error_kind_is_described(reporter, kind):
	error = LexError(kind, expected="x", position=SourcePosition(1, 1))
	assert reporter.describe(error)


def test_lex_error_kinds_are_the_ones_rules_raise():
	assert {kind.name for kind in LexErrorKind} == {
		"EXPECTED", "EXPECTED_PHRASE", "EXPECTED_ID", "EXPECTED_MOD",
		"EXPECTED_WHITESPACE", "EXPECTED_NEWLINE", "REMAINING_INPUT",
	}
