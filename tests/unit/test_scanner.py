"""Scanner cursor and position bookkeeping."""

import pytest

from keymaplang.errors import LexError, LexErrorKind
from keymaplang.keymap_token import SourcePosition
from keymaplang.scanner import Scanner


def test_peek_does_not_advance():
	scanner = Scanner("ab")
	assert scanner.peek() == "a"
	assert scanner.peek() == "a"
	assert scanner.cursor == 0


def test_pop_tracks_columns_and_lines():
	scanner = Scanner("a\nb")
	assert scanner.pop() == "a"
	assert scanner.current_position() == SourcePosition(1, 2)
	assert scanner.pop() == "\n"
	assert scanner.current_position() == SourcePosition(2, 1)
	assert scanner.pop() == "b"
	assert scanner.current_position() == SourcePosition(2, 2)
	assert scanner.is_done()


def test_pop_at_end_is_a_no_op():
	scanner = Scanner("")
	assert scanner.is_done()
	assert scanner.peek() is None
	assert scanner.pop() is None
	assert scanner.current_position() == SourcePosition(1, 1)


def test_pop_in_range():
	scanner = Scanner("q1")
	assert scanner.pop_in_range("a", "z") == "q"
	assert scanner.pop_in_range("a", "z") is None
	assert scanner.cursor == 1


def test_pop_in_set():
	scanner = Scanner(" \tx")
	assert scanner.pop_in_set((" ", "\t")) == " "
	assert scanner.pop_in_set((" ", "\t")) == "\t"
	assert scanner.pop_in_set((" ", "\t")) is None
	assert scanner.peek() == "x"


def test_take_single_character():
	scanner = Scanner("+a")
	assert not scanner.take("a")
	assert scanner.take("+")
	assert scanner.cursor == 1


def test_expect_raises_without_consuming():
	scanner = Scanner("a")
	with pytest.raises(LexError) as excinfo:
		scanner.expect("+")
	assert excinfo.value.kind is LexErrorKind.EXPECTED
	assert excinfo.value.expected == "+"
	assert scanner.cursor == 0
	scanner.expect("a")
	assert scanner.is_done()


class TestTakeStr:
	def test_full_match_consumes(self):
		scanner = Scanner("map x")
		assert scanner.take_str("map")
		assert scanner.cursor == 3
		assert scanner.current_position() == SourcePosition(1, 4)

	def test_partial_match_leaves_cursor(self):
		scanner = Scanner("mat")
		assert not scanner.take_str("map")
		assert scanner.cursor == 0
		assert scanner.current_position() == SourcePosition(1, 1)

	def test_input_too_short(self):
		scanner = Scanner("ct")
		assert not scanner.take_str("ctrl")
		assert scanner.cursor == 0

	def test_tracks_newlines_inside_literal(self):
		scanner = Scanner("a\nb")
		assert scanner.take_str("a\nb")
		assert scanner.current_position() == SourcePosition(2, 2)

	def test_from_middle_of_input(self):
		scanner = Scanner("xxshift")
		scanner.pop()
		scanner.pop()
		assert scanner.take_str("shift")
		assert scanner.is_done()


def test_transform_consumes_only_on_result():
	scanner = Scanner("7a")
	digit = scanner.transform(lambda ch: int(ch) if ch.isdigit() else None)
	assert digit == 7
	assert scanner.transform(lambda ch: int(ch) if ch.isdigit() else None) is None
	assert scanner.peek() == "a"
	assert Scanner("").transform(lambda ch: ch) is None
