from __future__ import annotations

import pytest

from a1notation.scanner import EOF_MARKER, Scanner


def test_peek_does_not_consume() -> None:
    scanner = Scanner("ab")
    assert scanner.peek() == "a"
    assert scanner.peek() == "a"
    assert scanner.position == 0


def test_advance_walks_to_eof() -> None:
    scanner = Scanner("ab")
    scanner.advance()
    assert scanner.peek() == "b"
    scanner.advance()
    assert scanner.at_eof()
    assert scanner.peek() == EOF_MARKER


def test_scanner_walks_code_points() -> None:
    scanner = Scanner("\U0001f4ca!")
    assert scanner.peek() == "\U0001f4ca"
    scanner.advance()
    assert scanner.peek() == "!"


def test_empty_input_is_eof() -> None:
    assert Scanner("").peek() == EOF_MARKER


def test_advance_past_eof_raises() -> None:
    scanner = Scanner("")
    with pytest.raises(IndexError):
        scanner.advance()
