from __future__ import annotations

import pytest

from adapters.lexer.scanning_lexer import ScanningLexer
from contracts import TokenKind
from errors import MalformedNumberError, UnrecognizedCharacterError


def _kinds(tokens):
    return [t.kind for t in tokens]


def test_tokenize_assignment_line():
    tokens = ScanningLexer().tokenize("x = 5;")

    assert _kinds(tokens) == [
        TokenKind.IDENTIFIER,
        TokenKind.EQUALS,
        TokenKind.NUMBER,
        TokenKind.SEMICOLON,
        TokenKind.END_OF_INPUT,
    ]
    assert tokens[0].value == "x"
    assert tokens[2].value == 5.0
    assert tokens[-1].value is None


def test_tokenize_all_single_char_tokens():
    tokens = ScanningLexer().tokenize("+-*/()=;")

    assert _kinds(tokens) == [
        TokenKind.PLUS,
        TokenKind.MINUS,
        TokenKind.STAR,
        TokenKind.SLASH,
        TokenKind.LPAREN,
        TokenKind.RPAREN,
        TokenKind.EQUALS,
        TokenKind.SEMICOLON,
        TokenKind.END_OF_INPUT,
    ]
    assert [t.value for t in tokens[:-1]] == list("+-*/()=;")


def test_identifier_keeps_exact_text_with_digits_and_underscores():
    tokens = ScanningLexer().tokenize("_total_2 Rate")

    assert [t.value for t in tokens[:-1]] == ["_total_2", "Rate"]


def test_decimal_and_integer_numbers_are_floats():
    tokens = ScanningLexer().tokenize("3.14 5 7.")

    assert [t.value for t in tokens[:-1]] == [3.14, 5.0, 7.0]
    assert all(isinstance(t.value, float) for t in tokens[:-1])


def test_whitespace_is_skipped_and_positions_are_offsets():
    tokens = ScanningLexer().tokenize("  a\t+\n 12 ")

    assert _kinds(tokens) == [
        TokenKind.IDENTIFIER,
        TokenKind.PLUS,
        TokenKind.NUMBER,
        TokenKind.END_OF_INPUT,
    ]
    assert [t.position for t in tokens] == [2, 4, 7, 10]


def test_empty_input_yields_only_end_of_input():
    tokens = ScanningLexer().tokenize("   ")

    assert _kinds(tokens) == [TokenKind.END_OF_INPUT]


def test_number_followed_by_identifier_splits_into_two_tokens():
    tokens = ScanningLexer().tokenize("2x")

    assert _kinds(tokens)[:2] == [TokenKind.NUMBER, TokenKind.IDENTIFIER]


def test_malformed_number_is_rejected():
    with pytest.raises(MalformedNumberError) as exc_info:
        ScanningLexer().tokenize("1.2.3;")

    assert exc_info.value.text == "1.2.3"
    assert exc_info.value.position == 0


def test_unrecognized_character_is_rejected():
    with pytest.raises(UnrecognizedCharacterError) as exc_info:
        ScanningLexer().tokenize("3 $ 4;")

    assert exc_info.value.char == "$"
    assert exc_info.value.position == 2


def test_leading_dot_is_not_a_number():
    with pytest.raises(UnrecognizedCharacterError) as exc_info:
        ScanningLexer().tokenize(".5")

    assert exc_info.value.char == "."


def test_iter_tokens_yields_tokens_before_the_error():
    stream = ScanningLexer().iter_tokens("1 + # 2")

    assert next(stream).kind == TokenKind.NUMBER
    assert next(stream).kind == TokenKind.PLUS
    with pytest.raises(UnrecognizedCharacterError):
        next(stream)
