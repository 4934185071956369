"""分词与结构校验"""
import pytest

from core import (
    Token, TokenType, TokenValidator, tokenize,
    LeadingOperatorError, TrailingOperatorError,
    ConsecutiveOperatorError, InvalidSymbolError
)


def lexemes(tokens):
    return [t.lexeme for t in tokens]


def test_tokenize_basic():
    tokens = tokenize("2 + 3 * (4 - 1)")
    assert lexemes(tokens) == ["2", "+", "3", "*", "(", "4", "-", "1", ")"]
    assert [t.position for t in tokens] == list(range(9))


def test_tokenize_merges_numeric_runs():
    assert lexemes(tokenize("42*3.75")) == ["42", "*", "3.75"]


def test_tokenize_legacy_single_characters():
    assert lexemes(tokenize("42*3.5", merge_numeric_runs=False)) == ["4", "2", "*", "3", ".", "5"]


def test_tokenize_drops_unknown_characters():
    assert lexemes(tokenize("1 abc + x2 =")) == ["1", "+", "2"]
    assert tokenize("") == []
    assert tokenize(None) == []


def test_token_types():
    tokens = tokenize("1 + ( 1.2.3 )")
    assert [t.type for t in tokens] == [
        TokenType.NUMBER, TokenType.OPERATOR, TokenType.PAREN, TokenType.UNKNOWN, TokenType.PAREN
    ]
    assert [t.is_numeric for t in tokens] == [True, False, False, False, False]


def test_numeric_flag_matches_float_parse():
    for token in tokenize("1 . 2. .5 3..4"):
        try:
            float(token.lexeme)
            parses = True
        except ValueError:
            parses = False
        assert token.is_numeric == parses


@pytest.mark.parametrize("expr", [
    "2 + 3",
    "2 + 3 * (4 - 1)",
    "(2 + 3) * 4",
    "7",
    "",
])
def test_validate_accepts(expr):
    TokenValidator.validate(tokenize(expr))


@pytest.mark.parametrize("expr", ["+ 2 3", "* 2", ")2", ". + 1"])
def test_validate_leading_operator(expr):
    with pytest.raises(LeadingOperatorError):
        TokenValidator.validate(tokenize(expr))


def test_validate_trailing_operator():
    with pytest.raises(TrailingOperatorError) as excinfo:
        TokenValidator.validate(tokenize("2 /"))
    assert excinfo.value.symbol == "/"


def test_validate_consecutive_operators():
    with pytest.raises(ConsecutiveOperatorError) as excinfo:
        TokenValidator.validate(tokenize("2 + + 3"))
    assert (excinfo.value.prev, excinfo.value.curr) == ("+", "+")


def test_validate_invalid_symbol_reports_position():
    with pytest.raises(InvalidSymbolError) as excinfo:
        TokenValidator.validate(tokenize("1 + 1.2.3"))
    assert excinfo.value.symbol == "1.2.3"
    assert excinfo.value.position == 3
    assert "position 3" in str(excinfo.value)


def test_validate_invalid_symbol_from_constructed_token():
    tokens = [Token("1", 0), Token("+", 1), Token("x", 2)]
    with pytest.raises(InvalidSymbolError):
        TokenValidator.validate(tokens)
