import pytest

from sanjutsu.errors import InvalidNumberLiteral
from sanjutsu.token import Token, TokenKind, new_token, precedence_of
from sanjutsu.tokenize import Lexer, new_number_token, tokenize


def kinds(expression: str) -> list[TokenKind]:
    return [token.kind for token in tokenize(expression)]


def test_tokenize_operators_and_parens():
    assert tokenize("+-%/*()") == [
        Token(TokenKind.PLUS, "+"),
        Token(TokenKind.MINUS, "-"),
        Token(TokenKind.MODULO, "%"),
        Token(TokenKind.DIVIDE, "/"),
        Token(TokenKind.MULTIPLY, "*"),
        Token(TokenKind.LPAREN, "("),
        Token(TokenKind.RPAREN, ")"),
        Token(TokenKind.END, ""),
    ]


def test_tokenize_numbers_and_whitespace():
    assert tokenize(" 12\t+ 4.5\n* .5 ") == [
        Token(TokenKind.NUMBER, "12"),
        Token(TokenKind.PLUS, "+"),
        Token(TokenKind.NUMBER, "4.5"),
        Token(TokenKind.MULTIPLY, "*"),
        Token(TokenKind.NUMBER, ".5"),
        Token(TokenKind.END, ""),
    ]


def test_number_run_stops_at_operator():
    assert kinds("1-2") == [
        TokenKind.NUMBER,
        TokenKind.MINUS,
        TokenKind.NUMBER,
        TokenKind.END,
    ]


def test_empty_input_is_end():
    assert tokenize("") == [Token(TokenKind.END, "")]
    assert tokenize("   \n\t") == [Token(TokenKind.END, "")]


def test_end_is_repeated_after_exhaustion():
    lexer = Lexer("7")
    assert lexer.next_token() == Token(TokenKind.NUMBER, "7")
    for _ in range(5):
        assert lexer.next_token() == Token(TokenKind.END, "")


def test_lexer_is_an_iterator():
    lexer = Lexer("1 + 2")
    assert next(lexer).literal == "1"
    assert next(lexer).kind == TokenKind.PLUS
    assert next(iter(lexer)).literal == "2"
    assert next(lexer).kind == TokenKind.END


@pytest.mark.parametrize(
    "literal", ["1.2.3", ".", "..", "a", "$", "1..", "\u0663", "\u0663.5", "\uff11"]
)
def test_invalid_number_literal(literal):
    with pytest.raises(InvalidNumberLiteral) as excinfo:
        tokenize(literal)
    assert excinfo.value.literal == literal
    assert excinfo.value.kind == TokenKind.NUMBER


def test_invalid_character_takes_trailing_digits():
    with pytest.raises(InvalidNumberLiteral) as excinfo:
        tokenize("2 + x12")
    assert excinfo.value.literal == "x12"


@pytest.mark.parametrize("literal", ["0", "42", "3.14", ".5", "7."])
def test_new_number_token_accepts(literal):
    assert new_number_token(literal) == Token(TokenKind.NUMBER, literal)


@pytest.mark.parametrize(
    "kind,precedence",
    [
        (TokenKind.MODULO, 9),
        (TokenKind.DIVIDE, 8),
        (TokenKind.MULTIPLY, 7),
        (TokenKind.PLUS, 1),
        (TokenKind.MINUS, 1),
        (TokenKind.END, -1),
        (TokenKind.LPAREN, -1),
        (TokenKind.RPAREN, -1),
    ],
)
def test_precedence_of(kind, precedence):
    assert precedence_of(kind) == precedence


@pytest.mark.parametrize("literal", ["1.2.3", "", "x", "\u0663", "1 "])
def test_token_rejects_invalid_number_literal(literal):
    with pytest.raises(InvalidNumberLiteral) as excinfo:
        Token(TokenKind.NUMBER, literal)
    assert excinfo.value.literal == literal
    assert excinfo.value.kind == TokenKind.NUMBER


def test_new_token_validates_numbers():
    with pytest.raises(InvalidNumberLiteral):
        new_token(TokenKind.NUMBER, "1.2.3")
    assert new_token(TokenKind.PLUS, "+") == Token(TokenKind.PLUS, "+")
