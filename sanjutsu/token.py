import re
from dataclasses import dataclass
from enum import IntEnum

from sanjutsu.errors import InvalidNumberLiteral

# ASCII digits only, with at most one decimal point
NUMBER_PATTERN = re.compile(r"[0-9]+\.?[0-9]*|\.[0-9]+")


class TokenKind(IntEnum):
    END = 0
    PLUS = 1
    MINUS = 2
    MODULO = 3
    DIVIDE = 4
    MULTIPLY = 5
    LPAREN = 6
    RPAREN = 7
    NUMBER = 8


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    literal: str = ""

    def __post_init__(self) -> None:
        if self.kind != TokenKind.NUMBER:
            return
        if NUMBER_PATTERN.fullmatch(self.literal) is None:
            raise InvalidNumberLiteral(self.literal, self.kind)


OPERATORS = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "%": TokenKind.MODULO,
    "/": TokenKind.DIVIDE,
    "*": TokenKind.MULTIPLY,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}

BINARY_OPERATORS = frozenset(
    {
        TokenKind.PLUS,
        TokenKind.MINUS,
        TokenKind.MODULO,
        TokenKind.DIVIDE,
        TokenKind.MULTIPLY,
    }
)

PREFIX_OPERATORS = frozenset({TokenKind.PLUS, TokenKind.MINUS})

# prefix operands bind tighter than any binary operator
UNARY_PRECEDENCE = 10


def new_token(kind: TokenKind, literal: str = "") -> Token:
    return Token(kind, literal)


def precedence_of(kind: TokenKind) -> int:
    match kind:
        case TokenKind.MODULO:
            return 9
        case TokenKind.DIVIDE:
            return 8
        case TokenKind.MULTIPLY:
            return 7
        case TokenKind.END | TokenKind.LPAREN | TokenKind.RPAREN:
            # always stops a climbing loop
            return -1
        case _:
            return 1


def equal(token: Token, kind: TokenKind) -> bool:
    return token.kind == kind
