from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from sanjutsu.token import Token, TokenKind


class ParseError(Exception):
    """Base class for every failure raised while lexing or parsing."""

    kind: Optional["TokenKind"] = None
    literal: str = ""


class InvalidNumberLiteral(ParseError):
    def __init__(self, literal: str, kind: "TokenKind") -> None:
        super().__init__(f'invalid number literal "{literal}"')
        self.kind = kind
        self.literal = literal


class UnexpectedToken(ParseError):
    def __init__(self, expected: str, token: "Token") -> None:
        super().__init__(
            f'expected {expected} but got {token.kind.name} "{token.literal}"'
        )
        self.expected = expected
        self.kind = token.kind
        self.literal = token.literal


class UnmatchedParenthesis(ParseError):
    def __init__(self, token: "Token") -> None:
        super().__init__(
            f'expected RPAREN to close "(" but got {token.kind.name} "{token.literal}"'
        )
        self.kind = token.kind
        self.literal = token.literal


class ExpressionTooDeep(ParseError):
    def __init__(self) -> None:
        super().__init__("expression is nested too deeply")
