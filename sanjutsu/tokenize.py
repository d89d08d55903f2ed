import logging
from typing import Iterator

from sanjutsu.token import OPERATORS, Token, TokenKind, new_token

logger = logging.getLogger(__name__)

WHITESPACE = " \t\n\r"
NUMBER_COMPONENTS = "0123456789."


def new_number_token(literal: str) -> Token:
    return new_token(TokenKind.NUMBER, literal)


class Lexer(Iterator[Token]):
    """Pull-based tokenizer over a single expression string.

    Once the input is exhausted every call to ``next_token`` returns an
    END token, so callers may look past the end without special-casing it.
    """

    expression: str
    index: int

    def __init__(self, expression: str) -> None:
        self.expression = expression
        self.index = 0

    def __iter__(self) -> "Lexer":
        return self

    def __next__(self) -> Token:
        return self.next_token()

    def peek_char(self) -> str:
        if self.index < len(self.expression):
            return self.expression[self.index]
        return ""

    def skip_whitespace(self) -> None:
        while self.index < len(self.expression) and (
            self.expression[self.index] in WHITESPACE
        ):
            self.index += 1

    def next_token(self) -> Token:
        self.skip_whitespace()
        char = self.peek_char()
        if not char:
            return new_token(TokenKind.END)
        if char in OPERATORS:
            self.index += 1
            token = new_token(OPERATORS[char], char)
        else:
            token = self.read_number()
        logger.debug("token %s %r", token.kind.name, token.literal)
        return token

    def read_number(self) -> Token:
        start = self.index
        self.index += 1
        while self.peek_char() and self.peek_char() in NUMBER_COMPONENTS:
            self.index += 1
        return new_number_token(self.expression[start : self.index])


def tokenize(expression: str) -> list[Token]:
    tokens = []
    for token in Lexer(expression):
        tokens.append(token)
        if token.kind == TokenKind.END:
            break
    return tokens
