import logging

from sanjutsu.errors import ExpressionTooDeep, UnexpectedToken, UnmatchedParenthesis
from sanjutsu.node import Node, new_infix, new_number, new_prefix
from sanjutsu.token import (
    BINARY_OPERATORS,
    PREFIX_OPERATORS,
    UNARY_PRECEDENCE,
    Token,
    TokenKind,
    equal,
    precedence_of,
)
from sanjutsu.tokenize import Lexer

logger = logging.getLogger(__name__)


class Parse:
    lexer: Lexer
    token: Token
    next_token: Token
    depth: int

    def __init__(self, lexer: Lexer) -> None:
        self.lexer = lexer
        self.token = Token(TokenKind.END)
        self.next_token = Token(TokenKind.END)
        self.depth = 0
        # load current and lookahead
        self.advance()
        self.advance()

    def advance(self) -> None:
        self.token = self.next_token
        self.next_token = self.lexer.next_token()

    def expect(self, kind: TokenKind) -> None:
        if equal(self.next_token, kind):
            self.advance()
            return
        if kind == TokenKind.RPAREN and equal(self.next_token, TokenKind.END):
            raise UnmatchedParenthesis(self.next_token)
        raise UnexpectedToken(kind.name, self.next_token)

    def parse_all(self) -> Node:
        node = self.parse()
        self.expect(TokenKind.END)
        return node

    def parse(self, min_precedence: int = 0) -> Node:
        node = self.primary()
        while min_precedence < precedence_of(self.next_token.kind):
            self.advance()
            operator = self.token
            if operator.kind not in BINARY_OPERATORS:
                raise UnexpectedToken("operator", operator)
            self.advance()
            right = self.parse(precedence_of(operator.kind))
            node = new_infix(operator, node, right)
            logger.debug("infix %s", operator.literal)
        return node

    def primary(self) -> Node:
        token = self.token
        if equal(token, TokenKind.LPAREN):
            return self.group()
        if token.kind in PREFIX_OPERATORS:
            self.advance()
            operand = self.parse(UNARY_PRECEDENCE)
            logger.debug("prefix %s", token.literal)
            return new_prefix(token, operand)
        if equal(token, TokenKind.NUMBER):
            return new_number(token)
        if equal(token, TokenKind.END) and self.depth:
            raise UnmatchedParenthesis(token)
        raise UnexpectedToken("an expression", token)

    def group(self) -> Node:
        self.depth += 1
        self.advance()
        node = self.parse()
        self.expect(TokenKind.RPAREN)
        self.depth -= 1
        return node


def parse(expression: str) -> Node:
    try:
        return Parse(Lexer(expression)).parse_all()
    except RecursionError as e:
        raise ExpressionTooDeep() from e
