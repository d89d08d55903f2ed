from dataclasses import dataclass, field
from typing import Union

from sanjutsu.errors import UnexpectedToken
from sanjutsu.token import Token, TokenKind


class Expression:
    def print(self) -> str:
        return print_expression(self)

    def __str__(self) -> str:
        return print_expression(self)


@dataclass(frozen=True)
class NumberExpression(Expression):
    token: Token
    value: float = field(compare=False)


@dataclass(frozen=True)
class PrefixExpression(Expression):
    token: Token
    operator: str
    operand: "Node"


@dataclass(frozen=True)
class InfixExpression(Expression):
    token: Token
    operator: str
    left: "Node"
    right: "Node"


Node = Union[NumberExpression, PrefixExpression, InfixExpression]


def new_number(token: Token) -> NumberExpression:
    if token.kind != TokenKind.NUMBER:
        raise UnexpectedToken("NUMBER", token)
    return NumberExpression(token, float(token.literal))


def new_prefix(token: Token, operand: Node) -> PrefixExpression:
    return PrefixExpression(token, token.literal, operand)


def new_infix(token: Token, left: Node, right: Node) -> InfixExpression:
    return InfixExpression(token, token.literal, left, right)


def print_expression(node: Expression) -> str:
    """Render ``node`` fully parenthesized.

    Infix nodes put spaces around the operator, prefix nodes do not:
    ``-2 * 3`` becomes ``((-2) * 3)``.
    """
    match node:
        case NumberExpression(token=token):
            return token.literal
        case PrefixExpression(operator=operator, operand=operand):
            return f"({operator}{print_expression(operand)})"
        case InfixExpression(operator=operator, left=left, right=right):
            return f"({print_expression(left)} {operator} {print_expression(right)})"
        case _:
            raise TypeError(f"unknown expression node {node!r}")
