from __future__ import annotations
from dataclasses import dataclass
from collections.abc import Collection, Sequence
import logging
from tokens import Token, TokenType
from errors import ParserError
from constants import (
    EQUALITY_OPERATORS, COMPARISON_OPERATORS, TERM_OPERATORS,
    FACTOR_OPERATORS, PREFIX_UNARY_OPERATORS
)

logger = logging.getLogger(__name__)

@dataclass
class Node: pass
@dataclass
class ExpressionNode(Node): pass
@dataclass
class BinaryOperationNode(ExpressionNode):
    left: ExpressionNode
    operator: Token
    right: ExpressionNode
@dataclass
class UnaryOperationNode(ExpressionNode):
    operator: Token
    operand: ExpressionNode
@dataclass
class LiteralNode(ExpressionNode):
    token: Token
@dataclass
class IdentifierNode(ExpressionNode):
    token: Token
@dataclass
class GroupNode(ExpressionNode):
    expr: ExpressionNode
@dataclass
class TrueNode(ExpressionNode): pass
@dataclass
class FalseNode(ExpressionNode): pass
@dataclass
class NilNode(ExpressionNode): pass


class Parser:
    """Recursive-descent parser for a single expression.

    Each binary precedence tier is its own method and calls the next
    tighter tier for its operands, so precedence falls out of the call
    structure and each tier loops to stay left associative.
    """

    tokens: Sequence[Token]
    current: int

    def __init__(self, tokens: Sequence[Token]):
        if not tokens or tokens[-1].type is not TokenType.EOF:
            raise ParserError("Token stream must end with EOF")
        self.tokens = tokens
        self.current = 0

    def parse(self) -> ExpressionNode:
        expr = self.expression()
        # a single trailing semicolon is tolerated
        self.match_token(frozenset({TokenType.SEMICOLON}))
        if not self.is_at_end():
            tok = self.peek()
            raise ParserError(
                f"Unexpected token '{tok}' on line {tok.line} "
                "after expression"
            )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("parsed %s", format_tree(expr))
        return expr

    ### grammar ###
    def expression(self) -> ExpressionNode:
        return self.equality()

    def equality(self) -> ExpressionNode:
        return self._binary(self.comparison, EQUALITY_OPERATORS)

    def comparison(self) -> ExpressionNode:
        return self._binary(self.term, COMPARISON_OPERATORS)

    def term(self) -> ExpressionNode:
        return self._binary(self.factor, TERM_OPERATORS)

    def factor(self) -> ExpressionNode:
        return self._binary(self.unary, FACTOR_OPERATORS)

    def unary(self) -> ExpressionNode:
        if self.match_token(PREFIX_UNARY_OPERATORS):
            operator = self.previous()
            return UnaryOperationNode(operator, self.unary())
        return self.primary()

    def primary(self) -> ExpressionNode:
        tok = self.peek()
        match tok.type:
            case TokenType.EOF:
                raise ParserError(
                    f"Expected expression on line {tok.line}, "
                    "found end of input"
                )
            case TokenType.FALSE:
                self.advance()
                return FalseNode()
            case TokenType.TRUE:
                self.advance()
                return TrueNode()
            case TokenType.NIL:
                self.advance()
                return NilNode()
            case TokenType.NUMBER | TokenType.STRING:
                return LiteralNode(self.advance())
            case TokenType.IDENTIFIER:
                return IdentifierNode(self.advance())
            case TokenType.LEFT_PAREN:
                self.advance()
                expr = self.expression()
                self.consume(TokenType.RIGHT_PAREN, "Expected ')' after expression")
                return GroupNode(expr)
        raise ParserError(f"Invalid token '{tok}' on line {tok.line}")

    def _binary(self, operand, operators: Collection[TokenType]) -> ExpressionNode:
        left = operand()
        while self.match_token(operators):
            operator = self.previous()
            right = operand()
            left = BinaryOperationNode(left, operator, right)
        return left

    ### cursor ###
    def match_token(self, expected: Collection[TokenType]) -> bool:
        if self.check(expected):
            self.advance()
            return True
        return False

    def check(self, expected: Collection[TokenType]) -> bool:
        if self.is_at_end():
            return False
        return self.peek().type in expected

    def consume(self, expected: TokenType, message: str) -> Token:
        if self.check((expected,)):
            return self.advance()
        tok = self.peek()
        found = 'end of input' if tok.type is TokenType.EOF else f"'{tok}'"
        raise ParserError(f"{message} on line {tok.line}, found {found}")

    def advance(self) -> Token:
        if not self.is_at_end():
            self.current += 1
        return self.previous()

    def is_at_end(self) -> bool:
        return self.peek().type is TokenType.EOF

    def peek(self) -> Token:
        return self.tokens[self.current]

    def previous(self) -> Token:
        return self.tokens[self.current-1]


def parse(tokens: Sequence[Token]) -> ExpressionNode:
    return Parser(tokens).parse()

def format_tree(node: ExpressionNode) -> str:
    match node:
        case BinaryOperationNode(left, operator, right):
            return f"({operator} {format_tree(left)} {format_tree(right)})"
        case UnaryOperationNode(operator, operand):
            return f"({operator} {format_tree(operand)})"
        case GroupNode(expr):
            return f"(group {format_tree(expr)})"
        case LiteralNode(token) | IdentifierNode(token):
            return str(token)
        case TrueNode():
            return 'true'
        case FalseNode():
            return 'false'
        case NilNode():
            return 'nil'
    raise TypeError(f"Not an expression node: {node!r}")
