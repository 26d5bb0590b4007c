from __future__ import annotations
from collections.abc import Callable
from typing import TypeAlias
import logging
import math
import operator
from tokens import Token, TokenType
from parser import (
    ExpressionNode, BinaryOperationNode, UnaryOperationNode, LiteralNode,
    IdentifierNode, GroupNode, TrueNode, FalseNode, NilNode, format_tree
)
from errors import EvaluationError, UnimplementedError, OperandTypeError
from utils import format_number

logger = logging.getLogger(__name__)

# number, text, bool, nil
Value: TypeAlias = float | str | bool | None

def _divide(a: float, b: float) -> float:
    # IEEE-754: x/0 is +-inf, 0/0 is nan
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b

ARITHMETIC_OPERATOR_FUNCTIONS: dict[TokenType, Callable[[float, float], float]] = {
    TokenType.MINUS: operator.sub,
    TokenType.STAR: operator.mul,
    TokenType.SLASH: _divide,
}
COMPARISON_OPERATOR_FUNCTIONS: dict[TokenType, Callable[[float, float], bool]] = {
    TokenType.GREATER: operator.gt,
    TokenType.GREATER_EQUAL: operator.ge,
    TokenType.LESS: operator.lt,
    TokenType.LESS_EQUAL: operator.le,
    TokenType.EQUAL_EQUAL: operator.eq,
    TokenType.BANG_EQUAL: operator.ne,
}


def is_number(value: Value) -> bool:
    # bool is an int subclass, never a float, so True is not a number here
    return isinstance(value, float)

def is_truthy(value: Value) -> bool:
    return value is not None and value is not False

def stringify(value: Value) -> str:
    match value:
        case None:
            return 'nil'
        case bool():
            return 'true' if value else 'false'
        case float():
            return format_number(value)
    return value

def value_to_node(value: Value) -> ExpressionNode:
    match value:
        case None:
            return NilNode()
        case True:
            return TrueNode()
        case False:
            return FalseNode()
        case float():
            return LiteralNode(Token(TokenType.NUMBER, 0, value))
        case str():
            return LiteralNode(Token(TokenType.STRING, 0, value))
    raise TypeError(f"Not a value: {value!r}")


def evaluate(node: ExpressionNode) -> Value:
    match node:
        case TrueNode():
            return True
        case FalseNode():
            return False
        case NilNode():
            return None
        case LiteralNode(Token(TokenType.NUMBER | TokenType.STRING, literal=value)):
            return value
        case LiteralNode(token):
            raise EvaluationError(f"Unrecognized literal: {token}")
        case GroupNode(expr):
            return evaluate(expr)
        case IdentifierNode(token):
            raise UnimplementedError(
                f"Identifier not implemented: '{token}' on line {token.line}"
            )
        case UnaryOperationNode(oper, operand):
            result = evaluate_unary(oper, operand)
        case BinaryOperationNode(left, oper, right):
            result = evaluate_binary(left, oper, right)
        case _:
            raise EvaluationError(f"Unrecognized expression: {node!r}")
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("%s => %s", format_tree(node), stringify(result))
    return result

def evaluate_binary(
    left_expr: ExpressionNode, oper: Token, right_expr: ExpressionNode
) -> Value:
    left = evaluate(left_expr)
    right = evaluate(right_expr)
    if oper.type is TokenType.PLUS:
        if is_number(left) and is_number(right):
            return left + right
        if isinstance(left, str) and isinstance(right, str):
            return left + right
        raise OperandTypeError(
            f"Invalid arguments to '+' on line {oper.line}: "
            f"{stringify(left)} and {stringify(right)}"
        )
    if oper.type in ARITHMETIC_OPERATOR_FUNCTIONS:
        if not (is_number(left) and is_number(right)):
            raise OperandTypeError(
                f"Operands of '{oper}' on line {oper.line} must be numbers"
            )
        return ARITHMETIC_OPERATOR_FUNCTIONS[oper.type](left, right)
    if oper.type in COMPARISON_OPERATOR_FUNCTIONS:
        if not (is_number(left) and is_number(right)):
            raise OperandTypeError(
                f"Invalid inputs to comparison '{oper}' on line {oper.line}"
            )
        return COMPARISON_OPERATOR_FUNCTIONS[oper.type](left, right)
    raise EvaluationError(f"Token not recognized: '{oper}'")

def evaluate_unary(oper: Token, operand: ExpressionNode) -> Value:
    match oper.type:
        case TokenType.MINUS:
            value = evaluate(operand)
            if not is_number(value):
                raise OperandTypeError(
                    "Unsupported target of unary minus on line "
                    f"{oper.line}: {format_tree(operand)}"
                )
            return -value
        case TokenType.BANG:
            return not is_truthy(evaluate(operand))
    raise EvaluationError(f"Invalid unary operator: '{oper}'")
