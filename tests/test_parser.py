import pytest

from errors import ParserError
from parser import (
    Parser, parse, format_tree, BinaryOperationNode, UnaryOperationNode,
    LiteralNode, IdentifierNode, GroupNode, TrueNode, FalseNode, NilNode
)
from tokenizer import scan
from tokens import Token, TokenType


def number(value: float, line: int = 1) -> LiteralNode:
    return LiteralNode(Token(TokenType.NUMBER, line, value))


def tree(source: str) -> str:
    return format_tree(parse(scan(source)))


def test_parse_number() -> None:
    assert parse(scan("12")) == number(12.0)


def test_parse_addition_then_equality() -> None:
    assert parse(scan("1 + 2 == 3;")) == BinaryOperationNode(
        BinaryOperationNode(number(1.0), Token(TokenType.PLUS, 1), number(2.0)),
        Token(TokenType.EQUAL_EQUAL, 1),
        number(3.0),
    )


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ("1 + 2 * 3", "(+ 1 (* 2 3))"),
        ("(1 + 2) * 3", "(* (group (+ 1 2)) 3)"),
        ("8 - 3 - 2", "(- (- 8 3) 2)"),
        ("8 / 4 / 2", "(/ (/ 8 4) 2)"),
        ("1 < 2 == 3 > 4", "(== (< 1 2) (> 3 4))"),
        ("1 != 2 == true", "(== (!= 1 2) true)"),
        ("-1 * 2", "(* (- 1) 2)"),
        ("--5", "(- (- 5))"),
        ("!!true", "(! (! true))"),
        ("!nil == false", "(== (! nil) false)"),
        ('"a" + x', '(+ "a" x)'),
    ],
)
def test_precedence_and_associativity(source: str, expected: str) -> None:
    assert tree(source) == expected


def test_literal_keywords() -> None:
    assert parse(scan("true")) == TrueNode()
    assert parse(scan("false")) == FalseNode()
    assert parse(scan("nil")) == NilNode()


def test_identifier_parses() -> None:
    assert parse(scan("x")) == IdentifierNode(Token(TokenType.IDENTIFIER, 1, "x"))


def test_grouping_node() -> None:
    assert parse(scan("(nil)")) == GroupNode(NilNode())


def test_unary_node_keeps_operator_token() -> None:
    node = parse(scan("\n-2"))
    assert node == UnaryOperationNode(Token(TokenType.MINUS, 2), number(2.0, 2))


def test_missing_closing_paren() -> None:
    with pytest.raises(ParserError) as err:
        parse(scan("(1 + 2"))
    assert "Expected ')'" in err.value.message
    assert "end of input" in err.value.message


def test_wrong_closing_token() -> None:
    with pytest.raises(ParserError) as err:
        parse(scan("(1 + 2;"))
    assert "Expected ')'" in err.value.message


@pytest.mark.parametrize("source", ["", "1 +", "-"])
def test_missing_operand(source: str) -> None:
    with pytest.raises(ParserError) as err:
        parse(scan(source))
    assert "Expected expression" in err.value.message


@pytest.mark.parametrize("source", [")", "* 2", "var", "{"])
def test_invalid_token(source: str) -> None:
    with pytest.raises(ParserError) as err:
        parse(scan(source))
    assert "Invalid token" in err.value.message


def test_trailing_tokens_rejected() -> None:
    with pytest.raises(ParserError) as err:
        parse(scan("1 2"))
    assert "Unexpected token '2'" in err.value.message


def test_single_trailing_semicolon_allowed() -> None:
    assert parse(scan("1;")) == number(1.0)
    with pytest.raises(ParserError):
        parse(scan("1;;"))


def test_token_stream_must_end_with_eof() -> None:
    with pytest.raises(ParserError):
        Parser([Token(TokenType.NUMBER, 1, 1.0)])
    with pytest.raises(ParserError):
        Parser([])


def test_parser_does_not_mutate_tokens() -> None:
    tokens = scan("1 + 2 * (3 - 4)")
    snapshot = list(tokens)
    parse(tokens)
    assert tokens == snapshot


def test_nodes_are_not_shared() -> None:
    node = parse(scan("1 + 1"))
    assert node.left == node.right
    assert node.left is not node.right
