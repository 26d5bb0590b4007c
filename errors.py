from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tokens import Token

class LoxError(Exception):
    message: str

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

## tokenizer ##
class TokenizerError(LoxError): pass
class UnknownCharacterError(TokenizerError): pass
class UnterminatedStringError(TokenizerError): pass
class InvalidNumberLiteral(TokenizerError): pass

class ScanError(TokenizerError):
    errors: list[TokenizerError]
    # everything scanned before giving up, not safe to parse
    tokens: list[Token]

    def __init__(self, errors: list[TokenizerError], tokens: list[Token]):
        super().__init__('; '.join(error.message for error in errors))
        self.errors = errors
        self.tokens = tokens

## parser ##
class ParserError(LoxError): pass

## executor ##
class EvaluationError(LoxError): pass
class UnimplementedError(EvaluationError): pass
class OperandTypeError(EvaluationError): pass
