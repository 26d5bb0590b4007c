from dataclasses import dataclass, field
from enum import Enum
from typing import Optional
from utils import format_number

class TokenType(Enum):
    # single character
    LEFT_PAREN = '('
    RIGHT_PAREN = ')'
    LEFT_BRACE = '{'
    RIGHT_BRACE = '}'
    COMMA = ','
    DOT = '.'
    MINUS = '-'
    PLUS = '+'
    SEMICOLON = ';'
    SLASH = '/'
    STAR = '*'
    # one or two characters
    BANG = '!'
    BANG_EQUAL = '!='
    EQUAL = '='
    EQUAL_EQUAL = '=='
    GREATER = '>'
    GREATER_EQUAL = '>='
    LESS = '<'
    LESS_EQUAL = '<='
    # literals, the payload lives on the token
    IDENTIFIER = 'identifier'
    STRING = 'string'
    NUMBER = 'number'
    # keywords
    AND = 'and'
    CLASS = 'class'
    ELSE = 'else'
    FALSE = 'false'
    FUN = 'fun'
    FOR = 'for'
    IF = 'if'
    NIL = 'nil'
    OR = 'or'
    PRINT = 'print'
    RETURN = 'return'
    SUPER = 'super'
    THIS = 'this'
    TRUE = 'true'
    VAR = 'var'
    WHILE = 'while'

    EOF = 'EOF'

@dataclass(frozen=True, eq=True)
class Token:
    type: TokenType
    line: int
    literal: Optional[str | float] = field(default=None)

    def __str__(self) -> str:
        match self.type, self.literal:
            case TokenType.STRING, str(text):
                return f'"{text}"'
            case TokenType.NUMBER, float(number):
                return format_number(number)
            case TokenType.IDENTIFIER, str(name):
                return name
        return self.type.value
