from tokens import TokenType

# 1 MiB
DEFAULT_MAX_SOURCE_SIZE = 1 << 20
DEFAULT_RECURSION_LIMIT = 10000

SINGLE_CHARACTER_TOKENS: dict[str, TokenType] = {
    tt.value: tt for tt in (
        TokenType.LEFT_PAREN, TokenType.RIGHT_PAREN,
        TokenType.LEFT_BRACE, TokenType.RIGHT_BRACE,
        TokenType.COMMA, TokenType.DOT, TokenType.MINUS, TokenType.PLUS,
        TokenType.SEMICOLON, TokenType.STAR,
    )
}

# first character -> (token alone, token when followed by '=')
ONE_OR_TWO_CHARACTER_TOKENS: dict[str, tuple[TokenType, TokenType]] = {
    '!': (TokenType.BANG, TokenType.BANG_EQUAL),
    '=': (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    '<': (TokenType.LESS, TokenType.LESS_EQUAL),
    '>': (TokenType.GREATER, TokenType.GREATER_EQUAL),
}

KEYWORDS: dict[str, TokenType] = {
    tt.value: tt for tt in (
        TokenType.AND, TokenType.CLASS, TokenType.ELSE, TokenType.FALSE,
        TokenType.FUN, TokenType.FOR, TokenType.IF, TokenType.NIL,
        TokenType.OR, TokenType.PRINT, TokenType.RETURN, TokenType.SUPER,
        TokenType.THIS, TokenType.TRUE, TokenType.VAR, TokenType.WHILE,
    )
}

DIGITS = frozenset('0123456789')
NUMBER_CHARS = DIGITS | {'.'}
IDENTIFIER_START_CHARS = frozenset(
    'abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_'
)
IDENTIFIER_CHARS = IDENTIFIER_START_CHARS | DIGITS

## operator tiers, loosest binding first, all left associative ##
EQUALITY_OPERATORS = frozenset({TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL})
COMPARISON_OPERATORS = frozenset({
    TokenType.GREATER, TokenType.GREATER_EQUAL,
    TokenType.LESS, TokenType.LESS_EQUAL,
})
TERM_OPERATORS = frozenset({TokenType.MINUS, TokenType.PLUS})
FACTOR_OPERATORS = frozenset({TokenType.SLASH, TokenType.STAR})
PREFIX_UNARY_OPERATORS = frozenset({TokenType.BANG, TokenType.MINUS})
