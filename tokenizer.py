from __future__ import annotations
from dataclasses import dataclass
from collections.abc import Generator
import logging
from errors import (
    TokenizerError, ScanError, UnknownCharacterError,
    UnterminatedStringError, InvalidNumberLiteral
)
from tokens import Token, TokenType
from constants import (
    SINGLE_CHARACTER_TOKENS, ONE_OR_TWO_CHARACTER_TOKENS, KEYWORDS,
    DIGITS, NUMBER_CHARS, IDENTIFIER_START_CHARS,
    IDENTIFIER_CHARS
)

logger = logging.getLogger(__name__)

@dataclass
class _Cursor:
    source: str
    index: int = 0
    line: int = 1

    def at_end(self) -> bool:
        return self.index >= len(self.source)

    def peek(self) -> str:
        if self.at_end():
            return ''
        return self.source[self.index]

    def advance(self) -> str:
        char = self.source[self.index]
        self.index += 1
        if char == '\n':
            self.line += 1
        return char

    def match(self, expected: str) -> bool:
        if self.at_end() or self.source[self.index] != expected:
            return False
        self.advance()
        return True

def _skip_whitespace(cursor: _Cursor) -> None:
    while not cursor.at_end() and cursor.peek().isspace():
        cursor.advance()

def _skip_comment(cursor: _Cursor) -> None:
    # the newline itself is left for _skip_whitespace
    while not cursor.at_end() and cursor.peek() != '\n':
        cursor.advance()

def _tokenize_string_literal(cursor: _Cursor, start_line: int) -> str:
    # text is kept raw, a backslash only stops the next character
    # from closing the string
    escaping = False
    final_string = ""
    while not cursor.at_end():
        char = cursor.advance()
        if escaping:
            escaping = False
        elif char == '\\':
            escaping = True
        elif char == '"':
            return final_string
        final_string += char
    raise UnterminatedStringError(
        f"Unterminated string starting on line {start_line}: "
        "missing closing '\"'"
    )

def _tokenize_number(cursor: _Cursor, first: str) -> str:
    number = first
    while cursor.peek() in NUMBER_CHARS:
        number += cursor.advance()
    return number

def _tokenize_identifier(cursor: _Cursor, first: str) -> str:
    identifier = first
    while cursor.peek() in IDENTIFIER_CHARS:
        identifier += cursor.advance()
    return identifier

def tokenize_source(
    source: str
) -> Generator[Token | TokenizerError, None, None]:
    """Yield tokens and scan errors in source order, ending with EOF.

    Errors are yielded instead of raised so a single pass can report all
    of them; see `scan`.
    """
    cursor = _Cursor(source)
    while True:
        _skip_whitespace(cursor)
        if cursor.at_end():
            break
        line = cursor.line
        char = cursor.advance()
        if char in SINGLE_CHARACTER_TOKENS:
            yield Token(SINGLE_CHARACTER_TOKENS[char], line)
        elif char in ONE_OR_TWO_CHARACTER_TOKENS:
            alone, with_equal = ONE_OR_TWO_CHARACTER_TOKENS[char]
            yield Token(with_equal if cursor.match('=') else alone, line)
        elif char == '/':
            if cursor.match('/'):
                _skip_comment(cursor)
            else:
                yield Token(TokenType.SLASH, line)
        elif char == '"':
            try:
                string = _tokenize_string_literal(cursor, line)
            except UnterminatedStringError as e:
                yield e
                continue
            yield Token(TokenType.STRING, line, string)
        elif char in DIGITS:
            number = _tokenize_number(cursor, char)
            if number.count('.') > 1:
                yield InvalidNumberLiteral(
                    f"Invalid number literal '{number}' on line {line}"
                )
            else:
                yield Token(TokenType.NUMBER, line, float(number))
        elif char in IDENTIFIER_START_CHARS:
            identifier = _tokenize_identifier(cursor, char)
            if identifier in KEYWORDS:
                yield Token(KEYWORDS[identifier], line)
            else:
                yield Token(TokenType.IDENTIFIER, line, identifier)
        else:
            yield UnknownCharacterError(
                f"Unknown character '{char}' on line {line}"
            )
    yield Token(TokenType.EOF, cursor.line)

def scan(source: str) -> list[Token]:
    """Scan `source` into tokens terminated by a single EOF token.

    Scanning never stops early: every problem in the source is collected
    and reported together as one `ScanError` once the end is reached.
    """
    tokens: list[Token] = []
    errors: list[TokenizerError] = []
    for item in tokenize_source(source):
        if isinstance(item, TokenizerError):
            logger.debug("scan error: %s", item.message)
            errors.append(item)
            continue
        logger.debug("token %s (%s) on line %d", item, item.type.name, item.line)
        tokens.append(item)
    if errors:
        raise ScanError(errors, tokens)
    return tokens
