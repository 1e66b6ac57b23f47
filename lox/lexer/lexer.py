"""
Lox Lexer - turns source text into a flat list of tokens

Single pass over the text, one character of lookahead, no backtracking.
Whitespace is dropped; comments are kept as tokens so tools can show them.
"""

import logging
from typing import Iterator, List

from .tokens import (
    Token, TokenType, SourceLocation, KEYWORDS, SYMBOLS, TWO_CHAR_OPERATORS
)
from .errors import (
    LexerError, Diagnostic, create_unexpected_character_error,
    create_unterminated_string_error, create_invalid_number_error
)

logger = logging.getLogger(__name__)


class Lexer:
    """
    Lox lexical analyzer.

    Owns a cursor over the source text and produces tokens from it, either
    one at a time through ``iter_tokens`` or all at once with ``tokenize``.
    A scan error stops the scan: it is recorded in ``errors``, logged, and
    no EOF token follows it.
    """

    def __init__(self, source: str, filename: str = "<string>"):
        """
        Initialize the lexer with source text.

        Args:
            source: Complete source text
            filename: Name of the source used in diagnostics
        """
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.column = 1
        self.errors: List[LexerError] = []

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source text.

        Returns:
            List of tokens, ending with EOF unless a scan error stopped it early
        """
        self.pos = 0
        self.line = 1
        self.column = 1
        self.errors.clear()

        tokens = list(self.iter_tokens())

        logger.debug(
            "Tokenized %s: %d tokens, %d errors",
            self.filename, len(tokens), len(self.errors)
        )
        return tokens

    def iter_tokens(self) -> Iterator[Token]:
        """Yield tokens from the current cursor position until EOF or an error."""
        while True:
            try:
                token = self.next_token()
            except LexerError as e:
                self.errors.append(e)
                logger.error("%s", e.diagnostic)
                return

            yield token
            if token.type == TokenType.EOF:
                return

    def next_token(self) -> Token:
        """
        Scan a single token starting at the cursor.

        Raises:
            LexerError: If the text at the cursor is not a valid token
        """
        self._skip_whitespace()

        start_pos = self.pos
        location = SourceLocation(self.filename, self.line, self.column, self.pos)

        if self._at_end():
            return Token(TokenType.EOF, "", None, location)

        char = self._advance()

        if char in SYMBOLS:
            return Token(SYMBOLS[char], char, None, location)

        if char == '/':
            if self._match('/'):
                return self._tokenize_comment(start_pos, location)
            return Token(TokenType.SLASH, char, None, location)

        if char in TWO_CHAR_OPERATORS:
            single, combined = TWO_CHAR_OPERATORS[char]
            token_type = combined if self._match('=') else single
            return Token(token_type, self.source[start_pos:self.pos], None, location)

        if char == '"':
            return self._tokenize_string(start_pos, location)

        if char.isdigit():
            return self._tokenize_number(start_pos, location)

        if char.isalpha() or char == '_':
            return self._tokenize_identifier_or_keyword(start_pos, location)

        raise create_unexpected_character_error(char, location)

    def _tokenize_comment(self, start_pos: int, location: SourceLocation) -> Token:
        """Tokenize a line comment; the leading // has been consumed."""
        text_start = self.pos

        while not self._at_end() and self._peek() != '\n':
            self._advance()

        lexeme = self.source[start_pos:self.pos]
        text = self.source[text_start:self.pos]

        # The terminator belongs to no token
        self._match('\n')

        return Token(TokenType.COMMENT, lexeme, text, location)

    def _tokenize_string(self, start_pos: int, location: SourceLocation) -> Token:
        """Tokenize a string literal; the opening quote has been consumed."""
        while not self._at_end() and self._peek() != '"':
            self._advance()

        if self._at_end():
            raise create_unterminated_string_error(location)

        self._advance()  # Skip closing quote

        lexeme = self.source[start_pos:self.pos]
        return Token(TokenType.STRING, lexeme, lexeme[1:-1], location)

    def _tokenize_number(self, start_pos: int, location: SourceLocation) -> Token:
        """Tokenize a number literal: a run of digits and dots."""
        while self._peek().isdigit() or self._peek() == '.':
            self._advance()

        lexeme = self.source[start_pos:self.pos]

        try:
            value = float(lexeme)
        except ValueError as e:
            raise create_invalid_number_error(
                lexeme,
                location,
                "Cannot parse floating-point number"
            ) from e

        return Token(TokenType.NUMBER, lexeme, value, location)

    def _tokenize_identifier_or_keyword(self, start_pos: int, location: SourceLocation) -> Token:
        """Tokenize an identifier, or a keyword if the whole word is reserved."""
        while self._peek().isalnum() or self._peek() == '_':
            self._advance()

        lexeme = self.source[start_pos:self.pos]

        token_type = KEYWORDS.get(lexeme, TokenType.IDENTIFIER)
        value = lexeme if token_type == TokenType.IDENTIFIER else None

        return Token(token_type, lexeme, value, location)

    def _skip_whitespace(self):
        while self._peek().isspace():
            self._advance()

    def _at_end(self) -> bool:
        return self.pos >= len(self.source)

    def _advance(self) -> str:
        """Consume one character, updating line/column, and return it."""
        char = self.source[self.pos]
        if char == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        self.pos += 1
        return char

    def _peek(self) -> str:
        """Look at the next unconsumed character; empty string at end of input."""
        if self._at_end():
            return ''
        return self.source[self.pos]

    def _match(self, expected: str) -> bool:
        """Consume the next character only if it is ``expected``."""
        if self._peek() != expected:
            return False
        self._advance()
        return True

    def has_errors(self) -> bool:
        """Check if the last scan stopped on an error."""
        return len(self.errors) > 0

    def get_diagnostics(self) -> List[Diagnostic]:
        return [e.diagnostic for e in self.errors]


def tokenize(source: str, filename: str = "<string>") -> List[Token]:
    """
    Tokenize a source string, stopping at the first error.

    Errors are logged rather than raised. A result without a trailing EOF
    token means the scan stopped early.
    """
    return Lexer(source, filename).tokenize()


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Tokenize a source string, raising on the first error.

    Args:
        source: Source text
        filename: Filename for error reporting

    Returns:
        List of tokens ending with EOF

    Raises:
        LexerError: If lexing fails
    """
    lexer = Lexer(source, filename)
    tokens = lexer.tokenize()

    if lexer.has_errors():
        raise lexer.errors[0]

    return tokens
