"""
Lox Lexer Package

Implements the lexical analyzer (tokenizer) for the Lox scripting language.

Key Features:
- Single pass, one character of lookahead
- Line comments kept as tokens
- Source location tracking on every token
- Diagnostics with error codes and help text
"""

from .tokens import Token, TokenType, SourceLocation, KEYWORDS
from .lexer import Lexer, tokenize, tokenize_string
from .errors import LexerError, Diagnostic

__all__ = [
    "Lexer",
    "tokenize",
    "tokenize_string",
    "Token",
    "TokenType",
    "SourceLocation",
    "KEYWORDS",
    "LexerError",
    "Diagnostic",
]
