"""
Lox Package

Front end for an interpreter of Lox, a small dynamically-typed scripting
language.

Architecture:
    lox/
    └── lexer/           # Tokenization and lexical analysis
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType, LexerError, tokenize

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "LexerError",
    "tokenize",

    "__version__",
    "__license__",
]
