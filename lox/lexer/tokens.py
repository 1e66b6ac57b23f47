"""
Token definitions for the Lox lexer.

This module defines all token types produced by the lexer:
- Single-character punctuation and operators
- One-or-two character comparison operators
- Literals (identifiers, strings, numbers, comments)
- Reserved keywords
- The end-of-input sentinel
"""

import math
from decimal import Decimal
from enum import Enum, auto
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any


class TokenType(Enum):
    """
    Enumeration of all token types in Lox.

    The set is closed: every token the lexer produces is one of these.
    """

    # ========================================================================
    # Single-character tokens
    # ========================================================================
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }
    COMMA = auto()                  # ,
    DOT = auto()                    # .
    MINUS = auto()                  # -
    PLUS = auto()                   # +
    SEMICOLON = auto()              # ;
    SLASH = auto()                  # /
    STAR = auto()                   # *

    # ========================================================================
    # One or two character tokens
    # ========================================================================
    BANG = auto()                   # !
    BANG_EQUAL = auto()             # !=
    EQUAL = auto()                  # =
    EQUAL_EQUAL = auto()            # ==
    GREATER = auto()                # >
    GREATER_EQUAL = auto()          # >=
    LESS = auto()                   # <
    LESS_EQUAL = auto()             # <=

    # ========================================================================
    # Literals
    # ========================================================================
    IDENTIFIER = auto()             # foo, _bar, baz42
    STRING = auto()                 # "hello"
    NUMBER = auto()                 # 42, 3.14
    COMMENT = auto()                # // text

    # ========================================================================
    # Keywords
    # ========================================================================
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    # ========================================================================
    # Special
    # ========================================================================
    EOF = auto()                    # End of input


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source text.

    Line and column are 1-based; offset is the 0-based character index.
    """
    filename: str
    line: int
    column: int
    offset: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token.

    ``str(token)`` gives a rendering that reads like source text,
    ``repr(token)`` exposes the tag and payload for debugging.
    """
    type: TokenType
    lexeme: str                     # Exact source span
    value: Any                      # Payload (identifier text, float, ...) or None
    location: SourceLocation

    def __str__(self) -> str:
        if self.type == TokenType.NUMBER:
            return format_number(self.value)
        if self.type == TokenType.STRING:
            return f'"{self.value}"'
        if self.type == TokenType.IDENTIFIER:
            return self.value
        if self.type == TokenType.COMMENT:
            return f"// {self.value}"
        return DISPLAY_TEXT[self.type]

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.value!r}, {self.location!r})")

    @property
    def is_literal(self) -> bool:
        """Check if this token is an identifier, string, number or comment."""
        return self.type in LITERAL_TYPES

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a reserved word."""
        return self.type in KEYWORD_TYPES

    @property
    def is_operator(self) -> bool:
        """Check if this token is an operator or punctuation."""
        return self.type in OPERATOR_TYPES

    @property
    def is_identifier(self) -> bool:
        return self.type == TokenType.IDENTIFIER


def format_number(value: float) -> str:
    """Render a number the way it would be written in source: 42.0 -> '42'.

    Lox has no exponent syntax, so 1e-07 is written out as 0.0000001.
    """
    if not math.isfinite(value):
        return repr(value)
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


# Lookup tables used by the lexer. They are read-only views so the
# reserved-word table can't be changed at runtime.

KEYWORDS = MappingProxyType({
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "fun": TokenType.FUN,
    "for": TokenType.FOR,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
})

SYMBOLS = MappingProxyType({
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
})

# First character -> (type without '=', type with '=')
TWO_CHAR_OPERATORS = MappingProxyType({
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
})

LITERAL_TYPES = frozenset({
    TokenType.IDENTIFIER, TokenType.STRING, TokenType.NUMBER, TokenType.COMMENT
})

KEYWORD_TYPES = frozenset(KEYWORDS.values())

OPERATOR_TYPES = frozenset(SYMBOLS.values()) | {TokenType.SLASH} | frozenset(
    t for pair in TWO_CHAR_OPERATORS.values() for t in pair
)

# Fixed display text for every payload-free token
DISPLAY_TEXT = MappingProxyType({
    **{t: s for s, t in SYMBOLS.items()},
    TokenType.SLASH: "/",
    **{one: first for first, (one, _) in TWO_CHAR_OPERATORS.items()},
    **{two: first + "=" for first, (_, two) in TWO_CHAR_OPERATORS.items()},
    **{t: word for word, t in KEYWORDS.items()},
    TokenType.EOF: "EOF",
})
