"""
Scan errors for the Lox lexer.

Every error the lexer can raise has a code in ERROR_CODES; the factory
helpers below build a LexerError for each one.
"""

from typing import Optional, List
from dataclasses import dataclass
from .tokens import SourceLocation


ERROR_CODES = {
    "L001": "Unexpected character",
    "L002": "Unterminated string literal",
    "L003": "Invalid numeric literal",
}


@dataclass
class Diagnostic:
    """What went wrong, where, and how to fix it."""
    message: str
    location: SourceLocation
    severity: str  # "error" or "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        header = self.severity.upper()
        if self.code:
            header += f"[{self.code}]"
        lines = [f"{header}: {self.message}", f"  --> {self.location}"]

        if self.help_text:
            lines.append(f"  help: {self.help_text}")

        if self.suggestions:
            lines.append("  suggestions:")
            lines.extend(f"    - {suggestion}" for suggestion in self.suggestions)

        return "\n".join(lines) + "\n"


class LexerError(Exception):
    """
    Raised by the scan step when the text at the cursor is not a token.

    The first line of the message is the ERROR_CODES title for ``code``.
    """

    def __init__(
        self,
        code: str,
        location: SourceLocation,
        detail: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        message = ERROR_CODES[code]
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    def __str__(self) -> str:
        return str(self.diagnostic)


def create_unexpected_character_error(char: str, location: SourceLocation) -> LexerError:
    """Create an error for a character that can't start any token."""
    if char.isprintable():
        help_text = f"The character '{char}' is not valid in Lox source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return LexerError("L001", location, detail=repr(char), help_text=help_text)


def create_unterminated_string_error(location: SourceLocation) -> LexerError:
    """Create an error for a string literal that reaches end of input."""
    return LexerError(
        "L002",
        location,
        help_text='String literals must be closed with a matching " quote.',
        suggestions=['Add a closing " quote']
    )


def create_invalid_number_error(lexeme: str, location: SourceLocation, reason: str) -> LexerError:
    """Create an error for digits and dots that don't form a number."""
    return LexerError(
        "L003",
        location,
        detail=f"'{lexeme}'",
        help_text=reason,
        suggestions=["Use at most one decimal point, e.g. 3.14"]
    )
