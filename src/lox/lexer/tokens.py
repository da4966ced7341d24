"""Token types and Token dataclass for the Lox scanner."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Every distinct token the Lox scanner can produce."""

    # Single-character punctuation
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    LEFT_BRACE = auto()
    RIGHT_BRACE = auto()
    COMMA = auto()
    DOT = auto()
    MINUS = auto()
    PLUS = auto()
    SEMICOLON = auto()
    STAR = auto()
    SLASH = auto()

    # One or two character operators
    BANG = auto()
    BANG_EQUAL = auto()         # !=
    EQUAL = auto()
    EQUAL_EQUAL = auto()        # ==
    LESS = auto()
    LESS_EQUAL = auto()         # <=
    GREATER = auto()
    GREATER_EQUAL = auto()      # >=

    # Literals
    STRING = auto()
    NUMBER = auto()

    # Structure
    EOF = auto()


# Characters that always form a token on their own
SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
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
}

# Operators that become a compound token when followed by "="
EQUAL_SUFFIX_TOKENS: dict[str, tuple[TokenType, TokenType]] = {
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
}


LiteralValue = float | str | None


@dataclass(frozen=True, slots=True)
class Token:
    """A single token produced by the scanner.

    ``lexeme`` is the exact slice of source text that was matched and
    ``literal`` the decoded value for NUMBER and STRING tokens.
    """

    type: TokenType
    lexeme: str
    literal: LiteralValue
    line: int

    def __repr__(self) -> str:
        if self.literal is None:
            return f"Token({self.type.name}, {self.lexeme!r}, {self.line})"
        return f"Token({self.type.name}, {self.lexeme!r}, {self.literal!r}, {self.line})"

    def __str__(self) -> str:
        literal = "null" if self.literal is None else self.literal
        return f"{self.type.name} {self.lexeme} {literal}"
