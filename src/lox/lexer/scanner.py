"""Lox scanner — single-pass, hand-written tokenizer.

Design decisions:
- One character of lookahead, plus a second one for fractional numbers.
- Whitespace and ``//`` comments are discarded, not tokenized.
- Lexical errors never raise: they go to an injected reporter and scanning
  continues with the next character.
- Produces a flat token stream, always terminated by an EOF token.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from lox.lexer.tokens import EQUAL_SUFFIX_TOKENS, SINGLE_CHAR_TOKENS, LiteralValue, Token, TokenType

logger = logging.getLogger(__name__)

Reporter = Callable[[int, str], object]

UNEXPECTED_CHARACTER = "Unexpected character."
UNTERMINATED_STRING = "Unterminated string."


@dataclass(frozen=True)
class LexError:
    """A lexical error reported at a source line."""

    line: int
    message: str

    def __str__(self) -> str:
        return f"[line {self.line}] Error: {self.message}"


@dataclass
class ErrorReporter:
    """Default error sink: records every reported error and logs it."""

    errors: list[LexError] = field(default_factory=list)

    @property
    def had_error(self) -> bool:
        return bool(self.errors)

    def __call__(self, line: int, message: str) -> None:
        error = LexError(line, message)
        logger.debug("Reported %s", error)
        self.errors.append(error)

    def reset(self) -> None:
        self.errors.clear()


class Scanner:
    """Scans Lox source code into a list of `Token` objects.

    Usage::

        scanner = Scanner(source_text)
        tokens = scanner.scan_tokens()
        if scanner.reporter.had_error:
            ...

    Any ``(line, message)`` callable can be passed as ``reporter`` to
    collect errors elsewhere.
    """

    def __init__(self, source: str, reporter: Reporter | None = None) -> None:
        self.source = source
        self.reporter: Reporter = reporter if reporter is not None else ErrorReporter()
        self.start = 0
        self.current = 0
        self.line = 1
        self.tokens: list[Token] = []

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def scan_tokens(self) -> list[Token]:
        """Scan the entire source and return the token list."""
        self.tokens = []
        self.start = 0
        self.current = 0
        self.line = 1

        while not self._is_at_end():
            # Beginning of the next lexeme
            self.start = self.current
            self._scan_token()

        self.tokens.append(Token(TokenType.EOF, "", None, self.line))
        logger.debug("Scanned %d token(s) over %d line(s)", len(self.tokens), self.line)
        return self.tokens

    # ------------------------------------------------------------------
    # Token scanning
    # ------------------------------------------------------------------

    def _scan_token(self) -> None:
        """Scan a single lexeme starting at ``self.start``."""
        ch = self._advance()

        if ch in SINGLE_CHAR_TOKENS:
            self._add_token(SINGLE_CHAR_TOKENS[ch])
            return

        if ch in EQUAL_SUFFIX_TOKENS:
            single, compound = EQUAL_SUFFIX_TOKENS[ch]
            self._add_token(compound if self._match("=") else single)
            return

        if ch == "/":
            if self._match("/"):
                # A comment runs until the end of the line
                while self._peek() not in ("\n", None):
                    self._advance()
            else:
                self._add_token(TokenType.SLASH)
            return

        if ch in (" ", "\r", "\t"):
            return

        if ch == "\n":
            self.line += 1
            return

        if ch == '"':
            self._scan_string()
            return

        if _is_digit(ch):
            self._scan_number()
            return

        self._error(UNEXPECTED_CHARACTER)

    def _scan_string(self) -> None:
        """Scan a double-quoted string literal; may span several lines."""
        while self._peek() not in ('"', None):
            if self._peek() == "\n":
                self.line += 1
            self._advance()

        if self._is_at_end():
            self._error(UNTERMINATED_STRING)
            return

        self._advance()  # closing quote

        # Trim the surrounding quotes
        value = self.source[self.start + 1:self.current - 1]
        self._add_token(TokenType.STRING, value)

    def _scan_number(self) -> None:
        """Scan an integer or decimal literal; both decode to float."""
        while _is_digit(self._peek()):
            self._advance()

        # A fractional part needs at least one digit after the point
        if self._peek() == "." and _is_digit(self._peek_next()):
            self._advance()
            while _is_digit(self._peek()):
                self._advance()

        self._add_token(TokenType.NUMBER, float(self.source[self.start:self.current]))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _advance(self) -> str:
        """Consume and return the current character."""
        ch = self.source[self.current]
        self.current += 1
        return ch

    def _match(self, expected: str) -> bool:
        """Consume the current character only if it is ``expected``."""
        if self._is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def _peek(self) -> str | None:
        """Return the current character without consuming it, or None at the end."""
        if self._is_at_end():
            return None
        return self.source[self.current]

    def _peek_next(self) -> str | None:
        """Return the character after the current one, or None past the end."""
        if self.current + 1 >= len(self.source):
            return None
        return self.source[self.current + 1]

    def _is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def _add_token(self, token_type: TokenType, literal: LiteralValue = None) -> None:
        text = self.source[self.start:self.current]
        self.tokens.append(Token(token_type, text, literal, self.line))

    def _error(self, message: str) -> None:
        self.reporter(self.line, message)


def _is_digit(ch: str | None) -> bool:
    # ASCII digits only
    return ch is not None and "0" <= ch <= "9"


def scan_tokens(source: str, reporter: Reporter | None = None) -> list[Token]:
    """Scan ``source`` with a fresh `Scanner` and return its tokens."""
    return Scanner(source, reporter).scan_tokens()
