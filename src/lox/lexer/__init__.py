"""Lox lexer — single-pass scanner with line tracking."""

from lox.lexer.tokens import Token, TokenType
from lox.lexer.scanner import ErrorReporter, LexError, Scanner, scan_tokens

__all__ = ["Token", "TokenType", "Scanner", "scan_tokens", "ErrorReporter", "LexError"]
