"""Lox scanner CLI entry point.

Usage:
    lox                          Start an interactive prompt
    lox <file.lox>               Display the token stream of a file
    lox tokenize <file.lox>      Same as above
    lox -v ...                   Enable debug logging
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from lox.lexer.scanner import ErrorReporter, Scanner

logger = logging.getLogger(__name__)

# sysexits.h codes used by the classic Lox driver
EX_USAGE = 64
EX_DATAERR = 65
EX_NOINPUT = 66


def main(argv: list[str] | None = None) -> int:
    args = list(argv if argv is not None else sys.argv[1:])

    verbose = False
    while args and args[0] in ("-v", "--verbose"):
        verbose = True
        args.pop(0)
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

    if not args:
        return _cmd_prompt()

    command = args[0]

    if command in ("--help", "-h"):
        print(__doc__.strip())
        return 0

    if command == "--version":
        from lox import __version__
        print(f"lox {__version__}")
        return 0

    if command == "tokenize":
        args = args[1:]
        if not args:
            print(f"Error: command '{command}' requires a file argument")
            return EX_USAGE

    if len(args) > 1:
        print(f"Error: unexpected arguments: {' '.join(args[1:])}")
        print(__doc__.strip())
        return EX_USAGE

    filepath = Path(args[0])
    if not filepath.is_file():
        print(f"Error: file not found: {filepath}")
        return EX_NOINPUT

    logger.debug("Scanning %s", filepath)
    return _cmd_tokenize(filepath.read_text(encoding="utf-8"))


def _cmd_tokenize(source: str) -> int:
    """Display the token stream and any lexical errors."""
    reporter = ErrorReporter()
    if not _run(source, reporter):
        return EX_DATAERR
    return 0


def _cmd_prompt() -> int:
    """Scan one line at a time until end of input."""
    reporter = ErrorReporter()
    while True:
        try:
            line = input("> ")
        except EOFError:
            print()
            return 0
        _run(line, reporter)
        reporter.reset()


def _run(source: str, reporter: ErrorReporter) -> bool:
    """Scan ``source``, print its tokens and errors; return True if clean."""
    tokens = Scanner(source, reporter).scan_tokens()

    for tok in tokens:
        print(tok)
    for error in reporter.errors:
        print(error, file=sys.stderr)
    return not reporter.had_error


if __name__ == "__main__":
    sys.exit(main())
