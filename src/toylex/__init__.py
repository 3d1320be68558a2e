from typing import Iterable

from .scanner import InvalidTextHandler, Scanner
from .token import Token, TokenKind

__all__ = ("scan", "format_tokens", "Token", "TokenKind")


def scan(
    source: str,
    on_invalid: InvalidTextHandler | None = None,
) -> list[Token]:
    """Tokenize `source` in a single pass.

    Parameters
    ----------
    source
        Text to tokenize.
    on_invalid
        Called with each piece of text that does not form a known token,
        at the moment it is classified. The text still shows up in the
        result as an `INVTOK` token.

    Returns
    -------
    list
        Every token in input order. The list always ends with a `WS` token
        followed by the `EOF` token.
    """
    scanner = Scanner(input=source, on_invalid=on_invalid)
    return scanner.scan()


def format_tokens(tokens: Iterable[Token]) -> str:
    """Render tokens as a comma separated list, e.g. ``INT:1, WS, EOF``."""
    return ", ".join(str(token) for token in tokens)


del Iterable
