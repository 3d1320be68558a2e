import logging
from typing import Callable

from .cursor import Cursor
from .token import KEYWORDS, Token, TokenKind
from .utils import is_digit, is_whitespace

logger = logging.getLogger(__name__)

InvalidTextHandler = Callable[[str], None]


def classify(text: str) -> Token:
    """Turn the pending text between two delimiters into a single token."""
    assert text, "called classify with empty text"

    match text[0]:
        case "$":
            return Token(kind=TokenKind.REFERENCE, literal=text[1:])
        case "@":
            return Token(kind=TokenKind.DECLARE, literal=text[1:])
        case _:
            return Token(kind=KEYWORDS.get(text, TokenKind.INVTOK))


class Scanner:
    def __init__(
        self,
        input: str,
        on_invalid: InvalidTextHandler | None = None,
    ) -> None:
        self.input = input
        self.on_invalid = on_invalid
        self.invalid: list[str] = []

    def scan(self) -> list[Token]:
        self.invalid = []
        return ScanPass(self.input, self._report_invalid).run()

    def _report_invalid(self, text: str) -> None:
        logger.debug("unrecognized text: %r", text)
        self.invalid.append(text)

        if self.on_invalid is not None:
            self.on_invalid(text)


class ScanPass:
    """State of one pass over the input; not reusable."""

    def __init__(self, input: str, report: InvalidTextHandler) -> None:
        self.cursor = Cursor(input)
        self.buffer = ""
        self.tokens: list[Token] = []
        self.report = report

    def run(self) -> list[Token]:
        while True:
            char = self.cursor.advance()

            # The end of input delimits pending text just like whitespace.
            if char is None or is_whitespace(char):
                self.flush()
                self.handle_whitespace()
            elif is_digit(char):
                self.flush()
                self.cursor.retreat()
                self.handle_number()
            else:
                self.buffer += char

            if self.cursor.at_end:
                return self.tokens

    def flush(self) -> None:
        if not self.buffer:
            return

        text, self.buffer = self.buffer, ""
        token = classify(text)

        if token.kind == TokenKind.INVTOK:
            self.report(text)

        self.tokens.append(token)

    def handle_whitespace(self) -> None:
        # The current character is whitespace (or the end of input) and has
        # already been consumed; swallow the rest of the run.
        while (char := self.cursor.peek) is not None and is_whitespace(char):
            self.cursor.advance()

        self.tokens.append(Token(kind=TokenKind.WS))

        if self.cursor.peek is None:
            self.cursor.advance()
            self.tokens.append(Token(kind=TokenKind.EOF))

    def handle_number(self) -> None:
        literal = ""
        has_point = False

        while True:
            char = self.cursor.advance()

            if char is None or not (is_digit(char) or char == "."):
                # Leave the terminator for whoever handles it next.
                self.cursor.retreat()
                break

            if char == ".":
                # A second point is let through as part of the same FLOAT.
                has_point = True

            literal += char

        kind = TokenKind.FLOAT if has_point else TokenKind.INT
        self.tokens.append(Token(kind=kind, literal=literal))

        if (char := self.cursor.peek) is None or is_whitespace(char):
            self.cursor.advance()
            self.handle_whitespace()
