class Cursor:
    """Single-character lookahead over `text` that can step back.

    `current` is `None` once the end of the text has been reached; advancing
    any further stays on that end-of-input sentinel.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._position = -1

    @property
    def position(self) -> int:
        return self._position

    @property
    def current(self) -> str | None:
        return self._char_at(self._position)

    @property
    def peek(self) -> str | None:
        return self._char_at(self._position + 1)

    @property
    def at_end(self) -> bool:
        return self._position >= len(self._text)

    def advance(self) -> str | None:
        if self._position < len(self._text):
            self._position += 1

        return self.current

    def retreat(self) -> None:
        if self._position > -1:
            self._position -= 1

    def _char_at(self, index: int) -> str | None:
        if 0 <= index < len(self._text):
            return self._text[index]

        return None
