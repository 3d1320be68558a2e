import string

_WHITESPACE = " \t\n"


def is_whitespace(char: str, /) -> bool:
    return len(char) == 1 and char in _WHITESPACE


def is_letter(char: str, /) -> bool:
    return len(char) == 1 and char in string.ascii_letters


def is_digit(char: str, /) -> bool:
    return len(char) == 1 and char in string.digits
