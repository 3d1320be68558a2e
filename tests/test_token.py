import dataclasses
import unittest

import toylex
from toylex.token import KEYWORDS, Token, TokenKind


class TestToken(unittest.TestCase):
    def test_str_without_literal(self) -> None:
        self.assertEqual(str(Token(kind=TokenKind.ADD)), "ADD")
        self.assertEqual(str(Token(kind=TokenKind.EOF)), "EOF")

    def test_str_with_literal(self) -> None:
        self.assertEqual(str(Token(kind=TokenKind.INT, literal="42")), "INT:42")
        self.assertEqual(
            str(Token(kind=TokenKind.REFERENCE, literal="x")),
            "REFERENCE:x",
        )
        self.assertEqual(
            str(Token(kind=TokenKind.DECLARE, literal="")),
            "DECLARE:",
        )

    def test_frozen(self) -> None:
        token = Token(kind=TokenKind.INT, literal="1")

        with self.assertRaises(dataclasses.FrozenInstanceError):
            token.literal = "2"  # type: ignore[misc]

    def test_format_tokens(self) -> None:
        self.assertEqual(
            toylex.format_tokens(
                [
                    Token(kind=TokenKind.INT, literal="42"),
                    Token(kind=TokenKind.WS),
                    Token(kind=TokenKind.EOF),
                ]
            ),
            "INT:42, WS, EOF",
        )


class TestKeywords(unittest.TestCase):
    def test_read_only(self) -> None:
        with self.assertRaises(TypeError):
            KEYWORDS["/"] = TokenKind.DIV  # type: ignore[index]

    def test_no_route_to_division(self) -> None:
        self.assertNotIn("/", KEYWORDS)
        self.assertEqual(KEYWORDS["DIV"], TokenKind.DIV)

    def test_kind_names(self) -> None:
        for kind in TokenKind:
            with self.subTest(kind=kind):
                if kind is TokenKind.IDENT:
                    self.assertNotIn(kind.name, KEYWORDS)
                else:
                    self.assertIs(KEYWORDS[kind.name], kind)
