import dataclasses
import enum
import types


class TokenKind(enum.IntEnum):
    INVTOK = enum.auto()

    # Binary operators.
    ADD = enum.auto()
    SUB = enum.auto()
    MUL = enum.auto()
    DIV = enum.auto()

    WS = enum.auto()
    LBRACKET = enum.auto()
    RBRACKET = enum.auto()

    # Variables.
    ASSIGN = enum.auto()
    REFERENCE = enum.auto()
    DECLARE = enum.auto()

    # Literals.
    INT = enum.auto()
    FLOAT = enum.auto()

    IDENT = enum.auto()
    PRINT = enum.auto()

    EOF = enum.auto()


@dataclasses.dataclass(frozen=True)
class Token:
    kind: TokenKind
    literal: str | None = None

    def __str__(self) -> str:
        if self.literal is None:
            return self.kind.name

        return f"{self.kind.name}:{self.literal}"


# The kind names themselves are accepted as source text too, so `DIV` is the
# only way to get a DIV token.
KEYWORDS = types.MappingProxyType(
    {
        "+": TokenKind.ADD,
        "-": TokenKind.SUB,
        "*": TokenKind.MUL,
        "=": TokenKind.ASSIGN,
        " ": TokenKind.WS,
        "(": TokenKind.LBRACKET,
        ")": TokenKind.RBRACKET,
        **{
            kind.name: kind
            for kind in TokenKind
            if kind is not TokenKind.IDENT
        },
    }
)
