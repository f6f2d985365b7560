"""
Surface grammar shared by the parsers.

Infix grammar (``expr`` is folded by precedence climbing)::

    expr     := term (binop term)*
    term     := literal | NOT term | NEC term | POS term | "(" expr ")"
    binop    := AND | OR | COND | BICOND

Reverse-Polish grammar (operator first, no grouping)::

    rp_expr  := literal | NOT rp_expr | binop rp_expr rp_expr

Sequent grammar (modal dialect)::

    theorem  := [expr ("," expr)*] judgment expr
    judgment := PROVES | NOT_PROVES

Literals are single lowercase letters other than ``v``, which is the
disjunction token. Whitespace between tokens is ignored.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import FrozenSet, List, Mapping, Tuple

from ..exceptions import ParseError


class TokenKind(str, Enum):
    """Kinds of lexical token."""

    LITERAL = "literal"
    NOT = "not"
    AND = "and"
    OR = "or"
    COND = "conditional"
    BICOND = "biconditional"
    NEC = "necessary"
    POS = "possible"
    LPAREN = "lparen"
    RPAREN = "rparen"
    COMMA = "comma"
    PROVES = "proves"
    NOT_PROVES = "does_not_prove"


class Assoc(str, Enum):
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    position: int


# Longest spellings first so "<->" wins over "<>" and "|/-" over "|-".
SYMBOLS: Tuple[Tuple[str, TokenKind], ...] = (
    ("<->", TokenKind.BICOND),
    ("|/-", TokenKind.NOT_PROVES),
    ("->", TokenKind.COND),
    ("<>", TokenKind.POS),
    ("[]", TokenKind.NEC),
    ("|-", TokenKind.PROVES),
    ("~", TokenKind.NOT),
    ("¬", TokenKind.NOT),
    ("^", TokenKind.AND),
    ("∧", TokenKind.AND),
    ("v", TokenKind.OR),
    ("∨", TokenKind.OR),
    ("→", TokenKind.COND),
    ("↔", TokenKind.BICOND),
    ("◻", TokenKind.NEC),
    ("□", TokenKind.NEC),
    ("◇", TokenKind.POS),
    ("(", TokenKind.LPAREN),
    (")", TokenKind.RPAREN),
    (",", TokenKind.COMMA),
    ("⊢", TokenKind.PROVES),
    ("⊬", TokenKind.NOT_PROVES),
)

RESERVED_LETTERS = frozenset(text for text, _ in SYMBOLS if text.isalpha())

BINARY_OPERATORS = frozenset(
    [TokenKind.AND, TokenKind.OR, TokenKind.COND, TokenKind.BICOND]
)

JUDGMENTS = frozenset([TokenKind.PROVES, TokenKind.NOT_PROVES])

# Binary operator precedence, loosest to tightest. Unary operators bind
# tighter than any of these.
PRECEDENCE: Mapping[TokenKind, Tuple[int, Assoc]] = MappingProxyType(
    {
        TokenKind.BICOND: (1, Assoc.LEFT),
        TokenKind.COND: (2, Assoc.RIGHT),
        TokenKind.OR: (3, Assoc.LEFT),
        TokenKind.AND: (4, Assoc.LEFT),
    }
)


@dataclass(frozen=True)
class Dialect:
    """The token kinds a logic accepts."""

    name: str
    tokens: FrozenSet[TokenKind]


_CORE_TOKENS = frozenset(
    [
        TokenKind.LITERAL,
        TokenKind.NOT,
        TokenKind.AND,
        TokenKind.OR,
        TokenKind.COND,
        TokenKind.BICOND,
        TokenKind.LPAREN,
        TokenKind.RPAREN,
    ]
)

CLASSICAL = Dialect("classical", _CORE_TOKENS)

CLASSICAL_REVERSE_POLISH = Dialect(
    "classical-reverse-polish",
    _CORE_TOKENS - {TokenKind.LPAREN, TokenKind.RPAREN},
)

MODAL = Dialect(
    "modal",
    _CORE_TOKENS
    | {
        TokenKind.NEC,
        TokenKind.POS,
        TokenKind.COMMA,
        TokenKind.PROVES,
        TokenKind.NOT_PROVES,
    },
)


def tokenize(text: str, dialect: Dialect) -> List[Token]:
    """
    Split text into tokens of the given dialect.

    Raises:
        ParseError: On an unrecognized character or a token the dialect
            does not allow.
    """
    tokens: List[Token] = []
    i = 0
    while i < len(text):
        char = text[i]

        if char.isspace():
            i += 1
            continue

        for spelling, kind in SYMBOLS:
            if text.startswith(spelling, i):
                token = Token(kind, spelling, i)
                break
        else:
            if "a" <= char <= "z" and char not in RESERVED_LETTERS:
                token = Token(TokenKind.LITERAL, char, i)
            else:
                raise ParseError(f"unrecognized character {char!r}", i, text)

        if token.kind not in dialect.tokens:
            raise ParseError(
                f"{token.text!r} is not allowed in {dialect.name} formulas", i, text
            )

        tokens.append(token)
        i += len(token.text)

    return tokens
