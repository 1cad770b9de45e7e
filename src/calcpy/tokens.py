from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from .digits import int_to_str
from .spans import Annot


@dataclass(frozen=True, slots=True)
class Number:
    value: int

    def __str__(self) -> str:
        return int_to_str(self.value)


@dataclass(frozen=True, slots=True)
class Plus:
    def __str__(self) -> str:
        return "+"


@dataclass(frozen=True, slots=True)
class Minus:
    def __str__(self) -> str:
        return "-"


@dataclass(frozen=True, slots=True)
class Asterisk:
    def __str__(self) -> str:
        return "*"


@dataclass(frozen=True, slots=True)
class Slash:
    def __str__(self) -> str:
        return "/"


@dataclass(frozen=True, slots=True)
class LParen:
    def __str__(self) -> str:
        return "("


@dataclass(frozen=True, slots=True)
class RParen:
    def __str__(self) -> str:
        return ")"


TokenKind: TypeAlias = Number | Plus | Minus | Asterisk | Slash | LParen | RParen
Token: TypeAlias = Annot[TokenKind]

# Single-character lexemes.
PUNCTUATION: dict[str, TokenKind] = {
    "+": Plus(),
    "-": Minus(),
    "*": Asterisk(),
    "/": Slash(),
    "(": LParen(),
    ")": RParen(),
}
