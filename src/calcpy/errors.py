from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias, assert_never

from .spans import Loc
from .tokens import Token


@dataclass(frozen=True, slots=True)
class UnexpectedEndOfInput:
    """Input ended where more was required. Shared by the lexer and parser."""


# Lexer


@dataclass(frozen=True, slots=True)
class InvalidChar:
    char: str


LexErrorKind: TypeAlias = InvalidChar | UnexpectedEndOfInput


@dataclass(slots=True)
class LexError(Exception):
    value: LexErrorKind
    loc: Loc

    def __str__(self) -> str:
        match self.value:
            case InvalidChar(char):
                return f"{self.loc}: invalid char '{char}'"
            case UnexpectedEndOfInput():
                return "End of file"
            case _:
                assert_never(self.value)

    def source(self) -> BaseException | None:
        return None


# Parser


@dataclass(frozen=True, slots=True)
class UnexpectedToken:
    token: Token


@dataclass(frozen=True, slots=True)
class NotExpression:
    token: Token


@dataclass(frozen=True, slots=True)
class NotOperator:
    token: Token


@dataclass(frozen=True, slots=True)
class UnclosedOpenParen:
    token: Token  # the "(" that was never closed


@dataclass(frozen=True, slots=True)
class RedundantExpression:
    token: Token  # first token after a complete expression


ParseErrorKind: TypeAlias = (
    UnexpectedToken
    | NotExpression
    | NotOperator
    | UnclosedOpenParen
    | RedundantExpression
    | UnexpectedEndOfInput
)


@dataclass(slots=True)
class ParseError(Exception):
    value: ParseErrorKind

    def __str__(self) -> str:
        match self.value:
            case UnexpectedToken(tok):
                return f"{tok.loc}: {tok.value} is not expected"
            case NotExpression(tok):
                return f"{tok.loc}: '{tok.value}' is not a start of expression"
            case NotOperator(tok):
                return f"{tok.loc}: '{tok.value}' is not an operator"
            case UnclosedOpenParen(tok):
                return f"{tok.loc}: '{tok.value}' is not closed"
            case RedundantExpression(tok):
                return f"{tok.loc}: expression after '{tok.value}' is redundant"
            case UnexpectedEndOfInput():
                return "End of file"
            case _:
                assert_never(self.value)

    def loc_in(self, input: str) -> Loc:
        """Location to underline in ``input``.

        Redundant input is underlined through the end of the line, and a
        premature end of input is reported one past the last character.
        """
        match self.value:
            case UnexpectedToken(tok) | NotExpression(tok) | NotOperator(tok) | UnclosedOpenParen(tok):
                return tok.loc
            case RedundantExpression(tok):
                return Loc(tok.loc.start, max(tok.loc.end, len(input)))
            case UnexpectedEndOfInput():
                return Loc(len(input), len(input) + 1)
            case _:
                assert_never(self.value)

    def source(self) -> BaseException | None:
        return None


# Interpreter


class InterpreterErrorKind(str, Enum):
    DIVISION_BY_ZERO = "division by zero"


_DESCRIPTIONS = {
    InterpreterErrorKind.DIVISION_BY_ZERO: "the right hand expression of the division evaluates to zero",
}


@dataclass(slots=True)
class InterpreterError(Exception):
    value: InterpreterErrorKind
    loc: Loc

    def __str__(self) -> str:
        return self.value.value

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self.value]

    def source(self) -> BaseException | None:
        return None


# Composite


@dataclass(slots=True)
class Error(Exception):
    """A lexer or parser failure for one line of input.

    Interpreter failures are not wrapped; they are reported on their own.
    """

    error: LexError | ParseError

    def __post_init__(self) -> None:
        self.__cause__ = self.error

    @classmethod
    def from_error(cls, error: LexError | ParseError) -> Error:
        if not isinstance(error, (LexError, ParseError)):
            raise TypeError(f"cannot wrap {type(error).__name__} in Error")
        return cls(error)

    def __str__(self) -> str:
        return "parser error"

    @property
    def is_lexer(self) -> bool:
        return isinstance(self.error, LexError)

    @property
    def is_parser(self) -> bool:
        return isinstance(self.error, ParseError)

    def loc(self, input: str) -> Loc:
        match self.error:
            case LexError(loc=loc):
                return loc
            case ParseError() as e:
                return e.loc_in(input)
            case _:
                assert_never(self.error)

    def source(self) -> BaseException | None:
        return self.error
