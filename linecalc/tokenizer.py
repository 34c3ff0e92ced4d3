import logging
import string
from dataclasses import dataclass
from typing import Optional

import numpy as np

from linecalc.utils import CalculatorError, PrintableEnum

logger = logging.getLogger(__name__)


class TokenizerError(CalculatorError):
    label = "Tokenizer error"


class Operator(PrintableEnum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    POWER = "**"

    @property
    def symbol(self) -> str:
        return self.value

    def describe(self) -> str:
        return f"Operator({self.symbol})"


@dataclass(frozen=True)
class Number:
    value: np.float32

    def __str__(self) -> str:
        return self.describe()

    def describe(self) -> str:
        return f"Number({self.value})"


TokenKind = Number | Operator


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    start: int
    end: int
    literal: str

    def __str__(self) -> str:
        return f"<{self.kind}>{self.literal}"


def _is_valid_in_number(s: str) -> bool:
    return s in string.digits or s == "."


SINGLE_CHAR_OPERATORS = {
    "+": Operator.ADD,
    "-": Operator.SUBTRACT,
    "*": Operator.MULTIPLY,
    "/": Operator.DIVIDE,
}


class Tokenizer:
    """Lazy, forward-only stream of tokens over a single line of code.

    The stream ends when the line is exhausted. It cannot be rewound: to go over
    the same line again, make a new Tokenizer.
    """

    def __init__(self, code: str) -> None:
        self.code = code
        self.pos = 0

    def __iter__(self) -> "Tokenizer":
        return self

    def __next__(self) -> Token:
        token = self._next_token()
        if token is None:
            raise StopIteration
        logger.debug("Token %s at [%d, %d)", token, token.start, token.end)
        return token

    def _next_token(self) -> Optional[Token]:
        code = self.code
        while self.pos < len(code) and code[self.pos].isspace():
            self.pos += 1
        if self.pos >= len(code):
            return None

        start = self.pos
        kind: TokenKind
        if _is_valid_in_number(code[start]):
            end = start + 1
            while end < len(code) and _is_valid_in_number(code[end]):
                end += 1
            literal = code[start:end]
            try:
                with np.errstate(all="ignore"):
                    kind = Number(np.float32(literal))
            except ValueError:
                raise TokenizerError(f"Malformed number: {literal!r}", code=code, error_char_idx=start) from None
        elif code.startswith("**", start):
            kind = Operator.POWER
            end = start + 2
        elif code[start] in SINGLE_CHAR_OPERATORS:
            kind = SINGLE_CHAR_OPERATORS[code[start]]
            end = start + 1
        else:
            raise TokenizerError(f"Unexpected character: {code[start]!r}", code=code, error_char_idx=start)

        self.pos = end
        return Token(kind=kind, start=start, end=end, literal=code[start:end])


def tokenize(code: str) -> list[Token]:
    return list(Tokenizer(code))
