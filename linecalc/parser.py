import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Optional

import numpy as np

from linecalc.tokenizer import Number, Operator, Token, Tokenizer
from linecalc.utils import CalculatorError

logger = logging.getLogger(__name__)


class ParserError(CalculatorError):
    label = "Parser error"


@dataclass
class UnexpectedToken(ParserError):
    token: Token


class UnexpectedEndOfInput(ParserError):
    pass


TokenPredicate = Callable[[Token], bool]


def is_number(token: Token) -> bool:
    return isinstance(token.kind, Number)


def is_operator(*operators: Operator) -> TokenPredicate:
    def predicate(token: Token) -> bool:
        return token.kind in operators

    return predicate


BINARY_OPERATIONS: dict[Operator, Callable[..., np.float32]] = {
    Operator.ADD: np.add,
    Operator.SUBTRACT: np.subtract,
    Operator.MULTIPLY: np.multiply,
    Operator.DIVIDE: np.divide,
    Operator.POWER: np.power,
}


class Parser:
    """Recursive descent parser computing the value of a single line as it goes.

    Grammar, loosest to tightest binding:

        expression := term (("+" | "-") term)*
        term       := exponent (("*" | "/") exponent)*
        exponent   := factor ("**" factor)*
        factor     := NUMBER

    Every tier folds from the left, so ``2 ** 3 ** 2`` is ``(2 ** 3) ** 2``.
    Arithmetic is done in float32 with IEEE semantics: division by zero and
    overflow give inf or nan instead of errors.
    """

    def __init__(self, tokens: Iterable[Token], code: str = "") -> None:
        self.tokens: Iterator[Token] = iter(tokens)
        self.code = code
        self._lookahead: Optional[Token] = None

    def _peek(self) -> Optional[Token]:
        if self._lookahead is None:
            self._lookahead = next(self.tokens, None)
        return self._lookahead

    def _advance(self) -> Token:
        token = self._peek()
        assert token is not None
        self._lookahead = None
        return token

    def _accept(self, predicate: TokenPredicate) -> Optional[Token]:
        token = self._peek()
        if token is not None and predicate(token):
            return self._advance()
        return None

    def _require(self, predicate: TokenPredicate, expected: str) -> Token:
        token = self._peek()
        if token is None:
            raise UnexpectedEndOfInput(
                "unexpected end of input", code=self.code, error_char_idx=len(self.code.rstrip())
            )
        if not predicate(token):
            raise UnexpectedToken(
                f"expected {expected}, got {token.kind.describe()}",
                code=self.code,
                error_char_idx=token.start,
                token=token,
            )
        return self._advance()

    def _fold(self, operand: Callable[[], np.float32], predicate: TokenPredicate) -> np.float32:
        value = operand()
        while True:
            operator_token = self._accept(predicate)
            if operator_token is None:
                return value
            operator = operator_token.kind
            assert isinstance(operator, Operator)
            value = BINARY_OPERATIONS[operator](value, operand(), dtype=np.float32)

    def factor(self) -> np.float32:
        token = self._require(is_number, expected="number")
        assert isinstance(token.kind, Number)
        return token.kind.value

    def exponent(self) -> np.float32:
        return self._fold(self.factor, is_operator(Operator.POWER))

    def term(self) -> np.float32:
        return self._fold(self.exponent, is_operator(Operator.MULTIPLY, Operator.DIVIDE))

    def expression(self) -> np.float32:
        return self._fold(self.term, is_operator(Operator.ADD, Operator.SUBTRACT))

    def parse(self) -> np.float32:
        """Evaluate the whole line; anything left after the expression is an error"""
        with np.errstate(all="ignore"):
            result = self.expression()
        leftover = self._peek()
        if leftover is not None:
            raise UnexpectedToken(
                f"expected operator or end of input, got {leftover.kind.describe()}",
                code=self.code,
                error_char_idx=leftover.start,
                token=leftover,
            )
        return result


def evaluate(code: str) -> np.float32:
    result = Parser(Tokenizer(code), code=code).parse()
    logger.debug("%r evaluated to %s", code, result)
    return result
