from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Union

# Token variants: Number, BinaryOperator, UnaryOperator, Paren.
# All are frozen so a token can be moved between containers by reference.

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


class Operator(Enum):
    ADD = 0
    SUB = 1
    MUL = 2
    DIV = 3
    POW = 4


class Unary(Enum):
    NEGATE = 0


class Parenthesis(Enum):
    OPEN = 0
    CLOSE = 1


# Operators sharing a precedence must share an associativity.
OPCHARS: dict[Operator, str] = {
    Operator.ADD: "+",
    Operator.SUB: "-",
    Operator.MUL: "*",
    Operator.DIV: "/",
    Operator.POW: "^",
}
PRECEDENCE: dict[Operator, int] = {
    Operator.ADD: 0,
    Operator.SUB: 0,
    Operator.MUL: 1,
    Operator.DIV: 1,
    Operator.POW: 2,
}
RIGHT_ASSOC: dict[Operator, bool] = {
    Operator.ADD: False,
    Operator.SUB: False,
    Operator.MUL: False,
    Operator.DIV: False,
    Operator.POW: True,
}
UNCHARS: dict[Unary, str] = {
    Unary.NEGATE: "(-)",
}
PARENCHARS: dict[Parenthesis, str] = {
    Parenthesis.OPEN: "(",
    Parenthesis.CLOSE: ")",
}


@dataclass(frozen=True)
class Number:
    value: int


@dataclass(frozen=True)
class BinaryOperator:
    op: Operator


@dataclass(frozen=True)
class UnaryOperator:
    op: Unary


@dataclass(frozen=True)
class Paren:
    kind: Parenthesis

    @property
    def is_open(self) -> bool:
        return self.kind is Parenthesis.OPEN


Token = Union[Number, BinaryOperator, UnaryOperator, Paren]


def precedence(op: Operator) -> int:
    return PRECEDENCE[op]


def is_right_assoc(op: Operator) -> bool:
    return RIGHT_ASSOC[op]


def wrap_int64(value: int) -> int:
    """Reduce a Python int to signed 64-bit two's complement."""
    return ((value - INT64_MIN) & 0xFFFF_FFFF_FFFF_FFFF) + INT64_MIN


def render(token: Token) -> str:
    if isinstance(token, Number):
        return str(token.value)
    if isinstance(token, BinaryOperator):
        return OPCHARS[token.op]
    if isinstance(token, UnaryOperator):
        return UNCHARS[token.op]
    if isinstance(token, Paren):
        return PARENCHARS[token.kind]
    raise TypeError(f"not a token: {token!r}")


def render_sequence(tokens: Iterable[Token]) -> str:
    """Render tokens the way the CLI dumps them: each followed by one space."""
    return "".join(render(t) + " " for t in tokens)
