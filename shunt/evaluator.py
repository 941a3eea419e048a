"""Stack evaluator for postfix token sequences. 64-bit integer semantics."""

import logging
import math

from .containers import TokenQueue, TokenStack
from .errors import (
    DivisionByZero, RemainingOperands, ResultOutOfRange, ShuntError,
    StackEmpty, UnknownOperator, UnsupportedToken,
)
from .types import (
    BinaryOperator, Number, Operator, Unary, UnaryOperator, wrap_int64,
)

logger = logging.getLogger(__name__)

_POW_LIMIT = 2.0 ** 63


def _add(a: int, b: int) -> int:
    return wrap_int64(a + b)


def _sub(a: int, b: int) -> int:
    return wrap_int64(a - b)


def _mul(a: int, b: int) -> int:
    return wrap_int64(a * b)


def _div(a: int, b: int) -> int:
    if b == 0:
        raise DivisionByZero()
    # truncate toward zero, not floor
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return wrap_int64(q)


def _pow(a: int, b: int) -> int:
    """Floating-point power truncated to an integer.

    Goes through a double, so results above 2**53 may lose precision.
    """
    if a == 0 and b < 0:
        raise DivisionByZero("Zero raised to a negative power.")
    try:
        f = math.pow(a, b)
    except OverflowError:
        raise ResultOutOfRange() from None
    if not -_POW_LIMIT <= f < _POW_LIMIT:
        raise ResultOutOfRange()
    return int(f)


BINARY_OPS = {
    Operator.ADD: _add,
    Operator.SUB: _sub,
    Operator.MUL: _mul,
    Operator.DIV: _div,
    Operator.POW: _pow,
}

UNARY_OPS = {
    Unary.NEGATE: lambda a: wrap_int64(-a),
}


def _pop_operand(stack: TokenStack) -> int:
    t = stack.pop()
    if t is None:
        raise StackEmpty()
    return t.value


def evaluate(postfix: TokenQueue) -> int:
    """Reduce a postfix token queue to a single integer.

    ``postfix`` is drained. Raises StackEmpty, RemainingOperands,
    DivisionByZero, ResultOutOfRange, UnknownOperator or UnsupportedToken.
    """
    stack = TokenStack()
    try:
        result = _evaluate(postfix, stack)
    except ShuntError as e:
        logger.debug("evaluation failed: %s", e)
        postfix.clear()
        stack.clear()
        raise
    logger.debug("evaluated to %d", result)
    return result


def _evaluate(postfix: TokenQueue, stack: TokenStack) -> int:
    t = postfix.remove()
    while t is not None:
        if isinstance(t, Number):
            stack.push(t)

        elif isinstance(t, BinaryOperator):
            fn = BINARY_OPS.get(t.op)
            if fn is None:
                raise UnknownOperator(t.op)
            # b is on top, a below it
            b = _pop_operand(stack)
            a = _pop_operand(stack)
            stack.push(Number(fn(a, b)))

        elif isinstance(t, UnaryOperator):
            fn = UNARY_OPS.get(t.op)
            if fn is None:
                raise UnknownOperator(t.op)
            stack.push(Number(fn(_pop_operand(stack))))

        else:
            raise UnsupportedToken(t)

        t = postfix.remove()

    result = stack.pop()
    if result is None:
        raise StackEmpty()
    if len(stack):
        raise RemainingOperands(len(stack) + 1)
    return result.value
