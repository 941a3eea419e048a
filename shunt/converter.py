"""Shunting-yard conversion from infix to postfix order."""

import logging

from .containers import TokenQueue, TokenStack
from .errors import (
    ShuntError, UnknownOperator, UnmatchedClosingParenthesis,
    UnmatchedOpeningParenthesis, UnsupportedToken,
)
from .types import (
    PRECEDENCE, BinaryOperator, Number, Paren, UnaryOperator, is_right_assoc,
    precedence,
)

logger = logging.getLogger(__name__)


def shunting_yard(infix: TokenQueue, output: TokenQueue) -> TokenQueue:
    """Move every token of ``infix`` into ``output`` in postfix order.

    ``infix`` is left empty. Unary operators are only ever popped by a
    closing parenthesis or by the final drain, never by the precedence
    comparison, so ``-5+3`` becomes ``5 3 + (-)``.

    Raises UnmatchedClosingParenthesis, UnmatchedOpeningParenthesis,
    UnknownOperator or UnsupportedToken. On failure the remaining input is
    discarded.
    """
    stack = TokenStack()
    try:
        _convert(infix, output, stack)
    except ShuntError as e:
        logger.debug("conversion failed: %s", e)
        infix.clear()
        stack.clear()
        raise
    logger.debug("converted to %d postfix tokens", len(output))
    return output


def _is_open(t) -> bool:
    return isinstance(t, Paren) and t.is_open


def _pops_before(top, t: BinaryOperator) -> bool:
    # higher precedence, or equal precedence and left-associative
    if not isinstance(top, BinaryOperator):
        return False
    p_top = precedence(top.op)
    p_op = precedence(t.op)
    return p_top > p_op or (p_top == p_op and not is_right_assoc(top.op))


def _convert(infix: TokenQueue, output: TokenQueue, stack: TokenStack) -> None:
    t = infix.remove()
    while t is not None:
        if isinstance(t, Number):
            output.insert(t)

        elif isinstance(t, BinaryOperator):
            if t.op not in PRECEDENCE:
                raise UnknownOperator(t.op)
            while _pops_before(stack.peek(), t):
                output.insert(stack.pop())
            stack.push(t)

        elif isinstance(t, Paren):
            if t.is_open:
                stack.push(t)
            else:
                # pop until the matching "(", then drop both parentheses
                while stack.peek() is not None and not _is_open(stack.peek()):
                    output.insert(stack.pop())
                if stack.pop() is None:
                    raise UnmatchedClosingParenthesis()

        elif isinstance(t, UnaryOperator):
            stack.push(t)

        else:
            raise UnsupportedToken(t)

        t = infix.remove()

    t = stack.pop()
    while t is not None:
        if _is_open(t):
            raise UnmatchedOpeningParenthesis()
        output.insert(t)
        t = stack.pop()
