"""Top-level API: tokenize, convert and evaluate in one call."""

from .containers import TokenQueue
from .converter import shunting_yard
from .evaluator import evaluate
from .parser import tokenize
from .types import Token


def convert(src: str) -> tuple[list[Token], TokenQueue]:
    """Convert an infix expression to postfix.

    Returns:
        (infix_tokens, postfix_queue). ``infix_tokens`` is a snapshot of the
        tokenizer output taken before the converter drains it.
    """
    infix = tokenize(src)
    snapshot = list(infix)
    return snapshot, shunting_yard(infix, TokenQueue())


def calculate(src: str) -> int:
    """Evaluate an infix expression to a 64-bit integer."""
    return evaluate(shunting_yard(tokenize(src), TokenQueue()))
