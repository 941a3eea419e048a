"""Tokenizer for infix arithmetic expressions."""

import logging

from .containers import TokenQueue
from .errors import UnexpectedCharacter
from .types import (
    BinaryOperator, Number, Operator, Paren, Parenthesis, Token, Unary,
    UnaryOperator, wrap_int64,
)

logger = logging.getLogger(__name__)

_SINGLE_CHAR = {
    "+": (BinaryOperator, Operator.ADD),
    "-": (BinaryOperator, Operator.SUB),
    "*": (BinaryOperator, Operator.MUL),
    "/": (BinaryOperator, Operator.DIV),
    "^": (BinaryOperator, Operator.POW),
    "(": (Paren, Parenthesis.OPEN),
    ")": (Paren, Parenthesis.CLOSE),
}


def _parse_char(ch: str, pos: int) -> Token:
    try:
        cls, tag = _SINGLE_CHAR[ch]
    except KeyError:
        raise UnexpectedCharacter(ch, pos) from None
    return cls(tag)


def tokenize(src: str) -> TokenQueue:
    """Split an infix expression into a queue of tokens.

    No whitespace is allowed. A ``-`` seen where an operand is expected
    (at the start, after an operator or after ``(``) becomes a unary
    negation.
    """
    tokens = TokenQueue()
    expecting_operand = True
    i = 0
    n = len(src)
    while i < n:
        ch = src[i]
        if expecting_operand and ch == "-":
            tokens.insert(UnaryOperator(Unary.NEGATE))
            i += 1
            continue
        if "0" <= ch <= "9":
            number = 0
            while i < n and "0" <= src[i] <= "9":
                number = wrap_int64(number * 10 + (ord(src[i]) - ord("0")))
                i += 1
            tokens.insert(Number(number))
            expecting_operand = False
            continue
        tok = _parse_char(ch, i)
        tokens.insert(tok)
        expecting_operand = isinstance(tok, BinaryOperator) or (
            isinstance(tok, Paren) and tok.is_open
        )
        i += 1
    logger.debug("tokenized %r into %d tokens", src, len(tokens))
    return tokens
