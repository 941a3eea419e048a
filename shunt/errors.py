"""Errors raised by the tokenizer, converter and evaluator.

Every stage raises at the point of detection. Only the CLI turns an error
into a message and an exit code.
"""


class ShuntError(RuntimeError):
    kind = "error"


# --- Tokenizer ---

class UnexpectedCharacter(ShuntError):
    kind = "unexpected_character"

    def __init__(self, char: str, pos: int):
        super().__init__(f"Unexpected character {char!r} at position {pos}.")
        self.char = char
        self.pos = pos


# --- Converter ---

class UnmatchedClosingParenthesis(ShuntError):
    kind = "unmatched_closing_parenthesis"

    def __init__(self, msg: str = "Unmatched closing parenthesis."):
        super().__init__(msg)


class UnmatchedOpeningParenthesis(ShuntError):
    kind = "unmatched_opening_parenthesis"

    def __init__(self, msg: str = "Unmatched opening parenthesis."):
        super().__init__(msg)


class UnsupportedToken(ShuntError):
    kind = "unsupported_token"

    def __init__(self, token):
        super().__init__(f"Unsupported token type: {token!r}.")
        self.token = token


# --- Evaluator ---

class StackEmpty(ShuntError):
    kind = "stack_empty"

    def __init__(self, msg: str = "Stack empty."):
        super().__init__(msg)


class RemainingOperands(ShuntError):
    kind = "remaining_operands"

    def __init__(self, count: int):
        super().__init__(f"Remaining operands: {count} values left on the stack.")
        self.count = count


class DivisionByZero(ShuntError):
    kind = "division_by_zero"

    def __init__(self, msg: str = "Division by zero."):
        super().__init__(msg)


class UnknownOperator(ShuntError):
    kind = "unknown_operator"

    def __init__(self, op):
        super().__init__(f"Unknown operator: {op!r}.")
        self.op = op


class ResultOutOfRange(ShuntError):
    kind = "result_out_of_range"

    def __init__(self, msg: str = "Result does not fit in a 64-bit integer."):
        super().__init__(msg)
