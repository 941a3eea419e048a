from .parser import tokenize
from .converter import shunting_yard
from .evaluator import evaluate
from .pipeline import convert, calculate
from .containers import TokenQueue, TokenStack
from .errors import ShuntError

__all__ = [
    "tokenize", "shunting_yard", "evaluate", "convert", "calculate",
    "TokenQueue", "TokenStack", "ShuntError",
]
