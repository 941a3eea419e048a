"""CLI: python -m shunt <expression>

``shunt`` prints the tokens before and after conversion; ``shunteval``
also prints the evaluated result.
"""

import logging
import sys

from .config import Settings
from .containers import TokenQueue
from .converter import shunting_yard
from .errors import ShuntError
from .evaluator import evaluate
from .parser import tokenize
from .types import render_sequence


def _setup_logging() -> None:
    settings = Settings.from_env()
    logging.basicConfig(level=settings.level, format=settings.log_format)


def _run(prog: str, argv, with_result: bool) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print(f"Usage: {prog} <expression>", file=sys.stderr)
        return 1
    _setup_logging()

    try:
        infix = tokenize(args[0])
        print("input:  " + render_sequence(infix))

        postfix = shunting_yard(infix, TokenQueue())
        print("output: " + render_sequence(postfix))

        if with_result:
            print(f"result: {evaluate(postfix)}")
    except ShuntError as e:
        print(str(e), file=sys.stderr)
        return 1
    return 0


def main(argv=None) -> int:
    return _run("shunt", argv, with_result=False)


def eval_main(argv=None) -> int:
    return _run("shunteval", argv, with_result=True)


if __name__ == "__main__":
    sys.exit(main())
