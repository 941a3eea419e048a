"""
Shunting-Yard End-to-End Example (Python)

Walks a few expressions through every stage:
1. Tokenize the infix text
2. Convert to postfix
3. Evaluate the postfix queue
4. Show how failures surface

Run: pip install -e . && python examples/e2e/e2e.py
"""

from shunt import ShuntError, TokenQueue, evaluate, shunting_yard, tokenize
from shunt.types import render_sequence

print("=== Shunting-Yard E2E Demo ===\n")

expressions = ["3+4*2", "(3+4)*2", "2^3^2", "8/4/2", "-5+3"]

for i, src in enumerate(expressions, start=1):
    infix = tokenize(src)
    print(f"{i}. {src}")
    print(f"   Tokens:  {render_sequence(infix)}")

    postfix = shunting_yard(infix, TokenQueue())
    print(f"   Postfix: {render_sequence(postfix)}")
    print(f"   Result:  {evaluate(postfix)}\n")

print(f"{len(expressions) + 1}. Failures")
for src in ["(1+2", "1+2)", "1/0", "+5", "1 + 2"]:
    try:
        evaluate(shunting_yard(tokenize(src), TokenQueue()))
    except ShuntError as e:
        print(f"   {src!r:8} -> {e.kind}: {e}")

print("\n=== Demo complete ===")
