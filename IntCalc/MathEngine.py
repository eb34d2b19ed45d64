# MathEngine.py
"""
Reduction engine for the integer calculator.

Pipeline
--------
1) reorder:  infix token list -> postfix (shunting-yard, two precedence levels,
             left-associative, no parentheses).
2) evaluate: postfix token list -> one integer, using a single value stack.
3) calculate: both steps, with debug logging of the intermediate streams.

All functions are pure. Errors are raised as MathError subclasses from error.py.
"""

import logging

from . import error as E
from .Tokens import Token, TokenType, PRECEDENCE

logger = logging.getLogger(__name__)

# Values are modelled as signed 64-bit integers
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


# -----------------------------
# Utilities / small helpers
# -----------------------------

def format_tokens(tokens):
    """Render a token list as text, e.g. '2 + 3 * 4'."""
    return " ".join(str(token) for token in tokens)


def trunc_div(x, y):
    """Integer division truncating toward zero (Python's // floors)."""
    quotient = abs(x) // abs(y)
    if (x < 0) != (y < 0):
        return -quotient
    return quotient


def check_range(value, tokens=None):
    """Raise NumberTooBig when value does not fit in a signed 64-bit integer."""
    if not INT64_MIN <= value <= INT64_MAX:
        equation = format_tokens(tokens) if tokens is not None else None
        raise E.NumberTooBig(f"Result out of range: {value}", equation=equation)
    return value


# -----------------------------
# Infix -> postfix
# -----------------------------

def reorder(tokens):
    """Reorder an infix token list into postfix order.

    Numbers go straight to the output. An operator first pops every stacked
    operator of the same or higher precedence (left associativity), then is
    pushed. Mul/Div never pop a stacked Add/Sub, so they bind tighter.
    Remaining operators are flushed in LIFO order.
    """
    output_queue = []
    operator_stack = []

    for token in tokens:
        if not isinstance(token, Token):
            raise E.MalformedExpression(f"Not a token: {token!r}")

        if token.type == TokenType.NUMBER:
            output_queue.append(token)
        else:
            level = PRECEDENCE[token.type]
            while operator_stack and PRECEDENCE[operator_stack[-1].type] >= level:
                output_queue.append(operator_stack.pop())
            operator_stack.append(token)

    while operator_stack:
        output_queue.append(operator_stack.pop())

    return output_queue


# -----------------------------
# Postfix reduction
# -----------------------------

def apply_operator(token_type, x, y):
    if token_type == TokenType.ADD:
        return x + y
    elif token_type == TokenType.SUB:
        return x - y
    elif token_type == TokenType.MUL:
        return x * y
    elif token_type == TokenType.DIV:
        if y == 0:
            raise E.DivisionByZero(f"Division by zero: {x} / 0")
        return trunc_div(x, y)
    raise E.MalformedExpression(f"Unknown operator: {token_type}")


def evaluate(postfix):
    """Reduce a postfix token list to a single integer.

    For each operator the top of the stack is the right operand (y) and the
    value below it the left operand (x). Exactly one value must remain.
    """
    stack = []

    for token in postfix:
        if not isinstance(token, Token):
            raise E.MalformedExpression(f"Not a token: {token!r}")

        if token.type == TokenType.NUMBER:
            stack.append(check_range(token.value, postfix))
            continue

        if len(stack) < 2:
            raise E.MalformedExpression(
                f"Insufficient operands for '{token}'",
                equation=format_tokens(postfix),
            )
        y = stack.pop()
        x = stack.pop()
        try:
            result = apply_operator(token.type, x, y)
        except E.MathError as e:
            e.equation = format_tokens(postfix)
            raise
        stack.append(check_range(result, postfix))

    if len(stack) != 1:
        raise E.MalformedExpression(
            f"Stack has {len(stack)} values after evaluation, expected 1",
            equation=format_tokens(postfix),
        )
    return stack[0]


# -----------------------------
# Public entry point
# -----------------------------

def calculate(tokens):
    """Main API: reorder the infix tokens, then reduce them to one integer."""
    postfix = reorder(tokens)
    logger.debug("Ops: %s", format_tokens(tokens))
    logger.debug("Postfix: %s", format_tokens(postfix))
    try:
        result = evaluate(postfix)
    except E.MathError as e:
        # Report the expression the user typed, not the postfix form
        e.equation = format_tokens(tokens)
        raise
    logger.debug("Result: %s", result)
    return result
