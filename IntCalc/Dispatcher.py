# Dispatcher.py
"""
Input state of the calculator.

The Calculator owns two fields:
- tokens:  the committed expression prefix (Number, op, Number, op, ...),
           always ending with an operator when non-empty
- pending: the operand being typed, or the last result after '=' / 'C'

dispatch() applies one Event to that state; display() renders `pending`.
There is no explicit mode enum: an empty `tokens` means nothing has been
committed yet. The only extra bit kept is whether `pending` currently holds a
result, so that typing a digit after '=' starts a fresh operand.
"""

import logging

from . import error as E
from . import MathEngine
from .Tokens import Token, EventType, OPERATOR_EVENTS

logger = logging.getLogger(__name__)

# Operands are capped at ten digits; further digits are silently dropped
MAX_DIGITS = 10
INPUT_GUARD = 10 ** (MAX_DIGITS - 1) - 1


class Calculator:

    def __init__(self):
        self.tokens = []
        self.pending = 0
        self._result_shown = False

    @property
    def entering_expression(self):
        """True once an operator has been committed and '=' not yet pressed."""
        return bool(self.tokens)

    @property
    def result_shown(self):
        """True right after '=', until the next state-changing event."""
        return self._result_shown

    def display(self):
        return str(self.pending)

    def reset(self):
        self.tokens.clear()
        self.pending = 0
        self._result_shown = False

    def _fail(self, error):
        logger.warning("Calculation failed (%s): %s [%s]", error.code, error.message, error.equation)
        self.reset()

    def dispatch(self, event):
        """Apply one input event.

        Raises the MathError produced by the reduction step on '=' (or
        NumberTooBig when '±' leaves the 64-bit range); the state is reset
        to empty/0 before the error propagates to the host.
        """
        logger.debug("Event %r (tokens=%s, pending=%s)", event, self.tokens, self.pending)
        kind = event.type

        if kind == EventType.IDLE:
            return

        if kind == EventType.EQ:
            self.tokens.append(Token.number(self.pending))
            try:
                result = MathEngine.calculate(self.tokens)
            except E.MathError as e:
                self._fail(e)
                raise
            self.pending = result
            self.tokens.clear()
            self._result_shown = True
            return

        if kind == EventType.RESET:
            self.reset()

        elif kind == EventType.NEG:
            try:
                self.pending = MathEngine.check_range(-self.pending)
            except E.MathError as e:
                e.equation = f"-({self.pending})"
                self._fail(e)
                raise

        elif kind == EventType.NUMBER:
            if self._result_shown:
                self.pending = 0
            self.pending = append_digit(self.pending, event.digit)

        elif kind == EventType.BACKSPACE:
            self.pending = MathEngine.trunc_div(self.pending, 10)

        elif kind in OPERATOR_EVENTS:
            self.tokens.append(Token.number(self.pending))
            self.tokens.append(Token(OPERATOR_EVENTS[kind]))
            self.pending = 0

        else:
            raise ValueError(f"Unhandled event: {event!r}")

        self._result_shown = False


def append_digit(value, digit):
    """Append a decimal digit to value, keeping its sign (-5, 3 -> -53).

    Once value already has MAX_DIGITS digits it is returned unchanged.
    """
    if abs(value) > INPUT_GUARD:
        return value
    if value < 0:
        return value * 10 - digit
    return value * 10 + digit
