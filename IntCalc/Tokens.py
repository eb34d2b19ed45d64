# Tokens.py
"""
Token and Event types for the integer calculator.

- Token: one unit of the committed expression (an operator or an operand).
- Event: one user action coming from the host (button click, key press).

Both are closed sets: the Type enums list every variant, and every consumer
matches on `.type` exhaustively.
"""

from dataclasses import dataclass
from enum import Enum


# -----------------------------
# Tokens
# -----------------------------

class TokenType(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    NUMBER = "n"


OPERATORS = (TokenType.ADD, TokenType.SUB, TokenType.MUL, TokenType.DIV)

# Precedence levels used by MathEngine.reorder
PRECEDENCE = {
    TokenType.ADD: 1,
    TokenType.SUB: 1,
    TokenType.MUL: 2,
    TokenType.DIV: 2,
}


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: int = 0

    @classmethod
    def number(cls, value):
        return cls(TokenType.NUMBER, int(value))

    @classmethod
    def add(cls):
        return cls(TokenType.ADD)

    @classmethod
    def sub(cls):
        return cls(TokenType.SUB)

    @classmethod
    def mul(cls):
        return cls(TokenType.MUL)

    @classmethod
    def div(cls):
        return cls(TokenType.DIV)

    @property
    def is_operator(self):
        return self.type in OPERATORS

    def __str__(self):
        if self.type == TokenType.NUMBER:
            return str(self.value)
        return self.type.value

    def __repr__(self):
        if self.type == TokenType.NUMBER:
            return f"Number({self.value})"
        return self.type.name.capitalize()


# -----------------------------
# Events
# -----------------------------

class EventType(Enum):
    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"
    NEG = "neg"
    NUMBER = "number"
    EQ = "eq"
    BACKSPACE = "backspace"
    RESET = "reset"
    IDLE = "idle"


# Operator events commit the pending operand followed by this token type
OPERATOR_EVENTS = {
    EventType.ADD: TokenType.ADD,
    EventType.SUB: TokenType.SUB,
    EventType.MUL: TokenType.MUL,
    EventType.DIV: TokenType.DIV,
}


@dataclass(frozen=True)
class Event:
    type: EventType
    digit: int = 0

    def __post_init__(self):
        if self.type == EventType.NUMBER and not 0 <= self.digit <= 9:
            raise ValueError(f"Digit out of range: {self.digit}")

    @classmethod
    def number(cls, digit):
        return cls(EventType.NUMBER, digit)

    def __repr__(self):
        if self.type == EventType.NUMBER:
            return f"Number({self.digit})"
        return self.type.name.capitalize()


# Shorthands for the payload-free events
ADD = Event(EventType.ADD)
SUB = Event(EventType.SUB)
MUL = Event(EventType.MUL)
DIV = Event(EventType.DIV)
NEG = Event(EventType.NEG)
EQ = Event(EventType.EQ)
BACKSPACE = Event(EventType.BACKSPACE)
RESET = Event(EventType.RESET)
IDLE = Event(EventType.IDLE)


# Button label -> event, used by the UI (and by tests to replay key sequences)
BUTTON_EVENTS = {
    "+": ADD,
    "-": SUB,
    "*": MUL,
    "/": DIV,
    "±": NEG,
    "=": EQ,
    "<": BACKSPACE,
    "C": RESET,
}


def event_from_label(label):
    """Translate a button label into an Event. Unknown labels become Idle."""
    if len(label) == 1 and label in "0123456789":
        return Event.number(int(label))
    return BUTTON_EVENTS.get(label, IDLE)
