import pytest

from IntCalc.Tokens import (
    Event,
    EventType,
    Token,
    TokenType,
    ADD,
    BACKSPACE,
    EQ,
    IDLE,
    NEG,
    RESET,
    DIV,
    event_from_label,
)


def test_tokens_compare_structurally():
    assert Token.number(5) == Token.number(5)
    assert Token.number(5) != Token.number(6)
    assert Token.add() == Token(TokenType.ADD)
    assert Token.add() != Token.sub()


def test_tokens_are_immutable():
    token = Token.number(3)
    with pytest.raises(AttributeError):
        token.value = 4


def test_is_operator():
    assert Token.mul().is_operator
    assert Token.div().is_operator
    assert not Token.number(0).is_operator


def test_token_text_and_repr():
    assert str(Token.number(-12)) == "-12"
    assert str(Token.div()) == "/"
    assert repr(Token.number(7)) == "Number(7)"
    assert repr(Token.sub()) == "Sub"


def test_number_event_rejects_non_digits():
    with pytest.raises(ValueError):
        Event.number(10)
    with pytest.raises(ValueError):
        Event.number(-1)


def test_number_event_keeps_digit():
    event = Event.number(7)
    assert event.type == EventType.NUMBER
    assert event.digit == 7


@pytest.mark.parametrize(
    "label, expected",
    [
        ("+", ADD),
        ("/", DIV),
        ("±", NEG),
        ("=", EQ),
        ("<", BACKSPACE),
        ("C", RESET),
        ("4", Event.number(4)),
        ("0", Event.number(0)),
    ],
)
def test_event_from_label(label, expected):
    assert event_from_label(label) == expected


def test_unknown_labels_are_idle():
    assert event_from_label(".") == IDLE
    assert event_from_label("(") == IDLE
    assert event_from_label("12") == IDLE
    assert event_from_label("") == IDLE
