from __future__ import annotations

from calcpad.models import (
    ClearToken,
    DecimalToken,
    DeleteToken,
    DigitToken,
    EqualsToken,
    Operator,
    OperatorToken,
    Token,
)

# Key names follow the DOM KeyboardEvent.key convention.
_ACTION_KEYS: dict[str, Token] = {
    ".": DecimalToken(),
    ",": DecimalToken(),
    "Enter": EqualsToken(),
    "=": EqualsToken(),
    "Backspace": DeleteToken(),
    "Escape": ClearToken(),
    "c": ClearToken(),
    "C": ClearToken(),
}


def token_for_key(key: str) -> Token | None:
    """Map a raw key name to an input token; unmapped keys return None."""

    if len(key) == 1 and key in "0123456789":
        return DigitToken(value=key)
    if key in {op.value for op in Operator}:
        return OperatorToken(value=Operator(key))
    return _ACTION_KEYS.get(key)
