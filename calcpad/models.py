"""Accumulator state, display projection and input token models."""
from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import BaseModel, Field, computed_field


class Operator(StrEnum):
    add = "+"
    sub = "-"
    mul = "*"
    div = "/"


class InputMode(StrEnum):
    entering = "entering"
    awaiting_operand = "awaiting_operand"
    evaluated = "evaluated"


class CalcErrorKind(StrEnum):
    invalid_input = "invalid_input"
    divide_by_zero = "divide_by_zero"
    overflow = "overflow"

    @property
    def message(self) -> str:
        return _ERROR_MESSAGES[self]


_ERROR_MESSAGES: dict[CalcErrorKind, str] = {
    CalcErrorKind.invalid_input: "Invalid input",
    CalcErrorKind.divide_by_zero: "Cannot divide by zero",
    CalcErrorKind.overflow: "Result is too large",
}


class AccumulatorState(BaseModel):
    current_text: str = "0"

    # Left operand and operator are set and cleared together.
    pending_text: str | None = None
    pending_op: Operator | None = None

    mode: InputMode = InputMode.entering

    error: CalcErrorKind | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def awaiting_operand(self) -> bool:
        return self.mode == InputMode.awaiting_operand

    @computed_field  # type: ignore[prop-decorator]
    @property
    def just_evaluated(self) -> bool:
        return self.mode == InputMode.evaluated

    @computed_field  # type: ignore[prop-decorator]
    @property
    def error_state(self) -> bool:
        return self.error is not None

    @property
    def error_message(self) -> str | None:
        return self.error.message if self.error is not None else None


class Display(BaseModel):
    """What a renderer needs after every token."""

    text: str
    error: bool
    error_message: str | None = None

    # Drives the "active operator" highlight; purely cosmetic.
    active_operator: Operator | None = None


# Input tokens. The dispatcher (keyboard, buttons, API clients) produces these;
# the accumulator only ever sees already-classified tokens.


class DigitToken(BaseModel):
    type: Literal["digit"] = "digit"
    value: str = Field(..., pattern=r"^[0-9]$")


class DecimalToken(BaseModel):
    type: Literal["decimal"] = "decimal"


class OperatorToken(BaseModel):
    type: Literal["operator"] = "operator"
    value: Operator


class EqualsToken(BaseModel):
    type: Literal["equals"] = "equals"


class DeleteToken(BaseModel):
    type: Literal["delete"] = "delete"


class ClearToken(BaseModel):
    type: Literal["clear"] = "clear"


Token = Annotated[
    DigitToken | DecimalToken | OperatorToken | EqualsToken | DeleteToken | ClearToken,
    Field(discriminator="type"),
]
