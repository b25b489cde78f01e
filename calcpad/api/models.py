from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, Field

from calcpad.models import (
    AccumulatorState,
    CalcErrorKind,
    ClearToken,
    DecimalToken,
    DeleteToken,
    DigitToken,
    Display,
    EqualsToken,
    InputMode,
    Operator,
    OperatorToken,
    Token,
)

__all__ = [
    "AccumulatorState",
    "CalcErrorKind",
    "ClearToken",
    "DecimalToken",
    "DeleteToken",
    "DigitToken",
    "Display",
    "EqualsToken",
    "InputMode",
    "KeyPressRequest",
    "Operator",
    "OperatorToken",
    "SessionListResponse",
    "SessionResponse",
    "Token",
]


class KeyPressRequest(BaseModel):
    # DOM KeyboardEvent.key style: "7", "+", "Enter", "Backspace", "Escape", ...
    key: str = Field(..., min_length=1, max_length=32)


class SessionResponse(BaseModel):
    session_id: UUID
    state: AccumulatorState
    display: Display


class SessionListResponse(BaseModel):
    session_ids: list[UUID]
