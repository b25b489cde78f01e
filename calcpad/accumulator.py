"""The accumulator: folds input tokens into a running single-operator calculation.

Every operation is a pure function `(state, ...) -> state`. Calculation failures are
raised by `evaluate` and turned into the error flag by the token operations, so no
token ever raises for a well-formed input.
"""
from __future__ import annotations

import logging
import math
import operator as _op
from collections.abc import Callable

from calcpad.models import (
    AccumulatorState,
    CalcErrorKind,
    ClearToken,
    DecimalToken,
    DeleteToken,
    DigitToken,
    Display,
    EqualsToken,
    Operator,
    OperatorToken,
    Token,
)
from calcpad.formatting import display_text, format_result, round10
from calcpad.fsm import InputModeFSM

logger = logging.getLogger(__name__)

ERROR_DISPLAY = "Error"
DIGITS = frozenset("0123456789")


class CalculationError(Exception):
    def __init__(self, kind: CalcErrorKind):
        super().__init__(kind.message)
        self.kind = kind


class InvalidInput(CalculationError):
    def __init__(self) -> None:
        super().__init__(CalcErrorKind.invalid_input)


class DivideByZero(CalculationError):
    def __init__(self) -> None:
        super().__init__(CalcErrorKind.divide_by_zero)


class Overflow(CalculationError):
    def __init__(self) -> None:
        super().__init__(CalcErrorKind.overflow)


_OPERATIONS: dict[Operator, Callable[[float, float], float]] = {
    Operator.add: _op.add,
    Operator.sub: _op.sub,
    Operator.mul: _op.mul,
    Operator.div: _op.truediv,
}


def initial_state() -> AccumulatorState:
    return AccumulatorState()


def _transition(state: AccumulatorState, event: str, **changes: object) -> AccumulatorState:
    fsm = InputModeFSM(state)
    fsm.send(event)
    return state.model_copy(update={**changes, "mode": fsm.mode})


def _without_error(state: AccumulatorState) -> AccumulatorState:
    if state.error is None:
        return state
    return state.model_copy(update={"error": None})


def parse_operand(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise InvalidInput() from None
    if not math.isfinite(value):
        raise InvalidInput()
    return value


def evaluate(left_text: str, op: Operator, right_text: str) -> str:
    """Combine two operand texts and return the formatted result.

    Raises InvalidInput, DivideByZero or Overflow.
    """

    left = parse_operand(left_text)
    right = parse_operand(right_text)

    if op == Operator.div and right == 0:
        raise DivideByZero()

    try:
        result = _OPERATIONS[op](left, right)
    except OverflowError:
        raise Overflow() from None

    if not math.isfinite(result):
        raise Overflow()

    return format_result(round10(result))


def _evaluate_pending(state: AccumulatorState) -> AccumulatorState:
    if state.pending_op is None or state.pending_text is None:
        raise ValueError("No pending operation")

    try:
        text = evaluate(state.pending_text, state.pending_op, state.current_text)
    except CalculationError as e:
        logger.debug(
            "calculation failed: %s %s %s -> %s", state.pending_text, state.pending_op.value, state.current_text, e
        )
        # Pending operand/operator survive; the auto-clear wipes them shortly after.
        return state.model_copy(update={"error": e.kind})

    return _transition(state, "result_produced", current_text=text, pending_text=None, pending_op=None)


def digit(state: AccumulatorState, d: str) -> AccumulatorState:
    if len(d) != 1 or d not in DIGITS:
        raise ValueError(f"Not a digit: {d!r}")

    state = _without_error(state)
    if state.awaiting_operand or state.just_evaluated or state.current_text == "0":
        text = d
    else:
        text = state.current_text + d
    return _transition(state, "operand_started", current_text=text)


def decimal_point(state: AccumulatorState) -> AccumulatorState:
    state = _without_error(state)
    if state.awaiting_operand or state.just_evaluated:
        return _transition(state, "operand_started", current_text="0.")
    if "." in state.current_text:
        return state
    return _transition(state, "operand_started", current_text=state.current_text + ".")


def operator(state: AccumulatorState, op: Operator) -> AccumulatorState:
    state = _without_error(state)
    if state.pending_op is not None and not state.awaiting_operand:
        # Left-to-right chaining: 3 + 4 + evaluates 3 + 4 before taking the new operator.
        state = _evaluate_pending(state)
    return _transition(state, "operator_chosen", pending_text=state.current_text, pending_op=op)


def equals(state: AccumulatorState) -> AccumulatorState:
    state = _without_error(state)
    if state.pending_op is None or state.awaiting_operand:
        return state
    return _evaluate_pending(state)


def clear(state: AccumulatorState | None = None) -> AccumulatorState:
    if state is None:
        return initial_state()
    return _transition(state, "cleared", current_text="0", pending_text=None, pending_op=None, error=None)


def delete_last(state: AccumulatorState) -> AccumulatorState:
    if state.just_evaluated:
        return clear(state)

    state = _without_error(state)
    text = state.current_text[:-1] if len(state.current_text) > 1 else "0"
    return state.model_copy(update={"current_text": text})


def apply_token(state: AccumulatorState, token: Token) -> AccumulatorState:
    if isinstance(token, DigitToken):
        return digit(state, token.value)
    if isinstance(token, DecimalToken):
        return decimal_point(state)
    if isinstance(token, OperatorToken):
        return operator(state, token.value)
    if isinstance(token, EqualsToken):
        return equals(state)
    if isinstance(token, DeleteToken):
        return delete_last(state)
    if isinstance(token, ClearToken):
        return clear(state)
    raise ValueError(f"Unknown token: {token!r}")


def render(state: AccumulatorState) -> str:
    if state.error_state:
        return ERROR_DISPLAY
    return display_text(state.current_text)


def project(state: AccumulatorState) -> Display:
    return Display(
        text=render(state),
        error=state.error_state,
        error_message=state.error_message,
        active_operator=state.pending_op,
    )
