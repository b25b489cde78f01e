from __future__ import annotations

from statemachine import State, StateMachine

from calcpad.models import AccumulatorState, InputMode


class InputModeFSM(StateMachine):
    """Guards how the accumulator moves between input modes.

    - entering: digits append to the current value
    - awaiting_operand: an operator was just chosen; the next digit starts a new value
    - evaluated: equals just produced a result; the next digit starts over

    The error flag is orthogonal to the mode and lives on the state model only.
    """

    entering = State(InputMode.entering.value, value=InputMode.entering.value, initial=True)
    awaiting_operand = State(InputMode.awaiting_operand.value, value=InputMode.awaiting_operand.value)
    evaluated = State(InputMode.evaluated.value, value=InputMode.evaluated.value)

    operand_started = entering.to(entering) | awaiting_operand.to(entering) | evaluated.to(entering)
    operator_chosen = (
        entering.to(awaiting_operand) | awaiting_operand.to(awaiting_operand) | evaluated.to(awaiting_operand)
    )
    result_produced = entering.to(evaluated) | evaluated.to(evaluated)
    cleared = entering.to(entering) | awaiting_operand.to(entering) | evaluated.to(entering)

    def __init__(self, acc: AccumulatorState):
        self.acc = acc
        super().__init__(start_value=acc.mode.value)

    @property
    def mode(self) -> InputMode:
        return InputMode(str(self.current_state.value))
