"""Session state machine: UNBOUND -> BOUND.

Only activation changes the state. enable/disable keep a bound session
bound; a failed activation drops back to UNBOUND.
"""

from __future__ import annotations

import enum


class SessionState(str, enum.Enum):
    UNBOUND = "UNBOUND"
    BOUND = "BOUND"


# operation -> {from_state: to_state}
TRANSITIONS = {
    "activate": {SessionState.UNBOUND: SessionState.BOUND, SessionState.BOUND: SessionState.BOUND},
    "enable": {SessionState.BOUND: SessionState.BOUND},
    "disable": {SessionState.BOUND: SessionState.BOUND},
}


def check_transition(current: SessionState, operation: str) -> tuple[bool, str]:
    """Check if an operation is allowed in the current state.

    Args:
        current: Current session state.
        operation: One of activate, enable, disable.

    Returns:
        (valid, message) tuple.
    """
    table = TRANSITIONS.get(operation)
    if table is None:
        return False, f"Unknown operation '{operation}'"

    target = table.get(current)
    if target is None:
        allowed = [s.value for s in table]
        return False, (
            f"Cannot {operation} from {current.value}. "
            f"Allowed from: {', '.join(allowed)}"
        )
    return True, f"{current.value} -> {target.value}"
