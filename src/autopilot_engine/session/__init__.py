"""Session module: state machine, controller, active-root record."""

from autopilot_engine.session.controller import ActivationResult, AutopilotSession
from autopilot_engine.session.registry import load_active_root, save_active_root
from autopilot_engine.session.state_machine import SessionState, check_transition

__all__ = [
    "ActivationResult",
    "AutopilotSession",
    "SessionState",
    "check_transition",
    "load_active_root",
    "save_active_root",
]
