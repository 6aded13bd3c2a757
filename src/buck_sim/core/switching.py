"""
PWM switching function.

The switch is closed for the first ``duty_ratio`` fraction of every period
and open for the remainder.
"""

import math
from enum import Enum


class SwitchState(Enum):
    """Circuit topology selected by the switch."""
    CLOSED = "closed"
    OPEN = "open"

    @classmethod
    def from_bool(cls, closed: bool) -> "SwitchState":
        return cls.CLOSED if closed else cls.OPEN

    @property
    def is_closed(self) -> bool:
        return self is SwitchState.CLOSED


def evaluate(time: float, period: float, duty_ratio: float) -> bool:
    """
    Return True when the switch is closed at ``time``.

    Closed iff fmod(time, period) < duty_ratio·period, so a duty ratio of
    zero (or below) keeps the switch permanently open.
    """
    return math.fmod(time, period) < duty_ratio * period


def switch_state(time: float, period: float, duty_ratio: float) -> SwitchState:
    """Switch state at ``time`` as a SwitchState."""
    return SwitchState.from_bool(evaluate(time, period, duty_ratio))
