"""
Classical fourth-order Runge-Kutta step for the switched converter.

For one step of size h with the switch state held fixed:

    k1 = h·f(x)
    k2 = h·f(x + k1/2)
    k3 = h·f(x + k2/2)
    k4 = h·f(x + k3)
    Δx = (k1 + 2(k2 + k3) + k4) / 6

The switch state is evaluated once at the start of the step and is not
re-evaluated at the t + h/2 and t + h stage times.
"""

from enum import Enum
from typing import Tuple

from .model import dil, dvc
from .parameters import ConverterParameters
from .switching import SwitchState


class Target(Enum):
    """State variable whose increment rk4_step returns."""
    VC = "vc"
    IL = "il"


def rk4_increments(vc: float, vin: float, il: float, step: float,
                   state: SwitchState, params: ConverterParameters,
                   coupled: bool = True) -> Tuple[float, float]:
    """
    RK4 increments (Δvc, Δil) over one step.

    Parameters
    ----------
    vc, il : float
        State at the start of the step
    vin : float
        Input voltage [V]
    step : float
        Step size h [s]
    state : SwitchState
        Topology used for all four stages
    params : ConverterParameters
        Circuit constants (R, L, C)
    coupled : bool
        If True, each vc stage sees il advanced by the matching il stage
        increment and vice versa. If False, each variable is staged on its
        own with the other held at its start-of-step value.
    """
    k1_vc = step * dvc(vc, il, state, params)
    k1_il = step * dil(vc, vin, state, params)

    if coupled:
        k2_vc = step * dvc(vc + 0.5 * k1_vc, il + 0.5 * k1_il, state, params)
        k2_il = step * dil(vc + 0.5 * k1_vc, vin, state, params)
        k3_vc = step * dvc(vc + 0.5 * k2_vc, il + 0.5 * k2_il, state, params)
        k3_il = step * dil(vc + 0.5 * k2_vc, vin, state, params)
        k4_vc = step * dvc(vc + k3_vc, il + k3_il, state, params)
        k4_il = step * dil(vc + k3_vc, vin, state, params)
    else:
        k2_vc = step * dvc(vc + 0.5 * k1_vc, il, state, params)
        k3_vc = step * dvc(vc + 0.5 * k2_vc, il, state, params)
        k4_vc = step * dvc(vc + k3_vc, il, state, params)
        # dil never depends on il, so with vc frozen every stage is k1
        k2_il = k3_il = k4_il = k1_il

    d_vc = (k1_vc + 2 * (k2_vc + k3_vc) + k4_vc) / 6
    d_il = (k1_il + 2 * (k2_il + k3_il) + k4_il) / 6
    return d_vc, d_il


def rk4_step(vc: float, vin: float, il: float, step: float, target: Target,
             state: SwitchState, params: ConverterParameters,
             coupled: bool = True) -> float:
    """Increment of ``target`` over one RK4 step."""
    d_vc, d_il = rk4_increments(vc, vin, il, step, state, params, coupled)
    return d_vc if target is Target.VC else d_il
