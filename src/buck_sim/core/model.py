"""
Hybrid state-space model of the switched converter.

State variables:
    vc(t) = capacitor (output) voltage
    il(t) = inductor current

Switch closed (energy storage):
    dvc/dt = -vc / (R·C)
    dil/dt =  Vin / L

Switch open (freewheeling):
    dvc/dt = (-R·il - vc) / (R·C)
    dil/dt =  vc / L

The freewheeling diode blocks reverse current, so while the switch is open a
negative inductor current is clamped to zero.
"""

from typing import NamedTuple

from .parameters import ConverterParameters
from .switching import SwitchState


class CircuitState(NamedTuple):
    """Instantaneous circuit state."""
    vc: float
    il: float


def dvc(vc: float, il: float, state: SwitchState,
        params: ConverterParameters) -> float:
    """Capacitor voltage derivative [V/s]."""
    rc = params.resistance * params.capacitance
    if state is SwitchState.CLOSED:
        return -vc / rc
    return (-params.resistance * il - vc) / rc


def dil(vc: float, vin: float, state: SwitchState,
        params: ConverterParameters) -> float:
    """Inductor current derivative [A/s]."""
    if state is SwitchState.CLOSED:
        return vin / params.inductance
    return vc / params.inductance


def derivatives(x: CircuitState, vin: float, state: SwitchState,
                params: ConverterParameters) -> CircuitState:
    """Both derivatives at ``x`` as a CircuitState of rates."""
    return CircuitState(dvc(x.vc, x.il, state, params),
                        dil(x.vc, vin, state, params))


def diode_clamp(il: float, state: SwitchState) -> float:
    """Block reverse inductor current while the switch is open."""
    if state is SwitchState.OPEN and il < 0:
        return 0.0
    return il
