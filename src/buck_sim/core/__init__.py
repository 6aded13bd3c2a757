# Core module init
from .errors import (
    ConfigurationError,
    InvalidDutyRatio,
    InvalidSamplingWindow,
    DegenerateCircuit,
    InvalidTimeBase,
    NumericOverflowError,
)

from .parameters import (
    ConverterParameters,
    clamp_duty_ratio,
    duty_ratio_from_percent,
)

from .switching import SwitchState, evaluate, switch_state

from .model import CircuitState, dvc, dil, derivatives, diode_clamp

from .integrator import Target, rk4_step, rk4_increments

from .averaging import average, trapezoid_area, window_area, window_average

from .simulation import TimeSeries, SimulationResult, simulate

__all__ = [
    'ConfigurationError',
    'InvalidDutyRatio',
    'InvalidSamplingWindow',
    'DegenerateCircuit',
    'InvalidTimeBase',
    'NumericOverflowError',
    'ConverterParameters',
    'clamp_duty_ratio',
    'duty_ratio_from_percent',
    'SwitchState',
    'evaluate',
    'switch_state',
    'CircuitState',
    'dvc',
    'dil',
    'derivatives',
    'diode_clamp',
    'Target',
    'rk4_step',
    'rk4_increments',
    'average',
    'trapezoid_area',
    'window_area',
    'window_average',
    'TimeSeries',
    'SimulationResult',
    'simulate',
]
