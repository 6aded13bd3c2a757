"""
buck_sim: fixed-step time-domain simulation of a PWM-switched DC-DC converter.

    >>> from buck_sim import ConverterParameters, simulate
    >>> result = simulate(ConverterParameters(duty_ratio=0.5))
    >>> result.v_steady
"""

from .core import (
    ConfigurationError,
    InvalidDutyRatio,
    InvalidSamplingWindow,
    DegenerateCircuit,
    InvalidTimeBase,
    NumericOverflowError,
    ConverterParameters,
    duty_ratio_from_percent,
    SwitchState,
    CircuitState,
    Target,
    TimeSeries,
    SimulationResult,
    simulate,
)

__version__ = "0.1.0"

__all__ = [
    'ConfigurationError',
    'InvalidDutyRatio',
    'InvalidSamplingWindow',
    'DegenerateCircuit',
    'InvalidTimeBase',
    'NumericOverflowError',
    'ConverterParameters',
    'duty_ratio_from_percent',
    'SwitchState',
    'CircuitState',
    'Target',
    'TimeSeries',
    'SimulationResult',
    'simulate',
]
