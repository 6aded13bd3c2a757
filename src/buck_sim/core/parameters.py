"""
Converter parameters for the switched-converter simulation.

Default values reproduce the reference bench setup:
    Vin = 10 V, L = 20 µH, C = 1 µF, R = 10 Ω
    f = 1 MHz, D = 0.5
    step = 1 ns, horizon = 250 periods, window start = 150 µs
"""

import math
import warnings
from dataclasses import dataclass, replace

import numpy as np

from .errors import (
    DegenerateCircuit,
    InvalidDutyRatio,
    InvalidSamplingWindow,
    InvalidTimeBase,
)


def clamp_duty_ratio(duty_ratio: float) -> float:
    """Clamp a duty ratio into [0, 1]. NaN is rejected."""
    if math.isnan(duty_ratio):
        raise InvalidDutyRatio("Duty ratio must be a number")
    return min(1.0, max(0.0, float(duty_ratio)))


def duty_ratio_from_percent(value: int) -> float:
    """Map a slider percentage in [0, 100] to a duty ratio in [0.0, 1.0]."""
    return clamp_duty_ratio(value / 100.0)


@dataclass(frozen=True)
class ConverterParameters:
    """
    Immutable parameter set for one simulation run.

    Parameters
    ----------
    vin : float
        Input voltage [V]
    inductance : float
        Inductance [H]
    capacitance : float
        Capacitance [F]
    resistance : float
        Load resistance [Ω]
    frequency : float
        Switching frequency [Hz]
    duty_ratio : float
        Fraction of each period with the switch closed, in [0, 1]
    step : float
        Fixed integration step [s]
    periods : int
        Simulation horizon as a number of switching periods
    sampling_start : float
        Start of the steady-state averaging window [s]

    Notes
    -----
    Construction is strict: a duty ratio outside [0, 1] raises
    InvalidDutyRatio. The between-run inputs ``with_duty_ratio`` and
    ``duty_ratio_from_percent`` clamp instead, so a zero or negative request
    gives a switch that stays open for the whole run and a ratio above one
    keeps it closed.
    """
    vin: float = 10.0
    inductance: float = 20e-6
    capacitance: float = 1e-6
    resistance: float = 10.0
    frequency: float = 1e6
    duty_ratio: float = 0.5
    step: float = 1e-9
    periods: int = 250
    sampling_start: float = 0.00015

    def __post_init__(self):
        self._validate()

    def _validate(self):
        """Reject parameter sets that cannot produce a finite run."""
        if not math.isfinite(self.vin):
            raise DegenerateCircuit("Input voltage must be finite")
        for name in ("resistance", "capacitance", "inductance"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise DegenerateCircuit(f"{name.capitalize()} must be positive, got {value}")

        if not math.isfinite(self.duty_ratio) or not 0.0 <= self.duty_ratio <= 1.0:
            raise InvalidDutyRatio(f"Duty ratio must lie in [0, 1], got {self.duty_ratio}")

        if not math.isfinite(self.frequency) or self.frequency <= 0:
            raise InvalidTimeBase("Switching frequency must be positive")
        if not math.isfinite(self.step) or self.step <= 0:
            raise InvalidTimeBase("Time step must be positive")
        if self.periods <= 0:
            raise InvalidTimeBase("Horizon must span at least one period")
        if self.n_steps < 1:
            raise InvalidTimeBase("Time step is longer than the simulation horizon")

        if not 0.0 <= self.sampling_start < self.horizon:
            raise InvalidSamplingWindow(
                f"Sampling start must lie in [0, {self.horizon:g}) s, "
                f"got {self.sampling_start:g} s"
            )
        last_step = (self.n_steps - 1) * self.step
        if self.sampling_start > last_step:
            raise InvalidSamplingWindow(
                f"Sampling start {self.sampling_start:g} s is after the last "
                f"step at {last_step:g} s, the averaging window would be empty"
            )

        if self.step * 2 > self.period:
            warnings.warn(
                f"Time step {self.step:g} s resolves fewer than two samples "
                f"per switching period ({self.period:g} s)"
            )

    @property
    def period(self) -> float:
        """Switching period [s]."""
        return 1.0 / self.frequency

    @property
    def horizon(self) -> float:
        """Total simulated time [s]."""
        return self.periods * self.period

    @property
    def n_steps(self) -> int:
        """Number of integration steps, floor(horizon / step) in extended precision."""
        return int(np.longdouble(self.horizon) / np.longdouble(self.step))

    @property
    def time_constant(self) -> float:
        """Load time constant R·C [s]."""
        return self.resistance * self.capacitance

    def with_duty_ratio(self, duty_ratio: float, clamp: bool = True) -> "ConverterParameters":
        """
        Return a copy with a new duty ratio.

        With ``clamp=True`` values outside [0, 1] are pulled to the nearest
        bound, otherwise they raise InvalidDutyRatio.
        """
        if clamp:
            duty_ratio = clamp_duty_ratio(duty_ratio)
        return replace(self, duty_ratio=duty_ratio)

    def __repr__(self) -> str:
        return (f"ConverterParameters(Vin={self.vin}V, L={self.inductance*1e6:.2f}µH, "
                f"C={self.capacitance*1e6:.2f}µF, R={self.resistance}Ω, "
                f"f={self.frequency/1e3:.1f}kHz, D={self.duty_ratio:.2f})")
