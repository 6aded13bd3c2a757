"""
Fixed-step simulation driver.

Runs the converter from rest (vc = il = 0) over ``params.n_steps`` steps of
size ``params.step``. Each step:

    1. evaluate the switch at time[i]
    2. clamp il[i] through the diode if the switch is open
    3. advance vc and il with one RK4 step in that topology
    4. accumulate the trapezoid area of vc once time[i] >= sampling_start

The full history is kept in one pre-sized record array so the time, switch,
vc and il columns always stay in lockstep.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Union

import numpy as np

from .averaging import average, trapezoid_area
from .errors import NumericOverflowError
from .integrator import rk4_increments
from .model import CircuitState, diode_clamp
from .parameters import ConverterParameters
from .switching import evaluate, switch_state

logger = logging.getLogger(__name__)

SERIES_DTYPE = np.dtype([
    ('time', 'f8'),
    ('closed', '?'),
    ('vc', 'f8'),
    ('il', 'f8'),
])


class TimeSeries:
    """
    Simulation history, one record per time index.

    Index i holds time i·step, the switch state used for the step starting
    there, and the capacitor voltage and inductor current at that instant.

    Parameters
    ----------
    records : ndarray
        Structured array with SERIES_DTYPE
    vin : float
        Input voltage, used to scale the switch waveform
    """

    def __init__(self, records: np.ndarray, vin: float):
        self.records = records
        self.vin = vin

    @classmethod
    def allocate(cls, n_steps: int, step: float, vin: float) -> "TimeSeries":
        """Zeroed series of n_steps + 1 records with time[i] = i·step."""
        records = np.zeros(n_steps + 1, dtype=SERIES_DTYPE)
        records['time'] = np.arange(n_steps + 1, dtype=float) * step
        return cls(records, vin)

    def __len__(self) -> int:
        return len(self.records)

    @property
    def time(self) -> np.ndarray:
        return self.records['time']

    @property
    def closed(self) -> np.ndarray:
        return self.records['closed']

    @property
    def vc(self) -> np.ndarray:
        return self.records['vc']

    @property
    def il(self) -> np.ndarray:
        return self.records['il']

    @property
    def switch(self) -> np.ndarray:
        """Switch waveform scaled to the input voltage (0 or Vin)."""
        return self.records['closed'] * self.vin

    def state(self, index: int) -> CircuitState:
        return CircuitState(float(self.vc[index]), float(self.il[index]))

    def as_dict(self) -> Dict[str, np.ndarray]:
        return {
            't': self.time,
            'switch': self.switch,
            'vc': self.vc,
            'il': self.il,
        }

    def to_csv(self, path: Union[str, Path]) -> None:
        """Write time, switch, vc and il columns to a CSV file."""
        data = np.column_stack([self.time, self.switch, self.vc, self.il])
        np.savetxt(path, data, delimiter=',', header='time,switch,vc,il',
                   comments='')


@dataclass
class SimulationResult:
    """Outcome of one simulation run."""
    params: ConverterParameters
    series: TimeSeries
    v_steady: float       # Trapezoidal average of vc over the window [V]
    window_area: float    # Accumulated area before division [V·s]

    def summary_line(self) -> str:
        return (f"D={self.params.duty_ratio:.2f}: Vsteady={self.v_steady:.6g} V "
                f"over [{self.params.sampling_start:g}, {self.params.horizon:g}] s, "
                f"{len(self.series)} samples")


def _check_finite(series: TimeSeries, v_steady: float) -> None:
    bad = np.flatnonzero(~(np.isfinite(series.vc) & np.isfinite(series.il)))
    if bad.size:
        i = int(bad[0])
        raise NumericOverflowError(
            f"State became non-finite at t={series.time[i]:g} s (index {i}): "
            f"vc={series.vc[i]}, il={series.il[i]}"
        )
    if not np.isfinite(v_steady):
        raise NumericOverflowError(f"Steady-state value is non-finite: {v_steady}")


def simulate(params: ConverterParameters, coupled: bool = True) -> SimulationResult:
    """
    Run one fixed-horizon simulation.

    Parameters
    ----------
    params : ConverterParameters
        Validated converter parameters
    coupled : bool
        Stage coupling of the RK4 step (see integrator.rk4_increments)

    Returns
    -------
    SimulationResult

    Raises
    ------
    NumericOverflowError
        If any state value or the steady-state average is non-finite.
    """
    n = params.n_steps
    step = params.step
    period = params.period
    duty = params.duty_ratio
    vin = params.vin
    start = params.sampling_start

    logger.info("Simulating %d steps of %g s (%s)", n, step, params)

    series = TimeSeries.allocate(n, step, vin)
    closed_out = series.closed
    vc_out = series.vc
    il_out = series.il

    vc = 0.0
    il = 0.0
    total = 0.0
    for i in range(n):
        now = i * step
        state = switch_state(now, period, duty)
        closed_out[i] = state.is_closed

        il = diode_clamp(il, state)
        il_out[i] = il

        d_vc, d_il = rk4_increments(vc, vin, il, step, state, params, coupled)
        vc_next = vc + d_vc
        il_next = il + d_il
        vc_out[i + 1] = vc_next
        il_out[i + 1] = il_next

        if now >= start:
            total += trapezoid_area(vc_next, vc, step)

        vc = vc_next
        il = il_next

    closed_out[n] = evaluate(n * step, period, duty)

    v_steady = average(total, start, params.horizon)
    _check_finite(series, v_steady)
    logger.debug("Steady-state output %.6g V", v_steady)

    return SimulationResult(params=params, series=series,
                            v_steady=v_steady, window_area=total)
