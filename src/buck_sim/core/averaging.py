"""
Steady-state averaging of the capacitor voltage.

The steady-state output is the trapezoidal time-average of vc over the
trailing window [sampling_start, horizon]:

    V_steady = Σ (vc[i+1] + vc[i])·h/2 / (horizon - sampling_start)

summed over every step whose start time is at or after sampling_start.
"""

import numpy as np

from .errors import InvalidSamplingWindow


def trapezoid_area(v_next: float, v_now: float, step: float) -> float:
    """Area of one trapezoid of width ``step``."""
    return 0.5 * (v_next + v_now) * step


def average(total: float, sampling_start: float, horizon: float) -> float:
    """Divide an accumulated area by the window length."""
    window = horizon - sampling_start
    if sampling_start < 0 or window <= 0:
        raise InvalidSamplingWindow(
            f"Empty averaging window [{sampling_start:g}, {horizon:g}] s"
        )
    return total / window


def window_area(time: np.ndarray, values: np.ndarray, step: float,
                sampling_start: float) -> float:
    """
    Trapezoidal area of ``values`` over steps starting at or after
    ``sampling_start``.
    """
    start = time[:-1] >= sampling_start
    areas = 0.5 * (values[1:] + values[:-1]) * step
    return float(np.sum(areas[start]))


def window_average(time: np.ndarray, values: np.ndarray, step: float,
                   sampling_start: float, horizon: float) -> float:
    """Steady-state average recomputed from a stored series."""
    return average(window_area(time, values, step, sampling_start),
                   sampling_start, horizon)
