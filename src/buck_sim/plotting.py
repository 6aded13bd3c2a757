"""
Static rendering of a simulation run.

Draws the steady-state reference line over [0, horizon] together with the
switch waveform, capacitor voltage and inductor current on one set of axes.
"""

from pathlib import Path
from typing import Optional, Tuple, Union

from .core.simulation import SimulationResult


def format_steady_state(v_steady: float) -> str:
    """Label text for the steady-state output voltage."""
    return f"Vsteady = {v_steady:.6g}V"


def format_duty_ratio(percent: int) -> str:
    """Label text for the duty-ratio control."""
    return f"Duty Ratio = {percent}%"


def plot_run(result: SimulationResult,
             save_path: Optional[Union[str, Path]] = None,
             figsize: Tuple[float, float] = (10, 6),
             ax=None):
    """
    Plot one simulation run.

    Parameters
    ----------
    result : SimulationResult
        Output of simulate()
    save_path : str or Path, optional
        Save figure to file
    figsize : tuple
        Figure size, used when no axes are given
    ax : matplotlib Axes, optional
        Axes to draw into

    Returns
    -------
    matplotlib Figure
    """
    import matplotlib.pyplot as plt

    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    series = result.series
    horizon = result.params.horizon
    t_us = series.time * 1e6

    ax.plot([0.0, horizon * 1e6], [result.v_steady, result.v_steady],
            color='green', linewidth=1.0, label='Vsteady')
    ax.plot(t_us, series.switch, linewidth=0.6, label='Switch')
    ax.plot(t_us, series.vc, color='red', linewidth=0.8, label='Vc')
    ax.plot(t_us, series.il, color='black', linewidth=0.8, label='Il')

    ax.set_xlabel("Time (µs)")
    ax.set_title(f"{format_steady_state(result.v_steady)}, "
                 f"{format_duty_ratio(round(result.params.duty_ratio * 100))}",
                 fontsize=10)
    ax.legend(loc='upper right', fontsize=8)
    ax.grid(True, alpha=0.3)
    fig.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches='tight')

    return fig
