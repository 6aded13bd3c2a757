"""
Tests for the command line front end and plotting.

Run with: pytest tests/test_cli.py -v
"""

import matplotlib
matplotlib.use('Agg')

import matplotlib.pyplot as plt
import numpy as np
import pytest

from buck_sim.cli import build_parser, main
from buck_sim.core.parameters import ConverterParameters
from buck_sim.core.simulation import simulate
from buck_sim.plotting import format_duty_ratio, format_steady_state, plot_run

SHORT_RUN = ['--periods', '5', '--sampling-start', '2e-6']


class TestFormatting:
    """Test result label text."""

    def test_steady_state_label(self):
        assert format_steady_state(5.0) == "Vsteady = 5V"
        assert format_steady_state(-9.87654321) == "Vsteady = -9.87654V"

    def test_duty_ratio_label(self):
        assert format_duty_ratio(30) == "Duty Ratio = 30%"


class TestPlotting:
    """Test static rendering of a run."""

    def test_plot_run_traces(self, tmp_path):
        result = simulate(ConverterParameters(periods=5, sampling_start=2e-6))
        path = tmp_path / "run.png"

        fig = plot_run(result, save_path=path)

        ax = fig.axes[0]
        labels = [line.get_label() for line in ax.get_lines()]
        assert labels == ['Vsteady', 'Switch', 'Vc', 'Il']

        steady = ax.get_lines()[0]
        np.testing.assert_allclose(steady.get_ydata(), [result.v_steady] * 2)
        assert path.exists()

        plt.close(fig)


class TestCLI:
    """Test argument handling and exit codes."""

    def test_defaults_follow_parameters(self):
        args = build_parser().parse_args([])
        defaults = ConverterParameters()

        assert args.vin == defaults.vin
        assert args.duty_percent == 50
        assert args.periods == defaults.periods
        assert not args.uncoupled_stages

    def test_prints_steady_state(self, capsys):
        assert main(SHORT_RUN) == 0
        out = capsys.readouterr().out
        assert out.startswith("Vsteady = ")

    def test_duty_percent_maps_to_ratio(self, capsys):
        assert main(SHORT_RUN + ['--duty-percent', '0']) == 0
        assert capsys.readouterr().out.strip() == "Vsteady = 0V"

    def test_writes_csv_and_plot(self, tmp_path):
        csv_path = tmp_path / "run.csv"
        png_path = tmp_path / "run.png"

        assert main(SHORT_RUN + ['--csv', str(csv_path), '-o', str(png_path)]) == 0

        assert csv_path.read_text().startswith('time,switch,vc,il')
        assert png_path.exists()

    @pytest.mark.parametrize("argv, message", [
        (['--resistance', '0'], "Resistance"),
        (['--sampling-start', '1'], "Sampling start"),
        (['--step', '0'], "Time step"),
    ])
    def test_configuration_errors_exit_2(self, capsys, argv, message):
        assert main(argv) == 2
        assert message in capsys.readouterr().err
