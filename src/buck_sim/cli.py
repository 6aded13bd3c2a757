"""
Command line front end: run one simulation and report the steady state.

Examples:
  # Reference bench (D = 50 %)
  buck-sim

  # 30 % duty ratio, save the waveform plot
  buck-sim --duty-percent 30 -o run.png

  # Shorter run with a CSV dump of the series
  buck-sim --periods 50 --sampling-start 3e-5 --csv run.csv
"""

import argparse
import logging
import sys

from .core.errors import ConfigurationError, NumericOverflowError
from .core.parameters import ConverterParameters, duty_ratio_from_percent
from .core.simulation import simulate
from .plotting import format_steady_state, plot_run

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    defaults = ConverterParameters()
    parser = argparse.ArgumentParser(
        prog='buck-sim',
        description='Fixed-step RK4 simulation of a PWM-switched DC-DC converter',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__.split("\n", 2)[2],
    )

    parser.add_argument('--vin', type=float, default=defaults.vin,
                        help='Input voltage [V]')
    parser.add_argument('--inductance', type=float, default=defaults.inductance,
                        help='Inductance [H]')
    parser.add_argument('--capacitance', type=float, default=defaults.capacitance,
                        help='Capacitance [F]')
    parser.add_argument('--resistance', type=float, default=defaults.resistance,
                        help='Load resistance [Ohm]')
    parser.add_argument('--frequency', type=float, default=defaults.frequency,
                        help='Switching frequency [Hz]')
    parser.add_argument('--duty-percent', type=int,
                        default=round(defaults.duty_ratio * 100),
                        help='Duty ratio in percent, clamped to [0, 100]')
    parser.add_argument('--step', type=float, default=defaults.step,
                        help='Integration step [s]')
    parser.add_argument('--periods', type=int, default=defaults.periods,
                        help='Simulation horizon in switching periods')
    parser.add_argument('--sampling-start', type=float,
                        default=defaults.sampling_start,
                        help='Start of the steady-state window [s]')
    parser.add_argument('--uncoupled-stages', action='store_true',
                        help='Stage vc and il independently inside each RK4 step')
    parser.add_argument('-o', '--output', type=str, default=None,
                        help='Save waveform plot to file')
    parser.add_argument('--csv', type=str, default=None,
                        help='Save time, switch, vc and il columns to CSV')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Debug logging')
    return parser


def main(argv=None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    try:
        params = ConverterParameters(
            vin=args.vin,
            inductance=args.inductance,
            capacitance=args.capacitance,
            resistance=args.resistance,
            frequency=args.frequency,
            duty_ratio=duty_ratio_from_percent(args.duty_percent),
            step=args.step,
            periods=args.periods,
            sampling_start=args.sampling_start,
        )
        result = simulate(params, coupled=not args.uncoupled_stages)
    except (ConfigurationError, NumericOverflowError) as e:
        print(f"✗ ERROR: {e}", file=sys.stderr)
        return 2

    print(format_steady_state(result.v_steady))
    logger.info(result.summary_line())

    if args.csv:
        result.series.to_csv(args.csv)
        logger.info("Series written to %s", args.csv)

    if args.output:
        import matplotlib
        matplotlib.use('Agg')
        plot_run(result, save_path=args.output)
        logger.info("Figure saved to %s", args.output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
