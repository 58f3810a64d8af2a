import argparse
import logging
import sys

import matplotlib.pyplot as plt

from .config import ResetMode, SineTableConfig, Strategy
from .errors import SinTableError
from .generate import generate
from .legal import PROJECT
from .plot import check_plot_limits, plot_quadrants

logger = logging.getLogger("sintable")


def parse_args(args):
    parser = argparse.ArgumentParser(
        prog="sintable",
        description="Generates table based sinewave lookup modules in Verilog")
    parser.add_argument("-o", "--output", metavar="path", required=True,
                        help="Verilog file to write, the table lands next to it")
    parser.add_argument("-p", "--phase-bits", type=int, default=8,
                        help="number of bits in the input phase")
    parser.add_argument("-w", "--output-bits", type=int, default=16,
                        help="number of bits in each output sample")
    parser.add_argument("-q", "--quarter", action="store_true",
                        help="store a quarter wave and rebuild the rest")
    parser.add_argument("--reset", choices=[m.value for m in ResetMode],
                        default=ResetMode.NONE.value,
                        help="reset style of the generated module")
    parser.add_argument("--aux", action="store_true",
                        help="carry an auxiliary bit alongside each sample")
    parser.add_argument("--project", default=PROJECT,
                        help="project name for the file header")
    parser.add_argument("--plot", metavar="png",
                        help="also plot the quarter-wave reconstruction")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(args)


def main(args=None):
    args = parse_args(sys.argv[1:] if args is None else args)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s: %(message)s")

    config = SineTableConfig(
        phase_width=args.phase_bits,
        output_width=args.output_bits,
        reset_mode=ResetMode(args.reset),
        with_aux=args.aux,
        strategy=Strategy.QUARTER if args.quarter else Strategy.DIRECT)

    try:
        # the plot needs both tables, check them before any file is written
        if args.plot:
            check_plot_limits(args.phase_bits, args.output_bits)
        name = generate(config, args.output, project=args.project)
        if args.plot:
            fig = plot_quadrants(args.phase_bits, args.output_bits, args.plot)
            plt.close(fig)
    except SinTableError as e:
        logger.error("%s", e)
        return 1

    print("Wrote module %s to %s" % (name, args.output))
    return 0
