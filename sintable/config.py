from dataclasses import dataclass
from enum import Enum

from .errors import PreconditionError, ResourceLimitError

# Largest phase widths accepted by each strategy, about 16M table words
MAX_DIRECT_PHASE_WIDTH = 23
MAX_QUARTER_PHASE_WIDTH = 25
# Quadrant bit, fold bit and at least one bit of sub-index
MIN_QUARTER_PHASE_WIDTH = 3
MIN_OUTPUT_WIDTH = 2
# maxv = 2**53 - 1 is the largest peak a float64 holds exactly
MAX_OUTPUT_WIDTH = 54

LIMIT_EXPLANATION = (
    "While this is an arbitrary limit, few FPGA's have this kind of block RAM.\n"
    "If you know what you are doing, the limit can be raised up to perhaps 30\n"
    "without much hassle.  Beyond that, be aware of integer overflow.")


class Strategy(Enum):
    DIRECT = "direct"
    QUARTER = "quarter"


class ResetMode(Enum):
    NONE = "none"
    SYNC = "sync"
    ASYNC = "async"

    @property
    def port(self):
        return {ResetMode.NONE: None,
                ResetMode.SYNC: "i_reset",
                ResetMode.ASYNC: "i_areset_n"}[self]

    @property
    def sensitivity(self):
        if self is ResetMode.ASYNC:
            return "posedge i_clk, negedge i_areset_n"
        return "posedge i_clk"

    @property
    def condition(self):
        return {ResetMode.NONE: None,
                ResetMode.SYNC: "i_reset",
                ResetMode.ASYNC: "!i_areset_n"}[self]


def check_limits(strategy, phase_width, output_width):
    """Raise if a table of this shape must not be generated.

    Runs before anything is allocated or written.
    """
    if strategy is Strategy.QUARTER:
        if phase_width < MIN_QUARTER_PHASE_WIDTH:
            raise PreconditionError(
                "A quarter-wave table needs at least %d phase bits, got %d"
                % (MIN_QUARTER_PHASE_WIDTH, phase_width))
        ceiling = MAX_QUARTER_PHASE_WIDTH
    else:
        if phase_width < 1:
            raise PreconditionError(
                "A sine table needs at least one phase bit, got %d" % phase_width)
        ceiling = MAX_DIRECT_PHASE_WIDTH
    if phase_width > ceiling:
        raise ResourceLimitError(
            "Requested table size is greater than 16M (%d phase bits, %s tables"
            " stop at %d)\n\n%s" % (phase_width, strategy.value, ceiling,
                                    LIMIT_EXPLANATION))
    if not MIN_OUTPUT_WIDTH <= output_width <= MAX_OUTPUT_WIDTH:
        raise PreconditionError(
            "Output width must be between %d and %d bits, got %d"
            % (MIN_OUTPUT_WIDTH, MAX_OUTPUT_WIDTH, output_width))


@dataclass(frozen=True)
class SineTableConfig:
    phase_width: int
    output_width: int
    reset_mode: ResetMode = ResetMode.NONE
    with_aux: bool = False
    strategy: Strategy = Strategy.DIRECT

    @property
    def max_value(self):
        return (1 << (self.output_width - 1)) - 1

    @property
    def table_bits(self):
        # log2 of the number of stored entries
        if self.strategy is Strategy.QUARTER:
            return self.phase_width - 2
        return self.phase_width

    def validate(self):
        check_limits(self.strategy, self.phase_width, self.output_width)
        return self
