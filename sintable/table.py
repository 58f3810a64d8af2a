import logging

import numpy as np

from .config import Strategy, check_limits

logger = logging.getLogger(__name__)


def build_table(strategy, phase_width, output_width):
    """Sample one period (or its first quadrant) of a sine wave.

    Entries are ``maxv * sin(ph)`` truncated toward zero, with
    ``maxv = 2**(output_width-1) - 1``.  Quarter tables are sampled at the
    centre of each phase bin so no sample falls on a symmetry boundary.
    """
    check_limits(strategy, phase_width, output_width)

    tbl_entries = 1 << phase_width
    maxv = (1 << (output_width - 1)) - 1

    if strategy is Strategy.QUARTER:
        k = np.arange(tbl_entries // 4)
        ph = 2.0 * np.pi * k / tbl_entries
        ph += np.pi / tbl_entries
    else:
        k = np.arange(tbl_entries)
        ph = 2.0 * np.pi * k / tbl_entries

    logger.debug("Building %s table: %d entries of %d bits",
                 strategy.value, len(k), output_width)
    return np.trunc(maxv * np.sin(ph)).astype(np.int64)
