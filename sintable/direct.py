import logging
import os

from .config import Strategy, check_limits
from .hexfile import HexTablePersister
from .legal import PROJECT, legal, modulename
from .table import build_table
from .verilog import lookup_module

logger = logging.getLogger(__name__)

PURPOSE = (
    "This is a very simple sinewave table lookup approach\n"
    "to generating a sine wave.  It has the lowest latency\n"
    "among all sinewave generation alternatives.")


def direct_module(name, config):
    """Describe a one stage lookup module, ``o_val <= tbl[i_phase]``."""
    mod = lookup_module(name, config)

    mod.add_declaration("reg\t[(OW-1):0]\t\ttbl\t[0:((1<<PW)-1)];")
    mod.add_declaration()
    mod.add_declaration("initial\t$readmemh(\"%s.hex\", tbl);" % name)

    mod.add_clocked(["o_val <= tbl[i_phase];"], resets=["o_val <= 0;"])
    if config.with_aux:
        mod.add_clocked(["o_aux <= i_aux;"], resets=["o_aux <= 0;"])
    return mod


def sintable(fp, fname, config, project=PROJECT, persist=None):
    """Emit a direct lookup module to ``fp`` and persist its table.

    Returns the module name.
    """
    check_limits(Strategy.DIRECT, config.phase_width, config.output_width)
    if persist is None:
        persist = HexTablePersister(os.path.dirname(fname) or ".")

    name = modulename(fname)
    legal(fp, fname, project, PURPOSE)
    fp.write(direct_module(name, config).render())
    logger.debug("Emitted direct module %s", name)

    tbldata = build_table(Strategy.DIRECT, config.phase_width,
                          config.output_width)
    persist(name, config.output_width, config.phase_width, tbldata)
    return name
