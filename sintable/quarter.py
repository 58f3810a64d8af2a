import logging
import os

from .config import Strategy, check_limits
from .hexfile import HexTablePersister
from .legal import PROJECT, legal, modulename
from .table import build_table
from .verilog import lookup_module

logger = logging.getLogger(__name__)

PURPOSE = (
    "This is a touch more complicated than the simple sinewave table\n"
    "lookup approach to generating a sine wave.  This approach\n"
    "exploits the fact that a sinewave table has symmetry within it,\n"
    "enough symmetry so as to cut the necessary size of the table\n"
    "in fourths.  Generating the sinewave value, though, requires\n"
    "a little more logic to make this possible.")


def quarter_module(name, config):
    """Describe the folding lookup: a quarter table behind a 3 stage pipeline."""
    mod = lookup_module(name, config)

    mod.add_declaration(
        "reg\t[(OW-1):0]\t\tquartertable\t[0:((1<<(PW-2))-1)];")
    mod.add_declaration()
    mod.add_declaration(
        "initial\t$readmemh(\"%s.hex\", quartertable);" % name)
    mod.add_declaration()
    mod.add_declaration("reg\t[1:0]\tnegate;")
    mod.add_declaration("reg\t[(PW-3):0]\tindex;")
    mod.add_declaration("reg\t[(OW-1):0]\ttblvalue;")
    if config.with_aux:
        mod.add_declaration("reg\t[1:0]\taux;")

    mod.add_clocked([
        "// Clock #1",
        "negate[0] <= i_phase[(PW-1)];",
        "if (i_phase[(PW-2)])",
        "\tindex <= ~i_phase[(PW-3):0];",
        "else",
        "\tindex <=  i_phase[(PW-3):0];",
        "// Clock #2",
        "tblvalue <= quartertable[index];",
        "negate[1] <= negate[0];",
        "// Output Clock",
        "if (negate[1])",
        "\to_val <= -tblvalue;",
        "else",
        "\to_val <=  tblvalue;",
    ], resets=[
        "negate  <= 2'b00;",
        "index   <= 0;",
        "tblvalue<= 0;",
        "o_val   <= 0;",
    ])

    if config.with_aux:
        # aux[1:0] shadows the fold and fetch stages, o_aux the output stage
        mod.add_clocked(["{ o_aux, aux } <= { aux, i_aux };"],
                        resets=["{ o_aux, aux } <= 0;"])
    return mod


def quarterwav(fp, fname, config, project=PROJECT, persist=None):
    """Emit a quarter-wave lookup module to ``fp`` and persist its table.

    Returns the module name.
    """
    check_limits(Strategy.QUARTER, config.phase_width, config.output_width)
    if persist is None:
        persist = HexTablePersister(os.path.dirname(fname) or ".")

    name = modulename(fname)
    legal(fp, fname, project, PURPOSE)
    fp.write(quarter_module(name, config).render())
    logger.debug("Emitted quarter-wave module %s", name)

    tbldata = build_table(Strategy.QUARTER, config.phase_width,
                          config.output_width)
    persist(name, config.output_width, config.phase_width - 2, tbldata)
    return name
