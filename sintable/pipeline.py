"""Cycle models of the generated lookup modules.

Every register of the emitted Verilog is a field of a small state record.
``step`` applies one rising clock edge and returns ``(o_val, o_aux)`` as
they read right after that edge.
"""

from dataclasses import dataclass

import numpy as np

from .config import ResetMode


def fold(phase, phase_width):
    """Map a phase word onto ``(negate, index)`` of the quarter table.

    Works on plain ints as well as numpy arrays of phases.
    """
    mask = (1 << (phase_width - 2)) - 1
    negate = (phase >> (phase_width - 1)) & 1
    quad = (phase >> (phase_width - 2)) & 1
    # complement the sub-index in the descending half of each half period
    index = (phase & mask) ^ (quad * mask)
    return negate, index


def reconstruct(quarter, phase_width):
    """Expand a quarter table into the full period the pipeline produces."""
    negate, index = fold(np.arange(1 << phase_width), phase_width)
    values = np.asarray(quarter)[index]
    return np.where(negate == 1, -values, values)


@dataclass(frozen=True)
class DirectState:
    o_val: int = 0
    o_aux: int = 0


@dataclass(frozen=True)
class QuarterState:
    negate0: int = 0
    negate1: int = 0
    index: int = 0
    tblvalue: int = 0
    o_val: int = 0
    aux0: int = 0
    aux1: int = 0
    o_aux: int = 0


class DirectLookup(object):
    def __init__(self, table, reset_mode=ResetMode.NONE, with_aux=False):
        self.table = table
        self.reset_mode = reset_mode
        self.with_aux = with_aux
        self.state = DirectState()

    def step(self, phase, ce=True, reset=False, aux=0):
        # ``reset`` means asserted, whatever the polarity of the port
        if reset and self.reset_mode is not ResetMode.NONE:
            self.state = DirectState()
        elif ce:
            self.state = DirectState(
                o_val=int(self.table[phase]),
                o_aux=aux if self.with_aux else 0)
        return self.state.o_val, self.state.o_aux


class QuarterPipeline(object):
    """Fold, fetch and apply stages of the quarter-wave module.

    A phase presented on one step leaves ``o_val`` two steps later, and
    the auxiliary bit presented with it leaves ``o_aux`` on the same step.
    """

    def __init__(self, table, phase_width, reset_mode=ResetMode.NONE,
                 with_aux=False):
        self.table = table
        self.phase_width = phase_width
        self.reset_mode = reset_mode
        self.with_aux = with_aux
        self.state = QuarterState()

    def step(self, phase, ce=True, reset=False, aux=0):
        s = self.state
        if reset and self.reset_mode is not ResetMode.NONE:
            self.state = QuarterState()
        elif ce:
            negate, index = fold(phase, self.phase_width)
            self.state = QuarterState(
                negate0=negate,
                negate1=s.negate0,
                index=index,
                tblvalue=int(self.table[s.index]),
                o_val=-s.tblvalue if s.negate1 else s.tblvalue,
                aux0=aux if self.with_aux else 0,
                aux1=s.aux0,
                o_aux=s.aux1)
        return self.state.o_val, self.state.o_aux
