from amaranth import *
from amaranth.lib.memory import Memory

from .config import ResetMode, Strategy
from .table import build_table


class _SineTable(Elaboratable):

    def __init__(self, config, strategy):
        config.validate()
        self.config = config

        # Clock enable and phase word
        self.ce = Signal()
        self.phase = Signal(config.phase_width)

        # Sample output
        self.val = Signal(signed(config.output_width))

        # Reset line, named after the port of the emitted module
        if config.reset_mode is ResetMode.SYNC:
            self.reset = Signal()
        elif config.reset_mode is ResetMode.ASYNC:
            self.areset_n = Signal(init=1)

        if config.with_aux:
            self.aux_in = Signal()
            self.aux_out = Signal()

        tbl = build_table(strategy, config.phase_width, config.output_width)
        self.lut = Memory(shape=signed(config.output_width), depth=len(tbl),
                          init=tbl.tolist())

    def clock_domain(self, m):
        mode = self.config.reset_mode
        if mode is ResetMode.NONE:
            cd = ClockDomain("sync", reset_less=True)
        else:
            cd = ClockDomain("sync", async_reset=mode is ResetMode.ASYNC)
        m.domains += cd
        if mode is ResetMode.SYNC:
            m.d.comb += cd.rst.eq(self.reset)
        elif mode is ResetMode.ASYNC:
            m.d.comb += cd.rst.eq(~self.areset_n)


class DirectSineTable(_SineTable):

    def __init__(self, config):
        super().__init__(config, Strategy.DIRECT)

    def elaborate(self, platform):
        m = Module()
        self.clock_domain(m)

        m.submodules.lut = self.lut
        read_port = self.lut.read_port(domain="comb")
        m.d.comb += read_port.addr.eq(self.phase)

        with m.If(self.ce):
            m.d.sync += self.val.eq(read_port.data)
            if self.config.with_aux:
                m.d.sync += self.aux_out.eq(self.aux_in)
        return m


class QuarterSineTable(_SineTable):

    def __init__(self, config):
        super().__init__(config, Strategy.QUARTER)

    def elaborate(self, platform):
        m = Module()
        self.clock_domain(m)
        pw = self.config.phase_width

        negate = Signal(2)
        index = Signal(pw - 2)
        tblvalue = Signal(signed(self.config.output_width))

        m.submodules.lut = self.lut
        read_port = self.lut.read_port(domain="comb")
        m.d.comb += read_port.addr.eq(index)

        with m.If(self.ce):
            # Clock #1: fold the phase onto the stored quadrant
            m.d.sync += negate[0].eq(self.phase[pw - 1])
            with m.If(self.phase[pw - 2]):
                m.d.sync += index.eq(~self.phase[:pw - 2])
            with m.Else():
                m.d.sync += index.eq(self.phase[:pw - 2])

            # Clock #2
            m.d.sync += [
                tblvalue.eq(read_port.data),
                negate[1].eq(negate[0]),
            ]

            # Output clock
            with m.If(negate[1]):
                m.d.sync += self.val.eq(-tblvalue)
            with m.Else():
                m.d.sync += self.val.eq(tblvalue)

            if self.config.with_aux:
                aux = Signal(2)
                m.d.sync += Cat(aux, self.aux_out).eq(Cat(self.aux_in, aux))
        return m
