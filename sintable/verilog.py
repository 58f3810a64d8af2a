from .config import ResetMode


class Port(object):
    def __init__(self, name, direction="input", kind="wire", width=None):
        self.name = name
        self.direction = direction
        self.kind = kind
        self.width = width

    def signature(self):
        return (self.direction, self.kind, self.width)


class ClockedBlock(object):
    """One ``always`` block: reset statements and clock-enabled statements."""

    def __init__(self, body, resets=()):
        self.body = list(body)
        self.resets = list(resets)


def _suite(stmts):
    if len(stmts) == 1:
        return ["\t\t" + stmts[0]]
    return ["\tbegin"] + ["\t\t" + s for s in stmts] + ["\tend"]


class VerilogModule(object):
    """Structured description of a clocked lookup module.

    Ports, parameters, declarations and clocked blocks are collected first
    and only turned into text by :meth:`render`, so the reset style and the
    optional auxiliary channel are decided by data rather than by scattered
    output calls.
    """

    def __init__(self, name, reset_mode=ResetMode.NONE):
        self.name = name
        self.reset_mode = reset_mode
        self.ports = []
        self.parameters = []
        self.declarations = []
        self.blocks = []

    def add_port(self, name, direction="input", kind="wire", width=None):
        self.ports.append(Port(name, direction, kind, width))

    def add_reset_port(self):
        if self.reset_mode.port is not None:
            self.add_port(self.reset_mode.port)

    def add_parameter(self, name, value, comment):
        self.parameters.append((name, value, comment))

    def add_declaration(self, text=""):
        self.declarations.append(text)

    def add_clocked(self, body, resets=()):
        self.blocks.append(ClockedBlock(body, resets))

    @property
    def port_names(self):
        return [p.name for p in self.ports]

    def _render_parameters(self):
        lines = []
        last = len(self.parameters) - 1
        for i, (name, value, comment) in enumerate(self.parameters):
            lead = "\tparameter\t" if i == 0 else "\t\t\t"
            sep = ";" if i == last else ","
            lines.append("%s%s =%2d%s // %s" % (lead, name, value, sep, comment))
        return lines

    def _render_ports(self):
        # Adjacent ports of the same type share one declaration
        groups = []
        for port in self.ports:
            if groups and groups[-1][0].signature() == port.signature():
                groups[-1].append(port)
            else:
                groups.append([port])

        lines = []
        for group in groups:
            first = group[0]
            lines.append("\t%s\t%s\t%s\t%s;" % (
                first.direction, first.kind, first.width or "\t",
                ", ".join(p.name for p in group)))
        return lines

    def _render_block(self, block):
        lines = ["\talways @(%s)" % self.reset_mode.sensitivity]
        enable = "if (i_ce)"
        if self.reset_mode is not ResetMode.NONE and block.resets:
            lines.append("\tif (%s)" % self.reset_mode.condition)
            resets = _suite(block.resets)
            if resets[-1] == "\tend":
                resets[-1] = "\tend else " + enable
            else:
                resets.append("\telse " + enable)
            lines.extend(resets)
        else:
            lines.append("\t" + enable)
        lines.extend(_suite(block.body))
        return lines

    def render(self):
        lines = ["module\t%s(%s);" % (self.name, ", ".join(self.port_names)),
                 "\t//"]
        lines.extend(self._render_parameters())
        lines.append("\t//")
        lines.extend(self._render_ports())
        lines.append("")
        lines.extend(("\t" + d) if d else "" for d in self.declarations)
        for block in self.blocks:
            lines.append("")
            lines.extend(self._render_block(block))
        lines.append("endmodule")
        return "\n".join(lines) + "\n"


def lookup_module(name, config):
    """Start a module with the ports and parameters every lookup shares."""
    mod = VerilogModule(name, config.reset_mode)
    mod.add_port("i_clk")
    mod.add_reset_port()
    mod.add_port("i_ce")
    mod.add_port("i_phase", width="[(PW-1):0]")
    if config.with_aux:
        mod.add_port("i_aux")
    mod.add_port("o_val", "output", "reg", "[(OW-1):0]")
    if config.with_aux:
        mod.add_port("o_aux", "output", "reg")

    mod.add_parameter("PW", config.phase_width,
                      "Number of bits in the input phase")
    mod.add_parameter("OW", config.output_width, "Number of output bits")
    return mod
