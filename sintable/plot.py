import numpy as np
import matplotlib.pyplot as plt

from .config import Strategy, check_limits
from .pipeline import reconstruct
from .table import build_table


def check_plot_limits(phase_width, output_width):
    """Raise unless both the direct and the quarter table can be built."""
    for strategy in Strategy:
        check_limits(strategy, phase_width, output_width)


def plot_quadrants(phase_width, output_width, filename=None):
    """Plot the four quadrants rebuilt from the quarter table.

    The direct table of the same size is drawn underneath for comparison.
    """
    direct = build_table(Strategy.DIRECT, phase_width, output_width)
    quarter = build_table(Strategy.QUARTER, phase_width, output_width)
    full = reconstruct(quarter, phase_width)

    phases = np.arange(1 << phase_width)
    n = len(quarter)

    fig, ax = plt.subplots(figsize=(11, 6))
    ax.plot(phases, direct, label='Direct table', color='lightgray')
    for q, marker in enumerate(['o', 'x', '*', '.']):
        ax.plot(phases[q * n:(q + 1) * n], full[q * n:(q + 1) * n],
                label='Quadrant %d' % (q + 1), marker=marker, linestyle='')

    ax.set_title('Quarter-wave reconstruction, PW=%d OW=%d'
                 % (phase_width, output_width))
    ax.set_xlabel('Phase')
    ax.set_ylabel('Sine Value')
    ax.grid(True)
    ax.legend()
    if filename is not None:
        fig.savefig(filename)
    return fig
