import numpy as np
import pytest

from sintable import Strategy, build_table
from sintable.pipeline import fold, reconstruct


def test_fold_quadrants():
    # PW=4: two bits of quadrant, two bits of sub-index
    assert fold(0b0000, 4) == (0, 0)
    assert fold(0b0011, 4) == (0, 3)
    assert fold(0b0100, 4) == (0, 3)
    assert fold(0b0111, 4) == (0, 0)
    assert fold(0b1001, 4) == (1, 1)
    assert fold(0b1101, 4) == (1, 2)


def test_fold_arrays():
    negate, index = fold(np.arange(16), 4)
    assert list(negate) == [0] * 8 + [1] * 8
    assert list(index) == [0, 1, 2, 3, 3, 2, 1, 0] * 2


@pytest.mark.parametrize("phase_width", [3, 4, 7, 10, 14])
@pytest.mark.parametrize("output_width", [8, 12, 18])
def test_reconstruction_matches_offset_direct_table(phase_width, output_width):
    quarter = build_table(Strategy.QUARTER, phase_width, output_width)
    full = reconstruct(quarter, phase_width)
    assert len(full) == 1 << phase_width

    # A direct table with twice the resolution holds the bin centres at its
    # odd entries
    direct = build_table(Strategy.DIRECT, phase_width + 1, output_width)
    centres = direct[1::2]
    assert np.abs(full - centres).max() <= 1


def test_reconstruction_symmetry():
    quarter = build_table(Strategy.QUARTER, 8, 16)
    full = reconstruct(quarter, 8)
    n = len(quarter)
    assert list(full[:n]) == list(quarter)
    assert list(full[n:2 * n]) == list(quarter[::-1])
    assert list(full[2 * n:]) == list(-full[:2 * n])
