import numpy as np
import pytest

from sintable import (PreconditionError, ResourceLimitError, SineTableConfig,
                      Strategy, build_table)
from sintable.config import check_limits


@pytest.mark.parametrize("phase_width", [1, 4, 8, 12])
@pytest.mark.parametrize("output_width", [2, 8, 16, 24])
def test_direct_length_and_range(phase_width, output_width):
    tbl = build_table(Strategy.DIRECT, phase_width, output_width)
    maxv = (1 << (output_width - 1)) - 1
    assert len(tbl) == 1 << phase_width
    assert tbl.min() >= -maxv
    assert tbl.max() <= maxv


@pytest.mark.parametrize("phase_width", [3, 4, 8, 14])
@pytest.mark.parametrize("output_width", [2, 8, 16, 32])
def test_quarter_length_and_range(phase_width, output_width):
    tbl = build_table(Strategy.QUARTER, phase_width, output_width)
    maxv = (1 << (output_width - 1)) - 1
    assert len(tbl) == 1 << (phase_width - 2)
    assert tbl.min() >= 0
    assert tbl.max() <= maxv


def test_direct_scenario():
    tbl = build_table(Strategy.DIRECT, 4, 8)
    assert len(tbl) == 16
    assert tbl[0] == 0
    assert tbl[4] == 127
    assert tbl[12] == -127


def test_quarter_scenario():
    tbl = build_table(Strategy.QUARTER, 4, 8)
    assert len(tbl) == 4
    assert tbl[0] == 24
    assert list(tbl) == [24, 70, 105, 124]


def test_truncates_toward_zero():
    tbl = build_table(Strategy.DIRECT, 4, 8)
    # 127 * sin(pi/8) = 48.6, rounding would give 49
    assert tbl[1] == 48
    assert tbl[9] == -48
    assert tbl[2] == 89


def test_deterministic():
    a = build_table(Strategy.QUARTER, 10, 16)
    b = build_table(Strategy.QUARTER, 10, 16)
    assert a.dtype == np.int64
    assert a.tobytes() == b.tobytes()


def test_direct_limits():
    check_limits(Strategy.DIRECT, 23, 16)
    SineTableConfig(23, 16).validate()
    with pytest.raises(ResourceLimitError, match="greater than 16M"):
        build_table(Strategy.DIRECT, 24, 16)
    with pytest.raises(PreconditionError):
        build_table(Strategy.DIRECT, 0, 16)


def test_quarter_limits():
    assert len(build_table(Strategy.QUARTER, 3, 8)) == 2
    check_limits(Strategy.QUARTER, 25, 16)
    with pytest.raises(PreconditionError):
        build_table(Strategy.QUARTER, 2, 8)
    with pytest.raises(ResourceLimitError):
        build_table(Strategy.QUARTER, 26, 8)


@pytest.mark.parametrize("output_width", [0, 1, 55, 64])
def test_output_width_limits(output_width):
    with pytest.raises(PreconditionError):
        build_table(Strategy.DIRECT, 4, output_width)


@pytest.mark.parametrize("strategy", list(Strategy))
def test_widest_output_stays_in_range(strategy):
    maxv = (1 << 53) - 1
    tbl = build_table(strategy, 8, 54)
    assert tbl.max() <= maxv
    assert tbl.min() >= -maxv
    if strategy is Strategy.DIRECT:
        assert tbl[64] == maxv
        assert tbl[192] == -maxv


def test_config_derived_values():
    config = SineTableConfig(10, 12, strategy=Strategy.QUARTER)
    assert config.max_value == 2047
    assert config.table_bits == 8
    assert SineTableConfig(10, 12).table_bits == 10
