from sintable import ResetMode, Strategy, build_table
from sintable.pipeline import (DirectLookup, QuarterPipeline, QuarterState,
                               reconstruct)


def test_direct_reset_then_aux_follows_input():
    table = build_table(Strategy.DIRECT, 4, 8)
    dut = DirectLookup(table, ResetMode.SYNC, with_aux=True)
    assert dut.step(4, aux=1) == (127, 1)

    assert dut.step(4, aux=1, reset=True) == (0, 0)
    assert dut.step(4, aux=1) == (127, 1)
    assert dut.step(12, aux=0) == (-127, 0)


def test_direct_reset_beats_clock_enable():
    table = build_table(Strategy.DIRECT, 4, 8)
    dut = DirectLookup(table, ResetMode.ASYNC, with_aux=True)
    dut.step(4, aux=1)
    assert dut.step(4, ce=False, reset=True, aux=1) == (0, 0)


def test_direct_clock_enable_holds():
    table = build_table(Strategy.DIRECT, 4, 8)
    dut = DirectLookup(table)
    dut.step(4)
    assert dut.step(12, ce=False) == (127, 0)
    # no reset port, the request is ignored
    assert dut.step(12, ce=False, reset=True) == (127, 0)


def test_quarter_latency_matches_aux():
    pw = 5
    table = build_table(Strategy.QUARTER, pw, 10)
    full = reconstruct(table, pw)
    dut = QuarterPipeline(table, pw, with_aux=True)

    phases = [3, 20, 9, 0, 0]
    auxes = [1, 0, 1, 0, 0]
    outputs = [dut.step(p, aux=a) for p, a in zip(phases, auxes)]
    for i in range(3):
        assert outputs[i + 2] == (full[phases[i]], auxes[i])
    assert outputs[0] == (0, 0)


def test_quarter_full_period():
    pw = 6
    table = build_table(Strategy.QUARTER, pw, 12)
    full = reconstruct(table, pw)
    dut = QuarterPipeline(table, pw)
    outputs = [dut.step(p)[0] for p in list(range(1 << pw)) + [0, 0]]
    assert outputs[2:] == list(full)


def test_quarter_clock_enable_stalls_pipeline():
    pw = 4
    table = build_table(Strategy.QUARTER, pw, 8)
    full = reconstruct(table, pw)
    dut = QuarterPipeline(table, pw, with_aux=True)
    dut.step(9, aux=1)
    held = dut.state
    dut.step(2, ce=False, aux=0)
    assert dut.state == held
    dut.step(0)
    assert dut.step(0) == (full[9], 1)


def test_quarter_reset_clears_pipeline():
    pw = 4
    table = build_table(Strategy.QUARTER, pw, 8)
    full = reconstruct(table, pw)
    dut = QuarterPipeline(table, pw, ResetMode.SYNC, with_aux=True)

    # Fill the pipeline with negative samples
    for p in (9, 10, 11):
        dut.step(p, aux=1)
    assert dut.step(0, reset=True, aux=1) == (0, 0)
    assert dut.state == QuarterState()

    outputs = [dut.step(p) for p in (5, 0, 0)]
    assert outputs[0] == (0, 0)
    assert outputs[1][1] == 0
    assert outputs[2] == (full[5], 0)
