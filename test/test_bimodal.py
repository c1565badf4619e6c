import pytest

from bpsim import BranchEvent, ConfigurationError, TraceRunner
from bpsim.models import BimodalPredictor
from bpsim.models.bimodal import get_bimodal_idx


def test_index_skips_alignment_bits():
    assert get_bimodal_idx(0x0, 2) == 0
    assert get_bimodal_idx(0x3, 2) == 0
    assert get_bimodal_idx(0x4, 2) == 1
    assert get_bimodal_idx(0x8, 2) == 2
    assert get_bimodal_idx(0x10, 2) == 0
    assert get_bimodal_idx(0xdeadbeef, 0) == 0


def test_trace_scenario():
    bp = BimodalPredictor(2)
    trace = [
        BranchEvent(0x0, True),
        BranchEvent(0x4, False),
        BranchEvent(0x0, True),
        BranchEvent(0x8, True),
    ]
    stats = TraceRunner(bp).run(trace)

    assert stats.predictions == 4
    assert stats.mispredictions == 1
    assert f"{stats.misprediction_rate:.2f}" == "25.00"
    assert bp.table.read(0) == 3
    assert bp.table.read(1) == 1
    assert bp.table.values() == [3, 1, 3, 2]


def test_predict_does_not_train():
    bp = BimodalPredictor(3)
    assert bp.predict(0x1c)
    assert bp.table.values() == [2] * 8


def test_learns_not_taken_branch():
    bp = BimodalPredictor(4)
    results = [bp.predict_and_update(0x40, False) for _ in range(4)]
    assert results == [False, True, True, True]
    assert bp.table.read(0) == 0
    assert bp.tables() == [("BIMODAL", bp.table)]


@pytest.mark.parametrize("m2", [-1, 31, 2.0, True])
def test_bad_size_rejected(m2):
    with pytest.raises(ConfigurationError):
        BimodalPredictor(m2)
