from toffee.utils import LFSR_64

from bpsim import BranchEvent, PredictorConfig, TraceRunner, make_predictor
from bpsim.models import HybridPredictor

from checkpoints_hybrid import *


def rand_trace(seed: int, length: int, pcs: int = 16) -> list[BranchEvent]:
    lfsr = LFSR_64(seed)
    trace = []
    for _ in range(length):
        lfsr.step()
        r = lfsr.rand
        # a few loop-like branches that are mostly taken, the rest random
        pc = 0x400000 + ((r >> 8) % pcs) * 4
        taken = (r & 0x7) != 0 if pc & 0x4 else (r & 1) == 1
        trace.append(BranchEvent(pc, taken))
    return trace


def run(config: PredictorConfig, trace: list[BranchEvent]):
    predictor = make_predictor(config)
    stats = TraceRunner(predictor).run(trace)
    return stats, [table.values() for _, table in predictor.tables()]


def test_replay_is_deterministic():
    trace = rand_trace(0x1234, 3000)
    for config in (
        PredictorConfig("bimodal", m2=4),
        PredictorConfig("gshare", m1=6, n=3),
        PredictorConfig("hybrid", k=3, m1=6, n=3, m2=4),
    ):
        assert run(config, trace) == run(config, trace)


def test_independent_predictors_do_not_interfere():
    trace = rand_trace(0x99, 1000)
    config = PredictorConfig("gshare", m1=5, n=5)
    a, b = make_predictor(config), make_predictor(config)
    runner_a, runner_b = TraceRunner(a), TraceRunner(b)
    for event in trace:
        runner_a.step(event)
        runner_b.step(event)
    assert runner_a.stats == runner_b.stats
    assert a.table.values() == b.table.values()
    assert a.ghv.value == b.ghv.value
    assert run(config, trace) == (runner_a.stats, [a.table.values()])


def test_hybrid_chooser_coverage():
    probe = HybridProbe()
    group = get_coverage_group_of_hybrid(probe)
    hp = HybridPredictor(4, 8, 4, 4)

    for event in rand_trace(0xbeef, 4000):
        chooser_before = hp.chooser.values()
        meta = hp.resolve(event.pc, event.taken)
        probe.sample(meta)
        group.sample()

        moved = hp.chooser.read(meta.chooser_idx) != chooser_before[meta.chooser_idx]
        if meta.gshare_correct == meta.bimodal_correct:
            assert not moved
        assert hp.chooser.values()[:meta.chooser_idx] == chooser_before[:meta.chooser_idx]
        assert hp.chooser.values()[meta.chooser_idx + 1:] == chooser_before[meta.chooser_idx + 1:]

    assert group.is_all_covered(), str(group)
