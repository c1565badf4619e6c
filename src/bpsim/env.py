from typing import Iterable

import toffee

from bpsim.customtypes import BranchEvent, RunStatistics
from bpsim.models import Predictor

__all__ = ["TraceRunner"]


class TraceRunner:
    """Feed branch events to one predictor, strictly in order, and count mispredictions."""

    def __init__(self, predictor: Predictor, stats: RunStatistics = None):
        self.predictor = predictor
        self.stats = stats if stats is not None else RunStatistics()

    def step(self, event: BranchEvent) -> bool:
        correct = self.predictor.predict_and_update(event.pc, event.taken)
        self.stats.record(correct)
        return correct

    def run(self, events: Iterable[BranchEvent]) -> RunStatistics:
        toffee.info(f"Running {self.predictor.name} predictor")
        for event in events:
            self.step(event)
        toffee.info(
            f"Finished {self.predictor.name}: predictions: {self.stats.predictions}, "
            f"mispredictions: {self.stats.mispredictions}"
        )
        return self.stats
