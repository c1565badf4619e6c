from dataclasses import dataclass
from typing import NamedTuple

from bpsim.parameter import PREDICTOR_NAMES, BIMODAL, GSHARE, HYBRID
from bpsim.util import ConfigurationError

__all__ = ["BranchEvent", "HybridMeta", "PredictorConfig", "RunStatistics"]


class BranchEvent(NamedTuple):
    pc: int
    taken: bool


class HybridMeta(NamedTuple):
    """
    混合预测器一次预测的全部信息, 计数器值都是更新前的值
    """
    chooser_idx: int
    chooser_ctr: int
    gshare_idx: int
    gshare_taken: bool
    bimodal_idx: int
    bimodal_taken: bool
    use_gshare: bool
    taken: bool

    @property
    def predict_taken(self) -> bool:
        return self.gshare_taken if self.use_gshare else self.bimodal_taken

    @property
    def correct(self) -> bool:
        return self.predict_taken == self.taken

    @property
    def gshare_correct(self) -> bool:
        return self.gshare_taken == self.taken

    @property
    def bimodal_correct(self) -> bool:
        return self.bimodal_taken == self.taken


@dataclass(frozen=True)
class PredictorConfig:
    """Per-run predictor selection. Only the sizes the variant uses matter."""
    name: str
    m2: int = 0
    m1: int = 0
    n: int = 0
    k: int = 0

    @property
    def params(self) -> tuple[int, ...]:
        """Size parameters in command line order."""
        if self.name == BIMODAL:
            return (self.m2,)
        if self.name == GSHARE:
            return self.m1, self.n
        if self.name == HYBRID:
            return self.k, self.m1, self.n, self.m2
        raise ConfigurationError(f"Unknown predictor {self.name!r}, expected one of {PREDICTOR_NAMES}")


@dataclass
class RunStatistics:
    predictions: int = 0
    mispredictions: int = 0

    def record(self, correct: bool) -> None:
        self.predictions += 1
        if not correct:
            self.mispredictions += 1

    @property
    def misprediction_rate(self) -> float:
        """Percentage, 0.0 for an empty run."""
        if self.predictions == 0:
            return 0.0
        return self.mispredictions / self.predictions * 100
