from typing import Union

from bpsim.customtypes import PredictorConfig
from bpsim.models.bimodal import BimodalPredictor
from bpsim.models.counter_table import SaturatingCounterTable
from bpsim.models.global_history import GlobalHistory
from bpsim.models.gshare import GsharePredictor
from bpsim.models.hybrid import HybridPredictor
from bpsim.parameter import BIMODAL, GSHARE, HYBRID, PREDICTOR_NAMES
from bpsim.util import ConfigurationError

__all__ = [
    "BimodalPredictor",
    "GlobalHistory",
    "GsharePredictor",
    "HybridPredictor",
    "Predictor",
    "SaturatingCounterTable",
    "make_predictor",
]

Predictor = Union[BimodalPredictor, GsharePredictor, HybridPredictor]


def make_predictor(config: PredictorConfig) -> Predictor:
    if config.name == BIMODAL:
        return BimodalPredictor(config.m2)
    if config.name == GSHARE:
        return GsharePredictor(config.m1, config.n)
    if config.name == HYBRID:
        return HybridPredictor(config.k, config.m1, config.n, config.m2)
    raise ConfigurationError(f"Unknown predictor {config.name!r}, expected one of {PREDICTOR_NAMES}")
