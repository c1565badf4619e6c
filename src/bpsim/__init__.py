from bpsim.customtypes import BranchEvent, HybridMeta, PredictorConfig, RunStatistics
from bpsim.env import TraceRunner
from bpsim.models import (
    BimodalPredictor, GlobalHistory, GsharePredictor, HybridPredictor, Predictor, SaturatingCounterTable,
    make_predictor
)
from bpsim.util import ConfigurationError
from bpsim.util.executor import Executor, TraceFormatError

__all__ = [
    "BimodalPredictor",
    "BranchEvent",
    "ConfigurationError",
    "Executor",
    "GlobalHistory",
    "GsharePredictor",
    "HybridMeta",
    "HybridPredictor",
    "Predictor",
    "PredictorConfig",
    "RunStatistics",
    "SaturatingCounterTable",
    "TraceFormatError",
    "TraceRunner",
    "make_predictor",
]
