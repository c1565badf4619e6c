from bpsim.customtypes import PredictorConfig, RunStatistics
from bpsim.models import Predictor

__all__ = ["format_command", "format_contents", "format_report"]


def format_command(prog: str, config: PredictorConfig, trace_file) -> str:
    params = " ".join(str(p) for p in config.params)
    return f"COMMAND\n{prog} {config.name} {params} {trace_file}\n"


def format_contents(predictor: Predictor) -> str:
    lines = []
    for label, table in predictor.tables():
        lines.append(f"FINAL {label} CONTENTS")
        lines.extend(f"{i}      {v}" for i, v in enumerate(table.values()))
    return "\n".join(lines) + "\n"


def format_report(predictor: Predictor, stats: RunStatistics) -> str:
    return (
        "OUTPUT\n"
        f"Number of predictions: {stats.predictions}\n"
        f"Number of mispredictions: {stats.mispredictions}\n"
        f"Misprediction rate: {stats.misprediction_rate:.2f}%\n"
    ) + format_contents(predictor)
