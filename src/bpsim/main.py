import argparse
import sys

import toffee
from dotenv import dotenv_values, find_dotenv

from bpsim.customtypes import PredictorConfig
from bpsim.env import TraceRunner
from bpsim.models import make_predictor
from bpsim.parameter import BIMODAL, ENV_LOG_FILE, ENV_LOG_LEVEL, GSHARE, HYBRID
from bpsim.reporter import format_command, format_report
from bpsim.util import ConfigurationError
from bpsim.util.executor import Executor, TraceFormatError

__all__ = ["main", "build_parser"]

LOG_LEVELS = {
    "DEBUG": toffee.DEBUG,
    "INFO": toffee.INFO,
    "WARNING": toffee.WARNING,
    "ERROR": toffee.ERROR,
    "CRITICAL": toffee.CRITICAL,
}


def build_parser(env: dict = None) -> argparse.ArgumentParser:
    env = env or {}
    parser = argparse.ArgumentParser(
        prog="bpsim",
        description="Replay a branch trace against a bimodal, gshare or hybrid predictor.",
    )
    parser.add_argument(
        "--log-level", type=str.upper, choices=LOG_LEVELS,
        default=(env.get(ENV_LOG_LEVEL) or "WARNING").upper(),
        help=f"Logging level (default: ${ENV_LOG_LEVEL} or WARNING)",
    )
    parser.add_argument(
        "--log-file", default=env.get(ENV_LOG_FILE) or None,
        help=f"Also write logs to this file (default: ${ENV_LOG_FILE})",
    )

    sub = parser.add_subparsers(dest="name", metavar="predictor", required=True)

    p = sub.add_parser(BIMODAL, help="PC-indexed 2-bit counters")
    p.add_argument("m2", type=int, metavar="M2", help="log2 of the bimodal table size")
    p.add_argument("trace", help="trace file")

    p = sub.add_parser(GSHARE, help="PC XOR global history indexed 2-bit counters")
    p.add_argument("m1", type=int, metavar="M1", help="log2 of the gshare table size")
    p.add_argument("n", type=int, metavar="N", help="global history length in bits")
    p.add_argument("trace", help="trace file")

    p = sub.add_parser(HYBRID, help="gshare and bimodal chosen per branch by a chooser table")
    p.add_argument("k", type=int, metavar="K", help="log2 of the chooser table size")
    p.add_argument("m1", type=int, metavar="M1", help="log2 of the gshare table size")
    p.add_argument("n", type=int, metavar="N", help="global history length in bits")
    p.add_argument("m2", type=int, metavar="M2", help="log2 of the bimodal table size")
    p.add_argument("trace", help="trace file")

    return parser


def config_from_args(args: argparse.Namespace) -> PredictorConfig:
    return PredictorConfig(
        name=args.name,
        m2=getattr(args, "m2", 0),
        m1=getattr(args, "m1", 0),
        n=getattr(args, "n", 0),
        k=getattr(args, "k", 0),
    )


def main(argv=None) -> int:
    parser = build_parser(dotenv_values(find_dotenv(usecwd=True)))
    args = parser.parse_args(argv)
    if args.log_level not in LOG_LEVELS:
        parser.error(f"{ENV_LOG_LEVEL}={args.log_level!r} is not one of {', '.join(LOG_LEVELS)}")
    toffee.setup_logging(log_level=LOG_LEVELS[args.log_level], log_file=args.log_file)

    config = config_from_args(args)
    try:
        predictor = make_predictor(config)
    except ConfigurationError as e:
        parser.error(str(e))

    print(format_command(parser.prog, config, args.trace), end="")
    runner = TraceRunner(predictor)
    try:
        stats = runner.run(Executor(args.trace))
    except OSError as e:
        toffee.error(f"Unable to open file {args.trace}: {e}")
        return 1
    except TraceFormatError as e:
        toffee.error(f"Malformed trace: {e}")
        return 1

    print(format_report(predictor, stats), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
