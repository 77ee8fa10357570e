"""
Command-line entry point: the one place failures become an exit code.
"""

import argparse
import logging
import sys

from .config import DEFAULT_LOG_LEVEL, DEFAULT_MODEL_PATH, LOG_LEVELS, SmokeTestConfig
from .errors import SmokeTestError
from .smoke_test import FAILURE_BANNER, run_smoke_test

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Load an ONNX/ORT model and run one inference pass on CPU"
    )
    parser.add_argument(
        "--model",
        type=str,
        default=str(DEFAULT_MODEL_PATH),
        help="Path to the converted model file",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=DEFAULT_LOG_LEVEL,
        help="Python log level (default: LOG_LEVEL env var or INFO)",
    )
    parser.add_argument(
        "--intra-op-threads",
        type=int,
        default=None,
        help="Threads within a single operator (default: ORT decides)",
    )
    parser.add_argument(
        "--inter-op-threads",
        type=int,
        default=None,
        help="Threads across operators (default: ORT decides)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    # argparse does not check defaults against choices
    if args.log_level not in LOG_LEVELS:
        parser.error(f"invalid LOG_LEVEL {args.log_level!r}; choose from {', '.join(LOG_LEVELS)}")

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = SmokeTestConfig(
        model_path=args.model,
        intra_op_num_threads=args.intra_op_threads,
        inter_op_num_threads=args.inter_op_threads,
    )

    try:
        run_smoke_test(config)
        return 0
    except SmokeTestError as err:
        stage = getattr(err.stage, "name", err.stage)
        logger.error(f"{type(err).__name__} at stage {stage}: {err}")
    except MemoryError as err:
        logger.error(f"MemoryError raised: {err}")
    except RuntimeError as err:
        logger.error(f"RuntimeError raised: {err}")
    except Exception:
        logger.exception("Unrecognized exception raised!")

    print(FAILURE_BANNER)
    return 1


if __name__ == "__main__":
    sys.exit(main())
