"""
Application Entry Point
=======================
Wires the text I/O layer to the geometry model.

Why is this file needed?
------------------------
It is the only place that knows about both sides. It:
1. Configures logging from the command line flags.
2. Reads the candidate quadrilaterals (file or stdin).
3. Evaluates the batch with the chosen ordering strategy.
4. Prints the text or JSON report and turns the outcome into an exit status.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from convexquad.config import DEFAULT_STRATEGY, PERIMETER_DECIMALS
from convexquad.logging_config import setup_logging
from convexquad.model.batch import evaluate_batch
from convexquad.model.io import InputFormatError, format_report, read_candidates, report_to_json
from convexquad.model.ordering import OrderingStrategy

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INPUT_ERROR = 2


def non_negative_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got '{text}'") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="convexquad",
        description="Validate convex quadrilaterals and find the one with the largest perimeter",
    )
    parser.add_argument("input_file", nargs="?", type=argparse.FileType("r"),
                        default=sys.stdin,
                        help="Input file: quadrilateral count, then 4 'x y' lines each (default: stdin)")
    parser.add_argument("--strategy", choices=[s.value for s in OrderingStrategy],
                        default=DEFAULT_STRATEGY,
                        help="Vertex ordering strategy (default: %(default)s)")
    parser.add_argument("--decimals", type=non_negative_int, default=PERIMETER_DECIMALS,
                        help="Decimal places for perimeters in the text report (default: %(default)s)")
    parser.add_argument("--json", action="store_true",
                        help="Print the report as JSON")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Log every accepted and rejected candidate")
    parser.add_argument("--log-file", default=None,
                        help="Also write the log to this file")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    setup_logging(level=logging.DEBUG if args.verbose else logging.WARNING, log_file=args.log_file)

    try:
        candidates = read_candidates(args.input_file)
    except InputFormatError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR
    finally:
        if args.input_file is not sys.stdin:
            args.input_file.close()

    batch = evaluate_batch(candidates, strategy=OrderingStrategy(args.strategy))

    if args.json:
        print(report_to_json(batch))
    else:
        print(format_report(batch, decimals=args.decimals))

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
