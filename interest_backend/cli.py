import argparse
import json
import logging
import sys
from typing import List, Optional

from interest_backend.core.report import calculation_report
from interest_backend.domain.interest import (
    DEFAULT_FREQUENCY,
    MODE_DESCRIPTIONS,
    CalculationMode,
    InterestValidationError,
)
from interest_backend.logging_config import setup_logging
from interest_backend.schemas.interest import CalculationResponse

logger = logging.getLogger("cli")

EXIT_INVALID_INPUT = 2

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Simple and compound interest calculator")
    parser.add_argument("--json", action="store_true", help="Print the full result as JSON")
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Override the configured log level",
    )
    subparsers = parser.add_subparsers(dest="mode", required=True)

    for mode in CalculationMode:
        mode_parser = subparsers.add_parser(mode.value, help=MODE_DESCRIPTIONS[mode].title)
        mode_parser.add_argument("--principal", default="", help="Initial deposit")
        mode_parser.add_argument("--rate", default="", help="Annual interest rate in percent")
        mode_parser.add_argument("--time", default="", help="Duration in years")
        if mode is CalculationMode.COMPOUND:
            mode_parser.add_argument(
                "--frequency",
                default=str(DEFAULT_FREQUENCY),
                help="Compounding periods per year",
            )

    return parser


def render(response: CalculationResponse) -> str:
    mode = CalculationMode(response.result.kind)
    formatted = response.formatted
    lines = [
        MODE_DESCRIPTIONS[mode].title,
        f"  Formula:   {MODE_DESCRIPTIONS[mode].formula}",
        f"  Principal: {formatted.principal}",
        f"  Interest:  {formatted.interest}",
        f"  Total:     {formatted.total}",
    ]
    if response.comparison is not None:
        lines.append(f"  With simple interest: {formatted.simple_total}")
        lines.append(f"  Gain from compounding: {formatted.difference}")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    raw = {
        "principal": args.principal,
        "annualRatePercent": args.rate,
        "timeYears": args.time,
        "compoundingFrequencyPerYear": getattr(args, "frequency", None),
    }

    try:
        response = calculation_report(args.mode, raw)
    except InterestValidationError as exc:
        logger.debug("validation failed on %s", exc.field)
        print(f"error: {exc.message}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    if args.json:
        print(json.dumps(response.model_dump(), indent=2))
    else:
        print(render(response))
    return 0


if __name__ == "__main__":
    sys.exit(main())
