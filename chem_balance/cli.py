"""Command-line entry point.

Usage:
    chem-balance "Fe + H2SO4 = Fe2(SO4)3 + SO2 + H2O"
    echo "H2 + O2 = H2O" | chem-balance --locale ru

Exit codes: 0 success, 2 syntax error, 3 no unique balancing.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence, TextIO

from .balancer import balance_equation
from .config import SUPPORTED_LOCALES, Settings, load_settings
from .errors import BalancerError, ParserError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_PARSER_ERROR = 2
EXIT_BALANCER_ERROR = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chem-balance",
        description="Balance chemical equations with minimal integer coefficients.",
    )
    parser.add_argument(
        "equations",
        nargs="*",
        help="Equations to balance; read one per line from stdin when omitted.",
    )
    parser.add_argument(
        "--locale",
        choices=SUPPORTED_LOCALES,
        help="Language of error descriptions (default: $CHEM_BALANCE_LOCALE or en).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log parsing and elimination steps.",
    )
    return parser


def run(equation: str, settings: Settings, *, out: TextIO, err: TextIO) -> int:
    """Balance one equation, write the result or the error; return the exit code."""
    try:
        balanced = balance_equation(equation)
    except ParserError as e:
        print(e.description(settings.locale), file=err)
        print(e.caret(equation), file=err)
        return EXIT_PARSER_ERROR
    except BalancerError as e:
        print(e.description(settings.locale), file=err)
        return EXIT_BALANCER_ERROR

    print(balanced, file=out)
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings(
        locale=args.locale,
        log_level="DEBUG" if args.verbose else None,
    )
    logging.basicConfig(level=settings.log_level_number, format="%(levelname)s %(name)s: %(message)s")

    equations = args.equations or [line.strip() for line in sys.stdin if line.strip()]
    status = EXIT_OK
    for equation in equations:
        code = run(equation, settings, out=sys.stdout, err=sys.stderr)
        if code != EXIT_OK:
            logger.info("failed to balance %r (exit code %d)", equation, code)
        status = status or code
    return status


if __name__ == "__main__":
    sys.exit(main())
