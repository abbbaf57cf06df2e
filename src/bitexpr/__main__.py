"""Command-line entry point for bitexpr."""

import argparse
import logging
from logging.handlers import RotatingFileHandler
import sys
from typing import List, Optional

from bitexpr.bitexpr import BitExpr
from bitexpr.bitexpr_operators import BitExprOperators
from bitexpr.bitexpr_repl import BitExprRepl


def setup_logging(log_file: Optional[str], verbose: bool) -> None:
    """Configure logging to stderr, and optionally to a rotating log file."""
    console = logging.StreamHandler(sys.stderr)
    console.setLevel(logging.DEBUG if verbose else logging.WARNING)
    handlers: List[logging.Handler] = [console]

    if log_file:
        # Keep up to 6 log files, max 1MB each
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=1024*1024,
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)
        handlers.append(file_handler)

    logging.basicConfig(
        level=logging.DEBUG if (verbose or log_file) else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True
    )


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="bitexpr",
        description="Evaluate unsigned integer arithmetic and bitwise expressions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Operators (highest precedence first):
  - ~        unary negate, bitwise not
  * ` / %    multiply, multiply (low word), divide, modulo
  + -        add, subtract
  < >        shift left, shift right
  &          bitwise and
  ^          bitwise xor
  |          bitwise or

Examples:
  # Interactive mode, empty line exits
  python -m bitexpr

  # Evaluate a single expression
  python -m bitexpr "1+2*3"

  # 8-bit words, shown as signed values
  python -m bitexpr --width 8 --signed "0-1"
        """
    )

    parser.add_argument(
        'expression',
        nargs='?',
        help='Expression to evaluate (omit for interactive mode)'
    )

    parser.add_argument(
        '--width',
        type=int,
        choices=BitExprOperators.SUPPORTED_WIDTHS,
        default=32,
        help='Word width in bits (default: 32)'
    )

    parser.add_argument(
        '--signed',
        action='store_true',
        help='Display results as two\'s-complement signed values'
    )

    parser.add_argument(
        '--log-file',
        help='Write a debug log to this file'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Show debug logging on stderr'
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_arguments(argv)
    setup_logging(args.log_file, args.verbose)

    repl = BitExprRepl(BitExpr(width=args.width), sys.stdin, sys.stdout, signed=args.signed)
    if args.expression is not None:
        return 0 if repl.evaluate_line(args.expression) else 1

    return repl.run()


if __name__ == "__main__":
    sys.exit(main())
