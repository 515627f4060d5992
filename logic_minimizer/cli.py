"""Command-line interface for boolean function minimization."""

import argparse
import logging
import sys

from .errors import MinimizerError
from .logging_config import setup_logging
from .algorithm.quine_mccluskey import QuineMcCluskey
from .truth_tables import format_truth_table
from .verify import verify_cover


def parse_terms(text: str) -> list[int]:
    """Parse a comma-separated list of row indices ("1,3,5")."""
    try:
        return [int(t) for t in text.split(",") if t.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a comma-separated list of integers: {text!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="logic-minimize",
        description="Minimize a boolean function with Quine-McCluskey",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  logic-minimize -w 3 --minterms 1,3,5                 Sum of products
  logic-minimize -w 2 --maxterms 0,2 --dontcares 3     Product of sums
  logic-minimize -w 2 --columnstring 0-1-              From the output column
  logic-minimize -w 3 --minterms 1,3,5 --truth-table   Show the truth table
  logic-minimize -w 3 --minterms 1,3,5 -f covers       Print every cover
        """,
    )

    parser.add_argument("--width", "-w", type=int, required=True, help="Number of input variables")
    parser.add_argument("--minterms", type=parse_terms, help="Rows where the function is 1")
    parser.add_argument("--maxterms", type=parse_terms, help="Rows where the function is 0")
    parser.add_argument("--dontcares", type=parse_terms, help="Rows whose value does not matter")
    parser.add_argument("--columnstring", help="Output column, row 0 first")
    parser.add_argument("--dc", default="-", help="Don't-care character (default: -)")
    parser.add_argument("--vars", help="Comma-separated variable names, MSB first")
    parser.add_argument(
        "--method",
        choices=QuineMcCluskey.METHODS,
        default="maxsat",
        help="Covering method (default: maxsat)",
    )
    parser.add_argument(
        "--format", "-f",
        choices=["text", "column", "covers"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--truth-table",
        action="store_true",
        help="Print the truth table and exit",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output",
    )
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        fn = QuineMcCluskey(
            args.width,
            minterms=args.minterms,
            maxterms=args.maxterms,
            dontcares=args.dontcares,
            columnstring=args.columnstring,
            dc=args.dc,
            vars=args.vars.split(",") if args.vars else None,
            method=args.method,
        )

        if args.truth_table:
            print(format_truth_table(fn))
            return 0

        if args.format == "column":
            print(fn.to_column_string())
            return 0

        covers = fn.get_covers()

        if args.format == "covers":
            for cover in covers:
                print(" ".join(cover))
            return 0

        print(f"Function:   {fn.to_column_string()}")
        print(f"Algorithm:  {fn.algorithm} ({fn.method})")
        print(f"Covers:     {len(covers)}")
        for cover in covers:
            ok, errors = verify_cover(fn, cover)
            mark = "✓" if ok else "✗"
            print(f"  {mark} {fn.to_expression(cover)}")
            for err in errors:
                print(f"      {err}")

        return 0

    except MinimizerError as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 2


if __name__ == "__main__":
    sys.exit(main())
