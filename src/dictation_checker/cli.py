"""Command-line interface for the dictation checker.

Provides the dictation-check command with diff, JSON and color output options.
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from . import __version__
from .acceptance import is_answer_acceptable
from .diff import format_diff_ansi, get_diff_stats
from .scoring import ComparisonResult, compare_texts, score_percentage

TOLERANCE_ENV_VAR = "DICTATION_TOLERANCE_MODE"
_TRUTHY = {"1", "true", "yes", "on"}


def setup_logging(verbose: bool = False) -> None:
    """Setup logging configuration.

    Args:
        verbose: Enable debug logging
    """
    level = logging.DEBUG if verbose else logging.INFO
    # Log to stderr so stdout carries only the result
    handler = RichHandler(console=Console(stderr=True), show_time=False, show_path=False)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[handler]
    )


def tolerance_from_env() -> bool:
    """Read the default tolerance mode from the environment."""
    return os.environ.get(TOLERANCE_ENV_VAR, "").strip().lower() in _TRUTHY


def read_input_file(filepath: Path) -> str:
    """Read input text from file.

    Args:
        filepath: Path to input file

    Returns:
        File content as string

    Raises:
        SystemExit: If file cannot be read
    """
    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            return f.read()
    except FileNotFoundError:
        print(f"Error: Input file not found: {filepath}", file=sys.stderr)
        sys.exit(1)
    except UnicodeDecodeError as e:
        print(f"Error: Cannot decode file {filepath}: {e}", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"Error reading file {filepath}: {e}", file=sys.stderr)
        sys.exit(1)


def print_result(result: ComparisonResult, acceptable: bool) -> None:
    """Print the score, masked hint and acceptability of an attempt.

    Args:
        result: Comparison result to report
        acceptable: Whether the attempt passed the acceptability policy
    """
    print(f"Score: {result.correct_tokens}/{result.total_tokens} ({score_percentage(result)}%)")
    print(f"Feedback: {result.feedback}")
    print(f"Acceptable: {'yes' if acceptable else 'no'}")


def print_diff(result: ComparisonResult, use_color: bool = True) -> None:
    """Print colored token diff of an attempt.

    Args:
        result: Comparison result to render
        use_color: Whether to use color output
    """
    print(format_diff_ansi(result.token_diffs, use_color=use_color))

    stats = get_diff_stats(result.token_diffs)
    if stats["total_positions"] > 0:
        print(
            f"\nStats: {stats['matches']}/{stats['total_positions']} positions match "
            f"({stats['match_percentage']}%), {stats['substitutions']} wrong, "
            f"{stats['deletions']} missing, {stats['insertions']} extra"
        )


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="dictation-check",
        description="Score a dictation attempt against the original fragment",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""Examples:
  dictation-check "The quick brown fox." "the quick brown fox"
  dictation-check "The quick brown fox." --diff --color < attempt.txt
  dictation-check --original-file original.txt --attempt-file attempt.txt --json
"""
    )

    parser.add_argument(
        "original",
        nargs="?",
        help="Original fragment text"
    )

    parser.add_argument(
        "attempt",
        nargs="?",
        help="Attempt text (use '-' or omit for stdin)"
    )

    parser.add_argument(
        "--original-file",
        type=Path,
        help="Read the original fragment from a file"
    )

    parser.add_argument(
        "--attempt-file",
        type=Path,
        help="Read the attempt from a file"
    )

    parser.add_argument(
        "--diff",
        action="store_true",
        help="Show inline token diff"
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the comparison result as JSON"
    )

    parser.add_argument(
        "--tolerant",
        action="store_true",
        default=None,
        help=f"Allow one error on long fragments (default from ${TOLERANCE_ENV_VAR})"
    )

    parser.add_argument(
        "--strict",
        dest="tolerant",
        action="store_false",
        default=None,
        help=f"Require a perfect match, overriding ${TOLERANCE_ENV_VAR}"
    )

    parser.add_argument(
        "--check",
        action="store_true",
        help="Exit with status 1 when the attempt is not acceptable"
    )

    parser.add_argument(
        "--color",
        action="store_true",
        help="Force colored output (auto-detected for terminals)"
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    return parser


def main() -> None:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args()

    setup_logging(args.verbose)

    if args.color:
        use_color = True
    elif args.no_color:
        use_color = False
    else:
        use_color = sys.stdout.isatty()

    tolerance_mode = args.tolerant if args.tolerant is not None else tolerance_from_env()

    # With --original-file a single positional argument is the attempt
    if args.original_file and args.original is not None and args.attempt is None:
        args.attempt, args.original = args.original, None

    try:
        if args.original_file:
            original = read_input_file(args.original_file)
        elif args.original is not None:
            original = args.original
        else:
            parser.error("an original fragment or --original-file is required")

        if args.attempt_file:
            attempt = read_input_file(args.attempt_file)
        elif args.attempt is not None and args.attempt != "-":
            attempt = args.attempt
        else:
            attempt = sys.stdin.read()

        if not original.strip():
            logging.warning("Original fragment is empty")

        result = compare_texts(original, attempt)
        acceptable = is_answer_acceptable(result, tolerance_mode=tolerance_mode)

        if args.json:
            payload = result.to_dict()
            payload["acceptable"] = acceptable
            print(json.dumps(payload, ensure_ascii=False, indent=2))
        else:
            print_result(result, acceptable)
            if args.diff:
                print()
                print_diff(result, use_color=use_color)

    except KeyboardInterrupt:
        print("\nOperation cancelled", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        logging.error(f"Unexpected error: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        sys.exit(1)

    if args.check and not acceptable:
        sys.exit(1)


if __name__ == "__main__":
    main()
