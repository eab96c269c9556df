"""Command-line interface for the Milo history engine."""

import argparse


def positive_int(value: str) -> int:
    """Argparse type for counts that must be at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{value}'") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="milo",
        description="Record text transformations and inspect their history and word diffs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Record a transformation (texts may be read from files with @path)
  %(prog)s add "Improve Writing" "I am a very tall guy." "I'm very tall."
  %(prog)s add Formal @before.txt @after.txt

  # Show the 10 most recent entries and the diff of the newest one
  %(prog)s history --limit 10
  %(prog)s diff 0

  # Daily statistics for the last 30 days, exported as CSV
  %(prog)s stats --days 30 --csv ./reports

Example config.json:
{
  "history_file": "~/.config/milo/transformation_history.json",
  "max_entries": 1000,
  "history_limit": 50,
  "stats_days": 7,
  "verbose": false
}
        """,
    )

    # Configuration
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON configuration file (CLI args override JSON values)",
    )
    parser.add_argument(
        "--history-file",
        type=str,
        help="History file (default: transformation_history.json in the user config dir)",
    )
    parser.add_argument(
        "--max-entries",
        type=positive_int,
        help="Maximum number of entries kept in the history (default: 1000)",
    )
    parser.add_argument("--log-file", type=str, help="Also write log messages to this file")

    # Flags
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    add = subparsers.add_parser("add", help="Record a transformation")
    add.add_argument("label", help="Tone or prompt name used for the transformation")
    add.add_argument("original", help="Original text, or @file to read it from a file")
    add.add_argument("transformed", help="Transformed text, or @file to read it from a file")

    history = subparsers.add_parser("history", help="List recent entries, newest first")
    history.add_argument("--limit", type=positive_int, help="Number of entries to list")

    diff = subparsers.add_parser("diff", help="Show the word diff of an entry")
    diff.add_argument("index", type=int, help="Entry index (0 is the newest)")

    delete = subparsers.add_parser("delete", help="Delete an entry")
    delete.add_argument("index", type=int, help="Entry index (0 is the newest)")

    subparsers.add_parser("clear", help="Delete all entries and daily statistics")

    stats = subparsers.add_parser("stats", help="Show usage totals and daily statistics")
    stats.add_argument("--days", type=positive_int, help="Number of days to show")
    stats.add_argument("--csv", type=str, help="Directory to write CSV reports into")

    return parser
