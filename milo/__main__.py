"""Main entry point for the milo package."""

import argparse
from pathlib import Path
import sys

from loguru import logger

from milo.cli import create_parser
from milo.core import ChangeType, Config, HistoryError, TextDiff, TextInputError, load_config
from milo.history import HistoryStore, commands
from milo.reports import generate_statistics_reports
from milo.utils import add_log_file_handler, clean_text, expand_file_path, setup_logger


def _read_text_arg(value: str) -> str:
    """Return the argument itself, or the contents of the file for ``@path``."""
    if not value.startswith("@"):
        return value
    path = expand_file_path(value[1:]) or value[1:]
    try:
        return Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise TextInputError(f"{path} is not UTF-8 encoded: {e}") from e
    except OSError as e:
        raise TextInputError(f"Cannot read text file {path}: {e}") from e


def format_diff(diff: TextDiff) -> list[str]:
    """Render a diff as two lines, marking removals ``[-x-]`` and additions ``{+x+}``."""
    original = " ".join(
        f"[-{d.token}-]" if d.change_type is ChangeType.REMOVED else d.token
        for d in diff.original_diff
    )
    transformed = " ".join(
        f"{{+{d.token}+}}" if d.change_type is ChangeType.ADDED else d.token
        for d in diff.transformed_diff
    )
    return [
        f"- {original}",
        f"+ {transformed}",
        f"added: {diff.added_count}  removed: {diff.removed_count}",
    ]


def run_command(args: argparse.Namespace, config: Config) -> None:
    """Dispatch one subcommand against the configured history file."""
    store = HistoryStore(config.history_file)

    if args.command == "add":
        entry = commands.add_transformation(
            store,
            args.label,
            clean_text(_read_text_arg(args.original)),
            clean_text(_read_text_arg(args.transformed)),
            max_entries=config.max_entries,
        )
        print(
            f"Recorded '{entry.label}': +{entry.added_count} -{entry.removed_count} "
            f"({entry.sentence_count} sentence(s))"
        )

    elif args.command == "history":
        limit = args.limit if args.limit is not None else config.history_limit
        for index, entry in enumerate(commands.get_history(store, limit)):
            stamp = entry.timestamp.strftime("%Y-%m-%d %H:%M:%S")
            print(
                f"[{index}] {stamp}  {entry.label}  "
                f"+{entry.added_count} -{entry.removed_count}  {entry.sentence_count} sentence(s)"
            )

    elif args.command == "diff":
        for line in format_diff(commands.get_diff_for_entry(store, args.index)):
            print(line)

    elif args.command == "delete":
        removed = commands.delete_entry(store, args.index)
        print(f"Deleted entry {args.index} ('{removed.label}')")

    elif args.command == "clear":
        commands.clear_history(store)
        print("History cleared")

    elif args.command == "stats":
        days = args.days if args.days is not None else config.stats_days
        summary = commands.get_usage_summary(store)
        daily = commands.get_daily_stats(store, days)
        print(f"Transformations: {summary.total_transformations}")
        print(f"Words changed:   {summary.total_words}")
        print(f"Sentences:       {summary.total_sentences}")
        print(f"History entries: {summary.history_count}")
        for day in daily:
            print(
                f"{day.date.isoformat()}  {day.transformation_count:>4} transformations  "
                f"{day.word_count:>6} words  {day.sentence_count:>5} sentences"
            )
        if args.csv:
            report_dir = Path(expand_file_path(args.csv) or args.csv)
            for path in generate_statistics_reports(daily, summary, report_dir):
                logger.info(f"  Wrote {path}")


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    config = load_config(args.config, args, parser)

    setup_logger(verbose=config.verbose, debug=config.debug)
    if config.log_file:
        add_log_file_handler(config.log_file, verbose=config.verbose, debug=config.debug)

    logger.info(f"History file: {config.history_file}")

    try:
        run_command(args, config)
    except HistoryError as e:
        logger.error(f"✗ {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
