"""iptables-log-parse — turn packet-filter log lines into NDJSON records or stats."""

import logging
import sys
from argparse import ArgumentParser

from iptables_log.config import LOG_LEVELS, OUTPUT_FORMATS, Config, load_config, load_yaml_config
from iptables_log.errors import NumberConversionError, ParseError
from iptables_log.formatter import get_formatter
from iptables_log.parser import parse_line
from iptables_log.reader import expand_paths, read_multiple
from iptables_log.stats import StatsCollector, format_stats_json, format_stats_text

LOG_FORMAT = "%(asctime)s [IPTABLES] %(levelname)s %(message)s"

logger = logging.getLogger(__name__)


def build_parser() -> ArgumentParser:
    """Build the CLI argument parser."""
    parser = ArgumentParser(
        prog="iptables-log-parse",
        description="Parse iptables/netfilter LOG lines into structured records.",
    )
    parser.add_argument(
        "files",
        nargs="*",
        help="Log file path(s) or glob pattern(s); '-' or none reads stdin",
    )
    parser.add_argument(
        "--output",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format (default: json)",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Show statistics instead of records",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Stop with exit status 1 on the first unparseable line",
    )
    parser.add_argument(
        "--include-raw",
        action="store_true",
        help="Add the original line as 'raw' to JSON records",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to YAML config file",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=None,
        help="Diagnostic log level on stderr (default: INFO)",
    )
    return parser


def _describe(error: ParseError) -> str:
    if isinstance(error, NumberConversionError):
        return f"bad {error.field} value {error.value!r}"
    return "format unmatched"


def run_pipeline(args, config: Config, out=None) -> int:
    """Read, parse, and emit. Returns the process exit status."""
    out = out or sys.stdout
    paths = expand_paths(args.files)
    formatter = get_formatter(config.output_format)
    stats = StatsCollector()

    for lineno, line, source in read_multiple(paths):
        if not line.strip():
            continue
        try:
            entry = parse_line(line)
        except ParseError as e:
            stats.record_error(e)
            if config.strict:
                logger.error("%s:%d: %s", source, lineno, _describe(e))
                return 1
            logger.warning("Skipping %s:%d: %s", source, lineno, _describe(e))
            continue

        stats.record_entry(entry)
        if not args.stats:
            raw = line if config.include_raw else None
            print(formatter(entry, raw), file=out)

    snapshot = stats.snapshot()
    if args.stats:
        if config.output_format == "json":
            print(format_stats_json(snapshot), file=out)
        else:
            print(format_stats_text(snapshot), file=out)

    logger.info(
        "Done: %d lines, %d parsed, %d failed",
        snapshot.total_lines,
        snapshot.parsed_count,
        snapshot.total_lines - snapshot.parsed_count,
    )
    return 0


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT, stream=sys.stderr)
    try:
        config = load_config(load_yaml_config(args.config), args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    logging.getLogger().setLevel(config.log_level)
    logger.debug("Config: %s", config)

    try:
        return run_pipeline(args, config)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2


def entry_point():
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(0)
    except BrokenPipeError:
        sys.exit(0)
