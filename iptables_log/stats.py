"""Statistics — outcome counts, protocol mix, top talkers."""

import json
from collections import Counter
from dataclasses import dataclass, field

from iptables_log.errors import LogFormatUnmatchedError, NumberConversionError, ParseError
from iptables_log.models import ParsedLogEntry

TOP_N = 10


@dataclass
class ParseStats:
    total_lines: int = 0
    parsed_count: int = 0
    unmatched_count: int = 0
    conversion_failures: dict[str, int] = field(default_factory=dict)
    protocol_counts: dict[str, int] = field(default_factory=dict)
    prefix_counts: dict[str, int] = field(default_factory=dict)
    top_sources: dict[str, int] = field(default_factory=dict)
    top_destination_ports: dict[str, int] = field(default_factory=dict)


class StatsCollector:
    """Accumulates parse outcomes one at a time; snapshot() builds a ParseStats."""

    def __init__(self):
        self._total = 0
        self._parsed = 0
        self._unmatched = 0
        self._conversion = Counter()
        self._protocols = Counter()
        self._prefixes = Counter()
        self._sources = Counter()
        self._dports = Counter()

    def record_entry(self, entry: ParsedLogEntry):
        self._total += 1
        self._parsed += 1
        self._protocols[entry.protocol] += 1
        if entry.prefix:
            self._prefixes[entry.prefix] += 1
        if entry.source:
            self._sources[entry.source] += 1
        if entry.destination_port:
            self._dports[str(entry.destination_port)] += 1

    def record_error(self, error: ParseError):
        self._total += 1
        if isinstance(error, NumberConversionError):
            self._conversion[error.field] += 1
        elif isinstance(error, LogFormatUnmatchedError):
            self._unmatched += 1
        else:
            raise TypeError(f"Unknown parse error kind: {type(error).__name__}")

    def snapshot(self) -> ParseStats:
        return ParseStats(
            total_lines=self._total,
            parsed_count=self._parsed,
            unmatched_count=self._unmatched,
            conversion_failures=dict(sorted(self._conversion.items())),
            protocol_counts=dict(self._protocols.most_common()),
            prefix_counts=dict(self._prefixes.most_common()),
            top_sources=dict(self._sources.most_common(TOP_N)),
            top_destination_ports=dict(self._dports.most_common(TOP_N)),
        )


def format_stats_text(stats: ParseStats) -> str:
    """Human-readable stats summary."""
    failed = stats.total_lines - stats.parsed_count
    lines = []
    lines.append(f"Total lines: {stats.total_lines}")
    lines.append(f"Parsed: {stats.parsed_count}")
    lines.append(f"Failed: {failed} ({stats.unmatched_count} unmatched)")
    for name, count in stats.conversion_failures.items():
        lines.append(f"  bad {name:8s} {count}")
    lines.append("")

    lines.append("Protocols:")
    for proto, count in stats.protocol_counts.items():
        lines.append(f"  {proto:8s} {count}")
    lines.append("")

    if stats.prefix_counts:
        lines.append("Prefixes:")
        for prefix, count in stats.prefix_counts.items():
            lines.append(f"  {prefix}  {count}")
        lines.append("")

    lines.append("Top sources:")
    for src, count in stats.top_sources.items():
        lines.append(f"  {src:39s} {count}")
    lines.append("")

    if stats.top_destination_ports:
        lines.append("Top destination ports:")
        for port, count in stats.top_destination_ports.items():
            lines.append(f"  {port:>5s} {count}")
    else:
        lines.append("No destination ports.")

    return "\n".join(lines)


def format_stats_json(stats: ParseStats) -> str:
    """JSON stats output."""
    return json.dumps({
        "total_lines": stats.total_lines,
        "parsed_count": stats.parsed_count,
        "unmatched_count": stats.unmatched_count,
        "conversion_failures": stats.conversion_failures,
        "protocol_counts": stats.protocol_counts,
        "prefix_counts": stats.prefix_counts,
        "top_sources": stats.top_sources,
        "top_destination_ports": stats.top_destination_ports,
    }, indent=2)
