"""Output formatters — JSON (NDJSON) and one-line text summaries."""

import json
from typing import Callable

from iptables_log.models import ParsedLogEntry, entry_to_dict


def format_json(entry: ParsedLogEntry, raw: str | None = None) -> str:
    """Return NDJSON — one JSON object per line, compatible with jq."""
    data = entry_to_dict(entry)
    if raw is not None:
        data["raw"] = raw.rstrip("\r\n")
    return json.dumps(data)


def _endpoint(address: str, port: int) -> str:
    if not port:
        return address
    if ":" in address:
        # IPv6 literal
        return f"[{address}]:{port}"
    return f"{address}:{port}"


def format_text(entry: ParsedLogEntry, raw: str | None = None) -> str:
    """Return 'PREFIX PROTO SRC:SPT -> DST:DPT [FLAGS]'."""
    parts = []
    if entry.prefix:
        parts.append(entry.prefix)
    parts.append(entry.protocol)
    parts.append(_endpoint(entry.source, entry.source_port))
    parts.append("->")
    parts.append(_endpoint(entry.destination, entry.destination_port))
    if entry.protocol == "ICMP":
        parts.append(f"type={entry.type} code={entry.code}")
    flags = entry.tcp_flags
    if flags:
        parts.append("[" + ",".join(flags) + "]")
    return " ".join(parts)


def get_formatter(output_format: str = "json") -> Callable[..., str]:
    """Factory that returns the right formatter for the output format."""
    if output_format == "text":
        return format_text
    return format_json
