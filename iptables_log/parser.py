"""Packet-filter (netfilter LOG target) line parser — one compiled regex + conversion table.

Token order follows what the kernel emits:

  <syslog timestamp> <host> kernel: [<uptime>] <prefix> IN= OUT= MAC= SRC= DST=
  LEN= TOS=0x.. PREC=0x.. TTL= ID= CE DF MF FRAG= OPT (..) PROTO=
  TYPE= CODE= ID= SPT= DPT= SEQ= ACK= WINDOW= RES=0x.. URG ACK PSH RST SYN FIN
  URGP= OPT (..)

Everything after PROTO= is optional, as are MAC=, the CE/DF/MF flags, FRAG=
and the IP options clause. Numeric slots capture any non-space run so that
garbage there surfaces as a NumberConversionError instead of a format mismatch.
"""

import re

from iptables_log.errors import LogFormatUnmatchedError, NumberConversionError
from iptables_log.models import ParsedLogEntry

# ---------------------------------------------------------------------------
# Compiled pattern
# ---------------------------------------------------------------------------

LOG_PATTERN = re.compile(
    r'^(?P<timestamp>.+)\s+(?P<hostname>\S+)\s+kernel:\s+'
    r'\[\s*(?P<kernel_timestamp>[^\]]+)\]\s+'
    r'(?:(?P<prefix>.+)\s+)?'
    r'IN=(?P<in_iface>\S*)\s+OUT=(?P<out_iface>\S*)\s+'
    r'(?:MAC=(?P<mac>\S*)\s+)?'
    r'SRC=(?P<src>\S*)\s+DST=(?P<dst>\S*)\s+'
    r'LEN=(?P<len>\S*)\s+'
    r'TOS=(?:0x(?P<tos>\S+))?\s+'
    r'PREC=(?:0x(?P<prec>\S+))?\s+'
    r'TTL=(?P<ttl>\S*)\s+'
    r'ID=(?P<id>\S*)\s+'
    r'(?P<ce>CE\s+)?(?P<df>DF\s+)?(?P<mf>MF\s+)?'
    r'(?:FRAG=(?P<frag>\S*)\s+)?'
    r'(?:OPT \((?P<ip_options>.+)\)\s+)?'
    r'PROTO=(?P<proto>\S+)'
    r'(?:\s+TYPE=(?P<type>\S+))?'
    r'(?:\s+CODE=(?P<code>\S+))?'
    r'(?:\s+ID=(?P<icmp_id>\S*))?'
    r'(?:\s+SPT=(?P<spt>\S*))?'
    r'(?:\s+DPT=(?P<dpt>\S*))?'
    r'(?:\s+SEQ=(?P<seq>\S*))?'
    r'(?:\s+ACK=(?P<ack_seq>\S*))?'
    r'(?:\s+WINDOW=(?P<window>\S*))?'
    r'(?:\s+RES=0x(?P<res>\S*))?'
    r'(?P<urg>\s+URG)?(?P<ack>\s+ACK)?(?P<psh>\s+PSH)?'
    r'(?P<rst>\s+RST)?(?P<syn>\s+SYN)?(?P<fin>\s+FIN)?'
    r'(?:\s+URGP=(?P<urgp>\S*))?'
    r'(?:\s+OPT \((?P<tcp_options>.*)\))?'
)

# ---------------------------------------------------------------------------
# Group → attribute tables
# ---------------------------------------------------------------------------

_TEXT_FIELDS = (
    ("timestamp", "timestamp"),
    ("hostname", "hostname"),
    ("prefix", "prefix"),
    ("in_iface", "input_interface"),
    ("out_iface", "output_interface"),
    ("mac", "mac_address"),
    ("src", "source"),
    ("dst", "destination"),
    ("ip_options", "ip_options"),
    ("proto", "protocol"),
    ("tcp_options", "tcp_options"),
)

# (group, field name reported on failure, attribute, base)
_NUMERIC_FIELDS = (
    ("len", "len", "length", 10),
    ("tos", "tos", "tos", 16),
    ("prec", "prec", "precedence", 16),
    ("ttl", "ttl", "ttl", 10),
    ("id", "id", "id", 10),
    ("frag", "frag", "frag", 10),
    ("type", "type", "type", 10),
    ("code", "code", "code", 10),
    ("icmp_id", "icmp-id", "icmp_id", 10),
    ("spt", "spt", "source_port", 10),
    ("dpt", "dpt", "destination_port", 10),
    ("seq", "seq", "sequence", 10),
    ("ack_seq", "ack", "ack_sequence", 10),
    ("window", "window", "window_size", 10),
    ("res", "res", "res", 16),
    ("urgp", "urgp", "urgp", 10),
)

_FLAG_FIELDS = (
    ("ce", "congestion_experienced"),
    ("df", "do_not_fragment"),
    ("mf", "more_fragments_following"),
    ("urg", "urgent"),
    ("ack", "ack"),
    ("psh", "push"),
    ("rst", "reset"),
    ("syn", "syn"),
    ("fin", "fin"),
)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


# Plain ASCII digits only: no sign, underscores, or 0x prefix.
_DIGITS = {
    10: re.compile(r"[0-9]+"),
    16: re.compile(r"[0-9A-Fa-f]+"),
}
_DECIMAL = re.compile(r"[0-9]+(?:\.[0-9]*)?")


def _to_float(field: str, value: str, line: str) -> float:
    if not value:
        return 0.0
    try:
        if not _DECIMAL.fullmatch(value):
            raise ValueError(f"not a decimal number: {value!r}")
        return float(value)
    except ValueError as e:
        raise NumberConversionError(field, value, line) from e


def _to_int(field: str, value: str, base: int, line: str) -> int:
    if not value:
        return 0
    try:
        if not _DIGITS[base].fullmatch(value):
            raise ValueError(f"not a base-{base} number: {value!r}")
        return int(value, base)
    except ValueError as e:
        raise NumberConversionError(field, value, line) from e


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


def parse_line(line: str) -> ParsedLogEntry:
    """Parse a single packet-filter log line.

    Raises LogFormatUnmatchedError if the line does not follow the format, or
    NumberConversionError if a numeric token cannot be converted.
    """
    stripped = line.rstrip("\r\n")
    match = LOG_PATTERN.match(stripped)
    if not match:
        raise LogFormatUnmatchedError(line)

    groups = match.groupdict(default="")
    values = {attr: groups[group] for group, attr in _TEXT_FIELDS}
    values["kernel_timestamp"] = _to_float(
        "kernel-timestamp", groups["kernel_timestamp"], line
    )
    for group, field, attr, base in _NUMERIC_FIELDS:
        values[attr] = _to_int(field, groups[group], base, line)
    for group, attr in _FLAG_FIELDS:
        values[attr] = groups[group] != ""

    return ParsedLogEntry(**values)


def try_parse_line(line: str) -> ParsedLogEntry | None:
    """Like parse_line, but returns None instead of raising a ParseError."""
    try:
        return parse_line(line)
    except (LogFormatUnmatchedError, NumberConversionError):
        return None
