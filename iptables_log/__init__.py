"""Parse netfilter/iptables LOG lines into typed records."""

from iptables_log.errors import LogFormatUnmatchedError, NumberConversionError, ParseError
from iptables_log.models import ParsedLogEntry, entry_to_dict
from iptables_log.parser import LOG_PATTERN, parse_line, try_parse_line

__version__ = "1.0.0"

__all__ = [
    "LOG_PATTERN",
    "LogFormatUnmatchedError",
    "NumberConversionError",
    "ParseError",
    "ParsedLogEntry",
    "entry_to_dict",
    "parse_line",
    "try_parse_line",
]
