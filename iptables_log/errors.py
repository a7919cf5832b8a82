"""Parse failures — one base class, two kinds."""


class ParseError(Exception):
    """Raised when a line cannot be turned into a ParsedLogEntry."""

    def __init__(self, message: str, line: str = ""):
        super().__init__(message)
        self.line = line


class LogFormatUnmatchedError(ParseError):
    """Raised when the line does not follow the packet-filter log format at all."""

    def __init__(self, line: str = ""):
        super().__init__("given log text is not matched with the log format", line)


class NumberConversionError(ParseError):
    """Raised when a numeric capture cannot be converted.

    ``field`` names the offending token (e.g. ``"len"``), ``value`` holds the
    captured text. The underlying ValueError is chained as ``__cause__``.
    """

    def __init__(self, field: str, value: str, line: str = ""):
        super().__init__(
            f"failed to convert a string field to number; field = {field}, value = {value!r}",
            line,
        )
        self.field = field
        self.value = value
