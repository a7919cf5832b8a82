"""Parsed packet-filter log entry — frozen dataclass, zero values for absent fields."""

from dataclasses import dataclass, fields
from typing import Any


@dataclass(frozen=True)
class ParsedLogEntry:
    # syslog / kernel context
    timestamp: str = ""
    hostname: str = ""
    kernel_timestamp: float = 0.0
    prefix: str = ""
    input_interface: str = ""
    output_interface: str = ""
    mac_address: str = ""

    # IP header
    source: str = ""
    destination: str = ""
    length: int = 0
    tos: int = 0
    precedence: int = 0
    ttl: int = 0
    id: int = 0
    congestion_experienced: bool = False
    do_not_fragment: bool = False
    more_fragments_following: bool = False
    frag: int = 0
    ip_options: str = ""
    protocol: str = ""

    # ICMP
    type: int = 0
    code: int = 0
    icmp_id: int = 0

    # TCP / UDP
    source_port: int = 0
    destination_port: int = 0
    sequence: int = 0
    ack_sequence: int = 0
    window_size: int = 0
    res: int = 0
    urgent: bool = False
    ack: bool = False
    push: bool = False
    reset: bool = False
    syn: bool = False
    fin: bool = False
    urgp: int = 0
    tcp_options: str = ""

    @property
    def tcp_flags(self) -> list[str]:
        """Names of the TCP flags set on this packet, in log order."""
        flags = (
            ("URG", self.urgent),
            ("ACK", self.ack),
            ("PSH", self.push),
            ("RST", self.reset),
            ("SYN", self.syn),
            ("FIN", self.fin),
        )
        return [name for name, present in flags if present]


# Attribute name → JSON key
JSON_KEYS = {
    "timestamp": "timestamp",
    "hostname": "hostname",
    "kernel_timestamp": "kernelTimestamp",
    "prefix": "prefix",
    "input_interface": "inputInterface",
    "output_interface": "outputInterface",
    "mac_address": "macAddress",
    "source": "source",
    "destination": "destination",
    "length": "length",
    "tos": "tos",
    "precedence": "precedence",
    "ttl": "ttl",
    "id": "id",
    "congestion_experienced": "congestionExperienced",
    "do_not_fragment": "doNotFragment",
    "more_fragments_following": "moreFragmentsFollowing",
    "frag": "frag",
    "ip_options": "ipOptions",
    "protocol": "protocol",
    "type": "type",
    "code": "code",
    "icmp_id": "icmpId",
    "source_port": "sourcePort",
    "destination_port": "destinationPort",
    "sequence": "sequence",
    "ack_sequence": "ackSequence",
    "window_size": "windowSize",
    "res": "res",
    "urgent": "urgent",
    "ack": "ack",
    "push": "push",
    "reset": "reset",
    "syn": "syn",
    "fin": "fin",
    "urgp": "urgp",
    "tcp_options": "tcpOption",
}


def entry_to_dict(entry: ParsedLogEntry) -> dict[str, Any]:
    """Convert a ParsedLogEntry to a dict keyed by JSON names. Zero values are kept."""
    return {JSON_KEYS[f.name]: getattr(entry, f.name) for f in fields(entry)}
