"""Shared pytest fixtures — representative packet-filter log lines."""

import os

import pytest

SAMPLE_LOG = os.path.join(os.path.dirname(__file__), "..", "logs", "sample.log")

ICMP_LINE = (
    "Jul 21 05:38:28 ubuntu-jammy kernel: [14879.600492] OUT-LOG: IN= OUT=enp0s3 "
    "SRC=10.0.2.15 DST=8.8.8.8 LEN=84 TOS=0x00 PREC=0x00 TTL=64 ID=6495 DF "
    "PROTO=ICMP TYPE=8 CODE=0 ID=1 SEQ=3"
)

TCP_SYN_LINE = (
    "Jul 21 05:38:30 ubuntu-jammy kernel: [14881.112233] IN-DROP: IN=enp0s3 OUT= "
    "MAC=08:00:27:4b:2f:9a:52:54:00:12:35:02:08:00 SRC=203.0.113.7 DST=10.0.2.15 "
    "LEN=60 TOS=0x00 PREC=0x00 TTL=52 ID=31337 DF PROTO=TCP SPT=51514 DPT=22 "
    "WINDOW=64240 RES=0x00 SYN URGP=0"
)

UDP_LINE = (
    "Jul 21 05:38:33 ubuntu-jammy kernel: [14884.500000] OUT-LOG: IN= OUT=enp0s3 "
    "SRC=10.0.2.15 DST=10.0.2.3 LEN=71 TOS=0x00 PREC=0x00 TTL=64 ID=47123 "
    "PROTO=UDP SPT=41234 DPT=53 LEN=51"
)


@pytest.fixture
def icmp_line() -> str:
    return ICMP_LINE


@pytest.fixture
def tcp_syn_line() -> str:
    return TCP_SYN_LINE


@pytest.fixture
def udp_line() -> str:
    return UDP_LINE


@pytest.fixture
def sample_log() -> str:
    return SAMPLE_LOG
