#!/usr/bin/env python3
"""iptables-log-parse — entry point when run from a checkout."""

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from iptables_log.cli import entry_point

if __name__ == "__main__":
    entry_point()
