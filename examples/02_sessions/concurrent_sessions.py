#!/usr/bin/env python3
"""
Concurrent Sessions Example

Two InteractiveSession drivers share one stream. Each redraws itself from
its own ticker thread; log lines written in between are replayed below them.

Run: python examples/02_sessions/concurrent_sessions.py
"""

import logging
import sys
import time
from pathlib import Path

# Add parent to path for development
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from termledger import (
    InteractiveSession,
    LedgerConfig,
    LogHistory,
    ProgressBar,
    Spinner,
    StreamRegistry,
    Timer,
)
from termledger.log import LogConfig, install_handler

TOTAL = 40
SETTINGS = {
    "ledger": {"refresh_interval": 0.05},
    "logging": {"level": "info", "colors": {"enabled": True}},
}


def main() -> None:
    config = LedgerConfig.from_dict(SETTINGS)
    registry = StreamRegistry()
    ledger = LogHistory.from_config(sys.stdout, registry, config)
    install_handler(ledger, config=LogConfig.from_config(SETTINGS))
    lg = logging.getLogger("example")

    counter = {"a": 0, "b": 0}
    spinner = Spinner("line")
    timer = Timer()
    bar = ProgressBar(lambda: counter["a"] / TOTAL, fmt=":bar :percentage :remaining")

    first = InteractiveSession(ledger, lambda: f"{spinner} task A: {bar}", config)
    second = InteractiveSession(
        ledger, lambda: f"  task B: {counter['b']} items ({timer})", config
    )

    with first, second:
        for i in range(TOTAL):
            counter["a"] += 1
            if i % 2:
                counter["b"] += 1
            if i % 10 == 0:
                lg.info(f"step {i}")
            time.sleep(0.05)

    lg.info("all tasks finished")


if __name__ == "__main__":
    main()
