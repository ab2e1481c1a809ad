#!/usr/bin/env python3
"""
Interleaved Output Example

Demonstrates a progress line that is redrawn in place while ordinary log
lines keep arriving below it:
- One StreamRegistry per process
- A LogHistory bound to stderr
- Logging routed through the ledger with install_handler()
- Manual redraws with do_interactive_write()

Run: python examples/01_basics/interleaved_output.py
"""

import logging
import sys
import time
from pathlib import Path

# Add parent to path for development
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from termledger import LogHistory, StreamRegistry, install_handler


def main() -> None:
    registry = StreamRegistry()
    ledger = LogHistory(sys.stderr, registry)
    install_handler(ledger, level="info")
    lg = logging.getLogger("example")

    total = 20
    session = ledger.begin_interactive_session()
    try:
        for done in range(total + 1):
            bar = "=" * done + "-" * (total - done)
            ledger.do_interactive_write(
                session, lambda: ledger.write(f"[{bar}] {done * 100 // total}%\n")
            )
            if done % 5 == 0:
                lg.info(f"checkpoint {done}")
            time.sleep(0.1)
    finally:
        ledger.end_interactive_session(session)

    lg.info("done")


if __name__ == "__main__":
    main()
