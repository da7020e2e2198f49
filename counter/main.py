"""
Main runner for record-counter.

- parses CLI args / env config
- sets up logging
- runs the interactive console until `q`, end of input or Ctrl-C
"""

import logging
import sys
from typing import List, Optional

from counter.cli import parse_args
from counter.console import CounterConsole
from counter.logging_setup import setup_logging

log = logging.getLogger("record_counter.main")


def main(argv: Optional[List[str]] = None) -> int:
    parse_args(argv)
    setup_logging()
    try:
        CounterConsole().run()
    except Exception:
        log.exception("Unexpected error in main")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
