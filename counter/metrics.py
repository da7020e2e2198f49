"""
Simple in-memory counters for one console session.
Counters:
- commands_processed
- unknown_commands
- errors
- records_dumped
- records_loaded

Provides increment(counter, n=1), snapshot() and reset().
"""
from typing import Dict

_NAMES = (
    "commands_processed",
    "unknown_commands",
    "errors",
    "records_dumped",
    "records_loaded",
)

_counters: Dict[str, int] = {name: 0 for name in _NAMES}


def increment(name: str, n: int = 1) -> None:
    if name not in _counters:
        _counters[name] = 0
    _counters[name] += int(n)


def snapshot() -> Dict[str, int]:
    return dict(_counters)


def reset() -> None:
    _counters.clear()
    _counters.update({name: 0 for name in _NAMES})
