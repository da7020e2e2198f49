"""
Parser for console command lines.

Function:
- parse_command(line) -> Command, one of:
    - NoneCommand       ""            (blank input)
    - PrintHelp         "?"
    - PrintRecords      "!"
    - Quit              "q"
    - RemoveAllRecords  "*"
    - AddRecord         "+ <name>"
    - RemoveRecord      "- <name>"
    - DumpRecordsCsv    "dc <file>"
    - DumpRecords       "d <file>"
    - LoadRecords       "l <file>"
    - UnknownCommand    anything else

The caller trims the raw line; only the argument after a prefix is trimmed here.
"""

from typing import Callable, Tuple

from counter.commands import (
    AddRecord,
    Command,
    DumpRecords,
    DumpRecordsCsv,
    LoadRecords,
    NoneCommand,
    PrintHelp,
    PrintRecords,
    Quit,
    RemoveAllRecords,
    RemoveRecord,
    UnknownCommand,
)

# every prefix command needs at least this many characters ("d x", "dc" alone is unknown)
MIN_PREFIXED_LENGTH = 3

_EXACT = {
    "?": PrintHelp,
    "!": PrintRecords,
    "q": Quit,
    "*": RemoveAllRecords,
}

# "dc " must come before "d "
_PREFIXES: Tuple[Tuple[str, Callable[[str], Command]], ...] = (
    ("+ ", AddRecord),
    ("- ", RemoveRecord),
    ("dc ", DumpRecordsCsv),
    ("d ", DumpRecords),
    ("l ", LoadRecords),
)


def parse_command(line: str) -> Command:
    """
    Classify a single (already trimmed) input line. Never raises.

    A prefix with nothing but whitespace after it is unknown rather than a
    command with an empty name.
    """
    if not line:
        return NoneCommand()

    exact = _EXACT.get(line)
    if exact is not None:
        return exact()

    if len(line) < MIN_PREFIXED_LENGTH:
        return UnknownCommand()

    for prefix, make in _PREFIXES:
        if line.startswith(prefix):
            arg = line[len(prefix):].strip()
            if not arg:
                return UnknownCommand()
            return make(arg)

    return UnknownCommand()
