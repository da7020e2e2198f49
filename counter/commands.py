"""
Command values produced by the parser, one per input line.

The set is closed: the parser only ever returns one of the classes listed
in ALL_COMMANDS.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Command:
    pass


@dataclass(frozen=True)
class NoneCommand(Command):
    pass


@dataclass(frozen=True)
class UnknownCommand(Command):
    pass


@dataclass(frozen=True)
class PrintHelp(Command):
    pass


@dataclass(frozen=True)
class PrintRecords(Command):
    pass


@dataclass(frozen=True)
class Quit(Command):
    pass


@dataclass(frozen=True)
class AddRecord(Command):
    name: str


@dataclass(frozen=True)
class RemoveRecord(Command):
    name: str


@dataclass(frozen=True)
class RemoveAllRecords(Command):
    pass


@dataclass(frozen=True)
class DumpRecords(Command):
    file_name: str


@dataclass(frozen=True)
class DumpRecordsCsv(Command):
    file_name: str


@dataclass(frozen=True)
class LoadRecords(Command):
    file_name: str


ALL_COMMANDS = (
    NoneCommand,
    UnknownCommand,
    PrintHelp,
    PrintRecords,
    Quit,
    AddRecord,
    RemoveRecord,
    RemoveAllRecords,
    DumpRecords,
    DumpRecordsCsv,
    LoadRecords,
)
