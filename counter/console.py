"""
Interactive console: read a line, parse it, apply it to the store, print the result.
"""
import logging
import sys
from typing import Callable, Dict, Optional, TextIO, Type

from config.config import config
from counter import metrics
from counter.codec import DumpFormat
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
)
from counter.exceptions import CounterError, UnknownCommandError
from counter.parse import parse_command
from counter.store import RecordChange, RecordStore

log = logging.getLogger(__name__)

HELP_TEXT = (
    "? -> print this help; ! -> print the records; q -> exit;\n"
    "+ <record> -> add the record; - <record> -> remove the record; * -> remove all records;\n"
    "d <file name> -> dump all records to file; dc <file name> -> dump all records to CSV file;\n"
    "l <file name> -> load records from file\n"
)

_CHANGE_MESSAGES = {
    RecordChange.ADDED: "Added the '{}' record",
    RecordChange.INCREMENTED: "Incremented the '{}' record",
    RecordChange.DECREMENTED: "Decremented the '{}' record",
    RecordChange.REMOVED: "Removed the '{}' record",
}


class CounterConsole:
    def __init__(self, store: Optional[RecordStore] = None, out: Optional[TextIO] = None, prompt: Optional[str] = None):
        self.store = store if store is not None else RecordStore()
        self.out = out if out is not None else sys.stdout
        self.prompt = config.PROMPT if prompt is None else prompt
        self._last_line = ""

        self._handlers: Dict[Type[Command], Callable[[Command], bool]] = {
            NoneCommand: lambda _cmd: True,
            Quit: lambda _cmd: False,
            PrintHelp: self._print_help,
            PrintRecords: self._print_records,
            AddRecord: self._add,
            RemoveRecord: self._remove,
            RemoveAllRecords: self._remove_all,
            DumpRecords: self._dump,
            DumpRecordsCsv: self._dump,
            LoadRecords: self._load,
        }

    def _write(self, text: str = "") -> None:
        self.out.write(text if text.endswith("\n") else text + "\n")

    # ======================
    # dispatch
    # ======================
    def handle(self, command: Command) -> bool:
        """Apply one command. Returns False once the session should end."""
        if not isinstance(command, NoneCommand):
            metrics.increment("commands_processed")
        handler = self._handlers.get(type(command), self._unhandled)
        try:
            return handler(command)
        except CounterError as e:
            metrics.increment("errors")
            log.info("command %r failed: %s", command, e)
            self._write(str(e))
            return True

    def process_line(self, raw: str) -> bool:
        self._last_line = raw.strip()
        return self.handle(parse_command(self._last_line))

    def run(self, read_line: Optional[Callable[[str], str]] = None) -> None:
        read_line = read_line or input
        log.info("console session started")
        try:
            while True:
                try:
                    raw = read_line(self.prompt)
                except EOFError:
                    self._write()
                    break
                if not self.process_line(raw):
                    break
        except KeyboardInterrupt:
            self._write()
            log.info("session interrupted")
        log.info("console session ended: %s", metrics.snapshot())

    # ======================
    # handlers
    # ======================
    def _unhandled(self, command: Command) -> bool:
        # UnknownCommand and anything the table doesn't cover
        metrics.increment("unknown_commands")
        self._write(HELP_TEXT)
        raise UnknownCommandError(self._last_line)

    def _print_help(self, _command: Command) -> bool:
        self._write(HELP_TEXT)
        return True

    def _print_records(self, _command: Command) -> bool:
        self.out.write(self.store.render())
        return True

    def _add(self, command: AddRecord) -> bool:
        change = self.store.add(command.name)
        self._write(_CHANGE_MESSAGES[change].format(command.name))
        return self._print_records(command)

    def _remove(self, command: RemoveRecord) -> bool:
        change = self.store.remove(command.name)
        if change is not None:
            self._write(_CHANGE_MESSAGES[change].format(command.name))
        return self._print_records(command)

    def _remove_all(self, command: RemoveAllRecords) -> bool:
        removed = self.store.remove_all()
        self._write(f"Removed all records: {removed}")
        return True

    def _dump(self, command: Command) -> bool:
        fmt = DumpFormat.CSV if isinstance(command, DumpRecordsCsv) else DumpFormat.PLAIN
        written = self.store.dump_to_file(command.file_name, fmt)
        metrics.increment("records_dumped", written)
        self._write(f"Dumped: {written}")
        return True

    def _load(self, command: LoadRecords) -> bool:
        loaded = self.store.load_from_file(command.file_name)
        metrics.increment("records_loaded", loaded)
        self._write(f"The dump has been loaded: {loaded}")
        return self._print_records(command)
