"""
Exception types for the record counter.

Every error the console can recover from derives from CounterError, so the
dispatch loop can report it and keep prompting.
"""
from typing import Optional


class CounterError(Exception):
    """Base exception for all record counter errors."""
    pass


class UnknownCommandError(CounterError):
    """Raised for an input line that doesn't match any command.

    Attributes:
        line: The input line as the user typed it (trimmed)
    """

    def __init__(self, line: str):
        super().__init__(f"Unknown command: '{line}'")
        self.line = line


class RecordParseError(CounterError):
    """Raised by the codec for a single line that isn't a `name - count` record."""

    def __init__(self, line: str):
        super().__init__(f"Malformed record: '{line}'")
        self.line = line


class StoreIOError(CounterError):
    """Raised when a dump file can't be opened, read or written.

    Attributes:
        path: File the store tried to use
        operation: 'dump' or 'load'
        original_error: The underlying exception, if any
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        operation: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.path = path
        self.operation = operation
        self.original_error = original_error


class RecordFormatError(StoreIOError):
    """Raised when a load hits a malformed record line; the load is aborted.

    Attributes:
        line: The offending line (trimmed)
    """

    def __init__(self, message: str, path: Optional[str] = None, line: Optional[str] = None):
        super().__init__(message, path=path, operation="load")
        self.line = line
