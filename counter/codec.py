"""
Record <-> text line conversion.

Plain lines look like `widget - 3`; CSV lines like `widget,3` after a
`name,count` header. Only the plain format can be read back.
"""
import enum
import re
from dataclasses import dataclass

from counter.exceptions import RecordParseError

CSV_SEPARATOR = ","
CSV_QUOTE = '"'
CSV_HEADER = f"name{CSV_SEPARATOR}count"

PLAIN_SEPARATOR_RE = re.compile(r"\s+-\s+")
COUNT_RE = re.compile(r"[0-9]+")


class DumpFormat(enum.Enum):
    PLAIN = "plain"
    CSV = "csv"


@dataclass(frozen=True)
class Record:
    name: str
    count: int


def csv_escape(value: str, separator: str = CSV_SEPARATOR, quote: str = CSV_QUOTE) -> str:
    """Double embedded quotes; wrap in quotes if the field holds the separator, a quote or whitespace."""
    needs_quoting = separator in value or quote in value or any(ch.isspace() for ch in value)
    escaped = value.replace(quote, quote * 2)
    if needs_quoting:
        return f"{quote}{escaped}{quote}"
    return escaped


def encode_line(record: Record, fmt: DumpFormat = DumpFormat.PLAIN) -> str:
    if fmt is DumpFormat.CSV:
        return f"{csv_escape(record.name)}{CSV_SEPARATOR}{record.count}"
    return f"{record.name} - {record.count}"


def decode_line(line: str) -> Record:
    """
    Parse a plain `name - count` line.

    Raises RecordParseError unless the line splits into exactly two fields
    and the second is a positive decimal integer.
    """
    parts = PLAIN_SEPARATOR_RE.split(line)
    if len(parts) != 2:
        raise RecordParseError(line)

    name, raw_count = parts
    if not name or not COUNT_RE.fullmatch(raw_count):
        raise RecordParseError(line)

    count = int(raw_count)
    if count < 1:
        # the store never holds zero-count records
        raise RecordParseError(line)
    return Record(name=name, count=count)
