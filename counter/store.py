import enum
import logging
from typing import Dict, Iterator, List, Optional

from counter.codec import CSV_HEADER, DumpFormat, Record, decode_line, encode_line
from counter.exceptions import RecordFormatError, RecordParseError, StoreIOError

log = logging.getLogger(__name__)

FILE_ENCODING = "utf-8"


class RecordChange(enum.Enum):
    ADDED = "added"
    INCREMENTED = "incremented"
    DECREMENTED = "decremented"
    REMOVED = "removed"


def _sort_key(record: Record):
    # count descending, then name ascending
    return (-record.count, record.name)


class RecordStore:
    def __init__(self, records: Optional[Dict[str, int]] = None):
        self._records: Dict[str, int] = {}
        for name, count in (records or {}).items():
            if count >= 1:
                self._records[name] = int(count)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, name: object) -> bool:
        return name in self._records

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records())

    def get(self, name: str) -> int:
        return self._records.get(name, 0)

    def as_dict(self) -> Dict[str, int]:
        return dict(self._records)

    # ======================
    # mutations
    # ======================
    def add(self, name: str) -> RecordChange:
        if name not in self._records:
            self._records[name] = 1
            return RecordChange.ADDED
        self._records[name] += 1
        return RecordChange.INCREMENTED

    def remove(self, name: str) -> Optional[RecordChange]:
        """
        Decrement `name`, deleting it when the count reaches zero.

        Removing a name that isn't stored is a silent no-op and returns None;
        no error is reported to the user.
        """
        count = self._records.get(name)
        if count is None:
            log.debug("remove of absent record %r ignored", name)
            return None
        if count <= 1:
            del self._records[name]
            return RecordChange.REMOVED
        self._records[name] = count - 1
        return RecordChange.DECREMENTED

    def remove_all(self) -> int:
        removed = len(self._records)
        self._records.clear()
        return removed

    # ======================
    # dump / load
    # ======================
    def records(self) -> List[Record]:
        return sorted((Record(name, count) for name, count in self._records.items()), key=_sort_key)

    def render(self, fmt: DumpFormat = DumpFormat.PLAIN) -> str:
        lines = [encode_line(r, fmt) for r in self.records()]
        if fmt is DumpFormat.CSV:
            lines.insert(0, CSV_HEADER)
        return "".join(f"{line}\n" for line in lines)

    def dump_to_file(self, path: str, fmt: DumpFormat = DumpFormat.PLAIN) -> int:
        """Write the dump to `path` (truncating). Returns the number of records written."""
        text = self.render(fmt)
        try:
            with open(path, "w", encoding=FILE_ENCODING, newline="\n") as fh:
                fh.write(text)
        except OSError as e:
            log.warning("dump to %s failed: %s", path, e)
            raise StoreIOError(f"Can't open file: {path}", path=path, operation="dump", original_error=e) from e

        written = len(self._records)
        log.info("dumped %d records to %s (%s)", written, path, fmt.value)
        return written

    def load_from_file(self, path: str) -> int:
        """
        Replace the whole store with the records in `path`.

        Every non-blank line must decode; on the first bad line the load is
        aborted with RecordFormatError and the store is left as it was.
        Returns the number of records loaded.
        """
        loaded: Dict[str, int] = {}
        try:
            with open(path, "r", encoding=FILE_ENCODING) as fh:
                for raw in fh:
                    line = raw.strip()
                    if not line:
                        continue
                    try:
                        record = decode_line(line)
                    except RecordParseError:
                        log.warning("load of %s aborted at record %r", path, line)
                        raise RecordFormatError(
                            f"Error while reading the file: {path}, error record: '{line}'",
                            path=path,
                            line=line,
                        ) from None
                    # a repeated name keeps the later count
                    loaded[record.name] = record.count
        except OSError as e:
            log.warning("load from %s failed: %s", path, e)
            raise StoreIOError(f"Can't open file: {path}", path=path, operation="load", original_error=e) from e
        except UnicodeDecodeError as e:
            log.warning("load from %s failed: %s", path, e)
            raise StoreIOError(f"Can't decode file: {path}", path=path, operation="load", original_error=e) from e

        self._records = loaded
        log.info("loaded %d records from %s", len(loaded), path)
        return len(loaded)
