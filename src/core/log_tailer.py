"""Incremental reader for the append-only xlogfile."""
import logging
from pathlib import Path
from typing import BinaryIO, NamedTuple, Union

from core.errors import RecordParseError
from core.records import GameRecord, parse_record_line

logger = logging.getLogger(__name__)


class PollResult(NamedTuple):
    records: list[GameRecord]
    changed: bool


class LogTailer:
    """Yields the games appended to the xlogfile since the previous poll.

    The underlying stream is only ever read forward, so bytes consumed by one
    poll are never read again. A trailing line without its newline is kept in
    a buffer until the writer finishes it.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._partial = b""
        self._pending: list[GameRecord] = []
        self.lines_read = 0

    @classmethod
    def open(cls, path: Union[str, Path]) -> 'LogTailer':
        return cls(open(path, "rb"))

    def close(self) -> None:
        self._stream.close()

    def __enter__(self) -> 'LogTailer':
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _read_complete_lines(self) -> list[bytes]:
        data = self._partial + self._stream.read()
        lines = data.split(b"\n")
        self._partial = lines.pop()
        return lines

    def poll(self) -> PollResult:
        """Parse every complete line appended since the last poll.

        Raises:
            RecordParseError: A line could not be parsed. The bad line is
                consumed; records parsed before it are returned by the next poll.
        """
        records = self._pending
        self._pending = []
        lines = self._read_complete_lines()
        for i, raw in enumerate(lines):
            self.lines_read += 1
            line = raw.decode("utf-8", errors="surrogateescape")
            if not line.strip():
                continue
            try:
                records.append(parse_record_line(line))
            except RecordParseError as e:
                logger.error(f"xlogfile line {self.lines_read}: {e}")
                self._pending = records
                self._requeue(lines[i + 1:])
                raise
        if records:
            logger.debug(f"read {len(records)} new games")
        return PollResult(records, bool(records))

    def _requeue(self, lines: list[bytes]) -> None:
        """Put lines after a failure back in front of the partial buffer."""
        if lines:
            self._partial = b"\n".join(lines) + b"\n" + self._partial
