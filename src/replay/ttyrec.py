"""
Sequential reader for ttyrec terminal recordings.

File format
───────────
A flat sequence of frames, each:
  uint32  sec      capture time, seconds   (little-endian)
  uint32  usec     capture time, microseconds
  uint32  len      payload length
  <len bytes of raw terminal output>
"""
from dataclasses import dataclass
import logging
from pathlib import Path
import struct
from typing import BinaryIO, Iterator, Optional, Union

from core.errors import TruncatedRecordingError

logger = logging.getLogger(__name__)

HEADER = struct.Struct('<III')


@dataclass(frozen=True)
class Frame:
    sec: int
    usec: int
    payload: bytes

    @property
    def at_ms(self) -> int:
        return self.sec * 1000 + self.usec // 1000

    @property
    def at_us(self) -> int:
        return self.sec * 1_000_000 + self.usec


class FrameStore:
    """Forward-only cursor over the frames of one recording.

    The cursor is live state, so a store cannot be copied; give each reader
    its own store.
    """

    def __init__(self, stream: BinaryIO, name: str = "<stream>") -> None:
        self._stream = stream
        self.name = name
        self.index = 0  # index of the next frame to be read

    @classmethod
    def open(cls, path: Union[str, Path]) -> 'FrameStore':
        return cls(open(path, "rb"), str(path))

    def close(self) -> None:
        self._stream.close()

    def __enter__(self) -> 'FrameStore':
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __copy__(self):
        raise TypeError("FrameStore holds a live read cursor and cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError("FrameStore holds a live read cursor and cannot be copied")

    def rewind(self) -> None:
        self._stream.seek(0)
        self.index = 0

    def next_frame(self) -> Optional[Frame]:
        """Read the next frame.

        Returns:
            The frame, or None at a clean end of the recording

        Raises:
            TruncatedRecordingError: The header or payload is cut short
        """
        header = self._stream.read(HEADER.size)
        if not header:
            return None
        if len(header) != HEADER.size:
            raise TruncatedRecordingError(
                f"{self.name}: frame {self.index} header has {len(header)} of {HEADER.size} bytes")
        sec, usec, length = HEADER.unpack(header)
        payload = self._stream.read(length)
        if len(payload) != length:
            raise TruncatedRecordingError(
                f"{self.name}: frame {self.index} payload has {len(payload)} of {length} bytes")
        self.index += 1
        return Frame(sec, usec, payload)

    def __iter__(self) -> Iterator[Frame]:
        while True:
            frame = self.next_frame()
            if frame is None:
                return
            yield frame
