from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from typing import NamedTuple, cast

from .constants import VERBOSE
from .cursor import ByteCursor
from .exceptions import RecordLengthError, ShapefileException
from .header import FileHeader
from .shapes import Shape, decode_shape
from .types import ReadableBinStream

logger = logging.getLogger(__name__)

# A callback gets each decoded shape and returns True to keep going,
# or False to stop reading.
ShapeCallback = Callable[[Shape], bool]

# RecordStream states
READY = "ready"
READING = "reading"
DONE = "done"
FAILED = "failed"


class RecordHeader(NamedTuple):
    number: int  # 1-based
    content_length: int  # bytes, shape type included

    @classmethod
    def from_cursor(cls, cursor: ByteCursor) -> RecordHeader:
        number = cursor.read_i32_be()
        # Convert from num of 16 bit words, to 8 bit bytes
        content_length = cursor.read_i32_split_be() * 2
        return cls(number, content_length)


class RecordStream:
    """Decodes the records of a .shp file one at a time, in file order.

    The stream must be positioned just after the file header. It reads
    until the number of bytes given by the header's file length has
    been consumed. A stream can only be read once: it starts READY,
    is READING while records are decoded, and ends DONE (all bytes
    consumed, or the consumer stopped) or FAILED (a read or decode
    error, which is re-raised).

    There is no recovery from a bad record. Records that cannot be
    decoded have no trustworthy length, so the rest of the file is
    given up on.
    """

    def __init__(self, stream: ReadableBinStream, header: FileHeader):
        self.header = header
        self.cursor = ByteCursor(stream, header.content_length)
        self.state = READY
        self.numShapes = 0

    def __repr__(self) -> str:
        return f"RecordStream({self.state}, {self.numShapes} shapes, {self.cursor.remaining} bytes left)"

    def __iter__(self) -> Generator[Shape, None, None]:
        """Yields each decoded shape. Closing the generator early
        counts as the consumer asking to stop."""
        if self.state != READY:
            raise ShapefileException(
                f"Records can only be read once. Record stream is {self.state}."
            )
        self.state = READING
        try:
            while not self.cursor.exhausted:
                shape = self._next_shape()
                self.numShapes += 1
                yield shape
        except (ShapefileException, MemoryError):
            self.state = FAILED
            raise
        finally:
            if self.state == READING:
                self.state = DONE
                logger.debug(
                    f"Read {self.numShapes} shapes, {self.cursor.remaining} bytes left unread"
                )

    def run(self, callback: ShapeCallback) -> int:
        """Passes each decoded shape to callback until the records run
        out or callback returns a false value. Returns the number of
        shapes passed to callback. An exception raised by callback
        leaves the stream FAILED and is re-raised."""
        shapes = iter(self)
        try:
            for shape in shapes:
                if not callback(shape):
                    break
        except BaseException:
            # Also covers exceptions raised by callback itself
            self.state = FAILED
            raise
        finally:
            shapes.close()
        return self.numShapes

    def _next_shape(self) -> Shape:
        cursor = self.cursor
        record = RecordHeader.from_cursor(cursor)
        remaining = cast(int, cursor.remaining)
        if record.content_length < 0 or record.content_length > remaining:
            raise RecordLengthError(
                f"Record {record.number} content length {record.content_length} "
                f"does not fit in the {remaining} bytes left in the file"
            )

        start = cursor.consumed
        shapeType = cursor.read_i32_le()
        shape = decode_shape(cursor, shapeType, recNum=record.number, oid=self.numShapes)

        decoded = cursor.consumed - start
        if VERBOSE and decoded != record.content_length:
            logger.warning(
                f"Record {record.number} declares {record.content_length} content bytes "
                f"but {decoded} were decoded"
            )
        return shape
