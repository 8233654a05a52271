from __future__ import annotations

from struct import Struct

from .exceptions import ShapefileReadError
from .types import ReadableBinStream

unpack_int16_be = Struct(">h").unpack
unpack_int32_be = Struct(">i").unpack
unpack_int32_le = Struct("<i").unpack
unpack_double_le = Struct("<d").unpack


class ByteCursor:
    """Reads the fixed width fields of a shapefile from a binary stream.

    The shapefile format mixes big and little endian fields, so every
    read names its byte order. A cursor may be given a byte budget
    ('remaining'); each read then takes its width off the budget, so
    the caller can tell when the bytes the file header promised have
    all been consumed. Without a budget the cursor just reads.

    Reads never return partial data: if the stream runs short a
    ShapefileReadError is raised and the cursor should be abandoned.
    """

    def __init__(self, stream: ReadableBinStream, remaining: int | None = None):
        self.stream = stream
        self.remaining = remaining
        self.consumed = 0

    def __repr__(self) -> str:
        return f"ByteCursor(consumed={self.consumed}, remaining={self.remaining})"

    @property
    def exhausted(self) -> bool:
        """True once the byte budget has been used up. A cursor without
        a budget is never exhausted."""
        return self.remaining is not None and self.remaining <= 0

    def read_exact(self, n: int) -> bytes:
        try:
            data = self.stream.read(n)
        except OSError as e:
            raise ShapefileReadError(f"Error reading {n} bytes: {e}") from e
        if len(data) != n:
            raise ShapefileReadError(
                f"Error reading {n} bytes: Only read {len(data)}"
            )
        self.consumed += n
        if self.remaining is not None:
            self.remaining -= n
        return data

    def read_i16_be(self) -> int:
        (value,) = unpack_int16_be(self.read_exact(2))
        return value

    def read_i32_be(self) -> int:
        (value,) = unpack_int32_be(self.read_exact(4))
        return value

    def read_i32_le(self) -> int:
        (value,) = unpack_int32_le(self.read_exact(4))
        return value

    def read_f64_le(self) -> float:
        (value,) = unpack_double_le(self.read_exact(8))
        return value

    def read_i32_split_be(self) -> int:
        """Reads a 32 bit length stored as two big endian 16 bit halves,
        low half first. Reading the 4 bytes as one big endian int32
        gives a different value, so length fields must use this."""
        low = self.read_i16_be()
        high = self.read_i16_be()
        return (high << 16) | (low & 0xFFFF)
