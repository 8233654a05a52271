from __future__ import annotations

from typing import NamedTuple

from .constants import FILE_CODE, HEADER_SIZE, NODATA, SHAPETYPE_LOOKUP
from .cursor import ByteCursor
from .exceptions import BadMagicError, BadShapeTypeError, HeaderTooShortError
from .types import BBox, MBox, ReadableBinStream, ZBox


class FileHeader(NamedTuple):
    """The 100 byte header shared by .shp and .shx files.
    file_length is held in bytes, although the file stores it as a
    count of 16 bit words."""

    file_code: int
    file_length: int
    version: int
    shape_type: int
    min_x: float
    max_x: float
    min_y: float
    max_y: float
    min_z: float
    max_z: float
    min_m: float
    max_m: float

    @property
    def shape_type_name(self) -> str:
        return SHAPETYPE_LOOKUP[self.shape_type]

    @property
    def bbox(self) -> BBox:
        """The file's bounding box (lower left, upper right)"""
        return self.min_x, self.min_y, self.max_x, self.max_y

    @property
    def zbox(self) -> ZBox:
        return self.min_z, self.max_z

    @property
    def mbox(self) -> MBox:
        # Measure values at or below -10e38 are nodata values in the ESRI whitepaper
        return (
            self.min_m if self.min_m > NODATA else None,
            self.max_m if self.max_m > NODATA else None,
        )

    @property
    def content_length(self) -> int:
        """Number of bytes following the header."""
        return self.file_length - HEADER_SIZE


def decode_header(stream: ReadableBinStream) -> FileHeader:
    """Reads and validates a .shp or .shx file header from the current
    position of stream.

    All fields are read before anything is validated, so a short file
    raises ShapefileReadError rather than a FormatError.
    """
    cursor = ByteCursor(stream)

    file_code = cursor.read_i32_be()
    # Five unused int32s
    for __unused in range(5):
        cursor.read_i32_be()
    # File length (16-bit word * 2 = bytes)
    file_length = cursor.read_i32_split_be() * 2
    version = cursor.read_i32_le()
    shape_type = cursor.read_i32_le()
    # Bounding box, then the Z and M ranges
    min_x = cursor.read_f64_le()
    max_x = cursor.read_f64_le()
    min_y = cursor.read_f64_le()
    max_y = cursor.read_f64_le()
    min_z = cursor.read_f64_le()
    max_z = cursor.read_f64_le()
    min_m = cursor.read_f64_le()
    max_m = cursor.read_f64_le()

    if file_code != FILE_CODE:
        raise BadMagicError(file_code)
    if shape_type not in SHAPETYPE_LOOKUP:
        raise BadShapeTypeError(shape_type)
    if file_length < HEADER_SIZE:
        raise HeaderTooShortError(file_length, HEADER_SIZE)

    return FileHeader(
        file_code=file_code,
        file_length=file_length,
        version=version,
        shape_type=shape_type,
        min_x=min_x,
        max_x=max_x,
        min_y=min_y,
        max_y=max_y,
        min_z=min_z,
        max_z=max_z,
        min_m=min_m,
        max_m=max_m,
    )
