from __future__ import annotations


class GeoJSON_Error(Exception):
    pass


class ShapefileException(Exception):
    """An exception to handle shapefile specific problems."""


class ShapefileReadError(ShapefileException):
    """A constituent file could not be opened, or fewer bytes than
    required could be read from it."""


class FormatError(ShapefileException):
    """The file header or a record header is inconsistent."""


class BadMagicError(FormatError):
    def __init__(self, file_code: int):
        self.file_code = file_code
        super().__init__(f"Header magic number {file_code & 0xFFFFFFFF:08x} is invalid")


class BadShapeTypeError(FormatError):
    def __init__(self, shapeType: int):
        self.shapeType = shapeType
        super().__init__(f"Header Type {shapeType} is invalid")


class HeaderTooShortError(FormatError):
    def __init__(self, length: int, header_size: int):
        self.length = length
        super().__init__(
            f"Size in header {length} cannot be less than header size {header_size}"
        )


class RecordLengthError(FormatError):
    pass


class DecodeError(ShapefileException):
    """A record's geometry could not be decoded. Iteration cannot
    continue past such a record."""

    def __init__(self, message: str, shapeType: int, recNum: int | None):
        self.shapeType = shapeType
        self.recNum = recNum
        super().__init__(message)


class InvalidShapeTypeError(DecodeError):
    def __init__(self, shapeType: int, recNum: int | None = None):
        super().__init__(
            f"Shape type {shapeType} in record {recNum} is not valid",
            shapeType,
            recNum,
        )


class UnsupportedShapeTypeError(DecodeError):
    def __init__(self, shapeType: int, name: str, recNum: int | None = None):
        super().__init__(
            f"Shape type {shapeType} ({name}) in record {recNum} is not supported",
            shapeType,
            recNum,
        )
