"""
shpstream
Streams the geometry records of ESRI Shapefiles (.shp with its .shx index)
to a callback, one decoded shape at a time.
Compatible with Python versions >=3.9
"""

from __future__ import annotations

import logging

from .__version__ import __version__
from .classes import Shapes
from .constants import (
    FILE_CODE,
    HEADER_SIZE,
    MULTIPATCH,
    MULTIPOINT,
    MULTIPOINTM,
    MULTIPOINTZ,
    NULL,
    POINT,
    POINTM,
    POINTZ,
    POLYGON,
    POLYGONM,
    POLYGONZ,
    POLYLINE,
    POLYLINEM,
    POLYLINEZ,
    SHAPETYPE_LOOKUP,
)
from .cursor import ByteCursor
from .exceptions import (
    BadMagicError,
    BadShapeTypeError,
    DecodeError,
    FormatError,
    GeoJSON_Error,
    HeaderTooShortError,
    InvalidShapeTypeError,
    RecordLengthError,
    ShapefileException,
    ShapefileReadError,
    UnsupportedShapeTypeError,
)
from .header import FileHeader, decode_header
from .records import DONE, FAILED, READING, READY, RecordHeader, RecordStream
from .session import Session, parse
from .shapes import (
    SHAPE_CLASS_FROM_SHAPETYPE,
    NullShape,
    Point,
    Shape,
    UnsupportedShape,
    decode_shape,
    is_supported_shape_type,
    is_valid_shape_type,
)

__all__ = [
    "__version__",
    "NULL",
    "POINT",
    "POLYLINE",
    "POLYGON",
    "MULTIPOINT",
    "POINTZ",
    "POLYLINEZ",
    "POLYGONZ",
    "MULTIPOINTZ",
    "POINTM",
    "POLYLINEM",
    "POLYGONM",
    "MULTIPOINTM",
    "MULTIPATCH",
    "SHAPETYPE_LOOKUP",
    "FILE_CODE",
    "HEADER_SIZE",
    "ByteCursor",
    "FileHeader",
    "decode_header",
    "RecordHeader",
    "RecordStream",
    "READY",
    "READING",
    "DONE",
    "FAILED",
    "Session",
    "parse",
    "Shape",
    "NullShape",
    "Point",
    "UnsupportedShape",
    "SHAPE_CLASS_FROM_SHAPETYPE",
    "decode_shape",
    "is_valid_shape_type",
    "is_supported_shape_type",
    "Shapes",
    "ShapefileException",
    "ShapefileReadError",
    "FormatError",
    "BadMagicError",
    "BadShapeTypeError",
    "HeaderTooShortError",
    "RecordLengthError",
    "DecodeError",
    "InvalidShapeTypeError",
    "UnsupportedShapeTypeError",
    "GeoJSON_Error",
]

logger = logging.getLogger(__name__)
