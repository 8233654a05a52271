from __future__ import annotations

# Module settings
VERBOSE = True

# Size of the buffer the last error message is kept in, terminator included.
ERROR_MESSAGE_LIMIT = 256

# Constants for shape types
NULL = 0
POINT = 1
POLYLINE = 3
POLYGON = 5
MULTIPOINT = 8
POINTZ = 11
POLYLINEZ = 13
POLYGONZ = 15
MULTIPOINTZ = 18
POINTM = 21
POLYLINEM = 23
POLYGONM = 25
MULTIPOINTM = 28
MULTIPATCH = 31

SHAPETYPE_LOOKUP = {
    NULL: "NULL",
    POINT: "POINT",
    POLYLINE: "POLYLINE",
    POLYGON: "POLYGON",
    MULTIPOINT: "MULTIPOINT",
    POINTZ: "POINTZ",
    POLYLINEZ: "POLYLINEZ",
    POLYGONZ: "POLYGONZ",
    MULTIPOINTZ: "MULTIPOINTZ",
    POINTM: "POINTM",
    POLYLINEM: "POLYLINEM",
    POLYGONM: "POLYGONM",
    MULTIPOINTM: "MULTIPOINTM",
    MULTIPATCH: "MULTIPATCH",
}

SHAPETYPENUM_LOOKUP = {name: code for code, name in SHAPETYPE_LOOKUP.items()}

# Human readable names, as used in error messages
SHAPETYPE_DISPLAY_NAMES = {
    NULL: "Null",
    POINT: "Point",
    POLYLINE: "Polyline",
    POLYGON: "Polygon",
    MULTIPOINT: "MultiPoint",
    POINTZ: "PointZ",
    POLYLINEZ: "PolylineZ",
    POLYGONZ: "PolygonZ",
    MULTIPOINTZ: "MultiPointZ",
    POINTM: "PointM",
    POLYLINEM: "PolylineM",
    POLYGONM: "PolygonM",
    MULTIPOINTM: "MultiPointM",
    MULTIPATCH: "MultiPatch",
}

# File header layout
FILE_CODE = 0x0000270A  # 9994
HEADER_SIZE = 100  # 9 int32 + 8 doubles

NODATA = -10e38  # as per the ESRI whitepaper, only used for m-values.
