from __future__ import annotations

from typing import Final, Union, cast

from .constants import (
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
    SHAPETYPE_DISPLAY_NAMES,
    SHAPETYPE_LOOKUP,
    SHAPETYPENUM_LOOKUP,
)
from .cursor import ByteCursor
from .exceptions import InvalidShapeTypeError, UnsupportedShapeTypeError
from .geojson import GeoJSONSerializableShape
from .types import PointsT


class _NoShapeTypeSentinel:
    """For use as a default value for Shape.__init__, so that
    subclasses get their shape type from their class name.
    """


_NO_SHAPE_TYPE_SENTINEL: Final = _NoShapeTypeSentinel()


class Shape(GeoJSONSerializableShape):
    def __init__(
        self,
        shapeType: int | _NoShapeTypeSentinel = _NO_SHAPE_TYPE_SENTINEL,
        points: PointsT | None = None,
        oid: int | None = None,
        recNum: int | None = None,
    ):
        """Stores the geometry of one record of a .shp file.
        Every shape type except the "Null" type contains points
        at some level. oid is the 0-based position of the record
        in the file and recNum the 1-based record number stored
        in the record header.

        A Shape handed to a callback is not used again by the
        decoder, so it is safe to keep.
        """
        if shapeType is not _NO_SHAPE_TYPE_SENTINEL:
            self.shapeType = cast(int, shapeType)
        else:
            class_name = self.__class__.__name__
            self.shapeType = SHAPETYPENUM_LOOKUP.get(class_name.upper(), NULL)

        self.points: PointsT = points or []

        self.__oid: int = -1 if oid is None else oid
        self.recNum = recNum

    @property
    def oid(self) -> int:
        """The index position of the shape in the original shapefile"""
        return self.__oid

    @property
    def shapeTypeName(self) -> str:
        return SHAPETYPE_LOOKUP[self.shapeType]

    def __repr__(self) -> str:
        class_name = self.__class__.__name__
        if class_name == "Shape":
            return f"Shape #{self.__oid}: {self.shapeTypeName}"
        return f"{class_name} #{self.__oid}"


# Every from_byte_stream shares one call signature, so that decode_shape
# can dispatch on the shape type alone.
class NullShape(Shape):
    def __init__(
        self,
        oid: int | None = None,
        recNum: int | None = None,
    ):
        Shape.__init__(self, shapeType=NULL, oid=oid, recNum=recNum)

    @staticmethod
    def from_byte_stream(
        shapeType: int,
        cursor: ByteCursor,
        recNum: int | None = None,
        oid: int | None = None,
    ) -> NullShape:
        # A null shape has no content after its shape type
        return NullShape(oid=oid, recNum=recNum)


class Point(Shape):
    def __init__(
        self,
        x: float,
        y: float,
        oid: int | None = None,
        recNum: int | None = None,
    ):
        Shape.__init__(self, points=[(x, y)], oid=oid, recNum=recNum)

    @property
    def x(self) -> float:
        return self.points[0][0]

    @property
    def y(self) -> float:
        return self.points[0][1]

    @staticmethod
    def _x_y_from_byte_stream(cursor: ByteCursor) -> tuple[float, float]:
        x = cursor.read_f64_le()
        y = cursor.read_f64_le()
        return x, y

    @classmethod
    def from_byte_stream(
        cls,
        shapeType: int,
        cursor: ByteCursor,
        recNum: int | None = None,
        oid: int | None = None,
    ) -> Point:
        x, y = cls._x_y_from_byte_stream(cursor)
        return Point(x=x, y=y, oid=oid, recNum=recNum)


class UnsupportedShape(Shape):
    """Stands in for shape types that are valid in a shapefile but
    that this package cannot decode yet. Their content length can
    only be known by decoding it, so reading one always fails.

    Supporting another shape type means writing a Shape subclass with
    a from_byte_stream method and registering it in
    SHAPE_CLASS_FROM_SHAPETYPE.
    """

    @staticmethod
    def from_byte_stream(
        shapeType: int,
        cursor: ByteCursor,
        recNum: int | None = None,
        oid: int | None = None,
    ) -> Shape:
        raise UnsupportedShapeTypeError(
            shapeType, SHAPETYPE_DISPLAY_NAMES[shapeType], recNum
        )


ShapeClassT = Union[type[NullShape], type[Point], type[UnsupportedShape]]

SHAPE_CLASS_FROM_SHAPETYPE: dict[int, ShapeClassT] = {
    NULL: NullShape,
    POINT: Point,
    POLYLINE: UnsupportedShape,
    POLYGON: UnsupportedShape,
    MULTIPOINT: UnsupportedShape,
    POINTZ: UnsupportedShape,
    POLYLINEZ: UnsupportedShape,
    POLYGONZ: UnsupportedShape,
    MULTIPOINTZ: UnsupportedShape,
    POINTM: UnsupportedShape,
    POLYLINEM: UnsupportedShape,
    POLYGONM: UnsupportedShape,
    MULTIPOINTM: UnsupportedShape,
    MULTIPATCH: UnsupportedShape,
}


def is_valid_shape_type(shapeType: int) -> bool:
    return shapeType in SHAPETYPE_LOOKUP


def is_supported_shape_type(shapeType: int) -> bool:
    """True if records of this shape type can be decoded."""
    ShapeClass = SHAPE_CLASS_FROM_SHAPETYPE.get(shapeType, UnsupportedShape)
    return ShapeClass is not UnsupportedShape


def decode_shape(
    cursor: ByteCursor,
    shapeType: int,
    recNum: int | None = None,
    oid: int | None = None,
) -> Shape:
    """Decodes the content of a record that follows its shape type.
    Raises InvalidShapeTypeError for a shape type outside the
    shapefile format, and UnsupportedShapeTypeError for one that
    cannot be decoded."""
    if not is_valid_shape_type(shapeType):
        raise InvalidShapeTypeError(shapeType, recNum)

    ShapeClass = SHAPE_CLASS_FROM_SHAPETYPE[shapeType]
    return ShapeClass.from_byte_stream(shapeType, cursor, recNum=recNum, oid=oid)
