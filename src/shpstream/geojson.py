from __future__ import annotations

from typing import Literal, TypedDict

from .constants import NULL, POINT, SHAPETYPE_LOOKUP
from .exceptions import GeoJSON_Error
from .types import PointsT, PointT


class GeoJSONPoint(TypedDict):
    type: Literal["Point"]
    # RFC7946 only requires: "A position is an array of numbers.  There MUST be two or more
    # elements.  "
    coordinates: PointT | tuple[()]


class GeoJSONGeometryCollection(TypedDict):
    type: Literal["GeometryCollection"]
    geometries: list[GeoJSONPoint]


class GeoJSONSerializableShape:
    shapeType: int
    points: PointsT

    @property
    def __geo_interface__(self) -> GeoJSONPoint:
        if self.shapeType == POINT:
            if len(self.points) == 0:
                # the shape has no coordinate information, i.e. is 'empty'
                # the geojson spec does not define a proper null-geometry type
                # however, it does allow geometry types with 'empty' coordinates to be interpreted as null-geometries
                return {"type": "Point", "coordinates": ()}

            return {"type": "Point", "coordinates": self.points[0]}

        raise GeoJSON_Error(
            f'Shape type "{SHAPETYPE_LOOKUP[self.shapeType]}" cannot be represented as GeoJSON.'
        )

    @property
    def wkt(self) -> str:
        """The shape as Well Known Text."""
        if self.shapeType == NULL:
            return "GEOMETRYCOLLECTION EMPTY"

        if self.shapeType == POINT:
            if len(self.points) == 0:
                return "POINT EMPTY"
            x, y = self.points[0]
            return f"POINT ({x!r} {y!r})"

        raise GeoJSON_Error(
            f'Shape type "{SHAPETYPE_LOOKUP[self.shapeType]}" cannot be represented as WKT.'
        )
