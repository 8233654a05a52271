from __future__ import annotations

from .constants import NULL
from .geojson import GeoJSONGeometryCollection
from .shapes import Shape


class Shapes(list[Shape]):
    """A class to hold a list of Shape objects. Subclasses list to reuse
    all the optimizations of the builtin list.
    In addition to the list interface, this also provides the GeoJSON __geo_interface__
    to return a GeometryCollection dictionary."""

    def __repr__(self) -> str:
        return f"Shapes: {list(self)}"

    @property
    def __geo_interface__(self) -> GeoJSONGeometryCollection:
        # Null shapes have no GeoJSON geometry, so they are left out
        collection = GeoJSONGeometryCollection(
            type="GeometryCollection",
            geometries=[
                shape.__geo_interface__ for shape in self if shape.shapeType != NULL
            ],
        )
        return collection
