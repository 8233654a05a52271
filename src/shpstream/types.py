from os import PathLike
from typing import IO, Any, Optional, Protocol, TypeVar, Union

## Custom type variables

T = TypeVar("T")
Point2D = tuple[float, float]

PointT = Point2D
PointsT = list[PointT]

BBox = tuple[float, float, float, float]
MBox = tuple[Optional[float], Optional[float]]
ZBox = tuple[float, float]


class ReadableBinStream(Protocol):
    def read(self, size: int = -1) -> bytes: ...


# File name or path of a shapefile, with or without its extension.
ShapefilePathT = Union[str, PathLike[Any]]
BinaryFileStreamT = Union[IO[bytes], ReadableBinStream]
