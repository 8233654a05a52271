from __future__ import annotations

import os
from os import PathLike
from typing import Any, overload

from .types import T

# Helpers


@overload
def fsdecode_if_pathlike(path: PathLike[Any]) -> str: ...
@overload
def fsdecode_if_pathlike(path: T) -> T: ...
def fsdecode_if_pathlike(path: Any) -> Any:
    if isinstance(path, PathLike):
        return os.fsdecode(path)  # str

    return path


def shapefile_prefix(path: str | PathLike[Any]) -> str:
    """Strips a trailing extension (.shp, .shx, .dbf or anything else)
    from a shapefile path. A path without an extension is returned
    unchanged."""
    shapeName, __ext = os.path.splitext(fsdecode_if_pathlike(path))
    return shapeName


def truncate_message(msg: str, limit: int) -> str:
    # Keeps at most limit - 1 characters
    if len(msg) < limit:
        return msg
    return msg[: limit - 1]
