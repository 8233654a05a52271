import pytest

import shpstream
from _shp_helpers import shp_bytes, shx_bytes


@pytest.fixture
def make_shapefile(tmpdir):
    """Returns a function writing <name>.shp and <name>.shx into a
    temporary directory, returning the path without extension."""

    def _make(
        name,
        records,
        shape_type=shpstream.POINT,
        shp_data=None,
        shx_data=None,
        upper_case_exts=False,
    ):
        basename = str(tmpdir.join(name))
        if shp_data is None:
            shp_data = shp_bytes(records, shape_type)
        if shx_data is None:
            shx_data = shx_bytes(records, shape_type)
        shp_ext, shx_ext = ("SHP", "SHX") if upper_case_exts else ("shp", "shx")
        with open(f"{basename}.{shp_ext}", "wb") as f:
            f.write(shp_data)
        with open(f"{basename}.{shx_ext}", "wb") as f:
            f.write(shx_data)
        return basename

    return _make
