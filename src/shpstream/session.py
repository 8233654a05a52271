from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from types import TracebackType
from typing import IO

from .classes import Shapes
from .constants import ERROR_MESSAGE_LIMIT
from .exceptions import ShapefileException, ShapefileReadError
from .header import FileHeader, decode_header
from .helpers import shapefile_prefix, truncate_message
from .records import RecordStream, ShapeCallback
from .shapes import Shape
from .types import BinaryFileStreamT, ShapefilePathT

logger = logging.getLogger(__name__)


class Session:
    """Reads the geometry of a shapefile from its .shp file, after
    checking the header of the matching .shx index file.

    A Session starts out empty. Each call to parse() opens both files,
    validates their headers and then decodes the .shp records in order,
    handing every shape to a callback. The files are closed again before
    parse() returns, whether it succeeded or not.

    When a parse fails the exception is raised to the caller, and its
    message is also kept, so that error() returns it until the next
    failure replaces it.

    A Session is not thread safe; give each thread its own.
    """

    CONSTITUENT_FILE_EXTS = ["shp", "shx"]
    assert all(ext.islower() for ext in CONSTITUENT_FILE_EXTS)

    def __init__(self) -> None:
        self.shp: BinaryFileStreamT | None = None
        self.shx: BinaryFileStreamT | None = None
        self._files_to_close: list[IO[bytes]] = []
        self.shapeName = "Not specified"
        self.header: FileHeader | None = None
        self.index_header: FileHeader | None = None
        self.numShapes = 0
        self._error = ""

    def __str__(self) -> str:
        info = ["shapefile Session"]
        if self.header is not None:
            info.append(
                f"    {self.numShapes} shapes read (type '{self.header.shape_type_name}')"
            )
        if self._error:
            info.append(f"    last error: {self._error}")
        return "\n".join(info)

    def __enter__(self) -> Session:
        """
        Enter phase of context manager.
        """
        return self

    def __exit__(
        self,
        exc_type: BaseException | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> bool | None:
        """
        Exit phase of context manager, close opened files.
        """
        self.close()
        return None

    def __del__(self) -> None:
        self.close()

    def close(self) -> None:
        # Close any files that the session opened (but not those given by user)
        for fileobj in self._files_to_close:
            try:
                fileobj.close()
            except OSError:
                pass
        self._files_to_close = []
        self.shp = None
        self.shx = None

    def error(self) -> str:
        """Returns the message of the most recent failure, or an empty
        string if nothing has failed yet. Only meaningful straight after
        a failed call."""
        return self._error

    def _set_error(self, msg: str) -> None:
        self._error = truncate_message(msg, ERROR_MESSAGE_LIMIT)

    def _open_constituent_file(self, shapefile_name: str, ext: str) -> IO[bytes]:
        """
        Opens a .shp or .shx file, trying the extension in lower case
        and then in upper case, and appends it to self._files_to_close.
        """
        assert ext in self.CONSTITUENT_FILE_EXTS

        path = f"{shapefile_name}.{ext}"
        try:
            fileobj = open(path, "rb")
        except OSError as e:
            try:
                fileobj = open(f"{shapefile_name}.{ext.upper()}", "rb")
            except OSError:
                raise ShapefileReadError(f"Error opening {path}: {e.strerror}") from e
        self._files_to_close.append(fileobj)
        logger.debug(f"Opened {fileobj.name}")
        return fileobj

    def _load(self, shapefile_path: ShapefilePathT) -> None:
        self.shapeName = shapefile_prefix(shapefile_path)
        self.shx = self._open_constituent_file(self.shapeName, "shx")
        self._check_index_header()
        self.shp = self._open_constituent_file(self.shapeName, "shp")

    @contextmanager
    def _parsing(self) -> Iterator[None]:
        # Forgets the previous parse, keeps the message of any failure for
        # error(), and releases the files on every way out.
        self.header = None
        self.index_header = None
        self.numShapes = 0
        try:
            yield
        except ShapefileException as e:
            self._set_error(str(e))
            raise
        except MemoryError:
            self._set_error("Out of memory")
            raise
        finally:
            self.close()

    def parse(self, shapefile_path: ShapefilePathT, callback: ShapeCallback) -> None:
        """Decodes every record of a shapefile, passing each shape to
        callback. callback returns True to continue, or False to stop
        reading early, which is not an error.

        shapefile_path may name the .shp file, the .shx file, or the
        shapefile without an extension.

        Raises ShapefileReadError, FormatError or DecodeError (all
        ShapefileExceptions) when the files cannot be read. Shapes
        delivered before the failure stay delivered.
        """
        with self._parsing():
            self._load(shapefile_path)
            self._read_records(callback)

    def parse_streams(
        self,
        shp: BinaryFileStreamT,
        shx: BinaryFileStreamT,
        callback: ShapeCallback,
    ) -> None:
        """As parse(), but reads from binary file-like objects that are
        positioned at the start of the .shp and .shx data. They are
        left open."""
        with self._parsing():
            self.shp = shp
            self.shx = shx
            self._check_index_header()
            self._read_records(callback)

    def iter_shapes(self, shapefile_path: ShapefilePathT) -> Iterator[Shape]:
        """Returns a generator of the shapes in a shapefile. Useful
        for handling large shapefiles. Stopping early (break, or
        closing the generator) closes the files.
        """
        with self._parsing():
            self._load(shapefile_path)
            records = self._record_stream()
            for shape in records:
                self.numShapes = records.numShapes
                yield shape

    def shapes(self, shapefile_path: ShapefilePathT) -> Shapes:
        """Returns all shapes in a shapefile."""
        shapes = Shapes()

        def collect(shape: Shape) -> bool:
            shapes.append(shape)
            return True

        self.parse(shapefile_path, collect)
        return shapes

    def _check_index_header(self) -> None:
        # The index header repeats the .shp header. Only its validity is
        # checked; the offsets that follow it are not read.
        if self.shx is None:
            raise ShapefileException("Session requires a .shx file (none was opened)")
        self.index_header = decode_header(self.shx)
        logger.debug(
            f"Index header ok: {self.index_header.shape_type_name}, "
            f"{self.index_header.file_length} bytes"
        )

    def _record_stream(self) -> RecordStream:
        if self.shp is None:
            raise ShapefileException("Session requires a .shp file (none was opened)")
        self.header = decode_header(self.shp)
        logger.debug(
            f"Shapefile header ok: {self.header.shape_type_name}, "
            f"{self.header.file_length} bytes"
        )
        return RecordStream(self.shp, self.header)

    def _read_records(self, callback: ShapeCallback) -> None:
        records = self._record_stream()
        try:
            records.run(callback)
        finally:
            self.numShapes = records.numShapes


def parse(shapefile_path: ShapefilePathT, callback: ShapeCallback) -> Session:
    """Parses a shapefile with a new Session, which is returned so its
    headers can be inspected. Its files are already closed."""
    session = Session()
    session.parse(shapefile_path, callback)
    return session
