"""
Tests for iterating the records of a .shp file.
"""

import io
import logging

import pytest

import shpstream
from _shp_helpers import header_bytes, null_record, point_record, record_bytes, shp_bytes
from shpstream import RecordStream, decode_header


def open_records(data):
    stream = io.BytesIO(data)
    header = decode_header(stream)
    return RecordStream(stream, header), stream


@pytest.mark.parametrize("count", [0, 1, 5, 40])
def test_null_records_all_delivered(count):
    """
    Assert that N null records give exactly N callbacks,
    in file order, and end DONE.
    """
    data = shp_bytes([null_record(i + 1) for i in range(count)], shpstream.NULL)
    records, stream = open_records(data)
    seen = []

    def callback(shape):
        seen.append(shape)
        return True

    assert records.state == shpstream.READY
    assert records.run(callback) == count
    assert records.state == shpstream.DONE
    assert [shape.recNum for shape in seen] == list(range(1, count + 1))
    assert [shape.oid for shape in seen] == list(range(count))
    assert all(shape.shapeType == shpstream.NULL for shape in seen)
    assert records.cursor.remaining == 0
    # whole file consumed
    assert stream.read() == b""


@pytest.mark.parametrize("k", [1, 2, 5])
def test_callback_stops_iteration(k):
    """
    Assert that returning False on the k-th shape stops
    after exactly k callbacks without reading further records.
    """
    data = shp_bytes([point_record(i + 1, i, i) for i in range(5)])
    records, stream = open_records(data)
    calls = []

    def callback(shape):
        calls.append(shape.recNum)
        return len(calls) < k

    assert records.run(callback) == k
    assert calls == list(range(1, k + 1))
    assert records.state == shpstream.DONE
    # nothing past the k-th record has been read
    assert stream.tell() == shpstream.HEADER_SIZE + k * 28


def test_falsy_return_stops():
    data = shp_bytes([null_record(1), null_record(2)], shpstream.NULL)
    records, __ = open_records(data)
    assert records.run(lambda shape: None) == 1


def test_unsupported_record_fails():
    """
    Assert that a Polygon record ends the iteration with
    an error, and no callbacks happen for it or after it.
    """
    data = shp_bytes(
        [
            point_record(1, 1.0, 1.0),
            record_bytes(2, shpstream.POLYGON, bytes(44)),
            point_record(3, 2.0, 2.0),
        ]
    )
    records, __ = open_records(data)
    calls = []

    def callback(shape):
        calls.append(shape)
        return True

    with pytest.raises(shpstream.UnsupportedShapeTypeError) as excinfo:
        records.run(callback)
    assert excinfo.value.recNum == 2
    assert len(calls) == 1
    assert records.state == shpstream.FAILED


def test_invalid_record_shape_type_fails():
    data = shp_bytes([record_bytes(1, 2, bytes(16))])
    records, __ = open_records(data)
    with pytest.raises(shpstream.InvalidShapeTypeError):
        records.run(lambda shape: True)
    assert records.state == shpstream.FAILED


def test_truncated_file_fails():
    """
    Assert that a file shorter than its header claims
    fails with a read error rather than stopping quietly.
    """
    body = point_record(1, 1.0, 1.0) + point_record(2, 2.0, 2.0)
    data = header_bytes(file_length=shpstream.HEADER_SIZE + len(body)) + body[:40]
    records, __ = open_records(data)
    calls = []

    def callback(shape):
        calls.append(shape)
        return True

    with pytest.raises(shpstream.ShapefileReadError):
        records.run(callback)
    assert len(calls) == 1
    assert records.state == shpstream.FAILED


def test_record_longer_than_file_fails():
    body = point_record(1, 1.0, 1.0, content_length=200)
    data = header_bytes(file_length=shpstream.HEADER_SIZE + len(body)) + body
    records, __ = open_records(data)
    with pytest.raises(shpstream.RecordLengthError):
        records.run(lambda shape: True)
    assert records.state == shpstream.FAILED


def test_record_negative_length_fails():
    body = point_record(1, 1.0, 1.0, content_length=-20)
    data = header_bytes(file_length=shpstream.HEADER_SIZE + len(body)) + body
    records, __ = open_records(data)
    with pytest.raises(shpstream.RecordLengthError) as excinfo:
        records.run(lambda shape: True)
    assert "content length -20" in str(excinfo.value)
    assert records.state == shpstream.FAILED


def test_callback_exception_fails():
    """
    Assert that an exception raised by the callback
    ends the stream FAILED and reaches the caller.
    """
    data = shp_bytes([point_record(i + 1, i, i) for i in range(3)])
    records, __ = open_records(data)

    def callback(shape):
        raise ValueError("bad shape")

    with pytest.raises(ValueError):
        records.run(callback)
    assert records.state == shpstream.FAILED
    assert records.numShapes == 1


def test_trailing_bytes_not_read():
    """
    Assert that iteration goes by the header's file length
    and leaves any junk after it alone.
    """
    data = shp_bytes([point_record(1, 1.0, 2.0)]) + b"12345"
    records, stream = open_records(data)
    assert records.run(lambda shape: True) == 1
    assert stream.read() == b"12345"


def test_content_length_mismatch_warns(caplog):
    data = shp_bytes([point_record(1, 1.0, 2.0, content_length=4)])
    records, __ = open_records(data)
    with caplog.at_level(logging.WARNING, logger="shpstream.records"):
        assert records.run(lambda shape: True) == 1
    assert "Record 1 declares 4 content bytes but 20 were decoded" in caplog.text


def test_iterate_as_generator():
    data = shp_bytes([point_record(i + 1, float(i), -float(i)) for i in range(3)])
    records, __ = open_records(data)
    points = [(shape.x, shape.y) for shape in records]
    assert points == [(0.0, -0.0), (1.0, -1.0), (2.0, -2.0)]
    assert records.state == shpstream.DONE


def test_generator_closed_early_is_done():
    data = shp_bytes([point_record(i + 1, 0.0, 0.0) for i in range(3)])
    records, __ = open_records(data)
    shapes = iter(records)
    next(shapes)
    assert records.state == shpstream.READING
    shapes.close()
    assert records.state == shpstream.DONE
    assert records.numShapes == 1


def test_records_read_once():
    data = shp_bytes([null_record(1)], shpstream.NULL)
    records, __ = open_records(data)
    records.run(lambda shape: True)
    with pytest.raises(shpstream.ShapefileException):
        records.run(lambda shape: True)


def test_record_header():
    cursor = shpstream.ByteCursor(io.BytesIO(point_record(12, 0.0, 0.0)))
    header = shpstream.RecordHeader.from_cursor(cursor)
    assert header.number == 12
    assert header.content_length == 20
