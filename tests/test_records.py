import struct

import numpy as np
import pytest

from stlmesh.errors import RecordAlignmentError
from stlmesh.layout import RECORD_SIZE
from stlmesh.records import decode_record, iter_triangle_records, read_records


def test_decode_record_fields():
    raw = struct.pack("<12fH", 0, 0, 1, 1.5, 2.5, 3.5, -1, -2, -3, 7, 8, 9, 42)
    assert len(raw) == RECORD_SIZE

    record = decode_record(raw, 0)
    np.testing.assert_array_equal(record.normal, [0, 0, 1])
    np.testing.assert_array_equal(record.v1, [1.5, 2.5, 3.5])
    np.testing.assert_array_equal(record.v2, [-1, -2, -3])
    np.testing.assert_array_equal(record.v3, [7, 8, 9])
    assert record.attribute == 42
    assert record.v1.dtype == np.float32


def test_decode_record_ignores_host_byte_order():
    # big-endian bytes must not decode to the same value
    little = struct.pack("<f", 1.0)
    big = struct.pack(">f", 1.0)
    raw = little * 12 + b"\0\0"
    assert decode_record(raw, 0).v3[2] == 1.0
    raw_big = big * 12 + b"\0\0"
    assert decode_record(raw_big, 0).v3[2] != 1.0


def test_iter_records_is_lazy_and_ordered(pack_stl):
    tris = [((0, 0, i), (i, 0, 0), (0, i, 0), (0, 0, i)) for i in range(4)]
    records = iter_triangle_records(pack_stl(tris))

    first = next(records)
    assert first.normal[2] == 0
    rest = list(records)
    assert [r.v1[0] for r in rest] == [1, 2, 3]


def test_iter_records_empty(pack_stl):
    assert list(iter_triangle_records(pack_stl([]))) == []


def test_iter_records_standalone_misaligned(pack_stl):
    data = pack_stl([((0, 0, 1), (0, 0, 0), (1, 0, 0), (0, 1, 0))]) + b"\0" * 10
    with pytest.raises(RecordAlignmentError) as exc:
        list(iter_triangle_records(data))
    assert exc.value.start == 84
    assert exc.value.length == 144


def test_iter_records_buffer_shorter_than_start():
    with pytest.raises(RecordAlignmentError):
        next(iter_triangle_records(b"\0" * 10))


def test_read_records_views_whole_buffer(pack_stl):
    tris = [((0, 0, 1), (i, 0, 0), (0, i, 0), (0, 0, i)) for i in range(3)]
    records = read_records(pack_stl(tris, attribute=5))

    assert records.dtype.itemsize == RECORD_SIZE
    assert records.shape == (3,)
    np.testing.assert_array_equal(records["v3"][:, 2], [0, 1, 2])
    np.testing.assert_array_equal(records["attribute"], [5, 5, 5])


def test_read_records_misaligned():
    with pytest.raises(RecordAlignmentError):
        read_records(b"\0" * (84 + 49))
