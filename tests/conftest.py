"""Shared helpers for building binary STL buffers in tests."""

import struct

import pytest

RECORD = struct.Struct("<12fH")


def _pack_stl(triangles, name=b"test", count=None, attribute=0):
    """triangles: iterable of (normal, v1, v2, v3), each a 3-sequence."""
    triangles = list(triangles)
    data = bytearray(name.ljust(80, b"\0")[:80])
    data.extend(struct.pack("<I", len(triangles) if count is None else count))
    for normal, v1, v2, v3 in triangles:
        data.extend(RECORD.pack(*normal, *v1, *v2, *v3, attribute))
    return bytes(data)


@pytest.fixture
def pack_stl():
    return _pack_stl


@pytest.fixture
def single_triangle_stl():
    return _pack_stl([((0, 0, 1), (0, 0, 0), (1, 0, 0), (0, 1, 0))], name=b"unit")
