# stlmesh/records.py

from typing import Iterator

import numpy as np

from stlmesh.errors import RecordAlignmentError
from stlmesh.layout import DATA_OFFSET, RECORD_DTYPE, RECORD_SIZE, RawTriangleRecord


def read_records(data, start: int = DATA_OFFSET) -> np.ndarray:
    """View every triangle record from ``start`` to the end of ``data``.

    Returns a structured array with ``RECORD_DTYPE`` (fields ``normal``,
    ``v1``, ``v2``, ``v3``, ``attribute``). The array is a view over
    ``data``; no bytes are copied.

    Raises
    ------
    RecordAlignmentError
        If the bytes after ``start`` are not a whole number of records.
    """
    length = len(data)
    if length < start or (length - start) % RECORD_SIZE != 0:
        raise RecordAlignmentError(length=length, start=start)
    return np.frombuffer(data, dtype=RECORD_DTYPE, offset=start)


def _as_triangle(row) -> RawTriangleRecord:
    return RawTriangleRecord(
        normal=row["normal"].astype(np.float32),
        v1=row["v1"].astype(np.float32),
        v2=row["v2"].astype(np.float32),
        v3=row["v3"].astype(np.float32),
        attribute=int(row["attribute"]),
    )


def decode_record(data, offset: int) -> RawTriangleRecord:
    """Decode the single 50-byte record starting at ``offset``."""
    row = np.frombuffer(data, dtype=RECORD_DTYPE, count=1, offset=offset)[0]
    return _as_triangle(row)


def iter_triangle_records(data, start: int = DATA_OFFSET) -> Iterator[RawTriangleRecord]:
    """Lazily yield every triangle record from ``start`` to the end of ``data``.

    Raises RecordAlignmentError on the first ``next()``, before any record
    is produced.
    """
    for row in read_records(data, start):
        yield _as_triangle(row)
