# stlmesh/assembler.py

from typing import Iterable, Tuple

import numpy as np

from stlmesh.errors import TriangleCountMismatch
from stlmesh.layout import RawTriangleRecord


def assemble_buffers(
    records: Iterable[RawTriangleRecord],
) -> Tuple[np.ndarray, np.ndarray, int]:
    """Expand triangle records into flat per-vertex buffers.

    Each triangle contributes v1, v2, v3 to ``vertices`` and three copies of
    its facet normal to ``normals``, in file order. Nothing is deduplicated.

    Returns
    -------
    vertices : (3K, 3) float32 np.ndarray
    normals : (3K, 3) float32 np.ndarray
    count : int
        Number of records consumed (K).
    """
    vertices = []
    normals = []
    count = 0

    for record in records:
        count += 1
        normals.extend((record.normal, record.normal, record.normal))
        vertices.extend((record.v1, record.v2, record.v3))

    if count == 0:
        empty = np.empty((0, 3), dtype=np.float32)
        return empty, empty.copy(), 0

    return (
        np.asarray(vertices, dtype=np.float32).reshape(-1, 3),
        np.asarray(normals, dtype=np.float32).reshape(-1, 3),
        count,
    )


def expand_records(records: np.ndarray) -> Tuple[np.ndarray, np.ndarray, int]:
    """Vectorized ``assemble_buffers`` over a ``RECORD_DTYPE`` array.

    The outputs are new native float32 arrays, detached from the buffer the
    records were read from.
    """
    count = records.shape[0]
    vertices = np.stack([records["v1"], records["v2"], records["v3"]], axis=1)
    vertices = vertices.reshape(-1, 3).astype(np.float32)
    normals = np.repeat(records["normal"], 3, axis=0).astype(np.float32)
    return vertices, normals, count


def reconcile_count(declared: int, actual: int) -> None:
    """Raise TriangleCountMismatch if the header count disagrees with the records read."""
    if declared != actual:
        raise TriangleCountMismatch(diff=declared - actual)
