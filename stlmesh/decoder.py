# stlmesh/decoder.py
"""Binary STL decode entry point."""

from dataclasses import dataclass
from typing import Optional

import numpy as np

from stlmesh.assembler import expand_records, reconcile_count
from stlmesh.config import DecodeConfig
from stlmesh.header import read_header
from stlmesh.layout import DATA_OFFSET
from stlmesh.records import read_records
from stlmesh.transform import apply_transform, build_transform


@dataclass(eq=False)
class DecodedMesh:
    """Flat, non-indexed triangle mesh plus the transform to place it.

    vertices : (3N, 3) float32, v1, v2, v3 of each triangle in file order
    normals  : (3N, 3) float32, each facet normal repeated three times
    transform : (4, 4) float, rotation then unit scale
    name : header text, or None if the header was not ASCII
    """

    vertices: np.ndarray
    normals: np.ndarray
    transform: np.ndarray
    name: Optional[str] = None

    @property
    def triangle_count(self) -> int:
        return self.vertices.shape[0] // 3

    # Rendering layers call it the primitive count.
    primitive_count = triangle_count

    @property
    def faces(self) -> np.ndarray:
        """Implicit sequential index buffer, (N, 3) int."""
        return np.arange(self.vertices.shape[0], dtype=np.int64).reshape(-1, 3)

    def transformed_vertices(self) -> np.ndarray:
        return apply_transform(self.vertices, self.transform)


def decode(data, config: Optional[DecodeConfig] = None) -> DecodedMesh:
    """Decode a complete binary STL buffer.

    Parameters
    ----------
    data : bytes, bytearray, memoryview or mmap
        Entire file contents.
    config : DecodeConfig, optional
        Orientation and unit corrections; defaults to ``DecodeConfig()``.

    Raises
    ------
    FileTooSmall, UnexpectedFileSize, TriangleCountMismatch
        See ``stlmesh.errors``. No partial result is returned.
    """
    if config is None:
        config = DecodeConfig()

    header = read_header(data)
    vertices, normals, counted = expand_records(read_records(data, DATA_OFFSET))
    reconcile_count(header.triangle_count, counted)

    return DecodedMesh(
        vertices=vertices,
        normals=normals,
        transform=build_transform(config),
        name=header.name,
    )
