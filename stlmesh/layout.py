# stlmesh/layout.py
"""Byte layout of a binary STL file.

    offset   size  field
    0        80    header text (ASCII, usually a model name)
    80       4     triangle count, uint32 little-endian
    84+50k   12    normal, 3 x float32 little-endian
    +12      36    v1, v2, v3, 3 x 3 x float32 little-endian
    +48      2     attribute byte count, uint16 (ignored)
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np

HEADER_SIZE = 80
COUNT_OFFSET = 80
COUNT_SIZE = 4
DATA_OFFSET = HEADER_SIZE + COUNT_SIZE  # 84
RECORD_SIZE = 50

# STL mandates little-endian regardless of the host.
FLOAT32_LE = np.dtype("<f4")
UINT16_LE = np.dtype("<u2")

# (field name, offset inside the record, dtype, component count)
RECORD_FIELDS: Tuple[Tuple[str, int, np.dtype, int], ...] = (
    ("normal", 0, FLOAT32_LE, 3),
    ("v1", 12, FLOAT32_LE, 3),
    ("v2", 24, FLOAT32_LE, 3),
    ("v3", 36, FLOAT32_LE, 3),
    ("attribute", 48, UINT16_LE, 1),
)


def _record_dtype() -> np.dtype:
    formats = [dtype if count == 1 else (dtype, (count,)) for _, _, dtype, count in RECORD_FIELDS]
    return np.dtype({
        "names": [name for name, _, _, _ in RECORD_FIELDS],
        "formats": formats,
        "offsets": [offset for _, offset, _, _ in RECORD_FIELDS],
        "itemsize": RECORD_SIZE,
    })


# Packed 50-byte record; no host padding or byte order involved.
RECORD_DTYPE = _record_dtype()


def expected_file_size(triangle_count: int) -> int:
    """Total byte length of a binary STL holding ``triangle_count`` records."""
    return DATA_OFFSET + RECORD_SIZE * triangle_count


@dataclass(frozen=True)
class RawTriangleRecord:
    """One decoded 50-byte triangle record."""

    normal: np.ndarray
    v1: np.ndarray
    v2: np.ndarray
    v3: np.ndarray
    attribute: int = 0
