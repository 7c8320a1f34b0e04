# stlmesh/stl_loader.py

import logging
from pathlib import Path
from typing import Optional

from stlmesh.config import DecodeConfig
from stlmesh.decoder import DecodedMesh, decode

logger = logging.getLogger(__name__)


def read_stl_bytes(filepath) -> bytes:
    """Read the whole STL file into memory; the decoder needs all of it."""
    p = Path(filepath)
    if not p.is_file():
        raise FileNotFoundError(f"STL file not found: {p}")

    data = p.read_bytes()
    logger.debug("Read %d bytes from %s", len(data), p)
    return data


def load_stl(filepath, config: Optional[DecodeConfig] = None) -> DecodedMesh:
    """
    Load a binary STL file and return its flat vertex and normal buffers.
    """
    data = read_stl_bytes(filepath)
    decoded = decode(data, config)
    logger.debug(
        "Decoded %s: %d triangles, name=%r",
        filepath,
        decoded.triangle_count,
        decoded.name,
    )
    return decoded
