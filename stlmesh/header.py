# stlmesh/header.py

from dataclasses import dataclass
from typing import Optional

from stlmesh.errors import FileTooSmall, UnexpectedFileSize
from stlmesh.layout import (
    COUNT_OFFSET,
    COUNT_SIZE,
    DATA_OFFSET,
    HEADER_SIZE,
    expected_file_size,
)


@dataclass(frozen=True)
class HeaderInfo:
    name: Optional[str]
    triangle_count: int
    expected_size: int


def decode_name(header: bytes) -> Optional[str]:
    """Best-effort ASCII decode of the 80-byte header; None if it is not ASCII."""
    try:
        text = bytes(header).decode("ascii")
    except UnicodeDecodeError:
        return None
    return text.rstrip("\x00 \t\r\n")


def read_header(data) -> HeaderInfo:
    """Validate the buffer size against the declared triangle count.

    Parameters
    ----------
    data : bytes-like
        Complete contents of a binary STL file.

    Returns
    -------
    HeaderInfo

    Raises
    ------
    FileTooSmall
        If the buffer cannot hold the 80-byte header and the 4-byte count.
    UnexpectedFileSize
        If the length differs from ``84 + 50 * count``.
    """
    size = len(data)
    if size < DATA_OFFSET:
        raise FileTooSmall(size)

    triangle_count = int.from_bytes(
        data[COUNT_OFFSET:COUNT_OFFSET + COUNT_SIZE], byteorder="little", signed=False
    )
    expected = expected_file_size(triangle_count)
    if size != expected:
        raise UnexpectedFileSize(expected=expected, actual=size)

    return HeaderInfo(
        name=decode_name(data[:HEADER_SIZE]),
        triangle_count=triangle_count,
        expected_size=expected,
    )
