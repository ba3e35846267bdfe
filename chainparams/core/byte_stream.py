"""
Methods for deserializing byte streams
"""
from io import BytesIO
from typing import Union, Optional, Literal

from .exceptions import ReadError

__all__ = ["SERIALIZED", "get_stream", "read_stream", "read_little_int"]

SERIALIZED = Union[bytes, BytesIO]
BYTEORDER = Literal['big', 'little']


def get_stream(byte_stream: SERIALIZED) -> BytesIO:
    """Convert bytes or BytesIO to BytesIO stream"""
    if isinstance(byte_stream, (bytes, bytearray)):
        return BytesIO(byte_stream)
    if isinstance(byte_stream, BytesIO):
        return byte_stream
    raise TypeError(f"Expected bytes or BytesIO but received: {type(byte_stream)}")


def read_stream(stream: BytesIO, length: int, data_type: Optional[str] = None) -> bytes:
    """Read exact number of bytes from stream with error checking"""
    data = stream.read(length)
    if len(data) != length:
        suffix = f" Data type: {data_type}" if data_type else ""
        raise ReadError(f"Error reading stream. Expected {length} bytes, received {len(data)}.{suffix}")
    return data


def _read_int(stream: BytesIO, length: int, byteorder: BYTEORDER, data_type: Optional[str] = None) -> int:
    return int.from_bytes(read_stream(stream, length, data_type), byteorder)


def read_little_int(stream: BytesIO, length: int, data_type: Optional[str] = None) -> int:
    """Read little-endian integer from stream"""
    return _read_int(stream, length, "little", data_type)
