"""
Methods for writing and reading compact size data
"""
from chainparams.core import DATA, ReadError, SERIALIZED, WriteError, get_stream, read_little_int

__all__ = ["read_compact_size", "write_compact_size"]

# prefix byte -> width of the little-endian integer that follows
_PREFIX_WIDTHS = {0xfd: 2, 0xfe: 4, 0xff: 8}


def read_compact_size(byte_stream: SERIALIZED) -> int:
    stream = get_stream(byte_stream)
    prefix = read_little_int(stream, 1, "CompactSize prefix")

    if prefix <= 0xfc:
        return prefix

    width = _PREFIX_WIDTHS[prefix]
    value = read_little_int(stream, width, f"CompactSize: {hex(prefix)}")

    # Non-canonical encodings are rejected
    if value < (0xfd if width == 2 else 1 << (8 * width // 2)):
        raise ReadError(f"Non-canonical CompactSize encoding for {value}")
    return value


def write_compact_size(num: int) -> bytes:
    """
    Given an integer we return its CompactSize encoding
    """
    if num < 0 or num > DATA.MAX_COMPACTSIZE:
        raise WriteError("Given number out of bounds for CompactSize encoding")

    if num <= 0xfc:
        return num.to_bytes(1, "little")
    for prefix, width in _PREFIX_WIDTHS.items():
        if num < 1 << (8 * width):
            return prefix.to_bytes(1, "little") + num.to_bytes(width, "little")
    raise WriteError(f"Unable to encode {num} as CompactSize")
