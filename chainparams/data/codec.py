"""
Methods for encoding and decoding

    - hex decoding with error reporting
    - Base58 and Base58Check
    - uint256 literals: big-endian hex as written in the network tables, held in internal (little-endian)
      byte order like every hash the primitives produce
"""
from chainparams.core import DATA, DataEncodingError
from chainparams.cryptography import hash256

__all__ = ["BASE58_ALPHABET", "parse_hex", "encode_base58", "decode_base58", "encode_base58check",
           "decode_base58check", "uint256_from_hex", "uint256_to_hex", "uint256_to_int"]

# --- HEX --- #

def parse_hex(hex_string: str) -> bytes:
    """
    Decode a hex string, accepting an optional 0x prefix
    """
    digits = hex_string[2:] if hex_string[:2].lower() == "0x" else hex_string
    try:
        return bytes.fromhex(digits)
    except ValueError as e:
        raise DataEncodingError(f"Invalid hex string {hex_string!r}") from e


# --- BASE58 ENCODING --- #
BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_BASE58_INDEX = {char: index for index, char in enumerate(BASE58_ALPHABET)}


def encode_base58(data: bytes) -> str:
    n = int.from_bytes(data, "big")
    encoded = ""
    while n > 0:
        n, remainder = divmod(n, 58)
        encoded = BASE58_ALPHABET[remainder] + encoded

    # Each leading zero byte is written as a '1'
    leading_zeros = len(data) - len(data.lstrip(b'\x00'))
    return "1" * leading_zeros + encoded


def decode_base58(encoded: str) -> bytes:
    total = 0
    for char in encoded:
        if char not in _BASE58_INDEX:
            raise DataEncodingError(f"Invalid Base58 character {char!r}")
        total = total * 58 + _BASE58_INDEX[char]

    body = total.to_bytes((total.bit_length() + 7) // 8, "big")
    leading_ones = len(encoded) - len(encoded.lstrip("1"))
    return b'\x00' * leading_ones + body


def encode_base58check(data: bytes) -> str:
    """
    data || first 4 bytes of HASH256(data), Base58 encoded
    """
    return encode_base58(data + hash256(data)[:DATA.CHECKSUM])


def decode_base58check(encoded: str) -> bytes:
    """
    Returns the payload without its checksum. Raises DataEncodingError if the checksum fails.
    """
    raw = decode_base58(encoded)
    if len(raw) < DATA.CHECKSUM:
        raise DataEncodingError("Base58Check data shorter than its checksum")

    payload, checksum = raw[:-DATA.CHECKSUM], raw[-DATA.CHECKSUM:]
    if hash256(payload)[:DATA.CHECKSUM] != checksum:
        raise DataEncodingError("Decoded checksum does not equal given checksum")
    return payload


# --- UINT256 --- #

def uint256_from_hex(hex_string: str) -> bytes:
    """
    Parse a big-endian uint256 literal ("0x0000...ef607", "0x0") into 32 bytes of internal byte order.
    Short literals are zero-extended on the left.
    """
    digits = hex_string.strip()
    if digits[:2].lower() == "0x":
        digits = digits[2:]
    if not digits or len(digits) > 2 * DATA.HASH:
        raise DataEncodingError(f"uint256 literal {hex_string!r} must have 1 to 64 hex digits")

    value = parse_hex(digits.rjust(2 * DATA.HASH, "0"))
    return value[::-1]


def uint256_to_hex(value: bytes) -> str:
    """Display form (big-endian) of an internal-order uint256"""
    if len(value) != DATA.HASH:
        raise DataEncodingError(f"uint256 must be {DATA.HASH} bytes; received {len(value)}")
    return value[::-1].hex()


def uint256_to_int(value: bytes) -> int:
    return int.from_bytes(value, "little")
