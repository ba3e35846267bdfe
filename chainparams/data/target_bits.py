"""
Methods for converting between bits and target.
Bits is the 4-byte compact representation of the 32-byte target:

    | exponent (1 byte) | sign bit + mantissa (23 bits) |

target = mantissa * 256^(exponent - 3)
"""
from chainparams.core import DATA, TargetBitsError

__all__ = ["decode_compact", "bits_to_target", "target_to_bits", "target_to_hex"]

_SIGN_BIT = 0x00800000
_MANTISSA_MASK = 0x007fffff
MAX_TARGET = (1 << 256) - 1


def decode_compact(bits: int) -> tuple[int, bool, bool]:
    """
    Returns (target, negative, overflow) for the given compact bits, mirroring Bitcoin Core's
    SetCompact. Use bits_to_target() when only valid targets are acceptable.
    """
    if not 0 <= bits <= 0xffffffff:
        raise TargetBitsError(f"Compact bits {bits} not a 32-bit value")

    exponent = bits >> 24
    mantissa = bits & _MANTISSA_MASK

    if exponent <= 3:
        target = mantissa >> (8 * (3 - exponent))
    else:
        target = mantissa << (8 * (exponent - 3))

    negative = mantissa != 0 and (bits & _SIGN_BIT) != 0
    overflow = mantissa != 0 and (
            exponent > 34 or
            (mantissa > 0xff and exponent > 33) or
            (mantissa > 0xffff and exponent > 32)
    )
    return target, negative, overflow


def bits_to_target(bits: int) -> int:
    target, negative, overflow = decode_compact(bits)
    if negative:
        raise TargetBitsError(f"Compact bits {bits:#010x} encode a negative target")
    if overflow or target > MAX_TARGET:
        raise TargetBitsError(f"Compact bits {bits:#010x} overflow 256 bits")
    if target == 0:
        raise TargetBitsError(f"Compact bits {bits:#010x} encode a zero target")
    return target


def target_to_bits(target: int) -> int:
    if not 0 <= target <= MAX_TARGET:
        raise TargetBitsError("Given target not in 256-bit range")

    size = (target.bit_length() + 7) // 8
    if size <= 3:
        mantissa = target << (8 * (3 - size))
    else:
        mantissa = target >> (8 * (size - 3))

    # The sign bit is set: shift one byte into the exponent
    if mantissa & _SIGN_BIT:
        mantissa >>= 8
        size += 1

    return (size << 24) | mantissa


def target_to_hex(target: int) -> str:
    """Big-endian display form of a target, as it appears in the literal tables"""
    return target.to_bytes(DATA.TARGET, "big").hex()
