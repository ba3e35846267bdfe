"""
Shortcuts for the hash functions used by the chain. Each function returns the bytes digest.

Block header hashes use the network's proof-of-work hash, selected by HashType.
"""
import hashlib
from enum import Enum
from typing import Callable

from ripemd.ripemd160 import ripemd160 as _ripemd160

__all__ = ["HashType", "hash_function", "sha256", "hash256", "ripemd160", "hash160", "x11"]


# --- SHA --- #
def sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


# --- RIPEMD --- #
def ripemd160(data: bytes) -> bytes:
    return _ripemd160(data)


# --- CHAIN HASH FUNCTIONS --- #

def hash256(data: bytes) -> bytes:
    """SHA256(SHA256(data))"""
    return sha256(sha256(data))


def hash160(data: bytes) -> bytes:
    """RIPEMD160(SHA256(data))"""
    return ripemd160(sha256(data))


def x11(data: bytes) -> bytes:
    """
    The X11 chained hash used for Dash-family proof-of-work. Like hash256, the digest is returned in
    internal byte order; reverse it for display.
    """
    import x11_hash
    return x11_hash.getPoWHash(data)


class HashType(Enum):
    HASH256 = "hash256"
    X11 = "x11"


def hash_function(data: bytes, function_type: HashType) -> bytes:
    functions: dict[HashType, Callable[[bytes], bytes]] = {
        HashType.HASH256: hash256,
        HashType.X11: x11,
    }

    func = functions.get(function_type)
    if not func:
        raise ValueError(f"Hash function '{function_type}' not found.")

    return func(data)
