"""
The protocol formats and constants
"""
from typing import Final

__all__ = ["DATA", "TX", "BLOCK", "SCRIPT", "COIN", "OPCODES"]

COIN: Final[int] = 100_000_000


class DATA:
    """
    Constants used in data manipulation
    """
    MAX_COMPACTSIZE: Final[int] = 0xffffffffffffffff
    BITS: Final[int] = 4
    TARGET: Final[int] = 32
    HASH: Final[int] = 32
    CHECKSUM: Final[int] = 4


class TX:
    """
    Transaction byte sizes
    """
    TXID: Final[int] = 32
    VOUT: Final[int] = 4
    SEQUENCE: Final[int] = 4
    AMOUNT: Final[int] = 8
    VERSION: Final[int] = 4
    LOCKTIME: Final[int] = 4
    NULL_VOUT: Final[int] = 0xffffffff
    FINAL_SEQUENCE: Final[int] = 0xffffffff


class BLOCK:
    """
    Block header byte sizes
    """
    VERSION: Final[int] = 4
    PREV_BLOCK: Final[int] = 32
    MERKLE_ROOT: Final[int] = 32
    TIME: Final[int] = 4
    BITS: Final[int] = 4
    NONCE: Final[int] = 4
    HEADER: Final[int] = 80
    TIMESTAMP_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"


class SCRIPT:
    """
    Constants in use in the Script
    """
    MAX_SCRIPT_ELEMENT_SIZE: Final[int] = 520
    # Height-like marker pushed first by every genesis coinbase
    GENESIS_MARKER: Final[int] = 486604799
    GENESIS_EXTRA_NONCE: Final[int] = 4


# --- OPCODES DICT FOR ASM --- #

OPCODES = {
    0x00: "OP_0",
    0x4c: "OP_PUSHDATA1",
    0x4d: "OP_PUSHDATA2",
    0x4e: "OP_PUSHDATA4",
    0x4f: "OP_1NEGATE",
    **{0x50 + n: f"OP_{n}" for n in range(1, 17)},
    0x6a: "OP_RETURN",
    0x76: "OP_DUP",
    0x87: "OP_EQUAL",
    0x88: "OP_EQUALVERIFY",
    0xa9: "OP_HASH160",
    0xac: "OP_CHECKSIG",
}
