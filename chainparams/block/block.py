"""
The Block classes
"""
from datetime import datetime, timezone

from chainparams.core import BLOCK, MerkleError, Serializable, SERIALIZED, get_stream, read_little_int, \
    read_stream
from chainparams.cryptography import HashType, hash_function
from chainparams.data import MerkleTree, bits_to_target, read_compact_size, write_compact_size
from chainparams.tx import Transaction

__all__ = ["BlockHeader", "Block"]

NULL_HASH = b'\x00' * BLOCK.PREV_BLOCK


class BlockHeader(Serializable):
    """
    ---------------------------------------------------------------------
    |   Name        |   data_type   |   format              |   size    |
    ---------------------------------------------------------------------
    |   Version     |   int         |   little-endian       |   4       |
    |   prev_block  |   bytes       |   natural byte order  |   32      |
    |   merkle_root |   bytes       |   natural byte order  |   32      |
    |   time        |   int         |   little-endian       |   4       |
    |   bits        |   int         |   little-endian       |   4       |
    |   nonce       |   int         |   little-endian       |   4       |
    ---------------------------------------------------------------------

    The block hash is the header's proof-of-work hash, chosen by hash_type.
    """
    __slots__ = ('version', 'prev_block', 'merkle_root', 'timestamp', 'bits', 'nonce', 'hash_type')

    def __init__(self, version: int, prev_block: bytes, merkle_root: bytes, timestamp: int, bits: int, nonce: int,
                 hash_type: HashType = HashType.X11):
        self.version = version
        self.prev_block = prev_block
        self.merkle_root = merkle_root
        self.timestamp = timestamp
        self.bits = bits
        self.nonce = nonce
        self.hash_type = hash_type
        self._freeze()

    @property
    def block_id(self) -> bytes:
        return hash_function(self.to_bytes(), self.hash_type)

    @property
    def target(self) -> int:
        return bits_to_target(self.bits)

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED, hash_type: HashType = HashType.X11):
        stream = get_stream(byte_stream)

        version = int.from_bytes(read_stream(stream, BLOCK.VERSION, "version"), "little", signed=True)
        prev_block = read_stream(stream, BLOCK.PREV_BLOCK, "prev_block")
        merkle_root = read_stream(stream, BLOCK.MERKLE_ROOT, "merkle_root")
        timestamp = read_little_int(stream, BLOCK.TIME, "time")
        bits = read_little_int(stream, BLOCK.BITS, "bits")
        nonce = read_little_int(stream, BLOCK.NONCE, "nonce")

        return cls(version, prev_block, merkle_root, timestamp, bits, nonce, hash_type)

    def to_bytes(self) -> bytes:
        parts = [
            self.version.to_bytes(BLOCK.VERSION, "little", signed=True),
            self.prev_block,
            self.merkle_root,
            self.timestamp.to_bytes(BLOCK.TIME, "little"),
            self.bits.to_bytes(BLOCK.BITS, "little"),
            self.nonce.to_bytes(BLOCK.NONCE, "little")
        ]
        return b''.join(parts)

    def to_dict(self) -> dict:
        return {
            # Hashes reverse byte order for display
            "block_hash": self.block_id[::-1].hex(),
            "version": self.version,
            "previous_block": self.prev_block[::-1].hex(),
            "merkle_root": self.merkle_root[::-1].hex(),
            "timestamp": datetime.fromtimestamp(self.timestamp, tz=timezone.utc).strftime(BLOCK.TIMESTAMP_FORMAT),
            "bits": f"{self.bits:08x}",
            "nonce": self.nonce
        }


class Block(Serializable):
    """
    ---------------------------------------------------------------------
    |                       BlockHeader                                 |
    ---------------------------------------------------------------------
    |                       Transactions                                |
    ---------------------------------------------------------------------
    |   tx_num      |   int         |   CompactSize         |   var     |
    |   txs         |   list        |   Transaction         |   var     |
    ---------------------------------------------------------------------
    The merkle root is always derived from txs; it is never stored separately.
    """
    __slots__ = ('version', 'prev_block', 'timestamp', 'bits', 'nonce', 'txs', 'merkle_tree', 'hash_type')

    def __init__(self, version: int, prev_block: bytes, timestamp: int, bits: int, nonce: int,
                 txs: list[Transaction], hash_type: HashType = HashType.X11):
        self.version = version
        self.prev_block = prev_block
        self.timestamp = timestamp
        self.bits = bits
        self.nonce = nonce
        self.txs = tuple(txs)
        self.hash_type = hash_type
        self.merkle_tree = MerkleTree([t.txid for t in self.txs])
        self._freeze()

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED, hash_type: HashType = HashType.X11):
        stream = get_stream(byte_stream)

        header = BlockHeader.from_bytes(stream, hash_type)
        txs = [Transaction.from_bytes(stream) for _ in range(read_compact_size(stream))]

        block = cls(header.version, header.prev_block, header.timestamp, header.bits, header.nonce, txs, hash_type)
        if block.merkle_root != header.merkle_root:
            raise MerkleError("Header merkle root does not commit to the block's transactions")
        return block

    @property
    def merkle_root(self) -> bytes:
        return self.merkle_tree.merkle_root

    @property
    def header(self) -> BlockHeader:
        return BlockHeader(
            version=self.version,
            prev_block=self.prev_block,
            merkle_root=self.merkle_root,
            timestamp=self.timestamp,
            bits=self.bits,
            nonce=self.nonce,
            hash_type=self.hash_type
        )

    @property
    def block_id(self) -> bytes:
        return self.header.block_id

    @property
    def is_genesis(self) -> bool:
        return self.prev_block == NULL_HASH

    def to_bytes(self) -> bytes:
        tx_parts = [write_compact_size(len(self.txs))]
        tx_parts.extend(tx.to_bytes() for tx in self.txs)
        return self.header.to_bytes() + b''.join(tx_parts)

    def to_dict(self) -> dict:
        return {
            "header": self.header.to_dict(),
            "tx_num": len(self.txs),
            "txs": [tx.to_dict() for tx in self.txs]
        }
