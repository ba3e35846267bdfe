"""
The classes for legacy (pre-segwit) transactions, the only kind a genesis block carries
"""
from chainparams.core import Serializable, SERIALIZED, get_stream, read_little_int, read_stream, TX
from chainparams.cryptography import hash256
from chainparams.data import read_compact_size, write_compact_size

__all__ = ["TxInput", "TxOutput", "Transaction"]

NULL_TXID = b'\x00' * TX.TXID


class TxInput(Serializable):
    """
    =============================================================================
    |   name            |   data type   |   format              |   byte size   |
    =============================================================================
    |   txid            |   bytes       |   natural byte order  |   32          |
    |   vout            |   int         |   little-endian       |   4           |
    |   scriptsig_size  |               |   compactSize         |   var         |
    |   scriptsig       |   bytes       |   script bytes        |   var         |
    |   sequence        |   int         |   little-endian       |   4           |
    =============================================================================
    """
    __slots__ = ("txid", "vout", "scriptsig", "sequence")

    def __init__(self, txid: bytes, vout: int, scriptsig: bytes, sequence: int = TX.FINAL_SEQUENCE):
        self.txid = txid
        self.vout = vout
        self.scriptsig = scriptsig
        self.sequence = sequence
        self._freeze()

    @classmethod
    def coinbase(cls, scriptsig: bytes) -> "TxInput":
        """An input spending the null outpoint"""
        return cls(NULL_TXID, TX.NULL_VOUT, scriptsig, TX.FINAL_SEQUENCE)

    @property
    def outpoint(self) -> bytes:
        return self.txid + self.vout.to_bytes(TX.VOUT, "little")

    @property
    def is_null_outpoint(self) -> bool:
        return self.txid == NULL_TXID and self.vout == TX.NULL_VOUT

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED):
        stream = get_stream(byte_stream)

        txid = read_stream(stream, TX.TXID, "txid")
        vout = read_little_int(stream, TX.VOUT, "vout")
        scriptsig_size = read_compact_size(stream)
        scriptsig = read_stream(stream, scriptsig_size, "scriptsig")
        sequence = read_little_int(stream, TX.SEQUENCE, "sequence")

        return cls(txid, vout, scriptsig, sequence)

    def to_bytes(self) -> bytes:
        """
        txid || vout || scriptsig_size || scriptsig || sequence
        """
        parts = [
            self.txid,
            self.vout.to_bytes(TX.VOUT, "little"),
            write_compact_size(len(self.scriptsig)),
            self.scriptsig,
            self.sequence.to_bytes(TX.SEQUENCE, "little")
        ]
        return b''.join(parts)

    def to_dict(self) -> dict:
        return {
            "txid": self.txid[::-1].hex(),
            "vout": self.vout,
            "scriptsig": self.scriptsig.hex(),
            "sequence": self.sequence
        }


class TxOutput(Serializable):
    """
    -----------------------------------------------------------------
    |   Field               |   Byte Size   |   Format              |
    -----------------------------------------------------------------
    |   Amount              |   8           |   little-endian       |
    |   scriptpubkey_size   |   var         |   CompactSize         |
    |   scriptpubkey        |   var         |   Script              |
    -----------------------------------------------------------------
    """
    __slots__ = ("amount", "scriptpubkey")

    def __init__(self, amount: int, scriptpubkey: bytes):
        self.amount = amount
        self.scriptpubkey = scriptpubkey
        self._freeze()

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED):
        stream = get_stream(byte_stream)

        amount = read_little_int(stream, TX.AMOUNT, "amount")
        scriptpubkey_size = read_compact_size(stream)
        scriptpubkey = read_stream(stream, scriptpubkey_size, "scriptpubkey")

        return cls(amount, scriptpubkey)

    def to_bytes(self) -> bytes:
        """
        amount || scriptpubkey_size || scriptpubkey
        """
        return (self.amount.to_bytes(TX.AMOUNT, "little") + write_compact_size(len(self.scriptpubkey)) +
                self.scriptpubkey)

    def to_dict(self) -> dict:
        return {
            "amount": self.amount,
            "scriptpubkey": self.scriptpubkey.hex()
        }


class Transaction(Serializable):
    """
    -------------------------------------------------------------
    |   Field           |   Byte Size   |   Format              |
    -------------------------------------------------------------
    |   Version         |   4           |   little-endian       |
    |   input_count     |   var         |   CompactSize         |
    |   inputs          |   var         |   TxInput             |
    |   output_count    |   var         |   CompactSize         |
    |   outputs         |   var         |   TxOutput            |
    |   locktime        |   4           |   little-endian       |
    -------------------------------------------------------------
    """
    __slots__ = ("version", "inputs", "outputs", "locktime")

    def __init__(self, inputs: list[TxInput] = None, outputs: list[TxOutput] = None, locktime: int = 0,
                 version: int = 1):
        self.inputs = tuple(inputs or ())
        self.outputs = tuple(outputs or ())
        self.locktime = locktime
        self.version = version
        self._freeze()

    @property
    def txid(self) -> bytes:
        """HASH256 of the serialized tx, internal byte order"""
        return hash256(self.to_bytes())

    @property
    def is_coinbase(self) -> bool:
        return len(self.inputs) == 1 and self.inputs[0].is_null_outpoint

    @property
    def value_out(self) -> int:
        return sum(o.amount for o in self.outputs)

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED):
        stream = get_stream(byte_stream)

        version = int.from_bytes(read_stream(stream, TX.VERSION, "version"), "little", signed=True)
        inputs = [TxInput.from_bytes(stream) for _ in range(read_compact_size(stream))]
        outputs = [TxOutput.from_bytes(stream) for _ in range(read_compact_size(stream))]
        locktime = read_little_int(stream, TX.LOCKTIME, "locktime")

        return cls(inputs, outputs, locktime, version)

    def to_bytes(self) -> bytes:
        parts = [
            self.version.to_bytes(TX.VERSION, "little", signed=True),
            write_compact_size(len(self.inputs)),
            *(i.to_bytes() for i in self.inputs),
            write_compact_size(len(self.outputs)),
            *(o.to_bytes() for o in self.outputs),
            self.locktime.to_bytes(TX.LOCKTIME, "little")
        ]
        return b''.join(parts)

    def to_dict(self) -> dict:
        return {
            "txid": self.txid[::-1].hex(),  # Reverse byte order for display
            "version": self.version,
            "inputs": [i.to_dict() for i in self.inputs],
            "outputs": [o.to_dict() for o in self.outputs],
            "locktime": self.locktime,
            "is_coinbase": self.is_coinbase
        }
